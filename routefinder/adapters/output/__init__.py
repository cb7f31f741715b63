"""Output adapters - Implementations of the result writer port.

Available implementations:
- CSVRouteWriter: Appends query results to a delimited file
"""

from .csv_writer import CSVRouteWriter

__all__ = ["CSVRouteWriter"]
