"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Loads the route graph from a delimited file
"""

from .csv_repository import CSVGraphRepository

__all__ = ["CSVGraphRepository"]
