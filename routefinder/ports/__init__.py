"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the route-finding core and the file
adapters. They enable dependency injection and make the system testable.
"""

from .graph import GraphRepositoryPort, RouteWriterPort

__all__ = [
    "GraphRepositoryPort",
    "RouteWriterPort",
]
