"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the route-finding core to the file system:
- Route table storage (CSV files)
- Query result output (CSV files)
"""
