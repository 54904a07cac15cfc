"""Adapters layer - Concrete implementations of ports.

Adapters connect the application core to data sources:
- graph: Network and location directory loading from CSV files
"""

from .graph import CSVGraphRepository

__all__ = ["CSVGraphRepository"]
