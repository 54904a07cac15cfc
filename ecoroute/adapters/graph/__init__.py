"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Loads the network and the location directory from CSV files
"""

from .csv_repository import CSVGraphRepository, clean_code

__all__ = ["CSVGraphRepository", "clean_code"]
