"""Input/output front-ends for the route planner.

This subpackage holds the batch file reader and writer. The interactive
menu lives in ``ecoroute.cli``.
"""

from .batch import BatchMode, BatchProcessor, BatchRequest, parse_batch

__all__ = ["BatchMode", "BatchProcessor", "BatchRequest", "parse_batch"]
