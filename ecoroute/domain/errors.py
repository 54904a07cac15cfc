"""Typed domain errors for the eco route planner.

Routing outcomes such as "no route" are plain values returned by the
routing core. The errors below cover the layers around it: data loading,
location lookup, batch parsing and configuration.

All errors inherit from EcoRouteError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class EcoRouteError(Exception):
    """Base error for the route planner domain.

    All domain-specific errors inherit from this class.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(EcoRouteError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class LocationNotFoundError(EcoRouteError):
    """A location id or code is not known to the location directory.

    Attributes:
        location_id: The numeric id that was looked up, if any
        location_code: The code that was looked up, if any
    """

    location_id: Optional[int] = None
    location_code: str = ""


@dataclass
class BatchError(EcoRouteError):
    """A batch file could not be read, parsed or written.

    Attributes:
        line_number: 1-based line of the offending input, 0 if not tied to a line
        line: The raw offending line
    """

    line_number: int = 0
    line: str = ""


@dataclass
class ConfigurationError(EcoRouteError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
