"""Graph ports - Abstractions for network loading and location lookup.

These protocols define the contracts between the routing core, which
only knows location codes, and the data sources that know numeric ids,
names and parking availability.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, FrozenSet, Optional, Protocol

if TYPE_CHECKING:
    from ..graph.network import Graph


class GraphRepositoryPort(Protocol):
    """Port for loading the road network.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for loading and caching the
    network from persistent storage.
    """

    def load(self) -> Graph:
        """Load the road network.

        Returns:
            The graph keyed by location code.
        """
        ...


class LocationDirectoryPort(Protocol):
    """Port for location metadata.

    Translates between the numeric ids used by people and data files and
    the codes used by the routing core, and tells which locations offer
    parking.
    """

    def code_for_id(self, location_id: int) -> Optional[str]:
        """Return the code of the location with this id, or None."""
        ...

    def id_for_code(self, code: str) -> Optional[int]:
        """Return the id of the location with this code, or None."""
        ...

    def parking_codes(self) -> FrozenSet[str]:
        """Codes of every location that has parking."""
        ...
