"""
Metro Graph Model

Immutable adjacency snapshot of the station network.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, List, Mapping, Optional, Tuple

from .station import StationRecord


_NO_NEIGHBORS: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class MetroGraph:
    """
    Undirected, unweighted graph of station codes.

    ``adjacency`` maps every station code in the catalog (isolated stations
    included, with an empty neighbor set) to the codes it connects to
    directly. ``station_by_code`` resolves codes back to records. The graph
    is rebuilt from scratch whenever the catalog changes and is never
    mutated after construction.
    """

    adjacency: Mapping[str, FrozenSet[str]] = field(default_factory=dict)
    station_by_code: Mapping[str, StationRecord] = field(default_factory=dict)

    def neighbors(self, code: str) -> FrozenSet[str]:
        """Get the codes directly connected to code (empty if unknown)."""
        return self.adjacency.get(code, _NO_NEIGHBORS)

    def station(self, code: str) -> Optional[StationRecord]:
        return self.station_by_code.get(code)

    def has_edge(self, a: str, b: str) -> bool:
        return b in self.neighbors(a)

    def edges(self) -> List[Tuple[str, str]]:
        """Get each undirected edge once, as a sorted (low, high) pair."""
        pairs = set()
        for code, neighbors in self.adjacency.items():
            for neighbor in neighbors:
                pairs.add((code, neighbor) if code < neighbor else (neighbor, code))
        return sorted(pairs)

    @property
    def edge_count(self) -> int:
        return len(self.edges())

    @property
    def is_empty(self) -> bool:
        return not self.adjacency

    def is_symmetric(self) -> bool:
        """Check that every edge is registered in both directions."""
        return all(
            code in self.neighbors(neighbor)
            for code, neighbors in self.adjacency.items()
            for neighbor in neighbors
        )

    def __contains__(self, code: object) -> bool:
        return code in self.adjacency

    def __len__(self) -> int:
        return len(self.adjacency)

    def __iter__(self) -> Iterator[str]:
        return iter(self.adjacency)

    def __repr__(self) -> str:
        return f"MetroGraph(stations={len(self)}, edges={self.edge_count})"
