"""In-memory graph of named locations and undirected weighted edges.

The store is built once (usually by CSVGraphRepository), frozen, and then
only read by the shortest-path engine. Queries never mutate it, so a
frozen store can be shared by concurrent queries without locking.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple

from ..domain.errors import GraphIntegrityError
from ..domain.models import Edge, GeoLocation, Location

logger = logging.getLogger(__name__)

LocationRecord = Tuple[str, float, float]
EdgeRecord = Tuple[str, str, float, float]


class GraphStore:
    """Named locations plus the list of edges connecting them.

    Edges are not deduplicated: parallel edges between the same pair are
    all offered to the search. An edge may reference a name that has no
    location; such an endpoint is ignored by neighbors().
    """

    def __init__(self) -> None:
        self._locations: Dict[str, Location] = {}
        self._edges: List[Edge] = []
        self._adjacency: Dict[str, List[Edge]] = {}
        self._frozen = False

    @classmethod
    def from_records(
        cls,
        locations: Iterable[LocationRecord],
        edges: Iterable[EdgeRecord],
        freeze: bool = True,
    ) -> GraphStore:
        """Build a store from (name, lng, lat) and (src, dest, distance, cost) tuples."""
        graph = cls()
        for name, lng, lat in locations:
            graph.add_location(name, lng, lat)
        for src, dest, distance, cost in edges:
            graph.add_edge(src, dest, distance, cost)
        if freeze:
            graph.freeze()
        return graph

    def add_location(self, name: str, lng: float, lat: float) -> Location:
        """Insert or overwrite a location. Last write wins."""
        self._check_mutable()
        if name in self._locations:
            logger.debug("Overwriting location", extra={"location": name})
        location = Location(
            name=name,
            location=GeoLocation(latitude=float(lat), longitude=float(lng)),
        )
        self._locations[name] = location
        return location

    def add_edge(
        self, src_name: str, dest_name: str, distance: float, cost: float = 0.0
    ) -> Edge:
        """Append an undirected edge.

        Endpoints are not checked against the known locations here.

        Raises:
            GraphIntegrityError: If distance is negative or NaN.
        """
        self._check_mutable()
        distance = float(distance)
        if math.isnan(distance) or distance < 0:
            raise GraphIntegrityError(
                f"Edge {src_name} - {dest_name} has invalid distance {distance}",
                source=src_name,
                destination=dest_name,
            )
        edge = Edge(
            source=src_name,
            destination=dest_name,
            distance=distance,
            cost=float(cost),
        )
        self._edges.append(edge)
        self._adjacency.setdefault(src_name, []).append(edge)
        if dest_name != src_name:
            self._adjacency.setdefault(dest_name, []).append(edge)
        return edge

    def freeze(self) -> None:
        """Make the store read-only."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def location_names(self) -> FrozenSet[str]:
        return frozenset(self._locations)

    def get_location(self, name: str) -> Optional[Location]:
        return self._locations.get(name)

    def locations(self) -> List[Location]:
        return list(self._locations.values())

    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    def neighbors(self, name: str) -> Iterator[Tuple[str, float]]:
        """Yield (neighbor_name, distance) for every edge touching name.

        Both directions of an edge are walked. Neighbors that are not
        known locations are skipped. Only the edges touching name are
        inspected, in insertion order.
        """
        for edge in self._adjacency.get(name, ()):
            other = edge.other(name)
            if other is None or other not in self._locations:
                continue
            yield other, edge.distance

    def edge_between(self, a: str, b: str) -> Optional[Edge]:
        """Return the shortest edge joining a and b (first one on ties)."""
        best: Optional[Edge] = None
        for edge in self._adjacency.get(a, ()):
            if edge.connects(a, b) and (best is None or edge.distance < best.distance):
                best = edge
        return best

    def dangling_edges(self) -> List[Edge]:
        """Edges with at least one endpoint that is not a known location."""
        return [
            edge
            for edge in self._edges
            if edge.source not in self._locations
            or edge.destination not in self._locations
        ]

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphIntegrityError("Graph store is frozen")

    def __contains__(self, name: object) -> bool:
        return name in self._locations

    def __len__(self) -> int:
        return len(self._locations)

    def __repr__(self) -> str:
        return (
            f"GraphStore(locations={len(self._locations)}, "
            f"edges={len(self._edges)}, frozen={self._frozen})"
        )
