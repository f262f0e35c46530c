"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for loading the bundled city
network and computing shortest paths over it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Location, RouteResult
    from ..graph.store import GraphStore


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/csv_repository.py
    """

    def load(self) -> GraphStore:
        """Load the bundled graph (cached after the first call)."""
        ...

    def get_location(self, name: str) -> Optional[Location]:
        """Get location details by name, or None if unknown."""
        ...

    def list_locations(self) -> Sequence[Location]:
        """List all locations of the graph."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, graph: GraphStore, source: str, destination: str) -> RouteResult:
        """Find the shortest path between two locations.

        Returns:
            RouteResult with the path, or RouteResult.not_found().
        """
        ...
