"""Dijkstra Route Solver adapter.

Wraps graph.dijkstra.shortest_path and enriches the result with the
resolved Location records and the total auxiliary cost of the edges
taken.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Tuple

from ...domain.models import Location, RouteResult
from ...graph.dijkstra import shortest_path
from ...graph.store import GraphStore


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm."""

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: GraphStore, source: str, destination: str) -> RouteResult:
        """Find the shortest path between two locations.

        Returns:
            RouteResult with path, distance, cost and location details, or
            RouteResult.not_found() when there is no path.

        Raises:
            ValidationError: If a location name is empty.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source, "destination": destination},
        )

        result = shortest_path(graph, source, destination)

        if result.is_empty:
            self._logger.info(
                "No route found",
                extra={"source": source, "destination": destination},
            )
            return result

        locations: Tuple[Location, ...] = tuple(
            location
            for location in (graph.get_location(n) for n in result.path)
            if location is not None
        )

        total_cost = 0.0
        for a, b in zip(result.path, result.path[1:]):
            edge = graph.edge_between(a, b)
            if edge is not None:
                total_cost += edge.cost

        self._logger.info(
            "Route found",
            extra={
                "source": source,
                "destination": destination,
                "stops": result.num_stops,
                "distance": result.total_distance,
            },
        )

        return replace(result, total_cost=total_cost, locations=locations)
