"""Shortest-path computation using Dijkstra's algorithm.

The heap holds immutable (distance, sequence, name) entries. A location
relaxed twice is pushed twice and the stale entry is skipped when popped.
The sequence counter makes extraction among equal distances follow
discovery order, and relaxation uses a strict comparison, so the first
update wins ties and results are deterministic.
"""

import heapq
import itertools
import math
from typing import Dict, List, Set, Tuple

from ..domain.errors import ValidationError
from ..domain.models import RouteResult
from .store import GraphStore


def _require_name(value: object, argument: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"{argument} must be a non-empty location name, got {value!r}",
            argument=argument,
        )
    return value


def shortest_path(graph: GraphStore, source: str, destination: str) -> RouteResult:
    """Compute the shortest path between two locations.

    Parameters
    ----------
    graph:
        Graph store holding the locations and edges.
    source:
        Name of the departure location.
    destination:
        Name of the arrival location.

    Returns
    -------
    RouteResult
        The path from ``source`` to ``destination`` (inclusive) and its
        total distance, or ``RouteResult.not_found()`` when either name is
        unknown or the destination is unreachable.

    Raises
    ------
    ValidationError
        If either name is empty or not a string.
    """
    _require_name(source, "source")
    _require_name(destination, "destination")

    if source not in graph or destination not in graph:
        return RouteResult.not_found()

    if source == destination:
        return RouteResult(path=(source,), total_distance=0.0)

    distances: Dict[str, float] = {name: math.inf for name in graph.location_names()}
    previous: Dict[str, str] = {}
    distances[source] = 0.0

    counter = itertools.count()
    heap: List[Tuple[float, int, str]] = [(0.0, next(counter), source)]
    visited: Set[str] = set()

    while heap:
        current_distance, _, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)

        if u == destination:
            break

        for v, weight in graph.neighbors(u):
            if v in visited:
                continue
            new_distance = current_distance + weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, next(counter), v))

    if destination not in previous:
        return RouteResult.not_found()

    path: List[str] = [destination]
    current = destination
    while current != source:
        current = previous[current]
        path.append(current)

    path.reverse()
    return RouteResult(path=tuple(path), total_distance=distances[destination])
