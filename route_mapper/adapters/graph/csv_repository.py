"""CSV Graph Repository adapter.

Loads the bundled city network from two CSV files:

- cities.csv: ``name,longitude,latitude``
- routes.csv: ``source,destination,distance,cost``

The resulting GraphStore is frozen and cached for the lifetime of the
repository.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import Location
from ...graph.store import EdgeRecord, GraphStore, LocationRecord


def _rows(path: Path) -> Iterator[dict]:
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for row in reader:
            yield {k.strip(): (v or "").strip() for k, v in row.items() if k}


def read_location_records(path: Path) -> List[LocationRecord]:
    """Parse cities.csv into (name, longitude, latitude) tuples."""
    records: List[LocationRecord] = []
    for row in _rows(path):
        name = row.get("name", "")
        if not name:
            continue
        records.append((name, float(row["longitude"]), float(row["latitude"])))
    return records


def read_edge_records(path: Path) -> List[EdgeRecord]:
    """Parse routes.csv into (source, destination, distance, cost) tuples."""
    records: List[EdgeRecord] = []
    for row in _rows(path):
        source = row.get("source", "")
        destination = row.get("destination", "")
        if not source or not destination:
            continue
        cost = row.get("cost") or "0"
        records.append((source, destination, float(row["distance"]), float(cost)))
    return records


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    Attributes:
        config: Graph configuration (data directory, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[GraphStore] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> GraphStore:
        """Load the bundled graph from CSV files.

        Returns:
            A frozen GraphStore.

        Raises:
            GraphError: If a file cannot be read or a row cannot be parsed.
            GraphIntegrityError: If a route has a negative distance.
        """
        if self._graph is not None:
            return self._graph

        cities_path = self.config.cities_path
        routes_path = self.config.routes_path
        self._logger.debug(
            "Loading graph",
            extra={"cities_path": str(cities_path), "routes_path": str(routes_path)},
        )

        try:
            locations = read_location_records(cities_path)
        except (OSError, KeyError, ValueError) as e:
            raise GraphError(
                f"Failed to load cities: {e}", file_path=str(cities_path), cause=e
            )

        try:
            edges = read_edge_records(routes_path)
        except (OSError, KeyError, ValueError) as e:
            raise GraphError(
                f"Failed to load routes: {e}", file_path=str(routes_path), cause=e
            )

        try:
            graph = GraphStore.from_records(locations, edges)
        except ValueError as e:
            # Out-of-range coordinates
            raise GraphError(
                f"Invalid city record: {e}", file_path=str(cities_path), cause=e
            )

        for edge in graph.dangling_edges():
            self._logger.warning(
                "Route references unknown city, ignoring it",
                extra={"source": edge.source, "destination": edge.destination},
            )

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"nodes": len(graph), "edges": len(graph.edges())},
        )
        return graph

    def get_location(self, name: str) -> Optional[Location]:
        return self.load().get_location(name)

    def list_locations(self) -> Sequence[Location]:
        return self.load().locations()

    def clear_cache(self) -> None:
        """Drop the cached graph so the next load() rereads the files."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
