"""Top-level package for route-mapper.

Plans a route between two named cities, either as a shortest path over a
small bundled city graph or as a real driving route fetched from a
routing service, and renders it as an interactive HTML map.
"""

from .graph import GraphStore, shortest_path

__all__ = ["GraphStore", "shortest_path"]
