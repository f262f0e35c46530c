"""Graph store and path-finding for the bundled city network.

This subpackage holds the in-memory graph of locations and routes and
the Dijkstra search that runs on top of it.
"""

from .dijkstra import shortest_path
from .store import GraphStore

__all__ = ["GraphStore", "shortest_path"]
