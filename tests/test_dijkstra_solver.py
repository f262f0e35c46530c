from pathlib import Path

import pytest

from route_mapper.adapters.graph import CSVGraphRepository, DijkstraRouteSolver
from route_mapper.config import GraphConfig
from route_mapper.domain.errors import ValidationError
from route_mapper.graph.store import GraphStore

BUNDLED_DATA = Path(__file__).resolve().parents[1] / "route_mapper" / "data"


@pytest.fixture(scope="module")
def bundled() -> GraphStore:
    return CSVGraphRepository(GraphConfig(data_dir=BUNDLED_DATA)).load()


def test_solver_resolves_locations_and_cost(bundled):
    route = DijkstraRouteSolver().solve(bundled, "Delhi", "Hyderabad")

    assert route.path == ("Delhi", "Agra", "Bhopal", "Nagpur", "Hyderabad")
    assert route.total_distance == 1597.0
    assert route.total_cost == 15970.0
    assert [loc.name for loc in route.locations] == list(route.path)


def test_solver_picks_close_alternative(bundled):
    # Via Bangalore is 1186, via Hyderabad 1187.
    route = DijkstraRouteSolver().solve(bundled, "Pune", "Chennai")

    assert route.path == ("Pune", "Bangalore", "Chennai")
    assert route.total_distance == 1186.0


def test_solver_symmetry(bundled):
    solver = DijkstraRouteSolver()
    forward = solver.solve(bundled, "Delhi", "Mumbai")
    backward = solver.solve(bundled, "Mumbai", "Delhi")

    assert forward.path == ("Delhi", "Jaipur", "Ahmedabad", "Mumbai")
    assert backward.path == tuple(reversed(forward.path))
    assert forward.total_distance == backward.total_distance == 1480.0


def test_solver_returns_not_found(bundled):
    route = DijkstraRouteSolver().solve(bundled, "Delhi", "Atlantis")

    assert route.is_empty
    assert route.locations == ()
    assert route.total_cost == 0.0


def test_solver_cost_follows_cheapest_parallel_edge():
    graph = GraphStore()
    graph.add_location("A", 0.0, 0.0)
    graph.add_location("B", 0.0, 1.0)
    graph.add_edge("A", "B", 4.0, 1.0)
    graph.add_edge("A", "B", 2.0, 9.0)

    route = DijkstraRouteSolver().solve(graph, "A", "B")

    assert route.total_distance == 2.0
    assert route.total_cost == 9.0


def test_single_stop_route(bundled):
    route = DijkstraRouteSolver().solve(bundled, "Pune", "Pune")

    assert route.path == ("Pune",)
    assert route.total_distance == 0.0
    assert route.total_cost == 0.0
    assert route.locations[0].name == "Pune"


def test_solver_propagates_validation_error(bundled):
    with pytest.raises(ValidationError):
        DijkstraRouteSolver().solve(bundled, "", "Pune")
