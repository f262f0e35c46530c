import json
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError as SettingsError

from route_mapper.config import (
    AppConfig,
    MapConfig,
    ObservabilityConfig,
    RoutingConfig,
    get_config,
)
from route_mapper.logging_setup import JsonFormatter, configure_logging


def test_defaults():
    config = get_config()

    assert config.routing.base_url == "https://router.project-osrm.org"
    assert config.routing.cost_per_km == 10.0
    assert config.map.open_browser is True
    assert config.graph.cities_path.name == "cities.csv"
    assert get_config() is config


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("RMAP_ROUTING_BASE_URL", "http://localhost:5000/")
    monkeypatch.setenv("RMAP_ROUTING_COST_PER_KM", "2.5")
    monkeypatch.setenv("RMAP_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("RMAP_MAP_OPEN_BROWSER", "false")

    config = get_config()

    assert config.routing.base_url == "http://localhost:5000"
    assert config.routing.cost_per_km == 2.5
    assert config.graph.routes_path == tmp_path / "routes.csv"
    assert config.map.open_browser is False


def test_sampling_step_must_be_positive():
    with pytest.raises(SettingsError):
        RoutingConfig(min_sample_step=0)


def test_map_output_path(tmp_path):
    config = AppConfig(output_dir=tmp_path, map=MapConfig(output_file="trip.html"))

    assert config.map_output_path == tmp_path / "trip.html"


def test_json_formatter_includes_extras():
    record = logging.LogRecord(
        "route_mapper.test", logging.INFO, __file__, 1, "Route planned", None, None
    )
    record.distance_km = 150.0

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "Route planned"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "route_mapper.test"
    assert payload["distance_km"] == 150.0


def test_configure_logging_replaces_its_handler():
    configure_logging(ObservabilityConfig(level="debug"))
    handler = configure_logging(ObservabilityConfig(structured=True, level="warning"))

    root = logging.getLogger()
    named = [h for h in root.handlers if h.get_name() == "route_mapper"]
    assert named == [handler]
    assert isinstance(handler.formatter, JsonFormatter)
    assert root.level == logging.WARNING


def test_bundled_data_ships_with_package():
    assert Path(get_config().graph.cities_path).is_file()
    assert Path(get_config().graph.routes_path).is_file()
