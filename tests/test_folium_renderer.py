import pytest

from route_mapper.adapters.rendering import FoliumMapRenderer
from route_mapper.adapters.rendering import folium_adapter
from route_mapper.adapters.rendering.folium_adapter import route_summary_html
from route_mapper.config import MapConfig
from route_mapper.domain.errors import RenderingError
from route_mapper.domain.models import City, DrivingRoute, GeoLocation, Location

from .conftest import MUMBAI, PUNE, make_geometry


@pytest.fixture
def renderer() -> FoliumMapRenderer:
    return FoliumMapRenderer(MapConfig(zoom_start=5))


@pytest.fixture
def driving_route() -> DrivingRoute:
    lonavala = City(name="Lonavala", location=GeoLocation(18.75, 73.40), country="India")
    return DrivingRoute(
        source=MUMBAI,
        destination=PUNE,
        geometry=make_geometry(50),
        distance_km=150.0,
        duration_hours=2.5,
        cost=1500.0,
        intermediate_cities=(lonavala,),
    )


def test_render_bundled_route(renderer, tmp_path):
    locations = [
        Location("Delhi", GeoLocation(28.6139, 77.2090)),
        Location("Jaipur", GeoLocation(26.9124, 75.7873)),
        Location("Ahmedabad", GeoLocation(23.0225, 72.5714)),
    ]
    output = tmp_path / "maps" / "route.html"

    saved = renderer.render(locations, output)

    assert saved == output
    content = output.read_text(encoding="utf-8")
    assert "1. Delhi" in content
    assert "3. Ahmedabad" in content


def test_render_single_stop(renderer, tmp_path):
    output = tmp_path / "one.html"

    renderer.render([Location("Pune", GeoLocation(18.5204, 73.8567))], output)

    assert "1. Pune" in output.read_text(encoding="utf-8")


def test_render_empty_route_fails(renderer, tmp_path):
    with pytest.raises(RenderingError) as exc_info:
        renderer.render([], tmp_path / "empty.html")

    assert exc_info.value.renderer_type == "folium"


def test_render_driving_route(renderer, tmp_path, driving_route):
    output = tmp_path / "driving.html"

    renderer.render_driving(driving_route, output)

    content = output.read_text(encoding="utf-8")
    assert "Start: Mumbai" in content
    assert "Destination: Pune" in content
    assert "Lonavala" in content
    assert "150.00 km" in content
    assert "Route Info" in content


def test_route_summary_html(driving_route):
    summary = route_summary_html(driving_route)

    assert "150.00 km" in summary
    assert "2.50 hr" in summary
    assert "1500.00" in summary


def test_unwritable_output_raises_rendering_error(renderer, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    output = blocker / "route.html"

    with pytest.raises(RenderingError) as exc_info:
        renderer.render([Location("Pune", GeoLocation(18.5204, 73.8567))], output)

    assert exc_info.value.output_path == str(output)
    assert isinstance(exc_info.value.cause, OSError)


def test_marker_labels_are_escaped(renderer, tmp_path, monkeypatch):
    markers = []

    class RecordingMarker(folium_adapter.folium.Marker):
        def __init__(self, *args, **kwargs):
            markers.append(kwargs)
            super().__init__(*args, **kwargs)

    monkeypatch.setattr(folium_adapter.folium, "Marker", RecordingMarker)

    renderer.render(
        [Location("Fort <Aguada> & Co", GeoLocation(15.49, 73.77))],
        tmp_path / "escaped.html",
    )

    assert markers[0]["popup"] == "1. Fort &lt;Aguada&gt; &amp; Co"
    assert markers[0]["tooltip"] == "Fort &lt;Aguada&gt; &amp; Co"
