from types import SimpleNamespace

from geopy.exc import GeocoderTimedOut

from route_mapper.adapters.cache import InMemoryCache
from route_mapper.adapters.geocoding import NominatimGeocoderAdapter
from route_mapper.adapters.geocoding.nominatim_adapter import settlement_name
from route_mapper.config import GeocodingConfig
from route_mapper.domain.models import GeoLocation


def fake_location(lat, lon, address):
    return SimpleNamespace(latitude=lat, longitude=lon, raw={"address": address})


class Recorder:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def __call__(self, query, **kwargs):
        self.calls.append((query, kwargs))
        if self.error is not None:
            raise self.error
        return self.result


def make_adapter(geocode_fn=None, reverse_fn=None):
    return NominatimGeocoderAdapter(
        config=GeocodingConfig(language="en"),
        cache=InMemoryCache(name="test"),
        _geocode_fn=geocode_fn or Recorder(),
        _reverse_fn=reverse_fn or Recorder(),
    )


def test_settlement_name_prefers_city_over_town():
    assert settlement_name({"town": "Lonavala", "city": "Pune"}) == "Pune"
    assert settlement_name({"village": "Khandala"}) == "Khandala"
    assert settlement_name({"state": "Maharashtra"}) is None


def test_geocode_builds_city():
    fn = Recorder(
        fake_location(
            19.076, 72.8777,
            {"city": "Mumbai", "country": "India", "state": "Maharashtra"},
        )
    )
    adapter = make_adapter(geocode_fn=fn)

    city = adapter.geocode("  mumbai ")

    assert city.name == "Mumbai"
    assert city.country == "India"
    assert city.admin_area == "Maharashtra"
    assert city.location == GeoLocation(19.076, 72.8777)
    query, kwargs = fn.calls[0]
    assert query == "mumbai"
    assert kwargs == {"exactly_one": True, "language": "en", "addressdetails": True}


def test_geocode_name_falls_back_to_query():
    fn = Recorder(fake_location(10.0, 20.0, {"country": "Nowhere"}))

    assert make_adapter(geocode_fn=fn).geocode("Some Place").name == "Some Place"


def test_geocode_results_are_cached():
    fn = Recorder(fake_location(18.52, 73.85, {"city": "Pune"}))
    adapter = make_adapter(geocode_fn=fn)

    first = adapter.geocode("Pune")
    second = adapter.geocode("PUNE")

    assert first == second
    assert len(fn.calls) == 1


def test_geocode_misses_are_cached():
    fn = Recorder(None)
    adapter = make_adapter(geocode_fn=fn)

    assert adapter.geocode("Atlantis") is None
    assert adapter.geocode("Atlantis") is None
    assert len(fn.calls) == 1


def test_blank_query_skips_service():
    fn = Recorder()
    adapter = make_adapter(geocode_fn=fn)

    assert adapter.geocode("") is None
    assert adapter.geocode("   ") is None
    assert fn.calls == []


def test_service_error_returns_none_and_is_not_cached():
    fn = Recorder(error=GeocoderTimedOut("slow"))
    adapter = make_adapter(geocode_fn=fn)

    assert adapter.geocode("Pune") is None
    assert adapter.geocode("Pune") is None
    assert len(fn.calls) == 2


def test_reverse_geocode_names_settlement():
    fn = Recorder(fake_location(18.75, 73.4, {"town": "Lonavala", "country": "India"}))
    adapter = make_adapter(reverse_fn=fn)
    point = GeoLocation(18.75, 73.4)

    city = adapter.reverse_geocode(point)

    assert city.name == "Lonavala"
    assert city.location == point
    assert fn.calls[0][0] == (18.75, 73.4)


def test_reverse_geocode_outside_settlement_is_none():
    fn = Recorder(fake_location(18.7, 73.3, {"state": "Maharashtra"}))

    assert make_adapter(reverse_fn=fn).reverse_geocode(GeoLocation(18.7, 73.3)) is None


def test_reverse_geocode_no_result_or_error_is_none():
    point = GeoLocation(0.0, 0.0)

    assert make_adapter(reverse_fn=Recorder(None)).reverse_geocode(point) is None
    failing = Recorder(error=GeocoderTimedOut("slow"))
    assert make_adapter(reverse_fn=failing).reverse_geocode(point) is None
