"""
Pytest configuration and shared fixtures.

Provides GeoJSON shapes, report samples and fake HTTP transports
shared by the civicgeo test suite.
"""

import json
from typing import Any, Callable, Dict

import httpx
import pytest

from civicgeo.config.settings import reset_settings
from civicgeo.models.geo_models import ReportLocation


SQUARE_RING = [[0, 0], [0, 10], [10, 10], [10, 0], [0, 0]]
SECOND_SQUARE_RING = [[20, 20], [20, 30], [30, 30], [30, 20], [20, 20]]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from CIVICGEO_* variables in the environment."""
    for name in (
        "CIVICGEO_BOUNDARY_URL",
        "CIVICGEO_MUNICIPALITY_NAME",
        "CIVICGEO_PERMIT_ON_MISSING_BOUNDARY",
        "CIVICGEO_BOUNDARY_CACHE_TTL",
        "CIVICGEO_DEFAULT_SEARCH_RADIUS_M",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def square_polygon() -> Dict[str, Any]:
    """Polygon whose outer ring is the 10x10 square at the origin."""
    return {"type": "Polygon", "coordinates": [SQUARE_RING]}


@pytest.fixture
def two_squares() -> Dict[str, Any]:
    """MultiPolygon with two disjoint squares."""
    return {"type": "MultiPolygon", "coordinates": [[SQUARE_RING], [SECOND_SQUARE_RING]]}


@pytest.fixture
def turin_feature() -> Dict[str, Any]:
    """Simplified Torino feature around the city center."""
    return {
        "type": "Feature",
        "properties": {"name": "Torino", "op_id": "001272"},
        "geometry": {
            "type": "Polygon",
            "coordinates": [[
                [7.58, 45.00], [7.58, 45.14], [7.77, 45.14], [7.77, 45.00], [7.58, 45.00],
            ]],
        },
    }


@pytest.fixture
def province_document(turin_feature) -> Dict[str, Any]:
    """FeatureCollection with Torino and two neighbouring municipalities."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"name": "Moncalieri"},
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [[[7.65, 44.95], [7.65, 45.00], [7.72, 45.00], [7.65, 44.95]]],
                },
            },
            turin_feature,
            {
                "type": "Feature",
                "properties": {"name": "Collegno"},
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [[[7.53, 45.06], [7.53, 45.10], [7.58, 45.10], [7.53, 45.06]]],
                },
            },
        ],
    }


@pytest.fixture
def make_client() -> Callable[..., httpx.AsyncClient]:
    """Build an AsyncClient answering every request with a canned response."""

    def _make(status_code: int = 200, payload: Any = None, text: str = None, calls: list = None):
        def handler(request: httpx.Request) -> httpx.Response:
            if calls is not None:
                calls.append(request)
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def sample_reports():
    """Reports around Piazza Castello, Torino."""
    return [
        ReportLocation(
            id=1, latitude=45.0711, longitude=7.6858,
            address="Piazza Castello 1, Torino", title="Broken streetlight",
        ),
        ReportLocation(
            id=2, latitude=45.0703, longitude=7.6869,
            address="Via Roma 10, Torino", title="Pothole",
        ),
        ReportLocation(
            id=3, latitude=45.0622, longitude=7.6784,
            address="Corso Vittorio Emanuele II 58, Torino", title="Overflowing bin",
        ),
        ReportLocation(
            id=4, latitude=45.1100, longitude=7.6400,
            address=None, title="Graffiti",
        ),
    ]
