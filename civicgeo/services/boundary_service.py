"""
Municipal boundary resolution.

Fetches a GeoJSON FeatureCollection of municipal limits and selects the
Feature of the target municipality. Every failure (network, parse, missing
feature) is logged and turned into ``None``; callers treat ``None`` as
"boundary unavailable".
"""

import asyncio
import logging
import time
from typing import Any, Dict, List, Optional

import httpx

from civicgeo.config.settings import get_settings
from civicgeo.models.geo_models import BoundaryFailure
from civicgeo.utils.geojson_utils import extract_polygons

logger = logging.getLogger(__name__)

Feature = Dict[str, Any]


def _log_unavailable(failure: BoundaryFailure, target_name: str, detail: str) -> None:
    logger.warning(f"Boundary for '{target_name}' unavailable ({failure.value}): {detail}")


def find_feature_by_name(document: Any, target_name: str) -> Optional[Feature]:
    """
    Find the feature whose ``properties.name`` matches ``target_name``.

    Comparison is case-insensitive on trimmed strings. Features without a
    string name are skipped.

    Args:
        document: Parsed GeoJSON FeatureCollection
        target_name: Municipality name, e.g. "Torino"

    Returns:
        The matching feature dict, or None
    """
    if not isinstance(document, dict) or not isinstance(document.get("features"), list):
        _log_unavailable(BoundaryFailure.MALFORMED, target_name, "document has no feature list")
        return None

    wanted = target_name.strip().lower()
    features: List[Any] = document["features"]

    for feature in features:
        if not isinstance(feature, dict):
            continue
        properties = feature.get("properties") or {}
        name = properties.get("name") if isinstance(properties, dict) else None
        if isinstance(name, str) and name.strip().lower() == wanted:
            return feature

    _log_unavailable(
        BoundaryFailure.NOT_FOUND, target_name, f"no match among {len(features)} features"
    )
    return None


async def fetch_boundary(
    url: str,
    target_name: str,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[Feature]:
    """
    Download the boundary dataset and return the target municipality feature.

    A single GET is made, without retries. Never raises: every failure is
    logged with its cause and reported as None.

    Args:
        url: GeoJSON dataset URL
        target_name: Municipality name to match
        client: Optional HTTP client (a new one is created when omitted)

    Returns:
        GeoJSON Feature dict or None
    """
    logger.info(f"Fetching boundary for '{target_name}' from {url}")

    try:
        if client is None:
            async with httpx.AsyncClient() as own_client:
                response = await own_client.get(url)
        else:
            response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        _log_unavailable(
            BoundaryFailure.NETWORK, target_name, f"HTTP status {e.response.status_code}"
        )
        return None
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        _log_unavailable(BoundaryFailure.NETWORK, target_name, f"{e.__class__.__name__}: {e}")
        return None

    try:
        document = response.json()
    except ValueError as e:
        _log_unavailable(BoundaryFailure.PARSE, target_name, str(e))
        return None

    feature = find_feature_by_name(document, target_name)
    if feature is not None:
        logger.info(
            f"Resolved boundary for '{target_name}' with {len(extract_polygons(feature))} polygon(s)"
        )
    return feature


class BoundaryStore:
    """
    Caller-side cache for the resolved municipal boundary.

    The boundary is fetched on first use and kept for ``ttl_seconds``.
    A missing boundary (None) is cached too, so geofencing stays
    consistently disabled until the next refresh.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        municipality_name: Optional[str] = None,
        ttl_seconds: Optional[int] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        self.url = url or settings.boundary_url
        self.municipality_name = municipality_name or settings.municipality_name
        self.ttl_seconds = settings.boundary_cache_ttl if ttl_seconds is None else ttl_seconds
        self._client = client
        self._boundary: Optional[Feature] = None
        self._fetched_at: Optional[float] = None
        self._lock = asyncio.Lock()
        self._stats = {"fetches": 0, "hits": 0}

    @property
    def is_loaded(self) -> bool:
        """Whether a fetch result (possibly None) is currently cached."""
        if self._fetched_at is None:
            return False
        return (time.monotonic() - self._fetched_at) < self.ttl_seconds

    async def get(self) -> Optional[Feature]:
        """Return the cached boundary, fetching it when missing or expired."""
        async with self._lock:
            if self.is_loaded:
                self._stats["hits"] += 1
                return self._boundary

            self._stats["fetches"] += 1
            self._boundary = await fetch_boundary(
                self.url, self.municipality_name, client=self._client
            )
            self._fetched_at = time.monotonic()
            return self._boundary

    async def invalidate(self) -> None:
        """Drop the cached result so the next get() fetches again.

        Waits for an in-flight fetch, whose result is then discarded.
        """
        async with self._lock:
            self._boundary = None
            self._fetched_at = None
        logger.debug(f"Boundary cache for '{self.municipality_name}' invalidated")

    def get_stats(self) -> Dict[str, int]:
        """Return fetch/hit counters."""
        return dict(self._stats)
