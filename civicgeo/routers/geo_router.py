"""
Geo router for report geofencing and search helpers.

Exposes the municipal boundary check used before report submission,
distance and address helpers, and geographic report filters.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from civicgeo.config.settings import get_settings
from civicgeo.models.geo_models import (
    AddressCheckResponse,
    BoundaryStatus,
    DistanceResponse,
    GeoLocation,
    LocationCheck,
    NearbyReportsRequest,
    ReportDistance,
    ReportLocation,
    StreetReportsRequest,
)
from civicgeo.services.boundary_service import BoundaryStore
from civicgeo.services.containment_service import check_report_location
from civicgeo.services.report_filter_service import filter_reports_near, filter_reports_on_street
from civicgeo.utils.address_utils import has_house_number, is_on_street
from civicgeo.utils.geo_utils import calculate_distance_meters
from civicgeo.utils.geojson_utils import extract_polygons

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/geo", tags=["geo"])

_store: Optional[BoundaryStore] = None


def get_boundary_store() -> BoundaryStore:
    """Shared boundary store, created on first request."""
    global _store
    if _store is None:
        _store = BoundaryStore()
    return _store


@router.get("/boundary", response_model=BoundaryStatus)
async def boundary_status(store: BoundaryStore = Depends(get_boundary_store)) -> BoundaryStatus:
    """Report whether the municipal boundary is available."""
    boundary = await store.get()
    return BoundaryStatus(
        municipality=store.municipality_name,
        available=boundary is not None,
        polygons=len(extract_polygons(boundary)),
        permit_on_missing_boundary=get_settings().permit_on_missing_boundary,
    )


@router.post("/boundary/refresh", response_model=BoundaryStatus)
async def refresh_boundary(store: BoundaryStore = Depends(get_boundary_store)) -> BoundaryStatus:
    """Drop the cached boundary and fetch it again."""
    await store.invalidate()
    return await boundary_status(store)


@router.get("/contains", response_model=LocationCheck)
async def contains(
    latitude: float = Query(..., description="Report latitude"),
    longitude: float = Query(..., description="Report longitude"),
    store: BoundaryStore = Depends(get_boundary_store),
) -> LocationCheck:
    """
    Check whether a report location is inside the municipality.

    When the boundary cannot be loaded the configured fail-open policy decides.
    """
    boundary = await store.get()
    return check_report_location(latitude, longitude, boundary)


@router.get("/distance", response_model=DistanceResponse)
async def distance(
    lat1: float = Query(..., ge=-90, le=90),
    lon1: float = Query(..., ge=-180, le=180),
    lat2: float = Query(..., ge=-90, le=90),
    lon2: float = Query(..., ge=-180, le=180),
) -> DistanceResponse:
    """Great-circle distance in meters between two coordinates."""
    return DistanceResponse(
        origin=GeoLocation(latitude=lat1, longitude=lon1),
        destination=GeoLocation(latitude=lat2, longitude=lon2),
        distance_m=calculate_distance_meters(lat1, lon1, lat2, lon2),
    )


@router.get("/address", response_model=AddressCheckResponse)
async def address_check(
    address: str = Query(..., description="Display address, e.g. from Nominatim"),
    street: Optional[str] = Query(None, description="Street name to match"),
) -> AddressCheckResponse:
    """Apply the house-number and street heuristics to an address."""
    return AddressCheckResponse(
        address=address,
        has_house_number=has_house_number(address),
        street_query=street,
        is_on_street=is_on_street(address, street) if street is not None else None,
    )


@router.post("/reports/nearby", response_model=List[ReportDistance])
async def nearby_reports(request: NearbyReportsRequest) -> List[ReportDistance]:
    """Reports within a radius of a point, nearest first."""
    radius_m = request.radius_m or get_settings().default_search_radius_m
    return filter_reports_near(request.reports, request.latitude, request.longitude, radius_m)


@router.post("/reports/on-street", response_model=List[ReportLocation])
async def reports_on_street(request: StreetReportsRequest) -> List[ReportLocation]:
    """Reports whose address mentions the street."""
    return filter_reports_on_street(request.reports, request.street)
