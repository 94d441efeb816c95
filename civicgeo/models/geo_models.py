"""
Data models for geographic filtering of civic-issue reports.

GeoJSON shapes are handled as plain dicts (as parsed from the dataset);
these models cover the validated values exchanged with callers.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


class ShapeType(str, Enum):
    """GeoJSON shape kinds understood by the boundary resolver."""
    FEATURE_COLLECTION = "FeatureCollection"
    FEATURE = "Feature"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"


class BoundaryFailure(str, Enum):
    """Causes for a boundary being unavailable, reported in log diagnostics."""
    NETWORK = "network"
    PARSE = "parse"
    NOT_FOUND = "not_found"
    MALFORMED = "malformed"


class LocationReason(str, Enum):
    """Outcome of the report location gate."""
    INSIDE_BOUNDARY = "inside_boundary"
    OUTSIDE_BOUNDARY = "outside_boundary"
    BOUNDARY_UNAVAILABLE = "boundary_unavailable"


class GeoLocation(BaseModel):
    """A validated coordinate pair in decimal degrees."""
    latitude: float = Field(..., ge=-90, le=90, description="Latitude coordinate")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude coordinate")

    class Config:
        """Pydantic configuration."""
        frozen = True


class ReportLocation(BaseModel):
    """
    Minimal projection of a report used by the geographic filters.

    Only the fields the filters read are modeled; callers may pass
    their own report payloads converted with ``ReportLocation(**payload)``.
    """
    id: int = Field(..., description="Report identifier")
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    address: Optional[str] = Field(None, description="Display address of the report")
    title: Optional[str] = None


class ReportDistance(BaseModel):
    """A report together with its distance from a search center."""
    report: ReportLocation
    distance_m: float = Field(..., ge=0, description="Great-circle distance in meters")


class LocationCheck(BaseModel):
    """Result of checking whether a report location may be submitted."""
    allowed: bool
    reason: LocationReason
    latitude: float
    longitude: float


class DistanceResponse(BaseModel):
    """Distance between two coordinates."""
    origin: GeoLocation
    destination: GeoLocation
    distance_m: float


class AddressCheckResponse(BaseModel):
    """Address heuristics for a display address and optional street query."""
    address: str
    has_house_number: bool
    street_query: Optional[str] = None
    is_on_street: Optional[bool] = None


class NearbyReportsRequest(BaseModel):
    """Payload for selecting reports around a point."""
    reports: List[ReportLocation]
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    radius_m: Optional[float] = Field(None, gt=0, description="Defaults to the configured search radius")


class StreetReportsRequest(BaseModel):
    """Payload for selecting reports along a street."""
    reports: List[ReportLocation]
    street: str = Field(..., description="Street name to look for in report addresses")


class BoundaryStatus(BaseModel):
    """Summary of the boundary currently held by the API."""
    municipality: str
    available: bool
    polygons: int
    permit_on_missing_boundary: bool
