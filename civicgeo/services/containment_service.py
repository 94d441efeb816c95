"""
Point-in-boundary checks for report submission.
"""

import logging
from typing import Any, Dict, List, Optional

from civicgeo.config.settings import get_settings
from civicgeo.models.geo_models import LocationCheck, LocationReason
from civicgeo.utils.geojson_utils import extract_polygons, is_point_in_ring

logger = logging.getLogger(__name__)

# A missing boundary dataset must not block report submission.
PERMIT_ON_MISSING_BOUNDARY = True


class InvalidCoordinatesError(ValueError):
    """Raised when a report location is outside valid degree ranges."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


def is_point_in_boundary(
    latitude: float,
    longitude: float,
    boundary: Optional[Dict[str, Any]],
    permit_on_missing: bool = PERMIT_ON_MISSING_BOUNDARY,
) -> bool:
    """
    Check whether a point lies inside the outer ring of any boundary polygon.

    Args:
        latitude: Point latitude (degrees)
        longitude: Point longitude (degrees)
        boundary: Any GeoJSON shape (usually the municipality Feature) or None
        permit_on_missing: Result returned when ``boundary`` is None

    Returns:
        True on the first containing ring; False if none contains the point
    """
    if boundary is None:
        return permit_on_missing

    for ring in extract_polygons(boundary):
        if is_point_in_ring(latitude, longitude, ring):
            return True

    return False


def validate_coordinates(latitude: Any, longitude: Any) -> None:
    """Raise InvalidCoordinatesError unless both values are in range."""
    errors = []

    if not _in_range(latitude, -90, 90):
        errors.append("Latitude must be a number between -90 and 90.")
    if not _in_range(longitude, -180, 180):
        errors.append("Longitude must be a number between -180 and 180.")

    if errors:
        raise InvalidCoordinatesError(errors)


def _in_range(value: Any, low: float, high: float) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # NaN fails both comparisons
    return low <= value <= high


def check_report_location(
    latitude: float,
    longitude: float,
    boundary: Optional[Dict[str, Any]],
    permit_on_missing: Optional[bool] = None,
) -> LocationCheck:
    """
    Decide whether a report may be submitted at the given location.

    Args:
        latitude: Report latitude
        longitude: Report longitude
        boundary: Resolved municipality feature, or None when unavailable
        permit_on_missing: Overrides the configured fail-open policy

    Returns:
        LocationCheck with the decision and its reason

    Raises:
        InvalidCoordinatesError: If the coordinates are out of range
    """
    validate_coordinates(latitude, longitude)

    if boundary is None:
        if permit_on_missing is None:
            permit_on_missing = get_settings().permit_on_missing_boundary
        logger.info(
            f"Boundary unavailable, location ({latitude}, {longitude}) "
            f"{'accepted' if permit_on_missing else 'rejected'} by policy"
        )
        return LocationCheck(
            allowed=permit_on_missing,
            reason=LocationReason.BOUNDARY_UNAVAILABLE,
            latitude=latitude,
            longitude=longitude,
        )

    inside = is_point_in_boundary(latitude, longitude, boundary)
    if not inside:
        logger.info(f"Location ({latitude}, {longitude}) is outside the municipal boundary")

    return LocationCheck(
        allowed=inside,
        reason=LocationReason.INSIDE_BOUNDARY if inside else LocationReason.OUTSIDE_BOUNDARY,
        latitude=latitude,
        longitude=longitude,
    )
