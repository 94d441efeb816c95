"""Services module."""
from civicgeo.services.boundary_service import BoundaryStore, fetch_boundary, find_feature_by_name
from civicgeo.services.containment_service import (
    PERMIT_ON_MISSING_BOUNDARY,
    InvalidCoordinatesError,
    check_report_location,
    is_point_in_boundary,
)
from civicgeo.services.report_filter_service import filter_reports_near, filter_reports_on_street

__all__ = [
    "BoundaryStore",
    "fetch_boundary",
    "find_feature_by_name",
    "PERMIT_ON_MISSING_BOUNDARY",
    "InvalidCoordinatesError",
    "check_report_location",
    "is_point_in_boundary",
    "filter_reports_near",
    "filter_reports_on_street",
]
