"""
Geographic filters over report lists, used by report search.
"""

import logging
from typing import Iterable, List

from civicgeo.models.geo_models import ReportDistance, ReportLocation
from civicgeo.utils.address_utils import is_on_street
from civicgeo.utils.geo_utils import calculate_distance_meters

logger = logging.getLogger(__name__)


def filter_reports_near(
    reports: Iterable[ReportLocation],
    latitude: float,
    longitude: float,
    radius_m: float,
) -> List[ReportDistance]:
    """
    Select reports within ``radius_m`` meters of a center point.

    The radius is inclusive. Results are sorted by distance, nearest first;
    reports at the same distance keep their input order.
    """
    matches = []
    for report in reports:
        distance = calculate_distance_meters(
            latitude, longitude, report.latitude, report.longitude
        )
        if distance <= radius_m:
            matches.append(ReportDistance(report=report, distance_m=distance))

    matches.sort(key=lambda item: item.distance_m)
    logger.debug(f"{len(matches)} report(s) within {radius_m}m of ({latitude}, {longitude})")
    return matches


def filter_reports_on_street(
    reports: Iterable[ReportLocation], street_query: str
) -> List[ReportLocation]:
    """Select reports whose address contains the street query."""
    return [report for report in reports if is_on_street(report.address, street_query)]
