"""
Geographic utility functions for distance calculations.

This module contains pure mathematical functions with no dependencies on
network access or services. All functions are stateless and can be tested independently.
"""

import math

# Mean Earth radius in meters
EARTH_RADIUS_METERS = 6371000


def calculate_distance_meters(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """
    Calculate the distance between two points using Haversine formula.

    Inputs are not range-checked; out-of-range degrees still produce a
    number.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in meters
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    # Haversine formula
    a = (
        math.sin(d_phi / 2) * math.sin(d_phi / 2)
        + math.cos(phi1)
        * math.cos(phi2)
        * math.sin(d_lambda / 2)
        * math.sin(d_lambda / 2)
    )
    # Rounding can push a slightly outside [0, 1] near antipodes
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_METERS * c
