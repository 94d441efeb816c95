"""
GeoJSON helpers for boundary containment.

Shapes are plain dicts as parsed from a GeoJSON document. Polygon rings use
the GeoJSON [longitude, latitude] order. Only outer rings are considered;
interior holes are dropped during extraction.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from civicgeo.models.geo_models import ShapeType

logger = logging.getLogger(__name__)

Ring = List[List[float]]
Shape = Dict[str, Any]


def _from_feature_collection(shape: Shape) -> List[Ring]:
    features = shape.get("features")
    if not isinstance(features, list):
        return []
    rings: List[Ring] = []
    for feature in features:
        rings.extend(extract_polygons(feature))
    return rings


def _from_feature(shape: Shape) -> List[Ring]:
    return extract_polygons(shape.get("geometry"))


def _from_polygon(shape: Shape) -> List[Ring]:
    coordinates = shape.get("coordinates")
    if not isinstance(coordinates, list) or not coordinates:
        return []
    outer = coordinates[0]
    return [outer] if isinstance(outer, list) else []


def _from_multi_polygon(shape: Shape) -> List[Ring]:
    coordinates = shape.get("coordinates")
    if not isinstance(coordinates, list):
        return []
    rings: List[Ring] = []
    for polygon in coordinates:
        if isinstance(polygon, list) and polygon and isinstance(polygon[0], list):
            rings.append(polygon[0])
    return rings


_SHAPE_HANDLERS: Dict[ShapeType, Callable[[Shape], List[Ring]]] = {
    ShapeType.FEATURE_COLLECTION: _from_feature_collection,
    ShapeType.FEATURE: _from_feature,
    ShapeType.POLYGON: _from_polygon,
    ShapeType.MULTI_POLYGON: _from_multi_polygon,
}


def extract_polygons(shape: Optional[Shape]) -> List[Ring]:
    """
    Flatten any supported GeoJSON shape into a list of outer rings.

    FeatureCollection -> union of its features' rings
    Feature -> rings of its geometry
    Polygon -> its outer ring
    MultiPolygon -> the outer ring of each member polygon

    Unknown or malformed shapes contribute no rings; this never raises.

    Args:
        shape: GeoJSON object as a dict, or None

    Returns:
        List of rings, each a list of [lon, lat] pairs
    """
    if not isinstance(shape, dict):
        return []

    try:
        shape_type = ShapeType(shape.get("type"))
    except ValueError:
        logger.debug(f"Ignoring unsupported GeoJSON type: {shape.get('type')!r}")
        return []

    return _SHAPE_HANDLERS[shape_type](shape)


def is_point_in_ring(latitude: float, longitude: float, ring: Sequence[Sequence[float]]) -> bool:
    """
    Ray casting (even-odd rule) point-in-ring test.

    A ray is cast from the point towards +x (increasing longitude) and
    crossings with the ring edges are counted. The result for points lying
    exactly on an edge is not defined.

    Args:
        latitude: Point latitude (y)
        longitude: Point longitude (x)
        ring: Closed sequence of [lon, lat] pairs

    Returns:
        True if the crossing count is odd
    """
    x, y = longitude, latitude
    inside = False

    try:
        j = len(ring) - 1
        for i in range(len(ring)):
            xi, yi = ring[i][0], ring[i][1]
            xj, yj = ring[j][0], ring[j][1]

            if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
                inside = not inside
            j = i
    except (TypeError, IndexError, KeyError):
        logger.debug("Skipping malformed ring during containment test")
        return False

    return inside
