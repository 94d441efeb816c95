"""
Unit tests for civicgeo/utils/geojson_utils.py

- extract_polygons over every supported shape kind
- is_point_in_ring (ray casting)
"""

import pytest

from civicgeo.utils.geojson_utils import extract_polygons, is_point_in_ring

SQUARE_RING = [[0, 0], [0, 10], [10, 10], [10, 0], [0, 0]]
SECOND_SQUARE_RING = [[20, 20], [20, 30], [30, 30], [30, 20], [20, 20]]


class TestExtractPolygons:
    """Tests for flattening GeoJSON shapes into outer rings."""

    def test_polygon_returns_outer_ring(self, square_polygon):
        """A Polygon contributes its outer ring only."""
        assert extract_polygons(square_polygon) == [SQUARE_RING]

    def test_polygon_holes_are_dropped(self):
        """Interior rings are not returned."""
        hole = [[4, 4], [4, 6], [6, 6], [6, 4], [4, 4]]
        polygon = {"type": "Polygon", "coordinates": [SQUARE_RING, hole]}
        assert extract_polygons(polygon) == [SQUARE_RING]

    def test_multipolygon_returns_each_outer_ring(self, two_squares):
        """A MultiPolygon contributes one ring per member."""
        assert extract_polygons(two_squares) == [SQUARE_RING, SECOND_SQUARE_RING]

    def test_feature_unwraps_geometry(self, turin_feature):
        """A Feature is reduced to its geometry's rings."""
        rings = extract_polygons(turin_feature)
        assert len(rings) == 1
        assert rings[0][0] == [7.58, 45.00]

    def test_feature_collection_flattens_polygon_and_multipolygon(self, square_polygon, two_squares):
        """One Polygon plus a two-member MultiPolygon give three rings."""
        collection = {
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "properties": {}, "geometry": square_polygon},
                {"type": "Feature", "properties": {}, "geometry": two_squares},
            ],
        }
        rings = extract_polygons(collection)
        assert len(rings) == 3
        assert rings == [SQUARE_RING, SQUARE_RING, SECOND_SQUARE_RING]

    @pytest.mark.parametrize("shape", [
        None,
        {},
        "Polygon",
        {"type": "Point", "coordinates": [7.68, 45.07]},
        {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
        {"type": "Polygon"},
        {"type": "Polygon", "coordinates": []},
        {"type": "MultiPolygon", "coordinates": "bad"},
        {"type": "Feature", "geometry": None},
        {"type": "FeatureCollection", "features": None},
        {"type": ["Polygon"]},
    ])
    def test_unsupported_or_malformed_shapes_give_no_rings(self, shape):
        """Anything else yields an empty list instead of raising."""
        assert extract_polygons(shape) == []

    def test_malformed_feature_inside_collection_is_skipped(self, square_polygon):
        """Bad members do not hide good ones."""
        collection = {
            "type": "FeatureCollection",
            "features": [None, {"type": "Feature"}, {"type": "Feature", "geometry": square_polygon}],
        }
        assert extract_polygons(collection) == [SQUARE_RING]


class TestIsPointInRing:
    """Tests for the even-odd ray casting test."""

    def test_point_inside_square(self):
        """The center of the square is inside."""
        assert is_point_in_ring(5, 5, SQUARE_RING) is True

    def test_point_outside_square(self):
        """A far away point is outside."""
        assert is_point_in_ring(50, 50, SQUARE_RING) is False

    def test_point_left_of_square(self):
        """A point whose ray crosses two edges is outside."""
        assert is_point_in_ring(5, -5, SQUARE_RING) is False

    def test_concave_ring(self):
        """The notch of a U-shaped ring is outside, its arms are inside."""
        u_shape = [[0, 0], [0, 10], [3, 10], [3, 3], [7, 3], [7, 10], [10, 10], [10, 0], [0, 0]]
        assert is_point_in_ring(8, 5, u_shape) is False
        assert is_point_in_ring(8, 1, u_shape) is True
        assert is_point_in_ring(2, 5, u_shape) is True

    def test_open_ring_is_closed_implicitly(self):
        """The last vertex connects back to the first."""
        open_ring = [[0, 0], [0, 10], [10, 10], [10, 0]]
        assert is_point_in_ring(5, 5, open_ring) is True

    def test_empty_ring(self):
        """An empty ring contains nothing."""
        assert is_point_in_ring(5, 5, []) is False

    def test_malformed_ring(self):
        """Vertices without two coordinates do not raise."""
        assert is_point_in_ring(5, 5, [[0], [1, 1], None]) is False

    def test_ring_of_objects(self):
        """Vertices given as JSON objects do not raise."""
        ring = [{"lon": 0, "lat": 0}, {"lon": 10, "lat": 10}, {"lon": 10, "lat": 0}]
        assert is_point_in_ring(5, 5, ring) is False
