"""Tests for bounding box extraction."""

import pytest

from emojimask.core.geometry import extract_bounding_box
from emojimask.domain import BoundingBox, Face, Vertex
from emojimask.exceptions import EmptyFaceError, GeometryError


def make_face(*points: tuple[float | None, float | None]) -> Face:
    """Create a face from (x, y) tuples."""
    return Face([Vertex(x, y) for x, y in points])


class TestExtractBoundingBox:
    """Tests for extract_bounding_box."""

    def test_rectangle(self):
        """Test a four-corner rectangle."""
        face = make_face((10, 10), (50, 10), (50, 60), (10, 60))

        assert extract_bounding_box(face) == BoundingBox(x=10, y=10, width=40, height=50)

    def test_missing_x_treated_as_zero(self):
        """Test that an absent x counts as 0 on the x axis only."""
        face = make_face((0, 0), (None, 5), (20, 20))

        box = extract_bounding_box(face)

        assert box.x == 0
        assert box.width == 20
        assert box.y == 0
        assert box.height == 20

    def test_missing_y_lowers_minimum(self):
        """Test that an absent y pulls the top edge to 0."""
        face = make_face((30, 40), (60, None), (60, 80))

        box = extract_bounding_box(face)

        assert box.x == 30
        assert box.y == 0
        assert box.height == 80

    def test_not_limited_to_four_vertices(self):
        """Test polygons with more than four corners."""
        face = make_face((5, 0), (10, 5), (5, 10), (0, 5), (2, 2), (8, 8))

        assert extract_bounding_box(face) == BoundingBox(x=0, y=0, width=10, height=10)

    def test_unordered_vertices(self):
        """Test that vertex order does not affect the box."""
        face = make_face((50, 60), (10, 10), (10, 60), (50, 10))

        assert extract_bounding_box(face) == BoundingBox(x=10, y=10, width=40, height=50)

    def test_single_vertex(self):
        """Test a single vertex yields a zero-size box at that point."""
        box = extract_bounding_box(make_face((7, 9)))

        assert box == BoundingBox(x=7, y=9, width=0, height=0)

    def test_collinear_vertices(self):
        """Test horizontal collinear vertices give zero height."""
        box = extract_bounding_box(make_face((0, 5), (10, 5), (20, 5)))

        assert box.width == 20
        assert box.height == 0

    def test_negative_coordinates(self):
        """Test polygons reaching past the image origin."""
        box = extract_bounding_box(make_face((-10, -5), (10, 5)))

        assert box == BoundingBox(x=-10, y=-5, width=20, height=10)

    def test_float_coordinates(self):
        """Test fractional pixel coordinates."""
        box = extract_bounding_box(make_face((0.5, 1.5), (10.5, 4.0)))

        assert box.width == pytest.approx(10.0)
        assert box.height == pytest.approx(2.5)

    def test_sizes_never_negative(self):
        """Test width and height are non-negative for assorted polygons."""
        polygons = [
            make_face((3, 3)),
            make_face((9, 1), (1, 9)),
            make_face((None, None), (4, None)),
            make_face((100, 200), (50, 25), (75, 300)),
        ]

        for face in polygons:
            box = extract_bounding_box(face)
            assert box.width >= 0
            assert box.height >= 0

    def test_pure(self):
        """Test repeated calls give identical results and leave the face untouched."""
        face = make_face((10, 10), (50, 10), (50, 60), (10, 60))
        vertices_before = list(face.vertices)

        assert extract_bounding_box(face) == extract_bounding_box(face)
        assert face.vertices == vertices_before

    def test_empty_face_raises(self):
        """Test that an empty face has no bounding box."""
        with pytest.raises(EmptyFaceError):
            extract_bounding_box(Face())

    def test_empty_face_error_is_geometry_error(self):
        """Test the error sits in the geometry hierarchy."""
        with pytest.raises(GeometryError, match="no vertices"):
            extract_bounding_box(Face([]))
