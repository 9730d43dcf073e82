"""Geometric operations for face placement.

This module reduces detector polygons to the axis-aligned boxes the
compositor draws into. All functions are pure and stateless.
"""

from emojimask.domain import BoundingBox, Face
from emojimask.exceptions import EmptyFaceError


def extract_bounding_box(face: Face) -> BoundingBox:
    """Reduce a face polygon to its axis-aligned bounding box.

    Absent coordinates count as 0 on their own axis only. Collinear or
    coincident vertices yield a zero width and/or height, which is valid.

    Args:
        face: Face with at least one vertex

    Returns:
        Box whose origin is the minimum x/y and whose size is the span per axis

    Raises:
        EmptyFaceError: If the face has no vertices

    Examples:
        >>> face = Face([Vertex(10, 10), Vertex(50, 10), Vertex(50, 60), Vertex(10, 60)])
        >>> extract_bounding_box(face)
        BoundingBox(x=10, y=10, width=40, height=50)
    """
    if face.is_empty():
        raise EmptyFaceError()

    xs = [v.x or 0 for v in face.vertices]
    ys = [v.y or 0 for v in face.vertices]

    x = min(xs)
    y = min(ys)
    return BoundingBox(x=x, y=y, width=max(xs) - x, height=max(ys) - y)
