"""Core value types for face geometry.

This module defines the geometric types handed over by face detectors:
- Vertex: A 2D polygon corner whose coordinates may be absent
- Face: An ordered polygon outlining one detected face
- BoundingBox: Axis-aligned box derived from a face polygon
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Vertex:
    """A polygon corner in image pixel coordinates.

    Detectors may omit a coordinate (Cloud Vision drops zero-valued fields),
    so both axes are optional. Consumers treat an absent coordinate as 0.

    Attributes:
        x: X coordinate in pixels, or None if absent
        y: Y coordinate in pixels, or None if absent
    """

    x: float | None = None
    y: float | None = None

    def to_tuple(self) -> tuple[float, float]:
        """Convert to an (x, y) tuple with absent coordinates as 0.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x or 0, self.y or 0)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary, omitting absent coordinates.

        Returns:
            Dictionary with the present x and y fields
        """
        data: dict[str, Any] = {}
        if self.x is not None:
            data["x"] = self.x
        if self.y is not None:
            data["y"] = self.y
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vertex":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with optional x and y fields

        Returns:
            Vertex instance
        """
        return cls(x=data.get("x"), y=data.get("y"))


@dataclass
class Face:
    """A detected face outlined by an ordered polygon.

    Usually four corners of a bounding quadrilateral, but any number of
    vertices is accepted. Faces are read-only input to the renderer.

    Attributes:
        vertices: Polygon corners in detector order
    """

    vertices: list[Vertex] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Check if the face has no vertices.

        Returns:
            True if there is nothing to compute a box from
        """
        return len(self.vertices) == 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with a list of vertex dictionaries
        """
        return {"vertices": [v.to_dict() for v in self.vertices]}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | list[dict[str, Any]]) -> "Face":
        """Deserialize from dictionary or a bare vertex list.

        Args:
            data: Either {"vertices": [...]} or [...] of vertex dictionaries

        Returns:
            Face instance
        """
        raw_vertices = data["vertices"] if isinstance(data, dict) else data
        return cls(vertices=[Vertex.from_dict(v) for v in raw_vertices])


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned box enclosing a face polygon.

    Attributes:
        x: Left edge (minimum x of the polygon)
        y: Top edge (minimum y of the polygon)
        width: Horizontal span, never negative
        height: Vertical span, never negative
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        """Center point of the box."""
        return (self.x + self.width / 2, self.y + self.height / 2)

    def is_degenerate(self) -> bool:
        """Check if the box has zero width or height."""
        return self.width == 0 or self.height == 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y, width and height
        """
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }
