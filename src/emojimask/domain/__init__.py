"""Domain models for emojimask.

This module contains the value types passed between the detector, the
compositor and the output sink. All models are:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries (for JSON face files)
- Independent of Pillow and Cloud Vision implementation details

Key classes:
- Vertex: A polygon corner with optional coordinates
- Face: An ordered polygon for one detected face
- BoundingBox: Axis-aligned box derived from a Face
"""

from emojimask.domain.face import BoundingBox, Face, Vertex

__all__: list[str] = [
    "BoundingBox",
    "Face",
    "Vertex",
]
