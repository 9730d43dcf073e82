"""Face detector interface and in-memory implementation."""

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

from emojimask.domain import Face


@runtime_checkable
class FaceDetector(Protocol):
    """Finds faces in an image file.

    Implementations return faces in their own stable order, which decides
    glyph assignment and draw order. An empty list means "no faces"; a
    failure to detect raises ``DetectorError``.
    """

    def detect(self, image_path: Path) -> list[Face]:
        """Return the face polygons found in ``image_path``."""
        ...


class StaticFaceDetector:
    """Detector that returns a fixed list of faces for any image.

    Example:
        detector = StaticFaceDetector([Face([Vertex(0, 0), Vertex(10, 10)])])
    """

    def __init__(self, faces: Iterable[Face]) -> None:
        self._faces = list(faces)

    def detect(self, image_path: Path) -> list[Face]:  # noqa: ARG002
        return list(self._faces)
