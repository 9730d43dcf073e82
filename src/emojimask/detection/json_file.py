"""Detector backed by a JSON file of pre-computed face polygons.

Accepted layouts:

    [[{"x": 10, "y": 10}, {"x": 50, "y": 10}, ...], ...]
    {"faces": [[...], ...]}
    {"faces": [{"vertices": [...]}, ...]}
"""

import json
from pathlib import Path
from typing import Any

from emojimask.domain import Face
from emojimask.exceptions import DetectorError


class JsonFaceDetector:
    """Reads face polygons from a JSON file instead of calling a service."""

    def __init__(self, faces_file: Path) -> None:
        """Initialize the detector.

        Args:
            faces_file: Path to the JSON face file
        """
        self._faces_file = faces_file

    def detect(self, image_path: Path) -> list[Face]:  # noqa: ARG002
        """Load faces from the JSON file.

        Raises:
            DetectorError: If the file is missing, not JSON, or malformed
        """
        try:
            data: Any = json.loads(self._faces_file.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise DetectorError(f"cannot read faces file '{self._faces_file}': {e}") from e

        if isinstance(data, dict):
            data = data.get("faces", [])

        if not isinstance(data, list):
            raise DetectorError(f"faces file '{self._faces_file}' must contain a list of faces")

        try:
            return [Face.from_dict(entry) for entry in data]
        except (KeyError, TypeError, AttributeError) as e:
            raise DetectorError(f"malformed face in '{self._faces_file}': {e}") from e
