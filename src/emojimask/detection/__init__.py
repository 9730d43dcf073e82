"""Face detectors for emojimask.

Detectors are passed into the masker explicitly; nothing here holds a
module-level client.

Key classes:
- FaceDetector: Protocol implemented by all detectors
- CloudVisionDetector: Google Cloud Vision FACE_DETECTION
- JsonFaceDetector: Pre-computed polygons from a JSON file
- StaticFaceDetector: Fixed in-memory faces
"""

from emojimask.detection.base import FaceDetector, StaticFaceDetector
from emojimask.detection.json_file import JsonFaceDetector
from emojimask.detection.vision import CloudVisionDetector

__all__ = [
    "CloudVisionDetector",
    "FaceDetector",
    "JsonFaceDetector",
    "StaticFaceDetector",
]
