"""Face detection through the Google Cloud Vision API."""

from pathlib import Path

from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import vision

from emojimask.domain import Face, Vertex
from emojimask.exceptions import DetectorError


class CloudVisionDetector:
    """Detects faces with Cloud Vision ``FACE_DETECTION``.

    Each annotation's ``bounding_poly`` becomes one Face, in the order the API
    returns them. Annotations without vertices are dropped.

    Example:
        detector = CloudVisionDetector(key_file=Path("service-account.json"))
        faces = detector.detect(Path("photo.png"))
    """

    def __init__(
        self,
        client: vision.ImageAnnotatorClient | None = None,
        key_file: Path | None = None,
        max_results: int = 100,
    ) -> None:
        """Initialize the detector.

        Args:
            client: Pre-built annotator client (built on first use if omitted)
            key_file: Service account JSON used to build the client
            max_results: Maximum faces requested per image
        """
        self._client = client
        self._key_file = key_file
        self._max_results = max_results

    @property
    def client(self) -> vision.ImageAnnotatorClient:
        """Annotator client, created from the key file or default credentials."""
        if self._client is None:
            try:
                if self._key_file is not None:
                    self._client = vision.ImageAnnotatorClient.from_service_account_file(
                        str(self._key_file)
                    )
                else:
                    self._client = vision.ImageAnnotatorClient()
            except (
                OSError,
                ValueError,
                google_exceptions.GoogleAPIError,
                auth_exceptions.GoogleAuthError,
            ) as e:
                raise DetectorError(f"cannot create Cloud Vision client: {e}") from e
        return self._client

    def detect(self, image_path: Path) -> list[Face]:
        """Send the image to Cloud Vision and collect face polygons.

        Raises:
            DetectorError: If the image cannot be read or the API call fails
        """
        try:
            content = image_path.read_bytes()
        except OSError as e:
            raise DetectorError(f"cannot read '{image_path}': {e}") from e

        try:
            response = self.client.face_detection(
                image=vision.Image(content=content),
                max_results=self._max_results,
            )
        except (google_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError) as e:
            raise DetectorError(str(e)) from e

        if response.error.message:
            raise DetectorError(response.error.message)

        faces: list[Face] = []
        for annotation in response.face_annotations:
            vertices = annotation.bounding_poly.vertices
            if not vertices:
                continue
            faces.append(Face([Vertex(x=v.x, y=v.y) for v in vertices]))
        return faces
