"""Image reader for loading input photos.

This module provides the ImageReader class for decoding image files
into Pillow images.
"""

from pathlib import Path

from PIL import Image


class ImageReader:
    """Loads an image file and exposes its pixel data.

    Example:
        with ImageReader(Path("photo.png")) as reader:
            print(reader.width, reader.height)
    """

    def __init__(self, image_path: Path) -> None:
        """Initialize the image reader.

        Args:
            image_path: Path to the image file
        """
        self._image_path = image_path
        self._image: Image.Image | None = None

    def load(self) -> None:
        """Decode the image file.

        Raises:
            FileNotFoundError: If image file does not exist
            PIL.UnidentifiedImageError: If the file is not a readable image
            OSError: If the image data is truncated or corrupt
            PIL.Image.DecompressionBombError: If the image exceeds Pillow's pixel limit
        """
        if not self._image_path.exists():
            raise FileNotFoundError(f"Image file not found: {self._image_path}")

        image = Image.open(self._image_path)
        image.load()
        self._image = image

    @property
    def image(self) -> Image.Image:
        """Return the decoded image.

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        if self._image is None:
            raise RuntimeError("Image not loaded. Call load() first.")

        return self._image

    @property
    def format(self) -> str:
        """Return the source format name (e.g. 'PNG'), or 'unknown'."""
        return self.image.format or "unknown"

    @property
    def width(self) -> int:
        """Return image width in pixels."""
        return self.image.width

    @property
    def height(self) -> int:
        """Return image height in pixels."""
        return self.image.height

    def close(self) -> None:
        """Close the image file and free resources."""
        if self._image is not None:
            self._image.close()
            self._image = None

    def __enter__(self) -> "ImageReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
