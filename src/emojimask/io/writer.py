"""Image writer for persisting masked rasters.

This module provides the ImageWriter class, which encodes a composited
raster and writes it beside the source image.
"""

import io
import os
import tempfile
from pathlib import Path

from PIL import Image

from emojimask.config import OutputConfig
from emojimask.exceptions import ImageSaveError
from emojimask.io.paths import masked_path

# Formats that cannot store an alpha channel or palette
_RGB_ONLY_FORMATS = {"JPEG", "BMP"}


def _output_mode(destination: Path) -> int:
    """Permission bits for the output file.

    An existing destination keeps its mode; a new file gets 0o666 minus the
    process umask, as a plain open() would.
    """
    if destination.exists():
        return destination.stat().st_mode & 0o777

    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class ImageWriter:
    """Encodes rasters and writes them with the masked naming convention.

    The whole image is encoded in memory first, then written to a temporary
    file in the destination directory and moved into place. Either the full
    image lands at the destination or nothing does.

    Example:
        writer = ImageWriter(OutputConfig())
        writer.persist(raster, Path("photo.png"))  # -> photo-masked.jpg
    """

    def __init__(self, config: OutputConfig | None = None) -> None:
        """Initialize the image writer.

        Args:
            config: Output encoding settings (defaults to JPEG, "-masked")
        """
        self._config = config or OutputConfig()

    def get_masked_path(self, source_path: Path) -> Path:
        """Return the destination path for ``source_path``."""
        return masked_path(source_path, self._config.suffix, self._config.extension)

    def encode(self, raster: Image.Image) -> bytes:
        """Encode a raster in the configured format.

        Args:
            raster: Composited image

        Returns:
            Encoded image bytes
        """
        image_format = self._config.format.upper()
        if image_format in _RGB_ONLY_FORMATS and raster.mode != "RGB":
            raster = raster.convert("RGB")

        buffer = io.BytesIO()
        raster.save(buffer, format=image_format, quality=self._config.quality)
        return buffer.getvalue()

    def persist(
        self,
        raster: Image.Image,
        source_path: Path,
        output_path: Path | None = None,
    ) -> Path:
        """Encode ``raster`` and write it, overwriting any existing file.

        Args:
            raster: Composited image
            source_path: Input image path the output name is derived from
            output_path: Explicit destination (overrides the derived name)

        Returns:
            Path that was written

        Raises:
            ImageSaveError: If encoding or writing fails
        """
        destination = output_path or self.get_masked_path(source_path)

        try:
            data = self.encode(raster)
        except (OSError, ValueError, KeyError) as e:
            raise ImageSaveError(str(destination), str(e)) from e

        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                dir=destination.parent,
                prefix=f".{destination.stem}-",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(data)
            os.chmod(tmp_name, _output_mode(destination))
            os.replace(tmp_name, destination)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise ImageSaveError(str(destination), str(e)) from e

        return destination
