"""Orchestration of a single masking run.

This module coordinates the workflow for one image:
detect faces, decode the image, composite glyphs, persist the result.

Key components:
- FaceMasker: Main orchestrator class
"""

import time
from pathlib import Path

from PIL import Image

from emojimask.config import EmojiMaskSettings, NoFacesPolicy
from emojimask.core.compositor import GlyphRenderer, OverlayCompositor
from emojimask.detection import FaceDetector
from emojimask.exceptions import ImageLoadError, NoFacesDetectedError
from emojimask.io import ImageReader, ImageWriter
from emojimask.utils import MaskingLogger, MaskingStats, configure_logging


class FaceMasker:
    """Masks the faces in one image per call.

    Manages the complete workflow:
    1. Ask the detector for face polygons
    2. Apply the no-faces policy
    3. Decode the input image
    4. Composite one glyph per face
    5. Encode and write the output beside the input

    Any failure propagates and nothing is written. Each call builds a fresh
    raster, so one masker can be reused for several images sequentially.

    Example:
        settings = EmojiMaskSettings()
        masker = FaceMasker(settings, detector=CloudVisionDetector())
        stats = masker.mask(Path("photo.png"))
    """

    def __init__(
        self,
        config: EmojiMaskSettings,
        detector: FaceDetector,
        renderer: GlyphRenderer | None = None,
        quiet: bool = False,
    ) -> None:
        """Initialize the masker.

        Args:
            config: EmojiMask settings
            detector: Face detector collaborator
            renderer: Glyph renderer (built from config on first use if omitted)
            quiet: Suppress console logging except errors
        """
        self.config = config
        self.detector = detector
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.writer = ImageWriter(config.output)
        self._renderer = renderer

    @property
    def renderer(self) -> GlyphRenderer:
        """Glyph renderer, created on first use."""
        if self._renderer is None:
            self._renderer = GlyphRenderer(self.config.glyph)
            self.logger.info(
                "Glyph renderer ready",
                font=str(self._renderer.font_path) if self._renderer.font_path else "default",
                bitmap=self._renderer.is_bitmap,
            )
        return self._renderer

    def output_path_for(self, image_path: Path) -> Path:
        """Return the path the masked image for ``image_path`` is written to."""
        return self.writer.get_masked_path(image_path)

    def mask(self, image_path: Path, output_path: Path | None = None) -> MaskingStats:
        """Mask all faces in ``image_path`` and write the result.

        Args:
            image_path: Input image
            output_path: Destination (derived from the input name if None)

        Returns:
            MaskingStats with face counts, dimensions, output path and timing

        Raises:
            DetectorError: If face detection fails
            NoFacesDetectedError: If no faces were found under the ``fail`` policy
            ImageLoadError: If the input cannot be decoded
            GlyphRenderError: If a glyph cannot be rendered
            ImageSaveError: If the output cannot be written
        """
        processing_logger = MaskingLogger(self.logger)
        stats = processing_logger.stats
        stats.start_time = time.time()

        self.logger.info("Starting masking", input=str(image_path))

        faces = self.detector.detect(image_path)
        processing_logger.log_faces_detected(image_path, len(faces))

        if not faces:
            policy = self.config.detection.no_faces_policy
            processing_logger.log_no_faces(image_path, policy.value)
            if policy == NoFacesPolicy.FAIL:
                raise NoFacesDetectedError(str(image_path))

        reader = ImageReader(image_path)
        try:
            reader.load()
        except (OSError, Image.DecompressionBombError) as e:
            raise ImageLoadError(str(image_path), str(e)) from e

        try:
            stats.image_width = reader.width
            stats.image_height = reader.height
            self.logger.info(
                "Image loaded",
                format=reader.format,
                width=reader.width,
                height=reader.height,
            )

            if faces:
                compositor = OverlayCompositor(
                    config=self.config.glyph,
                    renderer=self.renderer,
                    processing_logger=processing_logger,
                )
                raster = compositor.composite(reader.image, faces)
            else:
                # No glyphs to draw, so the emoji font is never opened
                raster = OverlayCompositor.create_raster(reader.image)
        finally:
            reader.close()

        written = self.writer.persist(raster, image_path, output_path)
        processing_logger.log_output_written(written, written.stat().st_size)

        stats.end_time = time.time()
        self.logger.info(
            "Masking complete",
            faces=stats.faces_detected,
            masked=stats.faces_masked,
            skipped=stats.faces_skipped,
            output=str(written),
            duration_seconds=round(stats.duration_seconds, 3),
        )

        return stats
