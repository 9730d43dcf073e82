"""Exception hierarchy for EmojiMask."""


class EmojiMaskError(Exception):
    """Base exception for all EmojiMask errors."""

    pass


class ImageError(EmojiMaskError):
    """Errors related to image loading or saving."""

    pass


class ImageLoadError(ImageError):
    """Error loading an image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


class ImageSaveError(ImageError):
    """Error saving an image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save image '{path}': {reason}")


class DetectionError(EmojiMaskError):
    """Errors related to face detection."""

    pass


class DetectorError(DetectionError):
    """The face detector failed to produce a result."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Face detection failed: {reason}")


class NoFacesDetectedError(DetectionError):
    """No faces were found and the run is configured to treat that as fatal."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No faces detected in '{path}'")


class GeometryError(EmojiMaskError):
    """Errors in geometric calculations."""

    pass


class EmptyFaceError(GeometryError):
    """A face polygon without vertices has no bounding box."""

    def __init__(self) -> None:
        super().__init__("Cannot compute a bounding box for a face with no vertices")


class RenderError(EmojiMaskError):
    """Errors related to drawing overlays."""

    pass


class GlyphRenderError(RenderError):
    """Error rendering a glyph onto the raster."""

    def __init__(self, glyph: str, reason: str) -> None:
        self.glyph = glyph
        self.reason = reason
        super().__init__(f"Failed to render glyph '{glyph}': {reason}")
