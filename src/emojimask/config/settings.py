"""Configuration settings for EmojiMask."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_PALETTE: tuple[str, ...] = ("😊", "😎", "😍", "🤔", "😄")


class NoFacesPolicy(str, Enum):
    """What to do when the detector finds no faces."""

    PASSTHROUGH = "passthrough"
    FAIL = "fail"


class GlyphConfig(BaseModel):
    """Configuration for the glyphs drawn over faces."""

    palette: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PALETTE),
        min_length=1,
        description="Glyphs assigned to faces in detection order, cycling when exhausted",
    )
    fill_color: str = Field(
        default="#000000",
        description="Fill color for glyphs without embedded color",
    )
    font_path: Path | None = Field(
        default=None,
        description="Emoji font file (None = search well-known system locations)",
    )
    strike_size: int | None = Field(
        default=None,
        ge=1,
        description="Native pixel size for bitmap emoji fonts (None = read from font)",
    )


class DetectionConfig(BaseModel):
    """Configuration for face detection."""

    max_results: int = Field(
        default=100,
        ge=1,
        description="Maximum number of faces requested from the detector",
    )
    key_file: Path | None = Field(
        default=None,
        description="Service account key for Google Cloud Vision (None = default credentials)",
    )
    faces_file: Path | None = Field(
        default=None,
        description="JSON file with pre-computed face polygons (bypasses Cloud Vision)",
    )
    no_faces_policy: NoFacesPolicy = Field(
        default=NoFacesPolicy.PASSTHROUGH,
        description="Write an unmasked copy or fail when no faces are found",
    )


class OutputConfig(BaseModel):
    """Configuration for the written image."""

    suffix: str = Field(
        default="-masked",
        description="Marker appended to the input base name",
    )
    format: str = Field(
        default="JPEG",
        description="Pillow format name used to encode the output",
    )
    extension: str = Field(
        default="jpg",
        description="File extension of the output",
    )
    quality: int = Field(
        default=90,
        ge=1,
        le=100,
        description="Encoder quality for lossy formats",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class EmojiMaskSettings(BaseModel):
    """Main application settings."""

    glyph: GlyphConfig = Field(default_factory=GlyphConfig)
    detection: DetectionConfig = Field(default_factory=DetectionConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> EmojiMaskSettings:
    """Get default application settings."""
    return EmojiMaskSettings()
