"""Configuration management for emojimask.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GlyphConfig: Palette and font settings
- DetectionConfig: Face detector settings
- OutputConfig: Output encoding settings
- LoggingConfig: Logging settings
- EmojiMaskSettings: Main application settings
"""

from emojimask.config.settings import (
    DEFAULT_PALETTE,
    DetectionConfig,
    EmojiMaskSettings,
    GlyphConfig,
    LoggingConfig,
    NoFacesPolicy,
    OutputConfig,
    get_default_settings,
)

__all__ = [
    "DEFAULT_PALETTE",
    "DetectionConfig",
    "EmojiMaskSettings",
    "GlyphConfig",
    "LoggingConfig",
    "NoFacesPolicy",
    "OutputConfig",
    "get_default_settings",
]
