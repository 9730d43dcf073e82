"""Image I/O layer for emojimask.

This module handles reading input photos and writing masked results using
Pillow, and inspecting emoji fonts using fontTools.

Key responsibilities:
- Decode input images
- Encode and atomically write masked images
- Derive output file names
- Discover bitmap strike sizes of colour emoji fonts

Key classes:
- ImageReader: Load images
- ImageWriter: Save masked images
"""

from emojimask.io.fonts import bitmap_strike_sizes, find_system_emoji_font
from emojimask.io.paths import masked_path
from emojimask.io.reader import ImageReader
from emojimask.io.writer import ImageWriter

__all__ = [
    "ImageReader",
    "ImageWriter",
    "bitmap_strike_sizes",
    "find_system_emoji_font",
    "masked_path",
]
