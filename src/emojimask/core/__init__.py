"""Core rendering for emojimask.

This module contains the logic that turns detector polygons into a masked
image:

- Geometry extraction (polygon to bounding box)
- Glyph selection (cyclic palette lookup)
- Overlay compositing (base image plus centered glyphs)
- Run orchestration (detect, decode, composite, persist)

Key functions:
- extract_bounding_box: Reduce a face polygon to an axis-aligned box
- select_glyph: Pick the palette entry for the Nth face

Key classes:
- GlyphRenderer: Draws one glyph with an emoji font
- OverlayCompositor: Composites glyphs over every face
- FaceMasker: Orchestrates a full masking run
"""

from emojimask.core.compositor import GlyphRenderer, OverlayCompositor
from emojimask.core.geometry import extract_bounding_box
from emojimask.core.masker import FaceMasker
from emojimask.core.palette import select_glyph

__all__ = [
    "FaceMasker",
    "GlyphRenderer",
    "OverlayCompositor",
    "extract_bounding_box",
    "select_glyph",
]
