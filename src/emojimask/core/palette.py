"""Deterministic glyph assignment."""

from collections.abc import Sequence


def select_glyph(palette: Sequence[str], index: int) -> str:
    """Pick the glyph for the face at position ``index``.

    Selection cycles through the palette, so every face gets a glyph and the
    same position always maps to the same glyph.

    Args:
        palette: Non-empty ordered glyph sequence
        index: Zero-based position of the face in detector order

    Returns:
        The glyph at ``index`` modulo the palette length
    """
    return palette[index % len(palette)]
