"""Emoji font inspection.

Colour emoji fonts are usually bitmap fonts (CBDT/CBLC on Noto, sbix on
Apple) that FreeType can only rasterize at the sizes stored in the file.
This module reads those sizes with fontTools.
"""

from pathlib import Path

from fontTools.ttLib import TTFont

# Well-known system emoji fonts, in lookup order
SYSTEM_EMOJI_FONTS: tuple[Path, ...] = (
    Path("/System/Library/Fonts/Apple Color Emoji.ttc"),
    Path("/usr/share/fonts/truetype/noto/NotoColorEmoji.ttf"),
    Path("/usr/share/fonts/noto/NotoColorEmoji.ttf"),
    Path("/usr/share/fonts/google-noto-emoji/NotoColorEmoji.ttf"),
    Path("C:/Windows/Fonts/seguiemj.ttf"),
)


def find_system_emoji_font() -> Path | None:
    """Return the first installed well-known emoji font, if any."""
    for candidate in SYSTEM_EMOJI_FONTS:
        if candidate.is_file():
            return candidate
    return None


def bitmap_strike_sizes(font_path: Path) -> list[int]:
    """List the pixel sizes of the bitmap strikes embedded in a font.

    Args:
        font_path: Path to a TTF/OTF/TTC font (first face of collections)

    Returns:
        Sorted strike sizes in pixels; empty for scalable outline fonts
    """
    font = TTFont(str(font_path), fontNumber=0, lazy=True)
    try:
        sizes: set[int] = set()
        if "sbix" in font:
            sizes.update(int(ppem) for ppem in font["sbix"].strikes)
        if "CBLC" in font:
            sizes.update(
                int(strike.bitmapSizeTable.ppemY) for strike in font["CBLC"].strikes
            )
        return sorted(sizes)
    finally:
        font.close()


def choose_strike_size(strikes: list[int], target: int) -> int:
    """Pick the strike to render at before scaling to ``target``.

    Prefers the smallest strike at least as large as the target so the glyph
    is scaled down, otherwise the largest available.

    Args:
        strikes: Available strike sizes (non-empty)
        target: Desired glyph size in pixels

    Returns:
        Strike size in pixels
    """
    larger = [s for s in strikes if s >= target]
    return min(larger) if larger else max(strikes)
