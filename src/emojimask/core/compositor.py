"""Overlay compositing of glyphs onto face regions.

This module draws the base image onto a fresh raster of identical size and
then renders one glyph per face, centered in the face's bounding box and
sized to the box width.

Key classes:
- GlyphRenderer: Draws a single glyph at a center point and pixel size
- OverlayCompositor: Composites all faces onto a base image
"""

from collections.abc import Sequence
from pathlib import Path

from fontTools.ttLib import TTLibError
from PIL import Image, ImageDraw, ImageFont

from emojimask.config import GlyphConfig
from emojimask.core.geometry import extract_bounding_box
from emojimask.core.palette import select_glyph
from emojimask.domain import Face
from emojimask.exceptions import GlyphRenderError, RenderError
from emojimask.io.fonts import bitmap_strike_sizes, choose_strike_size, find_system_emoji_font
from emojimask.utils.logging import MaskingLogger

FontType = ImageFont.FreeTypeFont | ImageFont.ImageFont


class GlyphRenderer:
    """Renders glyphs with an emoji font.

    Scalable fonts are drawn straight onto the raster at the requested size.
    Bitmap colour fonts only rasterize at their stored strike sizes, so the
    glyph is drawn at a strike onto a transparent tile, scaled, and pasted.
    In both cases the glyph is anchored at its own middle ("mm").
    """

    def __init__(self, config: GlyphConfig | None = None) -> None:
        """Initialize the renderer and inspect the font.

        Args:
            config: Glyph settings (font, fill color, strike override)

        Raises:
            RenderError: If the configured font cannot be read
        """
        self._config = config or GlyphConfig()
        self._font_path: Path | None = self._config.font_path or find_system_emoji_font()
        self._fonts: dict[int, FontType] = {}

        self._strikes: list[int] = []
        if self._config.strike_size is not None:
            self._strikes = [self._config.strike_size]
        elif self._font_path is not None:
            try:
                self._strikes = bitmap_strike_sizes(self._font_path)
            except (OSError, TTLibError) as e:
                raise RenderError(f"Cannot read emoji font '{self._font_path}': {e}") from e

    @property
    def font_path(self) -> Path | None:
        """Font file in use, or None for Pillow's built-in font."""
        return self._font_path

    @property
    def is_bitmap(self) -> bool:
        """Whether glyphs are rendered from fixed bitmap strikes."""
        return bool(self._strikes)

    def _font(self, size: int) -> FontType:
        if size not in self._fonts:
            if self._font_path is None:
                self._fonts[size] = ImageFont.load_default(size=size)
            else:
                self._fonts[size] = ImageFont.truetype(str(self._font_path), size)
        return self._fonts[size]

    def draw(
        self,
        raster: Image.Image,
        glyph: str,
        center: tuple[float, float],
        size: int,
    ) -> None:
        """Draw ``glyph`` centered on ``center`` at ``size`` pixels.

        Sizes below one pixel draw nothing.

        Args:
            raster: Image to draw on (RGB or RGBA)
            glyph: Text to render, typically a single emoji
            center: Anchor point in raster coordinates
            size: Font size in pixels

        Raises:
            GlyphRenderError: If the font cannot render at this size
        """
        if size < 1:
            return

        try:
            if self._strikes:
                self._draw_scaled(raster, glyph, center, size)
            else:
                ImageDraw.Draw(raster).text(
                    center,
                    glyph,
                    font=self._font(size),
                    fill=self._config.fill_color,
                    anchor="mm",
                    embedded_color=True,
                )
        except (OSError, ValueError) as e:
            raise GlyphRenderError(glyph, str(e)) from e

    def _draw_scaled(
        self,
        raster: Image.Image,
        glyph: str,
        center: tuple[float, float],
        size: int,
    ) -> None:
        strike = choose_strike_size(self._strikes, size)

        # Tile is twice the strike so the glyph fits around the tile center
        tile = Image.new("RGBA", (strike * 2, strike * 2), (0, 0, 0, 0))
        ImageDraw.Draw(tile).text(
            (strike, strike),
            glyph,
            font=self._font(strike),
            fill=self._config.fill_color,
            anchor="mm",
            embedded_color=True,
        )

        tile = tile.resize((size * 2, size * 2), Image.Resampling.LANCZOS)
        cx, cy = center
        raster.paste(tile, (round(cx) - size, round(cy) - size), tile)


class OverlayCompositor:
    """Composites glyphs over face regions of a base image.

    Example:
        compositor = OverlayCompositor(GlyphConfig())
        raster = compositor.composite(Image.open("photo.png"), faces)
    """

    def __init__(
        self,
        config: GlyphConfig | None = None,
        renderer: GlyphRenderer | None = None,
        processing_logger: MaskingLogger | None = None,
    ) -> None:
        """Initialize the compositor.

        Args:
            config: Glyph settings; the palette is taken from here
            renderer: Glyph renderer (built from ``config`` if omitted)
            processing_logger: Optional logger for per-face events
        """
        self.config = config or GlyphConfig()
        self.renderer = renderer or GlyphRenderer(self.config)
        self.processing_logger = processing_logger

    @staticmethod
    def create_raster(base_image: Image.Image) -> Image.Image:
        """Create an RGB raster of the base image's size with the base drawn at the origin."""
        raster = Image.new("RGB", base_image.size)
        if base_image.mode in ("RGBA", "LA", "PA") or "transparency" in base_image.info:
            rgba = base_image.convert("RGBA")
            raster.paste(rgba, (0, 0), rgba)
        else:
            raster.paste(base_image.convert("RGB"), (0, 0))
        return raster

    def composite(
        self,
        base_image: Image.Image,
        faces: Sequence[Face],
        palette: Sequence[str] | None = None,
    ) -> Image.Image:
        """Draw the base image, then one glyph per face in order.

        Each face keeps its position in ``faces`` as its palette index, even
        when an earlier face is skipped. Faces without vertices are skipped.
        Later faces are drawn over earlier ones where boxes overlap.

        Args:
            base_image: Decoded source image
            faces: Face polygons in detector order
            palette: Glyph palette (defaults to the configured palette)

        Returns:
            New raster with the same pixel dimensions as ``base_image``
        """
        glyphs = palette if palette is not None else self.config.palette
        raster = self.create_raster(base_image)

        for index, face in enumerate(faces):
            if face.is_empty():
                if self.processing_logger is not None:
                    self.processing_logger.log_face_skipped(index, "no vertices")
                continue

            box = extract_bounding_box(face)
            glyph = select_glyph(glyphs, index)
            size = int(round(box.width))

            self.renderer.draw(raster, glyph, box.center, size)

            if self.processing_logger is not None:
                self.processing_logger.log_face_masked(index, glyph, box.to_dict(), size)

        return raster
