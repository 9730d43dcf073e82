"""Tests for glyph rendering and overlay compositing."""

from unittest.mock import MagicMock

import pytest
from PIL import Image

from emojimask.config import GlyphConfig
from emojimask.core import compositor as compositor_module
from emojimask.core.compositor import GlyphRenderer, OverlayCompositor
from emojimask.domain import Face, Vertex
from emojimask.exceptions import GlyphRenderError, RenderError
from emojimask.utils import MaskingLogger


class RecordingRenderer:
    """Renderer stand-in that records draw calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[float, float], int]] = []

    def draw(self, raster, glyph, center, size):  # noqa: ARG002
        self.calls.append((glyph, center, size))


def rect_face(x: float, y: float, w: float, h: float) -> Face:
    """Create a four-corner face."""
    return Face([Vertex(x, y), Vertex(x + w, y), Vertex(x + w, y + h), Vertex(x, y + h)])


@pytest.fixture
def base_image() -> Image.Image:
    """A small RGB gradient so pixel comparisons are meaningful."""
    image = Image.new("RGB", (64, 48))
    image.putdata([(x * 4, y * 5, (x + y) % 256) for y in range(48) for x in range(64)])
    return image


@pytest.fixture
def no_system_font(monkeypatch):
    """Force the renderer onto Pillow's built-in font."""
    monkeypatch.setattr(compositor_module, "find_system_emoji_font", lambda: None)


class TestOverlayCompositor:
    """Tests for OverlayCompositor."""

    def test_no_faces_returns_base_pixels(self, base_image):
        """Test an empty face list leaves the raster identical to the base."""
        renderer = RecordingRenderer()
        compositor = OverlayCompositor(GlyphConfig(), renderer=renderer)

        raster = compositor.composite(base_image, [])

        assert raster.size == base_image.size
        assert raster.tobytes() == base_image.tobytes()
        assert renderer.calls == []

    def test_returns_new_raster(self, base_image):
        """Test the base image itself is not modified."""
        before = base_image.tobytes()
        compositor = OverlayCompositor(GlyphConfig(), renderer=RecordingRenderer())

        raster = compositor.composite(base_image, [rect_face(0, 0, 10, 10)])

        assert raster is not base_image
        assert base_image.tobytes() == before

    def test_center_and_size(self, base_image):
        """Test the glyph is centered on the box and sized to its width."""
        renderer = RecordingRenderer()
        compositor = OverlayCompositor(GlyphConfig(palette=["a"]), renderer=renderer)

        compositor.composite(base_image, [rect_face(10, 10, 40, 50)])

        assert renderer.calls == [("a", (30, 35), 40)]

    def test_size_follows_width_only(self, base_image):
        """Test that a tall box still sizes the glyph by width."""
        renderer = RecordingRenderer()
        compositor = OverlayCompositor(GlyphConfig(), renderer=renderer)

        compositor.composite(base_image, [rect_face(0, 0, 8, 30)])

        assert renderer.calls[0][2] == 8

    def test_glyphs_cycle_in_face_order(self, base_image):
        """Test three faces with a two-glyph palette."""
        renderer = RecordingRenderer()
        compositor = OverlayCompositor(GlyphConfig(palette=["a", "b"]), renderer=renderer)

        compositor.composite(
            base_image,
            [rect_face(0, 0, 5, 5), rect_face(10, 0, 5, 5), rect_face(20, 0, 5, 5)],
        )

        assert [glyph for glyph, _, _ in renderer.calls] == ["a", "b", "a"]
        assert [center[0] for _, center, _ in renderer.calls] == [2.5, 12.5, 22.5]

    def test_palette_argument_overrides_config(self, base_image):
        """Test an explicit palette wins over the configured one."""
        renderer = RecordingRenderer()
        compositor = OverlayCompositor(GlyphConfig(palette=["a"]), renderer=renderer)

        compositor.composite(base_image, [rect_face(0, 0, 5, 5)], palette=["z"])

        assert renderer.calls[0][0] == "z"

    def test_empty_face_skipped_keeps_indexes(self, base_image):
        """Test an empty face is skipped and later faces keep their position."""
        renderer = RecordingRenderer()
        processing_logger = MaskingLogger(MagicMock())
        compositor = OverlayCompositor(
            GlyphConfig(palette=["a", "b", "c"]),
            renderer=renderer,
            processing_logger=processing_logger,
        )

        compositor.composite(base_image, [rect_face(0, 0, 5, 5), Face(), rect_face(9, 9, 5, 5)])

        assert [glyph for glyph, _, _ in renderer.calls] == ["a", "c"]
        assert processing_logger.stats.faces_masked == 2
        assert processing_logger.stats.faces_skipped == 1

    def test_does_not_reorder_faces(self, base_image):
        """Test faces are drawn in the given order even when unsorted."""
        renderer = RecordingRenderer()
        compositor = OverlayCompositor(GlyphConfig(palette=["a", "b"]), renderer=renderer)

        compositor.composite(base_image, [rect_face(40, 40, 4, 4), rect_face(0, 0, 4, 4)])

        assert renderer.calls == [("a", (42, 42), 4), ("b", (2, 2), 4)]

    def test_rgba_base_flattened(self):
        """Test a transparent base becomes an RGB raster of the same size."""
        base = Image.new("RGBA", (20, 10), (255, 0, 0, 255))

        raster = OverlayCompositor.create_raster(base)

        assert raster.mode == "RGB"
        assert raster.size == (20, 10)
        assert raster.getpixel((5, 5)) == (255, 0, 0)

    def test_grayscale_base(self):
        """Test a grayscale base is drawn into an RGB raster."""
        base = Image.new("L", (12, 7), 200)

        raster = OverlayCompositor.create_raster(base)

        assert raster.size == (12, 7)
        assert raster.getpixel((0, 0)) == (200, 200, 200)


class TestCompositingWithRealGlyphs:
    """Tests that draw real glyphs with Pillow's built-in font."""

    def test_glyph_changes_face_pixels(self, no_system_font):  # noqa: ARG002
        """Test a glyph darkens the face region and leaves the rest alone."""
        base = Image.new("RGB", (120, 100), "white")
        compositor = OverlayCompositor(GlyphConfig(palette=["M"]))

        raster = compositor.composite(base, [rect_face(10, 10, 40, 50)])

        assert raster.size == base.size
        face_region = raster.crop((10, 10, 50, 60)).convert("L")
        assert face_region.getextrema()[0] < 128
        assert raster.getpixel((110, 90)) == (255, 255, 255)

    @pytest.mark.parametrize(
        "face",
        [
            rect_face(-30, -30, 80, 80),
            rect_face(100, 80, 60, 60),
            rect_face(0, 0, 500, 20),
        ],
    )
    def test_size_preserved_when_glyph_overflows(self, no_system_font, face):  # noqa: ARG002
        """Test glyphs past the image edge never resize the raster."""
        base = Image.new("RGB", (120, 100), "white")
        compositor = OverlayCompositor(GlyphConfig(palette=["M"]))

        raster = compositor.composite(base, [face])

        assert raster.size == (120, 100)

    def test_zero_width_face_draws_nothing(self, no_system_font):  # noqa: ARG002
        """Test a degenerate box is accepted and leaves the image unchanged."""
        base = Image.new("RGB", (40, 40), "white")
        compositor = OverlayCompositor(GlyphConfig(palette=["M"]))

        raster = compositor.composite(base, [Face([Vertex(20, 5), Vertex(20, 35)])])

        assert raster.tobytes() == base.tobytes()

    def test_scaled_bitmap_path(self, no_system_font):  # noqa: ARG002
        """Test the strike-and-scale path draws around the box center."""
        base = Image.new("RGB", (120, 100), "white")
        config = GlyphConfig(palette=["M"], strike_size=64)
        compositor = OverlayCompositor(config)

        assert compositor.renderer.is_bitmap
        raster = compositor.composite(base, [rect_face(40, 30, 40, 40)])

        assert raster.size == base.size
        assert raster.crop((40, 30, 80, 70)).convert("L").getextrema()[0] < 128
        assert raster.getpixel((2, 2)) == (255, 255, 255)


class TestGlyphRenderer:
    """Tests for GlyphRenderer."""

    def test_builtin_font_when_none_found(self, no_system_font):  # noqa: ARG002
        """Test the renderer falls back to Pillow's font."""
        renderer = GlyphRenderer(GlyphConfig())

        assert renderer.font_path is None
        assert not renderer.is_bitmap

    def test_strike_override(self, no_system_font):  # noqa: ARG002
        """Test an explicit strike size switches to bitmap rendering."""
        renderer = GlyphRenderer(GlyphConfig(strike_size=109))

        assert renderer.is_bitmap

    def test_missing_font_file(self, tmp_path):
        """Test a configured font that does not exist is a render error."""
        with pytest.raises(RenderError, match="Cannot read emoji font"):
            GlyphRenderer(GlyphConfig(font_path=tmp_path / "missing.ttf"))

    def test_invalid_font_file(self, tmp_path):
        """Test a configured file that is not a font is a render error."""
        bogus = tmp_path / "bogus.ttf"
        bogus.write_bytes(b"not a font at all")

        with pytest.raises(RenderError):
            GlyphRenderer(GlyphConfig(font_path=bogus))

    def test_draw_zero_size_is_noop(self, no_system_font):  # noqa: ARG002
        """Test sizes below one pixel draw nothing."""
        raster = Image.new("RGB", (10, 10), "white")

        GlyphRenderer(GlyphConfig()).draw(raster, "M", (5, 5), 0)

        assert raster.getextrema() == ((255, 255), (255, 255), (255, 255))

    def test_draw_failure_wrapped(self, no_system_font, monkeypatch):  # noqa: ARG002
        """Test Pillow errors surface as GlyphRenderError."""
        renderer = GlyphRenderer(GlyphConfig())

        def broken_font(_size):
            raise OSError("invalid pixel size")

        monkeypatch.setattr(renderer, "_font", broken_font)

        with pytest.raises(GlyphRenderError, match="invalid pixel size"):
            renderer.draw(Image.new("RGB", (10, 10)), "😊", (5, 5), 8)
