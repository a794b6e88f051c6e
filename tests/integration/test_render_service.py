"""Integration tests for the render service.

Tests the full pipeline of blockfont.api.services with the in-memory demo
font: scaling, bottom padding, kerning, spacing, alignment and color
compositing.
"""

import threading
import unittest
from concurrent.futures import ThreadPoolExecutor

import pytest

from blockfont import load_font
from blockfont.api.services import RenderService, build_font_metrics, render_text
from blockfont.colors import RESET
from blockfont.domain.glyph import FontData
from blockfont.domain.options import InvalidOptionError, RenderOptions, TextAlignment
from glyph_samples import DEMO_CHARACTERS

pytestmark = pytest.mark.integration

TIGHT = RenderOptions(char_spacing=0)

# 'l' bottom-padded to the demo font's 4-row glyph height
L_COLUMN = ['█', '█', '▀', ' ']


class TestFontMetrics:
    """Tests for build_font_metrics and its memoization."""

    def test_demo_metrics(self, demo_font):
        metrics = build_font_metrics(demo_font, 1.0)
        assert metrics.baseline == 2
        assert metrics.glyph_height == 4
        assert metrics.descenders['g'].has_descender
        assert metrics.glyphs['l'] == ('█', '█', '▀')

    def test_scaled_metrics(self, demo_font):
        metrics = build_font_metrics(demo_font, 2.0)
        assert metrics.glyph_height == 8
        assert metrics.glyphs['l'][0] == '██'

    def test_memoized_per_scale(self, render_service, demo_font):
        first = render_service.font_metrics(demo_font, 1.0)
        assert render_service.font_metrics(demo_font, 1) is first
        assert render_service.font_metrics(demo_font, 2.0) is not first

    def test_clear_cache(self, render_service, demo_font):
        first = render_service.font_metrics(demo_font, 1.0)
        render_service.clear_cache()
        assert render_service.font_metrics(demo_font, 1.0) is not first

    def test_concurrent_readers_share_entry(self, render_service, demo_font):
        barrier = threading.Barrier(8)

        def fetch(_):
            barrier.wait()
            return render_service.font_metrics(demo_font, 4.0)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(fetch, range(8)))
        assert all(result is results[0] for result in results)


class TestRenderCanvas:
    """Tests for RenderService.render_canvas."""

    def test_single_glyph_padded_to_font_height(self, render_service, demo_font):
        assert render_service.render_canvas('l', demo_font, TIGHT) == L_COLUMN

    def test_kerning_keeps_glyphs_apart(self, render_service, demo_font):
        canvas = render_service.render_canvas('ll', demo_font, TIGHT)
        assert canvas == ['█ █', '█ █', '▀ ▀', '   ']

    def test_char_spacing_added_to_kerning(self, render_service, demo_font):
        canvas = render_service.render_canvas('ll', demo_font, RenderOptions(char_spacing=2))
        assert canvas[0] == '█   █'

    def test_word_spacing(self, render_service, demo_font):
        canvas = render_service.render_canvas('l l', demo_font,
                                              RenderOptions(char_spacing=0, word_spacing=2))
        assert canvas[0] == '█    █'
        assert canvas[2] == '▀    ▀'

    def test_missing_characters_skipped(self, render_service, demo_font):
        assert (render_service.render_canvas('lzl', demo_font, TIGHT)
                == render_service.render_canvas('ll', demo_font, TIGHT))

    def test_line_spacing(self, render_service, demo_font):
        canvas = render_service.render_canvas('l\nl', demo_font,
                                              RenderOptions(char_spacing=0, line_spacing=1))
        assert canvas == L_COLUMN + [' '] + L_COLUMN

    @pytest.mark.parametrize("text", ['l\r\nl', 'l\rl'])
    def test_carriage_return_line_breaks(self, render_service, demo_font, text):
        options = RenderOptions(char_spacing=0, line_spacing=1)
        canvas = render_service.render_canvas(text, demo_font, options)
        assert canvas == render_service.render_canvas('l\nl', demo_font, options)
        assert canvas[0] == '█'

    def test_no_line_spacing(self, render_service, demo_font):
        canvas = render_service.render_canvas('l\nl', demo_font,
                                              RenderOptions(char_spacing=0, line_spacing=0))
        assert canvas == L_COLUMN + L_COLUMN

    @pytest.mark.parametrize("alignment,expected", [
        (TextAlignment.LEFT, '█  '),
        (TextAlignment.CENTER, ' █ '),
        (TextAlignment.RIGHT, '  █'),
    ])
    def test_alignment(self, render_service, demo_font, alignment, expected):
        options = RenderOptions(char_spacing=0, line_spacing=0, alignment=alignment)
        canvas = render_service.render_canvas('ll\nl', demo_font, options)
        assert canvas[0] == '█ █'
        assert canvas[4] == expected

    def test_descender_shares_baseline(self, render_service, demo_font):
        canvas = render_service.render_canvas('lg', demo_font, TIGHT)
        assert len(canvas) == 4
        assert len({len(row) for row in canvas}) == 1
        # 'l' ends on the baseline row, 'g' continues below it
        assert canvas[2].startswith('▀')
        assert canvas[3].strip() == '▀▀'

    def test_accented_lookup(self, render_service, demo_font):
        assert (render_service.render_canvas('e\u0301', demo_font, TIGHT)
                == render_service.render_canvas('é', demo_font, TIGHT))

    def test_empty_text(self, render_service, demo_font):
        assert render_service.render_canvas('', demo_font) == ['', '', '', '']

    def test_invalid_options(self, render_service, demo_font):
        with pytest.raises(InvalidOptionError):
            render_service.render_canvas('l', demo_font, RenderOptions(scale_factor=3))

    def test_font_by_name(self, fonts_dir, demo_font):
        service = RenderService(font_loader=lambda name: load_font(name, fonts_dir))
        assert (service.render_canvas('Ba', 'demo', TIGHT)
                == service.render_canvas('Ba', demo_font, TIGHT))

    def test_font_without_space_glyph(self, render_service):
        font = FontData.from_dict('nospace', {'l': ['█']})
        canvas = render_service.render_canvas('l l', font,
                                              RenderOptions(char_spacing=0, word_spacing=0))
        assert canvas == ['█  █']


class TestRender(unittest.TestCase):
    """Tests for colored output."""

    def setUp(self):
        self.font = FontData.from_dict('demo', DEMO_CHARACTERS)

    def test_colored_lines(self):
        lines = RenderService().render('l', self.font, TIGHT)
        self.assertEqual(len(lines), 4)
        for line in lines[:3]:
            self.assertTrue(line.endswith(RESET))
        self.assertEqual(lines[3], ' ')

    def test_render_text_overrides(self):
        lines = render_text('ll', self.font, color=False, char_spacing=0)
        self.assertEqual(lines[0], '█ █')

    def test_render_text_keeps_base_options(self):
        base = RenderOptions(char_spacing=0, line_spacing=0)
        lines = render_text('l\nl', self.font, base, color=False)
        self.assertEqual(len(lines), 8)
        self.assertEqual(base.line_spacing, 0)


class TestBundledFontRendering:

    @pytest.mark.parametrize("scale,height", [(0.5, 2), (1.0, 4), (2.0, 8), (4.0, 16)])
    def test_scales(self, scale, height):
        canvas = render_text('Hey, you!', 'blocky', color=False, scale_factor=scale)
        assert len(canvas) == height
        assert len({len(row) for row in canvas}) == 1

    def test_tiny_font(self):
        canvas = render_text('HI', 'tiny', color=False, char_spacing=0)
        assert len(canvas) == 2
        assert canvas[0].startswith('█▄█')
