"""Unit tests for color resolution and canvas compositing."""

import logging
import unittest

import pytest

from blockfont.colors import (
    ANSI_COLOR_MAP,
    RESET,
    InvalidColorError,
    colorize,
    dim,
    interpolate,
    parse_hex,
    resolve_color,
)
from blockfont.domain.options import (
    GradientDirection,
    GradientOptions,
    RenderOptions,
    ShadowOptions,
    ShadowStyle,
)

WHITE = '\x1b[38;2;255;255;255m'
DIM_WHITE = '\x1b[38;2;102;102;102m'


class TestParseHex(unittest.TestCase):

    def test_long_form(self):
        self.assertEqual(parse_hex('#FF8000'), (255, 128, 0))

    def test_short_form(self):
        self.assertEqual(parse_hex('#fff'), (255, 255, 255))

    def test_hash_optional(self):
        self.assertEqual(parse_hex('0a0b0c'), (10, 11, 12))

    def test_invalid(self):
        for value in ('zzz', '#12345', '', 'red'):
            with self.subTest(value=value):
                with self.assertRaises(InvalidColorError):
                    parse_hex(value)

    def test_not_a_string(self):
        with self.assertRaises(InvalidColorError):
            parse_hex(123)

    def test_is_value_error(self):
        self.assertTrue(issubclass(InvalidColorError, ValueError))


class TestResolveColor:
    """Tests for resolve_color function."""

    def test_ansi_code(self):
        assert resolve_color('31') == '#CD3131'

    def test_all_ansi_codes_are_hex(self):
        for code, value in ANSI_COLOR_MAP.items():
            assert parse_hex(value)
            assert resolve_color(code) == value

    def test_hex_normalized(self):
        assert resolve_color('#abc') == '#AABBCC'

    def test_empty_uses_default(self):
        assert resolve_color('') == '#FFFFFF'
        assert resolve_color(None, default='#000000') == '#000000'

    def test_invalid_logs_and_uses_default(self, caplog):
        with caplog.at_level(logging.WARNING, logger='blockfont.colors'):
            assert resolve_color('nope', default='#123456') == '#123456'
        assert 'nope' in caplog.text

    def test_ansi_table_read_only(self):
        with pytest.raises(TypeError):
            ANSI_COLOR_MAP['99'] = '#000000'


class TestInterpolate(unittest.TestCase):

    def test_endpoints(self):
        self.assertEqual(interpolate((0, 0, 0), (255, 100, 10), 0.0), (0, 0, 0))
        self.assertEqual(interpolate((0, 0, 0), (255, 100, 10), 1.0), (255, 100, 10))

    def test_clamped(self):
        self.assertEqual(interpolate((0, 0, 0), (200, 200, 200), 3.0), (200, 200, 200))
        self.assertEqual(interpolate((0, 0, 0), (200, 200, 200), -1.0), (0, 0, 0))

    def test_midpoint(self):
        self.assertEqual(interpolate((0, 0, 0), (200, 100, 50), 0.5), (100, 50, 25))

    def test_dim(self):
        self.assertEqual(dim((255, 255, 255)), (102, 102, 102))


class TestColorize(unittest.TestCase):
    """Tests for colorize function."""

    def test_solid_color(self):
        self.assertEqual(colorize(['█▀']), [WHITE + '█▀' + RESET])

    def test_ansi_text_color(self):
        lines = colorize(['█'], RenderOptions(text_color='31'))
        self.assertEqual(lines, ['\x1b[38;2;205;49;49m█' + RESET])

    def test_blank_cells_uncolored(self):
        self.assertEqual(colorize(['█ █', '']), [WHITE + '█ █' + RESET, '   '])

    def test_empty_canvas(self):
        self.assertEqual(colorize([]), [])

    def test_horizontal_gradient(self):
        options = RenderOptions(
            text_color='#000000',
            gradient=GradientOptions(enabled=True, end_color='#FFFFFF',
                                     direction=GradientDirection.LEFT_RIGHT),
        )
        lines = colorize(['██'], options)
        self.assertEqual(lines, ['\x1b[38;2;0;0;0m█' + WHITE + '█' + RESET])

    def test_reversed_vertical_gradient(self):
        options = RenderOptions(
            text_color='#000000',
            gradient=GradientOptions(enabled=True, end_color='#FFFFFF',
                                     direction=GradientDirection.DOWN_UP),
        )
        top, bottom = colorize(['█', '█'], options)
        self.assertTrue(top.startswith(WHITE))
        self.assertTrue(bottom.startswith('\x1b[38;2;0;0;0m'))

    def test_shadow_grows_canvas(self):
        options = RenderOptions(shadow=ShadowOptions(enabled=True, horizontal_offset=1,
                                                     vertical_offset=1))
        lines = colorize(['█'], options)
        self.assertEqual(lines, [
            WHITE + '█ ' + RESET,
            ' ' + DIM_WHITE + '▒' + RESET,
        ])

    def test_negative_shadow_offset(self):
        options = RenderOptions(shadow=ShadowOptions(enabled=True, horizontal_offset=-1,
                                                     vertical_offset=0,
                                                     style=ShadowStyle.DARK))
        self.assertEqual(colorize(['█'], options), [DIM_WHITE + '▓' + WHITE + '█' + RESET])

    def test_shadow_hidden_under_text(self):
        options = RenderOptions(shadow=ShadowOptions(enabled=True, horizontal_offset=1,
                                                     vertical_offset=0))
        self.assertEqual(colorize(['██'], options), [WHITE + '██' + DIM_WHITE + '▒' + RESET])


if __name__ == '__main__':
    unittest.main()
