"""Unit tests for grapheme splitting and font key lookup."""

import pytest

from blockfont.utils.text import graphemes, lookup_key

COMBINING_ACUTE = '\u0301'


@pytest.mark.parametrize("text,expected", [
    ('abc', ['a', 'b', 'c']),
    ('', []),
    ('e\u0301a', ['e\u0301', 'a']),
    ('❤\ufe0f!', ['❤\ufe0f', '!']),
    ('\U0001F469\u200d\U0001F4BB x', ['\U0001F469\u200d\U0001F4BB', ' ', 'x']),
    ('\U0001F44D\U0001F3FD', ['\U0001F44D\U0001F3FD']),
])
def test_graphemes(text, expected):
    assert graphemes(text) == expected


def test_leading_combining_mark_stands_alone():
    assert graphemes(COMBINING_ACUTE + 'a') == [COMBINING_ACUTE, 'a']


class TestLookupKey:

    def test_exact(self, demo_font):
        assert lookup_key(demo_font, 'A') == 'A'

    def test_decomposed_matches_composed_key(self, demo_font):
        assert lookup_key(demo_font, 'e' + COMBINING_ACUTE) == 'é'

    def test_base_character_fallback(self, demo_font):
        assert lookup_key(demo_font, 'o' + COMBINING_ACUTE) == 'o'

    def test_missing(self, demo_font):
        assert lookup_key(demo_font, 'z') is None
