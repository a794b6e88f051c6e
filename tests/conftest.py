"""Shared pytest fixtures for the blockfont test suite.

Fixtures:
    demo_font: Small in-memory FontData with baseline letters and descenders
    no_sample_font: FontData without any baseline sample letters
    fonts_dir: Temporary directory holding .bit font files
    render_service: Fresh RenderService

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
    integration: Mark test as integration test
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root and test dir to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from blockfont import loader
from blockfont.api.services import RenderService
from blockfont.domain.glyph import FontData

from glyph_samples import DEMO_CHARACTERS


# -----------------------------------------------------------------------------
# Pytest Markers
# -----------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# -----------------------------------------------------------------------------
# Font Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def demo_font():
    """Return a small FontData with baseline letters and a descender.

    Baseline letters a, e, o end on row 2; 'g' reaches row 3.

    Returns:
        FontData: In-memory font named 'demo'.
    """
    return FontData.from_dict('demo', DEMO_CHARACTERS)


@pytest.fixture
def no_sample_font():
    """Return a FontData with none of the baseline sample letters.

    Returns:
        FontData: Font holding only uppercase letters.
    """
    return FontData.from_dict('caps', {
        'A': DEMO_CHARACTERS['A'],
        'B': DEMO_CHARACTERS['B'],
    })


@pytest.fixture
def fonts_dir(tmp_path):
    """Return a temporary fonts directory with valid and broken fonts.

    Contains:
        Demo.bit: the demo font
        broken.bit: invalid JSON
        nochars.bit: JSON without a characters mapping

    Returns:
        pathlib.Path: Directory path.
    """
    (tmp_path / 'Demo.bit').write_text(
        json.dumps({'name': 'demo', 'author': 'tests', 'characters': DEMO_CHARACTERS}),
        encoding='utf-8',
    )
    (tmp_path / 'broken.bit').write_text('{"name": "broken", ', encoding='utf-8')
    (tmp_path / 'nochars.bit').write_text(json.dumps({'name': 'nochars'}), encoding='utf-8')
    (tmp_path / 'readme.txt').write_text('not a font', encoding='utf-8')
    loader.clear_cache()
    yield tmp_path
    loader.clear_cache()


@pytest.fixture
def render_service():
    """Return a RenderService with an empty metrics cache."""
    return RenderService()
