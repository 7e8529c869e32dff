"""
Shared fixtures for the writing service tests.
"""

import pytest

from helpers import make_definition


@pytest.fixture
def single_stroke_char():
    """One horizontal line across the middle."""
    return make_definition([(100, 150), (200, 150)], char_id="one")


@pytest.fixture
def three_stroke_char():
    """Three separated strokes with non-zero gaps between them."""
    return make_definition(
        [(100, 50), (100, 120), (100, 180)],
        [(80, 100), (120, 100)],
        [(160, 140), (160, 200), (140, 220)],
        char_id="three",
    )
