"""Shared test fixtures."""

from __future__ import annotations

import pytest

from clipgrad.clip.parser import parse_clip
from clipgrad.models.path import ClipPath


# Sample clips, as they appear inside \clip(...)

SQUARE_CLIP = "m 0 0 l 10 0 10 10 0 10"

RECT_CLIP = "0,0,100,50"

# Square with a narrow V notch cut down from the top edge
NOTCH_CLIP = "m 0 0 l 100 0 100 100 55 100 50 40 45 100 0 100"

# L-shaped outline with one reflex corner
ELL_CLIP = "m 0 0 l 60 0 60 20 20 20 20 60 0 60"

CURVE_CLIP = "m 0 0 l 40 0 b 50 0 60 10 60 20 l 60 40 0 40"

SCALED_CLIP = "3,m 0 0 l 400 0 400 200 0 200"

RED = (255, 0, 0)
BLUE = (0, 0, 255)


@pytest.fixture
def square() -> ClipPath:
    return parse_clip(SQUARE_CLIP)


@pytest.fixture
def rect() -> ClipPath:
    return parse_clip(RECT_CLIP)


@pytest.fixture
def notch() -> ClipPath:
    return parse_clip(NOTCH_CLIP)


@pytest.fixture
def ell() -> ClipPath:
    return parse_clip(ELL_CLIP)
