"""Color helpers — RGB parsing, formatting, interpolation. No engine imports.

Colors are plain ``(r, g, b)`` int triples. Two text forms are understood:
CSS-style hex (``#RRGGBB``) and ASS override colors (``&HBBGGRR&``, optionally
with a leading alpha byte, which is ignored).
"""

from __future__ import annotations

import re

import numpy as np

Color = tuple[int, int, int]

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")
_ASS_RE = re.compile(r"^&H(?:[0-9a-fA-F]{2})?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})&?$")


def parse_color(text: str) -> Color:
    """Parse ``#RRGGBB``, ``RRGGBB``, ``&HBBGGRR&`` or ``&HAABBGGRR&`` into RGB."""
    s = text.strip()
    m = _ASS_RE.match(s)
    if m:
        b, g, r = (int(part, 16) for part in m.groups())
        return (r, g, b)
    m = _HEX_RE.match(s)
    if m:
        r, g, b = (int(part, 16) for part in m.groups())
        return (r, g, b)
    raise ValueError(f"Unrecognized color: {text!r}")


def to_hex(color: Color) -> str:
    r, g, b = color
    return f"#{r:02X}{g:02X}{b:02X}"


def to_ass(color: Color) -> str:
    """ASS override form, blue first: (255, 0, 0) → ``&H0000FF&``."""
    r, g, b = color
    return f"&H{b:02X}{g:02X}{r:02X}&"


def interpolate_color(factor: float, start: Color, end: Color) -> Color:
    """Linear blend per channel; 0 → start, 1 → end, rounded half-up."""
    t = min(max(float(factor), 0.0), 1.0)
    a = np.asarray(start, dtype=np.float64)
    b = np.asarray(end, dtype=np.float64)
    mixed = np.floor(a + (b - a) * t + 0.5).astype(int)
    r, g, bl = (int(v) for v in np.clip(mixed, 0, 255))
    return (r, g, bl)
