"""Vector clip parser — drawing-command text → ClipPath.

Accepts the ASS drawing subset used by vector clips (``m``/``l``/``b`` followed
by integer coordinate pairs, optionally prefixed by a scale exponent) and the
rectangular ``x1,y1,x2,y2`` clip form.
"""

from __future__ import annotations

import logging
import re

from clipgrad.models.path import ClipPath, Vertex, VertexKind

logger = logging.getLogger(__name__)

_EXPONENT_RE = re.compile(r"^\s*([1-4]),")
_COMMAND_RE = re.compile(r"([mlb])([\d\s\-]+)")
_PAIR_RE = re.compile(r"([\d\-]+)\s+([\d\-]+)")
_RECT_RE = re.compile(r"([\d\-\.]+),([\d\-\.]+),([\d\-\.]+),([\d\-\.]+)")


def parse_path(text: str) -> tuple[ClipPath, int]:
    """Parse vector clip text into a path and its scale exponent.

    Malformed input never raises: it yields an empty path, which callers treat
    as "no usable shape".
    """
    exp_match = _EXPONENT_RE.match(text)
    exponent = int(exp_match.group(1)) if exp_match else 1

    vertices: list[Vertex] = []
    try:
        for cmd in _COMMAND_RE.finditer(text):
            kind = VertexKind(cmd.group(1))
            for pair in _PAIR_RE.finditer(cmd.group(2)):
                vertices.append(Vertex(kind, int(pair.group(1)), int(pair.group(2))))
    except ValueError as e:
        logger.warning("Failed to parse clip path %r: %s", text, e)
        return ClipPath(exponent=exponent), exponent

    return ClipPath(tuple(vertices), exponent), exponent


def rect_to_vector(text: str) -> str | None:
    """Convert ``x1,y1,x2,y2`` into the equivalent four-corner drawing, or None."""
    match = _RECT_RE.search(text)
    if match is None:
        return None
    try:
        x1, y1, x2, y2 = (int(float(v)) for v in match.groups())
    except ValueError as e:
        logger.warning("Failed to parse rectangular clip %r: %s", text, e)
        return None
    return f"m {x1} {y1} l {x2} {y1} {x2} {y2} {x1} {y2}"


def parse_clip(text: str) -> ClipPath:
    """Parse either clip form into a path carrying its exponent."""
    vector = rect_to_vector(text)
    path, _ = parse_path(vector if vector is not None else text)
    logger.debug("Parsed clip: %d vertices, exponent %d", len(path), path.exponent)
    return path
