"""Write ClipPath back to drawing-command text."""

from __future__ import annotations

from clipgrad.models.path import ClipPath
from clipgrad.utils.math_helpers import round_half_up


def serialize_path(path: ClipPath) -> str:
    """Emit vertices in order, writing a command only when it changes."""
    tokens: list[str] = []
    current = None
    for vertex in path:
        if vertex.kind is not current:
            tokens.append(vertex.kind.value)
            current = vertex.kind
        tokens.append(str(round_half_up(vertex.x)))
        tokens.append(str(round_half_up(vertex.y)))
    return " ".join(tokens)


def format_clip(path: ClipPath) -> str:
    """Vector clip argument body: ``<exponent>,<drawing>``."""
    return f"{path.exponent},{serialize_path(path)}"
