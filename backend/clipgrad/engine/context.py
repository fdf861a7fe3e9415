"""LineContext — state for one clip line flowing through the gradient pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field

from clipgrad.engine.bands import GradientStack
from clipgrad.models.path import ClipPath


@dataclass
class LineContext:
    """One input clip and everything computed from it."""

    index: int
    # Clip argument text: vector drawing or x1,y1,x2,y2
    clip: str
    # Source was an inverse clip
    inverse: bool = False
    path: ClipPath = field(default_factory=ClipPath)
    stack: GradientStack | None = None
    error: str = ""
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.stack is not None and not self.error

    @property
    def exponent(self) -> int:
        return self.path.exponent
