"""Gradient configuration — supplied by the caller for every run."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field

from clipgrad.errors import GradientConfigError
from clipgrad.utils.color import Color

# Channel index → what it colors
CHANNELS = {1: "fill", 2: "secondary", 3: "border", 4: "shadow"}

MIN_STEP = 1
MAX_STEP = 20


class GradientPosition(str, enum.Enum):
    """Where the gradient sits relative to the clip edge."""

    OUTSIDE = "outside"
    MIDDLE = "middle"
    INSIDE = "inside"


@dataclass(frozen=True)
class ColorStop:
    channel: int
    start: Color
    end: Color

    def __post_init__(self) -> None:
        if self.channel not in CHANNELS:
            raise GradientConfigError(f"Color channel must be 1-4, got {self.channel}")


@dataclass
class GradientConfig:
    """Thickness and step are in pixels; thickness moves in half-pixel increments."""

    thickness: float = 20.0
    position: GradientPosition = GradientPosition.OUTSIDE
    step: int = 1
    stops: list[ColorStop] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.position = GradientPosition(self.position)
        if self.thickness < 0:
            raise GradientConfigError(f"Gradient thickness must be non-negative, got {self.thickness}")
        if (self.thickness * 2) != int(self.thickness * 2):
            raise GradientConfigError(f"Gradient thickness must be a multiple of 0.5, got {self.thickness}")
        if not MIN_STEP <= self.step <= MAX_STEP:
            raise GradientConfigError(f"Step size must be {MIN_STEP}-{MAX_STEP}, got {self.step}")
        channels = [s.channel for s in self.stops]
        if len(channels) != len(set(channels)):
            raise GradientConfigError(f"Duplicate color channels: {channels}")

    @property
    def edge_offset(self) -> float:
        """How far inside the clip edge the gradient starts."""
        if self.position is GradientPosition.INSIDE:
            return self.thickness
        if self.position is GradientPosition.MIDDLE:
            return self.thickness / 2
        return 0.0


def color_stops_from_pairs(pairs: Mapping[int, tuple[Color, Color]]) -> list[ColorStop]:
    """Build stops from channel → (start, end), skipping channels that do not change."""
    return [
        ColorStop(channel, start, end)
        for channel, (start, end) in sorted(pairs.items())
        if start != end
    ]
