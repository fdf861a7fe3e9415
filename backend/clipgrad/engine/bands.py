"""Band generation — nested offset contours, one interpolated color per ring.

Rendering the layers of a :class:`GradientStack` in order (each clipped to its
band) paints a gradient that follows the clip edge. Ring ``j`` is the area
between contour ``j`` and contour ``j - 1`` shrunk by one pixel: the shrunk
previous contour is reversed and appended to the current one, so a single
nonzero-winding clip cuts it out.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from clipgrad.clip.serializer import format_clip
from clipgrad.engine.config import ColorStop, GradientConfig
from clipgrad.engine.offset import grow
from clipgrad.errors import UnusableShapeError
from clipgrad.models.path import ClipPath
from clipgrad.utils.color import Color, interpolate_color
from clipgrad.utils.geometry import distinct_points, reverse_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Band:
    """One clipped layer: ``outer`` minus the already-reversed ``hole``."""

    outer: ClipPath
    hole: ClipPath | None = None
    # Inverse clips show everything outside the path
    inverse: bool = False
    colors: dict[int, Color] = field(default_factory=dict)

    @property
    def path(self) -> ClipPath:
        if self.hole is None:
            return self.outer
        return self.outer + self.hole

    @property
    def clip_tag(self) -> str:
        return "iclip" if self.inverse else "clip"

    def clip_text(self) -> str:
        return format_clip(self.path)


@dataclass
class GradientStack:
    # Innermost first
    bands: list[Band]
    # Remainder past the last ring, painted with the end colors
    cap: Band

    @property
    def layers(self) -> list[Band]:
        return [*self.bands, self.cap]


def band_colors(stops: list[ColorStop], factor: float) -> dict[int, Color]:
    return {stop.channel: interpolate_color(factor, stop.start, stop.end) for stop in stops}


def generate_bands(path: ClipPath, config: GradientConfig, inverse: bool = False) -> GradientStack:
    """Build the ring stack for ``path``.

    ``inverse`` marks the source as an inverse clip: the gradient then fills
    everything outside the shape and runs in the mirrored direction.
    Radii are in pixels and converted to the path's drawing scale.
    """
    if len(distinct_points(path.points)) < 3:
        raise UnusableShapeError(f"Clip shape has {len(path)} vertices, need at least 3 distinct points")

    unit = path.scale
    thickness = config.thickness
    step = config.step
    edge = config.edge_offset
    steps = math.ceil(thickness / step)
    divisor = math.ceil(thickness / step + 1)

    def contour(source: ClipPath, radius: float) -> ClipPath:
        return grow(source, radius * unit)

    if inverse:
        innermost = contour(path, thickness - edge - 1)
    else:
        innermost = contour(path, -edge)
    bands = [
        Band(
            innermost,
            inverse=inverse,
            colors={stop.channel: stop.start for stop in config.stops},
        )
    ]

    previous = innermost
    for j in range(1, steps + 1):
        factor = j / divisor
        if inverse:
            factor = 1 - factor

        radius = j * step - edge if j * step < thickness else thickness - edge
        boundary = contour(path, radius)
        hole = reverse_path(contour(previous, -1))
        if hole.is_empty:
            logger.debug("Ring %d: previous contour collapsed, no hole", j)
        bands.append(Band(boundary, None if hole.is_empty else hole, colors=band_colors(config.stops, factor)))
        previous = boundary

    end_colors = {stop.channel: stop.end for stop in config.stops}
    if inverse:
        cap = Band(contour(path, step - edge), inverse=False, colors=end_colors)
    else:
        cap = Band(contour(previous, -1), inverse=True, colors=end_colors)

    logger.info(
        "Generated %d bands (+cap): thickness=%.1f step=%d position=%s inverse=%s",
        len(bands), thickness, step, config.position.value, inverse,
    )
    return GradientStack(bands=bands, cap=cap)
