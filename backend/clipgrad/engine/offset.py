"""Polygon offset ("grow") with miter correction and crossover cleanup.

Each vertex is pushed along the bisector of its two edges by a radius scaled
with 1/cos(half-angle), which keeps both adjacent edges at exactly ``radius``
from their source edge. Offsetting a sharp concave feature can flip an edge
backward relative to its source; those crossovers are collapsed by merging
the offending neighbors into weighted-average points.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

from clipgrad.models.path import ClipPath, Vertex
from clipgrad.utils.geometry import CircularView, distinct_points, signed_winding
from clipgrad.utils.math_helpers import heading, round_half_up

logger = logging.getLogger(__name__)

# Below this the miter is near-infinite (edge folds back on itself); fall back to the plain radius
_MITER_EPSILON = 1e-5


@dataclass
class MergeBucket:
    """Run of neighboring offset points that collapsed into one position."""

    # Source vertex indices in ring order; a run may wrap past the last vertex
    members: list[int]
    # Coordinate sums over the members, exact so the merge order never matters
    sum_x: int
    sum_y: int

    @property
    def weight(self) -> int:
        return len(self.members)

    @property
    def x(self) -> float:
        return self.sum_x / self.weight

    @property
    def y(self) -> float:
        return self.sum_y / self.weight

    @property
    def first(self) -> int:
        return self.members[0]

    @property
    def last(self) -> int:
        return self.members[-1]

    def absorb(self, other: MergeBucket) -> MergeBucket:
        return MergeBucket(
            members=[*self.members, *other.members],
            sum_x=self.sum_x + other.sum_x,
            sum_y=self.sum_y + other.sum_y,
        )


def grow(path: ClipPath, radius: float, scale: float = 1) -> ClipPath:
    """Offset ``path`` outward by ``radius`` (inward when negative).

    Coordinates are multiplied by ``scale`` and the offset applied in steps of
    ``scale``; ``radius == 0`` is a pure rescale. Paths with fewer than three
    distinct points cannot be offset and yield an empty path.
    """
    if len(distinct_points(path.points)) < 3:
        logger.debug("grow: %d vertices, fewer than 3 usable, returning empty path", len(path))
        return path.with_vertices([])

    winding = signed_winding(path)
    ring = CircularView(path.vertices)

    moved: list[Vertex] = []
    for i, vertex in enumerate(path):
        prev_pt = _nearest_distinct(ring, i, ring.prev)
        next_pt = _nearest_distinct(ring, i, ring.next)

        rot1 = heading(vertex.x - prev_pt.x, vertex.y - prev_pt.y)
        rot2 = heading(next_pt.x - vertex.x, next_pt.y - vertex.y)
        turn = (rot2 - rot1) % 360.0

        bisector = (0.5 * turn + 90.0) % 180.0
        if winding > 0:
            bisector += 180.0

        moved.append(_offset_vertex(vertex, radius, scale, rot1, bisector, winding))

    merged = _resolve_crossovers(path.vertices, moved)
    logger.debug("grow: r=%.2f scale=%s winding=%+d, %d vertices", radius, scale, winding, len(path))
    return path.with_vertices(merged)


def _nearest_distinct(ring: CircularView[Vertex], index: int, step: Callable[[int], int]) -> Vertex:
    """Walk from ``index`` in one direction until a vertex at a different position is found."""
    origin = ring[index].xy
    j = step(index)
    while ring[j].xy == origin:
        j = step(j)
    return ring[j]


def _offset_vertex(
    vertex: Vertex,
    radius: float,
    scale: float,
    rot1: float,
    bisector: float,
    winding: int,
) -> Vertex:
    x = vertex.x * scale
    y = vertex.y * scale
    if radius != 0:
        miter = math.cos(math.radians(winding * 90.0 + bisector))
        adjusted = radius if abs(miter) < _MITER_EPSILON else radius / abs(miter)
        direction = math.radians(bisector + rot1)
        x += scale * round_half_up(adjusted * math.cos(direction))
        y += scale * round_half_up(adjusted * math.sin(direction))
    return vertex.moved(round_half_up(x), round_half_up(y))


def _resolve_crossovers(source: tuple[Vertex, ...], moved: list[Vertex]) -> list[Vertex]:
    """Merge neighbors whose offset edge runs against its source edge, until none remain.

    The ring is closed: the last and first points are neighbors like any
    other pair, so the result does not depend on where the path starts.
    """
    buckets = [MergeBucket([i], v.x, v.y) for i, v in enumerate(moved)]

    passes = 0
    while True:
        buckets, merges = _merge_pass(buckets, source)
        passes += 1
        if merges == 0:
            break
        logger.debug("Crossover pass %d merged %d points", passes, merges)

    positions: dict[int, tuple[int, int]] = {}
    for bucket in buckets:
        xy = (round_half_up(bucket.x), round_half_up(bucket.y))
        for i in bucket.members:
            positions[i] = xy
    return [vertex.moved(*positions[i]) for i, vertex in enumerate(moved)]


def _crosses(left: MergeBucket, right: MergeBucket, source: tuple[Vertex, ...]) -> bool:
    a = source[left.last]
    b = source[right.first]
    dx, dy = b.x - a.x, b.y - a.y
    ndx, ndy = right.x - left.x, right.y - left.y
    return dx * ndx < 0 or dy * ndy < 0


def _merge_pass(buckets: list[MergeBucket], source: tuple[Vertex, ...]) -> tuple[list[MergeBucket], int]:
    # Pairs are compared at their pass-start positions; a run of crossovers chains into one bucket
    if len(buckets) < 2:
        return buckets, 0

    ring = CircularView(buckets)
    flips = [_crosses(ring[i], ring[ring.next(i)], source) for i in range(len(ring))]
    if all(flips):
        merged = buckets[0]
        for bucket in buckets[1:]:
            merged = merged.absorb(bucket)
        return [merged], len(buckets) - 1

    # Start right after a clean pair so no run straddles the list ends
    start = flips.index(False) + 1
    order = buckets[start:] + buckets[:start]
    crossed = flips[start:] + flips[:start]

    result = [order[0]]
    for i in range(1, len(order)):
        if crossed[i - 1]:
            result[-1] = result[-1].absorb(order[i])
        else:
            result.append(order[i])
    return result, sum(crossed)
