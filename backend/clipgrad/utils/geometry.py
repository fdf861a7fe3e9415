"""Leaf-node path geometry helpers: cyclic access, winding, reversal."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Generic, TypeVar

from clipgrad.errors import UnusableShapeError
from clipgrad.models.path import ClipPath, Vertex, VertexKind
from clipgrad.utils.math_helpers import heading, normalize_turn

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CircularView(Generic[T]):
    """Index-based view over a closed sequence: the last item's successor is the first."""

    def __init__(self, items: Sequence[T]) -> None:
        self._items = items

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index % len(self._items)]

    def prev(self, index: int) -> int:
        return (index - 1) % len(self._items)

    def next(self, index: int) -> int:
        return (index + 1) % len(self._items)


def wrap(vertices: Sequence[T]) -> list[T]:
    """Pad a closed sequence with its last item in front and its first item behind.

    Real items sit at indices 1..n, so items[i - 1] and items[i + 1] are always valid.
    """
    if not vertices:
        return []
    return [vertices[-1], *vertices, vertices[0]]


def unwrap(wrapped: Sequence[T]) -> list[T]:
    """Drop the two sentinels added by :func:`wrap`."""
    return list(wrapped[1:-1])


def distinct_points(points: Sequence[tuple[float, float]]) -> list[tuple[float, float]]:
    """Collapse consecutive duplicate points, treating the sequence as closed."""
    result: list[tuple[float, float]] = []
    for pt in points:
        if not result or result[-1] != pt:
            result.append(pt)
    while len(result) > 1 and result[-1] == result[0]:
        result.pop()
    return result


def signed_winding(path: ClipPath) -> int:
    """Return +1 if the path turns counter-clockwise overall, -1 if clockwise.

    Counter-clockwise is taken in raw numeric coordinates, so
    ``m 0 0 l 10 0 10 10 0 10`` is +1. Each vertex contributes its turn in
    (-180, 180]; a full reversal counts as no turn. A zero total returns +1.
    """
    pts = distinct_points(path.points)
    if len(pts) < 3:
        raise UnusableShapeError(f"Need at least 3 distinct points for winding, got {len(pts)}")

    wrapped = wrap(pts)
    total = 0.0
    for i in range(1, len(wrapped) - 1):
        p, c, n = wrapped[i - 1], wrapped[i], wrapped[i + 1]
        rot1 = heading(c[0] - p[0], c[1] - p[1])
        rot2 = heading(n[0] - c[0], n[1] - c[1])
        total += normalize_turn(rot2 - rot1)

    logger.debug("Winding total turn %.1f° over %d points", total, len(pts))
    return -1 if total < 0 else 1


def reverse_path(path: ClipPath) -> ClipPath:
    """Reverse the drawing order of a path.

    The new start point is the last vertex not tagged as a move; it becomes the
    move. Every other vertex takes the kind of the vertex drawn after it in the
    original order, so each segment keeps its command when traversed backward.
    """
    if path.is_empty:
        return path

    last = len(path) - 1
    while last >= 0 and path[last].kind is VertexKind.MOVE:
        last -= 1
    if last < 0:
        raise UnusableShapeError("Path contains only move commands")

    carried = path[last].kind
    reversed_vertices: list[Vertex] = [path[last].retagged(VertexKind.MOVE)]
    for i in range(last - 1, -1, -1):
        vertex = path[i]
        reversed_vertices.append(vertex.retagged(carried))
        carried = vertex.kind

    return path.with_vertices(reversed_vertices)
