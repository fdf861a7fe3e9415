"""Vector clip path model — vertices tagged with their drawing command."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field


class VertexKind(str, enum.Enum):
    MOVE = "m"
    LINE = "l"
    # Bezier control/end points are carried through as-is, never offset specially
    CURVE = "b"


@dataclass(frozen=True)
class Vertex:
    """A single path vertex. ``kind`` describes how it connects to the previous one."""

    kind: VertexKind
    x: int
    y: int

    @property
    def xy(self) -> tuple[int, int]:
        return (self.x, self.y)

    def moved(self, x: int, y: int) -> Vertex:
        return Vertex(self.kind, x, y)

    def retagged(self, kind: VertexKind) -> Vertex:
        return Vertex(kind, self.x, self.y)


@dataclass(frozen=True)
class ClipPath:
    """Implicitly closed polygon plus the drawing scale exponent it was written in."""

    vertices: tuple[Vertex, ...] = field(default_factory=tuple)
    # Drawing scale exponent (1-4); coordinates are in units of 1 / 2**(exponent-1) px
    exponent: int = 1

    def __post_init__(self) -> None:
        # Accept any iterable of vertices
        object.__setattr__(self, "vertices", tuple(self.vertices))

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __getitem__(self, index: int) -> Vertex:
        return self.vertices[index]

    def __add__(self, other: ClipPath) -> ClipPath:
        return ClipPath(self.vertices + other.vertices, self.exponent)

    @property
    def is_empty(self) -> bool:
        return len(self.vertices) == 0

    @property
    def scale(self) -> int:
        return 2 ** (self.exponent - 1)

    @property
    def points(self) -> list[tuple[int, int]]:
        return [v.xy for v in self.vertices]

    def with_vertices(self, vertices: list[Vertex] | tuple[Vertex, ...]) -> ClipPath:
        return ClipPath(tuple(vertices), self.exponent)
