# -*- coding: utf-8 -*-
"""Polygon winding normalization.

Output rings follow the right-hand rule (counterclockwise, RFC 7946).
Winding is detected with the shoelace-style sum

    Σ (x[i+1] - x[i]) * (y[i+1] + y[i])

taken over consecutive vertices, wrapping from the last vertex back to
the first. A positive sum means clockwise; zero (degenerate) and negative
sums are left untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field

from metes_lib.enums import Winding
from metes_lib.models import Vertex


def shoelace_sum(vertices: list[Vertex]) -> float:
    """Signed winding sum with wraparound."""
    total = 0.0
    n = len(vertices)
    for i in range(n):
        x1, y1 = vertices[i]
        x2, y2 = vertices[(i + 1) % n]
        total += (x2 - x1) * (y2 + y1)
    return total


def is_clockwise(vertices: list[Vertex]) -> bool:
    return shoelace_sum(vertices) > 0.0


def winding_of(vertices: list[Vertex]) -> Winding:
    return Winding.CLOCKWISE if is_clockwise(vertices) else Winding.COUNTERCLOCKWISE


def normalize_winding(vertices: list[Vertex]) -> list[Vertex]:
    """Return a counterclockwise copy of ``vertices`` (reversed if clockwise)."""
    result = list(vertices)
    if is_clockwise(result):
        result.reverse()
    return result


def close_ring(vertices: list[Vertex]) -> list[Vertex]:
    """Return ``vertices`` with the first vertex repeated at the end."""
    if not vertices:
        return []
    return [*vertices, vertices[0]]


@dataclass
class PolygonRing:
    """A normalized (counterclockwise) ring, not yet closed.

    ``source_winding`` records the winding of the traverse before
    normalization.
    """

    vertices: list[Vertex] = field(default_factory=list)
    source_winding: Winding = Winding.COUNTERCLOCKWISE

    @property
    def reversed(self) -> bool:
        return self.source_winding == Winding.CLOCKWISE

    @property
    def closed(self) -> list[Vertex]:
        """Vertices with the closure vertex appended."""
        return close_ring(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)


def normalize(vertices: list[Vertex]) -> PolygonRing:
    """Build a counterclockwise `PolygonRing` from a traverse."""
    return PolygonRing(
        vertices=normalize_winding(vertices),
        source_winding=winding_of(vertices),
    )
