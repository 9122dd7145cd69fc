# -*- coding: utf-8 -*-
"""Tests for winding normalization."""

import pytest

from metes_lib.enums import Winding
from metes_lib.models import Vertex
from metes_lib.polygon import PolygonRing
from metes_lib.polygon import close_ring
from metes_lib.polygon import is_clockwise
from metes_lib.polygon import normalize
from metes_lib.polygon import normalize_winding
from metes_lib.polygon import shoelace_sum
from metes_lib.polygon import winding_of

CLOCKWISE = [
    Vertex(0.0, 0.0),
    Vertex(0.0, 1.0),
    Vertex(1.0, 1.0),
    Vertex(1.0, 0.0),
]
COUNTERCLOCKWISE = list(reversed(CLOCKWISE))

TRIANGLES = [
    [Vertex(-100.0, 40.0), Vertex(-99.9, 40.0), Vertex(-99.95, 40.1)],
    [Vertex(-100.0, 40.0), Vertex(-99.95, 40.1), Vertex(-99.9, 40.0)],
    [Vertex(-80.0, 30.0), Vertex(-80.0, 30.0)],
    [Vertex(-80.0, 30.0)],
    [],
]


class TestShoelace:
    """Tests for the winding sum."""

    def test_clockwise_positive(self):
        assert shoelace_sum(CLOCKWISE) > 0
        assert is_clockwise(CLOCKWISE)
        assert winding_of(CLOCKWISE) == Winding.CLOCKWISE

    def test_counterclockwise_negative(self):
        assert shoelace_sum(COUNTERCLOCKWISE) < 0
        assert not is_clockwise(COUNTERCLOCKWISE)
        assert winding_of(COUNTERCLOCKWISE) == Winding.COUNTERCLOCKWISE

    def test_degenerate_is_zero(self):
        assert shoelace_sum([]) == 0.0
        assert shoelace_sum([Vertex(1.0, 2.0)]) == 0.0
        assert winding_of([]) == Winding.COUNTERCLOCKWISE


class TestNormalizeWinding:
    """Tests for normalize_winding."""

    def test_clockwise_is_reversed(self):
        assert normalize_winding(CLOCKWISE) == COUNTERCLOCKWISE

    def test_counterclockwise_untouched(self):
        assert normalize_winding(COUNTERCLOCKWISE) == COUNTERCLOCKWISE

    def test_input_not_mutated(self):
        vertices = list(CLOCKWISE)
        normalize_winding(vertices)
        assert vertices == CLOCKWISE

    @pytest.mark.parametrize("vertices", [CLOCKWISE, COUNTERCLOCKWISE, *TRIANGLES])
    def test_result_never_clockwise(self, vertices):
        assert shoelace_sum(normalize_winding(vertices)) <= 0

    @pytest.mark.parametrize("vertices", [CLOCKWISE, COUNTERCLOCKWISE, *TRIANGLES])
    def test_idempotent(self, vertices):
        once = normalize_winding(vertices)
        assert normalize_winding(once) == once


class TestCloseRing:
    """Tests for close_ring and PolygonRing."""

    def test_appends_first(self):
        closed = close_ring(COUNTERCLOCKWISE)
        assert len(closed) == len(COUNTERCLOCKWISE) + 1
        assert closed[0] == closed[-1]

    def test_empty_stays_empty(self):
        assert close_ring([]) == []

    def test_normalize_records_source_winding(self):
        ring = normalize(CLOCKWISE)
        assert isinstance(ring, PolygonRing)
        assert ring.reversed
        assert ring.vertices == COUNTERCLOCKWISE
        assert ring.closed[-1] == COUNTERCLOCKWISE[0]

        ring = normalize(COUNTERCLOCKWISE)
        assert not ring.reversed
        assert len(ring) == 4
