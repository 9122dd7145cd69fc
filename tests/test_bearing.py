# -*- coding: utf-8 -*-
"""Tests for quadrant bearing interpretation."""

import pytest

from metes_lib.bearing import BearingAliases
from metes_lib.bearing import dms_to_decimal
from metes_lib.bearing import quadrant_to_azimuth
from metes_lib.enums import EastWest
from metes_lib.enums import NorthSouth


class TestDmsToDecimal:
    """Tests for dms_to_decimal."""

    def test_whole_degrees(self):
        assert dms_to_decimal(45, 0, 0) == 45.0

    def test_minutes_and_seconds(self):
        assert dms_to_decimal(10, 30, 36) == pytest.approx(10.51)

    def test_minutes_over_sixty_not_rejected(self):
        """Minutes >= 60 are accepted as written."""
        assert dms_to_decimal(0, 90, 0) == pytest.approx(1.5)


class TestQuadrantToAzimuth:
    """Tests for quadrant_to_azimuth."""

    @pytest.mark.parametrize(
        ("ns", "ew", "expected"),
        [
            ("N", "E", 30.0),
            ("N", "W", 330.0),
            ("S", "E", 150.0),
            ("S", "W", 210.0),
        ],
    )
    def test_quadrants(self, ns, ew, expected):
        assert quadrant_to_azimuth(ns, ew, 30.0) == pytest.approx(expected)

    @pytest.mark.parametrize(("ns", "ew"), [("n", "e"), ("n", "W"), ("S", "w")])
    def test_case_insensitive(self, ns, ew):
        assert quadrant_to_azimuth(ns, ew, 30.0) == quadrant_to_azimuth(
            ns.upper(), ew.upper(), 30.0
        )

    @pytest.mark.parametrize(
        ("ns", "ew"),
        [("E", "N"), ("X", "E"), ("N", "N"), ("", ""), ("1", "3")],
    )
    def test_unrecognized_pair_yields_zero(self, ns, ew):
        """Unknown token pairs degrade to azimuth 0 rather than raising."""
        assert quadrant_to_azimuth(ns, ew, 30.0) == 0.0


class TestBearingAliases:
    """Tests for the alias table."""

    def test_default_is_alphabetic_only(self):
        aliases = BearingAliases()
        assert aliases.resolve_ns("n") == NorthSouth.NORTH
        assert aliases.resolve_ew("w") == EastWest.WEST
        assert aliases.resolve_ns("1") is None

    def test_numeric_aliases(self):
        aliases = BearingAliases.build(numeric=True)
        assert aliases.resolve_ns("1") == NorthSouth.NORTH
        assert aliases.resolve_ns("180") == NorthSouth.SOUTH
        assert aliases.resolve_ew("90") == EastWest.EAST
        assert aliases.resolve_ew("4") == EastWest.WEST
        # alphabetic tokens remain valid
        assert aliases.resolve_ns("S") == NorthSouth.SOUTH

    def test_numeric_quadrant(self):
        aliases = BearingAliases.build(numeric=True)
        assert quadrant_to_azimuth("2", "4", 10.0, aliases) == pytest.approx(190.0)
