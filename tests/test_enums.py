# -*- coding: utf-8 -*-
"""Tests for enums and error records."""

import pytest

from metes_lib.enums import LengthUnit
from metes_lib.enums import OutputNaming
from metes_lib.enums import Severity
from metes_lib.errors import MetesParseError
from metes_lib.errors import MetesParseException
from metes_lib.errors import PointOfBeginningOutOfRangeError
from metes_lib.errors import SourceLocation


class TestLengthUnit:
    """Tests for LengthUnit."""

    @pytest.mark.parametrize(
        ("code", "unit"),
        [
            ("f", LengthUnit.FEET),
            ("V", LengthUnit.VARAS),
            (" r ", LengthUnit.RODS),
            ("c", LengthUnit.CHAINS),
            ("P", LengthUnit.POLES),
            ("y", LengthUnit.YARDS),
        ],
    )
    def test_from_code(self, code, unit):
        assert LengthUnit.from_code(code) == unit

    @pytest.mark.parametrize("code", ["", "x", "feet", None])
    def test_from_code_unknown(self, code):
        assert LengthUnit.from_code(code) is None

    def test_to_feet(self):
        assert LengthUnit.VARAS.to_feet(1.0) == 2.77778333333
        assert LengthUnit.CHAINS.to_feet(2.0) == 132.0
        assert LengthUnit.RODS.feet_factor == LengthUnit.POLES.feet_factor


class TestOutputNaming:
    def test_values(self):
        assert OutputNaming("simple") == OutputNaming.SIMPLE
        assert OutputNaming("input") == OutputNaming.INPUT


class TestErrors:
    """Tests for error records and exceptions."""

    def test_source_location_str(self):
        loc = SourceLocation(source="deed.txt", line=4, text="N 1 2")
        assert str(loc) == "(in deed.txt, line 5)"

    def test_parse_error_str(self):
        error = MetesParseError(
            severity=Severity.WARNING,
            message="Skipping invalid line",
            location=SourceLocation(source="deed.txt", line=1, text="N 1 2"),
        )
        text = str(error)
        assert text.startswith("warning: Skipping invalid line")
        assert "N 1 2" in text

    def test_parse_exception_without_location(self):
        exc = MetesParseException("boom")
        assert str(exc) == "boom"
        assert exc.to_error().location is None

    def test_out_of_range_error(self):
        exc = PointOfBeginningOutOfRangeError(24.9, -100.0)
        assert exc.latitude == 24.9
        assert "outside the Continental U.S." in str(exc)
