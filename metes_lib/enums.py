# -*- coding: utf-8 -*-
"""Enumerations for metes-and-bounds processing.

This module contains the units, bearing tokens, winding orders and
file naming options used across the library.
"""

from enum import Enum

from metes_lib.constants import UNIT_TO_FEET


class LengthUnit(str, Enum):
    """Unit for call distances.

    Attributes:
        FEET: Survey feet
        VARAS: Spanish varas (Texas vara, 33 1/3 inches)
        RODS: Rods (16.5 feet)
        CHAINS: Gunter's chains (66 feet)
        POLES: Poles (same length as a rod)
        YARDS: Yards
    """

    FEET = "f"
    VARAS = "v"
    RODS = "r"
    CHAINS = "c"
    POLES = "p"
    YARDS = "y"

    @property
    def feet_factor(self) -> float:
        """Length of one unit in feet."""
        return UNIT_TO_FEET[self.value]

    def to_feet(self, distance: float) -> float:
        """Convert a distance in this unit to feet."""
        return distance * self.feet_factor

    @classmethod
    def from_code(cls, code: str | None) -> "LengthUnit | None":
        """Get a unit from its single-character code.

        Args:
            code: Unit code (case-insensitive, surrounding whitespace ignored)

        Returns:
            LengthUnit or None if not recognized
        """
        if code is None:
            return None
        try:
            return cls(code.strip().lower())
        except ValueError:
            return None


class NorthSouth(str, Enum):
    """North/South half of a quadrant bearing."""

    NORTH = "N"
    SOUTH = "S"


class EastWest(str, Enum):
    """East/West half of a quadrant bearing."""

    EAST = "E"
    WEST = "W"


class Winding(str, Enum):
    """Vertex ordering of a polygon ring.

    Attributes:
        CLOCKWISE: Interior on the right while walking the ring
        COUNTERCLOCKWISE: Interior on the left (right-hand rule)
    """

    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"


class OutputNaming(str, Enum):
    """How output file names are chosen.

    Attributes:
        SIMPLE: Fixed stem (``output.kml`` / ``output.geojson``)
        INPUT: Stem of the input file (``parcel.txt`` -> ``parcel.kml``)
    """

    SIMPLE = "simple"
    INPUT = "input"


class FileExtension(str, Enum):
    """File extensions for supported formats (with dot)."""

    KML = ".kml"
    GEOJSON = ".geojson"


class Severity(str, Enum):
    """Severity level for parse errors.

    Attributes:
        ERROR: Critical parsing error
        WARNING: Non-fatal warning
    """

    ERROR = "error"
    WARNING = "warning"
