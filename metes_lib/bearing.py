# -*- coding: utf-8 -*-
"""Quadrant bearing interpretation.

Surveyor bearings are written as ``N 45 30 00 E``: a north/south token,
an angle off the meridian in degrees/minutes/seconds and an east/west
token. This module turns them into azimuths measured clockwise from north.

Quadrant formulas, with ``d`` the decimal bearing angle:

    N, E -> d
    N, W -> 360 - d
    S, E -> 180 - d
    S, W -> 180 + d

Any other token pair yields an azimuth of 0.0 rather than an error so that
existing descriptions keep producing the same output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import field

from metes_lib.enums import EastWest
from metes_lib.enums import NorthSouth

logger = logging.getLogger(__name__)

#: Alphabetic tokens, matched case-insensitively
ALPHA_NS_ALIASES: dict[str, NorthSouth] = {
    "N": NorthSouth.NORTH,
    "S": NorthSouth.SOUTH,
}
ALPHA_EW_ALIASES: dict[str, EastWest] = {
    "E": EastWest.EAST,
    "W": EastWest.WEST,
}

#: Numeric tokens accepted by older descriptions: quadrant digits
#: (1=N, 2=S, 3=E, 4=W) and cardinal azimuths (0, 180, 90, 270)
NUMERIC_NS_ALIASES: dict[str, NorthSouth] = {
    "1": NorthSouth.NORTH,
    "0": NorthSouth.NORTH,
    "2": NorthSouth.SOUTH,
    "180": NorthSouth.SOUTH,
}
NUMERIC_EW_ALIASES: dict[str, EastWest] = {
    "3": EastWest.EAST,
    "90": EastWest.EAST,
    "4": EastWest.WEST,
    "270": EastWest.WEST,
}


@dataclass(frozen=True)
class BearingAliases:
    """Token lookup table for the two halves of a quadrant bearing."""

    north_south: dict[str, NorthSouth] = field(
        default_factory=lambda: dict(ALPHA_NS_ALIASES)
    )
    east_west: dict[str, EastWest] = field(
        default_factory=lambda: dict(ALPHA_EW_ALIASES)
    )

    @classmethod
    def build(cls, *, numeric: bool = False) -> BearingAliases:
        """Create an alias table, optionally including the numeric tokens."""
        ns = dict(ALPHA_NS_ALIASES)
        ew = dict(ALPHA_EW_ALIASES)
        if numeric:
            ns.update(NUMERIC_NS_ALIASES)
            ew.update(NUMERIC_EW_ALIASES)
        return cls(north_south=ns, east_west=ew)

    def resolve_ns(self, token: str) -> NorthSouth | None:
        return self.north_south.get(token.strip().upper())

    def resolve_ew(self, token: str) -> EastWest | None:
        return self.east_west.get(token.strip().upper())


DEFAULT_ALIASES = BearingAliases()


def dms_to_decimal(degrees: float, minutes: float, seconds: float) -> float:
    """Convert degrees/minutes/seconds to decimal degrees."""
    return degrees + (minutes / 60.0) + (seconds / 3600.0)


def quadrant_to_azimuth(
    ns_token: str,
    ew_token: str,
    decimal_degrees: float,
    aliases: BearingAliases = DEFAULT_ALIASES,
) -> float:
    """Convert a quadrant bearing to an azimuth in degrees from north.

    Args:
        ns_token: North/South token as written in the description
        ew_token: East/West token as written in the description
        decimal_degrees: Bearing angle off the meridian
        aliases: Token lookup table

    Returns:
        Azimuth in degrees, or 0.0 when the token pair is not recognized
    """
    ns = aliases.resolve_ns(ns_token)
    ew = aliases.resolve_ew(ew_token)

    match (ns, ew):
        case (NorthSouth.NORTH, EastWest.EAST):
            return decimal_degrees
        case (NorthSouth.NORTH, EastWest.WEST):
            return 360.0 - decimal_degrees
        case (NorthSouth.SOUTH, EastWest.EAST):
            return 180.0 - decimal_degrees
        case (NorthSouth.SOUTH, EastWest.WEST):
            return 180.0 + decimal_degrees
        case _:
            logger.debug(
                "Unrecognized bearing tokens `%s` / `%s`, using azimuth 0",
                ns_token,
                ew_token,
            )
            return 0.0
