# -*- coding: utf-8 -*-
"""Latitude-dependent feet-to-degree conversion ratios.

A traverse leg is decomposed into east/north offsets in feet, which are
scaled into degrees of longitude/latitude with two ratios:

- ``longitude_ratio(lat)``: degrees of longitude per foot along the parallel
- ``latitude_ratio(lat)``: degrees of latitude per foot along the meridian

The default provider derives both from the ellipsoid radii of curvature
(``pyproj.Geod`` supplies the ellipsoid parameters):

    M = a (1 - e²) / (1 - e² sin²φ)^1.5      (meridian radius)
    N = a / sqrt(1 - e² sin²φ)                (prime vertical radius)

    feet per degree of latitude  = M · π/180 / 0.3048
    feet per degree of longitude = N cos φ · π/180 / 0.3048

Both ratios are smooth and monotonic over the continental latitude band.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Protocol

from pyproj import Geod

from metes_lib.constants import FEET_TO_METERS

DEFAULT_ELLIPSOID = "WGS84"


class RatioProvider(Protocol):
    """Protocol for latitude-ratio providers."""

    def longitude_ratio(self, latitude: float) -> float:
        """Degrees of longitude per foot at ``latitude``."""
        ...

    def latitude_ratio(self, latitude: float) -> float:
        """Degrees of latitude per foot at ``latitude``."""
        ...


class EllipsoidRatioProvider:
    """Ratios computed from an ellipsoid's radii of curvature."""

    def __init__(self, ellps: str = DEFAULT_ELLIPSOID) -> None:
        geod = Geod(ellps=ellps)
        self.ellps = ellps
        self._a: float = geod.a
        self._es: float = geod.es

    def _w(self, latitude: float) -> float:
        sin_phi = math.sin(math.radians(latitude))
        return math.sqrt(1.0 - self._es * sin_phi * sin_phi)

    def feet_per_degree_latitude(self, latitude: float) -> float:
        meridian_radius = self._a * (1.0 - self._es) / self._w(latitude) ** 3
        return meridian_radius * math.pi / 180.0 / FEET_TO_METERS

    def feet_per_degree_longitude(self, latitude: float) -> float:
        parallel_radius = (
            self._a / self._w(latitude) * math.cos(math.radians(latitude))
        )
        return parallel_radius * math.pi / 180.0 / FEET_TO_METERS

    def longitude_ratio(self, latitude: float) -> float:
        return 1.0 / self.feet_per_degree_longitude(latitude)

    def latitude_ratio(self, latitude: float) -> float:
        return 1.0 / self.feet_per_degree_latitude(latitude)


class FixedRatioProvider:
    """Provider returning the same ratios for every latitude."""

    def __init__(self, xratio: float, yratio: float) -> None:
        self.xratio = xratio
        self.yratio = yratio

    def longitude_ratio(self, latitude: float) -> float:  # noqa: ARG002
        return self.xratio

    def latitude_ratio(self, latitude: float) -> float:  # noqa: ARG002
        return self.yratio


@lru_cache(maxsize=1)
def default_provider() -> EllipsoidRatioProvider:
    return EllipsoidRatioProvider()


def get_long_ratio(latitude: float) -> float:
    """Degrees of longitude per foot at ``latitude`` (WGS84)."""
    return default_provider().longitude_ratio(latitude)


def get_lat_ratio(latitude: float) -> float:
    """Degrees of latitude per foot at ``latitude`` (WGS84)."""
    return default_provider().latitude_ratio(latitude)
