# -*- coding: utf-8 -*-
"""Data models for metes-and-bounds descriptions.

This module contains the Pydantic models for parsed input:
- PointOfBeginning: The first vertex of the traverse
- BearingCall: A single bearing-and-distance leg
- MetesDescription: A point of beginning plus its ordered calls

Vertices produced by the traverse are plain ``Vertex`` tuples in
(longitude, latitude) order, matching GeoJSON and KML axis order.
"""

from __future__ import annotations

from typing import Any
from typing import NamedTuple

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from metes_lib.constants import MAX_POB_LATITUDE
from metes_lib.constants import MAX_POB_LONGITUDE
from metes_lib.constants import MIN_POB_LATITUDE
from metes_lib.constants import MIN_POB_LONGITUDE
from metes_lib.errors import PointOfBeginningOutOfRangeError


class Vertex(NamedTuple):
    """A traverse vertex in decimal degrees, (longitude, latitude) order."""

    longitude: float
    latitude: float


class PointOfBeginning(BaseModel):
    """Reference point of a traverse.

    Western-hemisphere longitudes may be given either signed or as a
    magnitude; a positive longitude is negated on construction. Values
    are not range-checked here, so any number reaches `check_bounds`.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    @field_validator("longitude", mode="before")
    @classmethod
    def force_western_longitude(cls, v: Any) -> Any:
        if isinstance(v, (int, float, str)):
            value = float(v)
            return -value if value > 0 else value
        return v

    @property
    def in_bounds(self) -> bool:
        """True when the point lies inside the continental sanity box."""
        return (
            MIN_POB_LATITUDE <= self.latitude <= MAX_POB_LATITUDE
            and MIN_POB_LONGITUDE <= self.longitude <= MAX_POB_LONGITUDE
        )

    def check_bounds(self) -> None:
        """Raise if the point lies outside the continental sanity box.

        Raises:
            PointOfBeginningOutOfRangeError: If the point is out of range
        """
        if not self.in_bounds:
            raise PointOfBeginningOutOfRangeError(self.latitude, self.longitude)

    def as_vertex(self) -> Vertex:
        return Vertex(self.longitude, self.latitude)


class BearingCall(BaseModel):
    """One traverse leg: a quadrant bearing and a distance.

    Bearing tokens are kept as written; they are interpreted by the
    traverse builder against its alias table. Minutes and seconds are
    conventionally below 60 but are not validated.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    ns: str = Field(alias="north_south")
    degrees: float = Field(ge=0)
    minutes: float = Field(ge=0)
    seconds: float = Field(ge=0)
    ew: str = Field(alias="east_west")
    distance: float = Field(ge=0)

    @property
    def decimal_degrees(self) -> float:
        return self.degrees + (self.minutes / 60.0) + (self.seconds / 3600.0)


class MetesDescription(BaseModel):
    """A parsed metes-and-bounds description."""

    model_config = ConfigDict(populate_by_name=True)

    pob: PointOfBeginning
    calls: list[BearingCall] = Field(default_factory=list)

    @property
    def total_calls(self) -> int:
        return len(self.calls)
