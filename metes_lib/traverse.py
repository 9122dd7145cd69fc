# -*- coding: utf-8 -*-
"""Traverse builder: bearing calls to geographic vertices.

Each call is turned into an azimuth, converted to feet, decomposed into
east/north offsets and scaled into degrees:

    x_offset = sin(azimuth) * distance_ft * xratio
    y_offset = cos(azimuth) * distance_ft * yratio

The conversion ratios are computed ONCE from the point of beginning's
latitude and reused for every leg. On long traverses the true ratios
drift with latitude; the frozen values are kept so output stays identical
to previously generated parcels.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from metes_lib.bearing import BearingAliases
from metes_lib.bearing import quadrant_to_azimuth
from metes_lib.enums import LengthUnit
from metes_lib.enums import OutputNaming
from metes_lib.models import Vertex
from metes_lib.ratios import RatioProvider
from metes_lib.ratios import default_provider

if TYPE_CHECKING:
    from metes_lib.models import BearingCall
    from metes_lib.models import MetesDescription

logger = logging.getLogger(__name__)


class TraverseSettings(BaseModel):
    """Run configuration for a traverse conversion.

    Attributes:
        unit: Single-character unit code (f, v, r, c, p, y). Any other value
            is accepted and produces zero-length legs.
        numeric_aliases: Also accept numeric bearing tokens
        output_naming: How output file names are derived
        output_dir: Directory output files are written to
    """

    model_config = ConfigDict(extra="forbid")

    unit: str = "f"
    numeric_aliases: bool = False
    output_naming: OutputNaming = OutputNaming.INPUT
    output_dir: Path = Field(default_factory=Path)

    @property
    def length_unit(self) -> LengthUnit | None:
        return LengthUnit.from_code(self.unit)

    @property
    def aliases(self) -> BearingAliases:
        return BearingAliases.build(numeric=self.numeric_aliases)


def distance_to_feet(distance: float, unit: LengthUnit | None) -> float:
    """Convert a call distance to feet; an unknown unit yields 0.0."""
    if unit is None:
        return 0.0
    return unit.to_feet(distance)


def leg_offset(
    call: BearingCall,
    unit: LengthUnit | None,
    xratio: float,
    yratio: float,
    aliases: BearingAliases,
) -> tuple[float, float]:
    """Compute the (longitude, latitude) degree offset produced by one call."""
    azimuth = quadrant_to_azimuth(call.ns, call.ew, call.decimal_degrees, aliases)
    a_radians = math.radians(azimuth)
    distance_ft = distance_to_feet(call.distance, unit)
    return (
        math.sin(a_radians) * distance_ft * xratio,
        math.cos(a_radians) * distance_ft * yratio,
    )


class TraverseBuilder:
    """Builds the ordered vertex path of a metes-and-bounds description."""

    def __init__(
        self,
        settings: TraverseSettings | None = None,
        ratio_provider: RatioProvider | None = None,
    ) -> None:
        self.settings = settings or TraverseSettings()
        self.ratio_provider = ratio_provider or default_provider()

    def build(self, description: MetesDescription) -> list[Vertex]:
        """Walk every call from the point of beginning.

        Args:
            description: Parsed description

        Returns:
            Vertices in traverse order; index 0 is the point of beginning

        Raises:
            PointOfBeginningOutOfRangeError: If the POB is outside the
                continental bounds. No traversal is performed.
        """
        pob = description.pob
        pob.check_bounds()

        unit = self.settings.length_unit
        if unit is None:
            logger.warning(
                "Unrecognized unit `%s`: every leg will have zero length",
                self.settings.unit,
            )
        aliases = self.settings.aliases

        xratio = self.ratio_provider.longitude_ratio(pob.latitude)
        yratio = self.ratio_provider.latitude_ratio(pob.latitude)
        logger.info(
            "Conversion ratios at latitude %s: xratio=%.12g yratio=%.12g",
            pob.latitude,
            xratio,
            yratio,
        )

        vertices = [pob.as_vertex()]
        for call in description.calls:
            dx, dy = leg_offset(call, unit, xratio, yratio, aliases)
            last = vertices[-1]
            vertices.append(Vertex(last.longitude + dx, last.latitude + dy))

        logger.debug("Traverse produced %d vertices", len(vertices))
        return vertices


def build_traverse(
    description: MetesDescription,
    settings: TraverseSettings | None = None,
    ratio_provider: RatioProvider | None = None,
) -> list[Vertex]:
    """Convenience wrapper around `TraverseBuilder.build`."""
    return TraverseBuilder(settings, ratio_provider).build(description)
