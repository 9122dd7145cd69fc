# -*- coding: utf-8 -*-
"""GeoJSON export of a normalized traverse ring.

The output is a FeatureCollection holding one Polygon Feature. Its single
ring is counterclockwise (RFC 7946 right-hand rule) and explicitly closed
by repeating the first coordinate. An empty traverse still produces a
valid document with an empty ring.

Coordinates are written at full float precision so regenerated parcels
compare equal to earlier output.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any

import orjson
from geojson import Feature
from geojson import FeatureCollection
from geojson import Polygon

from metes_lib.constants import JSON_ENCODING

if TYPE_CHECKING:
    from pathlib import Path

    from metes_lib.polygon import PolygonRing

logger = logging.getLogger(__name__)


def ring_to_feature(
    ring: PolygonRing,
    properties: dict[str, Any] | None = None,
) -> Feature:
    coords = [[lon, lat] for lon, lat in ring.closed]
    return Feature(
        geometry=Polygon([coords], precision=15),
        properties=properties or {},
    )


def ring_to_geojson(
    ring: PolygonRing,
    properties: dict[str, Any] | None = None,
) -> FeatureCollection:
    """Convert a normalized ring to a GeoJSON FeatureCollection.

    Args:
        ring: Counterclockwise ring (not closed; closure is added here)
        properties: Optional Feature properties

    Returns:
        FeatureCollection with a single Polygon Feature
    """
    return FeatureCollection([ring_to_feature(ring, properties)])


def dumps_geojson(collection: FeatureCollection, *, minify: bool = False) -> str:
    opts = 0 if minify else orjson.OPT_INDENT_2
    return orjson.dumps(collection, option=opts).decode(JSON_ENCODING)


def write_geojson(
    ring: PolygonRing,
    output_path: Path,
    *,
    properties: dict[str, Any] | None = None,
    minify: bool = False,
) -> Path:
    collection = ring_to_geojson(ring, properties)
    output_path.write_text(
        dumps_geojson(collection, minify=minify), encoding=JSON_ENCODING
    )
    logger.info("Wrote GeoJSON polygon to %s", output_path)
    return output_path
