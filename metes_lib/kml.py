# -*- coding: utf-8 -*-
"""KML export of a normalized traverse ring.

The ring is written as a single Placemark/Polygon/LinearRing with one
``longitude,latitude,0`` tuple per line, in normalized order. The ring is
not re-closed here; viewers close LinearRings implicitly.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from lxml import etree

from metes_lib.constants import KML_ALTITUDE
from metes_lib.constants import KML_ENCODING
from metes_lib.constants import KML_NAMESPACE

if TYPE_CHECKING:
    from pathlib import Path

    from metes_lib.polygon import PolygonRing

logger = logging.getLogger(__name__)


def format_coordinate(value: float) -> str:
    """Shortest round-trip text of a float, without exponent or trailing ``.0``.

    >>> format_coordinate(-100.0)
    '-100'
    >>> format_coordinate(1e-07)
    '0.0000001'
    """
    text = repr(float(value))
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def coordinates_text(ring: PolygonRing) -> str:
    lines = [
        f"{format_coordinate(lon)},{format_coordinate(lat)},{KML_ALTITUDE}"
        for lon, lat in ring.vertices
    ]
    return "\n" + "".join(f"{line}\n" for line in lines)


def ring_to_kml_tree(ring: PolygonRing) -> etree._Element:
    """Build the KML element tree for ``ring``."""
    ns = f"{{{KML_NAMESPACE}}}"
    root = etree.Element(f"{ns}kml", nsmap={None: KML_NAMESPACE})
    document = etree.SubElement(root, f"{ns}Document")
    placemark = etree.SubElement(document, f"{ns}Placemark")
    polygon = etree.SubElement(placemark, f"{ns}Polygon")
    outer = etree.SubElement(polygon, f"{ns}outerBoundaryIs")
    linear_ring = etree.SubElement(outer, f"{ns}LinearRing")
    coordinates = etree.SubElement(linear_ring, f"{ns}coordinates")
    coordinates.text = coordinates_text(ring)
    return root


def ring_to_kml(ring: PolygonRing) -> str:
    """Serialize ``ring`` as a KML document string."""
    root = ring_to_kml_tree(ring)
    data = etree.tostring(
        root,
        xml_declaration=True,
        encoding=KML_ENCODING,
        pretty_print=True,
    )
    return data.decode(KML_ENCODING)


def write_kml(ring: PolygonRing, output_path: Path) -> Path:
    output_path.write_text(ring_to_kml(ring), encoding=KML_ENCODING)
    logger.info("Wrote %d KML coordinates to %s", len(ring), output_path)
    return output_path
