# -*- coding: utf-8 -*-
"""File I/O operations for metes-and-bounds conversion.

Reading: File -> MetesParser -> dictionary -> model_validate() -> MetesDescription
Writing: MetesDescription -> TraverseBuilder -> PolygonRing -> KML + GeoJSON

Both output documents are rendered from the same normalized ring.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import TYPE_CHECKING

from metes_lib.constants import SIMPLE_OUTPUT_STEM
from metes_lib.enums import FileExtension
from metes_lib.enums import OutputNaming
from metes_lib.errors import MetesParseError
from metes_lib.geojson import write_geojson
from metes_lib.kml import write_kml
from metes_lib.parser import MetesParser
from metes_lib.polygon import PolygonRing
from metes_lib.polygon import normalize
from metes_lib.traverse import TraverseBuilder
from metes_lib.traverse import TraverseSettings

if TYPE_CHECKING:
    from metes_lib.models import MetesDescription
    from metes_lib.ratios import RatioProvider

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of a successful conversion."""

    ring: PolygonRing
    kml_path: Path
    geojson_path: Path
    warnings: list[MetesParseError] = field(default_factory=list)


def read_metes_file(path: Path) -> tuple[MetesDescription, list[MetesParseError]]:
    """Read a description file.

    Args:
        path: Path to the description file

    Returns:
        Tuple of (description, warnings for skipped lines)

    Raises:
        FileNotFoundError: If the file doesn't exist
        MetesParseException: If a numeric field cannot be parsed
    """
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    parser = MetesParser()
    description = parser.parse_file(path)
    return description, parser.errors


def output_stem(input_path: Path, naming: OutputNaming) -> str:
    """Stem shared by the KML and GeoJSON output files."""
    if naming == OutputNaming.SIMPLE:
        return SIMPLE_OUTPUT_STEM
    return input_path.stem


def convert_metes_file(
    input_path: Path,
    settings: TraverseSettings | None = None,
    ratio_provider: RatioProvider | None = None,
) -> ConversionResult:
    """Convert a description file to KML and GeoJSON files.

    Args:
        input_path: Description file
        settings: Unit, alias and output naming configuration
        ratio_provider: Optional latitude-ratio provider (default WGS84)

    Returns:
        ConversionResult with the written paths

    Raises:
        FileNotFoundError: If the input file doesn't exist
        MetesParseException: If a numeric field cannot be parsed
        PointOfBeginningOutOfRangeError: If the POB is out of range; nothing
            is written in that case
    """
    settings = settings or TraverseSettings()
    description, warnings = read_metes_file(input_path)

    vertices = TraverseBuilder(settings, ratio_provider).build(description)
    ring = normalize(vertices)
    if ring.reversed:
        logger.info("Traverse is clockwise, reversing %d vertices", len(ring))

    stem = output_stem(input_path, settings.output_naming)
    output_dir = settings.output_dir
    kml_path = write_kml(ring, output_dir / f"{stem}{FileExtension.KML.value}")
    geojson_path = write_geojson(
        ring, output_dir / f"{stem}{FileExtension.GEOJSON.value}"
    )

    return ConversionResult(
        ring=ring,
        kml_path=kml_path,
        geojson_path=geojson_path,
        warnings=warnings,
    )
