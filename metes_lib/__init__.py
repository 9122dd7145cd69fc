# -*- coding: utf-8 -*-
"""Metes and Bounds Library.

Converts a land-survey metes-and-bounds description (a point of beginning
followed by bearing/distance calls) into a closed polygon written as KML
and GeoJSON.

Usage:
    from metes_lib import TraverseSettings, convert_metes_file
    result = convert_metes_file(Path("parcel.txt"), TraverseSettings(unit="v"))
    print(result.kml_path, result.geojson_path)

    # Or step by step
    from metes_lib import MetesParser, build_traverse, normalize, ring_to_geojson
    description = MetesParser().parse_file(Path("parcel.txt"))
    ring = normalize(build_traverse(description))
    collection = ring_to_geojson(ring)
"""

__version__ = "0.1.0"

from metes_lib.bearing import BearingAliases
from metes_lib.bearing import dms_to_decimal
from metes_lib.bearing import quadrant_to_azimuth

# Constants
from metes_lib.constants import FEET_TO_METERS
from metes_lib.constants import JSON_ENCODING
from metes_lib.constants import UNIT_TO_FEET

# Enums
from metes_lib.enums import EastWest
from metes_lib.enums import FileExtension
from metes_lib.enums import LengthUnit
from metes_lib.enums import NorthSouth
from metes_lib.enums import OutputNaming
from metes_lib.enums import Severity
from metes_lib.enums import Winding
from metes_lib.errors import MetesParseError
from metes_lib.errors import MetesParseException
from metes_lib.errors import PointOfBeginningOutOfRangeError
from metes_lib.errors import SourceLocation
from metes_lib.geojson import ring_to_geojson
from metes_lib.io import ConversionResult
from metes_lib.io import convert_metes_file
from metes_lib.io import read_metes_file
from metes_lib.kml import ring_to_kml
from metes_lib.models import BearingCall
from metes_lib.models import MetesDescription
from metes_lib.models import PointOfBeginning
from metes_lib.models import Vertex
from metes_lib.parser import MetesParser
from metes_lib.polygon import PolygonRing
from metes_lib.polygon import normalize
from metes_lib.polygon import shoelace_sum
from metes_lib.ratios import EllipsoidRatioProvider
from metes_lib.ratios import FixedRatioProvider
from metes_lib.ratios import get_lat_ratio
from metes_lib.ratios import get_long_ratio
from metes_lib.traverse import TraverseBuilder
from metes_lib.traverse import TraverseSettings
from metes_lib.traverse import build_traverse

__all__ = [
    # Constants
    "FEET_TO_METERS",
    "JSON_ENCODING",
    "UNIT_TO_FEET",
    # Bearings
    "BearingAliases",
    # Models
    "BearingCall",
    "ConversionResult",
    # Enums
    "EastWest",
    # Ratios
    "EllipsoidRatioProvider",
    "FileExtension",
    "FixedRatioProvider",
    "LengthUnit",
    "MetesDescription",
    # Errors
    "MetesParseError",
    "MetesParseException",
    # Parsing
    "MetesParser",
    "NorthSouth",
    "OutputNaming",
    "PointOfBeginning",
    "PointOfBeginningOutOfRangeError",
    # Geometry
    "PolygonRing",
    "Severity",
    "SourceLocation",
    # Traverse
    "TraverseBuilder",
    "TraverseSettings",
    "Vertex",
    "Winding",
    "build_traverse",
    # I/O
    "convert_metes_file",
    "dms_to_decimal",
    "get_lat_ratio",
    "get_long_ratio",
    "normalize",
    "quadrant_to_azimuth",
    "read_metes_file",
    "ring_to_geojson",
    "ring_to_kml",
    "shoelace_sum",
]
