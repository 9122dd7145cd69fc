# -*- coding: utf-8 -*-
"""Constants used throughout the metes_lib library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# File Encodings
# -----------------------------------------------------------------------------

#: Encoding for metes-and-bounds description files
METES_ENCODING = "utf-8"

#: Encoding used for GeoJSON files
JSON_ENCODING = "utf-8"

#: Encoding declared in the KML prolog
KML_ENCODING = "UTF-8"

# -----------------------------------------------------------------------------
# Unit Conversions
# -----------------------------------------------------------------------------

#: Conversion factor from feet to meters
FEET_TO_METERS: float = 0.3048

#: Length of one unit in feet, keyed by the single-character unit code
UNIT_TO_FEET: dict[str, float] = {
    "f": 1.0,
    "v": 2.77778333333,
    "r": 16.5,
    "c": 66.0,
    "p": 16.5,
    "y": 3.0,
}

# -----------------------------------------------------------------------------
# Point of Beginning Bounds (Continental U.S., inclusive)
# -----------------------------------------------------------------------------

MIN_POB_LATITUDE: float = 25.0
MAX_POB_LATITUDE: float = 50.0
MIN_POB_LONGITUDE: float = -125.0
MAX_POB_LONGITUDE: float = -60.0

# -----------------------------------------------------------------------------
# Input Layout
# -----------------------------------------------------------------------------

#: Minimum whitespace-separated fields on a bearing call line
MIN_CALL_FIELDS: int = 6

#: Minimum whitespace-separated fields on the point of beginning line
MIN_POB_FIELDS: int = 2

# -----------------------------------------------------------------------------
# Output
# -----------------------------------------------------------------------------

#: KML 2.2 namespace
KML_NAMESPACE = "http://www.opengis.net/kml/2.2"

#: Altitude written for every KML coordinate tuple
KML_ALTITUDE = "0"

#: Stem used for output files when the input name is not reused
SIMPLE_OUTPUT_STEM = "output"

#: Unit selection prompt shown when no unit is given on the command line
UNIT_PROMPT = (
    "What units are used in your data?\n\n"
    "(f) Feet\n(v) Varas\n(r) Rods\n(c) Chains\n(p) Poles\n(y) Yards"
)
