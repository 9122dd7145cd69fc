# -*- coding: utf-8 -*-
"""Convert command for metes-and-bounds descriptions.

Reads a description file, walks the traverse and writes the parcel as
both KML and GeoJSON.
"""

import argparse
import logging
import sys
from pathlib import Path

import metes_lib
from metes_lib.constants import UNIT_PROMPT
from metes_lib.enums import OutputNaming
from metes_lib.errors import MetesParseException
from metes_lib.errors import PointOfBeginningOutOfRangeError
from metes_lib.io import convert_metes_file
from metes_lib.traverse import TraverseSettings

logger = logging.getLogger(__name__)

OUT_OF_RANGE_MESSAGE = "Point of Beginning is outside the Continental U.S."


def prompt_unit() -> str:
    """Ask for the unit code on stdin; returns it trimmed and lower-cased."""
    print(UNIT_PROMPT)  # noqa: T201
    return sys.stdin.readline().strip().lower()


def convert(args: list[str]) -> int:
    """Run a conversion from command-line arguments; returns the exit code."""
    parser = argparse.ArgumentParser(
        prog="metes",
        description="Convert a metes-and-bounds description to KML and GeoJSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  metes parcel.txt                     # Prompt for units
  metes parcel.txt -u v                # Distances in varas
  metes -i parcel.txt --naming simple  # Write output.kml/output.geojson
  metes parcel.txt -o out/             # Write into out/

Input:
  line 1:      <lat> <long>
  other lines: <NS> <deg> <min> <sec> <EW> <dist>

Units:
  f feet, v varas, r rods, c chains, p poles, y yards
""",
    )

    parser.add_argument(
        "input_path",
        nargs="?",
        type=Path,
        default=None,
        help="Metes-and-bounds description file",
    )
    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        default=None,
        help="Metes-and-bounds description file (alternative to the positional)",
    )
    parser.add_argument(
        "-u",
        "--unit",
        default=None,
        help="Distance unit code (prompted for if not specified)",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=Path(),
        help="Directory to write the output files to",
    )
    parser.add_argument(
        "--naming",
        choices=[naming.value for naming in OutputNaming],
        default=OutputNaming.INPUT.value,
        help="'input': reuse the input file name, 'simple': output.kml/.geojson",
    )
    parser.add_argument(
        "--numeric-aliases",
        action="store_true",
        help="Also accept numeric bearing tokens (1/2/3/4, 0/180/90/270)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s version: {metes_lib.__version__}",
    )

    parsed_args = parser.parse_args(args)
    input_path = parsed_args.input_file or parsed_args.input_path
    if input_path is None:
        parser.error("an input file is required")

    logging.basicConfig(
        level=logging.DEBUG if parsed_args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    unit = parsed_args.unit if parsed_args.unit is not None else prompt_unit()
    settings = TraverseSettings(
        unit=unit.strip().lower(),
        numeric_aliases=parsed_args.numeric_aliases,
        output_naming=OutputNaming(parsed_args.naming),
        output_dir=parsed_args.output_dir,
    )

    try:
        result = convert_metes_file(input_path, settings)

    except PointOfBeginningOutOfRangeError:
        print(OUT_OF_RANGE_MESSAGE)  # noqa: T201
        return 0
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)  # noqa: T201
        return 1
    except MetesParseException as e:
        print(e.to_error(), file=sys.stderr)  # noqa: T201
        return 1

    print(f"KML file generated successfully: {result.kml_path}")  # noqa: T201
    print(f"GeoJSON file generated successfully: {result.geojson_path}")  # noqa: T201
    return 0


def main() -> None:
    sys.exit(convert(sys.argv[1:]))
