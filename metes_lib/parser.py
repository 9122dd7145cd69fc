# -*- coding: utf-8 -*-
"""Parser for metes-and-bounds description files.

File layout (whitespace separated):

    <lat> <long>                         point of beginning
    <NS> <deg> <min> <sec> <EW> <dist>   one line per call

Architecture: The parser produces dictionaries (like loading JSON) which are
then fed to Pydantic models via a single `model_validate()` call.

Call lines with fewer than six fields are skipped and recorded as warnings.
A numeric field that does not parse is fatal for the whole description.
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from metes_lib.constants import METES_ENCODING
from metes_lib.constants import MIN_CALL_FIELDS
from metes_lib.constants import MIN_POB_FIELDS
from metes_lib.enums import Severity
from metes_lib.errors import MetesParseError
from metes_lib.errors import MetesParseException
from metes_lib.errors import SourceLocation
from metes_lib.models import MetesDescription

logger = logging.getLogger(__name__)


class MetesParser:
    """Parser for metes-and-bounds description files.

    Warnings (skipped lines) are collected rather than thrown, fatal
    problems raise `MetesParseException`.

    Attributes:
        errors: List of parsing warnings encountered
    """

    def __init__(self) -> None:
        """Initialize a new parser with empty error list."""
        self.errors: list[MetesParseError] = []
        self._source: str = "<string>"

    def _location(self, line: int, text: str) -> SourceLocation:
        return SourceLocation(source=self._source, line=line, text=text)

    def _add_warning(self, message: str, text: str = "", line: int = 0) -> None:
        """Add a warning to the error list."""
        self.errors.append(
            MetesParseError(
                severity=Severity.WARNING,
                message=message,
                location=self._location(line, text),
            )
        )

    def _parse_float(self, value: str, name: str, line: int, text: str) -> float:
        try:
            return float(value)
        except ValueError as e:
            raise MetesParseException(
                f"Invalid {name}: `{value}`", self._location(line, text)
            ) from e

    # -------------------------------------------------------------------------
    # Dictionary-returning methods (primary API)
    # -------------------------------------------------------------------------

    def parse_file_to_dict(self, path: Path) -> dict[str, Any]:
        """Parse a description file to dictionary.

        Args:
            path: Path to the description file

        Returns:
            Dictionary suitable for `MetesDescription.model_validate()`
        """
        self._source = str(path)
        text = path.read_text(encoding=METES_ENCODING)
        return self._parse_lines(text.splitlines())

    def parse_string_to_dict(
        self,
        data: str,
        source: str = "<string>",
    ) -> dict[str, Any]:
        """Parse description text to dictionary."""
        self._source = source
        return self._parse_lines(data.splitlines())

    # -------------------------------------------------------------------------
    # Model-returning methods
    # -------------------------------------------------------------------------

    def parse_file(self, path: Path) -> MetesDescription:
        return self._validate(self.parse_file_to_dict(path))

    def parse_string(self, data: str, source: str = "<string>") -> MetesDescription:
        return self._validate(self.parse_string_to_dict(data, source))

    def _validate(self, data: dict[str, Any]) -> MetesDescription:
        try:
            return MetesDescription.model_validate(data)
        except ValidationError as e:
            raise MetesParseException(
                f"Invalid description in {self._source}: {e}"
            ) from e

    # -------------------------------------------------------------------------
    # Internal parsing
    # -------------------------------------------------------------------------

    def _parse_lines(self, lines: list[str]) -> dict[str, Any]:
        if not lines:
            raise MetesParseException(
                "Missing point of beginning", self._location(0, "")
            )

        pob = self._parse_pob(lines[0])

        calls: list[dict[str, Any]] = []
        for index, text in enumerate(lines[1:], start=1):
            call = self._parse_call(text, index)
            if call is not None:
                calls.append(call)

        logger.debug(
            "Parsed %d call(s) from %s (%d skipped)",
            len(calls),
            self._source,
            len(self.errors),
        )
        return {"pob": pob, "calls": calls}

    def _parse_pob(self, text: str) -> dict[str, float]:
        parts = text.split()
        if len(parts) < MIN_POB_FIELDS:
            raise MetesParseException(
                "Point of beginning must be `<lat> <long>`",
                self._location(0, text),
            )
        return {
            "latitude": self._parse_float(parts[0], "latitude", 0, text),
            "longitude": self._parse_float(parts[1], "longitude", 0, text),
        }

    def _parse_call(self, text: str, line: int) -> dict[str, Any] | None:
        parts = text.split()
        if len(parts) < MIN_CALL_FIELDS:
            logger.warning("Skipping invalid line: %s", text)
            self._add_warning("Skipping invalid line", text=text, line=line)
            return None

        return {
            "north_south": parts[0],
            "degrees": self._parse_float(parts[1], "degrees", line, text),
            "minutes": self._parse_float(parts[2], "minutes", line, text),
            "seconds": self._parse_float(parts[3], "seconds", line, text),
            "east_west": parts[4],
            "distance": self._parse_float(parts[5], "distance", line, text),
        }
