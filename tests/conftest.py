# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

This module provides shared fixtures for accessing test artifacts and
building traverses with known conversion ratios.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from metes_lib.ratios import FixedRatioProvider
from metes_lib.traverse import TraverseSettings

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


# =============================================================================
# Path Constants
# =============================================================================

ARTIFACTS_DIR = Path(__file__).parent / "artifacts"

SQUARE_CLOCKWISE = ARTIFACTS_DIR / "square_clockwise.txt"
SQUARE_CCW_MAGNITUDE = ARTIFACTS_DIR / "square_ccw_magnitude.txt"
WITH_BAD_LINES = ARTIFACTS_DIR / "with_bad_lines.txt"
OUT_OF_RANGE = ARTIFACTS_DIR / "out_of_range.txt"
NON_NUMERIC = ARTIFACTS_DIR / "non_numeric.txt"
NUMERIC_TOKENS = ARTIFACTS_DIR / "numeric_tokens.txt"

ALL_VALID_FILES = [SQUARE_CLOCKWISE, SQUARE_CCW_MAGNITUDE, WITH_BAD_LINES]

#: Ratios used where tests need round numbers
XRATIO = 1e-5
YRATIO = 2e-5


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def artifacts_dir() -> Path:
    """Return path to test artifacts directory."""
    return ARTIFACTS_DIR


@pytest.fixture
def fixed_ratios() -> FixedRatioProvider:
    """Latitude-independent ratios with easy-to-check values."""
    return FixedRatioProvider(XRATIO, YRATIO)


@pytest.fixture
def feet_settings(tmp_path: Path) -> TraverseSettings:
    """Settings for feet input writing into a temporary directory."""
    return TraverseSettings(unit="f", output_dir=tmp_path)
