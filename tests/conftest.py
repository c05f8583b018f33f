"""Shared fixtures for local robot map tests."""

import os

# Keep the global config on defaults even when a config.yml is lying around
os.environ.setdefault('FORCE_TEST_MODE', 'true')

import shutil
import tempfile
from pathlib import Path

import pytest

from local_robot_map import AxisResolution, CellLabel, CellMap, Point, RealWorldLocation

OOM = CellLabel.OUT_OF_MAP
OTR = CellLabel.OTHER_ROBOT
MYR = CellLabel.MY_ROBOT
EXP = CellLabel.EXPLORED
UNE = CellLabel.UNEXPLORED
FNT = CellLabel.FRONTIER
ASS = CellLabel.ASSIGNED

# 5 rows x 3 columns, row 0 first
SEED_CELLS = [
    [OOM, OTR, MYR],
    [FNT, UNE, EXP],
    [ASS, OOM, OTR],
    [MYR, UNE, ASS],
    [UNE, EXP, FNT],
]


@pytest.fixture
def test_data_dir():
    """Create a temporary directory for test data."""
    temp_dir = Path(tempfile.mkdtemp())
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def unit_resolution():
    return AxisResolution.uniform(1.0)


@pytest.fixture
def seed_map(unit_resolution):
    """Small grid holding every label, anchored at the origin."""
    return CellMap.from_raster(SEED_CELLS, unit_resolution, Point(0.0, 0.0, 0.0))


@pytest.fixture
def square_grid(unit_resolution):
    """10x10 all-unexplored grid covering (0, 0) to (10, 10)."""
    return CellMap(
        RealWorldLocation.from_xyz(0.0, 0.0, 0.0),
        RealWorldLocation.from_xyz(10.0, 10.0, 0.0),
        unit_resolution,
    )
