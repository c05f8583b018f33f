# src/local_robot_map/abstractions/types/__init__.py
"""Type definitions for the abstractions layer."""

# Coordinate types
from .coord_types import Point, AxisResolution, RealWorldLocation, InternalLocation

# Map types
from .map_types import CellLabel, Cell, LUMA_COLORS, RGB_COLORS

__all__ = [
    # Coordinates
    'Point', 'AxisResolution', 'RealWorldLocation', 'InternalLocation',

    # Map
    'CellLabel', 'Cell', 'LUMA_COLORS', 'RGB_COLORS',
]
