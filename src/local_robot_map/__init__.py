"""
Local robot map package.

This package provides the map a robot keeps of its surroundings: a labeled
cell grid anchored in real-world coordinates, polygon rasterization, robot
placement and a hook for pluggable partitioning.
"""

__version__ = "0.1.0"
__description__ = "Local map representation for multi-robot exploration"

from .abstractions.types import (
    AxisResolution,
    Cell,
    CellLabel,
    InternalLocation,
    Point,
    RealWorldLocation,
)
from .abstractions.interfaces import Location, Mask, Partition, PartitionAlgorithm, Visualize
from .exceptions import (
    InvalidGeometryError,
    LocalMapError,
    NonFiniteCoordinateError,
    NotEnoughVerticesError,
    OutOfMapError,
    PartitionError,
    PartitionErrorKind,
    PolygonMapError,
)
from .grid_systems import CellMap, GridFactory, GridSpecification, LocalMap, PolygonMap

__all__ = [
    '__version__',
    '__description__',
    'AxisResolution',
    'Cell',
    'CellLabel',
    'InternalLocation',
    'Point',
    'RealWorldLocation',
    'Location',
    'Mask',
    'Partition',
    'PartitionAlgorithm',
    'Visualize',
    'InvalidGeometryError',
    'LocalMapError',
    'NonFiniteCoordinateError',
    'NotEnoughVerticesError',
    'OutOfMapError',
    'PartitionError',
    'PartitionErrorKind',
    'PolygonMapError',
    'CellMap',
    'GridFactory',
    'GridSpecification',
    'LocalMap',
    'PolygonMap',
]
