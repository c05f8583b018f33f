"""Grid systems: cell maps, polygon maps and robot-local maps."""

from .bounds_manager import BoundsDefinition, BoundsManager
from .cell_map import CellMap
from .polygon_map import PolygonMap
from .local_map import LocalMap
from .grid_factory import GridFactory, GridSpecification

__all__ = [
    'BoundsDefinition',
    'BoundsManager',
    'CellMap',
    'PolygonMap',
    'LocalMap',
    'GridFactory',
    'GridSpecification',
]
