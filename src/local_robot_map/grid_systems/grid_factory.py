"""Factory for creating grids and local maps from declarative requests."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union
import logging

from ..abstractions.types import AxisResolution, RealWorldLocation
from ..config import config as default_config
from .bounds_manager import BoundsDefinition, BoundsManager
from .cell_map import CellMap
from .local_map import LocalMap
from .polygon_map import PolygonMap

logger = logging.getLogger(__name__)

BoundsLike = Union[str, BoundsDefinition, Tuple[RealWorldLocation, RealWorldLocation]]


@dataclass
class GridSpecification:
    """Specification for grid creation."""
    grid_type: str  # 'cell' or 'polygon'
    resolution: Optional[Union[float, AxisResolution]] = None
    bounds: Optional[BoundsLike] = None  # cell grids only
    vertices: Optional[Sequence[RealWorldLocation]] = None  # polygon grids only
    explored: List[Sequence[RealWorldLocation]] = field(default_factory=list)
    name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.grid_type not in GridFactory.GRID_TYPES:
            raise ValueError(
                f"Unknown grid type: {self.grid_type}. "
                f"Available: {list(GridFactory.GRID_TYPES)}"
            )


class GridFactory:
    """Builds cell maps and local maps from :class:`GridSpecification` objects."""

    GRID_TYPES = ('cell', 'polygon')

    def __init__(self, config=None):
        self.config = config or default_config
        self.bounds_manager = BoundsManager(self.config)

    def resolve_resolution(self, resolution: Optional[Union[float, AxisResolution]]) -> AxisResolution:
        if resolution is None:
            resolution = self.config.get('grids.default_resolution', 1.0)
        if isinstance(resolution, AxisResolution):
            return resolution
        return AxisResolution.uniform(float(resolution))

    def resolve_bounds(self, bounds: Optional[BoundsLike]) -> Tuple[RealWorldLocation, RealWorldLocation]:
        """Turn a region name, bounds string, box or corner pair into two corners."""
        if bounds is None:
            raise ValueError("Cell grids need bounds")
        if isinstance(bounds, str):
            bounds = self.bounds_manager.get_bounds(bounds)
        if isinstance(bounds, BoundsDefinition):
            return bounds.corners()
        corner1, corner2 = bounds
        return corner1, corner2

    def create_grid(self, spec: Union[GridSpecification, Dict[str, Any]]) -> CellMap:
        """
        Create a cell map from a specification.

        Args:
            spec: Grid specification, or a dict of its fields

        Returns:
            The new cell map; polygon grids come back rasterized
        """
        if isinstance(spec, dict):
            spec = GridSpecification(**spec)

        resolution = self.resolve_resolution(spec.resolution)

        if spec.grid_type == 'cell':
            corner1, corner2 = self.resolve_bounds(spec.bounds)
            grid = CellMap(corner1, corner2, resolution)
        else:
            if not spec.vertices:
                raise ValueError("Polygon grids need vertices")
            polygon = PolygonMap(spec.vertices, spec.explored)
            grid = polygon.to_cell_map(
                resolution,
                include_boundary=bool(self.config.get('rasterization.include_boundary', True)),
            )

        logger.info(
            f"Created {spec.grid_type} grid {spec.name or ''}".rstrip(),
            extra={'context': {'width': grid.width, 'height': grid.height}},
        )
        return grid

    def create_local_map(self,
                         spec: Union[GridSpecification, Dict[str, Any]],
                         my_position: RealWorldLocation,
                         other_positions: Iterable[RealWorldLocation] = (),
                         policy: Optional[str] = None) -> LocalMap:
        """Create a grid and place the robots on it using ``policy``."""
        grid = self.create_grid(spec)
        policy = policy or self.config.get('local_map.placement_policy', 'strict')
        logger.debug("Placing robots", extra={'context': {'policy': policy}})
        return LocalMap.create(grid, my_position, other_positions, policy=policy)

    @classmethod
    def available_grid_types(cls) -> List[str]:
        return list(cls.GRID_TYPES)
