"""Polygon-defined maps and their rasterization into cell maps."""

from typing import List, Optional, Sequence
import logging

import numpy as np
import shapely
from shapely.geometry import Polygon
from shapely.validation import explain_validity

from ..abstractions.types import AxisResolution, CellLabel, RealWorldLocation
from ..config import config
from ..exceptions import (
    InvalidGeometryError, NonFiniteCoordinateError, NotEnoughVerticesError, OutOfMapError
)
from ..infrastructure.logging import log_operation
from .bounds_manager import BoundsDefinition
from .cell_map import CellMap

logger = logging.getLogger(__name__)


class PolygonMap:
    """
    Map whose boundary is a simple polygon in real-world coordinates.

    ``explored`` holds sub-polygons already covered by the robots. They are
    stamped as explored when the map is rasterized.

    Raises:
        NotEnoughVerticesError: A polygon has fewer than 3 vertices
        NonFiniteCoordinateError: A vertex has a NaN or infinite component
        InvalidGeometryError: A polygon self-intersects or has no area
    """

    def __init__(self,
                 vertices: Sequence[RealWorldLocation],
                 explored: Optional[Sequence[Sequence[RealWorldLocation]]] = None):
        self._vertices = list(vertices)
        self._explored = [list(region) for region in (explored or [])]

        self._validate_region(self._vertices, 'map')
        for i, region in enumerate(self._explored):
            self._validate_region(region, f'explored[{i}]')

    @staticmethod
    def _validate_region(vertices: List[RealWorldLocation], region: str) -> None:
        if len(vertices) < 3:
            raise NotEnoughVerticesError(len(vertices), region)

        for vertex in vertices:
            if not vertex.location.is_finite():
                raise NonFiniteCoordinateError(vertex, region)

        polygon = Polygon([(v.x, v.y) for v in vertices])
        if not polygon.is_valid:
            raise InvalidGeometryError(explain_validity(polygon), region)
        if polygon.area <= 0:
            raise InvalidGeometryError("polygon has zero area", region)

    @property
    def vertices(self) -> List[RealWorldLocation]:
        return list(self._vertices)

    @property
    def explored(self) -> List[List[RealWorldLocation]]:
        return [list(region) for region in self._explored]

    @log_operation("rasterize_polygon")
    def to_cell_map(self,
                    resolution: Optional[AxisResolution] = None,
                    include_boundary: Optional[bool] = None) -> CellMap:
        """
        Rasterize the polygon into a cell map.

        The grid covers the polygon's bounding box. A cell is unexplored when
        its center lies inside the polygon (on the boundary too, unless
        ``include_boundary`` is False), out-of-map otherwise. Each explored
        region is rasterized the same way and its inside cells are marked
        explored; parts falling outside the main grid are dropped.

        Args:
            resolution: Cells per meter, ``grids.default_resolution`` if omitted
            include_boundary: Override ``rasterization.include_boundary``
        """
        if resolution is None:
            resolution = AxisResolution.uniform(
                float(config.get('grids.default_resolution', 1.0))
            )
        if include_boundary is None:
            include_boundary = bool(config.get('rasterization.include_boundary', True))

        cell_map = _rasterize(self._vertices, resolution, include_boundary)

        stamped = dropped = 0
        for region in self._explored:
            explored_map = _rasterize(region, resolution, include_boundary)
            for cell in explored_map.get_map_state(CellLabel.UNEXPLORED):
                try:
                    cell_map.set_location(cell.location, CellLabel.EXPLORED)
                    stamped += 1
                except OutOfMapError:
                    dropped += 1

        if dropped:
            logger.debug(f"Dropped {dropped} explored cells outside the polygon grid")
        logger.debug(
            f"Rasterized polygon, {stamped} explored cells",
            extra={'context': {'width': cell_map.width, 'height': cell_map.height}},
        )
        return cell_map

    def __repr__(self) -> str:
        return f"PolygonMap(vertices={len(self._vertices)}, explored={len(self._explored)})"


def _rasterize(vertices: List[RealWorldLocation],
               resolution: AxisResolution,
               include_boundary: bool) -> CellMap:
    """Label the bounding-box grid of one polygon by sampling cell centers."""
    bounds = BoundsDefinition.from_points(vertices, category='polygon')
    lower, upper = bounds.corners(z=min(v.z for v in vertices))
    cell_map = CellMap(lower, upper, resolution)

    internal = [v.into_internal(cell_map.offset, resolution) for v in vertices]
    polygon = Polygon([(p.x, p.y) for p in internal])
    shapely.prepare(polygon)

    xs = np.arange(cell_map.width) + 0.5
    ys = np.arange(cell_map.height) + 0.5
    grid_x, grid_y = np.meshgrid(xs, ys)

    predicate = shapely.intersects_xy if include_boundary else shapely.contains_xy
    inside = predicate(polygon, grid_x, grid_y)

    cell_map.cells[...] = np.where(inside, CellLabel.UNEXPLORED, CellLabel.OUT_OF_MAP)
    return cell_map
