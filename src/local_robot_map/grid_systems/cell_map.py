"""Cell map: a 2D grid of labeled cells anchored to the real world."""

import math
from typing import Callable, Iterable, List, Optional, Tuple, Union
import logging

import numpy as np

from ..abstractions.interfaces import Location, Mask, Visualize
from ..abstractions.types import (
    AxisResolution, Cell, CellLabel, InternalLocation, Point, RealWorldLocation
)
from ..config import config
from ..exceptions import OutOfMapError
from .bounds_manager import BoundsDefinition

logger = logging.getLogger(__name__)


def _as_point(value: Union[Point, RealWorldLocation]) -> Point:
    if isinstance(value, RealWorldLocation):
        return value.location
    return value


class CellMap(Location, Mask, Visualize):
    """
    Map made of a 2D grid of cells.

    Only the x and y components of coordinates are used for indexing; z is
    carried along in the offset but otherwise ignored. Callers always work with
    real-world coordinates; the translation into matrix indices happens inside.

    Matrices cannot have negative indices, so the grid is shifted by an
    ``offset``: the real-world location of the bounding box's lower-left corner.

    Example:
        >>> map = CellMap(
        ...     RealWorldLocation.from_xyz(-1.0, -2.0, 0.0),
        ...     RealWorldLocation.from_xyz(0.5, 1.0, 0.0),
        ...     AxisResolution.uniform(2.0),
        ... )
        >>> map.offset
        Point(x=-1.0, y=-2.0, z=0.0)
        >>> (map.width, map.height)
        (3, 6)

    Cells that don't fit entirely are dropped: a 1.5m wide box at 1 cell per
    meter yields a single column. Raise the resolution to lose less area.
    """

    def __init__(self,
                 point1: Union[RealWorldLocation, Point],
                 point2: Union[RealWorldLocation, Point],
                 resolution: AxisResolution):
        """
        Create an all-unexplored map covering the box spanned by two corners.

        Args:
            point1: One corner of the bounding box
            point2: The opposite corner
            resolution: Cells per meter along each axis
        """
        p1, p2 = _as_point(point1), _as_point(point2)

        columns = math.floor(p1.distance_x(p2) * resolution.x)
        rows = math.floor(p1.distance_y(p2) * resolution.y)

        self._resolution = resolution
        self._offset = p1.componentwise_min(p2)
        self._cells = np.full(
            (rows, columns),
            CellLabel.UNEXPLORED,
            dtype=config.get('grids.label_dtype', 'int8'),
        )

        logger.debug(f"Created {columns}x{rows} cell map at offset {self._offset}")

    @classmethod
    def from_raster(cls,
                    cells,
                    resolution: AxisResolution,
                    offset: Union[Point, RealWorldLocation]) -> 'CellMap':
        """
        Create a map from an existing label matrix.

        The values are taken as-is: nothing checks that ``resolution`` and
        ``offset`` match the matrix. Reading a cell that holds no known label
        raises ``ValueError``.
        """
        cells = np.asarray(cells, dtype=config.get('grids.label_dtype', 'int8'))
        if cells.ndim != 2:
            raise ValueError(f"Label matrix must be 2D, got shape {cells.shape}")

        cell_map = cls.__new__(cls)
        cell_map._resolution = resolution
        cell_map._offset = _as_point(offset)
        cell_map._cells = cells
        return cell_map

    @property
    def resolution(self) -> AxisResolution:
        return self._resolution

    @property
    def offset(self) -> Point:
        return self._offset

    @property
    def cells(self) -> np.ndarray:
        """The label matrix, indexed ``[row, col]``."""
        return self._cells

    @property
    def ncols(self) -> int:
        return self._cells.shape[1]

    @property
    def nrows(self) -> int:
        return self._cells.shape[0]

    @property
    def width(self) -> int:
        return self.ncols

    @property
    def height(self) -> int:
        return self.nrows

    @property
    def shape(self) -> Tuple[int, int]:
        return self.nrows, self.ncols

    @property
    def bounds(self) -> BoundsDefinition:
        """Real-world area actually covered by the cells."""
        return BoundsDefinition(
            name='cell_map',
            bounds=(
                self._offset.x,
                self._offset.y,
                self._offset.x + self.width / self._resolution.x,
                self._offset.y + self.height / self._resolution.y,
            ),
            category='map',
        )

    def copy(self) -> 'CellMap':
        return CellMap.from_raster(self._cells.copy(), self._resolution, self._offset)

    def location_to_map_index(self, location: RealWorldLocation) -> Tuple[int, int]:
        """
        Translate a real-world location into a ``(row, col)`` matrix index.

        Raises:
            OutOfMapError: If the location falls outside the grid
        """
        if not isinstance(location, RealWorldLocation):
            raise TypeError(
                f"Expected a RealWorldLocation, got {type(location).__name__}"
            )

        internal = location.into_internal(self._offset, self._resolution)
        if not (math.isfinite(internal.x) and math.isfinite(internal.y)):
            raise OutOfMapError(location)

        row, col = internal.to_index()
        if row < 0 or col < 0 or row >= self.height or col >= self.width:
            raise OutOfMapError(location)

        return row, col

    def index_to_location(self, row: int, col: int) -> RealWorldLocation:
        """Real-world location of the lower corner of cell ``(row, col)``."""
        return InternalLocation(
            Point(col, row, 0.0), self._offset, self._resolution
        ).into_real_world()

    def get_location(self, location: RealWorldLocation) -> CellLabel:
        row, col = self.location_to_map_index(location)
        return CellLabel(int(self._cells[row, col]))

    def set_location(self, location: RealWorldLocation, label: CellLabel) -> None:
        row, col = self.location_to_map_index(location)
        self._cells[row, col] = CellLabel(label)

    def get_map_region(self, predicate: Callable[[CellLabel], bool]) -> List[Cell]:
        """Cells matching ``predicate``, in row-major order."""
        region = []
        for (row, col), value in np.ndenumerate(self._cells):
            label = CellLabel(int(value))
            if predicate(label):
                region.append(Cell(self.index_to_location(row, col), label, row, col))
        return region

    def expand_to_include(self,
                          locations: Iterable[RealWorldLocation],
                          fill_label: CellLabel = CellLabel.UNEXPLORED,
                          max_cells: Optional[int] = None) -> 'CellMap':
        """
        Grow the grid so that every location in ``locations`` maps to a cell.

        The grid keeps its resolution and cell alignment: it gains whole rows
        and columns on whichever sides are needed, the offset moves by whole
        cells, and existing labels are copied to their new indices. New cells
        get ``fill_label``. Returns ``self`` when nothing needs to change.

        Args:
            max_cells: Largest allowed cell count of the grown grid,
                ``local_map.max_expansion_cells`` if omitted

        Raises:
            OutOfMapError: If a location has non-finite coordinates, or
                reaching it would need more than ``max_cells`` cells
        """
        if max_cells is None:
            max_cells = int(config.get('local_map.max_expansion_cells', 10_000_000))

        min_row, min_col = 0, 0
        max_row, max_col = self.height - 1, self.width - 1

        for location in locations:
            internal = location.into_internal(self._offset, self._resolution)
            if not (math.isfinite(internal.x) and math.isfinite(internal.y)):
                raise OutOfMapError(location, f"Cannot expand map to reach {location!r}")
            row, col = internal.to_index()
            min_row, max_row = min(min_row, row), max(max_row, row)
            min_col, max_col = min(min_col, col), max(max_col, col)

            needed = (max_row - min_row + 1) * (max_col - min_col + 1)
            if needed > max_cells:
                raise OutOfMapError(
                    location,
                    f"Reaching {location!r} needs {needed} cells, limit is {max_cells}"
                )

        rows = max_row - min_row + 1
        columns = max_col - min_col + 1
        if (rows, columns) == self.shape:
            return self

        cells = np.full((rows, columns), CellLabel(fill_label), dtype=self._cells.dtype)
        cells[-min_row:-min_row + self.height, -min_col:-min_col + self.width] = self._cells

        offset = Point(
            self._offset.x + min_col / self._resolution.x,
            self._offset.y + min_row / self._resolution.y,
            self._offset.z,
        )

        logger.info(
            f"Expanded cell map from {self.width}x{self.height}, offset now {offset}",
            extra={'context': {'width': columns, 'height': rows}},
        )
        return CellMap.from_raster(cells, self._resolution, offset)

    def as_image(self, mode: Optional[str] = None):
        from ..visualization import to_image
        return to_image(self, mode)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CellMap):
            return NotImplemented
        return (self._offset == other._offset
                and self._resolution == other._resolution
                and np.array_equal(self._cells, other._cells))

    __hash__ = None

    def __repr__(self) -> str:
        return (f"CellMap(width={self.width}, height={self.height}, "
                f"offset={self._offset}, resolution={self._resolution})")
