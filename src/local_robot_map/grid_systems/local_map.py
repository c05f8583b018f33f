"""A robot's local view of the map: the grid plus robot positions."""

from typing import Any, Callable, Iterable, List, Optional
import logging

from ..abstractions.interfaces import Location, Mask, Partition, PartitionAlgorithm, Visualize
from ..abstractions.types import Cell, CellLabel, RealWorldLocation
from ..config import config
from ..exceptions import OutOfMapError, PartitionError, PartitionErrorKind
from ..infrastructure.logging import log_operation
from .cell_map import CellMap

logger = logging.getLogger(__name__)


class LocalMap(Location, Mask, Partition, Visualize):
    """
    Cell map together with the robot that owns it and the robots it knows of.

    Build instances with one of the placement constructors:

    - :meth:`new_strict` fails if any robot is outside the grid
    - :meth:`new_tolerant` leaves out-of-grid robots unmarked
    - :meth:`new_expanding` grows the grid until every robot fits

    Robot cells are stamped in order, own robot first, so a later robot on
    the same cell wins.
    """

    def __init__(self,
                 cell_map: CellMap,
                 my_position: RealWorldLocation,
                 other_positions: Optional[Iterable[RealWorldLocation]] = None,
                 partition_algorithm: Optional[PartitionAlgorithm] = None):
        """Wrap an already prepared grid; robot cells are not stamped."""
        self._map = cell_map
        self._my_position = my_position
        self._other_positions = list(other_positions or [])
        self._partition_algorithm = partition_algorithm

    @classmethod
    @log_operation("place_robots_strict")
    def new_strict(cls,
                   cell_map: CellMap,
                   my_position: RealWorldLocation,
                   other_positions: Iterable[RealWorldLocation] = ()) -> 'LocalMap':
        """
        Place every robot on the grid.

        All positions are checked before any cell is written, so the grid is
        left untouched when this fails.

        Raises:
            OutOfMapError: For the first robot (own robot first) off the grid
        """
        other_positions = list(other_positions)
        placements = cls._placements(my_position, other_positions)

        for position, _ in placements:
            cell_map.location_to_map_index(position)

        for position, label in placements:
            cell_map.set_location(position, label)

        return cls(cell_map, my_position, other_positions)

    @classmethod
    @log_operation("place_robots_tolerant")
    def new_tolerant(cls,
                     cell_map: CellMap,
                     my_position: RealWorldLocation,
                     other_positions: Iterable[RealWorldLocation] = ()) -> 'LocalMap':
        """Place the robots that fit; the others are recorded but not marked."""
        other_positions = list(other_positions)

        for position, label in cls._placements(my_position, other_positions):
            try:
                cell_map.set_location(position, label)
            except OutOfMapError:
                logger.warning(f"{label.label_name} at {position} is outside the map, not marked")

        return cls(cell_map, my_position, other_positions)

    @classmethod
    @log_operation("place_robots_expanding")
    def new_expanding(cls,
                      cell_map: CellMap,
                      my_position: RealWorldLocation,
                      other_positions: Iterable[RealWorldLocation] = (),
                      fill_label: Optional[CellLabel] = None) -> 'LocalMap':
        """
        Grow the grid to cover every robot, then place them.

        Args:
            fill_label: Label of newly added cells,
                ``local_map.expansion_fill_label`` if omitted

        Raises:
            OutOfMapError: If a robot position is not finite, or the grown
                grid would exceed ``local_map.max_expansion_cells``
        """
        other_positions = list(other_positions)
        if fill_label is None:
            fill_label = CellLabel.from_name(
                config.get('local_map.expansion_fill_label', 'Unexplored')
            )

        expanded = cell_map.expand_to_include([my_position, *other_positions], fill_label)
        return cls.new_strict(expanded, my_position, other_positions)

    @classmethod
    def create(cls,
               cell_map: CellMap,
               my_position: RealWorldLocation,
               other_positions: Iterable[RealWorldLocation] = (),
               policy: Optional[str] = None) -> 'LocalMap':
        """
        Build a local map with the named placement policy.

        Args:
            policy: 'strict', 'tolerant' or 'expanding';
                ``local_map.placement_policy`` if omitted
        """
        policy = policy or config.get('local_map.placement_policy', 'strict')
        constructors: dict = {
            'strict': cls.new_strict,
            'tolerant': cls.new_tolerant,
            'expanding': cls.new_expanding,
        }
        if policy not in constructors:
            raise ValueError(
                f"Unknown placement policy: {policy}. Available: {sorted(constructors)}"
            )
        return constructors[policy](cell_map, my_position, other_positions)

    @staticmethod
    def _placements(my_position, other_positions):
        return ([(my_position, CellLabel.MY_ROBOT)]
                + [(position, CellLabel.OTHER_ROBOT) for position in other_positions])

    @property
    def map(self) -> CellMap:
        return self._map

    @property
    def my_position(self) -> RealWorldLocation:
        return self._my_position

    @property
    def other_positions(self) -> List[RealWorldLocation]:
        return list(self._other_positions)

    def get_location(self, location: RealWorldLocation) -> CellLabel:
        return self._map.get_location(location)

    def set_location(self, location: RealWorldLocation, label: CellLabel) -> None:
        self._map.set_location(location, label)

    def get_map_region(self, predicate: Callable[[CellLabel], bool]) -> List[Cell]:
        return self._map.get_map_region(predicate)

    def set_partition_algorithm(self, algorithm: PartitionAlgorithm) -> None:
        self._partition_algorithm = algorithm

    def get_partition_algorithm(self) -> PartitionAlgorithm:
        if self._partition_algorithm is None:
            raise PartitionError(PartitionErrorKind.NO_PARTITIONING_ALGORITHM)
        return self._partition_algorithm

    def partition(self, factors: Optional[Any] = None) -> 'LocalMap':
        logger.debug(f"Partitioning map for robot at {self._my_position}")
        return super().partition(factors)

    def as_image(self, mode: Optional[str] = None):
        return self._map.as_image(mode)

    def __repr__(self) -> str:
        return (f"LocalMap(map={self._map!r}, my_position={self._my_position}, "
                f"other_positions={len(self._other_positions)}, "
                f"partition_algorithm={'set' if self._partition_algorithm else 'none'})")
