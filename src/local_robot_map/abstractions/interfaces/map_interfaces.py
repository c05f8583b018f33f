"""Pure interfaces implemented by map types.

Maps are accessed with real-world coordinates only. Implementations take care
of translating to whatever internal representation they use.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, TypeVar

from ...exceptions import PartitionError, PartitionErrorKind
from ..types import Cell, CellLabel, RealWorldLocation

M = TypeVar('M', bound='Partition')

# Consumes a map and returns the partitioned one. The second argument carries
# optional partitioning factors (e.g. robot speeds used for weighting).
PartitionAlgorithm = Callable[[Any, Optional[Any]], Any]


class Location(ABC):
    """Read and update map cells by real-world location."""

    @abstractmethod
    def get_location(self, location: RealWorldLocation) -> CellLabel:
        """
        Get the label at a location.

        Raises:
            OutOfMapError: If the location is outside the map
        """
        pass

    @abstractmethod
    def set_location(self, location: RealWorldLocation, label: CellLabel) -> None:
        """
        Overwrite the label at a location.

        Raises:
            OutOfMapError: If the location is outside the map
        """
        pass


class Mask(ABC):
    """Retrieve a subarea of the map based on a condition."""

    @abstractmethod
    def get_map_region(self, predicate: Callable[[CellLabel], bool]) -> List[Cell]:
        """Get all cells whose label satisfies ``predicate``."""
        pass

    def get_map_state(self, label: CellLabel) -> List[Cell]:
        """Get all cells carrying ``label``."""
        return self.get_map_region(lambda value: value == label)


class Visualize(ABC):
    """Convert a map to an image."""

    @abstractmethod
    def as_image(self, mode: Optional[str] = None):
        """Render the map; see :mod:`local_robot_map.visualization`."""
        pass


class Partition(ABC):
    """Partition a map using an injected algorithm.

    Calling :meth:`partition` hands the map to the algorithm and returns
    the map it produces, with the same algorithm attached again.
    """

    @abstractmethod
    def set_partition_algorithm(self, algorithm: PartitionAlgorithm) -> None:
        pass

    @abstractmethod
    def get_partition_algorithm(self) -> PartitionAlgorithm:
        """
        Get the configured algorithm.

        Raises:
            PartitionError: If no algorithm was provided
        """
        pass

    def partition(self: M, factors: Optional[Any] = None) -> M:
        algorithm = self.get_partition_algorithm()
        partitioned = algorithm(self, factors)
        if partitioned is None:
            raise PartitionError(
                PartitionErrorKind.NO_MAP,
                "Partitioning algorithm did not return a map",
            )
        partitioned.set_partition_algorithm(algorithm)
        return partitioned
