# src/local_robot_map/abstractions/types/map_types.py
"""Cell label and query result definitions."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

from .coord_types import RealWorldLocation


class CellLabel(IntEnum):
    """State of a single map cell.

    Stored in the label matrix by value, hence the integer base.
    """
    OUT_OF_MAP = 0
    OTHER_ROBOT = 1
    MY_ROBOT = 2
    EXPLORED = 3
    UNEXPLORED = 4
    FRONTIER = 5
    ASSIGNED = 6

    @property
    def label_name(self) -> str:
        """CamelCase name, e.g. ``OutOfMap``."""
        return _LABEL_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> 'CellLabel':
        """Look up a label by its CamelCase or enum member name."""
        for label, label_name in _LABEL_NAMES.items():
            if name in (label_name, label.name):
                return label
        raise ValueError(f"Unknown cell label: {name}. Available: {list(_LABEL_NAMES.values())}")

    def to_luma(self) -> int:
        """Grayscale intensity used when rendering the map."""
        return LUMA_COLORS[self]

    def to_rgb(self) -> Tuple[int, int, int]:
        """RGB color used when rendering the map."""
        return RGB_COLORS[self]


_LABEL_NAMES = {
    CellLabel.OUT_OF_MAP: "OutOfMap",
    CellLabel.OTHER_ROBOT: "OtherRobot",
    CellLabel.MY_ROBOT: "MyRobot",
    CellLabel.EXPLORED: "Explored",
    CellLabel.UNEXPLORED: "Unexplored",
    CellLabel.FRONTIER: "Frontier",
    CellLabel.ASSIGNED: "Assigned",
}

LUMA_COLORS = {
    CellLabel.OUT_OF_MAP: 0,
    CellLabel.OTHER_ROBOT: 40,
    CellLabel.MY_ROBOT: 50,
    CellLabel.EXPLORED: 180,
    CellLabel.UNEXPLORED: 120,
    CellLabel.FRONTIER: 220,
    CellLabel.ASSIGNED: 255,
}

RGB_COLORS = {
    CellLabel.OUT_OF_MAP: (0, 0, 0),
    CellLabel.OTHER_ROBOT: (50, 255, 50),
    CellLabel.MY_ROBOT: (255, 50, 50),
    CellLabel.EXPLORED: (200, 200, 200),
    CellLabel.UNEXPLORED: (100, 100, 100),
    CellLabel.FRONTIER: (255, 100, 255),
    CellLabel.ASSIGNED: (255, 255, 0),
}


@dataclass(frozen=True)
class Cell:
    """A map cell returned by region queries.

    ``location`` is the real-world lower corner of the cell.
    """
    location: RealWorldLocation
    label: CellLabel
    row: int
    col: int

    @property
    def index(self) -> Tuple[int, int]:
        return self.row, self.col
