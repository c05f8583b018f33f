"""Bounds management for map generation."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple, Union, cast
import logging

from shapely.geometry import Polygon, box

from ..abstractions.types import Point, RealWorldLocation
from ..config import config as default_config

logger = logging.getLogger(__name__)


@dataclass
class BoundsDefinition:
    """Axis-aligned bounding box in real-world meters."""
    name: str
    bounds: Tuple[float, float, float, float]  # minx, miny, maxx, maxy
    category: str = "custom"  # custom, polygon, map
    metadata: Optional[Dict] = None

    @classmethod
    def from_points(cls,
                    points: Iterable[Union[Point, RealWorldLocation]],
                    name: str = "custom",
                    category: str = "custom") -> 'BoundsDefinition':
        """Smallest box containing all ``points`` (x/y only)."""
        xs: List[float] = []
        ys: List[float] = []
        for point in points:
            xs.append(point.x)
            ys.append(point.y)

        if not xs:
            raise ValueError("Cannot compute bounds of an empty point set")

        return cls(name, (min(xs), min(ys), max(xs), max(ys)), category=category)

    @property
    def minx(self) -> float:
        return self.bounds[0]

    @property
    def miny(self) -> float:
        return self.bounds[1]

    @property
    def maxx(self) -> float:
        return self.bounds[2]

    @property
    def maxy(self) -> float:
        return self.bounds[3]

    @property
    def width(self) -> float:
        return self.bounds[2] - self.bounds[0]

    @property
    def height(self) -> float:
        return self.bounds[3] - self.bounds[1]

    @property
    def polygon(self) -> Polygon:
        """Get bounds as polygon."""
        return box(*self.bounds)

    def corners(self, z: float = 0.0) -> Tuple[RealWorldLocation, RealWorldLocation]:
        """Lower-left and upper-right corners as real-world locations."""
        return (
            RealWorldLocation.from_xyz(self.minx, self.miny, z),
            RealWorldLocation.from_xyz(self.maxx, self.maxy, z),
        )

    def contains(self, x: float, y: float) -> bool:
        """Check if point is within bounds (edges included)."""
        return (self.bounds[0] <= x <= self.bounds[2] and
                self.bounds[1] <= y <= self.bounds[3])

    def intersects(self, other_bounds: Tuple[float, float, float, float]) -> bool:
        return self.polygon.intersects(box(*other_bounds))

    def union(self, other: 'BoundsDefinition') -> 'BoundsDefinition':
        """Smallest box containing both boxes."""
        return BoundsDefinition(
            name=f"{self.name}+{other.name}",
            bounds=(
                min(self.minx, other.minx),
                min(self.miny, other.miny),
                max(self.maxx, other.maxx),
                max(self.maxy, other.maxy),
            ),
            category=self.category,
        )


class BoundsManager:
    """Resolve named operation areas into bounds."""

    def __init__(self, config=None):
        self.config = config or default_config
        self.custom_regions: Dict[str, BoundsDefinition] = {}
        self._load_custom_regions()

    def _load_custom_regions(self):
        """Load custom regions from config."""
        custom_bounds = self.config.get('regions.custom', {}) or {}

        for name, bounds_config in custom_bounds.items():
            if isinstance(bounds_config, (list, tuple)) and len(bounds_config) == 4:
                self.custom_regions[name] = BoundsDefinition(
                    name=name,
                    bounds=cast(Tuple[float, float, float, float],
                                tuple(float(v) for v in bounds_config)),
                )
            elif isinstance(bounds_config, dict) and 'bounds' in bounds_config:
                self.custom_regions[name] = BoundsDefinition(
                    name=name,
                    bounds=cast(Tuple[float, float, float, float],
                                tuple(float(v) for v in bounds_config['bounds'])),
                    category=bounds_config.get('category', 'custom'),
                    metadata=bounds_config.get('metadata')
                )
            else:
                logger.warning(f"Ignoring malformed region '{name}': {bounds_config!r}")

    def get_bounds(self, name: str) -> BoundsDefinition:
        """
        Get bounds by name.

        Args:
            name: Region name or 'minx,miny,maxx,maxy' string

        Returns:
            BoundsDefinition object
        """
        if name in self.custom_regions:
            return self.custom_regions[name]

        # Try to parse as bounds string
        if ',' in name:
            try:
                parts = [float(x.strip()) for x in name.split(',')]
            except ValueError:
                parts = []
            if len(parts) == 4:
                return BoundsDefinition(
                    name='custom_bounds',
                    bounds=cast(Tuple[float, float, float, float], tuple(parts)),
                )

        raise ValueError(f"Unknown bounds: {name}. Available: {self.list_available()}")

    def list_available(self) -> List[str]:
        return sorted(self.custom_regions)

    def save_bounds_definition(self, bounds: BoundsDefinition, name: Optional[str] = None):
        """Register a region for the lifetime of this manager."""
        self.custom_regions[name or bounds.name] = bounds
