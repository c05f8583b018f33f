# src/local_robot_map/abstractions/types/coord_types.py
"""Coordinate type definitions.

Two coordinate frames are in play:

- real-world: meters, as used by robots and callers of the public API
- internal: relative to a map's offset and scaled by its resolution, so that
  flooring the x/y components yields a non-negative matrix index

Only the x and y components take part in indexing. The z component is carried
along (and offset-corrected) but never scaled.
"""

import math
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Point:
    """3D coordinates in meters."""
    x: float
    y: float
    z: float

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def distance_x(self, other: 'Point') -> float:
        return abs(self.x - other.x)

    def distance_y(self, other: 'Point') -> float:
        return abs(self.y - other.y)

    def distance_z(self, other: 'Point') -> float:
        return abs(self.z - other.z)

    def distance(self, other: 'Point') -> float:
        """Euclidean distance between both points."""
        return math.sqrt(
            self.distance_x(other) ** 2
            + self.distance_y(other) ** 2
            + self.distance_z(other) ** 2
        )

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.x, self.y, self.z))

    def componentwise_min(self, other: 'Point') -> 'Point':
        return Point(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))


@dataclass(frozen=True)
class AxisResolution:
    """Cells per meter along each axis."""
    x: float
    y: float
    z: float

    def __post_init__(self):
        for axis in ('x', 'y', 'z'):
            value = getattr(self, axis)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"Resolution must be positive, got {axis}={value}")

    @classmethod
    def uniform(cls, resolution: float) -> 'AxisResolution':
        """Same resolution along all axes."""
        return cls(resolution, resolution, resolution)


@dataclass(frozen=True)
class RealWorldLocation:
    """A location expressed in real-world coordinates.

    This is the only coordinate type that maps accept from, and hand back to,
    their callers.
    """
    location: Point

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> 'RealWorldLocation':
        return cls(Point(x, y, z))

    @property
    def x(self) -> float:
        return self.location.x

    @property
    def y(self) -> float:
        return self.location.y

    @property
    def z(self) -> float:
        return self.location.z

    def into_internal(self, offset: Point, resolution: AxisResolution) -> 'InternalLocation':
        """Translate by ``offset`` and scale x/y by ``resolution``."""
        shifted = self.location - offset
        internal = Point(shifted.x * resolution.x, shifted.y * resolution.y, shifted.z)
        return InternalLocation(internal, offset, resolution, _source=self)


@dataclass(frozen=True)
class InternalLocation:
    """A location relative to a map's offset, scaled by its resolution.

    The offset and resolution it was derived with travel along, so converting
    back never needs outside knowledge. When the location was produced from a
    real-world location, that location is remembered and handed back by
    :meth:`into_real_world`, which keeps the round trip exact.

    The remembered source takes no part in equality or hashing. Two internal
    locations whose coordinates compare equal after scaling may still convert
    back to real-world locations that differ in the last bits, e.g. ``1e-17``
    and ``0.0`` seen from an offset of ``(1, 0, 0)``.
    """
    location: Point
    offset: Point
    resolution: AxisResolution
    _source: Optional[RealWorldLocation] = field(default=None, compare=False, repr=False)

    @property
    def x(self) -> float:
        return self.location.x

    @property
    def y(self) -> float:
        return self.location.y

    @property
    def z(self) -> float:
        return self.location.z

    def into_real_world(self) -> RealWorldLocation:
        """Undo the scaling, then add the offset back."""
        if self._source is not None:
            return self._source
        unscaled = Point(
            self.location.x / self.resolution.x,
            self.location.y / self.resolution.y,
            self.location.z,
        )
        return RealWorldLocation(unscaled + self.offset)

    def change_offset(self, new_offset: Point) -> 'InternalLocation':
        """Re-anchor this location to ``new_offset`` at the same resolution."""
        return self.into_real_world().into_internal(new_offset, self.resolution)

    def to_index(self) -> tuple:
        """Floor the x/y components into a ``(row, col)`` pair (may be negative)."""
        return math.floor(self.location.y), math.floor(self.location.x)
