"""Map-specific exceptions for consistent error handling."""

from enum import Enum
from typing import Optional, Any


class LocalMapError(Exception):
    """Base local map error."""
    pass


class OutOfMapError(LocalMapError):
    """Raised when a location resolves outside the map's current bounds."""

    def __init__(self, location: Any, message: Optional[str] = None):
        super().__init__(message or f"Location is outside the map: {location!r}")
        self.location = location


class PolygonMapError(LocalMapError):
    """Base error for malformed polygon input."""
    pass


class NotEnoughVerticesError(PolygonMapError):
    """Raised when a polygon has fewer than 3 vertices."""

    def __init__(self, vertex_count: int, region: str = "map"):
        super().__init__(
            f"Polygon '{region}' needs at least 3 vertices, got {vertex_count}"
        )
        self.vertex_count = vertex_count
        self.region = region


class NonFiniteCoordinateError(PolygonMapError):
    """Raised when a polygon vertex has a NaN or infinite component."""

    def __init__(self, vertex: Any, region: str = "map"):
        super().__init__(f"Polygon '{region}' has a non-finite vertex: {vertex!r}")
        self.vertex = vertex
        self.region = region


class InvalidGeometryError(PolygonMapError):
    """Raised when the polygon does not describe a valid area."""

    def __init__(self, reason: str, region: str = "map"):
        super().__init__(f"Polygon '{region}' is not a valid geometry: {reason}")
        self.reason = reason
        self.region = region


class PartitionErrorKind(Enum):
    """Reasons a partition request can fail."""
    NO_PARTITIONING_ALGORITHM = "no_partitioning_algorithm"
    NO_MAP = "no_map"


class PartitionError(LocalMapError):
    """Raised when a map cannot be partitioned."""

    def __init__(self, kind: PartitionErrorKind, message: Optional[str] = None):
        super().__init__(message or f"Partitioning failed: {kind.value}")
        self.kind = kind
