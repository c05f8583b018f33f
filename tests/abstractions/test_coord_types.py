"""Tests for coordinate types."""

import math
import random

import pytest

from local_robot_map import AxisResolution, InternalLocation, Point, RealWorldLocation


class TestPoint:
    """Test Point arithmetic."""

    def test_add_and_subtract(self):
        a = Point(1.0, 2.0, 3.0)
        b = Point(0.5, -1.0, 2.0)

        assert a + b == Point(1.5, 1.0, 5.0)
        assert a - b == Point(0.5, 3.0, 1.0)

    def test_axis_distances_are_absolute(self):
        a = Point(-1.0, 4.0, 0.0)
        b = Point(2.0, 1.0, -2.0)

        assert a.distance_x(b) == 3.0
        assert a.distance_y(b) == 3.0
        assert a.distance_z(b) == 2.0
        assert b.distance_x(a) == a.distance_x(b)

    def test_euclidean_distance(self):
        assert Point(0.0, 0.0, 0.0).distance(Point(3.0, 4.0, 0.0)) == 5.0

    def test_componentwise_min(self):
        a = Point(1.0, -2.0, 5.0)
        b = Point(-1.0, 3.0, 0.0)

        assert a.componentwise_min(b) == Point(-1.0, -2.0, 0.0)

    def test_is_finite(self):
        assert Point(1.0, 2.0, 3.0).is_finite()
        assert not Point(math.nan, 0.0, 0.0).is_finite()
        assert not Point(0.0, 0.0, math.inf).is_finite()


class TestAxisResolution:
    """Test resolution validation."""

    def test_uniform(self):
        assert AxisResolution.uniform(2.0) == AxisResolution(2.0, 2.0, 2.0)

    @pytest.mark.parametrize('values', [
        (0.0, 1.0, 1.0),
        (1.0, -1.0, 1.0),
        (1.0, 1.0, math.nan),
        (math.inf, 1.0, 1.0),
    ])
    def test_rejects_non_positive_or_non_finite(self, values):
        with pytest.raises(ValueError, match="Resolution must be positive"):
            AxisResolution(*values)


class TestLocationConversion:
    """Test conversion between real-world and internal coordinates."""

    def test_into_internal_translates_and_scales(self):
        location = RealWorldLocation.from_xyz(1.5, -2.0, 0.5)
        internal = location.into_internal(Point(-1.0, -4.0, 0.25), AxisResolution(2.0, 3.0, 1.0))

        assert internal.x == pytest.approx(5.0)
        assert internal.y == pytest.approx(6.0)
        assert internal.z == pytest.approx(0.25)
        assert internal.offset == Point(-1.0, -4.0, 0.25)

    def test_round_trip_is_exact(self):
        """Converting there and back returns the identical location."""
        location = RealWorldLocation.from_xyz(1.3, -2.7, 0.1)
        resolution = AxisResolution(3.0, 7.0, 1.0)

        back = location.into_internal(Point(-5.1, 0.3, 0.0), resolution).into_real_world()

        assert back == location

    def test_change_offset_is_exact(self):
        """Test re-anchoring once keeps the real-world location."""
        location = RealWorldLocation.from_xyz(0.7, 0.1, 0.0)
        resolution = AxisResolution.uniform(10.0)

        internal = location.into_internal(Point(0.0, 0.0, 0.0), resolution)
        moved = internal.change_offset(Point(-3.3, 1.9, 0.0))

        assert moved.offset == Point(-3.3, 1.9, 0.0)
        assert moved.resolution == resolution
        assert moved.into_real_world() == location

    def test_repeated_change_offset_is_exact(self):
        """Test chained re-anchoring over many points keeps every location."""
        rng = random.Random(7)
        resolutions = [
            AxisResolution(3.0, 7.0, 1.0),
            AxisResolution(0.1, 13.7, 2.0),
            AxisResolution.uniform(1 / 3),
        ]

        for _ in range(200):
            location = RealWorldLocation.from_xyz(
                rng.uniform(-1e3, 1e3), rng.uniform(-1e3, 1e3), rng.uniform(-10.0, 10.0)
            )
            resolution = rng.choice(resolutions)
            internal = location.into_internal(Point(0.0, 0.0, 0.0), resolution)

            for _ in range(20):
                offset = Point(
                    rng.uniform(-1e3, 1e3), rng.uniform(-1e3, 1e3), rng.uniform(-5.0, 5.0)
                )
                internal = internal.change_offset(offset)
                assert internal.offset == offset

            assert internal.into_real_world() == location

    def test_equal_internal_locations_keep_their_source(self):
        """Test equal internal locations still return their own source."""
        offset = Point(1.0, 0.0, 0.0)
        resolution = AxisResolution.uniform(1.0)
        tiny = RealWorldLocation.from_xyz(1e-17, 0.0, 0.0)
        zero = RealWorldLocation.from_xyz(0.0, 0.0, 0.0)

        a = tiny.into_internal(offset, resolution)
        b = zero.into_internal(offset, resolution)

        assert a == b
        assert a.into_real_world() == tiny
        assert b.into_real_world() == zero

    def test_into_real_world_without_source(self):
        internal = InternalLocation(
            Point(4.0, 6.0, 1.0), Point(1.0, 1.0, 0.0), AxisResolution(2.0, 3.0, 1.0)
        )

        assert internal.into_real_world() == RealWorldLocation.from_xyz(3.0, 3.0, 1.0)

    def test_source_does_not_affect_equality(self):
        resolution = AxisResolution.uniform(1.0)
        offset = Point(0.0, 0.0, 0.0)
        derived = RealWorldLocation.from_xyz(2.0, 3.0, 0.0).into_internal(offset, resolution)

        assert derived == InternalLocation(Point(2.0, 3.0, 0.0), offset, resolution)

    def test_to_index_floors(self):
        internal = InternalLocation(
            Point(2.7, -0.2, 0.0), Point(0.0, 0.0, 0.0), AxisResolution.uniform(1.0)
        )

        assert internal.to_index() == (-1, 2)
