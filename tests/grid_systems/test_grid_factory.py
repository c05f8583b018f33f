"""Tests for grid factory."""

import pytest

from local_robot_map import (
    AxisResolution, CellLabel, CellMap, GridFactory, GridSpecification, LocalMap,
    NotEnoughVerticesError, Point, RealWorldLocation
)
from local_robot_map.grid_systems import BoundsDefinition


def loc(x, y, z=0.0):
    return RealWorldLocation.from_xyz(x, y, z)


class TestGridSpecification:
    """Test GridSpecification class."""

    def test_spec_creation(self):
        spec = GridSpecification(grid_type='cell', resolution=0.5, bounds='0,0,4,4')

        assert spec.grid_type == 'cell'
        assert spec.explored == []
        assert spec.metadata == {}

    def test_unknown_grid_type(self):
        with pytest.raises(ValueError, match="Unknown grid type"):
            GridSpecification(grid_type='hexagonal')


class TestGridFactory:
    """Test GridFactory class."""

    def test_available_grid_types(self):
        assert GridFactory.available_grid_types() == ['cell', 'polygon']

    def test_resolve_resolution(self, test_config):
        factory = GridFactory(test_config)

        assert factory.resolve_resolution(None) == AxisResolution.uniform(2.0)
        assert factory.resolve_resolution(4) == AxisResolution.uniform(4.0)
        explicit = AxisResolution(1.0, 2.0, 1.0)
        assert factory.resolve_resolution(explicit) is explicit

    def test_cell_grid_from_region_name(self, test_config):
        grid = GridFactory(test_config).create_grid(
            GridSpecification(grid_type='cell', bounds='test_region')
        )

        assert isinstance(grid, CellMap)
        assert grid.shape == (20, 20)
        assert grid.offset == Point(0.0, 0.0, 0.0)

    def test_cell_grid_from_dict(self):
        grid = GridFactory().create_grid({
            'grid_type': 'cell',
            'resolution': 1.0,
            'bounds': '-2,-1,2,1',
        })

        assert grid.shape == (2, 4)
        assert grid.offset == Point(-2.0, -1.0, 0.0)

    def test_cell_grid_from_bounds_definition(self):
        spec = GridSpecification(
            grid_type='cell', resolution=1.0, bounds=BoundsDefinition('box', (0, 0, 3, 2))
        )

        assert GridFactory().create_grid(spec).shape == (2, 3)

    def test_cell_grid_from_corners(self):
        spec = GridSpecification(
            grid_type='cell', resolution=1.0, bounds=(loc(5.0, 5.0, 1.0), loc(1.0, 2.0, 0.0))
        )

        grid = GridFactory().create_grid(spec)

        assert grid.shape == (3, 4)
        assert grid.offset == Point(1.0, 2.0, 0.0)

    def test_cell_grid_without_bounds(self):
        with pytest.raises(ValueError, match="need bounds"):
            GridFactory().create_grid(GridSpecification(grid_type='cell'))

    def test_polygon_grid(self):
        spec = GridSpecification(
            grid_type='polygon',
            resolution=1.0,
            vertices=[loc(0.0, 0.0), loc(4.0, 4.0), loc(8.0, 0.0)],
            explored=[[loc(0.0, 0.0), loc(2.0, 0.0), loc(2.0, 2.0), loc(0.0, 2.0)]],
        )

        grid = GridFactory().create_grid(spec)

        assert grid.shape == (4, 8)
        assert len(grid.get_map_state(CellLabel.EXPLORED)) == 4

    def test_polygon_grid_without_vertices(self):
        with pytest.raises(ValueError, match="need vertices"):
            GridFactory().create_grid(GridSpecification(grid_type='polygon'))

    def test_polygon_grid_invalid(self):
        spec = GridSpecification(grid_type='polygon', vertices=[loc(0.0, 0.0), loc(1.0, 1.0)])

        with pytest.raises(NotEnoughVerticesError):
            GridFactory().create_grid(spec)

    def test_create_local_map_uses_configured_policy(self, test_config):
        """The test config selects tolerant placement."""
        local_map = GridFactory(test_config).create_local_map(
            GridSpecification(grid_type='cell', bounds='test_region'),
            loc(1.0, 1.0),
            [loc(50.0, 50.0)],
        )

        assert isinstance(local_map, LocalMap)
        assert local_map.get_location(loc(1.0, 1.0)) is CellLabel.MY_ROBOT
        assert local_map.get_map_state(CellLabel.OTHER_ROBOT) == []

    def test_create_local_map_explicit_policy(self, test_config):
        local_map = GridFactory(test_config).create_local_map(
            GridSpecification(grid_type='cell', bounds='test_region'),
            loc(1.0, 1.0),
            [loc(12.0, 1.0)],
            policy='expanding',
        )

        assert local_map.map.shape == (20, 25)
