"""Shared fixtures for grid system tests."""

import pytest
import yaml

from local_robot_map.config import Config


@pytest.fixture
def test_config_file(test_data_dir):
    """Create a real test config file."""
    config_data = {
        'grids': {
            'default_resolution': 2.0,
        },
        'local_map': {
            'placement_policy': 'tolerant',
        },
        'regions': {
            'custom': {
                'test_region': [0, 0, 10, 10],
                'warehouse': {
                    'bounds': [-20, -5, 20, 5],
                    'category': 'indoor',
                    'metadata': {'floor': 1},
                },
                'broken': [1, 2, 3],
            }
        }
    }

    config_path = test_data_dir / "test_config.yml"
    with open(config_path, 'w') as f:
        yaml.dump(config_data, f)

    return config_path


@pytest.fixture
def test_config(test_config_file):
    """Create a real Config instance."""
    return Config(test_config_file)
