"""Tests for the configuration system."""

import pytest
import yaml

from local_robot_map.config import Config, config


class TestConfigurationDefaults:
    """Test the default configuration."""

    def test_sections_are_accessible(self):
        assert config.grids['default_resolution'] == 1.0
        assert config.rasterization['include_boundary'] is True
        assert config.local_map['placement_policy'] == 'strict'
        assert config.local_map['expansion_fill_label'] == 'Unexplored'
        assert config.visualization['mode'] == 'RGB'
        assert config.regions == {'custom': {}}
        assert 'project_root' in config.paths

    def test_logging_section(self):
        assert config.logging['level'] == 'INFO'
        assert config.logging['log_file'] is None
        assert config.logging['backup_count'] == 5

    def test_dot_notation(self):
        assert config.get('grids.label_dtype') == 'int8'
        assert config.get('grids.missing', 'fallback') == 'fallback'
        assert config.get('grids.default_resolution.deeper') is None

    def test_defaults_are_not_shared(self):
        first, second = Config(), Config()
        first.set('local_map.placement_policy', 'expanding')

        assert second.get('local_map.placement_policy') == 'strict'

    def test_set_creates_sections(self):
        settings = Config()
        settings.set('experiments.trial.name', 'maze')

        assert settings.get('experiments.trial.name') == 'maze'


class TestConfigurationFile:
    """Test YAML overrides."""

    def test_yaml_is_merged(self, test_data_dir):
        path = test_data_dir / 'config.yml'
        path.write_text(yaml.dump({
            'grids': {'default_resolution': 4.0},
            'visualization': {'mode': 'L'},
        }))

        settings = Config(path)

        assert settings.get('grids.default_resolution') == 4.0
        # Untouched keys of a merged section survive
        assert settings.get('grids.label_dtype') == 'int8'
        assert settings.visualization['mode'] == 'L'

    def test_missing_file_keeps_defaults(self, test_data_dir):
        settings = Config(test_data_dir / 'nope.yml')

        assert settings.get('local_map.placement_policy') == 'strict'

    @pytest.mark.parametrize('content', [
        'grids: [unclosed',
        '- just\n- a list\n',
        '',
    ])
    def test_unusable_file_keeps_defaults(self, test_data_dir, content):
        path = test_data_dir / 'config.yml'
        path.write_text(content)

        settings = Config(path)

        assert settings.get('grids.default_resolution') == 1.0

    def test_discovery_skipped_in_test_mode(self, test_data_dir, monkeypatch):
        path = test_data_dir / 'config.yml'
        path.write_text(yaml.dump({'grids': {'default_resolution': 9.0}}))
        monkeypatch.setenv('LOCAL_ROBOT_MAP_CONFIG', str(path))
        monkeypatch.setenv('FORCE_TEST_MODE', 'true')

        assert Config().get('grids.default_resolution') == 1.0

    def test_discovery_from_environment(self, test_data_dir, monkeypatch):
        path = test_data_dir / 'config.yml'
        path.write_text(yaml.dump({'grids': {'default_resolution': 9.0}}))
        monkeypatch.setenv('LOCAL_ROBOT_MAP_CONFIG', str(path))
        monkeypatch.setenv('FORCE_TEST_MODE', 'false')
        monkeypatch.delenv('PYTEST_CURRENT_TEST', raising=False)

        assert Config().get('grids.default_resolution') == 9.0
