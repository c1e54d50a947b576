"""Tests for configuration system.

Tests the ConfigBuilder class and configuration loading mechanism,
including YAML loading, environment variable resolution, and nested access.
"""

import pytest

from goscaffold.errors import ConfigurationError
from goscaffold.utils import config
from goscaffold.utils.config import ConfigBuilder, get_config_builder, get_config_value


class TestConfigBuilder:
    """Test ConfigBuilder class."""

    def test_config_builder_loads_yaml(self, tmp_path):
        config_file = tmp_path / "goscaffold.yml"
        config_file.write_text(
            """
create:
  port: 9090
  with: api,task
logging:
  level: DEBUG
"""
        )

        builder = ConfigBuilder(str(config_file))

        assert builder.raw_config["create"]["port"] == 9090
        assert builder.get("create.with") == "api,task"
        assert builder.get("logging.level") == "DEBUG"

    def test_empty_configuration_without_path(self):
        builder = ConfigBuilder()

        assert builder.config_path is None
        assert builder.raw_config == {}
        assert builder.get("create.port", 8080) == 8080

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / "goscaffold.yml"
        config_file.write_text("")

        assert ConfigBuilder(config_file).raw_config == {}

    def test_environment_variable_resolution(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TEST_OUTPUT", "/srv/projects")
        monkeypatch.delenv("TEST_MISSING", raising=False)
        config_file = tmp_path / "goscaffold.yml"
        config_file.write_text(
            """
create:
  output_dir: ${TEST_OUTPUT}
  with: ${TEST_MISSING:-api}
  module_prefix: $TEST_OUTPUT/go
  untouched: ${TEST_MISSING}
"""
        )

        builder = ConfigBuilder(config_file)

        assert builder.get("create.output_dir") == "/srv/projects"
        assert builder.get("create.with") == "api"
        assert builder.get("create.module_prefix") == "/srv/projects/go"
        assert builder.get("create.untouched") == "${TEST_MISSING}"

    def test_env_resolution_in_lists(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TEST_COMPONENT", "admin")
        config_file = tmp_path / "goscaffold.yml"
        config_file.write_text("create:\n  with: [api, '${TEST_COMPONENT}']\n")

        assert ConfigBuilder(config_file).get("create.with") == ["api", "admin"]

    def test_get_missing_path_returns_default(self, tmp_path):
        config_file = tmp_path / "goscaffold.yml"
        config_file.write_text("create:\n  port: 9090\n")
        builder = ConfigBuilder(config_file)

        assert builder.get("create.missing", "x") == "x"
        assert builder.get("create.port.deeper", "x") == "x"

    def test_non_mapping_raises(self, tmp_path):
        config_file = tmp_path / "goscaffold.yml"
        config_file.write_text("- just\n- a list\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            ConfigBuilder(config_file)

    def test_invalid_yaml_raises(self, tmp_path):
        config_file = tmp_path / "goscaffold.yml"
        config_file.write_text("create: [unclosed\n")

        with pytest.raises(ConfigurationError, match="parsing YAML"):
            ConfigBuilder(config_file)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigBuilder(tmp_path / "absent.yml")


class TestDefaultConfiguration:
    """Test discovery and caching of the default configuration."""

    def test_no_file_gives_empty_config(self):
        assert get_config_builder().config_path is None
        assert get_config_value("create.port", 8080) == 8080

    def test_discovers_file_in_cwd(self, tmp_path):
        (tmp_path / "cwd" / "goscaffold.yml").write_text("create:\n  port: 7000\n")

        assert get_config_value("create.port") == 7000

    def test_env_var_takes_priority(self, tmp_path, monkeypatch):
        (tmp_path / "cwd" / "goscaffold.yml").write_text("create:\n  port: 7000\n")
        other = tmp_path / "other.yml"
        other.write_text("create:\n  port: 7100\n")
        monkeypatch.setenv("GOSCAFFOLD_CONFIG", str(other))

        assert get_config_value("create.port") == 7100

    def test_default_is_cached_until_reset(self, tmp_path):
        first = get_config_builder()
        (tmp_path / "cwd" / "goscaffold.yml").write_text("create:\n  port: 7000\n")

        assert get_config_builder() is first
        config.reset_config()
        assert get_config_value("create.port") == 7000

    def test_explicit_path_set_as_default(self, tmp_path):
        config_file = tmp_path / "team.yml"
        config_file.write_text("create:\n  with: task\n")

        get_config_builder(config_file, set_as_default=True)

        assert get_config_value("create.with") == "task"

    def test_explicit_path_lookup(self, tmp_path):
        config_file = tmp_path / "team.yml"
        config_file.write_text("create:\n  with: task\n")

        assert get_config_value("create.with", config_path=config_file) == "task"
        assert get_config_value("create.with") is None

    def test_empty_path_rejected(self):
        with pytest.raises(ValueError):
            get_config_value("")
