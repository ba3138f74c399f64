"""Tests for build configuration loading."""

import json
import os

import pytest

from gql_transform.core.config import Config, ConfigTarget, load_config
from gql_transform.core.errors import ConfigError


@pytest.fixture
def write_config(tmp_path):
    def _write(content):
        path = tmp_path / "graphql-transform.json"
        if not isinstance(content, str):
            content = json.dumps(content)
        path.write_text(content)
        return str(path)

    return _write


class TestLoadConfig:
    """Tests for load_config."""

    def test_loads_targets(self, write_config, tmp_path):
        path = write_config(
            {
                "targets": [
                    {"schema": ["a/*.graphql", "b.graphql"], "template": "t.j2", "output": "out.ts"},
                    {"schema": ["c.graphql"], "template": "u.j2", "output": "out.swift"},
                ]
            }
        )
        config = load_config(path)
        assert len(config.targets) == 2
        assert config.targets[0].schema_files == ["a/*.graphql", "b.graphql"]
        assert config.targets[1].output == "out.swift"
        assert config.base_dir == str(tmp_path)

    def test_single_pattern_is_wrapped(self, write_config):
        path = write_config({"targets": [{"schema": "q.graphql", "template": "t", "output": "o"}]})
        assert load_config(path).targets[0].schema_files == ["q.graphql"]

    def test_header_is_optional(self, write_config):
        path = write_config(
            {
                "targets": [
                    {"schema": "a.graphql", "template": "t", "output": "o", "header": "// {output}"},
                    {"schema": "b.graphql", "template": "t", "output": "p"},
                ]
            }
        )
        targets = load_config(path).targets
        assert targets[0].header == "// {output}"
        assert targets[1].header is None

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "graphql-transform.json"
        path.write_bytes(b'{"targets": "\xff"}')
        with pytest.raises(ConfigError, match="Cannot read config"):
            load_config(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read config"):
            load_config(str(tmp_path / "missing.json"))

    def test_invalid_json(self, write_config):
        with pytest.raises(ConfigError, match="Invalid config"):
            load_config(write_config("{not json"))

    def test_missing_key(self, write_config):
        with pytest.raises(ConfigError):
            load_config(write_config({"targets": [{"schema": ["q.graphql"], "template": "t"}]}))

    def test_empty_schema_list(self, write_config):
        with pytest.raises(ConfigError):
            load_config(write_config({"targets": [{"schema": [], "template": "t", "output": "o"}]}))

    def test_unknown_key(self, write_config):
        with pytest.raises(ConfigError):
            load_config(write_config({"targets": [], "extra": True}))


class TestConfigModels:
    """Tests for the config models."""

    def test_target_by_field_name(self):
        target = ConfigTarget(schema_files=["q.graphql"], template="t", output="o")
        assert target.schema_files == ["q.graphql"]

    def test_target_by_alias(self):
        target = ConfigTarget.model_validate({"schema": ["q.graphql"], "template": "t", "output": "o"})
        assert target.schema_files == ["q.graphql"]

    def test_default_base_dir_is_cwd(self):
        assert Config().base_dir == os.getcwd()
