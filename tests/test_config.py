"""
Tests for run configuration loading.
"""

import json
import pytest

from danja import RunConfig, load_config


class TestLoadConfig:
    """Test JSON and YAML config files."""

    def test_defaults(self):
        """An empty config keeps the defaults."""
        config = RunConfig()
        assert config.optimize is True
        assert config.log_level == "WARNING"
        assert config.variables == {}

    def test_yaml(self, tmp_path):
        """YAML files are read with safe_load."""
        path = tmp_path / "run.yaml"
        path.write_text(
            "optimize: false\n"
            "log_level: debug\n"
            "variables:\n"
            "  a: 1\n"
            "  인사: 안녕\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.optimize is False
        assert config.log_level == "DEBUG"
        assert config.variables == {"a": 1, "인사": "안녕"}

    def test_json(self, tmp_path):
        """.json files are read as JSON."""
        path = tmp_path / "run.json"
        path.write_text(json.dumps({"variables": {"x": [1, 2]}}), encoding="utf-8")
        config = load_config(str(path))
        assert config.variables == {"x": [1, 2]}

    def test_empty_yaml(self, tmp_path):
        """An empty YAML document is an empty config."""
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == RunConfig()

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_not_a_mapping(self, tmp_path):
        """The document must be a mapping."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(path)

    def test_malformed_yaml(self, tmp_path):
        """YAML syntax errors are reported as ValueError naming the file."""
        path = tmp_path / "bad.yaml"
        path.write_text("variables: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="bad.yaml"):
            load_config(path)

    def test_malformed_json(self, tmp_path):
        """JSON syntax errors are reported as ValueError naming the file."""
        path = tmp_path / "bad.json"
        path.write_text("{\"variables\": ", encoding="utf-8")
        with pytest.raises(ValueError, match="bad.json"):
            load_config(path)


class TestRunConfigValidation:
    """Test field validation."""

    def test_unknown_field(self):
        """Unknown fields are rejected."""
        with pytest.raises(ValueError, match="colour"):
            RunConfig.from_dict({"colour": "blue"})

    def test_bad_optimize(self):
        """optimize must be a boolean."""
        with pytest.raises(ValueError):
            RunConfig.from_dict({"optimize": "yes"})

    def test_bad_log_level(self):
        """log_level must name a logging level."""
        with pytest.raises(ValueError):
            RunConfig.from_dict({"log_level": "loud"})

    def test_bad_variables(self):
        """variables must be a mapping."""
        with pytest.raises(ValueError):
            RunConfig.from_dict({"variables": [1, 2]})

    def test_null_variables(self):
        """A null variables section means no variables."""
        assert RunConfig.from_dict({"variables": None}).variables == {}
