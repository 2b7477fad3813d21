"""
Run configuration for the Danja CLI.

A config file is JSON (``.json``) or YAML (anything else):

    optimize: true
    log_level: INFO
    variables:
      a: 1
      greeting: 안녕
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

CONFIG_FIELDS = ("optimize", "log_level", "variables")


@dataclass
class RunConfig:
    """Settings for one CLI run."""
    optimize: bool = True
    log_level: str = "WARNING"
    variables: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunConfig":
        unknown = set(data) - set(CONFIG_FIELDS)
        if unknown:
            raise ValueError(f"unknown config field(s): {', '.join(sorted(unknown))}")

        config = cls()
        if "optimize" in data:
            if not isinstance(data["optimize"], bool):
                raise ValueError("'optimize' must be true or false")
            config.optimize = data["optimize"]
        if "log_level" in data:
            level = str(data["log_level"]).upper()
            if not isinstance(logging.getLevelName(level), int):
                raise ValueError(f"unknown log level: {data['log_level']}")
            config.log_level = level
        if "variables" in data:
            variables = data["variables"] or {}
            if not isinstance(variables, dict):
                raise ValueError("'variables' must be a mapping of name to value")
            config.variables = {str(k): v for k, v in variables.items()}
        return config


def load_config(path: Path | str) -> RunConfig:
    """
    Load a RunConfig from a JSON or YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file does not parse or holds an invalid config
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"config not found: {config_path}")
    with config_path.open("r", encoding="utf-8") as fp:
        if config_path.suffix == ".json":
            try:
                data = json.load(fp)
            except json.JSONDecodeError as e:
                raise ValueError(f"invalid JSON in {config_path}: {e}") from e
        else:
            import yaml
            try:
                data = yaml.safe_load(fp) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"invalid YAML in {config_path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"config must be a mapping: {config_path}")
    return RunConfig.from_dict(data)
