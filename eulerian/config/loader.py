"""Reading and writing run configurations as YAML or JSON."""

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from eulerian.config.schema import Config

_YAML_SUFFIXES = (".yaml", ".yml")
_JSON_SUFFIXES = (".json",)


def _check_suffix(path: Path) -> None:
    if path.suffix not in _YAML_SUFFIXES + _JSON_SUFFIXES:
        raise ValueError(
            f"Unsupported config format: {path.suffix}. Use .yaml, .yml, or .json"
        )


def load_config_data(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Read a config file into a plain dictionary without validating it.

    An empty file reads as an empty mapping.

    Args:
        config_path: Path to a .yaml, .yml, or .json file

    Returns:
        Top-level mapping of the file

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the suffix is unsupported, the file doesn't parse, or
            its top level is not a mapping
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    _check_suffix(path)

    text = path.read_text()
    try:
        if path.suffix in _YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text) if text.strip() else None
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValueError(f"Could not parse config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Config file {path} must contain a mapping at the top level, "
            f"got {type(data).__name__}"
        )
    return data


def load_config(config_path: Union[str, Path]) -> Config:
    """Load and validate a run configuration.

    Raises:
        pydantic.ValidationError: If the values don't satisfy the schema
    """
    return Config(**load_config_data(config_path))


def save_config(config: Config, output_path: Union[str, Path]) -> None:
    """Write ``config`` to a .yaml, .yml, or .json file."""
    path = Path(output_path)
    _check_suffix(path)

    data = config.model_dump()
    if path.suffix in _JSON_SUFFIXES:
        path.write_text(json.dumps(data, indent=2) + "\n")
    else:
        path.write_text(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))
