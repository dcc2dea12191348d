"""Configuration management for eulerian runs."""

from eulerian.config.schema import Config, GraphConfig, OutputConfig
from eulerian.config.loader import load_config, load_config_data, save_config

__all__ = [
    "Config",
    "GraphConfig",
    "OutputConfig",
    "load_config",
    "load_config_data",
    "save_config",
]
