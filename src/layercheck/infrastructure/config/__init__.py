"""Configuration loading."""

from layercheck.infrastructure.config.yaml_loader import load_config, parse_config

__all__ = [
    "load_config",
    "parse_config",
]
