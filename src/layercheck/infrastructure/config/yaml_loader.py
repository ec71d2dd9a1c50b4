"""YAML configuration loader.

Document shape:

    layers:
      domain:
        paths: ["**/domain/**"]
      application: ["**/app/**", "**/service/**"]
    dependency_rules:
      - from: domain
        to: "*"
        allow: false
    exclude_dirs:
      - "**/vendor"

Mapping order of layers is preserved and is the classification order.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from layercheck.domain.exceptions.config import ConfigError, InvalidPatternError
from layercheck.domain.model.configuration import DependencyRule, LayerConfig
from layercheck.domain.model.layer import RESERVED_LAYERS, LayerDefinition
from layercheck.domain.patterns import compile_glob

_TOP_LEVEL_KEYS = frozenset({"layers", "dependency_rules", "exclude_dirs"})
_RULE_KEYS = frozenset({"from", "to", "allow"})


def load_config(path: Path) -> LayerConfig:
    """Load and validate a configuration file.

    FAIL-FIRST: every problem is reported as ConfigError before any
    analysis runs, including malformed glob patterns.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated LayerConfig

    Raises:
        ConfigError: If file cannot be read, is not valid YAML, or does
            not describe a valid configuration
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigError(path, "file not found") from e
    except UnicodeDecodeError as e:
        raise ConfigError(path, f"encoding error: {e}") from e
    except OSError as e:
        raise ConfigError(path, f"cannot read file: {e}") from e

    return parse_config(text, path)


def parse_config(text: str, path: Path = Path("<string>")) -> LayerConfig:
    """Parse configuration from YAML text.

    Args:
        text: YAML document
        path: Source path used in error messages

    Returns:
        Validated LayerConfig

    Raises:
        ConfigError: If text is not a valid configuration
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(path, f"invalid YAML: {e}") from e

    if data is None:
        return LayerConfig()
    if not isinstance(data, dict):
        raise ConfigError(path, "top level must be a mapping")

    unknown = sorted(str(k) for k in data if k not in _TOP_LEVEL_KEYS)
    if unknown:
        raise ConfigError(path, f"unknown keys: {', '.join(unknown)}")

    layers = _parse_layers(data.get("layers"), path)
    rules = _parse_rules(data.get("dependency_rules"), path)
    exclude_dirs = _parse_patterns(data.get("exclude_dirs"), "exclude_dirs", path)

    return LayerConfig(layers=layers, dependency_rules=rules, exclude_dirs=exclude_dirs)


def _parse_layers(raw: object, path: Path) -> tuple[LayerDefinition, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, dict):
        raise ConfigError(path, "layers must be a mapping of layer name to patterns")

    layers: list[LayerDefinition] = []
    for name, entry in raw.items():
        if not isinstance(name, str) or not name:
            raise ConfigError(path, f"layer name must be a non-empty string, got {name!r}")
        if name in RESERVED_LAYERS:
            raise ConfigError(path, f"layer name '{name}' is reserved")

        # Both "name: {paths: [...]}" and "name: [...]" are accepted
        if isinstance(entry, dict):
            extra = sorted(str(k) for k in entry if k != "paths")
            if extra:
                raise ConfigError(path, f"layer '{name}' has unknown keys: {', '.join(extra)}")
            entry = entry.get("paths")

        patterns = _parse_patterns(entry, f"layers.{name}", path)
        layers.append(LayerDefinition(name=name, patterns=patterns))

    return tuple(layers)


def _parse_rules(raw: object, path: Path) -> tuple[DependencyRule, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ConfigError(path, "dependency_rules must be a list")

    rules: list[DependencyRule] = []
    for index, item in enumerate(raw):
        where = f"dependency_rules[{index}]"
        if not isinstance(item, dict):
            raise ConfigError(path, f"{where} must be a mapping")

        extra = sorted(str(k) for k in item if k not in _RULE_KEYS)
        if extra:
            raise ConfigError(path, f"{where} has unknown keys: {', '.join(extra)}")

        source = item.get("from")
        target = item.get("to")
        # Omitted allow decodes as false
        allow = item.get("allow", False)

        if not isinstance(source, str) or not source:
            raise ConfigError(path, f"{where}.from must be a non-empty string")
        if not isinstance(target, str) or not target:
            raise ConfigError(path, f"{where}.to must be a non-empty string")
        if not isinstance(allow, bool):
            raise ConfigError(path, f"{where}.allow must be true or false")

        rules.append(DependencyRule(source=source, target=target, allow=allow))

    return tuple(rules)


def _parse_patterns(raw: object, where: str, path: Path) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        raise ConfigError(path, f"{where} must be a list of patterns, not a string")
    if not isinstance(raw, list):
        raise ConfigError(path, f"{where} must be a list of patterns")

    patterns: list[str] = []
    for item in raw:
        if not isinstance(item, str) or not item:
            raise ConfigError(path, f"{where} contains a non-string or empty pattern")
        try:
            compile_glob(item)
        except InvalidPatternError as e:
            raise ConfigError(path, f"{where}: {e}") from e
        patterns.append(item)

    return tuple(patterns)
