"""Domain exceptions."""

from layercheck.domain.exceptions.base import LayerCheckError
from layercheck.domain.exceptions.config import ConfigError, InvalidPatternError
from layercheck.domain.exceptions.parsing import (
    ModuleResolutionError,
    ParsingError,
    ScanError,
)

__all__ = [
    "LayerCheckError",
    "ConfigError",
    "InvalidPatternError",
    "ParsingError",
    "ModuleResolutionError",
    "ScanError",
]
