"""Domain ports (protocols)."""

from layercheck.domain.ports.reporter import ReporterProtocol
from layercheck.domain.ports.source_units import SourceUnitsPort

__all__ = [
    "ReporterProtocol",
    "SourceUnitsPort",
]
