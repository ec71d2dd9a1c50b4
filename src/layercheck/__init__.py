"""layercheck - layered architecture conformance checker for Go module trees."""

__version__ = "0.1.0"

from layercheck.application.services import LayerChecker  # noqa: E402
from layercheck.infrastructure.config import load_config  # noqa: E402
from layercheck.presentation.factory import create_go_checker  # noqa: E402

__all__ = ["LayerChecker", "create_go_checker", "load_config", "__version__"]
