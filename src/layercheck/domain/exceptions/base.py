"""Base exceptions for layercheck domain."""


class LayerCheckError(Exception):
    """Root exception for all layercheck errors.

    All domain exceptions inherit from this.
    Allows catching all layercheck-specific errors.
    """
