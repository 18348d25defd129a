"""Errors raised by the landmass generation pipeline."""


class ConfigurationError(ValueError):
    """Invalid generation parameters; raised before any generation work starts."""
