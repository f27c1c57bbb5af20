"""Errors raised by the vault naming simulator."""


class ConfigurationError(ValueError):
    """An invalid simulation parameter. Raised before any simulation work."""
