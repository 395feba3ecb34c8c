"""Configuration loading error."""


class ConfigError(ValueError):
    """Raised when the configuration file is missing, unreadable or invalid."""
