"""Configuration error."""


class ConfigError(Exception):
    """Raised when sync configuration is invalid or missing."""
