"""Custom exceptions."""


class ShukujitsuError(Exception):
    """Base exception for shukujitsu."""


class InvalidDateError(ShukujitsuError, ValueError):
    """Raised when a value cannot be normalized to a calendar date."""


class NetworkError(ShukujitsuError):
    """Raised when the holiday CSV cannot be fetched."""


class ConfigError(ShukujitsuError):
    """Raised when a configuration value is malformed."""
