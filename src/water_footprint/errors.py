from __future__ import annotations


class FootprintError(Exception):
    """Base class for water_footprint errors."""


class ConfigError(FootprintError, ValueError):
    """Raised when a footprint configuration is invalid or unreadable."""


class AnswersFormatError(FootprintError, ValueError):
    """Raised when an answers file cannot be turned into survey responses."""
