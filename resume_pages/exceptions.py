"""Exception types raised by the resume page engine."""

from __future__ import annotations


class ResumePagesError(Exception):
    """Base class for package errors."""


class ConfigError(ResumePagesError):
    """Raised for unknown paper sizes or malformed capacity tables."""


class PayloadError(ResumePagesError):
    """Raised when a document payload does not have the expected shape."""


class DependencyError(ResumePagesError, RuntimeError):
    """Raised when a required runtime dependency is missing."""
