"""englishgate exception hierarchy.

Classification itself never raises for odd input; these errors mark
configuration mistakes and collaborator failures at clear boundaries.
"""

from __future__ import annotations


class EnglishGateError(Exception):
    """Base exception for all englishgate failures."""


class EnglishGateConfigError(EnglishGateError):
    """Raised for invalid runtime configuration or detection options."""


class EnglishGateDependencyError(EnglishGateError):
    """Raised when a required runtime library cannot be imported."""


class EnglishGateDetectionError(EnglishGateError):
    """Raised when the n-gram language identifier yields no usable ranking."""
