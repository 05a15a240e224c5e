"""Custom exception types used across :mod:`digraphx`."""

from __future__ import annotations


class DigraphXError(Exception):
    """Base class for all package-specific errors."""


class InvalidArgumentError(DigraphXError, ValueError):
    """Raised for malformed requests such as an out-of-range edge count."""


class GraphFormatError(InvalidArgumentError):
    """Raised when a graph violates its invariants (self-loop, bad weight)."""


class ConfigError(DigraphXError, ValueError):
    """Raised for invalid configuration options."""


__all__ = [
    "DigraphXError",
    "InvalidArgumentError",
    "GraphFormatError",
    "ConfigError",
]
