"""Exceptions raised by the entity matching engine.

Only configuration mistakes are errors. Bad data (unparseable numbers or
dates, empty values, broken field paths) scores 0 instead of raising.
"""
from __future__ import annotations


class EntityMatchingError(Exception):
    """Base exception for the entity matching engine."""


class ConfigurationError(EntityMatchingError, ValueError):
    """Raised when a matcher is configured with values it cannot use."""


class UnknownAlgorithmError(ConfigurationError):
    """Raised when an algorithm identifier is not a known match algorithm."""

    def __init__(self, algorithm: object, known: list[str]) -> None:
        self.algorithm = algorithm
        self.known = known
        super().__init__(
            f"Unknown algorithm {algorithm!r}; expected one of: {', '.join(known)}"
        )


class InvalidOptionsError(ConfigurationError):
    """Raised when options of the wrong type are passed for an algorithm."""


class UnknownEntityTypeError(ConfigurationError):
    """Raised when no standard configuration exists for an entity type."""
