"""Exception types raised by the generator core."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Caller misuse: unknown algorithm, mismatched inputs, malformed state.

    Raised synchronously and never retried.
    """
