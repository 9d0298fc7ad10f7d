"""Custom exceptions for microrand."""

from __future__ import annotations


class MicroRandError(Exception):
    """Base exception for microrand."""


class ConfigError(MicroRandError):
    """Invalid generator parameters, preset or seed."""


class InvalidRangeError(MicroRandError):
    """Bounds passed to a bounded draw are empty or out of range."""
