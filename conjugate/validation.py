"""Eager precondition checks shared by every public entry point."""

from __future__ import annotations

import math
import numbers

from .errors import InvalidArgumentError


def require_finite(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{name} must be a finite number, got {value!r}.")
    return value


def require_positive(name: str, value: float) -> float:
    value = require_finite(name, value)
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be strictly positive, got {value!r}.")
    return value


def require_non_negative(name: str, value: float) -> float:
    value = require_finite(name, value)
    if value < 0:
        raise InvalidArgumentError(f"{name} must be greater than or equal to zero, got {value!r}.")
    return value


def require_probability(name: str, value: float) -> float:
    """Accept only probabilities strictly inside (0, 1)."""
    value = require_finite(name, value)
    if not 0.0 < value < 1.0:
        raise InvalidArgumentError(f"{name} must fall within (0, 1), got {value!r}.")
    return value


def require_count(name: str, value: int, *, minimum: int = 0) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        raise InvalidArgumentError(f"{name} must be a finite integer, got {value!r}.")
    if int(value) != value:
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}.")
    value = int(value)
    if value < minimum:
        raise InvalidArgumentError(f"{name} must be at least {minimum}, got {value!r}.")
    return value


__all__ = [
    "require_count",
    "require_finite",
    "require_non_negative",
    "require_positive",
    "require_probability",
]
