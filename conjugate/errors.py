"""Exceptions raised by the posterior-update core."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when an input violates a precondition of an inference call.

    Covers structural mismatches (prior values and masses of different length)
    as well as out-of-domain scalars such as a non-positive scale, a negative
    count, or a probability outside the open interval (0, 1).
    """


__all__ = ["InvalidArgumentError"]
