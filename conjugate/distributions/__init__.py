"""Probability primitives consumed by the posterior modules."""

from .base import DistributionPrimitives, RandomState
from .scipy_backend import ScipyPrimitives, get_primitives

__all__ = [
    "DistributionPrimitives",
    "RandomState",
    "ScipyPrimitives",
    "get_primitives",
]
