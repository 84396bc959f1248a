"""Closed-form conjugate Bayesian inference for Normal means and Poisson rates."""

from .distributions import DistributionPrimitives, ScipyPrimitives, get_primitives
from .errors import InvalidArgumentError
from .posteriors import PosteriorGamma, PosteriorNormal, PosteriorStudentT
from .records import (
    CountSample,
    CredibleInterval,
    DiscretePosterior,
    DiscretePrior,
    FlatPrior,
    GammaPrior,
    JeffreysPrior,
    NormalPrior,
    NormalSample,
    TestDecision,
)

__all__ = [
    "CountSample",
    "CredibleInterval",
    "DiscretePosterior",
    "DiscretePrior",
    "DistributionPrimitives",
    "FlatPrior",
    "GammaPrior",
    "InvalidArgumentError",
    "JeffreysPrior",
    "NormalPrior",
    "NormalSample",
    "PosteriorGamma",
    "PosteriorNormal",
    "PosteriorStudentT",
    "ScipyPrimitives",
    "TestDecision",
    "get_primitives",
]
