"""Posterior inference for the rate of a Poisson process.

Flat, Jeffreys and Gamma priors are all conjugate: the posterior is
Gamma(r + sumK, v + n) in the shape/rate parametrization, where ``sumK`` is
the total number of events seen over ``n`` equal observation intervals.
"""

from __future__ import annotations

import math
from typing import Optional, Tuple

from ..distributions import DistributionPrimitives, get_primitives
from ..errors import InvalidArgumentError
from ..posteriors import PosteriorGamma
from ..records import (
    CountSample,
    CredibleInterval,
    FlatPrior,
    GammaPrior,
    JeffreysPrior,
    PoissonRatePrior,
    TestDecision,
)
from ..validation import require_count, require_finite, require_non_negative, require_probability

FLAT_PRIOR_PARAMS: Tuple[float, float] = (1.0, 0.0)
JEFFREYS_PRIOR_PARAMS: Tuple[float, float] = (0.5, 0.0)


def prior_parameters(prior: Optional[PoissonRatePrior]) -> Tuple[float, float]:
    """Return the ``(r, v)`` pair a prior contributes to the conjugate update."""
    if prior is None or isinstance(prior, FlatPrior):
        return FLAT_PRIOR_PARAMS
    if isinstance(prior, JeffreysPrior):
        return JEFFREYS_PRIOR_PARAMS
    if isinstance(prior, GammaPrior):
        return prior.shape, prior.rate
    raise InvalidArgumentError(f"Unsupported prior for a Poisson rate: {type(prior).__name__}.")


def update(
    sample: CountSample,
    prior: Optional[PoissonRatePrior] = None,
    *,
    primitives: Optional[DistributionPrimitives] = None,
) -> PosteriorGamma:
    """Gamma posterior of the rate; ``prior=None`` means the flat prior."""
    if not isinstance(sample, CountSample):
        raise InvalidArgumentError(f"Expected a CountSample, got {type(sample).__name__}.")
    r, v = prior_parameters(prior)
    return posterior(sample.total_events, sample.intervals, r, v, primitives=primitives)


def posterior(
    sum_k: int,
    n: int,
    r: float = 1.0,
    v: float = 0.0,
    *,
    primitives: Optional[DistributionPrimitives] = None,
) -> PosteriorGamma:
    """Gamma posterior from raw counts and Gamma prior parameters ``(r, v)``."""
    sum_k = require_count("sum_k", sum_k)
    n = require_count("n", n, minimum=1)
    r = require_non_negative("r", r)
    v = require_non_negative("v", v)
    shape = r + sum_k
    if shape <= 0:
        raise InvalidArgumentError("Posterior shape is zero: a prior with r = 0 needs at least one observed event.")
    return PosteriorGamma(shape=shape, rate=v + n, primitives=primitives or get_primitives())


def likelihood(sum_k: int, n: int, lam: float) -> float:
    """Unnormalized Poisson likelihood ``lam**sum_k * exp(-n * lam)``."""
    sum_k = require_count("sum_k", sum_k)
    n = require_count("n", n, minimum=1)
    lam = require_non_negative("lam", lam)
    return lam**sum_k * math.exp(-n * lam)


# ---------------------------------------------------------------------------
# Prior and estimator diagnostics


def equivalent_prior_sample_size(v: float) -> int:
    """Number of historical intervals the prior rate ``v`` is worth."""
    return int(math.floor(require_non_negative("v", v)))


def posterior_mean(sum_k: int, n: int, r: float, v: float) -> float:
    """Posterior mean of the rate, ``(r + sum_k) / (v + n)``."""
    return posterior(sum_k, n, r, v).mean


def posterior_mean_bias(r: float, v: float, lam: float, n: int = 1) -> float:
    """Bias of the posterior mean as an estimator of a true rate ``lam``."""
    r = require_non_negative("r", r)
    v = require_non_negative("v", v)
    lam = require_non_negative("lam", lam)
    n = require_count("n", n, minimum=1)
    return (r - v * lam) / (v + n)


def posterior_variance(r: float, v: float, lam: float, n: int = 1) -> float:
    """Sampling variance of the posterior mean when the true rate is ``lam``."""
    require_non_negative("r", r)
    v = require_non_negative("v", v)
    lam = require_non_negative("lam", lam)
    n = require_count("n", n, minimum=1)
    return n * lam / ((v + n) * (v + n))


def mean_squared_error(r: float, v: float, lam: float, n: int = 1) -> float:
    bias = posterior_mean_bias(r, v, lam, n)
    return bias * bias + posterior_variance(r, v, lam, n)


# ---------------------------------------------------------------------------
# Interval estimates and tests


def interquartile_range(sum_k: int, n: int, r: float, v: float) -> float:
    return posterior(sum_k, n, r, v).interquartile_range()


def credible_interval(sum_k: int, n: int, r: float, v: float, alpha: float) -> CredibleInterval:
    alpha = require_probability("alpha", alpha)
    return posterior(sum_k, n, r, v).credible_interval(alpha)


def one_sided_test(sum_k: int, n: int, r: float, v: float, alpha: float, lam0: float) -> TestDecision:
    """Test ``H0: lam <= lam0`` against ``H1: lam > lam0``.

    Rejects when the posterior probability of the null region is below
    ``alpha``.
    """
    alpha = require_probability("alpha", alpha)
    lam0 = require_finite("lam0", lam0)
    p0 = posterior(sum_k, n, r, v).cdf(lam0)
    return TestDecision(reject=p0 < alpha, probability=p0, alpha=alpha)


def one_sided_odds(sum_k: int, n: int, r: float, v: float, lam0: float) -> float:
    """Posterior odds of ``H0: lam <= lam0``."""
    lam0 = require_finite("lam0", lam0)
    p0 = posterior(sum_k, n, r, v).cdf(lam0)
    if p0 >= 1.0:
        return math.inf
    return p0 / (1.0 - p0)


def two_sided_test(sum_k: int, n: int, r: float, v: float, alpha: float, lam0: float) -> TestDecision:
    """Test ``H0: lam = lam0``; rejects when ``lam0`` lies outside the credible interval.

    ``probability`` is the smaller tail mass at ``lam0`` doubled, which is
    below ``alpha`` exactly when the test rejects.
    """
    alpha = require_probability("alpha", alpha)
    lam0 = require_finite("lam0", lam0)
    post = posterior(sum_k, n, r, v)
    interval = post.credible_interval(alpha)
    tail = post.cdf(lam0)
    return TestDecision(
        reject=not interval.contains(lam0),
        probability=min(1.0, 2.0 * min(tail, 1.0 - tail)),
        alpha=alpha,
    )


__all__ = [
    "FLAT_PRIOR_PARAMS",
    "JEFFREYS_PRIOR_PARAMS",
    "credible_interval",
    "equivalent_prior_sample_size",
    "interquartile_range",
    "likelihood",
    "mean_squared_error",
    "one_sided_odds",
    "one_sided_test",
    "posterior",
    "posterior_mean",
    "posterior_mean_bias",
    "posterior_variance",
    "prior_parameters",
    "two_sided_test",
    "update",
]
