"""Posterior of the difference of two Normal means, ``mu1 - mu2``.

Each sample is updated on its own with :mod:`conjugate.normal.mean`; the two
posteriors are independent, so their means subtract and their variances add.
With estimated standard deviations (the Behrens-Fisher problem) the
difference is approximated by a Student-t with Satterthwaite's degrees of
freedom.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Tuple

import numpy as np

from ..distributions import DistributionPrimitives, get_primitives
from ..errors import InvalidArgumentError
from ..posteriors import PosteriorNormal, PosteriorStudentT
from ..records import CredibleInterval, NormalMeanPrior, NormalSample
from ..validation import require_count, require_positive, require_probability
from . import mean as normal_mean


def sample_variance(observations: Iterable[float]) -> float:
    """Unbiased variance estimate (divisor ``n - 1``) of raw observations."""
    values = np.asarray(list(observations), dtype=float)
    if values.ndim != 1 or values.size < 2:
        raise InvalidArgumentError("A variance estimate needs at least two observations.")
    if not np.all(np.isfinite(values)):
        raise InvalidArgumentError("Observations contain non-finite entries.")
    return float(values.var(ddof=1))


def summarize(observations: Iterable[float]) -> Tuple[NormalSample, float]:
    """Return the sample summary and the estimated standard deviation."""
    values = list(observations)
    return NormalSample.from_observations(values), math.sqrt(sample_variance(values))


def satterthwaite_df(var1: float, count1: int, var2: float, count2: int) -> int:
    """Satterthwaite's effective degrees of freedom, rounded to an integer.

    ``nu = (a + b)**2 / (a**2 / (n1 + 1) + b**2 / (n2 + 1))`` with
    ``a = var1 / n1`` and ``b = var2 / n2``. Rounds to the nearest integer and
    a value exactly halfway between two integers goes up.
    """
    var1 = require_positive("var1", var1)
    var2 = require_positive("var2", var2)
    n1 = require_count("count1", count1, minimum=1)
    n2 = require_count("count2", count2, minimum=1)

    a = var1 / n1
    b = var2 / n2
    nu = (a + b) ** 2 / (a * a / (n1 + 1) + b * b / (n2 + 1))
    return _round_half_up(nu)


def _round_half_up(value: float) -> int:
    lower = math.floor(value)
    upper = math.ceil(value)
    if value - lower < upper - value:
        return int(lower)
    return int(upper)


# ---------------------------------------------------------------------------
# Known variances


def difference_posterior(
    sample1: NormalSample,
    sample2: NormalSample,
    sigma1: float,
    sigma2: float,
    prior1: Optional[NormalMeanPrior] = None,
    prior2: Optional[NormalMeanPrior] = None,
    *,
    primitives: Optional[DistributionPrimitives] = None,
) -> PosteriorNormal:
    """Normal posterior of ``mu1 - mu2`` when both population sigmas are known."""
    prims = primitives or get_primitives()
    post1 = normal_mean.update(sample1, sigma1, prior1, primitives=prims)
    post2 = normal_mean.update(sample2, sigma2, prior2, primitives=prims)
    return PosteriorNormal(
        mean=post1.mean - post2.mean,
        std=math.sqrt(post1.variance + post2.variance),
        primitives=prims,
    )


def difference_moments(
    sample1: NormalSample,
    sample2: NormalSample,
    sigma1: float,
    sigma2: float,
    prior1: Optional[NormalMeanPrior] = None,
    prior2: Optional[NormalMeanPrior] = None,
) -> Tuple[float, float]:
    """Posterior mean and std of ``mu1 - mu2``; mean, median and mode coincide."""
    return difference_posterior(sample1, sample2, sigma1, sigma2, prior1, prior2).moments()


# ---------------------------------------------------------------------------
# Unknown, unequal variances (Behrens-Fisher)


def _require_samples(*samples: NormalSample) -> None:
    for sample in samples:
        if not isinstance(sample, NormalSample):
            raise InvalidArgumentError(f"Expected a NormalSample summary, got {type(sample).__name__}.")


def behrens_fisher_posterior(
    sample1: NormalSample,
    sample2: NormalSample,
    s1: float,
    s2: float,
    prior1: Optional[NormalMeanPrior] = None,
    prior2: Optional[NormalMeanPrior] = None,
    *,
    primitives: Optional[DistributionPrimitives] = None,
) -> PosteriorStudentT:
    """Student-t posterior of ``mu1 - mu2`` from estimated standard deviations.

    ``s1`` and ``s2`` stand in for the unknown sigmas in the conjugate update
    of each mean; the scale is the combined posterior standard deviation.
    """
    _require_samples(sample1, sample2)
    prims = primitives or get_primitives()
    centre = difference_posterior(sample1, sample2, s1, s2, prior1, prior2, primitives=prims)
    nu = satterthwaite_df(s1 * s1, sample1.count, s2 * s2, sample2.count)
    return PosteriorStudentT(location=centre.mean, scale=centre.std, df=nu, primitives=prims)


def behrens_fisher_flat_posterior(
    sample1: NormalSample,
    sample2: NormalSample,
    s1: float,
    s2: float,
    *,
    primitives: Optional[DistributionPrimitives] = None,
) -> PosteriorStudentT:
    """Flat-prior variant: no conjugate update, the estimates are used directly."""
    _require_samples(sample1, sample2)
    s1 = require_positive("s1", s1)
    s2 = require_positive("s2", s2)
    scale = math.sqrt(s1 * s1 / sample1.count + s2 * s2 / sample2.count)
    nu = satterthwaite_df(s1 * s1, sample1.count, s2 * s2, sample2.count)
    return PosteriorStudentT(
        location=sample1.mean - sample2.mean,
        scale=scale,
        df=nu,
        primitives=primitives or get_primitives(),
    )


def quantile_unknown(
    p: float,
    sample1: NormalSample,
    sample2: NormalSample,
    s1: float,
    s2: float,
    prior1: Optional[NormalMeanPrior] = None,
    prior2: Optional[NormalMeanPrior] = None,
) -> float:
    p = require_probability("p", p)
    return behrens_fisher_posterior(sample1, sample2, s1, s2, prior1, prior2).quantile(p)


def credible_interval_unknown(
    alpha: float,
    sample1: NormalSample,
    sample2: NormalSample,
    s1: float,
    s2: float,
    prior1: Optional[NormalMeanPrior] = None,
    prior2: Optional[NormalMeanPrior] = None,
) -> CredibleInterval:
    """Equal-tail interval from the posterior standard deviations."""
    alpha = require_probability("alpha", alpha)
    return behrens_fisher_posterior(sample1, sample2, s1, s2, prior1, prior2).credible_interval(alpha)


def credible_interval_unknown_flat(
    alpha: float,
    sample1: NormalSample,
    sample2: NormalSample,
    s1: float,
    s2: float,
) -> CredibleInterval:
    """Equal-tail interval from the raw estimated standard deviations."""
    alpha = require_probability("alpha", alpha)
    return behrens_fisher_flat_posterior(sample1, sample2, s1, s2).credible_interval(alpha)


__all__ = [
    "behrens_fisher_flat_posterior",
    "behrens_fisher_posterior",
    "credible_interval_unknown",
    "credible_interval_unknown_flat",
    "difference_moments",
    "difference_posterior",
    "quantile_unknown",
    "sample_variance",
    "satterthwaite_df",
    "summarize",
]
