"""Posterior inference for the mean of a Normal population.

The population standard deviation ``sigma`` is treated as known unless a
function name says otherwise. Supported priors are a discrete prior over a
finite set of candidate means, the flat (Jeffreys) prior and a Normal prior;
the last two give a Normal posterior.
"""

from __future__ import annotations

import math
from typing import Optional, Tuple, Union

import numpy as np
from scipy.special import logsumexp

from ..distributions import DistributionPrimitives, get_primitives
from ..errors import InvalidArgumentError
from ..posteriors import PosteriorNormal, PosteriorStudentT
from ..records import (
    CredibleInterval,
    DiscretePosterior,
    DiscretePrior,
    FlatPrior,
    JeffreysPrior,
    NormalMeanPrior,
    NormalPrior,
    NormalSample,
    as_normal_sample,
)
from ..validation import require_positive, require_probability

SampleLike = Union[NormalSample, float]

_LOG_SQRT_2PI = 0.5 * math.log(2.0 * math.pi)


def posterior_discrete(
    data: SampleLike,
    sigma: float,
    prior: DiscretePrior,
    *,
    primitives: Optional[DistributionPrimitives] = None,
) -> DiscretePosterior:
    """Update a discrete prior over candidate means.

    Args:
        data: A single observation or a ``NormalSample`` summary.
        sigma: Known population standard deviation.
        prior: Candidate means and their prior masses.
        primitives: Optional primitives override.

    Returns:
        Posterior masses aligned with ``prior.values`` and summing to one.
    """
    sigma = require_positive("sigma", sigma)
    if not isinstance(prior, DiscretePrior):
        raise InvalidArgumentError(f"posterior_discrete expects a DiscretePrior, got {type(prior).__name__}.")
    sample = as_normal_sample(data)
    prims = primitives or get_primitives()

    candidates = np.asarray(prior.values, dtype=float)
    prior_masses = np.asarray(prior.masses, dtype=float)
    support = prior_masses > 0

    if sample.count == 1:
        z_scores = (sample.mean - candidates) / sigma
        densities = np.asarray([prims.std_normal_pdf(float(z)) for z in z_scores], dtype=float)
        # Densities that underflow to zero are replaced by their exact log value.
        with np.errstate(divide="ignore"):
            log_likelihood = np.where(densities > 0, np.log(densities), -0.5 * z_scores**2 - _LOG_SQRT_2PI)
    else:
        # Likelihood of the sample mean; the Gaussian constant cancels on normalizing.
        log_likelihood = -sample.count * (sample.mean - candidates) ** 2 / (2.0 * sigma * sigma)

    log_weights = np.full(candidates.shape, -np.inf)
    log_weights[support] = np.log(prior_masses[support]) + log_likelihood[support]
    log_total = logsumexp(log_weights)
    if not math.isfinite(log_total):
        raise InvalidArgumentError("Posterior masses cannot be normalized; check the likelihood values.")
    masses = np.exp(log_weights - log_total)
    return DiscretePosterior(values=prior.values, masses=tuple(float(m) for m in masses))


def _precisions(count: int, sigma: float, prior: NormalPrior) -> Tuple[float, float]:
    if not isinstance(prior, NormalPrior):
        raise InvalidArgumentError(f"Conjugate update expects a NormalPrior, got {type(prior).__name__}.")
    return 1.0 / (prior.std * prior.std), count / (sigma * sigma)


def posterior_mean(data: SampleLike, sigma: float, prior: NormalPrior) -> float:
    """Precision-weighted average of the prior mean and the sample mean."""
    sample = as_normal_sample(data)
    sigma = require_positive("sigma", sigma)
    prior_precision, data_precision = _precisions(sample.count, sigma, prior)
    return (prior.mean * prior_precision + sample.mean * data_precision) / (prior_precision + data_precision)


def posterior_std(data: SampleLike, sigma: float, prior: NormalPrior) -> float:
    """Posterior standard deviation; only the sample size of ``data`` matters."""
    sample = as_normal_sample(data)
    sigma = require_positive("sigma", sigma)
    prior_precision, data_precision = _precisions(sample.count, sigma, prior)
    return math.sqrt(1.0 / (prior_precision + data_precision))


def update(
    data: SampleLike,
    sigma: float,
    prior: Optional[NormalMeanPrior] = None,
    *,
    primitives: Optional[DistributionPrimitives] = None,
) -> PosteriorNormal:
    """Return the Normal posterior of the mean under a flat or Normal prior.

    ``prior=None`` means the flat prior. The flat case is the direct
    specialization: mean ``ybar`` and variance ``sigma**2 / n``.
    """
    sample = as_normal_sample(data)
    sigma = require_positive("sigma", sigma)
    prims = primitives or get_primitives()

    if prior is None or isinstance(prior, (FlatPrior, JeffreysPrior)):
        return PosteriorNormal(mean=sample.mean, std=sigma / math.sqrt(sample.count), primitives=prims)
    if isinstance(prior, NormalPrior):
        return PosteriorNormal(
            mean=posterior_mean(sample, sigma, prior),
            std=posterior_std(sample, sigma, prior),
            primitives=prims,
        )
    raise InvalidArgumentError(
        f"Unsupported prior for a Normal mean: {type(prior).__name__}. Use posterior_discrete for discrete priors."
    )


def quantile(
    p: float,
    post_mean: float,
    post_std: float,
    *,
    primitives: Optional[DistributionPrimitives] = None,
) -> float:
    p = require_probability("p", p)
    return PosteriorNormal(mean=post_mean, std=post_std, primitives=primitives or get_primitives()).quantile(p)


def credible_interval(
    alpha: float,
    post_mean: float,
    post_std: float,
    *,
    primitives: Optional[DistributionPrimitives] = None,
) -> CredibleInterval:
    """Equal-tail interval ``[quantile(alpha/2), quantile(1 - alpha/2)]``."""
    alpha = require_probability("alpha", alpha)
    posterior = PosteriorNormal(mean=post_mean, std=post_std, primitives=primitives or get_primitives())
    return posterior.credible_interval(alpha)


# ---------------------------------------------------------------------------
# Unknown population standard deviation


def update_unknown_sigma(
    sample: NormalSample,
    sample_std: float,
    prior: Optional[NormalMeanPrior] = None,
    *,
    primitives: Optional[DistributionPrimitives] = None,
) -> PosteriorStudentT:
    """Student-t posterior of the mean when sigma is replaced by its estimate.

    Uses ``n - 1`` degrees of freedom, so at least two observations are needed.
    """
    if not isinstance(sample, NormalSample):
        raise InvalidArgumentError("update_unknown_sigma expects a NormalSample summary.")
    if sample.count < 2:
        raise InvalidArgumentError(f"An estimated sigma needs at least two observations, got {sample.count}.")
    sample_std = require_positive("sample_std", sample_std)
    centre = update(sample, sample_std, prior, primitives=primitives)
    return PosteriorStudentT(
        location=centre.mean,
        scale=centre.std,
        df=sample.count - 1,
        primitives=primitives or get_primitives(),
    )


def credible_interval_unknown_sigma(
    alpha: float,
    sample: NormalSample,
    sample_std: float,
    prior: Optional[NormalMeanPrior] = None,
    *,
    primitives: Optional[DistributionPrimitives] = None,
) -> CredibleInterval:
    alpha = require_probability("alpha", alpha)
    return update_unknown_sigma(sample, sample_std, prior, primitives=primitives).credible_interval(alpha)


__all__ = [
    "credible_interval",
    "credible_interval_unknown_sigma",
    "posterior_discrete",
    "posterior_mean",
    "posterior_std",
    "quantile",
    "update",
    "update_unknown_sigma",
]
