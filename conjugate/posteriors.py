"""Immutable posterior distributions produced by the conjugate updates."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

import numpy as np

from .distributions import DistributionPrimitives, RandomState, get_primitives
from .errors import InvalidArgumentError
from .records import CredibleInterval
from .validation import require_finite, require_positive, require_probability


@dataclass(frozen=True)
class PosteriorNormal:
    """Normal posterior of a mean (or of a difference of means)."""

    mean: float
    std: float
    primitives: DistributionPrimitives = field(default_factory=get_primitives, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mean", require_finite("posterior mean", self.mean))
        object.__setattr__(self, "std", require_positive("posterior std", self.std))

    @property
    def variance(self) -> float:
        return self.std * self.std

    @property
    def median(self) -> float:
        return self.mean

    def moments(self) -> Tuple[float, float]:
        """Mean and standard deviation; skewness and excess kurtosis are zero."""
        return self.mean, self.std

    def pdf(self, x: float) -> float:
        return self.primitives.normal_pdf(require_finite("x", x), self.mean, self.std)

    def cdf(self, x: float) -> float:
        return self.primitives.normal_cdf(require_finite("x", x), self.mean, self.std)

    def quantile(self, p: float) -> float:
        return self.primitives.normal_quantile(require_probability("p", p), self.mean, self.std)

    def credible_interval(self, alpha: float) -> CredibleInterval:
        alpha = require_probability("alpha", alpha)
        return CredibleInterval(low=self.quantile(alpha / 2), high=self.quantile(1 - alpha / 2), alpha=alpha)


@dataclass(frozen=True)
class PosteriorStudentT:
    """Location-scale Student-t posterior used when variances are estimated."""

    location: float
    scale: float
    df: float
    primitives: DistributionPrimitives = field(default_factory=get_primitives, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "location", require_finite("location", self.location))
        object.__setattr__(self, "scale", require_positive("scale", self.scale))
        object.__setattr__(self, "df", require_positive("degrees of freedom", self.df))

    @property
    def median(self) -> float:
        return self.location

    def quantile(self, p: float) -> float:
        p = require_probability("p", p)
        return self.location + self.primitives.student_t_quantile(p, self.df) * self.scale

    def credible_interval(self, alpha: float) -> CredibleInterval:
        alpha = require_probability("alpha", alpha)
        half_width = self.primitives.student_t_quantile(1 - alpha / 2, self.df) * self.scale
        return CredibleInterval(low=self.location - half_width, high=self.location + half_width, alpha=alpha)


@dataclass(frozen=True)
class PosteriorGamma:
    """Gamma posterior of a Poisson rate, in the rate parametrization.

    The primitives are scale-parametrized, so every call passes ``1 / rate``.
    """

    shape: float
    rate: float
    primitives: DistributionPrimitives = field(default_factory=get_primitives, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "shape", require_positive("posterior shape", self.shape))
        object.__setattr__(self, "rate", require_positive("posterior rate", self.rate))

    @property
    def scale(self) -> float:
        return 1.0 / self.rate

    @property
    def mean(self) -> float:
        return self.shape / self.rate

    @property
    def variance(self) -> float:
        return self.shape / (self.rate * self.rate)

    @property
    def std(self) -> float:
        return math.sqrt(self.variance)

    def pdf(self, x: float) -> float:
        return self.primitives.gamma_pdf(require_finite("x", x), self.shape, self.scale)

    def cdf(self, x: float) -> float:
        return self.primitives.gamma_cdf(require_finite("x", x), self.shape, self.scale)

    def quantile(self, p: float) -> float:
        return self.primitives.gamma_quantile(require_probability("p", p), self.shape, self.scale)

    def credible_interval(self, alpha: float) -> CredibleInterval:
        alpha = require_probability("alpha", alpha)
        return CredibleInterval(low=self.quantile(alpha / 2), high=self.quantile(1 - alpha / 2), alpha=alpha)

    def interquartile_range(self) -> float:
        return self.quantile(0.75) - self.quantile(0.25)

    def sample(self, size: Optional[int] = None, random_state: RandomState = None) -> Union[float, np.ndarray]:
        """Draw random rates from the posterior."""
        if size is not None and size < 1:
            raise InvalidArgumentError(f"size must be at least 1, got {size!r}.")
        return self.primitives.gamma_random(self.shape, self.scale, size=size, random_state=random_state)


__all__ = ["PosteriorGamma", "PosteriorNormal", "PosteriorStudentT"]
