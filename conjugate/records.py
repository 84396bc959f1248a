"""Value records shared by the inference modules.

Every record is frozen and validates itself on construction, so an instance
that exists is always a legal input for the posterior-update functions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple, Union

import numpy as np

from .errors import InvalidArgumentError
from .validation import (
    require_count,
    require_finite,
    require_non_negative,
    require_positive,
)


# ---------------------------------------------------------------------------
# Observed data summaries


@dataclass(frozen=True)
class NormalSample:
    """Summary statistics of a sample drawn from a Normal population."""

    count: int
    mean: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "count", require_count("count", self.count, minimum=1))
        object.__setattr__(self, "mean", require_finite("mean", self.mean))

    @classmethod
    def single(cls, observation: float) -> "NormalSample":
        """Wrap one observation as a sample of size one."""
        return cls(count=1, mean=observation)

    @classmethod
    def from_observations(cls, observations: Iterable[float]) -> "NormalSample":
        values = np.asarray(list(observations), dtype=float)
        if values.ndim != 1 or values.size == 0:
            raise InvalidArgumentError("At least one observation is required.")
        if not np.all(np.isfinite(values)):
            raise InvalidArgumentError("Observations contain non-finite entries.")
        return cls(count=int(values.size), mean=float(values.mean()))


@dataclass(frozen=True)
class CountSample:
    """Total number of Poisson events seen over ``intervals`` equal intervals."""

    total_events: int
    intervals: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "total_events", require_count("total_events", self.total_events))
        object.__setattr__(self, "intervals", require_count("intervals", self.intervals, minimum=1))

    @classmethod
    def from_counts(cls, counts: Iterable[int]) -> "CountSample":
        values = [require_count("count", value) for value in counts]
        if not values:
            raise InvalidArgumentError("At least one interval count is required.")
        return cls(total_events=sum(values), intervals=len(values))


# ---------------------------------------------------------------------------
# Priors


@dataclass(frozen=True)
class DiscretePrior:
    """Finite set of candidate parameter values with their prior masses."""

    values: Tuple[float, ...]
    masses: Tuple[float, ...]

    def __post_init__(self) -> None:
        values = tuple(require_finite("value", v) for v in self.values)
        masses = tuple(require_non_negative("mass", m) for m in self.masses)
        if len(values) != len(masses):
            raise InvalidArgumentError(
                f"Prior values and masses must have equal length, got {len(values)} and {len(masses)}."
            )
        if not values:
            raise InvalidArgumentError("A discrete prior needs at least one candidate value.")
        if sum(masses) <= 0:
            raise InvalidArgumentError("Prior masses must not all be zero.")
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "masses", masses)


@dataclass(frozen=True)
class FlatPrior:
    """Uniform (improper) prior over the parameter."""


@dataclass(frozen=True)
class JeffreysPrior:
    """Jeffreys' non-informative prior.

    For a Normal mean it coincides with the flat prior; for a Poisson rate it
    is the Gamma(1/2, 0) limit.
    """


@dataclass(frozen=True)
class NormalPrior:
    """Normal prior belief about a mean."""

    mean: float
    std: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "mean", require_finite("prior mean", self.mean))
        object.__setattr__(self, "std", require_positive("prior std", self.std))


@dataclass(frozen=True)
class GammaPrior:
    """Gamma prior on a Poisson rate, parametrized by shape ``r`` and rate ``v``."""

    shape: float
    rate: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "shape", require_non_negative("shape r", self.shape))
        object.__setattr__(self, "rate", require_non_negative("rate v", self.rate))

    @classmethod
    def from_mean_std(cls, mean: float, std: float) -> "GammaPrior":
        """Match a prior belief summarized by its mean ``m`` and std ``s``.

        Uses ``r = m**2 / s**2`` and ``v = m / s**2``.
        """
        mean = require_positive("prior mean", mean)
        std = require_positive("prior std", std)
        variance = std * std
        return cls(shape=mean * mean / variance, rate=mean / variance)


NormalMeanPrior = Union[FlatPrior, JeffreysPrior, NormalPrior]
PoissonRatePrior = Union[FlatPrior, JeffreysPrior, GammaPrior]


# ---------------------------------------------------------------------------
# Inference products


@dataclass(frozen=True)
class CredibleInterval:
    """Equal-tail credible interval at significance level ``alpha``."""

    low: float
    high: float
    alpha: float

    def __post_init__(self) -> None:
        if not self.low <= self.high:
            raise InvalidArgumentError(f"Interval bounds are inverted: low={self.low!r}, high={self.high!r}.")

    @property
    def width(self) -> float:
        return self.high - self.low

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high


@dataclass(frozen=True)
class TestDecision:
    """Outcome of a posterior hypothesis test."""

    __test__ = False  # keep pytest from collecting this record

    reject: bool
    probability: float
    alpha: float


@dataclass(frozen=True)
class DiscretePosterior:
    """Posterior probability masses over the candidate values of a discrete prior."""

    values: Tuple[float, ...]
    masses: Tuple[float, ...]

    def as_mapping(self) -> Dict[float, float]:
        return dict(zip(self.values, self.masses))

    @property
    def mean(self) -> float:
        return float(np.dot(self.values, self.masses))

    def mass_at(self, value: float) -> float:
        try:
            return self.masses[self.values.index(value)]
        except ValueError as exc:
            raise InvalidArgumentError(f"{value!r} is not a candidate value of this posterior.") from exc


def as_normal_sample(data: Union[NormalSample, float]) -> NormalSample:
    """Accept either a sample summary or a single raw observation."""
    if isinstance(data, NormalSample):
        return data
    return NormalSample.single(data)


__all__ = [
    "CountSample",
    "CredibleInterval",
    "DiscretePosterior",
    "DiscretePrior",
    "FlatPrior",
    "GammaPrior",
    "JeffreysPrior",
    "NormalMeanPrior",
    "NormalPrior",
    "NormalSample",
    "PoissonRatePrior",
    "TestDecision",
    "as_normal_sample",
]
