"""Tests for value records, validation helpers and summary configuration."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from conjugate.config import DEFAULT_QUANTILE_PROBS, SummaryConfig
from conjugate.errors import InvalidArgumentError
from conjugate.records import (
    CountSample,
    CredibleInterval,
    DiscretePosterior,
    DiscretePrior,
    GammaPrior,
    NormalSample,
)
from conjugate.validation import require_count, require_probability


# ---------------------------------------------------------------------------
# Samples


def test_normal_sample_validates_count_and_mean() -> None:
    with pytest.raises(InvalidArgumentError):
        NormalSample(count=0, mean=1.0)
    with pytest.raises(InvalidArgumentError):
        NormalSample(count=3, mean=float("nan"))
    with pytest.raises(InvalidArgumentError):
        NormalSample.from_observations([])


@pytest.mark.parametrize("count", [float("inf"), float("nan")])
def test_samples_reject_non_finite_counts(count: float) -> None:
    with pytest.raises(InvalidArgumentError):
        NormalSample(count=count, mean=0.0)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        CountSample(total_events=count, intervals=2)  # type: ignore[arg-type]


def test_normal_sample_is_frozen() -> None:
    sample = NormalSample.single(2.5)
    assert sample == NormalSample(count=1, mean=2.5)
    with pytest.raises(AttributeError):
        sample.count = 2  # type: ignore[misc]


def test_count_sample_validates_fields() -> None:
    with pytest.raises(InvalidArgumentError):
        CountSample(total_events=-1, intervals=3)
    with pytest.raises(InvalidArgumentError):
        CountSample(total_events=4, intervals=0)


# ---------------------------------------------------------------------------
# Priors


def test_discrete_prior_rejects_negative_or_empty_masses() -> None:
    with pytest.raises(InvalidArgumentError):
        DiscretePrior(values=(1.0, 2.0), masses=(0.5, -0.5))
    with pytest.raises(InvalidArgumentError):
        DiscretePrior(values=(1.0, 2.0), masses=(0.0, 0.0))
    with pytest.raises(InvalidArgumentError):
        DiscretePrior(values=(), masses=())


def test_discrete_prior_accepts_lists() -> None:
    prior = DiscretePrior(values=[1, 2], masses=[0.3, 0.7])  # type: ignore[arg-type]
    assert prior.values == (1.0, 2.0)
    assert prior.masses == (0.3, 0.7)


def test_gamma_prior_allows_zero_parameters() -> None:
    prior = GammaPrior(shape=0.0, rate=0.0)
    assert prior.shape == 0.0
    with pytest.raises(InvalidArgumentError):
        GammaPrior(shape=-1.0, rate=0.0)


# ---------------------------------------------------------------------------
# Products


def test_credible_interval_rejects_inverted_bounds() -> None:
    with pytest.raises(InvalidArgumentError):
        CredibleInterval(low=2.0, high=1.0, alpha=0.05)
    interval = CredibleInterval(low=1.0, high=3.0, alpha=0.05)
    assert interval.width == pytest.approx(2.0)
    assert interval.contains(2.0)
    assert not interval.contains(3.5)


def test_discrete_posterior_lookup() -> None:
    posterior = DiscretePosterior(values=(1.0, 2.0), masses=(0.25, 0.75))
    assert posterior.mass_at(2.0) == pytest.approx(0.75)
    assert posterior.mean == pytest.approx(1.75)
    with pytest.raises(InvalidArgumentError):
        posterior.mass_at(3.0)


# ---------------------------------------------------------------------------
# Validation helpers and config


@pytest.mark.parametrize("value", [True, 1.5, -1, float("inf"), float("nan"), "3"])
def test_require_count_rejects_non_counts(value) -> None:
    with pytest.raises(InvalidArgumentError):
        require_count("count", value)


def test_invalid_argument_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        require_probability("p", 1.0)


def test_summary_config_defaults_validate() -> None:
    config = SummaryConfig()
    config.validate()
    assert tuple(config.probabilities) == DEFAULT_QUANTILE_PROBS
    assert len(DEFAULT_QUANTILE_PROBS) == 9


def test_summary_config_rejects_bad_values() -> None:
    with pytest.raises(InvalidArgumentError):
        SummaryConfig(probabilities=()).validate()
    with pytest.raises(InvalidArgumentError):
        SummaryConfig(probabilities=(0.5, 1.0)).validate()
    with pytest.raises(InvalidArgumentError):
        SummaryConfig(alpha=0.0).validate()
