"""Tests for the probability primitives and their injection into posteriors."""

from __future__ import annotations

from pathlib import Path
import math
import sys
from typing import Optional

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from conjugate.distributions import DistributionPrimitives, ScipyPrimitives, get_primitives
from conjugate.normal import difference, mean
from conjugate.poisson import rate
from conjugate.records import DiscretePrior, NormalSample


# ---------------------------------------------------------------------------
# SciPy backend


def test_default_primitives_is_shared_scipy_instance() -> None:
    assert isinstance(get_primitives(), ScipyPrimitives)
    assert get_primitives() is get_primitives()


def test_scipy_normal_primitives() -> None:
    prims = ScipyPrimitives()
    assert prims.std_normal_pdf(0.0) == pytest.approx(1 / math.sqrt(2 * math.pi))
    assert prims.normal_pdf(1.0, 1.0, 2.0) == pytest.approx(1 / (2.0 * math.sqrt(2 * math.pi)))
    assert prims.normal_cdf(1.0, 1.0, 2.0) == pytest.approx(0.5)
    assert prims.normal_quantile(0.975, 0.0, 1.0) == pytest.approx(1.959964, abs=1e-6)


def test_scipy_gamma_primitives_are_scale_parametrized() -> None:
    prims = ScipyPrimitives()
    # Gamma(1, scale) is exponential with mean ``scale``.
    assert prims.gamma_cdf(2.0, 1.0, 2.0) == pytest.approx(1 - math.exp(-1.0))
    assert prims.gamma_pdf(0.0, 1.0, 2.0) == pytest.approx(0.5)
    assert prims.gamma_quantile(1 - math.exp(-1.0), 1.0, 2.0) == pytest.approx(2.0)


def test_scipy_student_t_quantile_approaches_normal() -> None:
    prims = ScipyPrimitives()
    assert prims.student_t_quantile(0.5, 4) == pytest.approx(0.0)
    assert prims.student_t_quantile(0.975, 1) == pytest.approx(12.7062, abs=1e-4)
    assert prims.student_t_quantile(0.975, 1e7) == pytest.approx(1.959964, abs=1e-5)


def test_scipy_gamma_random_is_reproducible() -> None:
    prims = ScipyPrimitives()
    first = prims.gamma_random(3.0, 0.5, size=4, random_state=42)
    second = prims.gamma_random(3.0, 0.5, size=4, random_state=np.random.default_rng(42))
    assert isinstance(first, np.ndarray)
    assert np.allclose(first, second)


# ---------------------------------------------------------------------------
# Injection of a deterministic stub


class StubPrimitives:
    """Deterministic DistributionPrimitives implementation that records calls."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def std_normal_pdf(self, z: float) -> float:
        self.calls.append(("std_normal_pdf", z))
        return 1.0

    def normal_pdf(self, x: float, mean: float, std: float) -> float:
        self.calls.append(("normal_pdf", x, mean, std))
        return 0.25

    def normal_cdf(self, x: float, mean: float, std: float) -> float:
        self.calls.append(("normal_cdf", x, mean, std))
        return 0.5

    def normal_quantile(self, p: float, mean: float, std: float) -> float:
        self.calls.append(("normal_quantile", p, mean, std))
        return mean + p * std

    def gamma_pdf(self, x: float, shape: float, scale: float) -> float:
        self.calls.append(("gamma_pdf", x, shape, scale))
        return 0.1

    def gamma_cdf(self, x: float, shape: float, scale: float) -> float:
        self.calls.append(("gamma_cdf", x, shape, scale))
        return 0.01

    def gamma_quantile(self, p: float, shape: float, scale: float) -> float:
        self.calls.append(("gamma_quantile", p, shape, scale))
        return p * shape * scale

    def gamma_random(self, shape: float, scale: float, size: Optional[int] = None, random_state=None):
        self.calls.append(("gamma_random", shape, scale, size))
        return shape * scale

    def student_t_quantile(self, p: float, df: float) -> float:
        self.calls.append(("student_t_quantile", p, df))
        return 2.0 if p > 0.5 else -2.0


def test_stub_satisfies_protocol_shape() -> None:
    stub: DistributionPrimitives = StubPrimitives()
    assert stub.normal_quantile(0.5, 1.0, 2.0) == pytest.approx(2.0)


def test_normal_posterior_delegates_to_injected_primitives() -> None:
    stub = StubPrimitives()
    posterior = mean.update(NormalSample(count=4, mean=3.0), 2.0, primitives=stub)

    interval = posterior.credible_interval(0.2)
    assert interval.low == pytest.approx(3.0 + 0.1 * 1.0)
    assert interval.high == pytest.approx(3.0 + 0.9 * 1.0)
    assert ("normal_quantile", 0.1, 3.0, 1.0) in stub.calls
    assert posterior.pdf(0.0) == pytest.approx(0.25)


def test_discrete_single_observation_uses_injected_density() -> None:
    stub = StubPrimitives()
    prior = DiscretePrior(values=(0.0, 1.0), masses=(0.25, 0.75))
    posterior = mean.posterior_discrete(0.4, 1.0, prior, primitives=stub)
    # A flat stub likelihood leaves the prior unchanged.
    assert posterior.masses == pytest.approx((0.25, 0.75))
    assert [call[0] for call in stub.calls] == ["std_normal_pdf", "std_normal_pdf"]


def test_gamma_posterior_passes_scale_to_primitives() -> None:
    stub = StubPrimitives()
    posterior = rate.posterior(10, 4, 1.0, 0.0, primitives=stub)
    posterior.quantile(0.5)
    posterior.sample()
    assert ("gamma_quantile", 0.5, 11.0, 0.25) in stub.calls
    assert ("gamma_random", 11.0, 0.25, None) in stub.calls


def test_behrens_fisher_uses_injected_t_quantile() -> None:
    stub = StubPrimitives()
    sample1, sample2 = NormalSample(count=10, mean=5.0), NormalSample(count=15, mean=3.0)
    posterior = difference.behrens_fisher_flat_posterior(sample1, sample2, 2.0, 3.0, primitives=stub)
    interval = posterior.credible_interval(0.05)
    assert interval.low == pytest.approx(0.0)
    assert interval.high == pytest.approx(4.0)
    name, p, df = stub.calls[-1]
    assert name == "student_t_quantile"
    assert p == pytest.approx(0.975)
    assert df == 27
