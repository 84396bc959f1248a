"""Default primitives backed by ``scipy.stats``."""

from __future__ import annotations

from typing import Optional, Union

import numpy as np
from scipy.stats import gamma, norm, t

from .base import RandomState


class ScipyPrimitives:
    """Stateless adapter from the primitives contract onto SciPy distributions."""

    def std_normal_pdf(self, z: float) -> float:
        return float(norm.pdf(z))

    def normal_pdf(self, x: float, mean: float, std: float) -> float:
        return float(norm.pdf(x, loc=mean, scale=std))

    def normal_cdf(self, x: float, mean: float, std: float) -> float:
        return float(norm.cdf(x, loc=mean, scale=std))

    def normal_quantile(self, p: float, mean: float, std: float) -> float:
        return float(norm.ppf(p, loc=mean, scale=std))

    def gamma_pdf(self, x: float, shape: float, scale: float) -> float:
        return float(gamma.pdf(x, shape, scale=scale))

    def gamma_cdf(self, x: float, shape: float, scale: float) -> float:
        return float(gamma.cdf(x, shape, scale=scale))

    def gamma_quantile(self, p: float, shape: float, scale: float) -> float:
        return float(gamma.ppf(p, shape, scale=scale))

    def gamma_random(
        self, shape: float, scale: float, size: Optional[int] = None, random_state: RandomState = None
    ) -> Union[float, np.ndarray]:
        rng = np.random.default_rng(random_state)
        draws = rng.gamma(shape, scale, size=size)
        return float(draws) if size is None else draws

    def student_t_quantile(self, p: float, df: float) -> float:
        return float(t.ppf(p, df))


_DEFAULT = ScipyPrimitives()


def get_primitives() -> ScipyPrimitives:
    """Return the shared default primitives instance."""
    return _DEFAULT


__all__ = ["ScipyPrimitives", "get_primitives"]
