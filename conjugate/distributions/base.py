"""Contract for the probability primitives the inference core relies on."""

from __future__ import annotations

from typing import Optional, Protocol, Union

import numpy as np

RandomState = Optional[Union[int, np.random.Generator]]


class DistributionPrimitives(Protocol):
    """Density, cumulative and quantile evaluators used by the posteriors.

    Normal functions take ``(mean, std)``; Gamma functions take
    ``(shape, scale)``, so callers working with a rate must pass ``1 / rate``.
    Everything except ``gamma_random`` must be deterministic.
    """

    def std_normal_pdf(self, z: float) -> float: ...

    def normal_pdf(self, x: float, mean: float, std: float) -> float: ...

    def normal_cdf(self, x: float, mean: float, std: float) -> float: ...

    def normal_quantile(self, p: float, mean: float, std: float) -> float: ...

    def gamma_pdf(self, x: float, shape: float, scale: float) -> float: ...

    def gamma_cdf(self, x: float, shape: float, scale: float) -> float: ...

    def gamma_quantile(self, p: float, shape: float, scale: float) -> float: ...

    def gamma_random(
        self, shape: float, scale: float, size: Optional[int] = None, random_state: RandomState = None
    ) -> Union[float, np.ndarray]: ...

    def student_t_quantile(self, p: float, df: float) -> float: ...


__all__ = ["DistributionPrimitives", "RandomState"]
