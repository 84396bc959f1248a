"""Static defaults for summaries produced on top of the inference core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .errors import InvalidArgumentError
from .validation import require_probability

# Probabilities printed by the quantile table of the command-line front end.
DEFAULT_QUANTILE_PROBS: Tuple[float, ...] = (0.005, 0.01, 0.025, 0.05, 0.5, 0.95, 0.975, 0.99, 0.995)

DEFAULT_ALPHA = 0.05

# Number of evaluation points used when plotting a posterior density.
DEFAULT_GRID_POINTS = 400


@dataclass(frozen=True)
class SummaryConfig:
    """Probabilities and credible level used when tabulating a posterior."""

    probabilities: Sequence[float] = DEFAULT_QUANTILE_PROBS
    alpha: float = DEFAULT_ALPHA

    def validate(self) -> None:
        if not self.probabilities:
            raise InvalidArgumentError("At least one quantile probability is required.")
        for p in self.probabilities:
            require_probability("probability", p)
        require_probability("alpha", self.alpha)


__all__ = [
    "DEFAULT_ALPHA",
    "DEFAULT_GRID_POINTS",
    "DEFAULT_QUANTILE_PROBS",
    "SummaryConfig",
]
