"""Tabular summaries of posterior distributions."""

from __future__ import annotations

from typing import Optional, Protocol, Union

import pandas as pd

from conjugate.config import SummaryConfig
from conjugate.posteriors import PosteriorGamma, PosteriorNormal, PosteriorStudentT
from conjugate.records import CredibleInterval

Posterior = Union[PosteriorNormal, PosteriorGamma, PosteriorStudentT]


class _Quantiled(Protocol):
    def quantile(self, p: float) -> float: ...

    def credible_interval(self, alpha: float) -> CredibleInterval: ...


def quantile_table(posterior: _Quantiled, config: Optional[SummaryConfig] = None) -> pd.DataFrame:
    """One row per probability with the matching posterior quantile."""
    cfg = config or SummaryConfig()
    cfg.validate()
    probabilities = list(cfg.probabilities)
    return pd.DataFrame(
        {
            "probability": probabilities,
            "quantile": [posterior.quantile(p) for p in probabilities],
        }
    )


def interval_row(label: str, posterior: _Quantiled, alpha: float) -> dict[str, float | str]:
    interval = posterior.credible_interval(alpha)
    return {
        "posterior": label,
        "median": posterior.quantile(0.5),
        "lower": interval.low,
        "upper": interval.high,
        "alpha": alpha,
    }


def interval_table(posteriors: dict[str, Posterior], alpha: float) -> pd.DataFrame:
    """Median and equal-tail interval for several labelled posteriors."""
    rows = [interval_row(label, posterior, alpha) for label, posterior in posteriors.items()]
    return pd.DataFrame(rows, columns=["posterior", "median", "lower", "upper", "alpha"])


def format_table(frame: pd.DataFrame, digits: int = 6) -> str:
    return frame.to_string(index=False, float_format=lambda value: f"{value:.{digits}f}")


__all__ = ["Posterior", "format_table", "interval_row", "interval_table", "quantile_table"]
