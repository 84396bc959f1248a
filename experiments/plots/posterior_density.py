"""Density curves of posterior distributions with their credible interval."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Protocol, Tuple

import numpy as np
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from conjugate.config import DEFAULT_ALPHA, DEFAULT_GRID_POINTS
from conjugate.records import CredibleInterval

SUPPORTED_FORMATS = ("html", "png")


class _Density(Protocol):
    def pdf(self, x: float) -> float: ...

    def quantile(self, p: float) -> float: ...

    def credible_interval(self, alpha: float) -> CredibleInterval: ...


@dataclass(frozen=True)
class FigureTarget:
    """Where a figure is written; one file per requested format."""

    directory: Path
    slug: str
    formats: Tuple[str, ...] = ("html",)

    def __post_init__(self) -> None:
        unknown = set(self.formats) - set(SUPPORTED_FORMATS)
        if unknown:
            raise ValueError(f"Unsupported figure formats: {', '.join(sorted(unknown))}")

    def paths(self) -> Dict[str, Path]:
        return {fmt: self.directory / f"{self.slug}.{fmt}" for fmt in self.formats}


def density_frame(posterior: _Density, grid_points: int = DEFAULT_GRID_POINTS, tail: float = 1e-3) -> pd.DataFrame:
    """Evaluate the density on a grid spanning all but ``tail`` of each side."""
    if grid_points < 2:
        raise ValueError("grid_points must be at least 2.")
    grid = np.linspace(posterior.quantile(tail), posterior.quantile(1 - tail), grid_points)
    return pd.DataFrame({"value": grid, "density": [posterior.pdf(float(x)) for x in grid]})


def plot_posterior_density(
    posterior: _Density,
    title: str,
    alpha: float = DEFAULT_ALPHA,
    grid_points: int = DEFAULT_GRID_POINTS,
    save_to: Optional[FigureTarget] = None,
    show: bool = False,
) -> go.Figure:
    """Plot a posterior density and shade its equal-tail credible interval."""
    frame = density_frame(posterior, grid_points)
    interval = posterior.credible_interval(alpha)

    fig = px.line(frame, x="value", y="density", title=title, labels={"value": "Parameter", "density": "Density"})
    fig.add_vrect(
        x0=interval.low,
        x1=interval.high,
        fillcolor="steelblue",
        opacity=0.15,
        line_width=0,
        annotation_text=f"{1 - alpha:.0%} credible interval",
        annotation_position="top left",
    )
    fig.update_layout(yaxis=dict(rangemode="tozero"))

    if save_to:
        save_to.directory.mkdir(parents=True, exist_ok=True)
        for fmt, path in save_to.paths().items():
            if fmt == "png":
                fig.write_image(str(path), engine="kaleido")
            else:
                fig.write_html(str(path), include_plotlyjs="cdn", full_html=True)
    if show:
        fig.show()
    return fig


__all__ = ["FigureTarget", "SUPPORTED_FORMATS", "density_frame", "plot_posterior_density"]
