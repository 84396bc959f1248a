"""Tests for posterior tables and density plots."""

from __future__ import annotations

from pathlib import Path
import sys

import plotly.graph_objects as go
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from conjugate.config import SummaryConfig
from conjugate.normal import difference, mean
from conjugate.poisson import rate
from conjugate.records import NormalSample
from experiments.plots import FigureTarget, density_frame, plot_posterior_density
from experiments.tables import format_table, interval_table, quantile_table


# ---------------------------------------------------------------------------
# Tables


def test_quantile_table_uses_default_probabilities() -> None:
    posterior = rate.posterior(10, 5)
    table = quantile_table(posterior)
    assert list(table.columns) == ["probability", "quantile"]
    assert len(table) == 9
    assert table["quantile"].is_monotonic_increasing
    assert table.loc[table["probability"] == 0.5, "quantile"].iloc[0] == pytest.approx(posterior.quantile(0.5))


def test_quantile_table_custom_config() -> None:
    posterior = mean.update(NormalSample(count=4, mean=0.0), 2.0)
    table = quantile_table(posterior, SummaryConfig(probabilities=(0.5,)))
    assert table["quantile"].tolist() == pytest.approx([0.0])


def test_interval_table_mixes_posterior_kinds() -> None:
    sample1, sample2 = NormalSample(count=10, mean=5.0), NormalSample(count=15, mean=3.0)
    posteriors = {
        "known": difference.difference_posterior(sample1, sample2, 2.0, 3.0),
        "estimated": difference.behrens_fisher_flat_posterior(sample1, sample2, 2.0, 3.0),
    }
    table = interval_table(posteriors, 0.05)
    assert table["posterior"].tolist() == ["known", "estimated"]
    assert (table["lower"] <= table["upper"]).all()
    assert table["median"].tolist() == pytest.approx([2.0, 2.0])

    rendered = format_table(table, digits=3)
    assert "estimated" in rendered
    assert "2.000" in rendered


# ---------------------------------------------------------------------------
# Plots


def test_density_frame_spans_posterior() -> None:
    posterior = rate.posterior(10, 5)
    frame = density_frame(posterior, grid_points=50)
    assert len(frame) == 50
    assert frame["value"].iloc[0] == pytest.approx(posterior.quantile(1e-3))
    assert (frame["density"] >= 0).all()
    with pytest.raises(ValueError):
        density_frame(posterior, grid_points=1)


def test_plot_posterior_density_writes_html(tmp_path: Path) -> None:
    posterior = mean.update(NormalSample(count=5, mean=2.0), 1.0)
    target = FigureTarget(directory=tmp_path / "figs", slug="normal_mean")
    fig = plot_posterior_density(posterior, "Normal mean", alpha=0.1, grid_points=40, save_to=target)

    assert isinstance(fig, go.Figure)
    assert target.paths()["html"].exists()


def test_figure_target_rejects_unknown_format(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        FigureTarget(directory=tmp_path, slug="x", formats=("svg",))
