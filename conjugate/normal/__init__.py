"""Inference about Normal means and differences of Normal means."""

from . import difference, mean
from .difference import (
    behrens_fisher_flat_posterior,
    behrens_fisher_posterior,
    difference_moments,
    difference_posterior,
    sample_variance,
    satterthwaite_df,
    summarize,
)
from .mean import posterior_discrete, posterior_mean, posterior_std, update, update_unknown_sigma

__all__ = [
    "behrens_fisher_flat_posterior",
    "behrens_fisher_posterior",
    "difference",
    "difference_moments",
    "difference_posterior",
    "mean",
    "posterior_discrete",
    "posterior_mean",
    "posterior_std",
    "sample_variance",
    "satterthwaite_df",
    "summarize",
    "update",
    "update_unknown_sigma",
]
