"""Gamma-conjugate inference for a Poisson rate."""

from .rate import (
    credible_interval,
    equivalent_prior_sample_size,
    interquartile_range,
    likelihood,
    mean_squared_error,
    one_sided_odds,
    one_sided_test,
    posterior,
    posterior_mean,
    posterior_mean_bias,
    posterior_variance,
    prior_parameters,
    two_sided_test,
    update,
)

__all__ = [
    "credible_interval",
    "equivalent_prior_sample_size",
    "interquartile_range",
    "likelihood",
    "mean_squared_error",
    "one_sided_odds",
    "one_sided_test",
    "posterior",
    "posterior_mean",
    "posterior_mean_bias",
    "posterior_variance",
    "prior_parameters",
    "two_sided_test",
    "update",
]
