"""Plotting utilities for posterior distributions."""

from .posterior_density import FigureTarget, density_frame, plot_posterior_density

__all__ = ["FigureTarget", "density_frame", "plot_posterior_density"]
