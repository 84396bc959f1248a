"""Presentation helpers built on the inference core."""

from .tables import format_table, interval_table, quantile_table

__all__ = ["format_table", "interval_table", "quantile_table"]
