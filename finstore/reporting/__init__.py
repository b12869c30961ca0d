"""Tabular reports assembled from per-year ratio sets."""

from .ratio_tables import (
    export_ratios_to_excel,
    format_ratio_table,
    interpretation_table,
    ratio_table,
)

__all__ = [
    "export_ratios_to_excel",
    "format_ratio_table",
    "interpretation_table",
    "ratio_table",
]
