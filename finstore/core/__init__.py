"""Core lookups, ratio derivation and statement validation."""

from .ratios import (
    RATIO_BANDS,
    RATIO_CATEGORIES,
    RatioSet,
    calculate_ratios,
    interpret_ratio,
    interpret_ratios,
    is_indeterminate,
    safe_divide,
)
from .validation import validate_statement
from .store import FinancialRecordStore

__all__ = [
    "FinancialRecordStore",
    "RATIO_BANDS",
    "RATIO_CATEGORIES",
    "RatioSet",
    "calculate_ratios",
    "interpret_ratio",
    "interpret_ratios",
    "is_indeterminate",
    "safe_divide",
    "validate_statement",
]
