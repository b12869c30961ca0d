"""Company financial records: yearly statements, lookups and ratio derivation."""

from finstore.core import FinancialRecordStore, RatioSet, calculate_ratios
from finstore.models import Company, FinancialStatement

__version__ = "0.1.0"

__all__ = [
    "Company",
    "FinancialRecordStore",
    "FinancialStatement",
    "RatioSet",
    "calculate_ratios",
]
