"""Financial ratio derivation for a single yearly statement."""

import math
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from finstore.config import get_settings
from finstore.models import FinancialStatement


INSUFFICIENT_DATA = "insufficient_data"
UNCLASSIFIED = "unclassified"

RATIO_CATEGORIES: Dict[str, List[str]] = {
    "liquidity": ["current_ratio", "quick_ratio", "cash_ratio"],
    "profitability": [
        "gross_profit_margin",
        "operating_margin",
        "net_profit_margin",
        "roa",
        "roe",
    ],
    "leverage": ["debt_to_assets", "debt_to_equity", "interest_coverage"],
    "activity": ["asset_turnover"],
}

# (level, min, max) bands, checked in order; first match wins.
Band = Tuple[str, Optional[float], Optional[float]]

RATIO_BANDS: Dict[str, List[Band]] = {
    "current_ratio": [
        ("excellent", 2.5, None),
        ("good", 1.5, 2.5),
        ("average", 1.0, 1.5),
        ("poor", None, 1.0),
    ],
    "quick_ratio": [
        ("excellent", 1.5, None),
        ("good", 1.0, 1.5),
        ("average", 0.7, 1.0),
        ("poor", None, 0.7),
    ],
    "cash_ratio": [
        ("excellent", 0.5, None),
        ("good", 0.3, 0.5),
        ("average", 0.1, 0.3),
        ("poor", None, 0.1),
    ],
    "gross_profit_margin": [
        ("excellent", 0.4, None),
        ("good", 0.25, 0.4),
        ("average", 0.15, 0.25),
        ("poor", None, 0.15),
    ],
    "operating_margin": [
        ("excellent", 0.15, None),
        ("good", 0.10, 0.15),
        ("average", 0.05, 0.10),
        ("poor", None, 0.05),
    ],
    "net_profit_margin": [
        ("excellent", 0.10, None),
        ("good", 0.05, 0.10),
        ("average", 0.02, 0.05),
        ("poor", None, 0.02),
    ],
    "roa": [
        ("excellent", 0.15, None),
        ("good", 0.10, 0.15),
        ("average", 0.05, 0.10),
        ("poor", None, 0.05),
    ],
    "roe": [
        ("excellent", 0.20, None),
        ("good", 0.15, 0.20),
        ("average", 0.10, 0.15),
        ("poor", None, 0.10),
    ],
    "debt_to_assets": [
        ("low", None, 0.3),
        ("moderate", 0.3, 0.5),
        ("high", 0.5, 0.7),
        ("very_high", 0.7, None),
    ],
    "debt_to_equity": [
        ("low", None, 0.3),
        ("moderate", 0.3, 0.6),
        ("high", 0.6, 1.0),
        ("very_high", 1.0, None),
    ],
    "interest_coverage": [
        ("excellent", 8.0, None),
        ("good", 4.0, 8.0),
        ("average", 2.0, 4.0),
        ("poor", None, 2.0),
    ],
    "asset_turnover": [
        ("excellent", 2.0, None),
        ("good", 1.5, 2.0),
        ("average", 1.0, 1.5),
        ("poor", None, 1.0),
    ],
}


def safe_divide(numerator: float, denominator: float) -> float:
    """
    Divide without raising on a zero denominator.

    A zero denominator gives a signed infinity (the numerator's sign times
    the sign of the zero), or NaN when the numerator is zero as well.
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def is_indeterminate(value: float) -> bool:
    return not math.isfinite(value)


class RatioSet(BaseModel):
    """Ratios derived from one statement; non-finite entries are indeterminate."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    year: int

    current_ratio: float
    quick_ratio: float
    cash_ratio: float

    gross_profit_margin: float
    operating_margin: float
    net_profit_margin: float
    roa: float
    roe: float

    debt_to_assets: float
    debt_to_equity: float
    interest_coverage: float

    asset_turnover: float

    @classmethod
    def ratio_names(cls) -> List[str]:
        return [name for name in cls.model_fields if name != "year"]

    def as_dict(self) -> Dict[str, float]:
        """
        Get the ratios as a plain mapping.

        Returns:
            Dictionary mapping ratio name to value, without the year
        """
        return {name: getattr(self, name) for name in self.ratio_names()}

    def indeterminate(self) -> List[str]:
        return [name for name, value in self.as_dict().items() if is_indeterminate(value)]

    def is_indeterminate(self, name: str) -> bool:
        return is_indeterminate(getattr(self, name))

    def format(self, name: str, decimals: Optional[int] = None, na: Optional[str] = None) -> str:
        """
        Render one ratio for display.

        Args:
            name: Ratio field name
            decimals: Decimal places (defaults to settings.ratio_decimals)
            na: Text for indeterminate values (defaults to settings.na_display)

        Returns:
            Formatted string
        """
        settings = get_settings()
        value = getattr(self, name)
        if is_indeterminate(value):
            return settings.na_display if na is None else na
        places = settings.ratio_decimals if decimals is None else decimals
        return f"{value:.{places}f}"


def calculate_ratios(statement: FinancialStatement) -> RatioSet:
    """
    Compute the liquidity, profitability, leverage and activity ratios.

    Args:
        statement: One fiscal year's statement

    Returns:
        RatioSet for that year
    """
    bs = statement.balance_sheet
    inc = statement.income_statement

    current_assets = bs.current_assets.total_current_assets
    current_liabilities = bs.current_liabilities.total_current_liabilities
    total_equity = bs.shareholders_equity.total_equity

    return RatioSet(
        year=statement.year,
        current_ratio=safe_divide(current_assets, current_liabilities),
        quick_ratio=safe_divide(current_assets - bs.current_assets.inventory, current_liabilities),
        cash_ratio=safe_divide(bs.current_assets.cash, current_liabilities),
        gross_profit_margin=safe_divide(inc.gross_profit, inc.revenue),
        operating_margin=safe_divide(inc.operating_income, inc.revenue),
        net_profit_margin=safe_divide(inc.net_income, inc.revenue),
        roa=safe_divide(inc.net_income, bs.total_assets),
        roe=safe_divide(inc.net_income, total_equity),
        debt_to_assets=safe_divide(bs.total_liabilities, bs.total_assets),
        debt_to_equity=safe_divide(bs.total_liabilities, total_equity),
        interest_coverage=safe_divide(inc.operating_income, inc.interest_expense),
        asset_turnover=safe_divide(inc.revenue, bs.total_assets),
    )


def interpret_ratio(name: str, value: float) -> str:
    """
    Classify a ratio value against its bands.

    Args:
        name: Ratio field name
        value: Ratio value

    Returns:
        Band level, 'insufficient_data' for non-finite values, or
        'unclassified' when no band matches
    """
    if value is None or is_indeterminate(value):
        return INSUFFICIENT_DATA

    for level, low, high in RATIO_BANDS.get(name, []):
        if low is not None and high is not None:
            if low <= value <= high:
                return level
        elif low is not None:
            if value >= low:
                return level
        elif high is not None:
            if value <= high:
                return level
    return UNCLASSIFIED


def interpret_ratios(ratios: RatioSet) -> Dict[str, str]:
    return {name: interpret_ratio(name, value) for name, value in ratios.as_dict().items()}
