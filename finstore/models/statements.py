"""Yearly financial statement models."""

from typing import ClassVar, Dict, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class StatementSection(BaseModel):
    """
    Base for every statement block.

    Numeric fields default to zero at construction; an explicit ``None`` is
    treated the same as a missing key.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    # Name of the aggregate field whose value should equal the line items.
    TOTAL_FIELD: ClassVar[Optional[str]] = None

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data):
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def line_items(self) -> Dict[str, float]:
        """
        Get the listed components of this section, excluding its total.

        Returns:
            Dictionary mapping field name to value
        """
        if self.TOTAL_FIELD is None:
            return {}
        return {
            name: getattr(self, name)
            for name, info in type(self).model_fields.items()
            if info.annotation is float and name != self.TOTAL_FIELD
        }

    def line_item_sum(self) -> float:
        return sum(self.line_items().values())

    def total(self) -> Optional[float]:
        if self.TOTAL_FIELD is None:
            return None
        return getattr(self, self.TOTAL_FIELD)


class CurrentAssets(StatementSection):
    """Assets expected to convert to cash within one year."""

    TOTAL_FIELD: ClassVar[Optional[str]] = "total_current_assets"

    cash: float = 0.0
    short_term_investments: float = 0.0
    accounts_receivable: float = 0.0
    inventory: float = 0.0
    prepaid_expenses: float = 0.0
    other_current_assets: float = 0.0
    total_current_assets: float = 0.0


class NonCurrentAssets(StatementSection):
    TOTAL_FIELD: ClassVar[Optional[str]] = "total_non_current_assets"

    property_plant_equipment: float = 0.0
    intangible_assets: float = 0.0
    long_term_investments: float = 0.0
    other_non_current_assets: float = 0.0
    total_non_current_assets: float = 0.0


class CurrentLiabilities(StatementSection):
    TOTAL_FIELD: ClassVar[Optional[str]] = "total_current_liabilities"

    accounts_payable: float = 0.0
    short_term_debt: float = 0.0
    accrued_liabilities: float = 0.0
    other_current_liabilities: float = 0.0
    total_current_liabilities: float = 0.0


class NonCurrentLiabilities(StatementSection):
    TOTAL_FIELD: ClassVar[Optional[str]] = "total_non_current_liabilities"

    long_term_debt: float = 0.0
    deferred_tax_liabilities: float = 0.0
    other_non_current_liabilities: float = 0.0
    total_non_current_liabilities: float = 0.0


class ShareholdersEquity(StatementSection):
    TOTAL_FIELD: ClassVar[Optional[str]] = "total_equity"

    share_capital: float = 0.0
    retained_earnings: float = 0.0
    other_equity: float = 0.0
    total_equity: float = 0.0


class BalanceSheet(StatementSection):
    """Balance sheet at fiscal year end."""

    current_assets: CurrentAssets = Field(default_factory=CurrentAssets)
    non_current_assets: NonCurrentAssets = Field(default_factory=NonCurrentAssets)
    total_assets: float = 0.0

    current_liabilities: CurrentLiabilities = Field(default_factory=CurrentLiabilities)
    non_current_liabilities: NonCurrentLiabilities = Field(
        default_factory=NonCurrentLiabilities
    )
    total_liabilities: float = 0.0

    shareholders_equity: ShareholdersEquity = Field(default_factory=ShareholdersEquity)


class OperatingExpenses(StatementSection):
    TOTAL_FIELD: ClassVar[Optional[str]] = "total_operating_expenses"

    selling_expenses: float = 0.0
    administrative_expenses: float = 0.0
    research_development: float = 0.0
    other_operating_expenses: float = 0.0
    total_operating_expenses: float = 0.0


class IncomeStatement(StatementSection):
    """Income statement for the fiscal year."""

    revenue: float = 0.0
    cost_of_goods_sold: float = 0.0
    gross_profit: float = 0.0
    operating_expenses: OperatingExpenses = Field(default_factory=OperatingExpenses)
    operating_income: float = 0.0
    non_operating_income: float = 0.0
    interest_expense: float = 0.0
    earnings_before_tax: float = 0.0
    tax_expense: float = 0.0
    net_income: float = 0.0
    ebitda: float = 0.0


class OperatingCashFlow(StatementSection):
    TOTAL_FIELD: ClassVar[Optional[str]] = "total_operating_cash_flow"

    net_income: float = 0.0
    depreciation: float = 0.0
    working_capital_changes: float = 0.0
    other_operating_activities: float = 0.0
    total_operating_cash_flow: float = 0.0


class InvestingCashFlow(StatementSection):
    TOTAL_FIELD: ClassVar[Optional[str]] = "total_investing_cash_flow"

    capital_expenditures: float = 0.0
    acquisitions: float = 0.0
    other_investing_activities: float = 0.0
    total_investing_cash_flow: float = 0.0


class FinancingCashFlow(StatementSection):
    TOTAL_FIELD: ClassVar[Optional[str]] = "total_financing_cash_flow"

    debt_proceeds: float = 0.0
    debt_repayments: float = 0.0
    dividends_paid: float = 0.0
    share_issuance: float = 0.0
    other_financing_activities: float = 0.0
    total_financing_cash_flow: float = 0.0


class CashFlowStatement(StatementSection):
    """Cash flow statement for the fiscal year."""

    operating_cash_flow: OperatingCashFlow = Field(default_factory=OperatingCashFlow)
    investing_cash_flow: InvestingCashFlow = Field(default_factory=InvestingCashFlow)
    financing_cash_flow: FinancingCashFlow = Field(default_factory=FinancingCashFlow)
    net_cash_flow: float = 0.0
    beginning_cash: float = 0.0
    ending_cash: float = 0.0


class MarketData(StatementSection):
    """Per-share and market figures, populated for public companies only."""

    share_price: float = 0.0
    market_cap: float = 0.0
    shares_outstanding: float = 0.0
    book_value_per_share: float = 0.0
    earnings_per_share: float = 0.0


class FinancialStatement(StatementSection):
    """One fiscal year of balance sheet, income statement and cash flow data."""

    year: int = Field(..., description="Fiscal year")
    balance_sheet: BalanceSheet = Field(default_factory=BalanceSheet)
    income_statement: IncomeStatement = Field(default_factory=IncomeStatement)
    cash_flow_statement: CashFlowStatement = Field(default_factory=CashFlowStatement)
    market_data: MarketData = Field(default_factory=MarketData)


def statement_field_paths(model: type = FinancialStatement, prefix: str = "") -> Set[str]:
    """
    Collect the dotted paths of every numeric leaf in a statement model.

    Args:
        model: Section model to walk
        prefix: Path prefix for nested calls

    Returns:
        Set of paths such as 'balance_sheet.current_assets.cash'
    """
    paths = set()
    for name, info in model.model_fields.items():
        path = f"{prefix}{name}"
        annotation = info.annotation
        if isinstance(annotation, type) and issubclass(annotation, StatementSection):
            paths |= statement_field_paths(annotation, prefix=f"{path}.")
        elif annotation is float:
            paths.add(path)
    return paths
