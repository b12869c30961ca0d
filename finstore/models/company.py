"""Company aggregate, budgets and analysis preferences."""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from finstore.models.statements import FinancialStatement


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CompanySize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ComparisonLevel(str, Enum):
    """Geographic scope used when benchmarking against peers."""

    LOCAL_SAUDI = "local_saudi"
    GULF = "gulf"
    ARAB = "arab"
    ASIA = "asia"
    AFRICA = "africa"
    EUROPE = "europe"
    NORTH_AMERICA = "north_america"
    SOUTH_AMERICA = "south_america"
    AUSTRALIA = "australia"
    GLOBAL = "global"


class AnalysisType(str, Enum):
    BASIC_CLASSICAL = "basic_classical"
    APPLIED_INTERMEDIATE = "applied_intermediate"
    ADVANCED_COMPLEX = "advanced_complex"
    COMPREHENSIVE = "comprehensive"


class ReportLanguage(str, Enum):
    AR = "ar"
    EN = "en"


class DataSource(str, Enum):
    UPLOAD = "upload"
    MANUAL = "manual"
    API = "api"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BudgetData(_CamelModel):
    """Forecast figures for one year, independent of reported actuals."""

    projected_revenue: Optional[float] = None
    projected_expenses: Optional[float] = None
    projected_net_income: Optional[float] = None
    projected_cash_flow: Optional[float] = None
    capital_expenditure_budget: Optional[float] = None


class BudgetEntry(_CamelModel):
    year: int = Field(..., description="Budget year")
    budget_data: BudgetData = Field(default_factory=BudgetData)


class AnalysisPreferences(_CamelModel):
    """Options the owning user picked for generated analyses."""

    comparison_level: ComparisonLevel = ComparisonLevel.LOCAL_SAUDI
    years_to_analyze: int = Field(5, ge=1, le=10, description="Number of years to analyze")
    analysis_types: List[AnalysisType] = Field(default_factory=list)
    report_language: ReportLanguage = ReportLanguage.EN


class Company(_CamelModel):
    """Company aggregate root owning its yearly statements."""

    model_config = ConfigDict(validate_assignment=True)

    user_id: str = Field(..., description="Owning user reference")
    company_name: str = Field(..., description="Company name")
    sector: str = Field(..., description="Business sector")
    activity: str = Field(..., description="Business activity within the sector")
    legal_entity: str = Field(..., description="Legal entity type")
    country: str = Field("Saudi Arabia", description="Country of operation")
    currency: str = Field("SAR", description="Reporting currency")
    fiscal_year_end: str = Field("December", description="Fiscal year end month")
    company_size: CompanySize = CompanySize.MEDIUM
    is_public: bool = False
    stock_symbol: Optional[str] = Field(None, description="Ticker for listed companies")

    financial_statements: List[FinancialStatement] = Field(default_factory=list)
    budgets: List[BudgetEntry] = Field(default_factory=list)
    analysis_preferences: AnalysisPreferences = Field(default_factory=AnalysisPreferences)

    data_source: DataSource = DataSource.UPLOAD
    last_updated: datetime = Field(default_factory=_utcnow)
    is_active: bool = True

    @field_validator("company_name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        return value.strip()

    @field_validator("financial_statements")
    @classmethod
    def _unique_statement_years(cls, statements: List[FinancialStatement]) -> List[FinancialStatement]:
        seen = set()
        duplicates = set()
        for statement in statements:
            if statement.year in seen:
                duplicates.add(statement.year)
            seen.add(statement.year)
        if duplicates:
            raise ValueError(f"duplicate statement years: {sorted(duplicates)}")
        return statements

    @field_validator("budgets")
    @classmethod
    def _unique_budget_years(cls, budgets: List[BudgetEntry]) -> List[BudgetEntry]:
        years = [entry.year for entry in budgets]
        if len(years) != len(set(years)):
            raise ValueError("duplicate budget years")
        return budgets

    def touch(self) -> None:
        """Mark the aggregate as modified now."""
        self.last_updated = _utcnow()
