"""Data models for company financial records."""

from .statements import (
    BalanceSheet,
    CashFlowStatement,
    CurrentAssets,
    CurrentLiabilities,
    FinancialStatement,
    FinancingCashFlow,
    IncomeStatement,
    InvestingCashFlow,
    MarketData,
    NonCurrentAssets,
    NonCurrentLiabilities,
    OperatingCashFlow,
    OperatingExpenses,
    ShareholdersEquity,
    StatementSection,
    statement_field_paths,
)
from .company import (
    AnalysisPreferences,
    AnalysisType,
    BudgetData,
    BudgetEntry,
    Company,
    CompanySize,
    ComparisonLevel,
    DataSource,
    ReportLanguage,
)

__all__ = [
    "BalanceSheet",
    "CashFlowStatement",
    "CurrentAssets",
    "CurrentLiabilities",
    "FinancialStatement",
    "FinancingCashFlow",
    "IncomeStatement",
    "InvestingCashFlow",
    "MarketData",
    "NonCurrentAssets",
    "NonCurrentLiabilities",
    "OperatingCashFlow",
    "OperatingExpenses",
    "ShareholdersEquity",
    "StatementSection",
    "statement_field_paths",
    "AnalysisPreferences",
    "AnalysisType",
    "BudgetData",
    "BudgetEntry",
    "Company",
    "CompanySize",
    "ComparisonLevel",
    "DataSource",
    "ReportLanguage",
]
