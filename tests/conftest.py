"""Shared fixtures for the record store tests."""

import pytest

from finstore.core import FinancialRecordStore
from finstore.models import Company, FinancialStatement


def build_statement(year: int, scale: float = 1.0) -> FinancialStatement:
    """A reconciled statement whose totals equal their line items."""
    return FinancialStatement(
        year=year,
        balance_sheet={
            "current_assets": {
                "cash": 30000 * scale,
                "short_term_investments": 20000 * scale,
                "accounts_receivable": 45000 * scale,
                "inventory": 0,
                "prepaid_expenses": 5000 * scale,
                "total_current_assets": 100000 * scale,
            },
            "non_current_assets": {
                "property_plant_equipment": 80000 * scale,
                "intangible_assets": 10000 * scale,
                "long_term_investments": 10000 * scale,
                "total_non_current_assets": 100000 * scale,
            },
            "total_assets": 200000 * scale,
            "current_liabilities": {
                "accounts_payable": 30000 * scale,
                "short_term_debt": 10000 * scale,
                "accrued_liabilities": 10000 * scale,
                "total_current_liabilities": 50000 * scale,
            },
            "non_current_liabilities": {
                "long_term_debt": 40000 * scale,
                "deferred_tax_liabilities": 10000 * scale,
                "total_non_current_liabilities": 50000 * scale,
            },
            "total_liabilities": 100000 * scale,
            "shareholders_equity": {
                "share_capital": 60000 * scale,
                "retained_earnings": 40000 * scale,
                "total_equity": 100000 * scale,
            },
        },
        income_statement={
            "revenue": 150000 * scale,
            "cost_of_goods_sold": 90000 * scale,
            "gross_profit": 60000 * scale,
            "operating_expenses": {
                "selling_expenses": 15000 * scale,
                "administrative_expenses": 15000 * scale,
                "research_development": 5000 * scale,
                "total_operating_expenses": 35000 * scale,
            },
            "operating_income": 25000 * scale,
            "interest_expense": 5000 * scale,
            "earnings_before_tax": 20000 * scale,
            "net_income": 20000 * scale,
            "ebitda": 30000 * scale,
        },
        cash_flow_statement={
            "operating_cash_flow": {
                "net_income": 20000 * scale,
                "depreciation": 5000 * scale,
                "working_capital_changes": -3000 * scale,
                "total_operating_cash_flow": 22000 * scale,
            },
            "investing_cash_flow": {
                "capital_expenditures": -12000 * scale,
                "total_investing_cash_flow": -12000 * scale,
            },
            "financing_cash_flow": {
                "debt_proceeds": 5000 * scale,
                "debt_repayments": -4000 * scale,
                "dividends_paid": -6000 * scale,
                "total_financing_cash_flow": -5000 * scale,
            },
            "net_cash_flow": 5000 * scale,
            "beginning_cash": 25000 * scale,
            "ending_cash": 30000 * scale,
        },
    )


def build_company(statements=(), **overrides) -> Company:
    fields = {
        "user_id": "user-1",
        "company_name": "Acme Trading",
        "sector": "Retail",
        "activity": "Wholesale",
        "legal_entity": "LLC",
        "financial_statements": list(statements),
    }
    fields.update(overrides)
    return Company(**fields)


@pytest.fixture
def statement():
    """Reconciled 2023 statement."""
    return build_statement(2023)


@pytest.fixture
def store():
    """Store with statements for 2021, 2023 and 2022, in that order."""
    company = build_company(
        [build_statement(2021, 0.8), build_statement(2023), build_statement(2022, 0.9)]
    )
    return FinancialRecordStore(company)


@pytest.fixture
def empty_store():
    return FinancialRecordStore(build_company())
