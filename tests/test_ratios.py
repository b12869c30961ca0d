"""Tests for ratio derivation."""

import math

import pytest

from finstore.config import Settings
from finstore.core import (
    RATIO_CATEGORIES,
    RatioSet,
    calculate_ratios,
    interpret_ratio,
    interpret_ratios,
    safe_divide,
)
from finstore.models import FinancialStatement


def example_statement() -> FinancialStatement:
    """Only the figures the ratios read."""
    return FinancialStatement(
        year=2023,
        balance_sheet={
            "current_assets": {"cash": 30000, "inventory": 0, "total_current_assets": 100000},
            "current_liabilities": {"total_current_liabilities": 50000},
            "total_assets": 200000,
            "total_liabilities": 100000,
            "shareholders_equity": {"total_equity": 100000},
        },
        income_statement={
            "revenue": 150000,
            "gross_profit": 60000,
            "operating_income": 25000,
            "interest_expense": 5000,
            "net_income": 20000,
        },
    )


def same_value(a: float, b: float) -> bool:
    return (math.isnan(a) and math.isnan(b)) or a == b


class TestSafeDivide:
    """Tests for zero-denominator handling."""

    def test_regular_division(self):
        assert safe_divide(10, 4) == 2.5

    def test_positive_over_zero(self):
        assert safe_divide(100000, 0) == math.inf

    def test_negative_over_zero(self):
        assert safe_divide(-5, 0) == -math.inf

    def test_zero_over_zero(self):
        assert math.isnan(safe_divide(0, 0))

    def test_negative_zero_denominator_flips_sign(self):
        assert safe_divide(1, -0.0) == -math.inf
        assert safe_divide(-1, -0.0) == math.inf

    def test_nan_propagates(self):
        assert math.isnan(safe_divide(math.nan, 0))
        assert math.isnan(safe_divide(math.nan, 2))


class TestCalculateRatios:
    """Tests for the ratio formulas."""

    def test_end_to_end_example(self):
        """Test the reference figures for every ratio."""
        ratios = calculate_ratios(example_statement())
        assert ratios.year == 2023
        assert ratios.current_ratio == pytest.approx(2.0)
        assert ratios.quick_ratio == pytest.approx(2.0)
        assert ratios.cash_ratio == pytest.approx(0.6)
        assert ratios.gross_profit_margin == pytest.approx(0.4)
        assert ratios.operating_margin == pytest.approx(25000 / 150000)
        assert ratios.net_profit_margin == pytest.approx(0.1333, abs=1e-4)
        assert ratios.roa == pytest.approx(0.1)
        assert ratios.roe == pytest.approx(0.2)
        assert ratios.debt_to_assets == pytest.approx(0.5)
        assert ratios.debt_to_equity == pytest.approx(1.0)
        assert ratios.interest_coverage == pytest.approx(5.0)
        assert ratios.asset_turnover == pytest.approx(0.75)
        assert ratios.indeterminate() == []

    def test_quick_ratio_subtracts_inventory(self):
        statement = FinancialStatement(
            year=2023,
            balance_sheet={
                "current_assets": {"inventory": 40000, "total_current_assets": 100000},
                "current_liabilities": {"total_current_liabilities": 50000},
            },
        )
        ratios = calculate_ratios(statement)
        assert ratios.current_ratio == pytest.approx(2.0)
        assert ratios.quick_ratio == pytest.approx(1.2)

    def test_zero_current_liabilities(self):
        """Test that zero liabilities give infinity instead of raising."""
        statement = FinancialStatement(
            year=2023,
            balance_sheet={"current_assets": {"total_current_assets": 100000}},
        )
        ratios = calculate_ratios(statement)
        assert ratios.current_ratio == math.inf
        assert ratios.quick_ratio == math.inf
        assert math.isnan(ratios.cash_ratio)
        assert ratios.is_indeterminate("current_ratio")

    def test_empty_statement_is_fully_indeterminate(self):
        """Test that every ratio of an all-zero statement is NaN."""
        ratios = calculate_ratios(FinancialStatement(year=2020))
        assert sorted(ratios.indeterminate()) == sorted(RatioSet.ratio_names())
        assert all(math.isnan(v) for v in ratios.as_dict().values())

    def test_loss_over_zero_equity(self):
        statement = FinancialStatement(
            year=2023,
            balance_sheet={"total_assets": 50000, "total_liabilities": 50000},
            income_statement={"revenue": 10000, "net_income": -5000},
        )
        ratios = calculate_ratios(statement)
        assert ratios.roe == -math.inf
        assert ratios.debt_to_equity == math.inf
        assert ratios.roa == pytest.approx(-0.1)

    def test_calculation_is_pure(self):
        """Test that repeated calls give identical output."""
        statement = FinancialStatement(
            year=2023,
            balance_sheet={"current_assets": {"total_current_assets": 100000}},
            income_statement={"revenue": 500},
        )
        first = calculate_ratios(statement).as_dict()
        second = calculate_ratios(statement).as_dict()
        assert first.keys() == second.keys()
        assert all(same_value(first[k], second[k]) for k in first)
        assert calculate_ratios(example_statement()) == calculate_ratios(example_statement())


class TestRatioSet:
    """Tests for ratio set helpers."""

    def test_ratio_names(self):
        names = RatioSet.ratio_names()
        assert len(names) == 12
        assert "year" not in names
        categorized = [name for group in RATIO_CATEGORIES.values() for name in group]
        assert sorted(categorized) == sorted(names)

    def test_format_finite_and_indeterminate(self):
        ratios = calculate_ratios(FinancialStatement(
            year=2023,
            balance_sheet={"current_assets": {"total_current_assets": 100000}},
        ))
        assert ratios.format("current_ratio") == "N/A"
        assert ratios.format("current_ratio", na="-") == "-"

        ratios = calculate_ratios(example_statement())
        assert ratios.format("net_profit_margin") == "0.13"
        assert ratios.format("net_profit_margin", decimals=4) == "0.1333"

    def test_camel_case_dump(self):
        dumped = calculate_ratios(example_statement()).model_dump(by_alias=True)
        assert dumped["currentRatio"] == pytest.approx(2.0)
        assert dumped["debtToEquity"] == pytest.approx(1.0)
        assert dumped["roa"] == pytest.approx(0.1)


class TestInterpretation:
    """Tests for ratio band classification."""

    def test_bands(self):
        assert interpret_ratio("current_ratio", 3.0) == "excellent"
        assert interpret_ratio("current_ratio", 2.0) == "good"
        assert interpret_ratio("current_ratio", 1.2) == "average"
        assert interpret_ratio("current_ratio", 0.5) == "poor"
        assert interpret_ratio("debt_to_equity", 0.1) == "low"
        assert interpret_ratio("debt_to_equity", 2.0) == "very_high"

    def test_first_matching_band_wins_on_boundary(self):
        assert interpret_ratio("current_ratio", 2.5) == "excellent"
        assert interpret_ratio("debt_to_assets", 0.5) == "moderate"

    def test_indeterminate_values(self):
        assert interpret_ratio("current_ratio", math.inf) == "insufficient_data"
        assert interpret_ratio("current_ratio", math.nan) == "insufficient_data"

    def test_unknown_ratio_is_unclassified(self):
        assert interpret_ratio("price_to_book", 1.0) == "unclassified"

    def test_interpret_ratios(self):
        result = interpret_ratios(calculate_ratios(example_statement()))
        assert set(result) == set(RatioSet.ratio_names())
        assert result["current_ratio"] == "good"
        assert result["cash_ratio"] == "excellent"
        assert result["interest_coverage"] == "good"
        assert result["asset_turnover"] == "poor"


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("FINSTORE_NA_DISPLAY", raising=False)
        settings = Settings(_env_file=None)
        assert settings.na_display == "N/A"
        assert settings.ratio_decimals == 2

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("FINSTORE_NA_DISPLAY", "n/a")
        monkeypatch.setenv("FINSTORE_RATIO_DECIMALS", "3")
        settings = Settings(_env_file=None)
        assert settings.na_display == "n/a"
        assert settings.ratio_decimals == 3
