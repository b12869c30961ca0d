"""Per-company record store: lookups by year and ratio derivation."""

import logging
from typing import Dict, List, Optional

from finstore.models import BudgetEntry, Company, FinancialStatement
from finstore.core.ratios import RatioSet, calculate_ratios
from finstore.core.validation import validate_statement

logger = logging.getLogger(__name__)


class FinancialRecordStore:
    """
    Query and derivation layer over one company's statements.

    Every call reads the company's current statement list; nothing is cached,
    so mutations made through the aggregate are visible immediately.
    """

    def __init__(self, company: Company):
        """
        Initialize the store over a loaded company aggregate.

        Args:
            company: Company whose statements, budgets and preferences are served
        """
        self.company = company

    @property
    def statements(self) -> List[FinancialStatement]:
        return self.company.financial_statements

    def get_statement(self, year: int) -> Optional[FinancialStatement]:
        """
        Get the statement for a fiscal year.

        Args:
            year: Fiscal year

        Returns:
            FinancialStatement or None when the year has no statement
        """
        for statement in self.statements:
            if statement.year == year:
                return statement
        logger.debug("No statement for %s in %s", year, self.company.company_name)
        return None

    def get_statement_range(self, start_year: int, end_year: int) -> List[FinancialStatement]:
        """
        Get statements with start_year <= year <= end_year.

        Args:
            start_year: First year, inclusive
            end_year: Last year, inclusive

        Returns:
            Statements ordered by ascending year; empty if start_year > end_year
        """
        matches = [s for s in self.statements if start_year <= s.year <= end_year]
        return sorted(matches, key=lambda s: s.year)

    def latest_year(self) -> Optional[int]:
        if not self.statements:
            return None
        return max(s.year for s in self.statements)

    def years(self) -> List[int]:
        return sorted(s.year for s in self.statements)

    def calculate_ratios(self, year: int) -> Optional[RatioSet]:
        """
        Derive the ratio set for a fiscal year.

        Args:
            year: Fiscal year

        Returns:
            RatioSet or None when the year has no statement
        """
        statement = self.get_statement(year)
        if statement is None:
            return None
        return calculate_ratios(statement)

    def analysis_window(self) -> List[FinancialStatement]:
        """
        Get the statements covered by the company's years_to_analyze preference.

        Returns:
            Up to years_to_analyze statements ending at the latest year
        """
        latest = self.latest_year()
        if latest is None:
            return []
        span = self.company.analysis_preferences.years_to_analyze
        return self.get_statement_range(latest - span + 1, latest)

    def upsert_statement(self, statement: FinancialStatement) -> Optional[FinancialStatement]:
        """
        Add a statement, replacing any existing statement for the same year.

        Args:
            statement: Statement to store

        Returns:
            The replaced statement, or None if the year was new
        """
        statements = self.statements
        replaced = None
        for i, existing in enumerate(statements):
            if existing.year == statement.year:
                replaced = existing
                statements[i] = statement
                break
        else:
            statements.append(statement)

        self.company.touch()
        logger.info(
            "%s statement %s for %s",
            "Replaced" if replaced is not None else "Added",
            statement.year,
            self.company.company_name,
        )
        return replaced

    def remove_statement(self, year: int) -> Optional[FinancialStatement]:
        statement = self.get_statement(year)
        if statement is None:
            return None
        self.statements.remove(statement)
        self.company.touch()
        logger.info("Removed statement %s for %s", year, self.company.company_name)
        return statement

    def get_budget(self, year: int) -> Optional[BudgetEntry]:
        for entry in self.company.budgets:
            if entry.year == year:
                return entry
        return None

    def upsert_budget(self, entry: BudgetEntry) -> Optional[BudgetEntry]:
        """
        Add a budget entry, replacing any entry for the same year.

        Args:
            entry: Budget entry to store

        Returns:
            The replaced entry, or None if the year was new
        """
        budgets = self.company.budgets
        replaced = None
        for i, existing in enumerate(budgets):
            if existing.year == entry.year:
                replaced = existing
                budgets[i] = entry
                break
        else:
            budgets.append(entry)

        self.company.touch()
        logger.info("Stored budget %s for %s", entry.year, self.company.company_name)
        return replaced

    def deactivate(self) -> None:
        """Soft-retire the company; its records stay readable."""
        self.company.is_active = False
        self.company.touch()
        logger.info("Deactivated %s", self.company.company_name)

    def validate(self, tolerance: Optional[float] = None) -> Dict[str, object]:
        """
        Reconcile accounting identities for every stored year.

        Args:
            tolerance: Allowed absolute difference per check

        Returns:
            Dictionary with per-year reports and a summary
        """
        reports = {
            s.year: validate_statement(s, tolerance=tolerance)
            for s in sorted(self.statements, key=lambda s: s.year)
        }
        status_counts = {"pass": 0, "warn": 0, "fail": 0}
        for report in reports.values():
            status_counts[report["status"]] += 1

        if status_counts["fail"]:
            status = "fail"
        elif status_counts["warn"]:
            status = "warn"
        else:
            status = "pass"

        return {
            "company": self.company.company_name,
            "years": reports,
            "summary": {
                "count": len(reports),
                "status_counts": status_counts,
                "status": status,
            },
        }
