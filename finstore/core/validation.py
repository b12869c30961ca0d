"""Accounting identity checks for yearly statements."""

import logging
from typing import Dict, List, Optional

from finstore.config import get_settings
from finstore.models import FinancialStatement, StatementSection

logger = logging.getLogger(__name__)


def _check(name: str, expected: float, actual: float, tolerance: float, headline: bool) -> Dict[str, object]:
    difference = actual - expected
    return {
        "name": name,
        "expected": expected,
        "actual": actual,
        "difference": difference,
        "passed": abs(difference) <= tolerance,
        "headline": headline,
    }


def _section_check(name: str, section: StatementSection, tolerance: float) -> Optional[Dict[str, object]]:
    """Compare a section total to its line items; skip sections with nothing reported."""
    items = section.line_items()
    total = section.total()
    if total == 0 and not any(items.values()):
        return None
    return _check(name, section.line_item_sum(), total, tolerance, headline=False)


def validate_statement(statement: FinancialStatement, tolerance: Optional[float] = None) -> Dict[str, object]:
    """
    Reconcile the accounting identities of one statement.

    Args:
        statement: Statement to check
        tolerance: Allowed absolute difference (defaults to settings.identity_tolerance)

    Returns:
        Dictionary with year, per-check results and a pass/warn/fail status
    """
    if tolerance is None:
        tolerance = get_settings().identity_tolerance

    bs = statement.balance_sheet
    inc = statement.income_statement
    cf = statement.cash_flow_statement

    checks: List[Dict[str, object]] = [
        _check(
            "total_assets = current + non_current",
            bs.current_assets.total_current_assets + bs.non_current_assets.total_non_current_assets,
            bs.total_assets,
            tolerance,
            headline=True,
        ),
        _check(
            "total_assets = total_liabilities + total_equity",
            bs.total_liabilities + bs.shareholders_equity.total_equity,
            bs.total_assets,
            tolerance,
            headline=True,
        ),
        _check(
            "total_liabilities = current + non_current",
            bs.current_liabilities.total_current_liabilities
            + bs.non_current_liabilities.total_non_current_liabilities,
            bs.total_liabilities,
            tolerance,
            headline=True,
        ),
        _check(
            "gross_profit = revenue - cost_of_goods_sold",
            inc.revenue - inc.cost_of_goods_sold,
            inc.gross_profit,
            tolerance,
            headline=True,
        ),
        _check(
            "net_cash_flow = operating + investing + financing",
            cf.operating_cash_flow.total_operating_cash_flow
            + cf.investing_cash_flow.total_investing_cash_flow
            + cf.financing_cash_flow.total_financing_cash_flow,
            cf.net_cash_flow,
            tolerance,
            headline=True,
        ),
        _check(
            "ending_cash = beginning_cash + net_cash_flow",
            cf.beginning_cash + cf.net_cash_flow,
            cf.ending_cash,
            tolerance,
            headline=True,
        ),
    ]

    sections = {
        "current_assets": bs.current_assets,
        "non_current_assets": bs.non_current_assets,
        "current_liabilities": bs.current_liabilities,
        "non_current_liabilities": bs.non_current_liabilities,
        "shareholders_equity": bs.shareholders_equity,
        "operating_expenses": inc.operating_expenses,
        "operating_cash_flow": cf.operating_cash_flow,
        "investing_cash_flow": cf.investing_cash_flow,
        "financing_cash_flow": cf.financing_cash_flow,
    }
    for name, section in sections.items():
        check = _section_check(f"{name} total = sum of line items", section, tolerance)
        if check is not None:
            checks.append(check)

    failed = [c for c in checks if not c["passed"]]
    if any(c["headline"] for c in failed):
        status = "fail"
    elif failed:
        status = "warn"
    else:
        status = "pass"

    if failed:
        logger.warning(
            "Statement %s: %d identity check(s) failed: %s",
            statement.year,
            len(failed),
            ", ".join(str(c["name"]) for c in failed),
        )

    return {
        "year": statement.year,
        "checks": checks,
        "failed": [c["name"] for c in failed],
        "status": status,
    }
