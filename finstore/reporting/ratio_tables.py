"""Multi-year ratio tables built from per-year ratio sets."""

import logging
import math
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from finstore.config import get_settings
from finstore.core import FinancialRecordStore, RatioSet, interpret_ratios

logger = logging.getLogger(__name__)


def ratio_table(store: FinancialRecordStore, start_year: int, end_year: int) -> pd.DataFrame:
    """
    Build a table of ratios for a range of years.

    Args:
        store: Record store for one company
        start_year: First year, inclusive
        end_year: Last year, inclusive

    Returns:
        DataFrame indexed by year with one column per ratio; indeterminate
        ratios stay as inf/NaN
    """
    rows = []
    for statement in store.get_statement_range(start_year, end_year):
        ratios = store.calculate_ratios(statement.year)
        rows.append({"year": statement.year, **ratios.as_dict()})

    if not rows:
        return pd.DataFrame(columns=RatioSet.ratio_names(), index=pd.Index([], name="year"))
    return pd.DataFrame(rows).set_index("year")


def interpretation_table(store: FinancialRecordStore, start_year: int, end_year: int) -> pd.DataFrame:
    rows = []
    for statement in store.get_statement_range(start_year, end_year):
        ratios = store.calculate_ratios(statement.year)
        rows.append({"year": statement.year, **interpret_ratios(ratios)})

    if not rows:
        return pd.DataFrame(columns=RatioSet.ratio_names(), index=pd.Index([], name="year"))
    return pd.DataFrame(rows).set_index("year")


def format_ratio_table(
    table: pd.DataFrame, decimals: Optional[int] = None, na: Optional[str] = None
) -> pd.DataFrame:
    """Render a ratio table as strings, showing non-finite values as N/A."""
    settings = get_settings()
    places = settings.ratio_decimals if decimals is None else decimals
    na_text = settings.na_display if na is None else na

    def render(value) -> str:
        if value is None or not math.isfinite(value):
            return na_text
        return f"{value:.{places}f}"

    return table.apply(lambda column: column.map(render))


def export_ratios_to_excel(
    store: FinancialRecordStore,
    output_path: Union[Path, str],
    start_year: Optional[int] = None,
    end_year: Optional[int] = None,
) -> Path:
    """
    Write ratio and interpretation sheets for a company to an Excel workbook.

    Args:
        store: Record store for one company
        output_path: Destination .xlsx path
        start_year: First year (defaults to the earliest stored year)
        end_year: Last year (defaults to the latest stored year)

    Returns:
        Path of the written workbook
    """
    years = store.years()
    if start_year is None:
        start_year = years[0] if years else 0
    if end_year is None:
        end_year = years[-1] if years else 0

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    ratios = format_ratio_table(ratio_table(store, start_year, end_year))
    interpretations = interpretation_table(store, start_year, end_year)

    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        ratios.to_excel(writer, sheet_name="Ratios")
        interpretations.to_excel(writer, sheet_name="Interpretation")

    logger.info(
        "Exported %d year(s) of ratios for %s to %s",
        len(ratios),
        store.company.company_name,
        output_path,
    )
    return output_path
