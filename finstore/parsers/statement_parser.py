"""Parser for uploaded statement tables (long format: year, field, value)."""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd
from pydantic.alias_generators import to_snake

from finstore.models import FinancialStatement, statement_field_paths
from finstore.parsers.numbers import parse_number

logger = logging.getLogger(__name__)


class StatementParser:
    """
    Parses uploaded statement tables into FinancialStatement models.

    Each row carries one figure: the fiscal year, a dotted field path such as
    ``balance_sheet.current_assets.cash`` (camelCase segments are accepted),
    and the reported value.
    """

    REQUIRED_FIELDS = ["year", "field", "value"]
    SUPPORTED_SUFFIXES = {".csv", ".xlsx"}

    def __init__(self, source: Union[Path, str, pd.DataFrame]):
        """
        Initialize parser with a file path or an already loaded table.

        Args:
            source: Path to a .csv/.xlsx file, or a DataFrame
        """
        self.file_path = None if isinstance(source, pd.DataFrame) else Path(source)
        self.raw = source.copy() if isinstance(source, pd.DataFrame) else None
        self.data = None
        self.known_paths = statement_field_paths()
        self._parse()

    def _read(self) -> pd.DataFrame:
        if self.raw is not None:
            return self.raw
        if not self.file_path.exists():
            raise FileNotFoundError(f"Statement file not found: {self.file_path}")
        suffix = self.file_path.suffix.lower()
        if suffix not in self.SUPPORTED_SUFFIXES:
            raise ValueError(f"Unsupported statement file type: {suffix}")
        if suffix == ".csv":
            return pd.read_csv(self.file_path, dtype=str, keep_default_na=False)
        return pd.read_excel(self.file_path, dtype=str, engine="openpyxl")

    def _parse(self):
        """Load the table and normalize its columns."""
        data = self._read()
        data.columns = [str(c).strip().lower() for c in data.columns]

        missing = [c for c in self.REQUIRED_FIELDS if c not in data.columns]
        if missing:
            # keep what was read so validate_integrity can report it
            self.data = data
            return

        years = pd.to_numeric(data["year"], errors="coerce").astype("float64")
        # non-whole years are invalid
        data["year"] = years.where(years.mod(1) == 0).astype("Int64")
        data["path"] = data["field"].map(self.normalize_path)
        data["amount"] = data["value"].map(parse_number)
        self.data = data

    @staticmethod
    def normalize_path(field) -> str:
        """
        Convert a field path to its snake_case form.

        Args:
            field: Dotted path, snake_case or camelCase

        Returns:
            Normalized dotted path
        """
        if field is None or pd.isna(field):
            return ""
        return ".".join(to_snake(part.strip()) for part in str(field).split(".") if part.strip())

    def _usable_rows(self) -> pd.DataFrame:
        if "path" not in self.data.columns:
            return self.data.iloc[0:0]
        rows = self.data[self.data["year"].notna() & self.data["amount"].notna()]
        rows = rows[rows["path"].isin(self.known_paths)]
        return rows.drop_duplicates(["year", "path"], keep="last")

    def get_years(self) -> List[int]:
        """
        Get the fiscal years that have at least one usable row.

        Returns:
            Sorted list of years
        """
        rows = self._usable_rows()
        if rows.empty:
            return []
        return sorted(int(y) for y in rows["year"].dropna().unique())

    def get_rows_by_year(self, year: int) -> pd.DataFrame:
        if "year" not in self.data.columns:
            return self.data.iloc[0:0].copy()
        return self.data[(self.data["year"] == year).fillna(False)].copy()

    def build_statement(self, year: int) -> Optional[FinancialStatement]:
        """
        Build the statement for one year.

        Args:
            year: Fiscal year

        Returns:
            FinancialStatement or None if the table has no usable rows for the year
        """
        year_rows = self.get_rows_by_year(year)
        if year_rows.empty or "path" not in year_rows.columns:
            return None

        unknown = sorted(set(year_rows["path"]) - self.known_paths)
        if unknown:
            logger.warning("Skipping unknown fields for %s: %s", year, ", ".join(unknown))

        rows = self._usable_rows()
        rows = rows[(rows["year"] == year).fillna(False)]
        if rows.empty:
            return None

        nested: Dict[str, object] = {"year": year}
        for path, amount in zip(rows["path"], rows["amount"]):
            node = nested
            *parents, leaf = path.split(".")
            for part in parents:
                node = node.setdefault(part, {})
            node[leaf] = amount

        return FinancialStatement.model_validate(nested)

    def build_statements(self) -> List[FinancialStatement]:
        statements = []
        for year in self.get_years():
            statement = self.build_statement(year)
            if statement is not None:
                statements.append(statement)
        logger.info("Parsed %d statement(s) from %s", len(statements), self.file_path or "DataFrame")
        return statements

    def validate_integrity(self) -> Dict[str, List[str]]:
        """
        Validate the table and report issues.

        Returns:
            Dictionary with validation results
        """
        issues = {
            "missing_values": [],
            "invalid_values": [],
            "warnings": [],
        }

        for field in self.REQUIRED_FIELDS:
            if field not in self.data.columns:
                issues["missing_values"].append(f"Missing required field: {field}")
        if issues["missing_values"]:
            return issues

        bad_years = int(self.data["year"].isna().sum())
        if bad_years:
            issues["invalid_values"].append(f"Found {bad_years} rows with an invalid year")

        bad_values = int(self.data["amount"].isna().sum())
        if bad_values:
            issues["invalid_values"].append(f"Found {bad_values} rows with an unparseable value")

        unknown = sorted(set(self.data["path"]) - self.known_paths)
        for path in unknown:
            issues["warnings"].append(f"Unknown field path: {path or '<blank>'}")

        duplicated = self.data.duplicated(["year", "path"], keep=False)
        if duplicated.any():
            issues["warnings"].append(
                f"Found {int(duplicated.sum())} rows sharing a year and field; the last one wins"
            )

        return issues
