"""Export the ratio table of an uploaded statement file to CSV or Excel."""

from __future__ import annotations

import argparse
from pathlib import Path

from finstore.config import configure_logging
from finstore.core import FinancialRecordStore
from finstore.models import Company, DataSource
from finstore.parsers import StatementParser
from finstore.reporting import export_ratios_to_excel, format_ratio_table, ratio_table


def main() -> int:
    parser = argparse.ArgumentParser(description="Compute yearly financial ratios from a statement table.")
    parser.add_argument("statements", help="CSV/XLSX file with year, field, value columns")
    parser.add_argument("--company", default="Unnamed company", help="Company name for the report")
    parser.add_argument("--start-year", type=int, default=None, help="First year, inclusive")
    parser.add_argument("--end-year", type=int, default=None, help="Last year, inclusive")
    parser.add_argument(
        "--out",
        default=None,
        help="Output path (.csv or .xlsx, default: ratios/<input stem>_ratios.csv)",
    )
    args = parser.parse_args()

    configure_logging()

    try:
        statement_parser = StatementParser(Path(args.statements))
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(str(exc))

    issues = statement_parser.validate_integrity()
    if issues["missing_values"]:
        raise SystemExit("; ".join(issues["missing_values"]))
    for message in issues["invalid_values"] + issues["warnings"]:
        print(f"warning: {message}")

    company = Company(
        user_id="cli",
        company_name=args.company,
        sector="unspecified",
        activity="unspecified",
        legal_entity="unspecified",
        data_source=DataSource.UPLOAD,
        financial_statements=statement_parser.build_statements(),
    )
    store = FinancialRecordStore(company)

    years = store.years()
    if not years:
        raise SystemExit(f"No statements parsed from {args.statements}")
    start_year = args.start_year if args.start_year is not None else years[0]
    end_year = args.end_year if args.end_year is not None else years[-1]

    out_path = (
        Path(args.out) if args.out else Path("ratios") / f"{Path(args.statements).stem}_ratios.csv"
    )
    if out_path.suffix.lower() == ".xlsx":
        export_ratios_to_excel(store, out_path, start_year, end_year)
    else:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        format_ratio_table(ratio_table(store, start_year, end_year)).to_csv(out_path)

    print(f"Exported ratios for {start_year}-{end_year} to {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
