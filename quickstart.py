"""Quick start script to try the record store."""

from finstore.core import FinancialRecordStore, interpret_ratios
from finstore.models import Company, FinancialStatement

statements = [
    FinancialStatement.model_validate({
        "year": year,
        "balanceSheet": {
            "currentAssets": {"cash": 30000 * scale, "totalCurrentAssets": 100000 * scale},
            "nonCurrentAssets": {"totalNonCurrentAssets": 100000 * scale},
            "totalAssets": 200000 * scale,
            "currentLiabilities": {"totalCurrentLiabilities": 50000 * scale},
            "nonCurrentLiabilities": {"totalNonCurrentLiabilities": 50000 * scale},
            "totalLiabilities": 100000 * scale,
            "shareholdersEquity": {"totalEquity": 100000 * scale},
        },
        "incomeStatement": {
            "revenue": 150000 * scale,
            "costOfGoodsSold": 90000 * scale,
            "grossProfit": 60000 * scale,
            "operatingIncome": 25000 * scale,
            "interestExpense": 5000 * scale,
            "netIncome": 20000 * scale,
        },
    })
    for year, scale in [(2021, 0.8), (2022, 0.9), (2023, 1.0)]
]

company = Company(
    user_id="demo-user",
    company_name="Demo Trading Co.",
    sector="Retail",
    activity="Wholesale",
    legal_entity="LLC",
    financial_statements=statements,
)
store = FinancialRecordStore(company)

latest = store.latest_year()
print(f"Company: {company.company_name} ({company.currency})")
print(f"Years on file: {store.years()}, latest: {latest}")

ratios = store.calculate_ratios(latest)
interpretation = interpret_ratios(ratios)
print(f"\n{'=' * 50}")
for name in ratios.ratio_names():
    print(f"{name:<22} {ratios.format(name):>10}  {interpretation[name]}")
print(f"{'=' * 50}")

print(f"\nMissing year lookup: {store.get_statement(1999)}")
print(f"Validation status: {store.validate()['summary']['status']}")

print("\nNext steps:")
print("1. Run 'python tools/export_ratio_table.py <statements.csv>' to export ratios")
print("2. Run 'pytest tests/' to run unit tests")
