from typing import List, Optional

from models import Transaction
from query_engine import TransactionQueryEngine


class TransactionReport:
    """Run every ledger query once and print the results"""

    def __init__(self, engine: TransactionQueryEngine):
        self.engine = engine

    @staticmethod
    def print_transactions(transactions: List[Transaction], title: str):
        """Print a transaction table followed by its total"""

        print("\n" + "-" * 120)
        print(title)
        print("-" * 120)

        if not transactions:
            print("(none)")
            return

        print(f"{'Date':<10} | {'ID':6} | {'Type':6} | {'Amount':>9} | {'Merchant':20} | Description")
        for t in transactions:
            print(t)

        print(f"Total: ${sum(t.amount for t in transactions):,.2f} ({len(transactions)} transactions)")

    @staticmethod
    def print_value(label: str, value):
        print(f"{label:40} {value}")

    def print_report(self, date_range=("2010-01-01", "2023-12-31"), merchant: str = "OnlineShop",
                     amount_range=(50, 100), before_date="2019-06-01", transaction_id="1",
                     transaction_type: str = "debit", year: Optional[int] = None,
                     month: Optional[int] = None, day: Optional[int] = None):
        """Print the full ledger report"""
        engine = self.engine

        print("\n" + "=" * 120)
        print("TRANSACTION REPORT")
        print("=" * 120)

        self.print_transactions(engine.all_transactions(), "ALL TRANSACTIONS")

        print("\n" + "-" * 120)
        print("SUMMARY")
        print("-" * 120)
        self.print_value("Unique Transaction Types:", ", ".join(engine.unique_types()) or "(none)")
        self.print_value("Total Amount:", f"${engine.total_amount():,.2f}")
        self.print_value("Average Transaction Amount:", f"${engine.average_amount():,.2f}")
        self.print_value("Total Debit Amount:", f"${engine.total_debit_amount():,.2f}")
        if year is not None or month is not None or day is not None:
            pattern = "-".join('*' if part is None else str(part) for part in (year, month, day))
            self.print_value(f"Total Amount On {pattern}:",
                             f"${engine.total_amount_on_date(year, month, day):,.2f}")
        self.print_value("Month With Most Transactions:", engine.month_with_most_transactions() or "n/a")
        self.print_value("Month With Most Debit Transactions:",
                         engine.month_with_most_debit_transactions() or "n/a")
        self.print_value("Most Transaction Types:", engine.dominant_transaction_type())

        self.print_transactions(engine.by_type(transaction_type),
                                f"TRANSACTIONS BY TYPE ({transaction_type})")
        self.print_transactions(engine.in_date_range(*date_range),
                                f"TRANSACTIONS IN DATE RANGE ({date_range[0]} to {date_range[1]})")
        self.print_transactions(engine.by_merchant(merchant), f"TRANSACTIONS BY MERCHANT ({merchant})")
        self.print_transactions(engine.by_amount_range(*amount_range),
                                f"TRANSACTIONS BY AMOUNT RANGE ({amount_range[0]}-{amount_range[1]})")
        self.print_transactions(engine.before(before_date), f"TRANSACTIONS BEFORE DATE ({before_date})")

        print("\n" + "-" * 120)
        print(f"TRANSACTION BY ID ({transaction_id})")
        print("-" * 120)
        found = engine.find_by_id(transaction_id)
        print(found if found is not None else "Not found")

        print("\n" + "-" * 120)
        print("TRANSACTION DESCRIPTIONS")
        print("-" * 120)
        for description in engine.descriptions():
            print(description)

        print("\n" + "=" * 120)
