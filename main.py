#!/usr/bin/env python3
"""
Transaction Report
Loads a transaction ledger and prints every query the query engine supports.
"""

import os
import sys
from pathlib import Path
from dotenv import load_dotenv

from loader import TransactionLoader
from query_engine import TransactionQueryEngine
from report import TransactionReport


def is_strict(value: str) -> bool:
    return value.strip().lower() not in ('false', '0', 'no', 'off')


def main():
    # Load environment variables
    load_dotenv()

    # Configuration
    ledger_path = Path(os.getenv('TRANSACTIONS_FILE', 'transactions.json'))
    strict = is_strict(os.getenv('STRICT_LOADING', 'true'))

    if not ledger_path.exists():
        print(f"Error: Transactions file '{ledger_path}' not found")
        sys.exit(1)

    loader = TransactionLoader(strict=strict)
    try:
        transactions = loader.load(ledger_path)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        print(f"Error: {e}")
        sys.exit(1)

    engine = TransactionQueryEngine(transactions)
    TransactionReport(engine).print_report()

    return 0


if __name__ == "__main__":
    sys.exit(main())
