import csv
import json
from pathlib import Path
from typing import Any, Iterable, List

from models import Transaction


class TransactionLoader:
    """Builds the initial transaction list from a JSON or CSV ledger file"""

    def __init__(self, strict: bool = True):
        self.strict = strict

    def _parse_records(self, records: Iterable[Any], source: str) -> List[Transaction]:
        transactions = []

        for position, record in enumerate(records, start=1):
            try:
                transactions.append(Transaction.from_dict(record))
            except ValueError as e:
                if self.strict:
                    raise ValueError(f"{source}: invalid record #{position}: {e}") from e
                print(f"  Warning: Skipping invalid record #{position}: {record} - {e}")

        return transactions

    def load_json(self, path: Path) -> List[Transaction]:
        """
        Load a JSON ledger. The document is either an array of records or an
        object holding that array under "transactions".
        """
        print(f"Loading {path.name}...")

        with open(path, 'r', encoding='utf-8') as f:
            document = json.load(f)

        if isinstance(document, dict) and 'transactions' in document:
            document = document['transactions']
        if not isinstance(document, list):
            raise ValueError(f"{path.name}: expected a list of transactions")

        transactions = self._parse_records(document, path.name)
        print(f"  Found {len(transactions)} transactions")
        return transactions

    def load_csv(self, path: Path) -> List[Transaction]:
        """Load a CSV ledger with a header row"""
        print(f"Loading {path.name}...")

        with open(path, 'r', encoding='utf-8', newline='') as f:
            reader = csv.DictReader(f)
            # Blank cells count as missing fields
            rows = [{key: value.strip() for key, value in row.items() if key and value and value.strip()}
                    for row in reader]

        transactions = self._parse_records(rows, path.name)
        print(f"  Found {len(transactions)} transactions")
        return transactions

    def load(self, path: Path) -> List[Transaction]:
        """Load a ledger file, choosing the format from its suffix"""
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix == '.json':
            return self.load_json(path)
        if suffix == '.csv':
            return self.load_csv(path)

        raise ValueError(f"Unsupported ledger format: {path.name}")
