"""
Shared fixtures for the transaction query tests.
"""

import pytest

from models import Transaction
from query_engine import TransactionQueryEngine


@pytest.fixture
def sample_records():
    """Raw records in the short-key form."""
    return [
        {"id": 1, "type": "debit", "amount": "50.00", "date": "2021-03-01",
         "merchant": "A", "description": "Groceries"},
        {"id": 2, "type": "credit", "amount": "30.00", "date": "2021-03-15",
         "merchant": "B", "description": "Refund"},
        {"id": 3, "type": "debit", "amount": "20.00", "date": "2021-04-01",
         "merchant": "A", "description": "Coffee"},
    ]


@pytest.fixture
def sample_transactions(sample_records):
    """Parsed transactions for the three sample records."""
    return [Transaction.from_dict(record) for record in sample_records]


@pytest.fixture
def engine(sample_transactions):
    """Engine built from the sample transactions."""
    return TransactionQueryEngine(sample_transactions)


@pytest.fixture
def make_transaction():
    """Factory for transactions with sensible defaults."""
    def _make(id=1, type="debit", amount="10.00", date="2021-01-01", merchant="M", description=""):
        return Transaction.from_dict({
            "id": id, "type": type, "amount": amount, "date": date,
            "merchant": merchant, "description": description,
        })
    return _make
