import threading
from collections import Counter
from typing import Any, Callable, Iterable, Iterator, List, Optional

from models import Transaction, TransactionId, parse_date

DEBIT = "debit"
CREDIT = "credit"
EQUAL = "equal"


class TransactionQueryEngine:
    """Filter and aggregate an in-memory, insertion-ordered list of transactions.

    The engine owns a private copy of the records it was built from. The only
    mutation is append(); every read returns a new value computed from a
    snapshot of frozen records, so callers can never change engine state
    through a result.
    """

    def __init__(self, transactions: Iterable[Transaction] = ()):
        self._transactions: List[Transaction] = list(transactions)
        self._lock = threading.Lock()

    def _snapshot(self) -> List[Transaction]:
        with self._lock:
            return list(self._transactions)

    def _filter(self, predicate: Callable[[Transaction], bool]) -> List[Transaction]:
        return [t for t in self._snapshot() if predicate(t)]

    @staticmethod
    def _sum(transactions: Iterable[Transaction]) -> float:
        return sum((t.amount for t in transactions), 0.0)

    @staticmethod
    def _busiest_month(transactions: Iterable[Transaction]) -> Optional[int]:
        """Month (1-12) with the most transactions; ties go to the lowest month"""
        month_counts = Counter(t.date.month for t in transactions)
        if not month_counts:
            return None
        return min(month_counts, key=lambda month: (-month_counts[month], month))

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._snapshot())

    def append(self, transaction: Transaction) -> None:
        """Add a transaction to the end of the ledger"""
        with self._lock:
            self._transactions.append(transaction)

    def all_transactions(self) -> List[Transaction]:
        """Snapshot of every transaction in insertion order"""
        return self._snapshot()

    def unique_types(self) -> List[str]:
        """Distinct transaction types in first-seen order"""
        return list(dict.fromkeys(t.type for t in self._snapshot()))

    def total_amount(self) -> float:
        return self._sum(self._snapshot())

    def total_amount_on_date(self, year: Optional[int] = None, month: Optional[int] = None,
                             day: Optional[int] = None) -> float:
        """
        Sum amounts of transactions matching every supplied date component.

        None means "any"; month is 1-12. A zero is compared like any other
        value, so it matches nothing rather than acting as a wildcard.
        """
        def matches(t: Transaction) -> bool:
            return ((year is None or t.date.year == year) and
                    (month is None or t.date.month == month) and
                    (day is None or t.date.day == day))

        return self._sum(self._filter(matches))

    def by_type(self, type_: str) -> List[Transaction]:
        return self._filter(lambda t: t.type == type_)

    def in_date_range(self, start: Any, end: Any) -> List[Transaction]:
        """Transactions dated within [start, end], both ends inclusive"""
        start_date = parse_date(start)
        end_date = parse_date(end)
        return self._filter(lambda t: start_date <= t.date <= end_date)

    def by_merchant(self, name: str) -> List[Transaction]:
        return self._filter(lambda t: t.merchant == name)

    def average_amount(self) -> float:
        transactions = self._snapshot()
        if not transactions:
            return 0.0
        return self._sum(transactions) / len(transactions)

    def by_amount_range(self, min_amount: float, max_amount: float) -> List[Transaction]:
        """Transactions with min_amount <= amount <= max_amount"""
        return self._filter(lambda t: min_amount <= t.amount <= max_amount)

    def total_debit_amount(self) -> float:
        return self._sum(self.by_type(DEBIT))

    def month_with_most_transactions(self) -> Optional[int]:
        return self._busiest_month(self._snapshot())

    def month_with_most_debit_transactions(self) -> Optional[int]:
        return self._busiest_month(self.by_type(DEBIT))

    def dominant_transaction_type(self) -> str:
        """Which of debit or credit occurs more often, or EQUAL on a tie"""
        type_counts = Counter(t.type for t in self._snapshot())
        debits, credits = type_counts[DEBIT], type_counts[CREDIT]
        if debits > credits:
            return DEBIT
        if debits < credits:
            return CREDIT
        return EQUAL

    def before(self, date: Any) -> List[Transaction]:
        """Transactions dated strictly earlier than date"""
        target_date = parse_date(date)
        return self._filter(lambda t: t.date < target_date)

    def find_by_id(self, id_: TransactionId) -> Optional[Transaction]:
        """First transaction with exactly this id, or None"""
        for t in self._snapshot():
            if t.id == id_:
                return t
        return None

    def descriptions(self) -> List[str]:
        return [t.description for t in self._snapshot()]
