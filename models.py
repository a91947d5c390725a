import math
import re
from dataclasses import dataclass
from datetime import date as date_type, datetime, timezone
from typing import Any, Dict, Union

TransactionId = Union[str, int]

# Accepted keys per field: short form first, then the original ledger document keys
FIELD_KEYS = {
    'id': ('id', 'transaction_id'),
    'type': ('type', 'transaction_type'),
    'amount': ('amount', 'transaction_amount'),
    'date': ('date', 'transaction_date'),
    'merchant': ('merchant', 'merchant_name'),
    'description': ('description', 'transaction_description'),
}

REQUIRED_FIELDS = ('id', 'type', 'amount', 'date')

FALLBACK_DATE_FORMATS = ('%m/%d/%Y', '%Y/%m/%d')

# Optional sign, optional $, optional sign, then the number
AMOUNT_PREFIX = re.compile(r"^\s*([+-])?\s*\$?\s*([+-])?(.*)$", re.DOTALL)


def parse_amount(value: Any) -> float:
    """
    Parse an amount that may be a number or text with a sign, $ and commas.
    Examples: 50, "50.00", "- $59.27", "+ $66.00", "$1,590.10", "$-45.00", "1e-3"

    One leading sign is allowed, before or after the currency symbol.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")

    if isinstance(value, (int, float)):
        amount = float(value)
    elif isinstance(value, str):
        match = AMOUNT_PREFIX.match(value)
        sign_before, sign_after, number = match.group(1), match.group(2), match.group(3)

        if sign_before and sign_after:
            raise ValueError(f"Amount has more than one sign: {value!r}")

        cleaned = number.replace(',', '').strip()
        if not cleaned:
            raise ValueError(f"Empty amount after cleaning: {value!r}")
        if cleaned[0] in '+-':
            raise ValueError(f"Amount has more than one sign: {value!r}")

        try:
            amount = float(cleaned)
        except ValueError:
            raise ValueError(f"Invalid amount: {value!r}") from None

        if (sign_before or sign_after) == '-':
            amount = -amount
    else:
        raise ValueError(f"Invalid amount: {value!r}")

    if not math.isfinite(amount):
        raise ValueError(f"Amount is not a finite number: {value!r}")

    return amount


def parse_date(value: Any) -> datetime:
    """
    Parse a point in time into a naive datetime.

    Accepts datetime and date objects, ISO 8601 text ("2021-03-01",
    "2021-03-01T10:15:00Z") and the formats in FALLBACK_DATE_FORMATS.
    Aware values are converted to UTC before the offset is dropped.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date_type):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        date_str = value.strip()
        if date_str.endswith('Z'):
            date_str = date_str[:-1] + '+00:00'
        try:
            parsed = datetime.fromisoformat(date_str)
        except ValueError:
            parsed = None
            for date_format in FALLBACK_DATE_FORMATS:
                try:
                    parsed = datetime.strptime(date_str, date_format)
                    break
                except ValueError:
                    continue
            if parsed is None:
                raise ValueError(f"Invalid date: {value!r}") from None
    else:
        raise ValueError(f"Invalid date: {value!r}")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)

    return parsed


def _lookup(record: Dict[str, Any], field: str):
    for key in FIELD_KEYS[field]:
        if key in record and record[key] is not None:
            return record[key]
    return None


@dataclass(frozen=True)
class Transaction:
    """Single ledger transaction with amount and date already parsed"""
    id: TransactionId
    type: str
    amount: float
    date: datetime
    merchant: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "Transaction":
        """Build a transaction from a raw record, parsing amount and date once"""
        if not isinstance(record, dict):
            raise ValueError(f"Transaction record must be an object, got {type(record).__name__}")

        missing = [field for field in REQUIRED_FIELDS if _lookup(record, field) is None]
        if missing:
            raise ValueError(f"Missing required field(s): {', '.join(missing)}")

        transaction_id = _lookup(record, 'id')
        if isinstance(transaction_id, bool) or not isinstance(transaction_id, (str, int)):
            raise ValueError(f"Invalid id: {transaction_id!r}")

        return cls(
            id=transaction_id,
            type=str(_lookup(record, 'type')),
            amount=parse_amount(_lookup(record, 'amount')),
            date=parse_date(_lookup(record, 'date')),
            merchant=str(_lookup(record, 'merchant') or ''),
            description=str(_lookup(record, 'description') or ''),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'type': self.type,
            'amount': self.amount,
            'date': self.date.isoformat(),
            'merchant': self.merchant,
            'description': self.description,
        }

    def __str__(self):
        return f"{self.date.strftime('%Y-%m-%d')} | {str(self.id):6} | {self.type:6} | ${self.amount:8.2f} | {self.merchant[:20]:20} | {self.description[:40]}"
