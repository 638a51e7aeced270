"""Mini README: Immutable record of a single deposit or withdrawal.

Structure:
    * TransactionKind - enum distinguishing deposits from withdrawals.
    * Transaction - frozen dataclass holding timestamp, amount and kind.

The sign of ``amount`` never encodes direction; only ``kind`` does. Amounts
are stored as ``Decimal`` and shown rounded to two places with an ``R``
prefix. Timestamps are truncated to whole seconds when the record is built so
that the formatted line and the stored value always agree.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Dict, Union

from .errors import InvalidAmountError

AmountLike = Union[Decimal, int, float, str]

CURRENCY_PREFIX = "R"
_CENTS = Decimal("0.01")

# Fixed English abbreviations keep export files identical across locales.
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class TransactionKind(str, Enum):
    """Enumerate the supported transaction kinds."""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"

    @property
    def label(self) -> str:
        """Capitalised name used in formatted lines."""

        return self.value.capitalize()

    @classmethod
    def from_str(cls, value: str) -> "TransactionKind":
        """Coerce arbitrary casing (and the verb ``withdraw``) into a kind."""

        try:
            normalised = value.strip().lower()
            if normalised == "withdraw":
                normalised = cls.WITHDRAWAL.value
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction kind: {value}") from error


def parse_amount(value: AmountLike) -> Decimal:
    """Convert ``value`` to a finite, non-negative ``Decimal``."""

    if isinstance(value, bool):
        raise InvalidAmountError(f"Amount must be numeric, got {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as error:
        raise InvalidAmountError(f"Amount must be numeric, got {value!r}") from error
    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")
    if amount < 0:
        raise InvalidAmountError(f"Amount must not be negative, got {value!r}")
    try:
        amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as error:
        raise InvalidAmountError(f"Amount is too large to display, got {value!r}") from error
    return amount.copy_abs()


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ``Ddd Mon DD YYYY at HH:MM:SS``."""

    return (
        f"{_WEEKDAYS[moment.weekday()]} {_MONTHS[moment.month - 1]} "
        f"{moment.day:02d} {moment.year:04d} at {moment:%H:%M:%S}"
    )


@dataclass(frozen=True, slots=True)
class Transaction:
    """One monetary event; all fields are fixed at construction."""

    timestamp: datetime
    amount: Decimal
    kind: TransactionKind

    def __post_init__(self) -> None:
        if not isinstance(self.timestamp, datetime):
            raise TypeError("timestamp must be a datetime instance")
        kind = self.kind
        if not isinstance(kind, TransactionKind):
            kind = TransactionKind.from_str(str(kind))
        object.__setattr__(self, "timestamp", self.timestamp.replace(microsecond=0))
        object.__setattr__(self, "amount", parse_amount(self.amount))
        object.__setattr__(self, "kind", kind)

    @property
    def display_amount(self) -> Decimal:
        return self.amount.quantize(_CENTS, rounding=ROUND_HALF_UP)

    def format(self) -> str:
        """Return the human-readable line written to exports."""

        return (
            f"{self.kind.label}: {CURRENCY_PREFIX}{self.display_amount:.2f} "
            f"on {format_timestamp(self.timestamp)}"
        )

    def __str__(self) -> str:
        return self.format()

    def as_dict(self) -> Dict[str, str]:
        """Export the transaction with serialisable values."""

        return {
            "kind": self.kind.value,
            "amount": f"{self.display_amount:.2f}",
            "timestamp": self.timestamp.isoformat(),
            "line": self.format(),
        }
