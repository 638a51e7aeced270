"""Mini README: Teller desk facade consumed by input surfaces.

Structure:
    * TellerDesk - records deposits and withdrawals, lists them, exports them.

The desk is what a button panel, console or HTTP handler talks to. It stamps
the current time when the caller does not supply one, applies the configured
per-transaction ceiling, and resolves the default export destination from
settings. The ledger itself stays unaware of any of these input concerns.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Tuple

from .configuration import TellerlogSettings, get_settings
from .ledger import (
    ExportResult,
    FileOpenError,
    InvalidAmountError,
    Ledger,
    Transaction,
    TransactionKind,
)
from .ledger.store import PathType
from .ledger.transaction import AmountLike, parse_amount
from .logging_utils import get_logger

LOGGER = get_logger(__name__)

Clock = Callable[[], datetime]


class TellerDesk:
    """Front desk API over a single ``Ledger``."""

    def __init__(
        self,
        ledger: Ledger,
        *,
        clock: Optional[Clock] = None,
        settings: Optional[TellerlogSettings] = None,
    ) -> None:
        self.ledger = ledger
        self._clock = clock or datetime.now
        self._settings = settings or get_settings()

    def _record(
        self, kind: TransactionKind, amount: AmountLike, timestamp: Optional[datetime]
    ) -> Transaction:
        value = parse_amount(amount)
        if value > self._settings.max_amount:
            raise InvalidAmountError(
                f"Amount {value} exceeds the per-transaction limit of {self._settings.max_amount}"
            )
        transaction = Transaction(
            timestamp=timestamp if timestamp is not None else self._clock(),
            amount=value,
            kind=kind,
        )
        self.ledger.record(transaction)
        return transaction

    def record_deposit(self, amount: AmountLike, timestamp: Optional[datetime] = None) -> Transaction:
        """Record a deposit, stamped now unless ``timestamp`` is given."""

        return self._record(TransactionKind.DEPOSIT, amount, timestamp)

    def record_withdrawal(
        self, amount: AmountLike, timestamp: Optional[datetime] = None
    ) -> Transaction:
        """Record a withdrawal, stamped now unless ``timestamp`` is given."""

        return self._record(TransactionKind.WITHDRAWAL, amount, timestamp)

    def record(
        self, kind: TransactionKind | str, amount: AmountLike, timestamp: Optional[datetime] = None
    ) -> Transaction:
        if not isinstance(kind, TransactionKind):
            kind = TransactionKind.from_str(kind)
        return self._record(kind, amount, timestamp)

    def list_transactions(self) -> Tuple[Transaction, ...]:
        return self.ledger.list_transactions()

    @property
    def default_destination(self) -> Path:
        return self._settings.export_directory / self._settings.default_export_name

    def export_to(self, path: Optional[PathType] = None) -> ExportResult:
        """Export the ledger; without ``path`` use the configured destination."""

        if path is None:
            destination = self.default_destination
            try:
                destination.parent.mkdir(parents=True, exist_ok=True)
            except OSError as error:
                raise FileOpenError(destination, error.strerror or str(error)) from error
        else:
            destination = Path(path)
        LOGGER.debug("Export requested to %s", destination)
        return self.ledger.export_to_file(destination)
