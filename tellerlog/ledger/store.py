"""Mini README: Ordered, append-only store of transactions.

Structure:
    * Ledger - owns the transaction sequence, renders it, and exports it.

A ``Ledger`` is created explicitly and handed to whichever driver needs it;
there is no module-level instance. Records are appended in call order and
never reordered, edited or removed while the ledger is open. A single lock
guards the sequence so concurrent writers cannot interleave an append with a
snapshot, while file I/O for exports happens outside the lock on a copied
snapshot. ``close`` releases every record; later calls raise
``LedgerClosedError``.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from ..logging_utils import get_logger
from .errors import ExportWriteError, FileOpenError, LedgerClosedError
from .transaction import Transaction

LOGGER = get_logger(__name__)

PathType = Union[str, PathLike]


@dataclass(frozen=True, slots=True)
class ExportResult:
    """Where an export was written and how many transactions it holds."""

    path: Path
    count: int


class Ledger:
    """Manage the ordered collection of recorded transactions."""

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None) -> None:
        self._lock = threading.Lock()
        self._transactions: List[Transaction] = []
        self._closed = False
        for transaction in transactions or ():
            self._append(transaction)
        LOGGER.debug("Ledger initialised with %s transactions", len(self._transactions))

    def __enter__(self) -> "Ledger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def is_empty(self) -> bool:
        """True until the first transaction is recorded."""

        return len(self) == 0

    def _ensure_open(self) -> None:
        if self._closed:
            raise LedgerClosedError("Ledger has been closed")

    def _append(self, transaction: Transaction) -> None:
        if not isinstance(transaction, Transaction):
            raise TypeError(f"Expected Transaction, got {type(transaction).__name__}")
        self._transactions.append(transaction)

    def record(self, transaction: Transaction) -> None:
        """Append ``transaction`` to the end of the ledger."""

        with self._lock:
            self._ensure_open()
            self._append(transaction)
        LOGGER.info("Recorded %s", transaction.format())

    def list_transactions(self) -> Tuple[Transaction, ...]:
        """Return a read-only snapshot of transactions in insertion order."""

        with self._lock:
            self._ensure_open()
            return tuple(self._transactions)

    def render(self) -> str:
        """Return the export text: one formatted line per transaction."""

        return "".join(f"{transaction.format()}\n" for transaction in self.list_transactions())

    def export_to_file(self, path: PathType) -> ExportResult:
        """Write every transaction to ``path``, replacing existing content.

        The text is rendered before the destination is touched, so an open
        failure leaves any existing file exactly as it was. Raises
        ``FileOpenError`` when the destination cannot be opened and
        ``ExportWriteError`` when writing fails after opening. The returned
        count is the number of lines written.
        """

        destination = Path(path)
        content = self.render()
        line_count = content.count("\n")
        try:
            handle = destination.open("w", encoding="utf-8", newline="\n")
        except OSError as error:
            LOGGER.warning("Cannot open file for writing: %s (%s)", destination, error)
            raise FileOpenError(destination, error.strerror or str(error)) from error

        try:
            with handle:
                handle.write(content)
        except OSError as error:
            LOGGER.warning("Export to %s failed while writing: %s", destination, error)
            raise ExportWriteError(destination, error.strerror or str(error)) from error

        LOGGER.info("Exported %s transactions to %s", line_count, destination)
        return ExportResult(path=destination, count=line_count)

    def close(self) -> None:
        """Release all transactions; the ledger cannot be used afterwards."""

        with self._lock:
            if self._closed:
                return
            released = len(self._transactions)
            self._transactions.clear()
            self._closed = True
        LOGGER.debug("Ledger closed, released %s transactions", released)
