"""Mini README: Transaction records and the ordered ledger that owns them.

This package holds the core of Tellerlog: the immutable ``Transaction``
value, the ``Ledger`` that appends, lists and exports transactions, and the
exceptions both raise. Drivers (desk facade, console, HTTP) depend only on
the names exported here.
"""

from .errors import (
    ExportWriteError,
    FileOpenError,
    InvalidAmountError,
    LedgerClosedError,
    LedgerError,
)
from .store import ExportResult, Ledger
from .transaction import Transaction, TransactionKind

__all__ = [
    "ExportResult",
    "ExportWriteError",
    "FileOpenError",
    "InvalidAmountError",
    "Ledger",
    "LedgerClosedError",
    "LedgerError",
    "Transaction",
    "TransactionKind",
]
