"""Mini README: Exceptions raised by the transaction ledger.

Structure:
    * LedgerError - common base so drivers can catch every ledger failure.
    * InvalidAmountError - amount rejected when a transaction is constructed.
    * FileOpenError - export destination could not be opened; nothing written.
    * ExportWriteError - destination opened but writing or closing failed.
    * LedgerClosedError - operation attempted after teardown.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union


class LedgerError(Exception):
    """Base class for ledger failures reported to the immediate caller."""


class InvalidAmountError(LedgerError, ValueError):
    """Raised when an amount is negative, non-finite, or not a number."""


class _ExportError(LedgerError):
    _action = "Export failed for"

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self._action} {self.path}: {reason}")


class FileOpenError(_ExportError):
    """Raised when the export destination cannot be opened for writing."""

    _action = "Cannot open file for writing"


class ExportWriteError(_ExportError):
    """Raised when writing to an already opened export destination fails."""

    _action = "Failed while writing"


class LedgerClosedError(LedgerError):
    """Raised when a ledger is used after it has been closed."""
