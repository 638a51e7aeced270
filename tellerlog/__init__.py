"""Mini README: Core package initializer for Tellerlog.

Tellerlog records deposits and withdrawals in an ordered in-memory ledger
and exports them as a plain text log. The common entry points are
re-exported here so drivers can import them without knowing the module
layout.
"""

from .desk import TellerDesk
from .ledger import Ledger, Transaction, TransactionKind
from .logging_utils import get_logger

__all__ = ["Ledger", "TellerDesk", "Transaction", "TransactionKind", "get_logger"]
