"""Mini README: Line-oriented teller console.

Structure:
    * ConsoleSession - interprets one command line and returns the reply text.

Commands mirror the buttons of a teller panel::

    deposit <amount>        record a deposit stamped with the current time
    withdraw <amount>       record a withdrawal (``withdrawal`` also accepted)
    list                    show every recorded transaction in order
    export [path]           write the log to ``path`` or the default file
    help                    show this summary
    quit                    end the session

Errors never end the session: they are reported as text and the ledger keeps
its previous contents.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..desk import TellerDesk
from ..ledger import LedgerError, TransactionKind
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

HELP_TEXT = "\n".join(
    [
        "Commands:",
        "  deposit <amount>     record a deposit",
        "  withdraw <amount>    record a withdrawal",
        "  list                 show recorded transactions",
        "  export [path]        write transactions to a text file",
        "  help                 show this message",
        "  quit                 leave the session",
    ]
)


@dataclass(slots=True)
class ConsoleReply:
    """Text to show the operator and whether the session should end."""

    message: str
    finished: bool = False
    ok: bool = True


class ConsoleSession:
    """Dispatch console commands to a ``TellerDesk``."""

    def __init__(self, desk: TellerDesk) -> None:
        self.desk = desk

    def handle(self, line: str) -> ConsoleReply:
        parts = line.split(maxsplit=1)
        if not parts:
            return ConsoleReply("")
        command = parts[0].lower()
        argument = parts[1].strip() if len(parts) > 1 else ""
        LOGGER.debug("Console command=%s argument=%s", command, argument)

        if command in {"quit", "exit"}:
            return ConsoleReply("Goodbye.", finished=True)
        if command == "help":
            return ConsoleReply(HELP_TEXT)
        if command == "list":
            return self._list()
        if command == "export":
            return self._export(argument)
        try:
            kind = TransactionKind.from_str(command)
        except ValueError:
            return ConsoleReply(f"Unknown command '{command}'. Type 'help' for options.", ok=False)
        return self._record(kind, argument)

    def _record(self, kind: TransactionKind, argument: str) -> ConsoleReply:
        if not argument:
            return ConsoleReply(f"Usage: {kind.value} <amount>", ok=False)
        try:
            transaction = self.desk.record(kind, argument.removeprefix("R"))
        except LedgerError as error:
            return ConsoleReply(f"Error: {error}", ok=False)
        return ConsoleReply(transaction.format())

    def _list(self) -> ConsoleReply:
        transactions = self.desk.list_transactions()
        if not transactions:
            return ConsoleReply("No transactions recorded.")
        lines: List[str] = [
            f"{index:>3}. {transaction.format()}"
            for index, transaction in enumerate(transactions, start=1)
        ]
        return ConsoleReply("\n".join(lines))

    def _export(self, argument: str) -> ConsoleReply:
        try:
            result = self.desk.export_to(argument or None)
        except LedgerError as error:
            return ConsoleReply(f"Error: {error}", ok=False)
        return ConsoleReply(f"Exported {result.count} transactions to {result.path}")
