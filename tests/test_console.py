"""Mini README: Tests for the teller console and its Typer entry point.

Structure:
    * ConsoleSession - command parsing, error replies, and exports.
    * teller_console.session - end-to-end run driven through CliRunner.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from typer.testing import CliRunner

import teller_console
from tellerlog.configuration import TellerlogSettings, get_settings
from tellerlog.desk import TellerDesk
from tellerlog.interface import ConsoleSession
from tellerlog.ledger import Ledger


@pytest.fixture()
def session(tmp_path: Path) -> ConsoleSession:
    settings = TellerlogSettings(export_directory=tmp_path / "exports")
    desk = TellerDesk(Ledger(), clock=lambda: datetime(2024, 1, 2, 10, 0, 0), settings=settings)
    return ConsoleSession(desk)


def test_deposit_and_withdraw_commands_record_transactions(session: ConsoleSession) -> None:
    """Deposit and withdraw commands echo the recorded line and appear in the listing."""

    deposit = session.handle("deposit 100.5")
    withdrawal = session.handle("withdraw R50")

    assert deposit.message == "Deposit: R100.50 on Tue Jan 02 2024 at 10:00:00"
    assert withdrawal.message == "Withdrawal: R50.00 on Tue Jan 02 2024 at 10:00:00"
    listing = session.handle("list")
    assert listing.message.splitlines() == [
        "  1. Deposit: R100.50 on Tue Jan 02 2024 at 10:00:00",
        "  2. Withdrawal: R50.00 on Tue Jan 02 2024 at 10:00:00",
    ]


def test_invalid_input_is_reported_and_state_kept(session: ConsoleSession) -> None:
    """Bad commands are answered with an error and never change the ledger."""

    session.handle("deposit 5")

    negative = session.handle("deposit -1")
    missing = session.handle("withdrawal")
    unknown = session.handle("transfer 10")

    assert not negative.ok and "negative" in negative.message
    assert not missing.ok and missing.message.startswith("Usage:")
    assert not unknown.ok and "Unknown command" in unknown.message
    assert len(session.desk.list_transactions()) == 1


def test_export_command_writes_default_file(session: ConsoleSession, tmp_path: Path) -> None:
    """A bare export writes the configured default file."""

    session.handle("deposit 1")

    reply = session.handle("export")

    assert reply.ok
    assert (tmp_path / "exports" / "transactions.txt").read_text(encoding="utf-8") == (
        "Deposit: R1.00 on Tue Jan 02 2024 at 10:00:00\n"
    )


def test_export_command_reports_open_failure(session: ConsoleSession, tmp_path: Path) -> None:
    """An unopenable export path is reported instead of ending the session."""

    reply = session.handle(f"export {tmp_path / 'missing' / 'out.txt'}")

    assert not reply.ok
    assert reply.message.startswith("Error: Cannot open file for writing")


def test_empty_list_and_quit(session: ConsoleSession) -> None:
    """Empty ledgers, blank lines and quit produce the expected replies."""

    assert session.handle("list").message == "No transactions recorded."
    assert session.handle("").message == ""
    assert session.handle("quit").finished


def test_cli_session_records_and_exports(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """The Typer session loop records input lines and exports on request."""

    monkeypatch.setenv("TELLERLOG_EXPORT_DIRECTORY", str(tmp_path))
    get_settings.cache_clear()
    destination = tmp_path / "session.txt"
    runner = CliRunner()

    result = runner.invoke(
        teller_console.cli,
        ["session"],
        input=f"deposit 10\nwithdraw 2.5\nexport {destination}\nquit\n",
    )
    get_settings.cache_clear()

    assert result.exit_code == 0, result.output
    assert "Exported 2 transactions" in result.output
    lines = destination.read_text(encoding="utf-8").splitlines()
    assert [line.split(" on ")[0] for line in lines] == ["Deposit: R10.00", "Withdrawal: R2.50"]


def test_cli_session_ends_cleanly_at_end_of_input() -> None:
    """Running out of input ends the session with a zero exit code."""

    result = CliRunner().invoke(teller_console.cli, ["session"], input="deposit 1\n")

    assert result.exit_code == 0, result.output
    assert "Deposit: R1.00" in result.output
