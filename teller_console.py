"""Mini README: Entry point CLI for the Tellerlog teller desk.

This script exposes a Typer CLI with two commands: ``session`` runs an
interactive console where the operator records deposits and withdrawals and
exports them, and ``serve`` starts the HTTP interface with uvicorn. Both use
the same settings and logging configuration.
"""

from __future__ import annotations

from typing import Optional

import typer
import uvicorn

from tellerlog.configuration import get_settings
from tellerlog.desk import TellerDesk
from tellerlog.interface import ConsoleSession
from tellerlog.ledger import Ledger
from tellerlog.logging_utils import configure_root_logger

cli = typer.Typer(help="Record deposits and withdrawals and export them to a text log.")


@cli.command()
def session(
    log_level: Optional[str] = typer.Option(None, help="Override the configured log level."),
) -> None:
    """Run an interactive teller session until 'quit' or end of input."""

    settings = get_settings()
    configure_root_logger(log_level or settings.log_level)
    with Ledger() as ledger:
        console = ConsoleSession(TellerDesk(ledger, settings=settings))
        typer.echo("Teller session started. Type 'help' for commands.")
        while True:
            try:
                line = typer.prompt(">", default="", show_default=False, prompt_suffix=" ")
            except (EOFError, typer.Abort):
                typer.echo("")
                break
            reply = console.handle(line)
            if reply.message:
                typer.echo(reply.message, err=not reply.ok)
            if reply.finished:
                break


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the HTTP interface using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Tellerlog on {effective_host}:{effective_port}.\n"
        f"Transactions are listed at http://{browser_host}:{effective_port}/transactions"
    )
    uvicorn.run(
        "tellerlog.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
