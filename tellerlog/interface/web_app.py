"""Mini README: FastAPI service exposing the teller desk over HTTP.

Structure:
    * create_application - application factory wiring routes to a ledger.

Routes:
    * GET /transactions - recorded transactions in insertion order.
    * POST /deposit, POST /withdrawal - record an amount (form fields).
    * GET /export.txt - the export log rendered as plain text.
    * POST /export - write the log into the configured export directory.

The factory accepts an existing ``Ledger`` so tests and embedding programs
control its lifetime; otherwise it creates one and closes it on shutdown.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse

from ..configuration import get_settings
from ..desk import TellerDesk
from ..ledger import (
    ExportWriteError,
    FileOpenError,
    InvalidAmountError,
    Ledger,
    LedgerClosedError,
    TransactionKind,
)
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError as error:
        raise HTTPException(status_code=400, detail=f"Invalid timestamp: {value}") from error


def create_application(ledger: Optional[Ledger] = None) -> FastAPI:
    """Create the FastAPI application bound to ``ledger``."""

    settings = get_settings()
    owns_ledger = ledger is None
    ledger = ledger if ledger is not None else Ledger()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        if owns_ledger:
            ledger.close()

    app = FastAPI(title="Tellerlog", version="0.1.0", lifespan=lifespan)
    desk = TellerDesk(ledger, settings=settings)
    app.state.ledger = ledger
    app.state.desk = desk

    def record(kind: TransactionKind, amount: str, timestamp: Optional[str]) -> JSONResponse:
        moment = _parse_timestamp(timestamp)
        try:
            transaction = desk.record(kind, amount, moment)
        except InvalidAmountError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        except LedgerClosedError as error:
            raise HTTPException(status_code=503, detail=str(error)) from error
        return JSONResponse(transaction.as_dict(), status_code=201)

    @app.get("/transactions")
    async def list_transactions() -> JSONResponse:
        """Return every recorded transaction in insertion order."""

        try:
            snapshot = desk.list_transactions()
        except LedgerClosedError as error:
            raise HTTPException(status_code=503, detail=str(error)) from error
        transactions = [transaction.as_dict() for transaction in snapshot]
        LOGGER.debug("Returning %s transactions", len(transactions))
        return JSONResponse({"count": len(transactions), "transactions": transactions})

    @app.post("/deposit")
    def deposit(
        amount: str = Form(...),
        timestamp: Optional[str] = Form(None),
    ) -> JSONResponse:
        """Record a deposit."""

        return record(TransactionKind.DEPOSIT, amount, timestamp)

    @app.post("/withdrawal")
    def withdrawal(
        amount: str = Form(...),
        timestamp: Optional[str] = Form(None),
    ) -> JSONResponse:
        """Record a withdrawal."""

        return record(TransactionKind.WITHDRAWAL, amount, timestamp)

    @app.get("/export.txt", response_class=PlainTextResponse)
    async def export_text() -> PlainTextResponse:
        """Return the export log without touching the filesystem."""

        try:
            return PlainTextResponse(ledger.render())
        except LedgerClosedError as error:
            raise HTTPException(status_code=503, detail=str(error)) from error

    # Plain ``def`` so the blocking file write runs in the threadpool.
    @app.post("/export")
    def export(filename: Optional[str] = Form(None)) -> JSONResponse:
        """Write the export log into the configured export directory."""

        name = Path(filename).name if filename else settings.default_export_name
        if name in {"", ".", ".."}:
            raise HTTPException(status_code=400, detail=f"Invalid export file name: {filename!r}")
        destination = settings.export_directory / name
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            result = desk.export_to(destination)
        except LedgerClosedError as error:
            raise HTTPException(status_code=503, detail=str(error)) from error
        except (OSError, FileOpenError, ExportWriteError) as error:
            raise HTTPException(status_code=500, detail=str(error)) from error
        LOGGER.info("HTTP export wrote %s transactions to %s", result.count, result.path)
        return JSONResponse({"path": str(result.path), "count": result.count})

    return app
