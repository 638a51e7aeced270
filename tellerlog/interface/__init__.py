"""Mini README: Input surfaces (console and HTTP) for Tellerlog.

Exports the FastAPI application factory and the console session used by the
command line entry point. Both drive the same ``TellerDesk`` API.
"""

from .console import ConsoleSession
from .web_app import create_application

__all__ = ["ConsoleSession", "create_application"]
