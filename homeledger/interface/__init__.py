"""Mini README: Interactive interfaces for Home Ledger.

Exports the FastAPI application factory behind the browser ledger page and
the view renderer it uses. CLI helpers live in ``main_home_ledger.py``.
"""

from .view import LedgerView, RenderedRow, ViewRenderer, format_amount
from .web_app import create_application

__all__ = ["LedgerView", "RenderedRow", "ViewRenderer", "create_application", "format_amount"]
