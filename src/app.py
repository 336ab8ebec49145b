"""Application composition root.

This module wires together configuration, the spreadsheet gateway, the intent router and the
response formatter for the webhook runtime.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.config.settings import Settings
from src.fulfillment.formatter import ResponseFormatter
from src.fulfillment.router import IntentRouter, build_registry
from src.sheets.client import GoogleSheetsReader
from src.sheets.gateway import TableGateway


@dataclass(frozen=True)
class App:
    """Shared, read-only application dependencies for request handling."""

    gateway: TableGateway
    router: IntentRouter
    formatter: ResponseFormatter


def create_app(settings: Settings) -> App:
    """Create the application container.

    Note:
        No network call happens here; the spreadsheet is first contacted by the first lookup.
    """

    reader = GoogleSheetsReader(
        settings.google_sheet_id,
        service_account_info=settings.service_account_info(),
        service_account_file=settings.google_service_account_file,
    )
    return App(
        gateway=TableGateway(reader, timeout_s=settings.sheets_timeout_s),
        router=IntentRouter(build_registry()),
        formatter=ResponseFormatter(settings.reception_helpline),
    )
