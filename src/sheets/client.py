"""Google Sheets `TableReader` (gspread + google-auth service account).

The gspread client is synchronous, so every read runs in a worker thread to keep the event loop
free. The spreadsheet is re-opened on each call; nothing read from it is kept between requests.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

import gspread
from google.oauth2.service_account import Credentials

from src.sheets.gateway import LookupUnavailable

READONLY_SCOPES = ("https://www.googleapis.com/auth/spreadsheets.readonly",)


def load_credentials(
        *,
        service_account_info: Mapping[str, Any] | None = None,
        service_account_file: str | None = None,
) -> Credentials:
    """Build read-only service-account credentials from inline JSON or a key file."""

    if service_account_info:
        return Credentials.from_service_account_info(
            dict(service_account_info), scopes=list(READONLY_SCOPES)
        )
    if service_account_file:
        return Credentials.from_service_account_file(
            service_account_file, scopes=list(READONLY_SCOPES)
        )
    raise RuntimeError("service account credentials are required to read Google Sheets")


class GoogleSheetsReader:
    """Reads value ranges from a single spreadsheet."""

    def __init__(
            self,
            spreadsheet_id: str,
            *,
            service_account_info: Mapping[str, Any] | None = None,
            service_account_file: str | None = None,
    ) -> None:
        self.spreadsheet_id = spreadsheet_id
        self._service_account_info = service_account_info
        self._service_account_file = service_account_file

    def _read_values(self, range_spec: str) -> list[list[Any]]:
        credentials = load_credentials(
            service_account_info=self._service_account_info,
            service_account_file=self._service_account_file,
        )
        client = gspread.authorize(credentials)
        spreadsheet = client.open_by_key(self.spreadsheet_id)
        payload = spreadsheet.values_get(range_spec)
        return payload.get("values", [])

    async def fetch(self, range_spec: str) -> list[list[Any]]:
        """Return all rows of `range_spec`.

        Raises:
            LookupUnavailable: If authorization, the network call or the range itself fails.
        """

        try:
            return await asyncio.to_thread(self._read_values, range_spec)
        except Exception as exc:  # noqa: BLE001
            raise LookupUnavailable(f"Google Sheets read failed for {range_spec}") from exc
