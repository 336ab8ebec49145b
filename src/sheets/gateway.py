"""Tabular Data Gateway.

Handlers never talk to the spreadsheet directly. They call `TableGateway.fetch` with a range such as
`departments!A:E` and get back a fresh list of rows, each row a list of strings. There is no caching
and no retry: every call is a new read.

Every lower-level failure (network, auth, bad range, timeout) surfaces as `LookupUnavailable`; a
partially read table is never returned.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class LookupUnavailable(RuntimeError):
    """Raised when a table cannot be read or its rows do not fit the expected schema."""


class TableReader(Protocol):
    """Read-only access to a named table range."""

    async def fetch(self, range_spec: str) -> Sequence[Sequence[Any]]:
        """Return every row of `range_spec`; an empty table yields an empty sequence."""
        ...


class TableGateway:
    """Timeout-bounded wrapper around a `TableReader`."""

    def __init__(self, reader: TableReader, *, timeout_s: float = 10.0) -> None:
        self._reader = reader
        self._timeout_s = timeout_s

    async def fetch(self, range_spec: str) -> list[list[str]]:
        """Read `range_spec` and return its rows with every cell coerced to `str`.

        Raises:
            LookupUnavailable: On reader failure or when the read exceeds the configured timeout.
        """

        try:
            rows = await asyncio.wait_for(self._reader.fetch(range_spec), timeout=self._timeout_s)
        except LookupUnavailable:
            raise
        except asyncio.TimeoutError as exc:
            raise LookupUnavailable(
                f"reading {range_spec} timed out after {self._timeout_s:g}s"
            ) from exc
        except Exception as exc:  # noqa: BLE001
            raise LookupUnavailable(f"reading {range_spec} failed: {exc}") from exc

        result = [["" if cell is None else str(cell) for cell in row] for row in rows or ()]
        logger.debug("fetched range=%s rows=%d", range_spec, len(result))
        return result
