"""Report store — where finished reports wait to be fetched by id.

The engine never touches storage; the API receives a ``ReportStore`` through
dependency injection.  ``InMemoryReportStore`` keeps reports for the life of
the process only (no TTL, no eviction).
"""

from __future__ import annotations

import logging
import secrets
import threading
from typing import Protocol

from fleet_charging.models.results import Report

_LOGGER = logging.getLogger(__name__)


class ReportStore(Protocol):
    """Minimal key → Report mapping."""

    def put(self, key: str, report: Report) -> None: ...

    def get(self, key: str) -> Report | None: ...


class InMemoryReportStore:
    """Thread-safe dict-backed store (sync endpoints run on a thread pool)."""

    def __init__(self) -> None:
        self._reports: dict[str, Report] = {}
        self._lock = threading.Lock()

    def put(self, key: str, report: Report) -> None:
        with self._lock:
            self._reports[key] = report
        _LOGGER.debug("Stored report %s", key)

    def get(self, key: str) -> Report | None:
        with self._lock:
            return self._reports.get(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._reports)


def new_report_id() -> str:
    """Opaque random report id."""
    return secrets.token_hex(6)
