from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from .common.datetime_utils import today_local
from .core.constants import STORAGE_KEY
from .reports.service import ReportService
from .storage.backend import KeyValueBackend
from .storage.json_file_backend import JsonFileBackend
from .storage.store import DataStore
from .summary.service import StaffSummaryService
from .tracker.service import TrackerService


@dataclass(frozen=True)
class Container:
    store: DataStore

    tracker_service: TrackerService
    report_service: ReportService
    summary_service: StaffSummaryService

    today: Callable[[], date]


def build_container(
    *,
    storage_path: str | Path | None = None,
    storage_key: str = STORAGE_KEY,
    openai_api_key: str = "",
    openai_model: str = "gpt-4o-mini",
    backend: Optional[KeyValueBackend] = None,
    today: Optional[Callable[[], date]] = None,
) -> Container:
    if backend is None:
        if storage_path is None:
            raise ValueError("storage_path is required when no backend is given")
        backend = JsonFileBackend(storage_path)
    today = today or today_local

    store = DataStore(backend, key=storage_key, today=today)
    tracker_service = TrackerService(store, today=today)
    report_service = ReportService()
    summary_service = StaffSummaryService(api_key=openai_api_key, model=openai_model)

    return Container(
        store=store,
        tracker_service=tracker_service,
        report_service=report_service,
        summary_service=summary_service,
        today=today,
    )
