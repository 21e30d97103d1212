from __future__ import annotations

from datetime import date, datetime

from ..core.constants import ACADEMIC_YEAR_START_MONTH


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def format_academic_year(start_year: int) -> str:
    return f"{start_year}-{(start_year + 1) % 100:02d}"


def current_academic_year(today: date | None = None) -> str:
    """Academic year label for `today`; a new year starts in September."""
    today = today or today_local()
    if today.month >= ACADEMIC_YEAR_START_MONTH:
        return format_academic_year(today.year)
    return format_academic_year(today.year - 1)


def academic_year_options(today: date | None = None) -> list[str]:
    """Selectable years: from one year before the current calendar year, four in total."""
    today = today or today_local()
    return [format_academic_year(today.year + i) for i in range(-1, 3)]
