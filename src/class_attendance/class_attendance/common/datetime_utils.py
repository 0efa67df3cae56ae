from __future__ import annotations

from datetime import date, datetime

from ..core.constants import HEADER_DATE_FORMAT, ISO_DATE_FORMAT, REPORT_DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def format_report_date(value: date) -> str:
    """e.g. 'January 10, 2024'."""
    return value.strftime(REPORT_DATE_FORMAT)


def format_header_date(value: date) -> str:
    """e.g. 'Wednesday, January 10, 2024'."""
    return value.strftime(HEADER_DATE_FORMAT)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()
