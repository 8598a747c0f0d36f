from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator

from harga_pangan.domain.errors import DataSourceError

DATE_SEPARATOR = "/"
PATH_SEPARATOR = "-"
_ONE_DAY = timedelta(days=1)


def format_date(day: date) -> str:
    return f"{day.day:02d}/{day.month:02d}/{day.year:04d}"


def parse_date(token: str) -> date:
    """Inverse of format_date: read a DD/MM/YYYY token back into a date."""
    parts = token.strip().split(DATE_SEPARATOR)
    if len(parts) != 3:
        raise DataSourceError(
            "Date token must be DD/MM/YYYY", context={"token": token}
        )
    try:
        day, month, year = (int(part) for part in parts)
        return date(year, month, day)
    except ValueError as exc:
        raise DataSourceError(
            "Date token must be DD/MM/YYYY", context={"token": token}
        ) from exc


def to_path_token(token: str) -> str:
    return token.replace(DATE_SEPARATOR, PATH_SEPARATOR)


def next_day(day: date) -> date:
    return day + _ONE_DAY


def inclusive_day_count(start: date, end: date) -> int:
    if end < start:
        return 0
    return (end - start).days + 1


def span_days(start: date, end: date) -> int:
    """Whole days from start to end, one less than the inclusive count."""
    return max((end - start).days, 0)


def iter_days(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current = next_day(current)
