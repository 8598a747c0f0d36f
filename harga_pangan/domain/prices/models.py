from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterator, Sequence, TypeAlias

from .dates import inclusive_day_count, iter_days, span_days

GeomeanValue: TypeAlias = int | float | str


class FetchStatus(str, Enum):
    OK = "ok"
    NO_DATA = "no_data"
    NO_ENTRY = "no_entry"
    FAILED = "failed"


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    def days(self) -> Iterator[date]:
        return iter_days(self.start, self.end)

    def day_count(self) -> int:
        return inclusive_day_count(self.start, self.end)

    def span_days(self) -> int:
        return span_days(self.start, self.end)


@dataclass(frozen=True)
class PriceRecord:
    date: str
    geomean: GeomeanValue | None
    status: FetchStatus = FetchStatus.OK
    error_message: str | None = None


ResultCollection: TypeAlias = Sequence[PriceRecord]
