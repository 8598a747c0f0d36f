from .dates import (
    format_date,
    inclusive_day_count,
    iter_days,
    next_day,
    parse_date,
    span_days,
    to_path_token,
)
from .models import (
    DateRange,
    FetchStatus,
    GeomeanValue,
    PriceRecord,
    ResultCollection,
)
from .protocols import GeomeanFetcher, PriceExporter, ProgressObserver

__all__ = [
    "DateRange",
    "FetchStatus",
    "GeomeanFetcher",
    "GeomeanValue",
    "PriceExporter",
    "PriceRecord",
    "ProgressObserver",
    "ResultCollection",
    "format_date",
    "inclusive_day_count",
    "iter_days",
    "next_day",
    "parse_date",
    "span_days",
    "to_path_token",
]
