from __future__ import annotations

import logging

from harga_pangan.domain.prices import (
    DateRange,
    GeomeanFetcher,
    PriceRecord,
    ProgressObserver,
)
from harga_pangan.providers.panel_harga import DEFAULT_COMMODITY_ID

logger = logging.getLogger(__name__)


def fetch_date_range(
    date_range: DateRange,
    fetcher: GeomeanFetcher,
    province_id: int,
    *,
    commodity_id: int = DEFAULT_COMMODITY_ID,
    progress: ProgressObserver | None = None,
) -> list[PriceRecord]:
    """Fetch one record per day of the inclusive range, strictly in order.

    Each fetch completes before the next day is requested. The fetcher
    contract guarantees a record for every day, so the returned list has
    exactly ``date_range.day_count()`` entries.
    The progress total is the whole-day span between the bounds, one less
    than the number of increments it will receive.
    """
    total = date_range.day_count()
    logger.info(
        "Fetching geomean province_id=%s commodity_id=%s start=%s end=%s days=%s",
        province_id,
        commodity_id,
        date_range.start.isoformat(),
        date_range.end.isoformat(),
        total,
    )
    records: list[PriceRecord] = []
    if progress is not None:
        progress.start(date_range.span_days())
    try:
        for day in date_range.days():
            records.append(fetcher.fetch(day, province_id, commodity_id))
            if progress is not None:
                progress.increment()
    finally:
        if progress is not None:
            progress.stop()
    return records
