from __future__ import annotations

from harga_pangan.domain.prices import PriceRecord, ResultCollection, parse_date


def sort_records(records: ResultCollection) -> list[PriceRecord]:
    # sorted() is stable, so duplicate dates keep their fetch order
    return sorted(records, key=lambda record: parse_date(record.date))
