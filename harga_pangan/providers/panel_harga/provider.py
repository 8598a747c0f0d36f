from __future__ import annotations

import logging
import math
from datetime import date
from typing import Any, Mapping, Sequence

from harga_pangan.domain import ProviderError
from harga_pangan.domain.prices import (
    FetchStatus,
    GeomeanValue,
    PriceRecord,
    format_date,
    to_path_token,
)
from .client import PanelHargaClient

DEFAULT_COMMODITY_ID = 30
PROVINCE_LEVEL = 3
_PRICE_PATH = "data/harga-provinsi/{day}/{level}/{commodity_id}"

logger = logging.getLogger(__name__)


def build_price_path(date_token: str, commodity_id: int) -> str:
    return _PRICE_PATH.format(
        day=to_path_token(date_token),
        level=PROVINCE_LEVEL,
        commodity_id=commodity_id,
    )


class PanelHargaGeomeanFetcher:
    def __init__(self, client: PanelHargaClient) -> None:
        self._client = client

    def fetch(
        self,
        day: date,
        province_id: int,
        commodity_id: int = DEFAULT_COMMODITY_ID,
    ) -> PriceRecord:
        date_token = format_date(day)
        try:
            payload = self._client.get_json(
                build_price_path(date_token, commodity_id)
            )
        except ProviderError as exc:
            logger.error("Error fetching data for %s: %s", date_token, exc)
            return PriceRecord(
                date=date_token,
                geomean=None,
                status=FetchStatus.FAILED,
                error_message=str(exc),
            )
        return extract_geomean(payload, date_token, province_id)


def extract_geomean(
    payload: Any, date_token: str, province_id: int
) -> PriceRecord:
    entries = _entries(payload)
    if entries is None:
        logger.info("No data available for %s", date_token)
        return PriceRecord(
            date=date_token, geomean=None, status=FetchStatus.NO_DATA
        )

    entry = _find_province(entries, province_id)
    if entry is None:
        logger.info(
            "No data found for province_id %s on %s", province_id, date_token
        )
        return PriceRecord(
            date=date_token, geomean=None, status=FetchStatus.NO_ENTRY
        )

    value = _coerce_geomean(entry.get("geomean"))
    if value is None:
        logger.info(
            "No geomean value for province_id %s on %s",
            province_id,
            date_token,
        )
        return PriceRecord(
            date=date_token, geomean=None, status=FetchStatus.NO_ENTRY
        )
    return PriceRecord(date=date_token, geomean=value)


def _entries(payload: Any) -> Sequence[Any] | None:
    if not isinstance(payload, Mapping):
        return None
    entries = payload.get("data")
    if not isinstance(entries, list):
        return None
    return entries


def _find_province(
    entries: Sequence[Any], province_id: int
) -> Mapping[str, Any] | None:
    for entry in entries:
        if isinstance(entry, Mapping) and entry.get("province_id") == province_id:
            return entry
    return None


def _coerce_geomean(raw: Any) -> GeomeanValue | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return raw if math.isfinite(raw) else None
    if isinstance(raw, str):
        try:
            number = float(raw)
        except ValueError:
            return None
        # numeric text is kept verbatim so the CSV shows the upstream digits
        return raw if math.isfinite(number) else None
    return None
