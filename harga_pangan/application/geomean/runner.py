from __future__ import annotations

import logging
import time
from collections import Counter
from pathlib import Path

from harga_pangan.domain.prices import (
    FetchStatus,
    GeomeanFetcher,
    PriceExporter,
    PriceRecord,
    ProgressObserver,
)
from harga_pangan.infrastructure import log_boundary
from .config import (
    GeomeanOverrides,
    GeomeanRequestConfig,
    apply_env_overrides,
)
from .driver import fetch_date_range
from .factory import (
    build_geomean_fetcher,
    build_panel_harga_client,
    build_price_exporter,
    build_progress,
)
from .sorting import sort_records

DEFAULT_CONFIG_PATH = (
    Path(__file__).resolve().parents[3] / "config" / "geomean.yml"
)

logger = logging.getLogger(__name__)


def _run_context(
    config_path: Path | None = None,
    overrides: GeomeanOverrides | None = None,
) -> dict[str, str]:
    resolved_path = config_path or DEFAULT_CONFIG_PATH
    return {"config_path": str(resolved_path)}


def load_config(
    config_path: Path | None = None,
    overrides: GeomeanOverrides | None = None,
) -> GeomeanRequestConfig:
    config = GeomeanRequestConfig.load(
        config_path or DEFAULT_CONFIG_PATH,
        required=config_path is not None,
    )
    config = apply_env_overrides(config)
    if overrides is not None:
        config = config.with_overrides(overrides)
    return config


def collect(
    config: GeomeanRequestConfig,
    fetcher: GeomeanFetcher,
    exporter: PriceExporter,
    progress: ProgressObserver | None = None,
) -> list[PriceRecord]:
    start = time.time()
    records = fetch_date_range(
        config.date_range,
        fetcher,
        config.province_id,
        commodity_id=config.commodity_id,
        progress=progress,
    )
    ordered = sort_records(records)
    _log_outcomes(ordered, time.time() - start)
    exporter.export(ordered)
    return ordered


@log_boundary("geomean.run", context=_run_context)
def run(
    config_path: Path | None = None,
    overrides: GeomeanOverrides | None = None,
) -> list[PriceRecord]:
    config = load_config(config_path, overrides)
    if config.config_path is not None:
        logger.info("Loaded geomean config from %s", config.config_path)

    client = build_panel_harga_client(config)
    try:
        records = collect(
            config,
            build_geomean_fetcher(client),
            build_price_exporter(config),
            build_progress(config),
        )
    finally:
        client.close()
    logger.info(
        'CSV file "%s" has been created successfully.', config.output_path
    )
    return records


def _log_outcomes(records: list[PriceRecord], elapsed: float) -> None:
    counts = Counter(record.status for record in records)
    logger.info(
        "Completed %s requests in %.2f seconds ok=%s no_data=%s "
        "no_entry=%s failed=%s",
        len(records),
        elapsed,
        counts[FetchStatus.OK],
        counts[FetchStatus.NO_DATA],
        counts[FetchStatus.NO_ENTRY],
        counts[FetchStatus.FAILED],
    )
    if counts[FetchStatus.FAILED]:
        failed = [
            record.date
            for record in records
            if record.status is FetchStatus.FAILED
        ]
        logger.warning(
            "Requests failed for %s dates; their rows are empty: %s",
            len(failed),
            ", ".join(failed),
        )
