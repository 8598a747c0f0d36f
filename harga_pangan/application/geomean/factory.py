from __future__ import annotations

from typing import Callable

from harga_pangan.domain import ConfigError
from harga_pangan.domain.prices import PriceExporter, ProgressObserver
from harga_pangan.infrastructure import NullProgress, TqdmProgress, optional_env
from harga_pangan.infrastructure.exporters import CsvPriceExporter
from harga_pangan.providers.panel_harga import (
    DEFAULT_BASE_URL,
    PanelHargaClient,
    PanelHargaGeomeanFetcher,
)
from .config import GeomeanRequestConfig

DEFAULT_EXPORTER = "csv"


def _resolve_base_url() -> str:
    return optional_env("PANEL_HARGA_BASE_URL") or DEFAULT_BASE_URL


def _resolve_exporter_name() -> str:
    return optional_env("GEOMEAN_EXPORTER") or DEFAULT_EXPORTER


def build_panel_harga_client(config: GeomeanRequestConfig) -> PanelHargaClient:
    return PanelHargaClient(
        base_url=_resolve_base_url(),
        timeout_seconds=config.timeout_seconds,
    )


def build_geomean_fetcher(client: PanelHargaClient) -> PanelHargaGeomeanFetcher:
    return PanelHargaGeomeanFetcher(client)


def _build_csv_exporter(config: GeomeanRequestConfig) -> PriceExporter:
    return CsvPriceExporter(
        output_path=config.output_path,
        commodity_label=config.commodity_label,
    )


ExporterBuilder = Callable[[GeomeanRequestConfig], PriceExporter]

_EXPORTER_BUILDERS: dict[str, ExporterBuilder] = {
    "csv": _build_csv_exporter,
}


def build_price_exporter(config: GeomeanRequestConfig) -> PriceExporter:
    exporter_name = _resolve_exporter_name().lower()
    builder = _EXPORTER_BUILDERS.get(exporter_name)
    if builder is not None:
        return builder(config)
    raise ConfigError(
        f"Unsupported geomean exporter '{exporter_name}'",
        context={"exporter": exporter_name},
    )


def build_progress(config: GeomeanRequestConfig) -> ProgressObserver:
    if config.progress:
        return TqdmProgress()
    return NullProgress()
