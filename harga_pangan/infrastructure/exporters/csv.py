from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from harga_pangan.domain import ExportError
from harga_pangan.domain.prices import GeomeanValue, ResultCollection
from harga_pangan.infrastructure.output import (
    ErrorPolicy,
    ensure_directory,
    write_text_atomic,
)

DEFAULT_DATE_LABEL = "Tanggal"
DEFAULT_COMMODITY_LABEL = "Bawang Merah"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CsvExportSettings:
    output_path: Path
    date_label: str
    commodity_label: str


class CsvPriceExporter:
    def __init__(
        self,
        output_path: Path,
        *,
        commodity_label: str = DEFAULT_COMMODITY_LABEL,
        date_label: str = DEFAULT_DATE_LABEL,
    ) -> None:
        self._settings = CsvExportSettings(
            output_path=output_path,
            date_label=date_label,
            commodity_label=commodity_label,
        )

    def name(self) -> str:
        return "csv"

    def render(self, records: ResultCollection) -> str:
        frame = _records_to_frame(
            records,
            date_label=self._settings.date_label,
            commodity_label=self._settings.commodity_label,
        )
        text = frame.to_csv(index=False, lineterminator="\n")
        return text.rstrip("\n")

    def export(self, records: ResultCollection) -> None:
        output_path = self._settings.output_path
        context = {"path": str(output_path)}
        ensure_directory(
            output_path.parent,
            error_type=ExportError,
            invalid_message="CSV output parent must be a directory",
            create_message="Failed to prepare CSV output directory",
            context=context,
        )
        write_text_atomic(
            output_path,
            self.render(records),
            error_policy=ErrorPolicy(
                error_type=ExportError,
                message="Failed to export CSV",
                context=context,
            ),
        )
        logger.info(
            "Saved CSV path=%s rows=%s", output_path, len(records)
        )


def _records_to_frame(
    records: ResultCollection, *, date_label: str, commodity_label: str
) -> pd.DataFrame:
    data = {
        date_label: [record.date for record in records],
        commodity_label: [_value_str(record.geomean) for record in records],
    }
    return pd.DataFrame(data, columns=[date_label, commodity_label], dtype=str)


def _value_str(value: GeomeanValue | None) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
