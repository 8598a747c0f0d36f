from pathlib import Path

import pytest

from harga_pangan.domain import ExportError
from harga_pangan.domain.prices import FetchStatus, PriceRecord
from harga_pangan.infrastructure.exporters import CsvPriceExporter


def _records() -> list[PriceRecord]:
    return [
        PriceRecord(date="01/04/2021", geomean=35000),
        PriceRecord(date="02/04/2021", geomean=None, status=FetchStatus.FAILED),
        PriceRecord(date="03/04/2021", geomean=35000.0),
        PriceRecord(date="04/04/2021", geomean=34999.75),
    ]


def test_render_formats_header_and_rows() -> None:
    exporter = CsvPriceExporter(output_path=Path("unused.csv"))

    text = exporter.render(_records())

    assert text == (
        "Tanggal,Bawang Merah\n"
        "01/04/2021,35000\n"
        "02/04/2021,\n"
        "03/04/2021,35000\n"
        "04/04/2021,34999.75"
    )


def test_render_keeps_numeric_text_verbatim() -> None:
    exporter = CsvPriceExporter(output_path=Path("unused.csv"))

    text = exporter.render([PriceRecord(date="01/04/2021", geomean="35000.50")])

    assert text == "Tanggal,Bawang Merah\n01/04/2021,35000.50"


def test_render_without_records_is_header_only() -> None:
    exporter = CsvPriceExporter(output_path=Path("unused.csv"))
    assert exporter.render([]) == "Tanggal,Bawang Merah"


def test_render_uses_commodity_label() -> None:
    exporter = CsvPriceExporter(
        output_path=Path("unused.csv"), commodity_label="Cabai Rawit"
    )
    assert exporter.render([]) == "Tanggal,Cabai Rawit"


def test_export_replaces_existing_file(tmp_path: Path) -> None:
    output_path = tmp_path / "geomean_results.csv"
    output_path.write_text("stale content\nmore\n", encoding="utf-8")
    exporter = CsvPriceExporter(output_path=output_path)

    exporter.export(_records()[:2])

    assert output_path.read_bytes() == (
        b"Tanggal,Bawang Merah\n01/04/2021,35000\n02/04/2021,"
    )
    assert [entry.name for entry in tmp_path.iterdir()] == [
        "geomean_results.csv"
    ]


def test_export_creates_parent_directory(tmp_path: Path) -> None:
    output_path = tmp_path / "out" / "prices.csv"
    exporter = CsvPriceExporter(output_path=output_path)

    exporter.export(_records())

    assert output_path.exists()


def test_export_rejects_file_as_parent(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    exporter = CsvPriceExporter(output_path=blocker / "prices.csv")

    with pytest.raises(ExportError):
        exporter.export(_records())


def test_export_wraps_write_failure(tmp_path: Path) -> None:
    output_path = tmp_path / "prices.csv"
    output_path.mkdir()
    exporter = CsvPriceExporter(output_path=output_path)

    with pytest.raises(ExportError) as exc:
        exporter.export(_records())

    assert exc.value.context["path"] == str(output_path)
