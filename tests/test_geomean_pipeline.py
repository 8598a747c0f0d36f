from datetime import date
from pathlib import Path
from typing import Any

import pytest
from pytest import MonkeyPatch

from harga_pangan.application.geomean import (
    GeomeanOverrides,
    GeomeanRequestConfig,
    collect,
    run,
)
from harga_pangan.application.geomean import runner as runner_module
from harga_pangan.domain.prices import (
    DateRange,
    FetchStatus,
    PriceRecord,
    format_date,
    parse_date,
)
from harga_pangan.infrastructure.exporters import CsvPriceExporter
from harga_pangan.providers.panel_harga import PanelHargaClient


class _MappedFetcher:
    def __init__(self, values: dict[str, Any]) -> None:
        self._values = values

    def fetch(
        self, day: date, province_id: int, commodity_id: int = 30
    ) -> PriceRecord:
        token = format_date(day)
        value = self._values.get(token, 35000)
        if value is None:
            return PriceRecord(
                date=token, geomean=None, status=FetchStatus.NO_ENTRY
            )
        return PriceRecord(date=token, geomean=value)


class _JsonResponse:
    def __init__(self, payload: Any) -> None:
        self._payload = payload
        self.status_code = 200

    def raise_for_status(self) -> None:
        return None

    def json(self) -> Any:
        return self._payload


class _ApiSession:
    def __init__(self, missing_day: str | None = None) -> None:
        self.headers: dict[str, str] = {}
        self.urls: list[str] = []
        self.closed = False
        self._missing_day = missing_day

    def get(self, url: str, timeout: float | None = None) -> _JsonResponse:
        self.urls.append(url)
        if self._missing_day and f"/{self._missing_day}/" in url:
            return _JsonResponse({"data": [{"province_id": 11, "geomean": 1}]})
        return _JsonResponse({"data": [{"province_id": 12, "geomean": 35000}]})

    def close(self) -> None:
        self.closed = True


def _config(tmp_path: Path, end: date = date(2021, 4, 3)) -> GeomeanRequestConfig:
    return GeomeanRequestConfig(
        date_range=DateRange(start=date(2021, 4, 1), end=end),
        output_path=tmp_path / "geomean_results.csv",
        progress=False,
    )


def test_collect_writes_expected_csv(tmp_path: Path) -> None:
    config = _config(tmp_path)

    collect(
        config,
        _MappedFetcher({}),
        CsvPriceExporter(output_path=config.output_path),
    )

    assert config.output_path.read_text(encoding="utf-8") == (
        "Tanggal,Bawang Merah\n"
        "01/04/2021,35000\n"
        "02/04/2021,35000\n"
        "03/04/2021,35000"
    )


def test_collect_leaves_absent_value_empty(tmp_path: Path) -> None:
    config = _config(tmp_path)

    collect(
        config,
        _MappedFetcher({"02/04/2021": None}),
        CsvPriceExporter(output_path=config.output_path),
    )

    lines = config.output_path.read_text(encoding="utf-8").splitlines()
    assert lines[2] == "02/04/2021,"
    assert "None" not in lines[2]


def test_collect_covers_every_day_in_order(tmp_path: Path) -> None:
    config = _config(tmp_path, end=date(2021, 6, 30))

    records = collect(
        config,
        _MappedFetcher({}),
        CsvPriceExporter(output_path=config.output_path),
    )

    lines = config.output_path.read_text(encoding="utf-8").splitlines()[1:]
    expected_dates = [format_date(day) for day in config.date_range.days()]
    assert [line.split(",")[0] for line in lines] == expected_dates
    assert len(records) == config.date_range.day_count() == 91
    parsed = [parse_date(line.split(",")[0]) for line in lines]
    assert all(left <= right for left, right in zip(parsed, parsed[1:]))


def test_collect_is_idempotent(tmp_path: Path) -> None:
    config = _config(tmp_path)
    exporter = CsvPriceExporter(output_path=config.output_path)
    fetcher = _MappedFetcher({"02/04/2021": 36000.5})

    collect(config, fetcher, exporter)
    first = config.output_path.read_bytes()
    collect(config, fetcher, exporter)

    assert config.output_path.read_bytes() == first


def test_run_end_to_end_with_fake_api(
    tmp_path: Path,
    monkeypatch: MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    session = _ApiSession(missing_day="02-04-2021")
    output_path = tmp_path / "geomean_results.csv"
    monkeypatch.delenv("PANEL_HARGA_TIMEOUT_SECONDS", raising=False)
    monkeypatch.delenv("GEOMEAN_EXPORTER", raising=False)
    monkeypatch.setattr(
        runner_module,
        "build_panel_harga_client",
        lambda config: PanelHargaClient(
            base_url="https://panel.test",
            timeout_seconds=config.timeout_seconds,
            session=session,  # type: ignore[arg-type]
        ),
    )
    config_path = tmp_path / "geomean.yml"
    config_path.write_text("province_id: 12\n", encoding="utf-8")

    with caplog.at_level("INFO"):
        records = run(
            config_path=config_path,
            overrides=GeomeanOverrides(
                start="2021-04-01",
                end="2021-04-03",
                output_path=output_path,
                no_progress=True,
            ),
        )

    assert session.urls == [
        "https://panel.test/data/harga-provinsi/01-04-2021/3/30",
        "https://panel.test/data/harga-provinsi/02-04-2021/3/30",
        "https://panel.test/data/harga-provinsi/03-04-2021/3/30",
    ]
    assert session.closed
    assert [record.status for record in records] == [
        FetchStatus.OK,
        FetchStatus.NO_ENTRY,
        FetchStatus.OK,
    ]
    assert output_path.read_text(encoding="utf-8") == (
        "Tanggal,Bawang Merah\n"
        "01/04/2021,35000\n"
        "02/04/2021,\n"
        "03/04/2021,35000"
    )
    assert "has been created successfully" in caplog.text
