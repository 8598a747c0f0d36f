from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from pathlib import Path
from typing import Any, Mapping

import yaml

from harga_pangan.domain import ConfigError, EnvVarError
from harga_pangan.domain.prices import DateRange
from harga_pangan.infrastructure import optional_float
from harga_pangan.infrastructure.exporters.csv import DEFAULT_COMMODITY_LABEL
from harga_pangan.providers.panel_harga import (
    DEFAULT_COMMODITY_ID,
    DEFAULT_TIMEOUT_SECONDS,
)

DEFAULT_PROVINCE_ID = 12
DEFAULT_PRESET = "2021"
DEFAULT_OUTPUT_PATH = Path("geomean_results.csv")
RANGE_PRESETS: Mapping[str, DateRange] = {
    "2021": DateRange(start=date(2021, 4, 1), end=date(2024, 4, 1)),
    "2022": DateRange(start=date(2022, 4, 1), end=date(2024, 4, 1)),
}
_KNOWN_KEYS = frozenset(
    {
        "province_id",
        "commodity_id",
        "commodity_label",
        "preset",
        "start_date",
        "end_date",
        "output_path",
        "timeout_seconds",
        "progress",
    }
)


def _coerce_to_str(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _source(config_path: Path | None) -> str:
    return str(config_path) if config_path is not None else "defaults"


def _parse_positive_int(value: Any, field: str, config_path: Path | None) -> int:
    if isinstance(value, bool):
        raise ConfigError(
            f"{field} must be a positive integer in {_source(config_path)}",
            context={"field": field, "value": str(value)},
        )
    try:
        parsed = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            f"{field} must be a positive integer in {_source(config_path)}",
            context={"field": field, "value": _coerce_to_str(value)},
        ) from exc
    if parsed < 1 or (isinstance(value, float) and not value.is_integer()):
        raise ConfigError(
            f"{field} must be a positive integer in {_source(config_path)}",
            context={"field": field, "value": _coerce_to_str(value)},
        )
    return parsed


def _parse_timeout(value: Any, config_path: Path | None) -> float:
    try:
        parsed = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            f"timeout_seconds must be a number in {_source(config_path)}",
            context={"field": "timeout_seconds", "value": _coerce_to_str(value)},
        ) from exc
    if parsed <= 0:
        raise ConfigError(
            f"timeout_seconds must be positive in {_source(config_path)}",
            context={"field": "timeout_seconds", "value": _coerce_to_str(value)},
        )
    return parsed


def _parse_bool(value: Any, field: str, config_path: Path | None) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(
            f"{field} must be true or false in {_source(config_path)}",
            context={"field": field, "value": _coerce_to_str(value)},
        )
    return value


def parse_iso_date(value: Any, field: str, config_path: Path | None) -> date:
    if isinstance(value, date):
        return value
    text = _coerce_to_str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise ConfigError(
            f"Invalid {field} '{text}' in {_source(config_path)}; "
            "expected YYYY-MM-DD.",
            context={"field": field, "value": text},
        ) from exc


def resolve_date_range(
    preset: str,
    start: Any,
    end: Any,
    config_path: Path | None,
) -> DateRange:
    if (start is None) != (end is None):
        raise ConfigError(
            f"start_date and end_date must be given together in "
            f"{_source(config_path)}"
        )
    if start is None:
        date_range = RANGE_PRESETS.get(preset)
        if date_range is None:
            raise ConfigError(
                f"Unknown preset '{preset}' in {_source(config_path)}",
                context={"preset": preset, "known": ",".join(RANGE_PRESETS)},
            )
        return date_range
    date_range = DateRange(
        start=parse_iso_date(start, "start_date", config_path),
        end=parse_iso_date(end, "end_date", config_path),
    )
    if date_range.end < date_range.start:
        raise ConfigError(
            f"end_date must not be before start_date in {_source(config_path)}",
            context={
                "start_date": date_range.start.isoformat(),
                "end_date": date_range.end.isoformat(),
            },
        )
    return date_range


@dataclass(frozen=True)
class GeomeanRequestConfig:
    province_id: int = DEFAULT_PROVINCE_ID
    commodity_id: int = DEFAULT_COMMODITY_ID
    commodity_label: str = DEFAULT_COMMODITY_LABEL
    date_range: DateRange = RANGE_PRESETS[DEFAULT_PRESET]
    output_path: Path = DEFAULT_OUTPUT_PATH
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    progress: bool = True
    config_path: Path | None = None

    @classmethod
    def load(
        cls, config_path: Path, *, required: bool = True
    ) -> "GeomeanRequestConfig":
        if not config_path.exists():
            if required:
                example_path = config_path.with_name(
                    f"{config_path.stem}.example{config_path.suffix}"
                )
                raise ConfigError(
                    f"Geomean config not found at {config_path}. "
                    f"Copy {example_path} and customize it.",
                    context={"path": str(config_path)},
                )
            return cls()
        return cls.from_mapping(_load_yaml_mapping(config_path), config_path)

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Any],
        config_path: Path | None = None,
    ) -> "GeomeanRequestConfig":
        unknown = sorted(set(mapping) - _KNOWN_KEYS)
        if unknown:
            raise ConfigError(
                f"Unknown keys in {_source(config_path)}: {', '.join(unknown)}",
                context={"keys": ",".join(unknown)},
            )
        preset = _coerce_to_str(mapping.get("preset")) or DEFAULT_PRESET
        label = _coerce_to_str(mapping.get("commodity_label"))
        output = _coerce_to_str(mapping.get("output_path"))
        return cls(
            province_id=_parse_positive_int(
                mapping.get("province_id", DEFAULT_PROVINCE_ID),
                "province_id",
                config_path,
            ),
            commodity_id=_parse_positive_int(
                mapping.get("commodity_id", DEFAULT_COMMODITY_ID),
                "commodity_id",
                config_path,
            ),
            commodity_label=label or DEFAULT_COMMODITY_LABEL,
            date_range=resolve_date_range(
                preset,
                mapping.get("start_date"),
                mapping.get("end_date"),
                config_path,
            ),
            output_path=Path(output) if output else DEFAULT_OUTPUT_PATH,
            timeout_seconds=_parse_timeout(
                mapping.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS),
                config_path,
            ),
            progress=_parse_bool(
                mapping.get("progress", True), "progress", config_path
            ),
            config_path=config_path,
        )

    def with_overrides(self, overrides: "GeomeanOverrides") -> "GeomeanRequestConfig":
        config = self
        if overrides.preset is not None or overrides.start is not None:
            config = replace(
                config,
                date_range=resolve_date_range(
                    overrides.preset or DEFAULT_PRESET,
                    overrides.start,
                    overrides.end,
                    None,
                ),
            )
        elif overrides.end is not None:
            raise ConfigError("--end requires --start")
        if overrides.province_id is not None:
            config = replace(
                config,
                province_id=_parse_positive_int(
                    overrides.province_id, "province_id", None
                ),
            )
        if overrides.commodity_id is not None:
            config = replace(
                config,
                commodity_id=_parse_positive_int(
                    overrides.commodity_id, "commodity_id", None
                ),
            )
        if overrides.output_path is not None:
            config = replace(config, output_path=overrides.output_path)
        if overrides.timeout_seconds is not None:
            config = replace(
                config,
                timeout_seconds=_parse_timeout(overrides.timeout_seconds, None),
            )
        if overrides.no_progress:
            config = replace(config, progress=False)
        return config


@dataclass(frozen=True)
class GeomeanOverrides:
    preset: str | None = None
    start: str | None = None
    end: str | None = None
    province_id: int | None = None
    commodity_id: int | None = None
    output_path: Path | None = None
    timeout_seconds: float | None = None
    no_progress: bool = False


def _load_yaml_mapping(config_path: Path) -> Mapping[str, Any]:
    raw_text = config_path.read_text(encoding="utf-8")
    try:
        raw_config: Any = yaml.safe_load(raw_text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML content in {config_path}") from exc

    if not isinstance(raw_config, Mapping):
        raise ConfigError(
            f"Geomean config must be a mapping in {config_path}"
        )
    return raw_config


def apply_env_overrides(config: GeomeanRequestConfig) -> GeomeanRequestConfig:
    timeout = optional_float("PANEL_HARGA_TIMEOUT_SECONDS")
    if timeout is None:
        return config
    if timeout <= 0:
        raise EnvVarError(
            "PANEL_HARGA_TIMEOUT_SECONDS must be positive",
            context={
                "env_var": "PANEL_HARGA_TIMEOUT_SECONDS",
                "value": str(timeout),
            },
        )
    return replace(config, timeout_seconds=timeout)
