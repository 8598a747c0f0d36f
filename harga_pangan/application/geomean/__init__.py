from .config import (
    DEFAULT_OUTPUT_PATH,
    DEFAULT_PROVINCE_ID,
    RANGE_PRESETS,
    GeomeanOverrides,
    GeomeanRequestConfig,
)
from .driver import fetch_date_range
from .runner import (
    DEFAULT_CONFIG_PATH,
    collect,
    load_config,
    run,
)
from .sorting import sort_records

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_OUTPUT_PATH",
    "DEFAULT_PROVINCE_ID",
    "RANGE_PRESETS",
    "GeomeanOverrides",
    "GeomeanRequestConfig",
    "collect",
    "fetch_date_range",
    "load_config",
    "run",
    "sort_records",
]
