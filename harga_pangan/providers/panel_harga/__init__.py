from .client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, PanelHargaClient
from .provider import (
    DEFAULT_COMMODITY_ID,
    PanelHargaGeomeanFetcher,
    build_price_path,
    extract_geomean,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_COMMODITY_ID",
    "DEFAULT_TIMEOUT_SECONDS",
    "PanelHargaClient",
    "PanelHargaGeomeanFetcher",
    "build_price_path",
    "extract_geomean",
]
