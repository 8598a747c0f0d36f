"""Provider implementations for price panel data."""

from .panel_harga import PanelHargaClient, PanelHargaGeomeanFetcher

__all__ = ["PanelHargaClient", "PanelHargaGeomeanFetcher"]
