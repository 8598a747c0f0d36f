from __future__ import annotations

from datetime import date
from typing import Protocol

from .models import PriceRecord, ResultCollection


class GeomeanFetcher(Protocol):
    def fetch(
        self, day: date, province_id: int, commodity_id: int = ...
    ) -> PriceRecord:
        """Return the geomean record for one day; never raises."""
        ...


class ProgressObserver(Protocol):
    def start(self, total: int) -> None:
        """Announce the number of steps before the sweep begins."""
        ...

    def increment(self) -> None:
        """Signal that one more step has completed."""
        ...

    def stop(self) -> None:
        """Signal that the sweep has ended."""
        ...


class PriceExporter(Protocol):
    def name(self) -> str:
        """Identifier for the exporter implementation."""
        ...

    def export(self, records: ResultCollection) -> None:
        """Persist the ordered records."""
        ...
