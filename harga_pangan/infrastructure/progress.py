from __future__ import annotations

from typing import TextIO

from tqdm import tqdm

PROGRESS_BAR_FORMAT = (
    "Scraping Progress: {bar} {percentage:3.0f}% | {n_fmt}/{total_fmt} dates"
)


class TqdmProgress:
    def __init__(
        self,
        *,
        bar_format: str = PROGRESS_BAR_FORMAT,
        file: TextIO | None = None,
    ) -> None:
        self._bar_format = bar_format
        self._file = file
        self._bar: tqdm | None = None

    def start(self, total: int) -> None:
        self.stop()
        self._bar = tqdm(
            total=total,
            initial=0,
            bar_format=self._bar_format,
            file=self._file,
            dynamic_ncols=True,
        )

    def increment(self) -> None:
        if self._bar is not None:
            self._bar.update(1)

    def stop(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None


class NullProgress:
    def start(self, total: int) -> None:
        return None

    def increment(self) -> None:
        return None

    def stop(self) -> None:
        return None
