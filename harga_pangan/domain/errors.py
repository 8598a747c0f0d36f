from __future__ import annotations

from typing import Mapping

ErrorContext = Mapping[str, str]


class HargaPanganError(Exception):
    def __init__(
        self, message: str, *, context: ErrorContext | None = None
    ) -> None:
        self.context = dict(context) if context else {}
        super().__init__(message)


class ConfigError(HargaPanganError):
    pass


class EnvVarError(HargaPanganError):
    pass


class ProviderError(HargaPanganError):
    pass


class ExportError(HargaPanganError):
    pass


class DataSourceError(HargaPanganError):
    pass
