from .errors import (
    ConfigError,
    DataSourceError,
    EnvVarError,
    ExportError,
    HargaPanganError,
    ProviderError,
)

__all__ = (
    "ConfigError",
    "DataSourceError",
    "EnvVarError",
    "ExportError",
    "HargaPanganError",
    "ProviderError",
)
