from __future__ import annotations

import os

from dotenv import load_dotenv

from harga_pangan.domain import EnvVarError

load_dotenv()


def require_env(name: str) -> str:
    value = os.environ.get(name)
    if value is None or not value.strip():
        raise EnvVarError(
            f"{name} must be set in .env", context={"env_var": name}
        )
    return value


def optional_env(name: str) -> str | None:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return None
    return value


def optional_float(name: str) -> float | None:
    value = optional_env(name)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise EnvVarError(
            f"{name} must be a number in .env",
            context={"env_var": name, "value": value},
        ) from exc
