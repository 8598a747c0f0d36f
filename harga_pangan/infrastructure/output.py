from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from harga_pangan.domain import HargaPanganError


@dataclass(frozen=True)
class ErrorPolicy:
    error_type: type[HargaPanganError]
    message: str
    context: Mapping[str, str] | None = None


def ensure_directory(
    path: Path,
    *,
    error_type: type[HargaPanganError],
    invalid_message: str,
    create_message: str,
    context: Mapping[str, str] | None = None,
) -> None:
    if path.exists() and not path.is_dir():
        raise error_type(
            invalid_message,
            context=_merge_context(context, path),
        )
    try:
        path.mkdir(parents=True, exist_ok=True)
    except Exception as exc:
        raise error_type(
            create_message,
            context=_merge_context(context, path),
        ) from exc


def write_text_atomic(
    path: Path,
    content: str,
    *,
    error_policy: ErrorPolicy,
) -> None:
    """Write content to a sibling temp file, then swap it into place."""
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        tmp_path.write_bytes(content.encode("utf-8"))
        os.replace(tmp_path, path)
    except Exception as exc:
        tmp_path.unlink(missing_ok=True)
        _raise_with_policy(error_policy, path, exc)


def _merge_context(
    context: Mapping[str, str] | None,
    path: Path | None,
) -> dict[str, str]:
    merged = dict(context) if context else {}
    if path is not None and "path" not in merged:
        merged["path"] = str(path)
    return merged


def _raise_with_policy(
    policy: ErrorPolicy,
    path: Path,
    exc: Exception,
) -> None:
    raise policy.error_type(
        policy.message,
        context=_merge_context(policy.context, path),
    ) from exc
