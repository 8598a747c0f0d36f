from __future__ import annotations

import functools
import logging
import time
from typing import Callable, Mapping, ParamSpec, TypeVar

from tqdm import tqdm

from harga_pangan.domain import EnvVarError
from .env import optional_env, require_env

LogContext = Mapping[str, str]
ContextFactory = Callable[..., LogContext]

P = ParamSpec("P")
R = TypeVar("R")

_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
_QUIET_LOGGERS = ("urllib3", "requests")


class TqdmConsoleHandler(logging.StreamHandler):
    """Console handler that prints above an active progress bar."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            tqdm.write(self.format(record), file=self.stream)
            self.flush()
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


def _build_console_handler() -> logging.Handler:
    return TqdmConsoleHandler()


def _build_file_handler() -> logging.Handler:
    path = require_env("LOG_FILE_PATH")
    return logging.FileHandler(path, encoding="utf-8")


_HANDLER_BUILDERS: dict[str, Callable[[], logging.Handler]] = {
    "console": _build_console_handler,
    "file": _build_file_handler,
}


def _resolve_destinations() -> list[str]:
    dest_value = optional_env("LOG_DEST") or "console"
    dest_names = [
        name.strip().lower() for name in dest_value.split(",") if name.strip()
    ]
    if not dest_names:
        raise EnvVarError(
            "LOG_DEST must include at least one destination",
            context={"env_var": "LOG_DEST", "value": dest_value},
        )
    return dest_names


def configure_logging() -> None:
    handlers: list[logging.Handler] = []
    for name in _resolve_destinations():
        builder = _HANDLER_BUILDERS.get(name)
        if builder is None:
            raise EnvVarError(
                "LOG_DEST must be 'console' or 'file'",
                context={"env_var": "LOG_DEST", "value": name},
            )
        handlers.append(builder())

    level = (optional_env("LOG_LEVEL") or "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        raise EnvVarError(
            "LOG_LEVEL must be a logging level name",
            context={"env_var": "LOG_LEVEL", "value": level},
        )
    logging.basicConfig(
        level=level,
        format=_LOG_FORMAT,
        handlers=handlers,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def log_boundary(
    name: str,
    *,
    logger: logging.Logger | None = None,
    context: LogContext | ContextFactory | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Log start, completion (with elapsed seconds) and failure of a call."""

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        log = logger or logging.getLogger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            resolved = _resolve_context(context, *args, **kwargs)
            _log_event(log, logging.INFO, "start", name, resolved)
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception:
                _log_event(log, logging.WARNING, "failed", name, resolved)
                raise
            elapsed = time.perf_counter() - started
            _log_event(
                log,
                logging.INFO,
                f"complete elapsed={elapsed:.2f}s",
                name,
                resolved,
            )
            return result

        return wrapper

    return decorator


def _resolve_context(
    context: LogContext | ContextFactory | None,
    *args: object,
    **kwargs: object,
) -> LogContext | None:
    if context is None:
        return None
    if callable(context):
        return context(*args, **kwargs)
    return context


def _log_event(
    log: logging.Logger,
    level: int,
    event: str,
    name: str,
    context: LogContext | None,
) -> None:
    if context:
        log.log(level, "event=%s boundary=%s context=%s", event, name, context)
    else:
        log.log(level, "event=%s boundary=%s", event, name)
