from __future__ import annotations

import argparse
import logging
from functools import partial
from pathlib import Path
from typing import Sequence

from harga_pangan.application.geomean import (
    DEFAULT_CONFIG_PATH,
    RANGE_PRESETS,
    GeomeanOverrides,
    run,
)
from harga_pangan.domain import HargaPanganError
from harga_pangan.infrastructure import configure_logging, log_boundary

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="harga-pangan",
        description="Badan Pangan price panel command line interface.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help=f"Path to geomean config YAML (default: {DEFAULT_CONFIG_PATH}).",
    )
    subparsers = parser.add_subparsers(dest="command")

    geomean_parser = subparsers.add_parser(
        "geomean",
        help="Download daily province geomean prices into a CSV file.",
    )
    geomean_parser.add_argument(
        "--preset",
        choices=sorted(RANGE_PRESETS),
        help="Named historical date range.",
    )
    geomean_parser.add_argument(
        "--start",
        help="Start date in YYYY-MM-DD format (inclusive).",
    )
    geomean_parser.add_argument(
        "--end",
        help="End date in YYYY-MM-DD format (inclusive).",
    )
    geomean_parser.add_argument(
        "--province",
        type=int,
        help="Province id to extract.",
    )
    geomean_parser.add_argument(
        "--commodity",
        type=int,
        help="Commodity id to request.",
    )
    geomean_parser.add_argument(
        "--output",
        type=Path,
        help="CSV output path.",
    )
    geomean_parser.add_argument(
        "--timeout",
        type=float,
        help="Per-request timeout in seconds.",
    )
    geomean_parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar.",
    )

    return parser


def _build_overrides(args: argparse.Namespace) -> GeomeanOverrides:
    return GeomeanOverrides(
        preset=getattr(args, "preset", None),
        start=getattr(args, "start", None),
        end=getattr(args, "end", None),
        province_id=getattr(args, "province", None),
        commodity_id=getattr(args, "commodity", None),
        output_path=getattr(args, "output", None),
        timeout_seconds=getattr(args, "timeout", None),
        no_progress=getattr(args, "no_progress", False),
    )


def _run_geomean(
    config_path: Path | None, *, overrides: GeomeanOverrides
) -> int:
    run(config_path=config_path, overrides=overrides)
    return 0


def _run_missing_command() -> int:
    logger.error("No command given; try 'geomean'.")
    return 2


def _cli_context(argv: Sequence[str] | None) -> dict[str, str]:
    if not argv:
        return {}
    return {"argv": " ".join(argv)}


@log_boundary("cli.dispatch", context=_cli_context)
def _dispatch(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    config_path = getattr(args, "config", None)
    handlers = {
        None: _run_missing_command,
        "geomean": partial(
            _run_geomean, config_path, overrides=_build_overrides(args)
        ),
    }
    handler = handlers.get(args.command)
    if handler is None:
        logger.error("Unknown command: %s", args.command)
        return 2
    try:
        return handler()
    except HargaPanganError as exc:
        if exc.context:
            logger.error("Error: %s context=%s", exc, exc.context)
        else:
            logger.error("Error: %s", exc)
        return 1


def main(argv: Sequence[str] | None = None) -> int:
    configure_logging()
    return _dispatch(argv)


if __name__ == "__main__":
    raise SystemExit(main())
