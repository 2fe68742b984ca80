"""Command-line lookup of the bin row matching three values.

Exit codes: `0` when a row matches, `1` when no row matches, `2` when a value is not a number, an option
is rejected (argparse usage errors, such as an unknown `--log-level`), or the dataset or configuration
cannot be loaded. Invalid numbers are never reported as "no match".
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Mapping, Sequence
from time import monotonic
from typing import Any, TextIO

from src.app import create_app
from src.bins.columns import ALL_BIN_KEYS
from src.bins.interval import NonNumericInputError
from src.bins.matcher import find_match_for_raw_inputs
from src.bins.schema import MatchResult
from src.config.logging import configure_logging
from src.config.settings import LOG_LEVELS, load_settings
from src.dataset.source import DatasetLoadError

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2


def split_row_fields(row: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split a row into its bin fields and the remaining statistics, keeping column order."""

    bins = {key: value for key, value in row.items() if key in ALL_BIN_KEYS}
    stats = {key: value for key, value in row.items() if key not in ALL_BIN_KEYS}
    return bins, stats


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def render_result(result: MatchResult) -> str:
    """Render a match result as plain text."""

    if not result.found or result.row is None:
        return f"No match found: {result.reason or 'no row contains all three values'}"

    bins, stats = split_row_fields(result.row)
    lines = [f"Match found (row {result.row_index})", "Bins:"]
    lines.extend(f"  {key}: {_format_value(value)}" for key, value in bins.items())
    if stats:
        lines.append("Statistics:")
        lines.extend(f"  {key}: {_format_value(value)}" for key, value in stats.items())
    return "\n".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the first dataset row whose s5/s10/s20 bins contain the given values."
    )
    parser.add_argument(
        "--dataset",
        help="Path to the dataset JSON file. Defaults to DATASET_PATH or the configured fallbacks.",
    )
    parser.add_argument("--s5", required=True, help="Value for the s5_now_bin interval.")
    parser.add_argument("--s10", required=True, help="Value for the s10_now_bin interval.")
    parser.add_argument("--s20", required=True, help="Value for the s20_now_bin interval.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(LOG_LEVELS),
        help="Override LOG_LEVEL for this run.",
    )
    return parser


def main(argv: Sequence[str] | None = None, *, out: TextIO | None = None) -> int:
    """CLI entry point. Returns the process exit code."""

    out = out or sys.stdout
    args = _build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except RuntimeError as exc:
        print(str(exc), file=out)
        return EXIT_USAGE

    configure_logging(args.log_level or settings.log_level)

    try:
        app = create_app(settings, dataset_path=args.dataset)
    except DatasetLoadError as exc:
        logger.error("dataset unavailable reason=%s", exc)
        print(f"Dataset error: {exc}", file=out)
        return EXIT_USAGE

    started = monotonic()
    try:
        result = find_match_for_raw_inputs(app.dataset, s5=args.s5, s10=args.s10, s20=args.s20)
    except NonNumericInputError as exc:
        logger.info("rejected field=%s", exc.field)
        print(f"Invalid input: {exc}", file=out)
        return EXIT_USAGE

    latency_ms = int((monotonic() - started) * 1000)
    logger.info(
        "lookup found=%s row_index=%s rows=%d latency_ms=%d",
        result.found,
        result.row_index,
        len(app.dataset),
        latency_ms,
    )
    print(render_result(result), file=out)
    return EXIT_FOUND if result.found else EXIT_NOT_FOUND


if __name__ == "__main__":
    sys.exit(main())
