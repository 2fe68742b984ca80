"""Locate and load a bin dataset file.

The dataset is a UTF-8 JSON document holding either a top-level list of row objects or an object with
a single `"rows"` key containing that list. Row order in the file is the search order.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class DatasetLoadError(ValueError):
    """Raised when a dataset file cannot be found, read, or has an unexpected shape."""


def resolve_dataset_path(explicit: str | Path | None, fallbacks: Sequence[str | Path] = ()) -> Path:
    """Pick the dataset file to load.

    An explicit path is used as-is and must exist. Otherwise the fallback candidates are probed in
    order and the first existing file wins.

    Raises:
        DatasetLoadError: If the explicit path is missing or no fallback candidate exists.
    """

    if explicit:
        path = Path(explicit)
        if not path.is_file():
            raise DatasetLoadError(f"Dataset file not found: {path}")
        return path

    for candidate in fallbacks:
        path = Path(candidate)
        if path.is_file():
            return path
        logger.debug("dataset candidate missing path=%s", path)

    probed = ", ".join(str(c) for c in fallbacks) or "<none>"
    raise DatasetLoadError(f"No dataset file found (probed: {probed})")


def _extract_rows(payload: Any) -> list[Any]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("rows"), list):
        return payload["rows"]
    raise DatasetLoadError(
        "Unexpected dataset format: expected a list of rows or an object with key 'rows'"
    )


def load_rows(path: str | Path) -> tuple[dict[str, Any], ...]:
    """Load the dataset rows from `path`, preserving file order."""

    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise DatasetLoadError(f"Cannot read dataset file {path}: {exc}") from exc
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DatasetLoadError(f"Dataset file {path} is not valid JSON: {exc}") from exc

    rows = _extract_rows(payload)
    for position, row in enumerate(rows):
        if not isinstance(row, dict):
            raise DatasetLoadError(f"Row {position} in {path} is not an object")

    logger.info("dataset loaded path=%s rows=%d", path, len(rows))
    return tuple(rows)


def load_dataset(
        explicit: str | Path | None,
        fallbacks: Sequence[str | Path] = (),
) -> tuple[Path, tuple[dict[str, Any], ...]]:
    """Resolve the dataset path and load its rows."""

    path = resolve_dataset_path(explicit, fallbacks)
    return path, load_rows(path)
