"""Application composition root.

This module wires together configuration and the loaded dataset for the lookup runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from src.config.settings import Settings
from src.dataset.source import load_dataset


@dataclass(frozen=True)
class App:
    """Shared application dependencies for lookups."""

    settings: Settings
    dataset: tuple[dict[str, Any], ...]
    dataset_path: Path


def create_app(settings: Settings, *, dataset_path: str | Path | None = None) -> App:
    """Create the application container.

    `dataset_path` overrides `settings.dataset_path`; without either, the configured fallback paths
    are probed.

    Raises:
        DatasetLoadError: If no dataset can be found or loaded.
    """

    path, rows = load_dataset(
        dataset_path or settings.dataset_path,
        settings.dataset_fallback_paths,
    )
    return App(settings=settings, dataset=rows, dataset_path=path)
