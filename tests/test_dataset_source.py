"""Tests for dataset path probing and JSON row loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.dataset.source import DatasetLoadError, load_dataset, load_rows, resolve_dataset_path


def _write(path: Path, payload: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_explicit_path_wins_over_fallbacks(tmp_path: Path) -> None:
    explicit = _write(tmp_path / "explicit.json", [])
    fallback = _write(tmp_path / "data.json", [])
    assert resolve_dataset_path(explicit, [fallback]) == explicit


def test_missing_explicit_path_is_not_probed_past(tmp_path: Path) -> None:
    fallback = _write(tmp_path / "data.json", [])
    with pytest.raises(DatasetLoadError):
        resolve_dataset_path(tmp_path / "missing.json", [fallback])


def test_first_existing_fallback_is_used(tmp_path: Path) -> None:
    second = _write(tmp_path / "public" / "data.json", [])
    third = _write(tmp_path / "data" / "data.json", [])
    candidates = [tmp_path / "data.json", second, third]
    assert resolve_dataset_path(None, candidates) == second


def test_no_candidate_lists_probed_paths(tmp_path: Path) -> None:
    with pytest.raises(DatasetLoadError, match="a.json"):
        resolve_dataset_path(None, [tmp_path / "a.json"])


def test_load_rows_accepts_list_and_preserves_order(tmp_path: Path) -> None:
    rows = [{"s5_now_bin": "[0,1)", "stat": 1}, {"s5_now_bin": "[1,2)", "stat": 2}]
    loaded = load_rows(_write(tmp_path / "rows.json", rows))
    assert isinstance(loaded, tuple)
    assert [row["stat"] for row in loaded] == [1, 2]


def test_load_rows_accepts_rows_object(tmp_path: Path) -> None:
    loaded = load_rows(_write(tmp_path / "rows.json", {"rows": [{"stat": 1}]}))
    assert loaded == ({"stat": 1},)


@pytest.mark.parametrize("payload", [{"videos": []}, "rows", 3, [1, 2], [{"stat": 1}, None]])
def test_load_rows_rejects_unexpected_shapes(tmp_path: Path, payload: object) -> None:
    with pytest.raises(DatasetLoadError):
        load_rows(_write(tmp_path / "rows.json", payload))


def test_load_rows_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "rows.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DatasetLoadError, match="not valid JSON"):
        load_rows(path)


def test_load_dataset_returns_resolved_path(tmp_path: Path) -> None:
    path = _write(tmp_path / "data.json", [{"stat": 1}])
    resolved, rows = load_dataset(None, [tmp_path / "nope.json", path])
    assert resolved == path
    assert rows == ({"stat": 1},)
