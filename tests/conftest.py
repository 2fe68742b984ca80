"""Pytest configuration.

The repository uses a flat `src/` layout. This conftest ensures tests can import from the `src.*`
namespace when running `pytest` locally without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure `import src...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def two_row_dataset() -> list[dict[str, object]]:
    return [
        {"s5_now_bin": "(-50,-45]", "s10_now_bin": "[0,5)", "s20_now_bin": "(10,20]", "stat": 1},
        {"s5_now_bin": "[-45,-40)", "s10_now_bin": "[0,5)", "s20_now_bin": "(10,20]", "stat": 2},
    ]
