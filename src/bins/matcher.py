"""First-match row search over an ordered dataset.

A row matches when each of its three bin intervals contains the corresponding search value. Rows are
scanned in dataset order and the first match wins, so load order is significant. The matcher keeps no
state between calls.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from src.bins.columns import BIN_FIELD_KEYS, BinDimension
from src.bins.interval import is_value_in_interval
from src.bins.schema import MatchResult, SearchInputs


def resolve_bin_value(row: Mapping[str, Any], dimension: BinDimension) -> str:
    """Return the bin field of `row` as text, trying each accepted spelling in order.

    Missing, `None` and empty values fall through to the next spelling; `""` when none is set.
    """

    for key in BIN_FIELD_KEYS[dimension]:
        value = row.get(key)
        if value is not None and value != "":
            return str(value)
    return ""


def row_matches(row: Mapping[str, Any], inputs: SearchInputs) -> bool:
    """Whether all three bin intervals of `row` contain the corresponding input values."""

    return all(
        is_value_in_interval(inputs.value_for(dimension), resolve_bin_value(row, dimension))
        for dimension in BinDimension
    )


def find_match(dataset: Sequence[Mapping[str, Any]], inputs: SearchInputs) -> MatchResult:
    """Find the first row in `dataset` whose bins contain `inputs`."""

    if not dataset:
        return MatchResult.not_found("dataset is empty")

    for index, row in enumerate(dataset):
        if row_matches(row, inputs):
            return MatchResult.matched(dict(row), index)

    return MatchResult.not_found(
        "the input values do not fall into any of the provided bin combinations"
    )


def find_match_for_raw_inputs(
        dataset: Sequence[Mapping[str, Any]],
        *,
        s5: Any,
        s10: Any,
        s20: Any,
) -> MatchResult:
    """Validate raw search values, then run `find_match`.

    Raises:
        NonNumericInputError: If any value is not a decimal number. The dataset is not scanned.
    """

    inputs = SearchInputs.from_raw(s5=s5, s10=s10, s20=s20)
    return find_match(dataset, inputs)
