"""Accepted column spellings for the bin fields.

Rows exported from spreadsheets carry either underscore or space separated headers. Lookups try the
spellings in the order listed here; no other header variant is recognized.
"""

from __future__ import annotations

from enum import StrEnum


class BinDimension(StrEnum):
    """The three bin dimensions a search is made over."""

    s5 = "s5"
    s10 = "s10"
    s20 = "s20"


BIN_FIELD_KEYS: dict[BinDimension, tuple[str, ...]] = {
    BinDimension.s5: ("s5_now_bin", "s5 now bin"),
    BinDimension.s10: ("s10_now_bin", "s10 now bin"),
    BinDimension.s20: ("s20_now_bin", "s20 now bin"),
}

ALL_BIN_KEYS: frozenset[str] = frozenset(key for keys in BIN_FIELD_KEYS.values() for key in keys)
