"""Search input and match result models (Pydantic).

`SearchInputs` is the contract between input validation and the row matcher: only finite numbers
reach the scan. `MatchResult` keeps "no row matched" distinct from invalid input, which is reported
by raising `NonNumericInputError` instead.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, FiniteFloat, model_validator

from src.bins.columns import BinDimension
from src.bins.interval import parse_decimal

Row = dict[str, Any]


class SearchInputs(BaseModel):
    """One search value per bin dimension."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    s5: FiniteFloat
    s10: FiniteFloat
    s20: FiniteFloat

    @classmethod
    def from_raw(cls, *, s5: Any, s10: Any, s20: Any) -> SearchInputs:
        """Build inputs from raw user text using the interval bound number grammar.

        Raises:
            NonNumericInputError: For the first value (in s5, s10, s20 order) that is not a number.
        """

        return cls(
            s5=parse_decimal(s5, field=BinDimension.s5.value),
            s10=parse_decimal(s10, field=BinDimension.s10.value),
            s20=parse_decimal(s20, field=BinDimension.s20.value),
        )

    def value_for(self, dimension: BinDimension) -> float:
        return getattr(self, dimension.value)


class MatchResult(BaseModel):
    """Outcome of a row search: either the first matching row or not-found."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    found: bool
    row: Row | None = None
    row_index: int | None = None
    reason: str | None = None

    @model_validator(mode="after")
    def validate_tag(self) -> MatchResult:
        """A found result carries its row and position; a not-found result carries neither."""

        if self.found:
            if self.row is None or self.row_index is None:
                raise ValueError("row and row_index are required when found=true")
        elif self.row is not None or self.row_index is not None:
            raise ValueError("row and row_index must be null when found=false")
        return self

    @classmethod
    def matched(cls, row: Row, index: int) -> MatchResult:
        return cls(found=True, row=row, row_index=index)

    @classmethod
    def not_found(cls, reason: str | None = None) -> MatchResult:
        return cls(found=False, reason=reason)
