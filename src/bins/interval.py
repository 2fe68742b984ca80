"""Bracket-notation interval parsing and containment.

Supported forms:
    (a, b) -> a < x < b
    [a, b] -> a <= x <= b
    (a, b] -> a < x <= b
    [a, b) -> a <= x < b

Bounds are never reordered: an interval whose lower bound exceeds its upper bound is evaluated as the
two independent comparisons, which no value can satisfy at once.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

_NUMBER = r"-?[0-9]+\.?[0-9]*"
_NUMBER_RE = re.compile(_NUMBER)
_INTERVAL_RE = re.compile(
    rf"^(?P<open>[(\[])\s*(?P<lo>{_NUMBER})\s*,\s*(?P<hi>{_NUMBER})\s*(?P<close>[)\]])$"
)


class NonNumericInputError(ValueError):
    """Raised when a search value does not follow the decimal number grammar."""

    def __init__(self, field: str, raw: str) -> None:
        super().__init__(f"{field} must be a decimal number, got {raw!r}")
        self.field = field
        self.raw = raw


@dataclass(frozen=True)
class Interval:
    """A parsed interval with independently exclusive/inclusive bounds."""

    lower: float
    upper: float
    lower_inclusive: bool
    upper_inclusive: bool

    def contains(self, value: float) -> bool:
        above_lower = value >= self.lower if self.lower_inclusive else value > self.lower
        below_upper = value <= self.upper if self.upper_inclusive else value < self.upper
        return above_lower and below_upper


def parse_decimal(text: Any, *, field: str = "value") -> float:
    """Parse a raw search value using the interval bound grammar.

    Surrounding whitespace is ignored. Exponents, a leading `+` and a bare leading `.` are rejected,
    exactly as they are inside interval strings.

    Raises:
        NonNumericInputError: If the text is absent, does not match the grammar, or is not finite.
    """

    raw = "" if text is None else str(text)
    value = raw.strip()
    if not _NUMBER_RE.fullmatch(value):
        raise NonNumericInputError(field, raw)

    number = float(value)
    if not math.isfinite(number):
        raise NonNumericInputError(field, raw)
    return number


def parse_interval(interval_str: Any) -> Interval | None:
    """Parse an interval string.

    Returns `None` for an empty or non-string argument, and for text that does not follow the
    interval grammar (the latter is logged as a warning).
    """

    if not interval_str or not isinstance(interval_str, str):
        return None

    match = _INTERVAL_RE.match(interval_str.strip())
    if match is None:
        logger.warning("invalid interval format encountered: %r", interval_str)
        return None

    try:
        lower = float(match.group("lo"))
        upper = float(match.group("hi"))
    except ValueError:
        return None

    return Interval(
        lower=lower,
        upper=upper,
        lower_inclusive=match.group("open") == "[",
        upper_inclusive=match.group("close") == "]",
    )


def is_value_in_interval(value: float, interval_str: Any) -> bool:
    """Whether `value` lies within the interval encoded by `interval_str`.

    Never raises: empty, non-string and malformed interval strings all yield `False`.
    """

    interval = parse_interval(interval_str)
    if interval is None:
        return False
    return interval.contains(value)
