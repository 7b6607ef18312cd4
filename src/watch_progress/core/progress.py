"""
Completion percentage calculation.

A tracked value is either a clock-style duration or a plain count. The
kind is decided by the shape of the declared total: any duration
separator makes it a duration, anything else is a count. Both sides of
the ratio are then measured the same way.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .timevalue import TIME_SEPARATORS, parse_duration

_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


class ValueKind(Enum):
    """How completed and total amounts are measured."""
    DURATION = "duration"
    COUNT = "count"


@dataclass(frozen=True)
class Duration:
    """Elapsed playback time in seconds."""
    seconds: int

    @property
    def measure(self) -> float:
        try:
            return float(self.seconds)
        except OverflowError:
            return math.inf


@dataclass(frozen=True)
class Count:
    """Number of items, e.g. videos watched."""
    value: float

    @property
    def measure(self) -> float:
        return self.value


Measure = Union[Duration, Count]


def detect_kind(total: str) -> ValueKind:
    """Decide the value kind from the shape of a total.

    Args:
        total: Raw total text

    Returns:
        ValueKind.DURATION if the text contains a duration separator,
        ValueKind.COUNT otherwise
    """
    if total and any(sep in total for sep in TIME_SEPARATORS):
        return ValueKind.DURATION
    return ValueKind.COUNT


def parse_count(text: str) -> float:
    """Parse the leading decimal number of text, 0 when there is none."""
    if not text:
        return 0.0

    match = _LEADING_FLOAT.match(text)
    if not match:
        return 0.0

    # Numbers beyond float range come out as infinity
    return float(match.group(1))


def measure_value(text: str, kind: ValueKind) -> Measure:
    """Build the tagged measure for raw text of a known kind."""
    if kind is ValueKind.DURATION:
        return Duration(parse_duration(text))
    return Count(parse_count(text))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def percent_for_kind(completed: str, total: str, kind: ValueKind) -> int:
    """Compute the completion percentage for an already known kind.

    Args:
        completed: Raw completed text
        total: Raw total text
        kind: Measurement kind for both values

    Returns:
        Integer percentage in [0, 100]; 0 when the total measures zero or
        is too large to represent
    """
    total_measure = measure_value(total, kind).measure
    if not math.isfinite(total_measure) or total_measure <= 0:
        return 0

    completed_measure = measure_value(completed, kind).measure
    if math.isnan(completed_measure) or completed_measure <= 0:
        return 0

    ratio = completed_measure / total_measure
    if ratio >= 1:
        return 100

    return max(0, min(round_half_up(ratio * 100), 100))


def compute_percent(completed: str, total: str) -> int:
    """Compute the completion percentage of raw completed/total text.

    >>> compute_percent("30:00", "1:00:00")
    50
    >>> compute_percent("12", "10")
    100
    """
    return percent_for_kind(completed, total, detect_kind(total))


def remaining_percent(completed_percent: int) -> int:
    """Percentage left, always complementary to the completed percentage."""
    return 100 - completed_percent
