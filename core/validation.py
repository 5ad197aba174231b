"""
core/validation.py

Parsing of numeric parameter input.

Text fields pass through transient states ("", "1", "1.") while the user is
typing. These helpers never raise on bad input; they return None so the caller
can keep its last valid value.
"""

import math
import re
from numbers import Real
from typing import Optional, Union

_INTEGER_PREFIX = re.compile(r'^\s*([+-]?\d+)')
_DECIMAL_PREFIX = re.compile(r'^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')

RawNumber = Union[str, int, float]


def _is_number(value) -> bool:
    # bool is a Real subclass but never a valid payload
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_finite(value) -> bool:
    # float() of a huge int overflows instead of returning inf
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def parse_integer(raw: RawNumber) -> Optional[int]:
    """
    Parse a base-10 integer from text or a numeric control value.

    Leading whitespace is skipped and the longest leading run of digits is
    used, so "50mm" parses as 50 and "1.9" as 1. Integers too large to use
    as a float are rejected.

    Args:
        raw: Text typed by the user, or a number from a slider

    Returns:
        Parsed integer, or None if no integer could be read
    """
    if _is_number(raw):
        if not _is_finite(raw):
            return None
        return int(raw)
    if not isinstance(raw, str):
        return None
    match = _INTEGER_PREFIX.match(raw)
    if match is None:
        return None
    try:
        value = int(match.group(1), 10)
    except ValueError:
        # Beyond the interpreter's integer string conversion limit
        return None
    if not _is_finite(value):
        return None
    return value


def parse_decimal(raw: RawNumber) -> Optional[float]:
    """Parse a finite decimal number, or return None."""
    if not _is_number(raw) and not isinstance(raw, str):
        return None
    if isinstance(raw, str):
        match = _DECIMAL_PREFIX.match(raw)
        if match is None:
            return None
        raw = match.group(1)
    try:
        value = float(raw)
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(value):
        return None
    return value


def round_to_tenth(value: float) -> float:
    """Round half up to one decimal place (1.37 -> 1.4, 1.25 -> 1.3)."""
    scaled = value * 10
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / 10


def parse_tenths(raw: RawNumber) -> Optional[float]:
    """
    Parse a decimal number quantized to tenths.

    Args:
        raw: Text typed by the user, or a number from a slider

    Returns:
        Value rounded to the nearest tenth, or None if parsing failed
    """
    value = parse_decimal(raw)
    if value is None:
        return None
    return round_to_tenth(value)


def format_number(value: Union[int, float]) -> str:
    """Format a canonical value for re-display in a text field."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e15:
        # Keep a single decimal so f-numbers read as "2.0" rather than "2"
        return f'{value:.1f}'
    return str(value)
