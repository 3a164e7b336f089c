"""Typed conversions for raw table fields.

Every numeric field read from the input tables passes through one of these
helpers so the evaluator only ever sees finite floats and ints.
"""
from __future__ import annotations

import math

CURRENCY_SYMBOLS = "£$€"


def _finite(text: str, original: str, kind: str) -> float:
    try:
        value = float(text)
    except ValueError as exc:
        raise ValueError(f"Expected {kind}, got {original!r}") from exc
    if not math.isfinite(value):
        raise ValueError(f"Expected {kind}, got {original!r}")
    return value


def parse_number(value: str) -> float:
    return _finite(value.strip(), value, "a number")


def parse_count(value: str) -> int:
    """Parse a whole seat count or capacity."""
    text = value.strip()
    try:
        return int(text)
    except ValueError as exc:
        raise ValueError(f"Expected a whole number, got {value!r}") from exc


def parse_currency(value: str) -> float:
    """Parse an amount such as ``£7`` or ``399``; at most one leading currency symbol is allowed."""
    text = value.strip()
    if text and text[0] in CURRENCY_SYMBOLS:
        text = text[1:].strip()
    return _finite(text, value, "a currency amount")
