"""Cabin class definitions."""
from __future__ import annotations

from enum import Enum


class CabinClass(Enum):
    """Seat classes in booking order, with the label used in overbooking messages."""

    ECONOMY = ("economy", "economy")
    BUSINESS = ("business", "business")
    FIRST = ("first", "first-class")

    _key: str
    _label: str

    def __init__(self, key: str, label: str) -> None:
        self._key = key
        self._label = label

    @property
    def key(self) -> str:
        return self._key

    @property
    def label(self) -> str:
        return self._label
