"""Error kinds raised while building the report.

The two exception types share no base class beyond ``Exception``:
``DataLoadError`` aborts the whole run, while ``ValidationError`` only ever
describes a single flight record and is converted into a failure entry by the
batch processor.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from flightprofit.models.cabin_class import CabinClass


class FailureReason(Enum):
    """Why a flight record was rejected."""

    UNKNOWN_DESTINATION = "unknown_destination"
    UNKNOWN_AIRCRAFT = "unknown_aircraft"
    INSUFFICIENT_RANGE = "insufficient_range"
    TOTAL_OVERBOOKING = "total_overbooking"
    CLASS_OVERBOOKING = "class_overbooking"
    MALFORMED_RECORD = "malformed_record"


class DataLoadError(Exception):
    """An input table could not be read or the report could not be written."""


class ValidationError(Exception):
    """A single flight record failed one of the feasibility checks."""

    def __init__(self, reason: FailureReason, message: str, cabin: Optional["CabinClass"] = None) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message
        self.cabin = cabin
