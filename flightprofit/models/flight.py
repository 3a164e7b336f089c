"""Flight booking request and evaluation outcome models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from flightprofit.errors import FailureReason, ValidationError
from flightprofit.parsing import parse_count, parse_currency

from .cabin_class import CabinClass

FLIGHT_COLUMNS = 9


def join_fields(fields: Sequence[str]) -> str:
    return ", ".join(fields)


def _amount(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


@dataclass(frozen=True)
class FlightRequest:
    """One booking row, in the fixed positional order of the flight tables."""

    origin_code: str
    destination_code: str
    aircraft_type: str
    economy_booked: int
    business_booked: int
    first_booked: int
    economy_price: float
    business_price: float
    first_price: float
    fields: Tuple[str, ...] = ()

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "FlightRequest":
        """Convert raw string fields, raising ``ValidationError`` for unusable rows."""
        if len(row) != FLIGHT_COLUMNS:
            raise ValidationError(
                FailureReason.MALFORMED_RECORD,
                f"Expected {FLIGHT_COLUMNS} fields, got {len(row)}",
            )
        origin, destination, aircraft_type, economy, business, first, economy_price, business_price, first_price = row
        try:
            return cls(
                origin_code=origin,
                destination_code=destination,
                aircraft_type=aircraft_type,
                economy_booked=parse_count(economy),
                business_booked=parse_count(business),
                first_booked=parse_count(first),
                economy_price=parse_currency(economy_price),
                business_price=parse_currency(business_price),
                first_price=parse_currency(first_price),
                fields=tuple(row),
            )
        except ValueError as exc:
            raise ValidationError(FailureReason.MALFORMED_RECORD, str(exc)) from exc

    @property
    def booked(self) -> Dict[CabinClass, int]:
        return {
            CabinClass.ECONOMY: self.economy_booked,
            CabinClass.BUSINESS: self.business_booked,
            CabinClass.FIRST: self.first_booked,
        }

    @property
    def prices(self) -> Dict[CabinClass, float]:
        return {
            CabinClass.ECONOMY: self.economy_price,
            CabinClass.BUSINESS: self.business_price,
            CabinClass.FIRST: self.first_price,
        }

    @property
    def total_booked(self) -> int:
        return self.economy_booked + self.business_booked + self.first_booked

    @property
    def details(self) -> str:
        """Original fields as they appear in reports."""
        if self.fields:
            return join_fields(self.fields)
        return join_fields(
            [
                self.origin_code,
                self.destination_code,
                self.aircraft_type,
                str(self.economy_booked),
                str(self.business_booked),
                str(self.first_booked),
                _amount(self.economy_price),
                _amount(self.business_price),
                _amount(self.first_price),
            ]
        )


@dataclass(frozen=True)
class FlightResult:
    request: FlightRequest
    income: float
    cost: float
    profit: float


@dataclass(frozen=True)
class FlightFailure:
    """A rejected record, tied back to the fields it was read from."""

    details: str
    reason: FailureReason
    error: str

    @property
    def message(self) -> str:
        return f"Flight Data: {self.details} - Error: {self.error}"
