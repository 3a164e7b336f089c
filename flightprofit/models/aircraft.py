"""Aircraft type model and table building utility."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

from flightprofit.config import AIRCRAFT_FILE
from flightprofit.errors import DataLoadError
from flightprofit.parsing import parse_count, parse_currency, parse_number

from .cabin_class import CabinClass

AIRCRAFT_COLUMNS = 6


@dataclass(frozen=True)
class AircraftRecord:
    type: str
    cost_per_seat_per_100km: float
    max_range_km: float
    economy_capacity: int
    business_capacity: int
    first_capacity: int

    @property
    def running_cost_per_km(self) -> float:
        """Running cost per seat per km; the table quotes it per 100 km."""
        return self.cost_per_seat_per_100km / 100

    @property
    def total_capacity(self) -> int:
        return self.economy_capacity + self.business_capacity + self.first_capacity

    def capacity_for(self, cabin: CabinClass) -> int:
        if cabin is CabinClass.ECONOMY:
            return self.economy_capacity
        if cabin is CabinClass.BUSINESS:
            return self.business_capacity
        return self.first_capacity


def aircraft_from_rows(rows: Sequence[Sequence[str]], source: str = AIRCRAFT_FILE) -> Dict[str, AircraftRecord]:
    """Build the aircraft lookup keyed by type name; the first row for a type wins."""
    aircraft: Dict[str, AircraftRecord] = {}
    for line_no, row in enumerate(rows, start=1):
        if len(row) < AIRCRAFT_COLUMNS:
            raise DataLoadError(f"{source}: row {line_no} has {len(row)} fields, expected {AIRCRAFT_COLUMNS}")
        type_name, running_cost, max_range, economy, business, first = row[:AIRCRAFT_COLUMNS]
        try:
            record = AircraftRecord(
                type=type_name,
                cost_per_seat_per_100km=parse_currency(running_cost),
                max_range_km=parse_number(max_range),
                economy_capacity=parse_count(economy),
                business_capacity=parse_count(business),
                first_capacity=parse_count(first),
            )
        except ValueError as exc:
            raise DataLoadError(f"{source}: row {line_no} ({type_name}): {exc}") from exc
        aircraft.setdefault(type_name, record)
    return aircraft
