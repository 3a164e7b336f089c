"""Airport model and table building utilities."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Sequence

from flightprofit.config import AIRPORTS_FILE, PRIMARY_ORIGINS
from flightprofit.errors import DataLoadError
from flightprofit.parsing import parse_number

AIRPORT_COLUMNS = 4


class DistanceColumn(Enum):
    """Which of the two precomputed distance figures applies to an origin."""

    PRIMARY = "primary"
    ALTERNATE = "alternate"


DEFAULT_ORIGIN_COLUMNS: Dict[str, DistanceColumn] = {code: DistanceColumn.PRIMARY for code in PRIMARY_ORIGINS}


def distance_column_for(origin_code: str, origin_columns: Mapping[str, DistanceColumn]) -> DistanceColumn:
    """Unmapped origins fall back to the alternate column."""
    return origin_columns.get(origin_code, DistanceColumn.ALTERNATE)


@dataclass(frozen=True)
class AirportRecord:
    """An overseas destination with its distance from each UK origin."""

    code: str
    name: str
    distance_from_primary: float
    distance_from_alternate: float

    def distance_from(self, column: DistanceColumn) -> float:
        if column is DistanceColumn.PRIMARY:
            return self.distance_from_primary
        return self.distance_from_alternate


def airports_from_rows(rows: Sequence[Sequence[str]], source: str = AIRPORTS_FILE) -> Dict[str, AirportRecord]:
    """Build the airport lookup keyed by code; the first row for a code wins."""
    airports: Dict[str, AirportRecord] = {}
    for line_no, row in enumerate(rows, start=1):
        if len(row) < AIRPORT_COLUMNS:
            raise DataLoadError(f"{source}: row {line_no} has {len(row)} fields, expected {AIRPORT_COLUMNS}")
        code, name, primary, alternate = row[:AIRPORT_COLUMNS]
        try:
            airport = AirportRecord(
                code=code,
                name=name,
                distance_from_primary=parse_number(primary),
                distance_from_alternate=parse_number(alternate),
            )
        except ValueError as exc:
            raise DataLoadError(f"{source}: row {line_no} ({code}): {exc}") from exc
        airports.setdefault(code, airport)
    return airports
