"""Run the evaluator over a whole dataset, keeping failures per record."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from flightprofit.errors import ValidationError
from flightprofit.evaluator import evaluate
from flightprofit.models.aircraft import AircraftRecord
from flightprofit.models.airport import AirportRecord, DistanceColumn
from flightprofit.models.flight import FlightFailure, FlightRequest, FlightResult, join_fields


@dataclass
class BatchOutcome:
    successes: List[FlightResult] = field(default_factory=list)
    failures: List[FlightFailure] = field(default_factory=list)

    @property
    def error_messages(self) -> List[str]:
        return [failure.message for failure in self.failures]


def _evaluate_record(
    record: Union[FlightRequest, Sequence[str]],
    airports: Mapping[str, AirportRecord],
    aircraft: Mapping[str, AircraftRecord],
    origin_columns: Optional[Mapping[str, DistanceColumn]],
) -> FlightResult:
    request = record if isinstance(record, FlightRequest) else FlightRequest.from_row(record)
    return evaluate(request, airports, aircraft, origin_columns)


def _details_of(record: Union[FlightRequest, Sequence[str]]) -> str:
    if isinstance(record, FlightRequest):
        return record.details
    return join_fields(record)


def process_all(
    requests: Iterable[Union[FlightRequest, Sequence[str]]],
    airports: Mapping[str, AirportRecord],
    aircraft: Mapping[str, AircraftRecord],
    origin_columns: Optional[Mapping[str, DistanceColumn]] = None,
) -> BatchOutcome:
    """
    Evaluate every record independently, in input order.

    Records may be parsed ``FlightRequest`` objects or raw table rows; a raw
    row that cannot be converted is reported like any other invalid flight.
    A failing record never stops the rest of the batch.
    """
    outcome = BatchOutcome()
    for record in requests:
        try:
            result = _evaluate_record(record, airports, aircraft, origin_columns)
        except ValidationError as exc:
            outcome.failures.append(FlightFailure(details=_details_of(record), reason=exc.reason, error=exc.message))
            continue
        outcome.successes.append(result)
    return outcome


def process_rows(
    rows: Iterable[Sequence[str]],
    airports: Mapping[str, AirportRecord],
    aircraft: Mapping[str, AircraftRecord],
    origin_columns: Optional[Mapping[str, DistanceColumn]] = None,
) -> BatchOutcome:
    """Same as :func:`process_all` for rows straight from :func:`flightprofit.table.read_table`."""
    return process_all(rows, airports, aircraft, origin_columns)
