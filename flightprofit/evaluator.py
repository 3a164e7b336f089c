"""Feasibility checks and profit calculation for a single flight."""
from __future__ import annotations

from typing import Mapping, Optional

from flightprofit.errors import FailureReason, ValidationError
from flightprofit.models.aircraft import AircraftRecord
from flightprofit.models.airport import DEFAULT_ORIGIN_COLUMNS, AirportRecord, DistanceColumn, distance_column_for
from flightprofit.models.cabin_class import CabinClass
from flightprofit.models.flight import FlightRequest, FlightResult


def evaluate(
    request: FlightRequest,
    airports: Mapping[str, AirportRecord],
    aircraft: Mapping[str, AircraftRecord],
    origin_columns: Optional[Mapping[str, DistanceColumn]] = None,
) -> FlightResult:
    """
    Validate a booking against the reference tables and work out its profit.

    Checks run in a fixed order and the first failure is raised as a
    ``ValidationError``: destination, aircraft, range, total seats, then seats
    per class (economy, business, first). Figures are left unrounded.
    """
    airport = airports.get(request.destination_code)
    if airport is None:
        raise ValidationError(
            FailureReason.UNKNOWN_DESTINATION,
            f"Invalid airport code: {request.destination_code}",
        )

    if origin_columns is None:
        origin_columns = DEFAULT_ORIGIN_COLUMNS
    column = distance_column_for(request.origin_code, origin_columns)
    distance = airport.distance_from(column)

    plane = aircraft.get(request.aircraft_type)
    if plane is None:
        raise ValidationError(
            FailureReason.UNKNOWN_AIRCRAFT,
            f"Invalid aircraft type: {request.aircraft_type}",
        )

    running_cost = plane.running_cost_per_km

    if distance > plane.max_range_km:
        raise ValidationError(
            FailureReason.INSUFFICIENT_RANGE,
            f"{request.aircraft_type} doesn't have the range to fly to {request.destination_code}",
        )

    total_booked = request.total_booked
    if total_booked > plane.total_capacity:
        raise ValidationError(
            FailureReason.TOTAL_OVERBOOKING,
            f"Too many total seats booked ({total_booked} > {plane.total_capacity})",
        )

    booked = request.booked
    for cabin in CabinClass:
        capacity = plane.capacity_for(cabin)
        if booked[cabin] > capacity:
            raise ValidationError(
                FailureReason.CLASS_OVERBOOKING,
                f"Too many {cabin.label} seats booked ({booked[cabin]} > {capacity})",
                cabin=cabin,
            )

    prices = request.prices
    income = sum(booked[cabin] * prices[cabin] for cabin in CabinClass)
    cost_per_seat = running_cost * distance
    cost = cost_per_seat * total_booked
    return FlightResult(request=request, income=income, cost=cost, profit=income - cost)
