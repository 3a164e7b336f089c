"""Domain models for airports, aircraft and flight bookings."""

from .aircraft import AircraftRecord, aircraft_from_rows
from .airport import AirportRecord, DistanceColumn, airports_from_rows
from .cabin_class import CabinClass
from .flight import FlightFailure, FlightRequest, FlightResult

__all__ = [
    "AircraftRecord",
    "aircraft_from_rows",
    "AirportRecord",
    "DistanceColumn",
    "airports_from_rows",
    "CabinClass",
    "FlightFailure",
    "FlightRequest",
    "FlightResult",
]
