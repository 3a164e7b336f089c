"""Feasibility checks and profit calculation for single flights."""
from __future__ import annotations

import unittest

from flightprofit.errors import FailureReason, ValidationError
from flightprofit.evaluator import evaluate
from flightprofit.models import CabinClass, DistanceColumn, FlightRequest, aircraft_from_rows, airports_from_rows

AIRPORT_ROWS = [
    ["JFK", "John F Kennedy International", "5376", "5583"],
    ["ORY", "Paris-Orly", "610", "325"],
]
AIRCRAFT_ROWS = [
    ["Medium narrow body", "£8", "2650", "160", "12", "0"],
    ["Large narrow body", "£7", "5600", "180", "20", "4"],
]


def _request(*fields: str) -> FlightRequest:
    return FlightRequest.from_row(list(fields))


class EvaluateTest(unittest.TestCase):
    def setUp(self) -> None:
        self.airports = airports_from_rows(AIRPORT_ROWS)
        self.aircraft = aircraft_from_rows(AIRCRAFT_ROWS)

    def _evaluate(self, request: FlightRequest, **kwargs):
        return evaluate(request, self.airports, self.aircraft, **kwargs)

    def _reason(self, request: FlightRequest) -> ValidationError:
        with self.assertRaises(ValidationError) as ctx:
            self._evaluate(request)
        return ctx.exception

    def test_profitable_transatlantic_flight(self) -> None:
        result = self._evaluate(_request("MAN", "JFK", "Large narrow body", "150", "12", "2", "399", "999", "1899"))
        self.assertEqual(f"{result.income:.2f}", "75636.00")
        self.assertEqual(f"{result.cost:.2f}", "61716.48")
        self.assertEqual(f"{result.profit:.2f}", "13919.52")

    def test_profit_is_unrounded_difference(self) -> None:
        result = self._evaluate(_request("MAN", "JFK", "Large narrow body", "150", "12", "2", "399", "999", "1899"))
        self.assertEqual(result.profit, result.income - result.cost)

    def test_other_origins_use_alternate_distance(self) -> None:
        result = self._evaluate(_request("LGW", "ORY", "Medium narrow body", "120", "8", "0", "150", "450", "0"))
        self.assertAlmostEqual(result.income, 21600.0)
        self.assertAlmostEqual(result.cost, 0.08 * 325 * 128)
        self.assertAlmostEqual(result.profit, 21600.0 - 3328.0)

    def test_origin_mapping_can_be_overridden(self) -> None:
        request = _request("LGW", "ORY", "Medium narrow body", "120", "8", "0", "150", "450", "0")
        result = self._evaluate(request, origin_columns={"LGW": DistanceColumn.PRIMARY})
        self.assertAlmostEqual(result.cost, 0.08 * 610 * 128)

    def test_empty_origin_mapping_puts_every_origin_on_alternate_column(self) -> None:
        request = _request("MAN", "ORY", "Medium narrow body", "120", "8", "0", "150", "450", "0")
        result = self._evaluate(request, origin_columns={})
        self.assertAlmostEqual(result.cost, 0.08 * 325 * 128)

    def test_loss_making_flight_has_negative_profit(self) -> None:
        result = self._evaluate(_request("MAN", "JFK", "Large narrow body", "100", "0", "0", "10", "0", "0"))
        self.assertLess(result.profit, 0)

    def test_unknown_destination_wins_over_everything(self) -> None:
        variants = [
            ("MAN", "INVALID", "Large narrow body", "150", "12", "2", "399", "999", "1899"),
            ("LGW", "XXX", "No such plane", "999", "999", "999", "1", "1", "1"),
            ("MAN", "jfk", "Medium narrow body", "0", "0", "0", "0", "0", "0"),
        ]
        for fields in variants:
            with self.subTest(destination=fields[1]):
                error = self._reason(_request(*fields))
                self.assertIs(error.reason, FailureReason.UNKNOWN_DESTINATION)
                self.assertEqual(str(error), f"Invalid airport code: {fields[1]}")

    def test_unknown_aircraft(self) -> None:
        for type_name in ("Small regional jet", "large narrow body", ""):
            with self.subTest(type_name=type_name):
                error = self._reason(_request("MAN", "ORY", type_name, "1", "0", "0", "10", "0", "0"))
                self.assertIs(error.reason, FailureReason.UNKNOWN_AIRCRAFT)
                self.assertEqual(error.message, f"Invalid aircraft type: {type_name}")

    def test_insufficient_range(self) -> None:
        error = self._reason(_request("MAN", "JFK", "Medium narrow body", "150", "12", "2", "399", "999", "1899"))
        self.assertIs(error.reason, FailureReason.INSUFFICIENT_RANGE)
        self.assertEqual(error.message, "Medium narrow body doesn't have the range to fly to JFK")

    def test_total_overbooking_checked_before_classes(self) -> None:
        error = self._reason(_request("LGW", "ORY", "Large narrow body", "200", "25", "5", "450", "1200", "2500"))
        self.assertIs(error.reason, FailureReason.TOTAL_OVERBOOKING)
        self.assertEqual(error.message, "Too many total seats booked (230 > 204)")

    def test_class_overbooking_is_always_class_specific(self) -> None:
        capacities = {CabinClass.ECONOMY: 180, CabinClass.BUSINESS: 20, CabinClass.FIRST: 4}
        positions = {CabinClass.ECONOMY: 3, CabinClass.BUSINESS: 4, CabinClass.FIRST: 5}
        for cabin, capacity in capacities.items():
            for booked in range(capacity + 1, 205):
                fields = ["LGW", "ORY", "Large narrow body", "0", "0", "0", "100", "200", "300"]
                fields[positions[cabin]] = str(booked)
                with self.subTest(cabin=cabin.name, booked=booked):
                    error = self._reason(_request(*fields))
                    self.assertIs(error.reason, FailureReason.CLASS_OVERBOOKING)
                    self.assertIs(error.cabin, cabin)
                    self.assertEqual(error.message, f"Too many {cabin.label} seats booked ({booked} > {capacity})")

    def test_economy_reported_before_business(self) -> None:
        error = self._reason(_request("LGW", "ORY", "Large narrow body", "181", "21", "0", "1", "1", "1"))
        self.assertIs(error.cabin, CabinClass.ECONOMY)

    def test_first_class_message(self) -> None:
        error = self._reason(_request("LGW", "ORY", "Large narrow body", "10", "0", "5", "1", "1", "1"))
        self.assertEqual(error.message, "Too many first-class seats booked (5 > 4)")


if __name__ == "__main__":
    unittest.main()
