"""Fleet-level aggregation of evaluated flights."""
from __future__ import annotations

from typing import Iterable

import pandas as pd

from flightprofit.models.flight import FlightResult

SUMMARY_COLUMNS = ["flights", "seats", "income", "cost", "profit"]


def results_frame(results: Iterable[FlightResult]) -> pd.DataFrame:
    """One row per evaluated flight."""
    records = [
        {
            "origin": result.request.origin_code,
            "destination": result.request.destination_code,
            "aircraft_type": result.request.aircraft_type,
            "seats": result.request.total_booked,
            "income": result.income,
            "cost": result.cost,
            "profit": result.profit,
        }
        for result in results
    ]
    return pd.DataFrame(
        records,
        columns=["origin", "destination", "aircraft_type", "seats", "income", "cost", "profit"],
    )


def summarise_by_aircraft(results: Iterable[FlightResult]) -> pd.DataFrame:
    """Totals per aircraft type, most profitable first."""
    df = results_frame(results)
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS).rename_axis("aircraft_type")

    summary = df.groupby("aircraft_type").agg(
        flights=("destination", "size"),
        seats=("seats", "sum"),
        income=("income", "sum"),
        cost=("cost", "sum"),
        profit=("profit", "sum"),
    )
    return summary.sort_values(by="profit", ascending=False)[SUMMARY_COLUMNS]


def format_summary(summary: pd.DataFrame) -> str:
    if summary.empty:
        return "No flights to summarise."
    return summary.to_string(float_format=lambda value: f"{value:.2f}")
