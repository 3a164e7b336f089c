"""Report line formatting and file output."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable

from flightprofit.config import CURRENCY_SYMBOL
from flightprofit.errors import DataLoadError
from flightprofit.models.flight import FlightResult


def money(amount: float) -> str:
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def format_figures(result: FlightResult) -> str:
    return f"Income: {money(result.income)} | Cost: {money(result.cost)} | Profit: {money(result.profit)}"


def format_result(result: FlightResult, prefix: str = "Flight") -> str:
    """Render one report line, e.g. ``Flight: MAN, JFK, ... | Income: £75636.00 | ...``."""
    return f"{prefix}: {result.request.details} | {format_figures(result)}"


def render_report(results: Iterable[FlightResult]) -> str:
    return "\n".join(format_result(result) for result in results)


def write_report(results: Iterable[FlightResult], path: Path) -> Path:
    """Write the report file; lines are newline-separated with no trailing newline."""
    path = Path(path)
    try:
        path.write_text(render_report(results), encoding="utf-8")
    except OSError as exc:
        raise DataLoadError(f"Error writing report: {exc}") from exc
    return path
