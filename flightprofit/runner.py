"""Report runner wiring table loading, batch evaluation and output."""
from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from flightprofit import config
from flightprofit.analysis import format_summary, summarise_by_aircraft
from flightprofit.batch import BatchOutcome, process_rows
from flightprofit.console import Console
from flightprofit.errors import DataLoadError
from flightprofit.models.aircraft import AircraftRecord, aircraft_from_rows
from flightprofit.models.airport import DEFAULT_ORIGIN_COLUMNS, AirportRecord, DistanceColumn, airports_from_rows
from flightprofit.report import format_result, write_report
from flightprofit.table import read_table


@dataclass
class Settings:
    data_dir: Path = config.DATA_DIR
    report_path: Path = config.REPORT_PATH
    delimiter: str = config.CSV_DELIMITER
    origin_columns: Dict[str, DistanceColumn] = field(default_factory=lambda: dict(DEFAULT_ORIGIN_COLUMNS))
    airports_file: str = config.AIRPORTS_FILE
    aircraft_file: str = config.AIRCRAFT_FILE
    valid_flights_file: str = config.VALID_FLIGHTS_FILE
    invalid_flights_file: str = config.INVALID_FLIGHTS_FILE

    def path_for(self, filename: str) -> Path:
        return Path(self.data_dir) / filename


@dataclass
class RunSummary:
    valid: BatchOutcome
    invalid: BatchOutcome
    report_path: Path


class ReportRunner:
    """Loads every input table up front, then evaluates the valid and invalid datasets."""

    def __init__(self, settings: Optional[Settings] = None, console: Optional[Console] = None) -> None:
        self.settings = settings or Settings()
        self.console = console or Console()
        self.airports: Dict[str, AirportRecord] = {}
        self.aircraft: Dict[str, AircraftRecord] = {}
        self.valid_rows: List[List[str]] = []
        self.invalid_rows: List[List[str]] = []

    def load(self) -> None:
        """Read all four tables; any failure here aborts the run before output is produced."""
        settings = self.settings
        airport_rows = read_table(settings.path_for(settings.airports_file), settings.delimiter)
        aircraft_rows = read_table(settings.path_for(settings.aircraft_file), settings.delimiter)
        self.valid_rows = read_table(settings.path_for(settings.valid_flights_file), settings.delimiter)
        self.invalid_rows = read_table(settings.path_for(settings.invalid_flights_file), settings.delimiter)
        self.airports = airports_from_rows(airport_rows, settings.airports_file)
        self.aircraft = aircraft_from_rows(aircraft_rows, settings.aircraft_file)

    def process(self, rows: List[List[str]]) -> BatchOutcome:
        return process_rows(rows, self.airports, self.aircraft, self.settings.origin_columns)

    def run(self) -> RunSummary:
        self.load()

        valid = self.process(self.valid_rows)
        for result in valid.successes:
            self.console.success(format_result(result, prefix="Valid Flight"))
        report_path = write_report(valid.successes, self.settings.report_path)
        self.console.info(f"Report written to {report_path}")
        if valid.successes:
            self.console.info(format_summary(summarise_by_aircraft(valid.successes)))
        self.console.errors("Errors encountered in valid flight processing:", valid.error_messages)

        invalid = self.process(self.invalid_rows)
        self.console.errors("Errors encountered in invalid flight processing:", invalid.error_messages)

        return RunSummary(valid=valid, invalid=invalid, report_path=report_path)


def _origin_columns(primary_origins: Sequence[str]) -> Dict[str, DistanceColumn]:
    return {code: DistanceColumn.PRIMARY for code in primary_origins}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate the flight profitability report.")
    parser.add_argument("--data-dir", type=Path, default=config.DATA_DIR, help="Directory holding the input tables")
    parser.add_argument("--report", type=Path, default=config.REPORT_PATH, help="Report file to write")
    parser.add_argument("--delimiter", default=config.CSV_DELIMITER, help="Field delimiter of the input tables")
    parser.add_argument(
        "--primary-origin",
        action="append",
        dest="primary_origins",
        help="Origin code measured from the primary distance column (repeatable)",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print fatal errors")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings(
        data_dir=args.data_dir,
        report_path=args.report,
        delimiter=args.delimiter,
        origin_columns=_origin_columns(args.primary_origins or config.PRIMARY_ORIGINS),
    )
    console = Console(verbose=not args.quiet)
    try:
        ReportRunner(settings, console).run()
    except DataLoadError as exc:
        console.fatal(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
