"""Configuration values for the flight profitability report."""
import os
from pathlib import Path

# Input locations
DATA_DIR = Path(os.getenv("FLIGHTPROFIT_DATA_DIR", str(Path(__file__).resolve().parent / "data")))
AIRPORTS_FILE = "airports.csv"
AIRCRAFT_FILE = "aeroplanes.csv"
VALID_FLIGHTS_FILE = "valid_flight_data.csv"
INVALID_FLIGHTS_FILE = "invalid_flight_data.csv"

# Output
REPORT_PATH = Path(os.getenv("FLIGHTPROFIT_REPORT_PATH", "flight_profitability_report.txt"))
CURRENCY_SYMBOL = "£"

# CSV parsing
CSV_DELIMITER = os.getenv("FLIGHTPROFIT_CSV_DELIMITER", ",")
COMMENT_MARKER = "#"

# Origins whose distance is read from the primary airport column; all others use the alternate one.
PRIMARY_ORIGINS = tuple(
    code.strip() for code in os.getenv("FLIGHTPROFIT_PRIMARY_ORIGINS", "MAN").split(",") if code.strip()
)
