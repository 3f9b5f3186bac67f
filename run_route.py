"""
Flight Route Finder - Main Entry Point.

Seeds the flight database and prints the itinerary for one query.
Without arguments it runs the demonstration query: New York to
Los Angeles, depth-first with backtracking.

Usage:
    python run_route.py
    python run_route.py --origin Toronto --destination Urbana
    python run_route.py --mode direct-then-backtrack --db flights.db
"""

import argparse
import logging
import sqlite3
import sys
from typing import List, Optional

import pandas as pd
import pandera as pa

from src.flight_db.adapters.data_providers.sqlite_provider import SqliteEdgeProvider
from src.flight_db.application import FlightDatabase
from src.flight_db.config import Config
from src.flight_db.exceptions import FlightDBError
from src.flight_db.schemas.route import SearchMode

# Module-level logger
logger = logging.getLogger(__name__)

DEFAULT_ORIGIN = "New York"
DEFAULT_DESTINATION = "Los Angeles"


def setup_logging(level: str = Config.LOG_LEVEL) -> None:
    """
    Configure the root logger.

    Logs go to stderr so that stdout carries only the itinerary.
    Does nothing if the root logger already has handlers.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    formatter = logging.Formatter(log_format, datefmt=date_format)

    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find a flight route between two cities")
    parser.add_argument("--origin", type=str, default=DEFAULT_ORIGIN, help="City to start from")
    parser.add_argument(
        "--destination", type=str, default=DEFAULT_DESTINATION, help="City to reach"
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=[mode.value for mode in SearchMode],
        default=SearchMode.DEPTH_FIRST_BACKTRACKING.value,
        help="Search mode",
    )
    parser.add_argument(
        "--db",
        type=str,
        default=Config.DB_PATH,
        help="SQLite database with a flights table (default: built-in routes)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one route query and print the itinerary.

    Returns:
        0 if a route was printed, 1 otherwise.
    """
    args = parse_args(argv)
    setup_logging()

    provider = SqliteEdgeProvider(args.db) if args.db else None

    try:
        with FlightDatabase(data_provider=provider) as db:
            itinerary = db.report(args.origin, args.destination, args.mode)
    except FlightDBError as e:
        logger.error("Route search failed: %s", e)
        print(e)
        return 1
    except (
        FileNotFoundError,
        pa.errors.SchemaError,
        pd.errors.DatabaseError,
        sqlite3.Error,
    ) as e:
        logger.error("Could not load flights from %s: %s", args.db, e)
        return 1

    print(itinerary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
