"""
SQLite Edge Provider - SQL to DataFrame adapter.

Reads flight edges from a `flights(origin, destination, distance)` table
and returns them as EdgeSchema-compliant DataFrames.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from src.flight_db.ports.edge_data_provider import EdgeDataProvider
from src.flight_db.schemas.edge import EDGE_COLUMNS, EdgeDataFrame, EdgeSchema

logger = logging.getLogger(__name__)


class SqliteEdgeProvider(EdgeDataProvider):
    """
    Data provider for a SQLite flights table.

    Rows are read in rowid order so that the store sees them in the
    order they were inserted.

    Attributes:
        db_path: Path to the SQLite database file.
        _conn: SQLite connection (lazy initialized).
    """

    def __init__(self, db_path: Union[str, Path], table: str = "flights") -> None:
        """
        Initialize the SQLite edge provider.

        Args:
            db_path: Path to SQLite database file.
            table: Name of the table holding the edges.
        """
        self._db_path = Path(db_path)
        self._table = table
        self._conn: Optional[sqlite3.Connection] = None

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._conn is None:
            if not self._db_path.exists():
                raise FileNotFoundError(f"Database not found: {self._db_path}")
            self._conn = sqlite3.connect(str(self._db_path))
        return self._conn

    def get_edges_df(self) -> EdgeDataFrame:
        """
        Fetch edges from the database.

        Returns:
            DataFrame validated against EdgeSchema, in rowid order.
        """
        conn = self._get_connection()

        query = f"""
            SELECT origin, destination, distance
            FROM "{self._table}"
            ORDER BY rowid
        """
        logger.debug("Executing query: %s", query)

        df = pd.read_sql(query, conn)

        if df.empty:
            logger.warning("No flights found in %s", self._db_path)
            return pd.DataFrame(columns=EDGE_COLUMNS)

        validated = EdgeSchema.validate(df)

        logger.info("Loaded %d flights from %s", len(validated), self._db_path)

        return validated

    @property
    def name(self) -> str:
        return "SQLite"

    @property
    def is_available(self) -> bool:
        """Check if database is accessible."""
        return self._db_path.exists()

    def close(self) -> None:
        """Close database connection."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.debug("Database connection closed")
