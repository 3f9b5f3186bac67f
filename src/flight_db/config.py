"""
Configuration module for the flight database.

Loads environment variables (optionally from a .env file) and provides
centralized settings for store capacity, search limits and logging.
"""

import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _int_from_env(
    name: str,
    default: Optional[int],
    allow_none: bool = True,
    minimum: Optional[int] = None,
) -> Optional[int]:
    """
    Read an integer setting from the environment.

    An empty string or "none" disables the setting (returns None)
    when allow_none is True.

    Raises:
        ValueError: If the variable is set but is not an integer, is
            disabled where that is not allowed, or is below minimum.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip()
    if raw == "" or raw.lower() == "none":
        if allow_none:
            return None
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if minimum is not None and value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


class Config:
    """
    Application configuration class.

    Attributes:
        MAX_EDGES: Capacity of the edge store.
        MAX_ITERATIONS: Safety limit on search loop iterations (None = unbounded).
        LOG_LEVEL: Root log level used by the command-line driver.
        DB_PATH: Optional SQLite database to seed from instead of the built-in data.
    """

    MAX_EDGES: int = _int_from_env(
        "FLIGHT_DB_MAX_EDGES", 100, allow_none=False, minimum=1
    )
    MAX_ITERATIONS: Optional[int] = _int_from_env(
        "FLIGHT_DB_MAX_ITERATIONS", 10_000, minimum=1
    )
    LOG_LEVEL: str = os.getenv("FLIGHT_DB_LOG_LEVEL", "INFO").upper()
    DB_PATH: Optional[str] = os.getenv("FLIGHT_DB_PATH") or None
