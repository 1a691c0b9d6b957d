"""Configuration utilities for infrastructure layer.

Only the composition root (app.py, scripts) should call these readers;
everything below it receives explicit values.
"""

import os
from typing import Optional

DEFAULT_SPEAKER_PROFILE = "dev"


def get_speaker_profile() -> str:
    """
    Get the active speaker repository profile name.

    Returns:
        Raw SPEAKER_PROFILE value, defaults to "dev"
    """
    return os.getenv("SPEAKER_PROFILE", DEFAULT_SPEAKER_PROFILE)


def get_seed_number() -> Optional[float]:
    """
    Get an explicit seed number from the environment.

    Example .env:
        SPEAKER_SEED_NUMBER=42.0

    Returns:
        Parsed SPEAKER_SEED_NUMBER, or None if unset or blank

    Raises:
        ValueError: If SPEAKER_SEED_NUMBER is set but not a number
    """
    raw = os.getenv("SPEAKER_SEED_NUMBER")
    if raw is None or not raw.strip():
        return None

    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(
            f"Invalid SPEAKER_SEED_NUMBER value: {raw!r}. Expected a number"
        ) from e


def get_log_level() -> str:
    """Get log level name, defaults to INFO."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_app_version() -> str:
    """Get application version (Docker build ARG -> ENV APP_VERSION)."""
    return os.getenv("APP_VERSION", "0.0.0-dev")
