"""
Runtime Configuration

Loads settings from the process environment (and a local .env file, if
present) into a single read-only object.

Clinical thresholds are not configurable here; they live as
module-level constants in the rule modules.
"""
import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """
    Immutable configuration container.

    log_level:          Root logger level (DEBUG, INFO, WARNING, ERROR).
    log_file:           Optional path for a plain-text log file.
    bias_min_records:   Minimum usable rows before a bias audit is reported.
    prediction_limit:   Default row limit for "recent predictions" queries.
    """
    log_level: str = field(default_factory=lambda: os.getenv("TRIAGE_LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("TRIAGE_LOG_FILE") or None)
    bias_min_records: int = field(default_factory=lambda: _env_int("TRIAGE_BIAS_MIN_RECORDS", 10))
    prediction_limit: int = field(default_factory=lambda: _env_int("TRIAGE_PREDICTION_LIMIT", 50))


# Global, read-only settings instance.
settings = Settings()
