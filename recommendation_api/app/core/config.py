"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  In a
production deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Recommendation API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path for the SQLite database.  A relative path is resolved
    # relative to the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "recommendations.db")

    # Number of entries returned by ``GET /recommendations``.
    list_limit: int = int(os.getenv("LIST_LIMIT", "10"))

    # A downvote that takes the score strictly below this value removes
    # the recommendation.
    score_floor: int = int(os.getenv("SCORE_FLOOR", "-5"))

    # Random selection favours entries scoring above this threshold
    # ``random_popular_ratio`` of the time.
    popular_score_threshold: int = int(os.getenv("POPULAR_SCORE_THRESHOLD", "10"))
    random_popular_ratio: float = float(os.getenv("RANDOM_POPULAR_RATIO", "0.7"))

    # Mounts ``/e2e`` routes used by end‑to‑end suites to wipe the table.
    # Never enable this in production.
    enable_test_routes: bool = os.getenv("ENABLE_TEST_ROUTES", "false").lower() in {"1", "true", "yes"}

    host: str = os.getenv("API_HOST", "0.0.0.0")
    port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
