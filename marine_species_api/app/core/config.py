"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults for every field.  Values are
computed when the class is defined, so environment variables must be
set before this module is imported.  Tests that need different values
construct their own ``Settings`` and pass it to ``create_app``.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Marine Species Database API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When unset only the console handler
    # is installed.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Upper bound on the JSON size of a single stored record, in bytes.
    # ``0`` disables the check.
    max_record_bytes: int = int(os.getenv("MAX_RECORD_BYTES", "1024"))

    # Bind address used by ``run.py``.
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


settings = Settings()
