"""Environment-variable-based configuration for template generation."""

from __future__ import annotations

import os
from pathlib import Path

TEMPLATE_STORE_DIR: Path = Path(
    os.environ.get("TEMPLATE_STORE_DIR", "~/.prescription_engine/templates")
).expanduser()
SCHEDULE_MODE: str = os.environ.get("SCHEDULE_MODE", "SEVEN_DAY")
GENERATOR_WORKERS: int = int(os.environ.get("GENERATOR_WORKERS", "4"))
BACKFILL_HOUR: int = int(os.environ.get("SCHEDULER_HOUR", "2"))
BACKFILL_MINUTE: int = int(os.environ.get("SCHEDULER_MINUTE", "0"))
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
# JSON file of one-rep maxes: {"athlete id": {"exercise id": weight}}
ONE_REP_MAX_FILE: Path | None = (
    Path(os.environ["ONE_REP_MAX_FILE"]).expanduser()
    if os.environ.get("ONE_REP_MAX_FILE")
    else None
)
