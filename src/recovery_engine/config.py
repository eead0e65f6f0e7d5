"""Environment-variable-based configuration for the recovery engine."""

from __future__ import annotations

import os

SLEEP_WINDOW_RECORDS: int = int(os.environ.get("RECOVERY_SLEEP_WINDOW", "7"))
LOAD_WINDOW_DAYS: int = int(os.environ.get("RECOVERY_LOAD_WINDOW_DAYS", "7"))
LOOKBACK_DAYS: int = int(os.environ.get("RECOVERY_LOOKBACK_DAYS", "90"))
LOG_LEVEL: str = os.environ.get("RECOVERY_LOG_LEVEL", "INFO").upper()
