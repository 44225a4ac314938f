"""Runtime configuration read from the environment."""

from __future__ import annotations

import os
from pathlib import Path

CHART_THEME = os.environ.get("BANKROLL_CHART_THEME", "dark")
OUTPUT_PATH = Path(os.environ.get("BANKROLL_CHART_OUTPUT", "output/bankroll_chart.html"))
LOG_LEVEL = os.environ.get("BANKROLL_CHART_LOG_LEVEL", "WARNING")

__all__ = ["CHART_THEME", "LOG_LEVEL", "OUTPUT_PATH"]
