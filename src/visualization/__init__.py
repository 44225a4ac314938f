"""Visualization utilities for simulation bankroll charts."""

from __future__ import annotations

from .chart_components import build_split_area_chart
from .label_style import LabelStyle
from .themes import DARK_THEME, DEFAULT_THEME, LIGHT_THEME, THEME_MAP, resolve_theme

__all__ = [
    "build_split_area_chart",
    "LabelStyle",
    "DARK_THEME",
    "DEFAULT_THEME",
    "LIGHT_THEME",
    "THEME_MAP",
    "resolve_theme",
]
