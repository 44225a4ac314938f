"""Dark theme configuration for bankroll charts."""

from __future__ import annotations

from typing import Dict


PROFIT_GREEN = "#4ade80"
LOSS_RED = "#ef4444"
LOSS_LABEL_RED = "#f87171"
REFERENCE_WHITE = "#ffffff"
AXIS_TICK_AMBER = "#fbbf24"
GRID_SLATE = "#334155"
AXIS_GRAY = "#666666"
HOVER_BACKGROUND = "#111827"
BACKGROUND = "#0f172a"
CARD_BACKGROUND = "#111827"
TEXT_COLOR = "#FFFFFF"


DARK_THEME: Dict[str, object] = {
    "name": "dark",
    "palette": {
        "profit": PROFIT_GREEN,
        "loss": LOSS_RED,
        "profit_label": PROFIT_GREEN,
        "loss_label": LOSS_LABEL_RED,
        "reference": REFERENCE_WHITE,
        "axis_tick": AXIS_TICK_AMBER,
        "grid": GRID_SLATE,
        "hover_background": HOVER_BACKGROUND,
    },
    "plotly_template": {
        "layout": {
            "font": {"family": "monospace", "color": TEXT_COLOR, "size": 10},
            "paper_bgcolor": BACKGROUND,
            "plot_bgcolor": CARD_BACKGROUND,
            "title": {"font": {"size": 16, "color": TEXT_COLOR}},
            "xaxis": {
                "gridcolor": "rgba(51, 65, 85, 0.4)",
                "linecolor": AXIS_GRAY,
                "zeroline": False,
            },
            "yaxis": {
                "gridcolor": "rgba(51, 65, 85, 0.4)",
                "linecolor": AXIS_GRAY,
                "zeroline": False,
            },
        }
    },
}
