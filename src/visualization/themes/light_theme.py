"""Light theme configuration for bankroll charts."""

from __future__ import annotations

from typing import Dict


PROFIT_GREEN = "#16a34a"
LOSS_RED = "#dc2626"
LOSS_LABEL_RED = "#b91c1c"
REFERENCE_INK = "#1E1E1E"
AXIS_TICK_AMBER = "#b45309"
GRID_GRAY = "#E0E0E0"
AXIS_GRAY = "#BDBDBD"
HOVER_BACKGROUND = "#FFFFFF"
BACKGROUND = "#FAFAFA"
CARD_BACKGROUND = "#FFFFFF"
TEXT_COLOR = "#1E1E1E"


LIGHT_THEME: Dict[str, object] = {
    "name": "light",
    "palette": {
        "profit": PROFIT_GREEN,
        "loss": LOSS_RED,
        "profit_label": PROFIT_GREEN,
        "loss_label": LOSS_LABEL_RED,
        "reference": REFERENCE_INK,
        "axis_tick": AXIS_TICK_AMBER,
        "grid": GRID_GRAY,
        "hover_background": HOVER_BACKGROUND,
    },
    "plotly_template": {
        "layout": {
            "font": {"family": "monospace", "color": TEXT_COLOR, "size": 10},
            "paper_bgcolor": BACKGROUND,
            "plot_bgcolor": CARD_BACKGROUND,
            "title": {"font": {"size": 16, "color": TEXT_COLOR}},
            "xaxis": {
                "gridcolor": GRID_GRAY,
                "linecolor": AXIS_GRAY,
                "zeroline": False,
            },
            "yaxis": {
                "gridcolor": GRID_GRAY,
                "linecolor": AXIS_GRAY,
                "zeroline": False,
            },
        }
    },
}
