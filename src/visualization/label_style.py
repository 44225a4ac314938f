"""Colour and offset policy for extremum value labels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.extrema import LabelDecision
from .themes import DEFAULT_THEME


@dataclass(frozen=True)
class LabelStyle:
    """
    Presentation record mapping label decisions to colours and offsets.

    Offsets are in pixels, positive values moving the label up the screen.
    """

    profit_color: str = "#4ade80"
    loss_color: str = "#f87171"
    above_offset: int = 15
    below_offset: int = -20
    font_size: int = 10
    font_family: str = "monospace"

    @classmethod
    def from_theme(cls, theme: Optional[dict] = None, **overrides) -> "LabelStyle":
        theme = theme or DEFAULT_THEME
        palette = theme["palette"]
        params = {
            "profit_color": palette["profit_label"],
            "loss_color": palette["loss_label"],
        }
        params.update(overrides)
        return cls(**params)

    def color_for(self, decision: LabelDecision) -> str:
        return self.profit_color if decision.is_above_reference else self.loss_color

    def offset_for(self, decision: LabelDecision) -> int:
        return self.above_offset if decision.renders_above else self.below_offset


__all__ = ["LabelStyle"]
