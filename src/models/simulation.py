"""Simulation step data models."""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

WHEEL_COLORS = ("red", "black", "green")


class SpinOutcome(BaseModel):
    """Pocket the ball landed in for a single spin."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=0, le=36, description="Winning pocket number")
    color: str = Field(..., description="Pocket colour (red, black or green)")

    @field_validator("color", mode="before")
    @classmethod
    def _normalize_color(cls, value: Any) -> str:
        """Colours are stored lower case and restricted to the wheel colours."""
        if value is None:
            raise ValueError("color cannot be null")
        color = str(value).strip().lower()
        if color not in WHEEL_COLORS:
            raise ValueError(f"color must be one of {', '.join(WHEEL_COLORS)}")
        return color


class SimulationStep(BaseModel):
    """Represents the bankroll after a single step of a simulation run."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0, description="Zero-based step index")
    value: float = Field(..., description="Running balance after the step")
    net: Optional[float] = Field(
        None, description="Change in balance produced by the step"
    )
    outcome: Optional[SpinOutcome] = Field(
        None, description="Spin result that produced the step, if known"
    )
    metadata: Dict[str, Any] = Field(
        default_factory=dict,
        description="Additional columns preserved for tooltips and exports",
    )

    @field_validator("value", "net", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Optional[float]:
        if value is None:
            return None
        number = float(value)
        if not math.isfinite(number):
            raise ValueError("must be a finite number")
        return number


Series = Sequence[SimulationStep]


def series_from_values(values: Iterable[float], start_index: int = 0) -> List[SimulationStep]:
    """Build a contiguous series from bare balances."""
    return [
        SimulationStep(index=start_index + offset, value=value)
        for offset, value in enumerate(values)
    ]


def series_values(series: Series) -> List[float]:
    """Return the balances of ``series`` in order."""
    return [step.value for step in series]


__all__ = [
    "Series",
    "SimulationStep",
    "SpinOutcome",
    "WHEEL_COLORS",
    "series_from_values",
    "series_values",
]
