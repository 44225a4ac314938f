"""Local extremum detection for per-point value labels."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..models.simulation import Series, series_values
from .validator import validate_index


class LabelPosition(str, Enum):
    """Why a point earned a label."""

    PEAK = "peak"
    TROUGH = "trough"
    LAST = "last"


@dataclass(frozen=True)
class LabelDecision:
    """Outcome of the labelling rule for a single index."""

    index: int
    value: float
    show: bool
    position: Optional[LabelPosition] = None
    is_above_reference: bool = False
    is_peak: bool = False
    is_trough: bool = False
    is_last: bool = False

    @property
    def renders_above(self) -> bool:
        """Peaks are labelled above the point; everything else below."""
        return self.position is LabelPosition.PEAK


def _decide(
    index: int,
    curr: float,
    prev: Optional[float],
    nxt: Optional[float],
    is_last: bool,
    reference: float,
) -> LabelDecision:
    # A missing neighbour counts as satisfying the comparison.
    is_peak = (prev is None or curr >= prev) and (nxt is None or curr >= nxt)
    is_trough = (prev is None or curr <= prev) and (nxt is None or curr <= nxt)

    if not (is_peak or is_trough or is_last):
        return LabelDecision(index=index, value=curr, show=False)

    if is_peak:
        position = LabelPosition.PEAK
    elif is_trough:
        position = LabelPosition.TROUGH
    else:
        position = LabelPosition.LAST

    return LabelDecision(
        index=index,
        value=curr,
        show=True,
        position=position,
        is_above_reference=curr >= reference,
        is_peak=is_peak,
        is_trough=is_trough,
        is_last=is_last,
    )


def label_for(series: Series, index: int, reference: float) -> LabelDecision:
    """
    Decide whether the point at ``index`` gets a value label.

    A point is labelled when it is a local peak, a local trough, or the last
    point of the series. Only ``index - 1``, ``index`` and ``index + 1`` are
    read, so the decision is independent of every other point.
    """
    validate_index(series, index)
    prev = series[index - 1].value if index > 0 else None
    nxt = series[index + 1].value if index + 1 < len(series) else None
    return _decide(
        index,
        series[index].value,
        prev,
        nxt,
        index == len(series) - 1,
        reference,
    )


def label_all(series: Series, reference: float) -> List[LabelDecision]:
    """Compute every label decision in a single sliding-window pass."""
    values = series_values(series)
    last = len(values) - 1
    decisions: List[LabelDecision] = []
    prev: Optional[float] = None
    for index, curr in enumerate(values):
        nxt = values[index + 1] if index < last else None
        decisions.append(_decide(index, curr, prev, nxt, index == last, reference))
        prev = curr
    return decisions


def shown_labels(series: Series, reference: float) -> List[LabelDecision]:
    """Return only the decisions that render a label."""
    return [decision for decision in label_all(series, reference) if decision.show]


__all__ = [
    "LabelDecision",
    "LabelPosition",
    "label_all",
    "label_for",
    "shown_labels",
]
