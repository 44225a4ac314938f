"""Shared helpers for formatting Plotly figures."""

from __future__ import annotations

import math
from typing import Callable, List, Tuple

import numpy as np

from ..core.domain import Domain

NumberFormatter = Callable[[float], str]


def format_currency(value: float) -> str:
    """Format a balance with a dollar prefix, keeping cents only when present."""
    if float(value).is_integer():
        text = f"{abs(value):,.0f}"
    else:
        text = f"{abs(value):,.2f}"
    return f"-${text}" if value < 0 else f"${text}"


def format_signed(value: float) -> str:
    """Format a net change with an explicit sign."""
    if float(value).is_integer():
        value = int(value)
    return f"+{value}" if value >= 0 else f"{value}"


def hex_to_rgba(color: str, alpha: float) -> str:
    """Convert ``#rrggbb`` into an ``rgba()`` string with the given opacity."""
    value = color.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"Expected a #rrggbb colour, got {color!r}")
    red, green, blue = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    return f"rgba({red}, {green}, {blue}, {alpha})"


def axis_ticks(domain: Domain, target_count: int = 6) -> List[float]:
    """
    Return integer tick positions inside ``domain``.

    The domain itself stays fractional; only tick positions are snapped to
    whole units with a "nice" 1/2/5 step.
    """
    low = math.ceil(domain.min)
    high = math.floor(domain.max)
    if high < low:
        return []
    span = high - low
    if span == 0:
        return [float(low)]
    raw_step = span / max(target_count - 1, 1)
    magnitude = 10 ** math.floor(math.log10(raw_step))
    step = magnitude
    for factor in (1, 2, 5, 10):
        step = factor * magnitude
        if step >= raw_step:
            break
    step = max(step, 1)
    start = math.ceil(low / step) * step
    ticks = np.arange(start, high + 1e-9, step)
    return [float(t) for t in ticks]


def colored_tick_labels(
    ticks: List[float],
    reference: float,
    profit_color: str,
    loss_color: str,
    *,
    formatter: NumberFormatter = format_currency,
) -> List[str]:
    """Render tick labels coloured by their side of the reference."""
    labels = []
    for tick in ticks:
        color = profit_color if tick >= reference else loss_color
        labels.append(f"<span style='color:{color}'><b>{formatter(tick)}</b></span>")
    return labels


Point = Tuple[float, float]


def split_at_reference(
    xs: List[float],
    ys: List[float],
    reference: float,
) -> Tuple[Tuple[list, list], Tuple[list, list]]:
    """
    Split a polyline into the parts at/above and below ``reference``.

    Segments that cross the reference are cut at the interpolated crossing
    point so both halves meet exactly on the reference line. Disjoint runs are
    separated by ``None`` gaps, which Plotly renders as breaks.
    """
    upper: Tuple[list, list] = ([], [])
    lower: Tuple[list, list] = ([], [])

    def _append(target: Tuple[list, list], start: Point, end: Point) -> None:
        tx, ty = target
        if tx and tx[-1] is not None and (tx[-1], ty[-1]) == start:
            tx.append(end[0])
            ty.append(end[1])
            return
        if tx:
            tx.append(None)
            ty.append(None)
        tx.extend([start[0], end[0]])
        ty.extend([start[1], end[1]])

    if len(xs) == 1:
        target = upper if ys[0] >= reference else lower
        target[0].append(xs[0])
        target[1].append(ys[0])
        return upper, lower

    for (x0, y0), (x1, y1) in zip(zip(xs, ys), zip(xs[1:], ys[1:])):
        above0 = y0 >= reference
        above1 = y1 >= reference
        if above0 == above1:
            _append(upper if above0 else lower, (x0, y0), (x1, y1))
            continue
        cross_x = x0 + (reference - y0) / (y1 - y0) * (x1 - x0)
        crossing = (cross_x, reference)
        _append(upper if above0 else lower, (x0, y0), crossing)
        _append(upper if above1 else lower, crossing, (x1, y1))
    return upper, lower


__all__ = [
    "NumberFormatter",
    "axis_ticks",
    "colored_tick_labels",
    "format_currency",
    "format_signed",
    "hex_to_rgba",
    "split_at_reference",
]
