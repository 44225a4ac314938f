"""Bankroll area chart split into profit and loss tones at the start value."""

from __future__ import annotations

import logging
from typing import List, Optional

import plotly.graph_objects as go

from ...core.domain import compute_domain
from ...core.extrema import LabelDecision, label_all
from ...core.split_point import compute_split_fraction, gradient_stops
from ...core.validator import validate_series
from ...models.simulation import Series, series_values
from ..figure_utils import (
    axis_ticks,
    colored_tick_labels,
    format_currency,
    format_signed,
    hex_to_rgba,
    split_at_reference,
)
from ..label_style import LabelStyle
from ..themes import DEFAULT_THEME

LOGGER = logging.getLogger(__name__)


def _hover_rows(series: Series) -> List[List[str]]:
    rows = []
    for step in series:
        outcome = step.outcome
        result = f"{outcome.number} ({outcome.color})" if outcome else "n/a"
        net = format_signed(step.net) if step.net is not None else "n/a"
        rows.append([result, format_currency(step.value), net])
    return rows


def _label_annotations(
    decisions: List[LabelDecision],
    style: LabelStyle,
) -> List[dict]:
    annotations = []
    for decision in decisions:
        if not decision.show:
            continue
        annotations.append(
            dict(
                x=decision.index,
                y=decision.value,
                text=f"<b>{format_currency(decision.value)}</b>",
                showarrow=False,
                yshift=style.offset_for(decision),
                font=dict(
                    color=style.color_for(decision),
                    size=style.font_size,
                    family=style.font_family,
                ),
                xanchor="center",
            )
        )
    return annotations


def build_split_area_chart(
    series: Series,
    reference: float,
    *,
    max_steps: Optional[int] = None,
    theme: Optional[dict] = None,
    label_style: Optional[LabelStyle] = None,
    title: Optional[str] = None,
) -> go.Figure:
    """
    Construct the bankroll area chart.

    The area is filled between the bankroll line and ``reference``; fill and
    stroke switch from the profit to the loss colour exactly at the reference.
    Local peaks, troughs and the final step carry value labels.
    """
    validate_series(series)
    theme = theme or DEFAULT_THEME
    palette = theme["palette"]
    style = label_style or LabelStyle.from_theme(theme)

    domain = compute_domain(series, reference)
    fraction = compute_split_fraction(domain, reference)
    decisions = label_all(series, reference)
    LOGGER.debug("Split fraction %.4f for domain %s", fraction, domain)

    xs = [step.index for step in series]
    ys = series_values(series)
    profit = palette["profit"]
    loss = palette["loss"]

    figure = go.Figure()

    figure.add_trace(
        go.Scatter(
            x=xs,
            y=[reference] * len(xs),
            mode="lines",
            line=dict(width=0),
            hoverinfo="skip",
            showlegend=False,
            name="Start baseline",
        )
    )
    figure.add_trace(
        go.Scatter(
            x=xs,
            y=ys,
            mode="lines",
            line=dict(width=0, color=profit),
            fill="tonexty",
            fillgradient=dict(
                type="vertical",
                start=domain.max,
                stop=domain.min,
                colorscale=gradient_stops(
                    fraction,
                    hex_to_rgba(profit, 0.1),
                    hex_to_rgba(loss, 0.1),
                    upper_edge_color=hex_to_rgba(profit, 0.9),
                    lower_edge_color=hex_to_rgba(loss, 0.95),
                ),
            ),
            customdata=_hover_rows(series),
            hovertemplate=(
                "<b>Spin #%{x}</b><br>"
                "Result: %{customdata[0]}<br>"
                "Bankroll: %{customdata[1]}<br>"
                "Net: %{customdata[2]}<extra></extra>"
            ),
            hoverlabel=dict(
                bgcolor=palette["hover_background"],
                bordercolor=[profit if value >= reference else loss for value in ys],
            ),
            showlegend=False,
            name="Bankroll",
        )
    )

    (upper_x, upper_y), (lower_x, lower_y) = split_at_reference(xs, ys, reference)
    for segment_x, segment_y, color, name in (
        (upper_x, upper_y, profit, "Profit"),
        (lower_x, lower_y, loss, "Loss"),
    ):
        if not segment_x:
            continue
        figure.add_trace(
            go.Scatter(
                x=segment_x,
                y=segment_y,
                mode="lines" if len(segment_x) > 1 else "markers",
                line=dict(color=color, width=3),
                marker=dict(color=color, size=6),
                hoverinfo="skip",
                showlegend=False,
                name=name,
            )
        )

    figure.add_hline(
        y=reference,
        line=dict(color=palette["reference"], width=2, dash="6px,4px"),
        opacity=0.9,
        annotation_text="<b>START</b>",
        annotation_position="right",
        annotation_font=dict(color=palette["reference"], size=10),
        annotation_opacity=0.7,
    )

    for annotation in _label_annotations(decisions, style):
        figure.add_annotation(**annotation)

    ticks = axis_ticks(domain)
    x_max = xs[-1]
    if max_steps is not None:
        x_max = max(x_max, max_steps)

    figure.update_layout(
        template=theme["plotly_template"],
        title=title,
        hovermode="closest",
        margin=dict(l=20, r=30, t=20 if not title else 50, b=10),
        xaxis=dict(
            range=[0, x_max],
            dtick=1,
            tickfont=dict(color=palette["axis_tick"], size=10, family="monospace"),
            showline=False,
            ticks="",
            showgrid=True,
            gridcolor=hex_to_rgba(palette["grid"], 0.4),
        ),
        yaxis=dict(
            range=domain.as_range(),
            tickmode="array",
            tickvals=ticks,
            ticktext=colored_tick_labels(ticks, reference, profit, loss),
            showline=False,
            ticks="",
            showgrid=True,
            gridcolor=hex_to_rgba(palette["grid"], 0.4),
        ),
        showlegend=False,
    )

    return figure


__all__ = ["build_split_area_chart"]
