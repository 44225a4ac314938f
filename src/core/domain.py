"""Vertical display domain for bankroll charts."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..models.simulation import Series, series_values
from .validator import validate_not_empty

LOGGER = logging.getLogger(__name__)

DOMAIN_PADDING_RATIO = 0.05
FLAT_SERIES_PADDING = 100.0


@dataclass(frozen=True)
class Domain:
    """Closed interval ``[min, max]`` used to scale the vertical axis."""

    min: float
    max: float

    @property
    def width(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def as_range(self) -> list:
        """Return the bounds in the ``[low, high]`` form Plotly axes expect."""
        return [self.min, self.max]


def compute_domain(
    series: Series,
    reference: float,
    *,
    padding_ratio: float = DOMAIN_PADDING_RATIO,
    flat_padding: float = FLAT_SERIES_PADDING,
) -> Domain:
    """
    Compute the padded domain covering every balance and the reference.

    The reference joins the min/max pool before padding, so the reference line
    always sits inside the returned bounds. A flat series (spread of zero)
    falls back to ``flat_padding`` on either side. Bounds are left unrounded so
    the gradient split computed from them lands exactly on the reference.
    """
    validate_not_empty(series)

    values = series_values(series)
    values.append(reference)
    raw_min = min(values)
    raw_max = max(values)

    padding = (raw_max - raw_min) * padding_ratio
    if padding == 0:
        padding = flat_padding

    domain = Domain(min=raw_min - padding, max=raw_max + padding)
    LOGGER.debug(
        "Computed domain [%s, %s] for %d steps (reference %s)",
        domain.min,
        domain.max,
        len(series),
        reference,
    )
    return domain


__all__ = [
    "DOMAIN_PADDING_RATIO",
    "Domain",
    "FLAT_SERIES_PADDING",
    "compute_domain",
]
