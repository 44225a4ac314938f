"""Map the reference value onto a two-colour gradient split."""

from __future__ import annotations

import logging
from typing import List, Tuple

from .domain import Domain

LOGGER = logging.getLogger(__name__)

ColorStop = Tuple[float, str]


def compute_split_fraction(domain: Domain, reference: float) -> float:
    """
    Return the reference's position in ``domain`` measured from the top.

    ``0`` is the top of the domain (``domain.max``) and ``1`` the bottom, so a
    top-to-bottom gradient switching colour at this fraction changes colour
    exactly at the reference line.
    """
    if domain.max <= domain.min:
        LOGGER.warning(
            "Degenerate domain [%s, %s]; using split fraction 0", domain.min, domain.max
        )
        return 0.0
    if reference >= domain.max:
        return 0.0
    if reference <= domain.min:
        return 1.0
    return (domain.max - reference) / (domain.max - domain.min)


def gradient_stops(
    fraction: float,
    upper_color: str,
    lower_color: str,
    *,
    upper_edge_color: str | None = None,
    lower_edge_color: str | None = None,
) -> List[ColorStop]:
    """
    Build a hard two-colour colourscale split at ``fraction``.

    Two coincident stops at ``fraction`` produce a sharp transition instead of
    a blend. The optional edge colours replace the colour at the very top and
    bottom, which lets fills fade toward the reference line.
    """
    fraction = min(max(fraction, 0.0), 1.0)
    return [
        (0.0, upper_edge_color or upper_color),
        (fraction, upper_color),
        (fraction, lower_color),
        (1.0, lower_edge_color or lower_color),
    ]


__all__ = ["ColorStop", "compute_split_fraction", "gradient_stops"]
