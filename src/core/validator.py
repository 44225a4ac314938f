"""Input validation utilities."""

from __future__ import annotations

from typing import List

from ..models.simulation import Series


class InvalidInput(Exception):
    """Raised when a series or lookup cannot be used to build a chart."""


def validate_not_empty(series: Series) -> None:
    """Ensure the series carries at least one step."""
    if not series:
        raise InvalidInput("Series must contain at least one step")


def validate_contiguous_indices(series: Series) -> None:
    """Ensure step indices run 0, 1, 2, ... in order."""
    mismatched: List[str] = []
    for position, step in enumerate(series):
        if step.index != position:
            mismatched.append(f"{position}->{step.index}")
    if mismatched:
        preview = ", ".join(mismatched[:5])
        raise InvalidInput(
            "Step indices must be zero-based and contiguous; "
            f"found position->index mismatches: {preview}"
        )


def validate_series(series: Series) -> None:
    """Run every structural check required before rendering."""
    validate_not_empty(series)
    validate_contiguous_indices(series)


def validate_index(series: Series, index: int) -> None:
    if not 0 <= index < len(series):
        raise InvalidInput(
            f"Index {index} is outside the series (length {len(series)})"
        )
