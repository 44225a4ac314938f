"""Reusable Plotly chart components for simulation charts."""

from .split_area_chart import build_split_area_chart

__all__ = ["build_split_area_chart"]
