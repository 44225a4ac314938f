"""Command line interface for bankroll charts."""

from .cli import app, main

__all__ = ["app", "main"]
