"""Load simulation series from CSV or JSON exports."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
from pydantic import ValidationError

from ..models.simulation import SimulationStep
from .validator import InvalidInput, validate_series

LOGGER = logging.getLogger(__name__)

COLUMN_ALIASES: Dict[str, tuple] = {
    "index": ("index", "spin_index", "spinIndex", "step"),
    "value": ("value", "bankroll", "balance"),
    "net": ("net", "net_change"),
    "result_number": ("result_number", "number"),
    "result_color": ("result_color", "color"),
}
REQUIRED_COLUMNS = ("index", "value")


@dataclass
class LoadResult:
    """Represents the outcome of a series load."""

    steps: List[SimulationStep]
    dataframe: pd.DataFrame
    source: Optional[Path] = None


class SeriesLoader:
    """Read a bankroll series and map its columns onto ``SimulationStep``."""

    def __init__(self, preserve_extra_columns: bool = True) -> None:
        self.preserve_extra_columns = preserve_extra_columns

    def load(self, file_path: str | Path) -> LoadResult:
        """Load a CSV or JSON file into a validated series."""
        path = Path(file_path)
        dataframe = self._read(path)
        result = self.load_from_dataframe(dataframe)
        result.source = path
        LOGGER.info("Loaded %d steps from %s", len(result.steps), path)
        return result

    def load_from_dataframe(self, dataframe: pd.DataFrame) -> LoadResult:
        """Create a validated series from an in-memory dataframe."""
        mapped_df = self._apply_aliases(dataframe.copy())
        mapped_df = mapped_df.sort_values("index", kind="stable").reset_index(drop=True)
        steps = self._build_steps(mapped_df)
        validate_series(steps)
        return LoadResult(steps=steps, dataframe=mapped_df)

    def _read(self, path: Path) -> pd.DataFrame:
        try:
            if path.suffix.lower() == ".json":
                return pd.read_json(path)
            return pd.read_csv(path)
        except FileNotFoundError as exc:
            raise InvalidInput(f"File not found: {path}") from exc
        except (pd.errors.ParserError, pd.errors.EmptyDataError, ValueError) as exc:
            raise InvalidInput(f"Unable to parse {path}: {exc}") from exc

    def _apply_aliases(self, dataframe: pd.DataFrame) -> pd.DataFrame:
        """Rename recognised column spellings to the canonical names."""
        rename_map: Dict[str, str] = {}
        for canonical, aliases in COLUMN_ALIASES.items():
            for alias in aliases:
                if alias in dataframe.columns:
                    rename_map[alias] = canonical
                    break
        mapped_df = dataframe.rename(columns=rename_map)
        missing = [column for column in REQUIRED_COLUMNS if column not in mapped_df.columns]
        if missing:
            raise InvalidInput(f"Missing required column(s): {', '.join(missing)}")
        return mapped_df

    def _build_steps(self, dataframe: pd.DataFrame) -> List[SimulationStep]:
        known = set(COLUMN_ALIASES)
        steps: List[SimulationStep] = []
        for _, row in dataframe.iterrows():
            try:
                step_kwargs: Dict[str, Any] = {
                    "index": int(row["index"]),
                    "value": row["value"],
                }
            except (TypeError, ValueError) as exc:
                raise InvalidInput(f"Invalid step row {row.to_dict()}: {exc}") from exc
            if "net" in dataframe.columns and pd.notna(row["net"]):
                step_kwargs["net"] = row["net"]
            if (
                "result_number" in dataframe.columns
                and "result_color" in dataframe.columns
                and pd.notna(row["result_number"])
                and pd.notna(row["result_color"])
            ):
                step_kwargs["outcome"] = {
                    "number": int(row["result_number"]),
                    "color": row["result_color"],
                }
            if self.preserve_extra_columns:
                metadata = {
                    column: row[column]
                    for column in dataframe.columns
                    if column not in known
                }
                if metadata:
                    step_kwargs["metadata"] = metadata
            try:
                steps.append(SimulationStep(**step_kwargs))
            except ValidationError as exc:
                raise InvalidInput(f"Invalid step at index {step_kwargs['index']}: {exc}") from exc
        return steps


def series_from_frame(dataframe: pd.DataFrame) -> List[SimulationStep]:
    """Convenience wrapper returning only the steps of a dataframe load."""
    return SeriesLoader().load_from_dataframe(dataframe).steps


__all__ = ["LoadResult", "SeriesLoader", "series_from_frame"]
