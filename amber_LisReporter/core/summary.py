# amber_LisReporter/core/summary.py
from __future__ import annotations
import numpy as np
import pandas as pd

DEFAULT_TIME_COLUMN = "TIME(PS)"
_RULE = "-" * 30

def reorder_and_sort(df: pd.DataFrame, time_column: str = DEFAULT_TIME_COLUMN) -> pd.DataFrame:
    """Move ``time_column`` first and sort rows by it (stable, NaN times last)."""
    if time_column not in df.columns:
        return df
    cols = [time_column] + [c for c in df.columns if c != time_column]
    out = df[cols].sort_values(time_column, kind="stable", na_position="last")
    return out.reset_index(drop=True)

def compute_stats(df: pd.DataFrame) -> dict[str, tuple[float, float]]:
    """Per-column (mean, sample std); std is NaN for columns with fewer than 2 values."""
    means = df.mean(skipna=True)
    stds = df.std(ddof=1, skipna=True)
    stats: dict[str, tuple[float, float]] = {}
    for col in df.columns:
        m, s = means[col], stds[col]
        stats[col] = (float(m) if pd.notna(m) else np.nan, float(s) if pd.notna(s) else np.nan)
    return stats

def format_stats(stats: dict[str, tuple[float, float]]) -> str:
    blocks = []
    for col, (mean, std) in stats.items():
        blocks.append(f"          {col}\n\nMean=     {mean}\nStd=      {std}\n{_RULE}")
    return "\n".join(blocks)

def print_stats(stats: dict[str, tuple[float, float]]) -> None:
    if stats:
        print(format_stats(stats))
