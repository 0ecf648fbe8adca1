# amber_LisReporter/core/table.py
from __future__ import annotations
from typing import Mapping, Sequence
import pandas as pd

def to_table(data: Mapping[str, Sequence[float]]) -> pd.DataFrame:
    """One float64 column per field; shorter series are NaN-padded at the tail."""
    if not data:
        return pd.DataFrame()
    return pd.DataFrame({k: pd.Series(list(v), dtype="float64") for k, v in data.items()})

def concatenate(accumulated: pd.DataFrame | None, nxt: pd.DataFrame) -> pd.DataFrame:
    """
    Stack ``nxt`` below ``accumulated``.

    Columns are unioned by name; a field missing on either side is NaN for
    those rows. Columns come back sorted by name, rows in (accumulated, nxt) order.
    """
    if nxt is None or nxt.empty:
        return accumulated if accumulated is not None else pd.DataFrame()
    if accumulated is None or accumulated.empty:
        out = nxt.reset_index(drop=True)
    else:
        out = pd.concat([accumulated, nxt], ignore_index=True, sort=False)
    return out[sorted(out.columns)].astype("float64")
