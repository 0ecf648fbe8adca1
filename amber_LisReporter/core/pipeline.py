# amber_LisReporter/core/pipeline.py
from __future__ import annotations
from pathlib import Path
from typing import Sequence
import pandas as pd

from ..loaders import lis_loader
from .errors import ConfigurationError
from .reports import DEFAULT_SUMMARY_NAME, write_summary
from .summary import DEFAULT_TIME_COLUMN, compute_stats, print_stats, reorder_and_sort
from .table import concatenate

def verbose_from(cfg: dict | None) -> bool:
    """``logging.verbose``; only real YAML booleans are accepted."""
    value = ((cfg or {}).get("logging", {}) or {}).get("verbose", True)
    if not isinstance(value, bool):
        raise ConfigurationError(f"logging.verbose must be true or false, got {value!r}")
    return value

def build_table(files: Sequence[Path], cfg: dict | None = None, verbose: bool = True) -> pd.DataFrame:
    """Load every file in order and stack the per-file tables; the first failure aborts."""
    df: pd.DataFrame | None = None
    for path in files:
        if verbose:
            print(f"Reading file {path}")
        rec = lis_loader.load(path, cfg)
        df = concatenate(df, rec.df)
    return df if df is not None else pd.DataFrame()

def run_pipeline(files: Sequence[Path], cfg: dict | None, out_dir: Path) -> pd.DataFrame | None:
    cfg = cfg or {}
    out_cfg = cfg.get("output", {}) or {}
    rep_cfg = cfg.get("reports", {}) or {}
    verbose = verbose_from(cfg)
    time_column = str(out_cfg.get("time_column", DEFAULT_TIME_COLUMN))

    df = build_table(files, cfg, verbose=verbose)
    if df.empty:
        print("[INFO] No data found.")
        return None

    df = reorder_and_sort(df, time_column)
    write_summary(
        df,
        Path(out_dir),
        file_name=str(out_cfg.get("file_name", DEFAULT_SUMMARY_NAME)),
        fmt=str(rep_cfg.get("format", "csv")).lower(),
        mat_variable=str(rep_cfg.get("mat_variable", "summary")),
    )
    print_stats(compute_stats(df))
    return df
