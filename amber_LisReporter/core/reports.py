# amber_LisReporter/core/reports.py
from __future__ import annotations
from pathlib import Path
import re
from typing import Literal
import numpy as np
import pandas as pd
from scipy.io import savemat

from .errors import ConfigurationError, FileSystemError

ReportFormat = Literal["csv", "mat", "both"]
DEFAULT_SUMMARY_NAME = "LISFILES_SUMMARY.CSV"

def _write_csv(df: pd.DataFrame, out_csv: Path) -> Path:
    try:
        df.to_csv(out_csv, index=False, encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"cannot write {out_csv}: {e}") from e
    print(f"Data saved in {out_csv}")
    return out_csv

def _mat_field_name(col: str, taken: set[str]) -> str:
    """TIME(PS) -> TIME_PS; MATLAB fields must start with a letter."""
    name = re.sub(r"\W+", "_", col).strip("_") or "field"
    if not name[0].isalpha():
        name = f"f_{name}"
    base, k = name, 2
    while name in taken:
        name = f"{base}_{k}"
        k += 1
    taken.add(name)
    return name

def _write_mat(df: pd.DataFrame, out_mat: Path, varname: str) -> Path:
    """
    Save a MATLAB struct: one Nx1 double per column, plus a ``columns``
    cell array holding the original column names in order.
    """
    taken: set[str] = {"columns"}
    mat_struct: dict[str, np.ndarray] = {
        # Nx1 object array -> MATLAB cell array of names
        "columns": np.array([str(c) for c in df.columns], dtype=object).reshape(-1, 1),
    }
    for col in df.columns:
        mat_struct[_mat_field_name(col, taken)] = df[col].to_numpy(dtype=float).reshape(-1, 1)
    try:
        savemat(out_mat, {varname: mat_struct}, appendmat=False)
    except OSError as e:
        raise FileSystemError(f"cannot write {out_mat}: {e}") from e
    print(f"Data saved in {out_mat}")
    return out_mat

def write_summary(df: pd.DataFrame,
                  out_dir: Path,
                  file_name: str = DEFAULT_SUMMARY_NAME,
                  fmt: ReportFormat = "csv",
                  mat_variable: str = "summary") -> list[Path]:
    """
    Persist the unified table into ``out_dir``.
    - fmt: "csv" | "mat" | "both"; the .MAT file shares the CSV base name
    """
    if fmt not in ("csv", "mat", "both"):
        raise ConfigurationError(f"unknown report format {fmt!r} (expected csv, mat or both)")
    out_csv = Path(out_dir) / file_name
    written: list[Path] = []
    if fmt in ("csv", "both"):
        written.append(_write_csv(df, out_csv))
    if fmt in ("mat", "both"):
        written.append(_write_mat(df, out_csv.with_suffix(".MAT"), mat_variable))
    return written
