# amber_LisReporter/core/model.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import pandas as pd

@dataclass(frozen=True)
class LisRecord:
    source_path: Path         # .lis file on disk
    df: pd.DataFrame          # one float64 column per field, one row per frame
    n_lines: int              # lines kept between the RESULTS/AVERAGE markers
