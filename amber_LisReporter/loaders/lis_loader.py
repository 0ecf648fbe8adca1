# amber_LisReporter/loaders/lis_loader.py
from __future__ import annotations
from pathlib import Path
import logging

from ..core.model import LisRecord
from ..core.parse import DEFAULT_EXCLUDE_TOKENS, parse_values
from ..core.region import DEFAULT_END_MARKER, DEFAULT_START_MARKER, read_region
from ..core.table import to_table

_LOG = logging.getLogger(__name__)

def _markers(cfg: dict | None) -> tuple[str, str]:
    inp = (cfg or {}).get("input", {}) or {}
    return (str(inp.get("start_marker", DEFAULT_START_MARKER)),
            str(inp.get("end_marker", DEFAULT_END_MARKER)))

def _exclude_tokens(cfg: dict | None) -> tuple[str, ...]:
    kws = ((cfg or {}).get("parsing", {}) or {}).get("exclude_tokens")
    if kws is None:
        return DEFAULT_EXCLUDE_TOKENS
    if isinstance(kws, str):
        kws = [kws]
    return tuple(str(k) for k in kws if str(k))

# ---------- public loader ----------
def load(path: Path, cfg: dict | None = None) -> LisRecord:
    """
    Read one .lis file: keep the RESULTS..A V E R A G E region,
    parse LABEL = value pairs and wrap them as a per-file table.
    """
    start, end = _markers(cfg)
    lines = read_region(path, start, end)
    data = parse_values(lines, _exclude_tokens(cfg))
    df = to_table(data)
    _LOG.info("%s: %d line(s) in region, %d field(s), %d frame(s)",
              Path(path).name, len(lines), df.shape[1], df.shape[0])
    return LisRecord(source_path=Path(path), df=df, n_lines=len(lines))
