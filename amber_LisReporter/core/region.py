# amber_LisReporter/core/region.py
from __future__ import annotations
from pathlib import Path
from typing import Iterable

from .errors import FileSystemError

DEFAULT_START_MARKER = "RESULTS"
DEFAULT_END_MARKER = "A V E R A G E"

def extract_region(lines: Iterable[str], start_marker: str, end_marker: str) -> list[str]:
    """
    Keep the lines strictly between the first line containing ``start_marker``
    and the next line containing ``end_marker``.

    - the marker lines themselves are never returned
    - an end marker seen before the start marker is ignored
    - no start marker -> []; no end marker -> everything up to EOF
    """
    kept: list[str] = []
    started = False
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not started:
            if start_marker in line:
                started = True
            continue
        if end_marker in line:
            break
        kept.append(line)
    return kept

def read_region(path: Path, start_marker: str = DEFAULT_START_MARKER,
                end_marker: str = DEFAULT_END_MARKER) -> list[str]:
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            return extract_region(f, start_marker, end_marker)
    except (OSError, UnicodeDecodeError) as e:
        raise FileSystemError(f"cannot read {path}: {e}") from e
