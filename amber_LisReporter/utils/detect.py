# amber_LisReporter/utils/detect.py
from __future__ import annotations
from pathlib import Path
import os

from ..core.errors import ArgumentError, GlobError

def _check_utf8(text: str, what: str) -> str:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ArgumentError(f"{what} is not valid UTF-8") from e
    return text

def split_target(target: str, cwd: Path | None = None) -> tuple[str, Path]:
    """
    "runs/md_*.lis" -> ("md_*.lis", Path("runs")).
    Without a directory part the search directory is ``cwd`` (default: os.getcwd()).
    """
    _check_utf8(target, "Path argument")
    p = Path(target)
    pattern = p.name
    if not pattern:
        raise ArgumentError(f"Failed to extract a file name pattern from {target!r}")
    parent = p.parent
    if str(parent) in ("", "."):
        if os.sep not in target and (os.altsep is None or os.altsep not in target):
            parent = Path(cwd) if cwd is not None else Path.cwd()
    return pattern, parent

def discover_inputs(root: Path, pattern: str) -> list[Path]:
    """Shell-style glob of regular files directly under ``root``, sorted by path."""
    if not pattern or pattern.strip() == "":
        raise GlobError("empty file name pattern")
    if "**" in pattern:
        raise GlobError(f"recursive patterns are not supported: {pattern!r}")
    try:
        found = [p for p in Path(root).glob(pattern) if p.is_file()]
    except (ValueError, NotImplementedError) as e:
        raise GlobError(f"malformed pattern {pattern!r}: {e}") from e
    # deterministic ordering
    found.sort(key=lambda x: str(x))
    return found
