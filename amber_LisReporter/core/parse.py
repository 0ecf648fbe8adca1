# amber_LisReporter/core/parse.py
from __future__ import annotations
import logging
import re
from typing import Iterable, Sequence

from .errors import PatternError, ValueFormatError

_LOG = logging.getLogger(__name__)

DEFAULT_EXCLUDE_TOKENS: tuple[str, ...] = ("KE", "err")

# label: optional "1-4 " style prefix, letters, optional (UNIT) qualifier
# value: greedy over digits and dots so that "1.2.3" is captured whole and rejected,
# with an optional exponent ("0.1234E-03")
_FIELD_PATTERN = r"([1\-4\s]*[A-Za-z]+[\(A-Z)]*)\s+=\s+(-?\d+[.\d]*(?:[eE][-+]?\d+)?)"

def _compile(pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternError(f"invalid field pattern {pattern!r}: {e}") from e

_FIELD_RE = _compile(_FIELD_PATTERN)

def _is_excluded(line: str, tokens: Sequence[str]) -> bool:
    return any(tok in line for tok in tokens)

def parse_values(lines: Iterable[str],
                 exclude_tokens: Sequence[str] = DEFAULT_EXCLUDE_TOKENS) -> dict[str, list[float]]:
    """
    Collect ``LABEL = value`` pairs from every line, in line order.

    Lines containing any of ``exclude_tokens`` are dropped as a whole.
    Labels are stripped; values must parse as float or ValueFormatError is raised.
    The returned dict is ordered by field name.
    """
    data: dict[str, list[float]] = {}
    for lineno, line in enumerate(lines, start=1):
        if _is_excluded(line, exclude_tokens):
            _LOG.debug("skipping excluded line %d: %s", lineno, line.strip())
            continue
        for m in _FIELD_RE.finditer(line):
            key = m.group(1).strip()
            text = m.group(2)
            try:
                value = float(text)
            except ValueError as e:
                raise ValueFormatError(
                    f"field {key!r}: cannot parse {text!r} as a number (line {lineno}: {line.strip()!r})"
                ) from e
            data.setdefault(key, []).append(value)
    return {k: data[k] for k in sorted(data)}
