# amber_LisReporter/main.py
from __future__ import annotations
from pathlib import Path
import logging
import sys
import yaml

from .core.errors import ArgumentError, ConfigurationError, RelisError
from .core.pipeline import run_pipeline, verbose_from
from .utils.detect import discover_inputs, split_target

USAGE = 'Usage: relis "path/to/directory/pattern" (glob style) [config.yaml]'
DEFAULT_CONFIG = Path(__file__).resolve().parent / "config.yaml"
CONFIG_SECTIONS = ("input", "parsing", "output", "reports", "logging")

def load_config(cfg_path: Path) -> dict:
    try:
        with cfg_path.open("r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"cannot load config {cfg_path}: {e}") from e
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ConfigurationError(f"{cfg_path}: top level must be a mapping")
    for section in CONFIG_SECTIONS:
        value = cfg.get(section)
        if value is not None and not isinstance(value, dict):
            raise ConfigurationError(f"{cfg_path}: section '{section}' must be a mapping, got {value!r}")
    return cfg

def merge_config(base: dict, override: dict) -> dict:
    """Section-wise merge: keys in ``override`` win, untouched keys keep defaults."""
    out = {k: (dict(v) if isinstance(v, dict) else v) for k, v in base.items()}
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k].update(v)
        else:
            out[k] = v
    return out

def parse_args(argv: list[str]) -> tuple[str, Path, Path | None] | None:
    """Return (pattern, directory, user_config) or None when help was requested."""
    if len(argv) < 1:
        raise ArgumentError(f"Not enough arguments provided. {USAGE}")
    if argv[0] == "help":
        return None
    pattern, directory = split_target(argv[0])
    user_cfg = Path(argv[1]) if len(argv) > 1 else None
    return pattern, directory, user_cfg

def run(argv: list[str]) -> int:
    parsed = parse_args(argv)
    if parsed is None:
        print(USAGE)
        return 0
    pattern, directory, user_cfg = parsed

    # ---------- config ----------
    cfg = load_config(DEFAULT_CONFIG)
    if user_cfg is not None:
        cfg = merge_config(cfg, load_config(user_cfg))
    verbose = verbose_from(cfg)
    # per-file field counts (loaders) are logged at INFO
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # ---------- discover ----------
    print(f'Searching pattern "{pattern}" in directory {directory}')
    files = discover_inputs(directory, pattern)
    print(f"Files found: {len(files)}")
    if verbose:
        for f in files:
            print(f)

    run_pipeline(files, cfg, directory)
    return 0

def main():
    try:
        code = run(sys.argv[1:])
    except RelisError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(code)

if __name__ == "__main__":
    main()
