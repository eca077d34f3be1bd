from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Per-user standard library location
_DEFAULT_STDLIB_DIR = Path.home() / '.polaris' / 'stdlib'


def paths_from_env(var: str, defaults: Iterable[Path] = ()) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_stdlib_dir() -> Path:
    return _DEFAULT_STDLIB_DIR


def get_include_dirs(extra: Iterable[str | Path] = ()) -> List[Path]:
    """Include directories in search order: explicit, POLARIS_PATH, then stdlib."""
    dirs = [Path(p) for p in extra]
    dirs.extend(paths_from_env('POLARIS_PATH'))
    stdlib = get_stdlib_dir()
    if stdlib.is_dir():
        dirs.append(stdlib)
    return dirs
