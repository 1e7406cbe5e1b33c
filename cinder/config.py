from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List

DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path] = ()) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_import_path() -> List[Path]:
    """Directories searched by (import "file") after the importing file's own."""
    return paths_from_env('CINDER_PATH')


def get_log_level() -> str:
    return os.environ.get('CINDER_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
