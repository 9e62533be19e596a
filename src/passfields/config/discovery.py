"""Locating and reading ``passfields.toml``.

A pass is usually checked from outside its own directory, so the search
starts beside the ``pass.json`` being checked and only then falls back to
the working directory. Each root is walked up to the filesystem root.
``PASSFIELDS_CONFIG`` short-circuits the search.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "passfields.toml"
CONFIG_ENV_VAR = "PASSFIELDS_CONFIG"


def search_roots(target: Path | None = None, cwd: Path | None = None) -> list[Path]:
    """Directories to search, nearest to *target* first, without repeats.

    *target* may be a file (its directory is used) or a directory.
    """
    roots: list[Path] = []
    if target is not None:
        target = target.resolve()
        roots.append(target if target.is_dir() else target.parent)
    base = (cwd or Path.cwd()).resolve()
    if base not in roots:
        roots.append(base)
    return roots


def _walk_up(start: Path) -> Iterator[Path]:
    yield start
    yield from start.parents


def find_config(*roots: Path) -> Path | None:
    """Return the first ``passfields.toml`` found walking up from *roots*.

    Without roots the working directory is searched. A set
    ``PASSFIELDS_CONFIG`` wins; if it names a missing file, None.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    for root in roots or (Path.cwd(),):
        for directory in _walk_up(root.resolve()):
            candidate = directory / CONFIG_FILENAME
            if candidate.is_file():
                return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    return tomllib.loads(path.read_text(encoding="utf-8"))
