"""Directory reset and removal helpers shared by the generator, runner and cleanup."""

from __future__ import annotations

import shutil
from pathlib import Path


def reset_directory(path: Path) -> Path:
    """Deletes ``path`` if it exists and recreates it empty."""

    path = Path(path)
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()
    path.mkdir(parents=True, exist_ok=True)
    return path


def remove_path(path: Path) -> bool:
    """Removes a file or directory tree.

    Returns ``False`` when nothing was there. Other ``OSError`` values
    propagate to the caller.
    """

    path = Path(path)
    if path.is_dir() and not path.is_symlink():
        try:
            shutil.rmtree(path)
        except FileNotFoundError:
            return False
        return True
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    return True
