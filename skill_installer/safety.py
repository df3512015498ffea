"""Pre-deletion safety checks.

Existing installs are replaced with ``rm -rf`` semantics. Every check here
raises ``SafetyError``.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Optional, Union

from skill_installer.errors import SafetyError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _canonical(path: Path) -> Path:
    """Resolve symlinks and normalize separators without requiring existence."""

    return Path(os.path.realpath(os.path.normpath(path)))


def ensure_safe_target(path: Optional[PathLike], home: Path) -> Path:
    """Reject empty paths, the filesystem root and the home directory.

    Both the raw string and the canonical path are compared, so
    ``~/.claude/skills/..`` or a symlink pointing at ``$HOME`` are caught
    as well as the literal values.

    Returns:
        The path as a ``Path``.
    """

    raw = os.fspath(path) if path is not None else ""
    if raw.strip() in ("", "."):
        raise SafetyError(f"Target path is restricted: {raw!r}")

    home_raw = os.fspath(home).rstrip("/\\")
    if raw == "/" or raw.rstrip("/\\") == home_raw:
        raise SafetyError(f"Target path is restricted: {raw}")

    canonical = _canonical(Path(raw))
    if canonical == Path(canonical.anchor) or canonical == _canonical(home):
        raise SafetyError(f"Target path is restricted: {raw} (resolves to {canonical})")

    return Path(raw)


def ensure_removable(target: Path, base_dir: Path, skill_name: str) -> None:
    """Verify ``target`` is exactly ``<base_dir>/<skill_name>`` before deleting it."""

    if target.name != skill_name:
        raise SafetyError(
            f"Target directory does not end in {skill_name}. Aborting deletion: {target}"
        )

    if _canonical(target.parent) != _canonical(base_dir):
        raise SafetyError(
            f"Target directory {target} is not inside {base_dir}. Aborting deletion."
        )


def remove_path(path: Path) -> None:
    """Remove a file, symlink or directory tree. Symlinks are never followed."""

    if path.is_symlink() or path.is_file():
        logger.debug(f"Unlinking {path}")
        path.unlink()
    elif path.is_dir():
        logger.debug(f"Removing directory tree {path}")
        shutil.rmtree(path)
