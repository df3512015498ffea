"""Fetch the skill bundle and stage it in the ``skill/<name>/`` layout.

The bundle is either cloned from the canonical repository into a temporary
directory or taken from a local checkout (``--self``). Local checkouts that
are not yet in the final layout are copied into a staging directory; the
source tree itself is never modified.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional

from skill_installer.config import InstallerConfig
from skill_installer.errors import SourceError

logger = logging.getLogger(__name__)

# Paths copied into skill/<name>/ when a checkout is not in the final layout.
BUNDLE_FILES = ("SKILL.md", "Skill.md", "README.md", "LICENSE")
BUNDLE_DIRS = ("references", "resources")
MANIFEST_NAMES = ("SKILL.md", "Skill.md")


class Source(Enum):
    REMOTE = "remote"
    SELF = "self"


@dataclass(frozen=True, slots=True)
class StagedBundle:
    """A bundle ready to be copied: the skill tree plus its command file."""

    skill_dir: Path
    command_file: Optional[Path] = None


def clone_repository(repo_url: str, dest: Path, git: str = "git") -> Path:
    """Shallow, quiet clone of ``repo_url`` into ``dest``."""

    cmd = [git, "clone", "--depth", "1", "--quiet", repo_url, str(dest)]
    logger.debug(f"Running: {' '.join(cmd)}")
    try:
        subprocess.run(cmd, check=True, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise SourceError(f"git executable not found: {git}") from e
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
        raise SourceError(f"Failed to clone {repo_url}: {detail}") from e

    logger.info(f"Cloned {repo_url} into {dest}")
    return dest


def _find_command_file(root: Path, skill_name: str) -> Optional[Path]:
    """Locate the command file, preferring the canonical ``<name>.md``."""

    command_dir = root / "command"
    canonical = command_dir / f"{skill_name}.md"
    if canonical.is_file():
        return canonical
    if not command_dir.is_dir():
        return None

    prefixed = command_dir / f"load-{skill_name}.md"
    if prefixed.is_file():
        return prefixed

    candidates = sorted(p for p in command_dir.glob("*.md") if p.is_file())
    if len(candidates) == 1:
        return candidates[0]
    if candidates:
        logger.warning(
            f"Ambiguous command files in {command_dir}: "
            f"{', '.join(p.name for p in candidates)}"
        )
    return None


def _synthesize_skill_dir(root: Path, staged_skill_dir: Path) -> Path:
    """Copy the known bundle paths from ``root`` into ``staged_skill_dir``."""

    if not any((root / name).is_file() for name in MANIFEST_NAMES):
        raise SourceError(f"No SKILL.md found in {root}")

    staged_skill_dir.mkdir(parents=True)
    for name in BUNDLE_FILES:
        src = root / name
        if src.is_file():
            shutil.copy2(src, staged_skill_dir / name)
    for name in BUNDLE_DIRS:
        src = root / name
        if src.is_dir():
            shutil.copytree(src, staged_skill_dir / name)

    logger.debug(f"Staged skill tree from {root} into {staged_skill_dir}")
    return staged_skill_dir


def normalize_layout(root: Path, staging: Path, skill_name: str) -> StagedBundle:
    """Return a ``StagedBundle`` for ``root``, staging into ``staging`` if needed.

    A checkout already shaped as ``skill/<name>/`` is used directly.
    Otherwise the bundle files are copied to ``staging/skill/<name>/``.
    A non-canonical command file (e.g. ``load-<name>.md``) is copied to
    ``staging/command/<name>.md``.
    """

    if not root.is_dir():
        raise SourceError(f"Skill source directory does not exist: {root}")

    skill_dir = root / "skill" / skill_name
    if not skill_dir.is_dir():
        skill_dir = _synthesize_skill_dir(root, staging / "skill" / skill_name)

    command_file = _find_command_file(root, skill_name)
    canonical_name = f"{skill_name}.md"
    if command_file is not None and command_file.name != canonical_name:
        staged_command = staging / "command" / canonical_name
        staged_command.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(command_file, staged_command)
        logger.debug(f"Staged command file {command_file.name} as {canonical_name}")
        command_file = staged_command

    return StagedBundle(skill_dir=skill_dir, command_file=command_file)


@contextmanager
def stage_bundle(source: Source, config: InstallerConfig) -> Iterator[StagedBundle]:
    """Acquire the bundle for the duration of the ``with`` block.

    The temporary directory (clone target and staging area) is removed on
    exit, including when the body raises.
    """

    with tempfile.TemporaryDirectory(prefix="chrome_skill_") as tmp:
        tmp_dir = Path(tmp)
        if source is Source.REMOTE:
            root = clone_repository(
                config.repo_url, tmp_dir / "repo", git=config.git_executable
            )
        else:
            root = config.self_root

        yield normalize_layout(root, tmp_dir / "staging", config.skill_name)
