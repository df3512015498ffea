"""Fan-out install of the staged skill bundle.

Each platform gets a clean copy: an existing ``<skills_dir>/<name>`` is
removed and replaced, never merged, so files dropped from the bundle do not
linger. The first failure aborts the whole run.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from skill_installer.config import InstallerConfig
from skill_installer.errors import SourceError
from skill_installer.platforms import Platform, Scope, get_platforms
from skill_installer.safety import ensure_removable, ensure_safe_target, remove_path
from skill_installer.source import StagedBundle

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InstallResult:
    platform: str
    skill_path: Path
    command_path: Optional[Path] = None
    was_update: bool = False


def _normalize_manifest_name(skill_dir: Path) -> None:
    """Rename ``Skill.md`` to ``SKILL.md`` for tools that expect upper case."""

    legacy = skill_dir / "Skill.md"
    if not legacy.is_file():
        return
    # On case-insensitive filesystems both names hit the same file.
    names = {p.name for p in skill_dir.iterdir()}
    if "Skill.md" in names and "SKILL.md" not in names:
        legacy.rename(skill_dir / "SKILL.md")
        logger.debug(f"Renamed {legacy} to SKILL.md")


def _install_command(
    bundle: StagedBundle, commands_dir: Path, config: InstallerConfig
) -> Path:
    if bundle.command_file is None:
        raise SourceError(
            f"Command file {config.skill_name}.md is missing from the skill source"
        )

    cmd_path = ensure_safe_target(
        commands_dir / f"{config.skill_name}.md", config.home
    )
    commands_dir.mkdir(parents=True, exist_ok=True)
    if cmd_path.exists() or cmd_path.is_symlink():
        remove_path(cmd_path)
    shutil.copy2(bundle.command_file, cmd_path)
    return cmd_path


def install_to(
    platform: Platform,
    bundle: StagedBundle,
    scope: Scope,
    config: InstallerConfig,
) -> Optional[InstallResult]:
    """Install ``bundle`` for one platform.

    Returns:
        The installed paths, or None if the platform was skipped because its
        config directory does not exist (global scope only).
    """

    base_dir = platform.skills_dir
    target = ensure_safe_target(base_dir / config.skill_name, config.home)

    if not platform.should_install(scope):
        logger.debug(
            f"Skipping {platform.display_name(scope)}: {base_dir.parent} not found"
        )
        return None

    logger.info(f"Installing to {platform.display_name(scope)} at {target}")
    base_dir.mkdir(parents=True, exist_ok=True)

    was_update = target.exists() or target.is_symlink()
    if was_update:
        ensure_removable(target, base_dir, config.skill_name)
        remove_path(target)

    shutil.copytree(bundle.skill_dir, target)
    _normalize_manifest_name(target)

    command_path = None
    if platform.supports_commands:
        command_path = _install_command(bundle, platform.commands_dir, config)

    return InstallResult(
        platform=platform.display_name(scope),
        skill_path=target,
        command_path=command_path,
        was_update=was_update,
    )


def install_all(
    bundle: StagedBundle,
    scope: Scope,
    config: InstallerConfig,
    platforms: Optional[Sequence[Platform]] = None,
) -> List[InstallResult]:
    """Install ``bundle`` for every platform in order, stopping at the first error."""

    if platforms is None:
        platforms = get_platforms(scope, config.home, config.cwd)

    results: List[InstallResult] = []
    for platform in platforms:
        result = install_to(platform, bundle, scope, config)
        if result is not None:
            results.append(result)

    logger.info(f"Installed {config.skill_name} for {len(results)} platform(s)")
    return results
