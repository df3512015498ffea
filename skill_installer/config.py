"""Installer configuration.

All settings are read from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from skill_installer.errors import ConfigurationError

SKILL_NAME = "chrome-extension-architect"
REPO_URL = "https://github.com/Alcyone-Labs/chrome-extension-agent-skill.git"

# Repository checkout that contains this package (used by --self).
DEFAULT_SELF_ROOT = Path(__file__).resolve().parent.parent


def _env_flag(name: str) -> bool:
    return os.getenv(name, "0").lower() in ("1", "true", "yes")


def validate_skill_name(name: str) -> str:
    """Return ``name`` if it is safe to use as a single directory name.

    Raises:
        ConfigurationError: if the name is empty, contains a path separator
            or whitespace, or is a relative directory marker.
    """
    if not name:
        raise ConfigurationError("Skill name is unset.")
    if (
        "/" in name
        or "\\" in name
        or any(ch.isspace() for ch in name)
        or name in (".", "..")
    ):
        raise ConfigurationError(
            f"Skill name contains illegal characters or path separators: {name!r}"
        )
    return name


@dataclass(frozen=True)
class InstallerConfig:
    """Immutable configuration for one installer run."""

    skill_name: str
    repo_url: str
    home: Path
    cwd: Path
    self_root: Path
    git_executable: str = "git"
    no_color: bool = False

    @classmethod
    def from_env(cls) -> "InstallerConfig":
        """Build config from environment variables.

        Environment variables:
            CHROME_SKILL_REPO_URL:  repository cloned for remote installs
            CHROME_SKILL_SELF_ROOT: source tree used by --self (default: repo root)
            CHROME_SKILL_GIT:       git executable (default: "git")
            CHROME_SKILL_NO_COLOR:  "1" / "true" / "yes" disables colored output
        """
        self_root = os.getenv("CHROME_SKILL_SELF_ROOT")
        return cls(
            skill_name=SKILL_NAME,
            repo_url=os.getenv("CHROME_SKILL_REPO_URL", REPO_URL),
            home=Path.home(),
            cwd=Path.cwd(),
            self_root=Path(self_root) if self_root else DEFAULT_SELF_ROOT,
            git_executable=os.getenv("CHROME_SKILL_GIT", "git"),
            no_color=_env_flag("CHROME_SKILL_NO_COLOR"),
        )
