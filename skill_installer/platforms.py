"""Supported AI tools and where each one looks for skills."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple


class Scope(Enum):
    """Whether skills go into the user's config area or the current project."""

    GLOBAL = "global"
    LOCAL = "local"


@dataclass(frozen=True, slots=True)
class Platform:
    """A single install target: a tool name plus its skill/command dirs."""

    name: str
    skills_dir: Path
    commands_dir: Optional[Path] = None

    @property
    def supports_commands(self) -> bool:
        return self.commands_dir is not None

    def display_name(self, scope: Scope) -> str:
        return f"{self.name} ({scope.value.capitalize()})"

    def should_install(self, scope: Scope) -> bool:
        """Global installs only target tools whose config dir already exists."""
        if scope is Scope.LOCAL:
            return True
        return self.skills_dir.parent.is_dir()


def get_platforms(scope: Scope, home: Path, cwd: Path) -> Tuple[Platform, ...]:
    """Return the ordered platform table for ``scope``.

    Local paths are anchored at ``cwd`` so the result never depends on the
    process working directory changing later.
    """
    if scope is Scope.GLOBAL:
        return (
            Platform(
                "OpenCode",
                home / ".config" / "opencode" / "skills",
                home / ".config" / "opencode" / "commands",
            ),
            Platform("Gemini CLI", home / ".gemini" / "skills"),
            Platform("Claude", home / ".claude" / "skills"),
            Platform("FactoryAI Droid", home / ".factory" / "skills"),
            Platform("Agents", home / ".config" / "agents" / "skills"),
            Platform("Antigravity", home / ".antigravity" / "skills"),
        )

    return (
        Platform(
            "OpenCode",
            cwd / ".opencode" / "skills",
            cwd / ".opencode" / "commands",
        ),
        Platform("Gemini CLI", cwd / ".gemini" / "skills"),
        Platform("Claude", cwd / ".claude" / "skills"),
        Platform("FactoryAI Droid", cwd / ".factory" / "skills"),
        Platform("Agents", cwd / ".agents" / "skills"),
        Platform("Antigravity", cwd / ".antigravity" / "skills"),
    )
