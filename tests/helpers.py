"""Helpers for building fake skill source trees."""

from pathlib import Path

SKILL = "chrome-extension-architect"


def write_flat_source(root: Path, skill_name: str = SKILL) -> Path:
    """Create a checkout in the flat layout (SKILL.md at the root)."""

    root.mkdir(parents=True, exist_ok=True)
    (root / "SKILL.md").write_text("# Chrome extension architect\n", encoding="utf-8")
    (root / "README.md").write_text("readme\n", encoding="utf-8")
    (root / "LICENSE").write_text("MIT\n", encoding="utf-8")
    refs = root / "references"
    refs.mkdir()
    (refs / "side-panel.md").write_text("side panel\n", encoding="utf-8")
    (refs / "permissions.md").write_text("permissions\n", encoding="utf-8")
    res = root / "resources"
    res.mkdir()
    (res / "template.json").write_text("{}\n", encoding="utf-8")
    cmd = root / "command"
    cmd.mkdir()
    (cmd / f"load-{skill_name}.md").write_text("load the skill\n", encoding="utf-8")
    return root


def write_bundle_source(root: Path, skill_name: str = SKILL) -> Path:
    """Create a checkout already in the ``skill/<name>/`` layout."""

    skill_dir = root / "skill" / skill_name
    (skill_dir / "references").mkdir(parents=True)
    (skill_dir / "SKILL.md").write_text("# skill\n", encoding="utf-8")
    (skill_dir / "README.md").write_text("readme\n", encoding="utf-8")
    (skill_dir / "references" / "storage.md").write_text("storage\n", encoding="utf-8")
    (skill_dir / "references" / "debugging.md").write_text("debug\n", encoding="utf-8")
    cmd = root / "command"
    cmd.mkdir()
    (cmd / f"{skill_name}.md").write_text("command\n", encoding="utf-8")
    return root


def tree_snapshot(root: Path) -> dict:
    """Map of relative path -> bytes for every file under ``root``."""

    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }

