"""Pytest fixtures for the skill installer tests.

Every test gets its own fake home directory, project directory and skill
source tree under ``tmp_path`` so nothing touches the real user config.
"""

from pathlib import Path

import pytest

from skill_installer.config import InstallerConfig
from tests.helpers import SKILL, write_bundle_source, write_flat_source


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def flat_source(tmp_path: Path) -> Path:
    return write_flat_source(tmp_path / "src")


@pytest.fixture
def bundle_source(tmp_path: Path) -> Path:
    return write_bundle_source(tmp_path / "bundle")


@pytest.fixture
def make_config(home: Path, project: Path):
    def _make(self_root: Path, **overrides) -> InstallerConfig:
        values = dict(
            skill_name=SKILL,
            repo_url="https://example.invalid/skill.git",
            home=home,
            cwd=project,
            self_root=self_root,
            no_color=True,
        )
        values.update(overrides)
        return InstallerConfig(**values)

    return _make
