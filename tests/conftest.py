from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Callable

import pytest

from tests.utils import write_template_tree


@pytest.fixture()
def fake_clone() -> Callable[[str, Path], None]:
    """Clone stand-in that writes a template tree plus git metadata."""
    calls: list[tuple[str, Path]] = []

    def _clone(repo_url: str, destination: Path) -> None:
        calls.append((repo_url, destination))
        write_template_tree(destination)
        (destination / ".git").mkdir()
        (destination / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
        (destination / "node_modules" / "left-pad").mkdir(parents=True)

    _clone.calls = calls  # type: ignore[attr-defined]
    return _clone


def _git(args: list[str], cwd: Path) -> None:
    subprocess.run(
        ["git", "-c", "user.name=Test User", "-c", "user.email=test@example.com", *args],
        cwd=cwd,
        check=True,
        capture_output=True,
    )


@pytest.fixture()
def template_repo(tmp_path: Path) -> Path:
    """A local git repository standing in for the upstream template."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    repo = tmp_path / "template-source"
    write_template_tree(repo)
    _git(["init"], repo)
    _git(["add", "."], repo)
    _git(["commit", "-m", "Template"], repo)
    return repo


@pytest.fixture()
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty working directory the test runs from."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    for key in ("TYPED_VITE_TEMPLATE_REPO", "TYPED_VITE_PACKAGE_MANAGER", "TYPED_VITE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return work
