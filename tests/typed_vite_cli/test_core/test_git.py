"""Tests for git presence probing, cloning and init."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from tests.utils import requires_git
from typed_vite_cli.core import git
from typed_vite_cli.core.errors import GitNotInstalledError, TemplateCloneError, VCSInitError


def test_is_git_available_false_when_not_on_path():
    with patch("typed_vite_cli.core.git.shutil.which", return_value=None):
        assert git.is_git_available() is False


def test_is_git_available_false_when_version_fails():
    failed = subprocess.CompletedProcess(["git", "--version"], returncode=1)
    with patch("typed_vite_cli.core.git.shutil.which", return_value="/usr/bin/git"), patch(
        "typed_vite_cli.core.git.subprocess.run", return_value=failed
    ):
        assert git.is_git_available() is False


def test_ensure_git_available_raises_with_hint():
    with patch("typed_vite_cli.core.git.is_git_available", return_value=False):
        with pytest.raises(GitNotInstalledError) as excinfo:
            git.ensure_git_available()
    assert "Git is not installed" in str(excinfo.value)
    assert excinfo.value.hint == "https://git-scm.com/downloads"


def test_clone_missing_executable_maps_to_not_installed(tmp_path: Path):
    with patch("typed_vite_cli.core.git.run_command", side_effect=FileNotFoundError("git")):
        with pytest.raises(GitNotInstalledError):
            git.clone_repository("https://example.invalid/repo", tmp_path / "dest")


def test_clone_failure_carries_git_stderr(tmp_path: Path):
    error = subprocess.CalledProcessError(
        128,
        ["git", "clone"],
        stderr="Cloning into 'dest'...\nfatal: repository 'nope' does not exist\n",
    )
    with patch("typed_vite_cli.core.git.run_command", side_effect=error):
        with pytest.raises(TemplateCloneError) as excinfo:
            git.clone_repository("nope", tmp_path / "dest")
    assert str(excinfo.value) == "Error cloning template: fatal: repository 'nope' does not exist"


@requires_git
def test_clone_repository_from_local_source(template_repo: Path, tmp_path: Path):
    dest = tmp_path / "clone"
    git.clone_repository(str(template_repo), dest)
    assert (dest / "package.json").is_file()
    assert (dest / ".git").is_dir()


@requires_git
def test_clone_repository_missing_source(tmp_path: Path):
    with pytest.raises(TemplateCloneError):
        git.clone_repository(str(tmp_path / "does-not-exist"), tmp_path / "dest")


@requires_git
def test_init_repository_creates_empty_history(tmp_path: Path):
    project = tmp_path / "project"
    project.mkdir()
    git.init_repository(project)
    assert (project / ".git").is_dir()
    log = subprocess.run(["git", "log"], cwd=project, capture_output=True, text=True)
    assert log.returncode != 0  # no commits yet


def test_init_repository_failure_is_wrapped(tmp_path: Path):
    error = subprocess.CalledProcessError(1, ["git", "init"], stderr="fatal: cannot mkdir\n")
    with patch("typed_vite_cli.core.git.run_command", side_effect=error):
        with pytest.raises(VCSInitError, match="Error initializing git: fatal: cannot mkdir"):
            git.init_repository(tmp_path)
