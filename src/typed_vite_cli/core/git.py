"""Git operations: availability check, clone, init."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from .config import GIT_INSTALL_URL
from .errors import GitNotInstalledError, TemplateCloneError, VCSInitError
from .process import describe_failure, run_command

logger = logging.getLogger(__name__)


def is_git_available() -> bool:
    """Whether a usable ``git`` binary exists for cloning the template.

    A ``git`` on PATH that fails ``git --version`` (or hangs past five
    seconds) counts as missing.
    """
    if shutil.which("git") is None:
        return False
    try:
        result = subprocess.run(
            ["git", "--version"],
            capture_output=True,
            timeout=5,
        )
        return result.returncode == 0
    except (subprocess.TimeoutExpired, OSError):
        return False


def ensure_git_available() -> None:
    if not is_git_available():
        raise GitNotInstalledError(hint=GIT_INSTALL_URL)


def clone_repository(repo_url: str, destination: Path) -> None:
    """Clone ``repo_url`` into ``destination`` (which must not exist yet)."""
    logger.debug("Cloning %s into %s", repo_url, destination)
    try:
        run_command(["git", "clone", repo_url, str(destination)], capture=True)
    except FileNotFoundError as e:
        raise GitNotInstalledError(hint=GIT_INSTALL_URL) from e
    except subprocess.CalledProcessError as e:
        raise TemplateCloneError(f"Error cloning template: {describe_failure(e)}") from e


def init_repository(project_path: Path) -> None:
    """Create a fresh git repository in ``project_path``."""
    try:
        run_command(["git", "init"], cwd=project_path, capture=True)
    except FileNotFoundError as e:
        raise GitNotInstalledError(hint=GIT_INSTALL_URL) from e
    except subprocess.CalledProcessError as e:
        raise VCSInitError(f"Error initializing git: {describe_failure(e)}") from e
    except OSError as e:
        raise VCSInitError(f"Error initializing git: {e}") from e


__all__ = ["clone_repository", "ensure_git_available", "init_repository", "is_git_available"]
