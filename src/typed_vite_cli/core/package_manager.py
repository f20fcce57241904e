"""Dependency installation through the configured package manager."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .errors import DependencyInstallError
from .process import run_command

logger = logging.getLogger(__name__)


def install_dependencies(project_path: Path, *, package_manager: str) -> None:
    """Run ``<package_manager> install`` in ``project_path``.

    Output is streamed to the terminal rather than captured.
    """
    try:
        run_command([package_manager, "install"], cwd=project_path)
    except FileNotFoundError as e:
        raise DependencyInstallError(
            f"Error installing dependencies: '{package_manager}' was not found on PATH"
        ) from e
    except subprocess.CalledProcessError as e:
        raise DependencyInstallError(
            f"Error installing dependencies: {package_manager} install exited with status {e.returncode}"
        ) from e
    except OSError as e:
        raise DependencyInstallError(f"Error installing dependencies: {e}") from e


__all__ = ["install_dependencies"]
