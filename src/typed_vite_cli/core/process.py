"""Subprocess helpers shared by the git and package-manager steps."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def run_command(
    cmd: list[str],
    *,
    cwd: Path | None = None,
    capture: bool = False,
) -> Optional[str]:
    """Run ``cmd`` and return its stdout when ``capture`` is set.

    Without ``capture`` the child inherits the terminal, so its output streams
    straight to the user. Raises ``subprocess.CalledProcessError`` on a
    non-zero exit and ``FileNotFoundError`` when the executable is missing.
    """
    logger.debug("Running %s (cwd=%s)", " ".join(cmd), cwd or ".")
    try:
        if capture:
            result = subprocess.run(
                cmd,
                cwd=str(cwd) if cwd else None,
                check=True,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
            return result.stdout.strip()
        subprocess.run(cmd, cwd=str(cwd) if cwd else None, check=True)
        return None
    except subprocess.CalledProcessError as e:
        logger.debug("Command %s exited with %s", " ".join(cmd), e.returncode)
        if e.stderr:
            logger.debug("stderr: %s", e.stderr.strip())
        raise


def describe_failure(error: subprocess.CalledProcessError) -> str:
    """Best single-line explanation of a failed command."""
    stderr = (error.stderr or "").strip() if isinstance(error.stderr, str) else ""
    for line in reversed(stderr.splitlines()):
        if line.strip():
            return line.strip()
    cmd = error.cmd if isinstance(error.cmd, str) else " ".join(error.cmd)
    return f"'{cmd}' exited with status {error.returncode}"


__all__ = ["describe_failure", "run_command"]
