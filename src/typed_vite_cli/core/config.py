"""Static configuration and environment overrides for the scaffolder."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Mapping

DEFAULT_TEMPLATE_REPO = "https://github.com/alphaorderly/typed-vite-react-template"
DEFAULT_PACKAGE_MANAGER = "yarn"
DEFAULT_LOG_LEVEL = "WARNING"

TEMPLATE_REPO_ENV = "TYPED_VITE_TEMPLATE_REPO"
PACKAGE_MANAGER_ENV = "TYPED_VITE_PACKAGE_MANAGER"
LOG_LEVEL_ENV = "TYPED_VITE_LOG_LEVEL"

MANIFEST_FILENAME = "package.json"
README_FILENAME = "README.md"
VCS_DIR = ".git"
DEPENDENCY_CACHE_DIR = "node_modules"

# Entries a current-directory target may already contain.
ALLOWED_EXISTING_ENTRIES = frozenset({VCS_DIR, DEPENDENCY_CACHE_DIR})

DEFAULT_PROJECT_NAME = "my-vite-react-app"
DEFAULT_DESCRIPTION = "A TypeScript React project with Vite"
PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

GIT_INSTALL_URL = "https://git-scm.com/downloads"

TITLE = "Typed Vite React Template Setup"
TAGLINE = "Let's configure your new project!"


@dataclass(frozen=True)
class LicenseChoice:
    """A selectable license; ``description`` is display-only."""

    value: str
    display: str
    description: str


LICENSE_CHOICES: dict[str, LicenseChoice] = {
    choice.value: choice
    for choice in (
        LicenseChoice(
            "MIT",
            "MIT",
            "The MIT License is the most widely used open source license. It allows free use, "
            "modification, and distribution of software. Only requires preservation of copyright "
            "notice and license. Commercial use is permitted.",
        ),
        LicenseChoice(
            "Apache-2.0",
            "Apache 2.0",
            "The Apache 2.0 License includes patent protection clauses. No obligation to disclose "
            "source code, includes explicit permission for patent use. Requires stating changes "
            "and preserving notices.",
        ),
        LicenseChoice(
            "GPL-3.0",
            "GPL 3.0",
            "GPL 3.0 is a copyleft license requiring derivative works to use the same GPL license. "
            "Source code disclosure is mandatory, and includes provisions to protect user freedom.",
        ),
        LicenseChoice(
            "BSD-3-Clause",
            "BSD 3 Clause",
            "BSD 3-Clause is a permissive license. Allows free use with minimal restrictions - just "
            "maintain copyright notice, license text, and disclaimer. No source code disclosure "
            "required.",
        ),
        LicenseChoice(
            "UNLICENSED",
            "None",
            "Explicitly indicates no license is granted. All rights are reserved by default, "
            "meaning others cannot use, modify, or distribute the code without permission.",
        ),
        LicenseChoice(
            "PROPRIETARY",
            "Proprietary",
            "Indicates proprietary software. All rights are reserved by the copyright holder. "
            "No use, modification, or distribution is allowed without explicit permission.",
        ),
    )
}

DEFAULT_LICENSE = "MIT"


@dataclass(frozen=True)
class ScaffoldSettings:
    """Runtime settings resolved from the environment."""

    template_repo: str = DEFAULT_TEMPLATE_REPO
    package_manager: str = DEFAULT_PACKAGE_MANAGER
    log_level: str = DEFAULT_LOG_LEVEL


def _env_value(environ: Mapping[str, str], key: str, default: str) -> str:
    value = (environ.get(key) or "").strip()
    return value or default


def load_settings(environ: Mapping[str, str] | None = None) -> ScaffoldSettings:
    """Build settings from environment variables, falling back to defaults.

    Blank values are treated as unset.
    """
    if environ is None:
        environ = os.environ
    return ScaffoldSettings(
        template_repo=_env_value(environ, TEMPLATE_REPO_ENV, DEFAULT_TEMPLATE_REPO),
        package_manager=_env_value(environ, PACKAGE_MANAGER_ENV, DEFAULT_PACKAGE_MANAGER),
        log_level=_env_value(environ, LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
    )


__all__ = [
    "ALLOWED_EXISTING_ENTRIES",
    "DEFAULT_DESCRIPTION",
    "DEFAULT_LICENSE",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_PACKAGE_MANAGER",
    "DEFAULT_PROJECT_NAME",
    "DEFAULT_TEMPLATE_REPO",
    "DEPENDENCY_CACHE_DIR",
    "GIT_INSTALL_URL",
    "LICENSE_CHOICES",
    "LOG_LEVEL_ENV",
    "LicenseChoice",
    "MANIFEST_FILENAME",
    "PACKAGE_MANAGER_ENV",
    "PROJECT_NAME_PATTERN",
    "README_FILENAME",
    "ScaffoldSettings",
    "TAGLINE",
    "TEMPLATE_REPO_ENV",
    "TITLE",
    "VCS_DIR",
    "load_settings",
]
