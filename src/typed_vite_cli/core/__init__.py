"""Core utilities and configuration exports."""

from .config import (
    DEFAULT_DESCRIPTION,
    DEFAULT_LICENSE,
    DEFAULT_PROJECT_NAME,
    DEFAULT_TEMPLATE_REPO,
    LICENSE_CHOICES,
    LicenseChoice,
    ScaffoldSettings,
    load_settings,
)
from .context import Answers, InvocationContext, resolve_invocation, validate_project_name
from .errors import ScaffoldError

__all__ = [
    "Answers",
    "DEFAULT_DESCRIPTION",
    "DEFAULT_LICENSE",
    "DEFAULT_PROJECT_NAME",
    "DEFAULT_TEMPLATE_REPO",
    "InvocationContext",
    "LICENSE_CHOICES",
    "LicenseChoice",
    "ScaffoldError",
    "ScaffoldSettings",
    "load_settings",
    "resolve_invocation",
    "validate_project_name",
]
