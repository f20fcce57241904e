from __future__ import annotations

from typed_vite_cli.core.config import (
    DEFAULT_LICENSE,
    DEFAULT_PACKAGE_MANAGER,
    DEFAULT_TEMPLATE_REPO,
    LICENSE_CHOICES,
    load_settings,
)


def test_license_choices_cover_fixed_set_in_order():
    assert list(LICENSE_CHOICES) == [
        "MIT",
        "Apache-2.0",
        "GPL-3.0",
        "BSD-3-Clause",
        "UNLICENSED",
        "PROPRIETARY",
    ]
    assert DEFAULT_LICENSE in LICENSE_CHOICES
    assert all(choice.description for choice in LICENSE_CHOICES.values())


def test_load_settings_defaults():
    settings = load_settings({})
    assert settings.template_repo == DEFAULT_TEMPLATE_REPO
    assert settings.package_manager == DEFAULT_PACKAGE_MANAGER
    assert settings.log_level == "WARNING"


def test_load_settings_env_overrides():
    settings = load_settings(
        {
            "TYPED_VITE_TEMPLATE_REPO": "/srv/templates/vite",
            "TYPED_VITE_PACKAGE_MANAGER": "pnpm",
            "TYPED_VITE_LOG_LEVEL": "debug",
        }
    )
    assert settings.template_repo == "/srv/templates/vite"
    assert settings.package_manager == "pnpm"
    assert settings.log_level == "DEBUG"


def test_blank_env_values_fall_back_to_defaults():
    settings = load_settings({"TYPED_VITE_PACKAGE_MANAGER": "   "})
    assert settings.package_manager == DEFAULT_PACKAGE_MANAGER
