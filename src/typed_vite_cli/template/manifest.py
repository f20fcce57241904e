"""Rewrite the generated project's package.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from typed_vite_cli.core.config import MANIFEST_FILENAME
from typed_vite_cli.core.errors import ManifestError

logger = logging.getLogger(__name__)


def load_manifest(manifest_path: Path) -> dict:
    if not manifest_path.is_file():
        raise ManifestError(f"Error updating {MANIFEST_FILENAME}: {manifest_path} not found")
    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ManifestError(f"Error updating {MANIFEST_FILENAME}: invalid JSON ({e})") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"Error updating {MANIFEST_FILENAME}: {e}") from e
    if not isinstance(data, dict):
        raise ManifestError(
            f"Error updating {MANIFEST_FILENAME}: expected a JSON object, got {type(data).__name__}"
        )
    return data


def serialize_manifest(data: dict) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def update_manifest(project_path: Path, *, name: str, description: str, license: str) -> Path:
    """Overwrite ``name``, ``description`` and ``license`` in package.json.

    Other keys keep their values and order. The file is written only after
    it has been fully parsed.
    """
    manifest_path = project_path / MANIFEST_FILENAME
    data = load_manifest(manifest_path)

    data["name"] = name
    data["description"] = description
    data["license"] = license

    try:
        manifest_path.write_text(serialize_manifest(data), encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"Error updating {MANIFEST_FILENAME}: {e}") from e

    logger.debug("Updated %s (name=%s, license=%s)", manifest_path, name, license)
    return manifest_path


__all__ = ["load_manifest", "serialize_manifest", "update_manifest"]
