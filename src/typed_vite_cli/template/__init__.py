"""Template fetching and rewriting for new projects."""

from .fetcher import (
    ensure_target_available,
    fetch_template,
    merge_clone,
    strip_template_artifacts,
)
from .manifest import load_manifest, serialize_manifest, update_manifest
from .readme import render_readme, write_readme

__all__ = [
    "ensure_target_available",
    "fetch_template",
    "load_manifest",
    "merge_clone",
    "render_readme",
    "serialize_manifest",
    "strip_template_artifacts",
    "update_manifest",
    "write_readme",
]
