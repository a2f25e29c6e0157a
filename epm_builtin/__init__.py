"""Manifest loading helpers published by epm_builtin."""

from __future__ import annotations

from .discovery import discover_packages
from .errors import ManifestError
from .manifest import load_manifest, manifest_from_mapping, parse_dependency_spec

__all__ = [
    "ManifestError",
    "discover_packages",
    "load_manifest",
    "manifest_from_mapping",
    "parse_dependency_spec",
]
