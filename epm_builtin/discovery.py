"""Find and load package manifests below a packages directory."""

from __future__ import annotations

import logging
from pathlib import Path

from epm_core.models import PackageInfo

from .errors import ManifestError
from .manifest import load_manifest

__all__ = ["discover_packages"]

logger = logging.getLogger(__name__)


def discover_packages(root: Path, manifest_name: str = "package.yml") -> list[PackageInfo]:
    """Load ``<root>/<child>/<manifest_name>`` for every child directory.

    Children are visited in name order. Missing or invalid manifests are
    logged and skipped so one broken package does not hide the rest.
    """

    if not root.is_dir():
        raise ManifestError(f"packages root {root} is not a directory")

    discovered: list[PackageInfo] = []
    for child in sorted(root.iterdir(), key=lambda path: path.name):
        if not child.is_dir():
            continue
        manifest_path = child / manifest_name
        if not manifest_path.is_file():
            logger.debug("no %s in %s", manifest_name, child)
            continue
        try:
            info = load_manifest(manifest_path)
        except ManifestError as exc:
            logger.warning("skipping %s: %s", child, exc)
            continue
        discovered.append(info)

    return discovered
