"""Handle package manifest parsing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional

import tomllib
import yaml

from epm_core.models import Dependency, PackageInfo
from epm_core.versioning import parse_comparable_version, parse_version

from .errors import ManifestError

__all__ = [
    "load_manifest",
    "manifest_from_mapping",
    "parse_dependency_spec",
]

_YAML_SUFFIXES = (".yml", ".yaml")
_OPTIONAL_TEXT_FIELDS = ("author", "description", "source_url")


def load_manifest(path: Path) -> PackageInfo:
    """Load and validate a ``package.yml``, ``package.toml`` or ``package.json``."""

    suffix = path.suffix.lower()
    try:
        if suffix in _YAML_SUFFIXES:
            with path.open("r", encoding="utf-8") as handle:
                document = yaml.safe_load(handle)
        elif suffix == ".toml":
            with path.open("rb") as handle:
                document = tomllib.load(handle).get("package")
        elif suffix == ".json":
            with path.open("r", encoding="utf-8") as handle:
                document = json.load(handle)
        else:
            raise ManifestError(f"unsupported manifest format: {path.name}")
    except (
        OSError,
        UnicodeDecodeError,
        yaml.YAMLError,
        tomllib.TOMLDecodeError,
        json.JSONDecodeError,
    ) as exc:
        raise ManifestError(f"unable to read manifest at {path}") from exc

    if not isinstance(document, Mapping):
        raise ManifestError(f"manifest at {path} is not a mapping")
    return manifest_from_mapping(document)


def manifest_from_mapping(document: Mapping[str, Any]) -> PackageInfo:
    """Build a :class:`PackageInfo` from already-decoded manifest data."""

    name = _required_text(document, "name")
    raw_version = _required_text(document, "version")
    version = parse_version(raw_version)
    if version is None:
        raise ManifestError(f"invalid version {raw_version!r} for package {name}")

    optional: dict[str, Optional[str]] = {}
    for key in _OPTIONAL_TEXT_FIELDS:
        value = document.get(key)
        if value is not None and not isinstance(value, str):
            raise ManifestError(f"'{key}' must be a string")
        optional[key] = (value or "").strip() or None

    return PackageInfo(
        name=name,
        version=version,
        dependencies=_parse_dependencies(name, document.get("dependencies")),
        **optional,
    )


def parse_dependency_spec(spec: str) -> Dependency:
    """Parse ``name`` or ``name@<constraint>`` into a :class:`Dependency`."""

    if "@" not in spec:
        name, constraint = spec.strip(), None
    else:
        raw_name, raw_constraint = spec.split("@", 1)
        name, constraint = raw_name.strip(), raw_constraint.strip() or None
    return _dependency(name, constraint)


def _required_text(document: Mapping[str, Any], key: str) -> str:
    raw_value = document.get(key)
    if raw_value is None:
        raise ManifestError(f"missing '{key}' in manifest")
    if not isinstance(raw_value, str):
        raise ManifestError(f"'{key}' must be a string")
    normalized = raw_value.strip()
    if not normalized:
        raise ManifestError(f"{key} cannot be empty.")
    return normalized


def _parse_dependencies(owner: str, raw: Any) -> tuple[Dependency, ...]:
    if raw is None:
        return ()
    if isinstance(raw, Mapping):
        items = []
        for dep_name, constraint in raw.items():
            if constraint is not None and not isinstance(constraint, str):
                raise ManifestError(
                    f"constraint for {dep_name} in {owner} must be a string"
                )
            items.append(_dependency(str(dep_name).strip(), constraint))
        return tuple(items)
    if isinstance(raw, list):
        items = []
        for entry in raw:
            if not isinstance(entry, str):
                raise ManifestError(f"dependency entries of {owner} must be strings")
            items.append(parse_dependency_spec(entry))
        return tuple(items)
    raise ManifestError(f"'dependencies' of {owner} must be a mapping or a list")


def _dependency(name: str, constraint: Optional[str]) -> Dependency:
    if not name:
        raise ManifestError("dependency name cannot be empty.")
    if constraint is None:
        return Dependency(name=name)
    parsed = parse_comparable_version(constraint.strip())
    if parsed is None:
        raise ManifestError(f"invalid version constraint {constraint!r} for {name}")
    return Dependency(name=name, version=parsed)
