"""Tests for manifest loading and package discovery."""

from __future__ import annotations

import json
import logging
import textwrap
from pathlib import Path

import pytest

from epm_builtin import (
    ManifestError,
    discover_packages,
    load_manifest,
    manifest_from_mapping,
    parse_dependency_spec,
)
from epm_core.models import Dependency
from epm_core.versioning import ComparableVersion, RangeSpecifier, Version


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).strip() + "\n")
    return path


def test_load_yaml_manifest_with_mapping_dependencies(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "package.yml",
        """
        name: spotify
        version: 1.4.0
        author: someone
        description: Spotify bindings
        source_url: https://example.invalid/spotify
        dependencies:
          std: ^1.0.0
          http: ~0.3.2
          util:
        """,
    )
    info = load_manifest(path)

    assert info.name == "spotify"
    assert info.version == Version(1, 4, 0)
    assert info.author == "someone"
    assert info.description == "Spotify bindings"
    assert info.source_url == "https://example.invalid/spotify"
    assert info.dependencies == (
        Dependency("std", ComparableVersion(Version(1, 0, 0), RangeSpecifier.CARET)),
        Dependency("http", ComparableVersion(Version(0, 3, 2), RangeSpecifier.TILDE)),
        Dependency("util"),
    )


def test_load_toml_manifest(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "package.toml",
        """
        [package]
        name = "std"
        version = "1.0.0"
        dependencies = ["core@1.0.0", "extras"]
        """,
    )
    info = load_manifest(path)

    assert info.name == "std"
    assert info.author is None
    assert info.dependencies == (
        Dependency("core", ComparableVersion(Version(1, 0, 0))),
        Dependency("extras"),
    )


def test_load_json_manifest(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_text(json.dumps({"name": "core", "version": "0.0.1"}))
    info = load_manifest(path)
    assert info.name == "core"
    assert info.dependencies == ()


@pytest.mark.parametrize(
    ("document", "message"),
    [
        ({"version": "1.0.0"}, "missing 'name'"),
        ({"name": "x"}, "missing 'version'"),
        ({"name": "  ", "version": "1.0.0"}, "name cannot be empty"),
        ({"name": "x", "version": "1.0"}, "invalid version"),
        ({"name": "x", "version": "1.0.0", "dependencies": {"y": "^1"}}, "invalid version constraint"),
        ({"name": "x", "version": "1.0.0", "dependencies": "y"}, "must be a mapping or a list"),
        ({"name": "x", "version": "1.0.0", "dependencies": [1]}, "must be strings"),
        ({"name": "x", "version": "1.0.0", "author": 3}, "'author' must be a string"),
    ],
)
def test_invalid_documents_raise(document: dict, message: str) -> None:
    with pytest.raises(ManifestError, match=message):
        manifest_from_mapping(document)


def test_unreadable_manifest_is_wrapped(tmp_path: Path) -> None:
    path = _write(tmp_path / "package.yml", "name: [unclosed")
    with pytest.raises(ManifestError, match="unable to read manifest") as excinfo:
        load_manifest(path)
    assert excinfo.value.__cause__ is not None


def test_non_mapping_manifest(tmp_path: Path) -> None:
    path = _write(tmp_path / "package.yml", "- just\n- a list")
    with pytest.raises(ManifestError, match="is not a mapping"):
        load_manifest(path)


def test_unsupported_suffix(tmp_path: Path) -> None:
    path = _write(tmp_path / "package.ini", "name=x")
    with pytest.raises(ManifestError, match="unsupported manifest format"):
        load_manifest(path)


def test_parse_dependency_spec() -> None:
    assert parse_dependency_spec("std") == Dependency("std")
    assert parse_dependency_spec("std@") == Dependency("std")
    assert parse_dependency_spec(" std @ ~2.0.1 ") == Dependency(
        "std", ComparableVersion(Version(2, 0, 1), RangeSpecifier.TILDE)
    )
    with pytest.raises(ManifestError):
        parse_dependency_spec("@1.0.0")


def test_discover_packages_skips_broken_entries(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    root = tmp_path / "packages"
    _write(root / "beta" / "package.yml", "name: beta\nversion: 1.0.0\ndependencies:\n  alpha: ^0.1.0")
    _write(root / "alpha" / "package.yml", "name: alpha\nversion: 0.1.5")
    _write(root / "broken" / "package.yml", "name: broken\nversion: nope")
    (root / "empty").mkdir()
    (root / "stray.txt").write_text("ignored")

    with caplog.at_level(logging.WARNING, logger="epm_builtin.discovery"):
        packages = discover_packages(root)

    assert [package.name for package in packages] == ["alpha", "beta"]
    assert any("broken" in record.getMessage() for record in caplog.records)


def test_discover_packages_custom_manifest_name(tmp_path: Path) -> None:
    root = tmp_path / "packages"
    _write(root / "one" / "package.toml", '[package]\nname = "one"\nversion = "1.0.0"')
    _write(root / "one" / "package.yml", "name: ignored\nversion: 9.9.9")

    packages = discover_packages(root, "package.toml")
    assert [package.name for package in packages] == ["one"]


def test_discover_packages_requires_directory(tmp_path: Path) -> None:
    with pytest.raises(ManifestError, match="is not a directory"):
        discover_packages(tmp_path / "nowhere")


def test_non_utf8_manifest_is_wrapped(tmp_path: Path) -> None:
    path = tmp_path / "package.yml"
    path.write_bytes(b"name: \xff\xfe\nversion: 1.0.0\n")
    with pytest.raises(ManifestError, match="unable to read manifest"):
        load_manifest(path)


def test_discover_packages_skips_non_utf8_manifest(tmp_path: Path) -> None:
    root = tmp_path / "packages"
    (root / "bad").mkdir(parents=True)
    (root / "bad" / "package.yml").write_bytes(b"\xff\xfe")
    _write(root / "good" / "package.yml", "name: good\nversion: 1.0.0")

    assert [package.name for package in discover_packages(root)] == ["good"]


def test_blank_optional_fields_become_none() -> None:
    info = manifest_from_mapping(
        {"name": "x", "version": "1.0.0", "author": "   ", "description": "", "source_url": "\t"}
    )
    assert info.author is None
    assert info.description is None
    assert info.source_url is None


def test_oversized_version_is_rejected() -> None:
    with pytest.raises(ManifestError, match="invalid version"):
        manifest_from_mapping({"name": "x", "version": "1" * 5000 + ".0.0"})
