"""Command line surface for ordering and inspecting local packages."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from epm_builtin import ManifestError, discover_packages
from epm_core.config import Settings
from epm_core.constraints import find_unsatisfied_constraints
from epm_core.models import PackageInfo
from epm_core.sorting import SortError, ordered_package_list, print_dependency_tree

CLI_VERSION = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="epm",
        description="EPM - dependency ordering and version checks for extension packages.",
    )
    parser.add_argument("--version", action="version", version=f"epm v{CLI_VERSION}")
    parser.add_argument("--manifest", help="manifest file name inside each package directory")
    parser.add_argument("--log-level", dest="log_level", help="logging level (default WARNING)")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = False

    order_cmd = subparsers.add_parser("order", help="print packages in load order")
    order_cmd.add_argument("root", nargs="?", default=".", help="directory holding one folder per package")
    order_cmd.set_defaults(func=_handle_order)

    tree_cmd = subparsers.add_parser("tree", help="print every package's dependency tree")
    tree_cmd.add_argument("root", nargs="?", default=".", help="directory holding one folder per package")
    tree_cmd.set_defaults(func=_handle_tree)

    check_cmd = subparsers.add_parser("check", help="report dependency constraints that are not met")
    check_cmd.add_argument("root", nargs="?", default=".", help="directory holding one folder per package")
    check_cmd.set_defaults(func=_handle_check)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return 0

    settings = Settings(
        cli_overrides={"manifest": args.manifest, "log_level": args.log_level},
    )
    logging.basicConfig(level=_log_level(settings.log_level))
    return func(args, settings)


def _log_level(name: str) -> int:
    level = getattr(logging, name, None)
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    return logging.WARNING


def _load(args: argparse.Namespace, settings: Settings) -> list[PackageInfo] | None:
    try:
        return discover_packages(Path(args.root), settings.manifest)
    except ManifestError as exc:
        print(f"[epm:{args.command}] error: {exc}")
        return None


def _handle_order(args: argparse.Namespace, settings: Settings) -> int:
    packages = _load(args, settings)
    if packages is None:
        return 1
    try:
        ordered = ordered_package_list(packages)
    except SortError as exc:
        print(f"[epm:order] error: {exc}")
        return 1
    if not ordered:
        print("[epm:order] no packages found")
        return 0
    for position, package in enumerate(ordered, start=1):
        print(f"[epm:order] {position}. {package.name} {package.version}")
    return 0


def _handle_tree(args: argparse.Namespace, settings: Settings) -> int:
    packages = _load(args, settings)
    if packages is None:
        return 1
    print_dependency_tree(packages, sys.stdout)
    return 0


def _handle_check(args: argparse.Namespace, settings: Settings) -> int:
    packages = _load(args, settings)
    if packages is None:
        return 1
    problems = find_unsatisfied_constraints(packages)
    if not problems:
        print(f"[epm:check] all constraints satisfied ({len(packages)} packages)")
        return 0
    for problem in problems:
        print(f"[epm:check] {problem}")
    return 1
