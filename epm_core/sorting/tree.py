"""Human-readable dependency trees for diagnostics."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Protocol

from epm_core.models import PackageDescriptor

__all__ = ["TREE_HEADER", "print_dependency_tree", "render_dependency_tree"]

TREE_HEADER = "=== Full dependency trees ==="


class _Sink(Protocol):
    def write(self, text: str) -> object: ...


def render_dependency_tree(packages: Iterable[PackageDescriptor]) -> str:
    """Render every package's dependency tree as indented text.

    Shared subtrees are expanded once per top-level package and shown as
    ``(already shown)`` afterwards; unknown names are shown as ``(missing)``.
    Not suitable for ordering, the walk tolerates cycles and missing packages.
    """

    package_list = list(packages)
    by_name = {package.name: package for package in package_list}
    lines = [TREE_HEADER]
    for package in package_list:
        lines.append(f"{package.name}:")
        _render_node(package, by_name, "  ", set(), lines)
    return "\n".join(lines) + "\n"


def print_dependency_tree(
    packages: Iterable[PackageDescriptor],
    sink: Optional[_Sink] = None,
) -> None:
    """Write :func:`render_dependency_tree` output to ``sink`` (stdout by default)."""

    target = sink if sink is not None else sys.stdout
    target.write(render_dependency_tree(packages))


def _render_node(
    package: PackageDescriptor,
    by_name: dict[str, PackageDescriptor],
    indent: str,
    seen: set[str],
    lines: list[str],
) -> None:
    # entries are (indent, package or None when missing, name); children pushed reversed
    pending: list[tuple[str, Optional[PackageDescriptor], str]] = [
        (indent, package, package.name)
    ]
    while pending:
        node_indent, node, name = pending.pop()
        if node is None:
            lines.append(f"{node_indent}{name} (missing)")
            continue
        if name in seen:
            lines.append(f"{node_indent}{name} (already shown)")
            continue
        seen.add(name)

        lines.append(f"{node_indent}{_label(node)}")
        children = [
            (node_indent + "  ", by_name.get(dependency.name), dependency.name)
            for dependency in node.dependencies
        ]
        pending.extend(reversed(children))


def _label(package: PackageDescriptor) -> str:
    version = getattr(package, "version", None)
    if version is None:
        return package.name
    return f"{package.name} {version}"
