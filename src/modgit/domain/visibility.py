"""Visibility planning — "everything except other modules" sparse patterns.

Start from a universal include and exclude the directly declared paths
of every other module. Excluding a directory hides its whole subtree,
so a path is never excluded when it is an ancestor of something the
target needs: ``apps`` stays visible when ``apps/web`` is allowed.
Infrastructure modules are never excluded.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from modgit.domain.diagnostics import DefinitionError, Diagnostic, DiagnosticKind
from modgit.domain.module import Module
from modgit.domain.paths import is_ancestor
from modgit.domain.resolution import Lookup

INCLUDE_ALL = "/*"
# Top-level files stay checked out, as in cone mode.
TOP_LEVEL_FILES = (INCLUDE_ALL, "!/*/")


@dataclass(frozen=True)
class VisibilityPlan:
    """Include markers plus exclusions; each exclusion hides a file or a whole subtree."""

    module: str
    include: tuple[str, ...]
    exclude: tuple[str, ...]
    diagnostics: tuple[Diagnostic, ...] = ()

    def patterns(self) -> list[str]:
        """Render as git sparse-checkout patterns (non-cone mode)."""
        return [*self.include, *(f"!/{path}" for path in self.exclude)]


def module_view_patterns(paths: Iterable[str]) -> list[str]:
    """Patterns checking out only *paths* plus the top-level files.

    Each path may name a file or a directory.
    """
    return [*TOP_LEVEL_FILES, *(f"/{path}" for path in paths)]


def excluded_paths(own_paths: Iterable[str], allowed: Sequence[str]) -> list[str]:
    """Paths from *own_paths* that can be hidden without cutting off *allowed*."""
    allowed_set = set(allowed)
    return [
        path
        for path in own_paths
        if path not in allowed_set and not any(is_ancestor(path, a) for a in allowed)
    ]


def plan_visibility(
    target: Module,
    allowed: Sequence[str],
    names: Iterable[str],
    lookup: Lookup,
    *,
    include: Sequence[str] = (INCLUDE_ALL,),
) -> VisibilityPlan:
    """Plan the patterns that leave only *target*'s world visible.

    Args:
        target: The module being worked on.
        allowed: Its resolved transitive path set.
        names: Every module name in the catalog.
        lookup: Loads a module by name; failures are skipped with a
            diagnostic, never abort the scan.
        include: Baseline include markers.
    """
    exclude: dict[str, None] = {}
    diagnostics: list[Diagnostic] = []

    for name in names:
        if name == target.name:
            continue
        try:
            other = lookup(name)
        except DefinitionError as exc:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.INVALID_DEFINITION,
                    module=name,
                    message=f"module '{name}' skipped during planning: {exc}",
                )
            )
            continue
        if other is None:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.MODULE_NOT_FOUND,
                    module=name,
                    message=f"module '{name}' could not be loaded (skipping)",
                )
            )
            continue
        if other.is_infrastructure:
            continue
        for path in excluded_paths(other.paths, allowed):
            exclude.setdefault(path, None)

    return VisibilityPlan(
        module=target.name,
        include=tuple(include),
        exclude=tuple(exclude),
        diagnostics=tuple(diagnostics),
    )
