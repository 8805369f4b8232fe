"""Dependency resolution — transitive, ordered, deduplicated path sets.

Traversal is depth-first over ``depends_on`` in declaration order; the
first occurrence of a path wins and later duplicates are dropped. Bad
edges never abort the walk: cycles, unknown names, malformed
definitions and runaway depth each become a :class:`Diagnostic` and the
offending branch simply contributes nothing further.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from modgit.domain.diagnostics import DefinitionError, Diagnostic, DiagnosticKind
from modgit.domain.module import Module

MAX_DEPTH = 50

type Lookup = Callable[[str], Module | None]


@dataclass(frozen=True)
class Resolution:
    """Result of resolving one module."""

    module: Module
    paths: tuple[str, ...]
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def warnings(self) -> list[str]:
        return [str(d) for d in self.diagnostics]


@dataclass
class _Walk:
    """Accumulator threaded through one resolution."""

    lookup: Lookup
    paths: list[str] = field(default_factory=list)
    seen_paths: set[str] = field(default_factory=set)
    visited: set[str] = field(default_factory=set)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def add_paths(self, paths: Iterable[str]) -> None:
        for path in paths:
            if path not in self.seen_paths:
                self.seen_paths.add(path)
                self.paths.append(path)

    def visit(self, name: str, depth: int, required_by: str) -> None:
        if depth > MAX_DEPTH:
            self.diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.DEPTH_EXCEEDED,
                    module=name,
                    message=f"dependency depth limit ({MAX_DEPTH}) exceeded at module '{name}'",
                )
            )
            return

        if name in self.visited:
            self.diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.CIRCULAR_DEPENDENCY,
                    module=name,
                    message=(
                        f"circular dependency: '{required_by}' -> '{name}', "
                        f"'{name}' already visited (skipping)"
                    ),
                )
            )
            return

        self.visited.add(name)
        try:
            module = self.lookup(name)
        except DefinitionError as exc:
            self.diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.INVALID_DEFINITION,
                    module=name,
                    message=f"dependency '{name}' of '{required_by}' is malformed: {exc}",
                )
            )
            return

        if module is None:
            self.diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.MISSING_DEPENDENCY,
                    module=name,
                    message=f"dependency '{name}' of '{required_by}' not found",
                )
            )
            return

        self.add_paths(module.paths)
        for dep in module.depends_on:
            self.visit(dep, depth + 1, module.name)


def resolve(module: Module, lookup: Lookup) -> Resolution:
    """Compute the transitive path set of *module*.

    Args:
        module: The already-loaded starting module.
        lookup: Loads a dependency by name, returning None when unknown.
            May raise :class:`DefinitionError` for malformed entries.
    """
    walk = _Walk(lookup=lookup, visited={module.name})
    walk.add_paths(module.paths)
    for dep in module.depends_on:
        walk.visit(dep, 1, module.name)
    return Resolution(
        module=module,
        paths=tuple(walk.paths),
        diagnostics=tuple(walk.diagnostics),
    )
