"""CheckService — whole-catalog validation.

Single command following the linter pattern. Four categories:
definitions, dependency graph, hierarchy and path ownership. Nothing is
modified; every finding is an issue dict with a severity.
"""

from __future__ import annotations

from typing import Any

import networkx as nx

from modgit.domain.catalog import ModuleCatalog, check_parent_paths, parse_module, split_variable
from modgit.domain.diagnostics import DefinitionError
from modgit.domain.module import Module
from modgit.infrastructure.definitions import DefinitionStoreError
from modgit.services.base import BaseService, failure
from modgit.services.result import ServiceResult
from modgit.services.telemetry import trace_span, traced

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"

CAT_DEFINITIONS = "definitions"
CAT_DEPENDENCIES = "dependency_graph"
CAT_HIERARCHY = "hierarchy"
CAT_OWNERSHIP = "ownership"

type _Entries = list[tuple[str, str | None]]


def _issue(category: str, severity: str, module: str, message: str) -> dict[str, Any]:
    return {"category": category, "severity": severity, "module": module, "message": message}


class CheckService(BaseService):
    """Reports structural problems in the module catalog."""

    @traced
    def check(self, *, min_severity: str = SEVERITY_WARNING) -> ServiceResult:
        """Report catalog issues without modifying anything.

        Args:
            min_severity: ``"warning"`` reports everything, ``"error"``
                hides warnings.
        """
        try:
            entries = self._workspace.store.entries()
        except DefinitionStoreError as exc:
            return failure("check", "INVALID_CATALOG", str(exc))

        issues: list[dict[str, Any]] = []
        with trace_span("definitions"):
            modules, found = self._check_definitions(entries)
            issues.extend(found)
        with trace_span("dependency_graph"):
            issues.extend(self._check_dependencies(entries, modules))
        with trace_span("hierarchy"):
            issues.extend(self._check_hierarchy(modules))
        with trace_span("ownership"):
            issues.extend(self._check_ownership(modules))

        if min_severity == SEVERITY_ERROR:
            issues = [i for i in issues if i["severity"] == SEVERITY_ERROR]

        return ServiceResult(
            ok=True,
            op="check",
            data={"issues": issues, "count": len(issues)},
        )

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def _check_definitions(
        self, entries: _Entries
    ) -> tuple[dict[str, Module], list[dict[str, Any]]]:
        """Parse every declared name; flag malformed and path-less modules."""
        declared: dict[str, None] = {}
        for variable, _value in entries:
            split = split_variable(variable)
            if split is not None:
                declared.setdefault(split[0], None)

        modules: dict[str, Module] = {}
        issues: list[dict[str, Any]] = []
        for name in declared:
            try:
                module = parse_module(entries, name)
            except DefinitionError as exc:
                issues.append(_issue(CAT_DEFINITIONS, SEVERITY_ERROR, name, str(exc)))
                continue
            if module is None:
                issues.append(
                    _issue(
                        CAT_DEFINITIONS,
                        SEVERITY_WARNING,
                        name,
                        f"module '{name}' declares no paths and is ignored",
                    )
                )
                continue
            modules[name] = module
        return modules, issues

    def _check_dependencies(
        self, entries: _Entries, modules: dict[str, Module]
    ) -> list[dict[str, Any]]:
        """Unknown dependency names and cycles (including inherited edges)."""
        issues: list[dict[str, Any]] = []
        for module in modules.values():
            for dep in module.depends_on:
                if dep not in modules:
                    issues.append(
                        _issue(
                            CAT_DEPENDENCIES,
                            SEVERITY_ERROR,
                            module.name,
                            f"dependency '{dep}' of '{module.name}' not found",
                        )
                    )

        catalog = ModuleCatalog(lambda: entries)
        graph = nx.DiGraph()
        graph.add_nodes_from(modules)
        for name in modules:
            try:
                effective = catalog.load(name)
            except DefinitionError:
                continue  # reported under definitions
            if effective is None:
                continue
            for dep in effective.depends_on:
                if dep in modules:
                    graph.add_edge(name, dep)

        order = {name: i for i, name in enumerate(modules)}
        cycles: list[list[str]] = []
        for cycle in nx.simple_cycles(graph):
            start = min(range(len(cycle)), key=lambda i: order[cycle[i]])
            cycles.append(cycle[start:] + cycle[:start])
        cycles.sort(key=lambda c: (order[c[0]], len(c)))

        for cycle in cycles:
            chain = " -> ".join([*cycle, cycle[0]])
            issues.append(
                _issue(
                    CAT_DEPENDENCIES,
                    SEVERITY_ERROR,
                    cycle[0],
                    f"circular dependency: {chain}",
                )
            )
        return issues

    def _check_hierarchy(self, modules: dict[str, Module]) -> list[dict[str, Any]]:
        """Paths of nested modules that sit outside their parent's paths."""
        issues: list[dict[str, Any]] = []
        for module in modules.values():
            parent = modules.get(module.parent) if module.parent else None
            if parent is None:
                continue
            issues.extend(
                _issue(CAT_HIERARCHY, SEVERITY_WARNING, module.name, d.message)
                for d in check_parent_paths(module, parent)
            )
        return issues

    def _check_ownership(self, modules: dict[str, Module]) -> list[dict[str, Any]]:
        """The same path declared by more than one module."""
        owners: dict[str, list[str]] = {}
        for module in modules.values():
            for path in dict.fromkeys(module.paths):
                owners.setdefault(path, []).append(module.name)

        return [
            _issue(
                CAT_OWNERSHIP,
                SEVERITY_WARNING,
                names[0],
                f"path '{path}' is declared by several modules: {', '.join(names)}",
            )
            for path, names in owners.items()
            if len(names) > 1
        ]
