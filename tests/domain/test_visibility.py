"""Tests for dev-view visibility planning."""

from __future__ import annotations

from modgit.domain.diagnostics import DefinitionError, DiagnosticKind
from modgit.domain.module import Module
from modgit.domain.visibility import (
    VisibilityPlan,
    excluded_paths,
    module_view_patterns,
    plan_visibility,
)


def _catalog(*modules: Module):
    by_name = {m.name: m for m in modules}
    return list(by_name), by_name.get


class TestExcludedPaths:
    def test_unrelated_paths_are_hidden(self) -> None:
        assert excluded_paths(["docs", "lib"], ["src"]) == ["docs", "lib"]

    def test_allowed_path_is_kept(self) -> None:
        assert excluded_paths(["src", "lib"], ["src"]) == ["lib"]

    def test_ancestor_of_allowed_is_kept(self) -> None:
        assert excluded_paths(["apps"], ["apps/web"]) == []

    def test_descendant_of_allowed_is_hidden(self) -> None:
        assert excluded_paths(["apps/web/legacy"], ["apps/web"]) == ["apps/web/legacy"]

    def test_prefix_sibling_is_hidden(self) -> None:
        assert excluded_paths(["foobar"], ["foo"]) == ["foobar"]


class TestPlanVisibility:
    def test_excludes_other_modules(self) -> None:
        web = Module(name="web", paths=("apps/web",), depends_on=("core",))
        core = Module(name="core", paths=("core",))
        api = Module(name="api", paths=("apps/api", "core"))
        names, lookup = _catalog(web, core, api)
        plan = plan_visibility(web, ["apps/web", "core"], names, lookup)
        assert plan.include == ("/*",)
        assert plan.exclude == ("apps/api",)
        assert plan.patterns() == ["/*", "!/apps/api"]
        assert plan.diagnostics == ()

    def test_infrastructure_never_excluded(self) -> None:
        web = Module(name="web", paths=("web",))
        tools = Module(name="tools", paths=("tools",), role="infrastructure")
        names, lookup = _catalog(web, tools)
        assert plan_visibility(web, ["web"], names, lookup).exclude == ()

    def test_parent_module_path_stays_visible(self) -> None:
        apps = Module(name="apps", paths=("apps",))
        web = Module(name="apps/web", paths=("apps/web",))
        names, lookup = _catalog(apps, web)
        assert plan_visibility(web, ["apps/web"], names, lookup).exclude == ()

    def test_exclusions_deduplicated_in_order(self) -> None:
        target = Module(name="t", paths=("t",))
        a = Module(name="a", paths=("x", "y"))
        b = Module(name="b", paths=("y", "z"))
        names, lookup = _catalog(target, a, b)
        assert plan_visibility(target, ["t"], names, lookup).exclude == ("x", "y", "z")

    def test_custom_include(self) -> None:
        target = Module(name="t", paths=("t",))
        plan = plan_visibility(target, ["t"], ["t"], {"t": target}.get, include=["/*", "!/*/"])
        assert plan.patterns() == ["/*", "!/*/"]

    def test_lookup_failures_become_diagnostics(self) -> None:
        target = Module(name="t", paths=("t",))

        def lookup(name: str) -> Module | None:
            if name == "broken":
                raise DefinitionError("module.broken.readonly", "x", "expected a boolean")
            return None

        plan = plan_visibility(target, ["t"], ["t", "broken", "gone"], lookup)
        assert plan.exclude == ()
        assert [d.kind for d in plan.diagnostics] == [
            DiagnosticKind.INVALID_DEFINITION,
            DiagnosticKind.MODULE_NOT_FOUND,
        ]

    def test_patterns_without_exclusions(self) -> None:
        plan = VisibilityPlan(module="t", include=("/*",), exclude=())
        assert plan.patterns() == ["/*"]

    def test_file_owned_paths_are_excluded(self) -> None:
        web = Module(name="web", paths=("web",))
        build = Module(name="build", paths=("Makefile", "docs"))
        names, lookup = _catalog(web, build)
        plan = plan_visibility(web, ["web"], names, lookup)
        assert plan.patterns() == ["/*", "!/Makefile", "!/docs"]


class TestModuleViewPatterns:
    def test_top_level_files_then_paths(self) -> None:
        assert module_view_patterns(["src/ui", "Makefile"]) == [
            "/*",
            "!/*/",
            "/src/ui",
            "/Makefile",
        ]

    def test_no_paths(self) -> None:
        assert module_view_patterns([]) == ["/*", "!/*/"]
