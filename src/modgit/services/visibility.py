"""VisibilityService — plan "everything except other modules" patterns."""

from __future__ import annotations

from modgit.domain.diagnostics import Diagnostic
from modgit.domain.module import Module
from modgit.domain.visibility import VisibilityPlan, plan_visibility
from modgit.services.base import BaseService
from modgit.services.result import ServiceResult
from modgit.services.telemetry import trace_span, traced


class VisibilityService(BaseService):
    """Builds visibility plans for the dev view of a module."""

    def build_plan(self, module: Module, diagnostics: list[Diagnostic]) -> VisibilityPlan:
        """Resolve *module* and plan exclusions against the whole catalog."""
        catalog = self._workspace.catalog
        with trace_span("resolve"):
            allowed = self._resolve(module, diagnostics).paths
        with trace_span("scan_catalog") as span:
            plan = plan_visibility(
                module,
                allowed,
                catalog.names(),
                catalog.load,
                include=self._workspace.settings.visibility.include,
            )
            if span is not None:
                span.annotate("excluded", len(plan.exclude))
        diagnostics.extend(plan.diagnostics)
        return plan

    @traced
    def plan(self, name: str) -> ServiceResult:
        """Include baseline plus the paths to hide while working on *name*."""
        diagnostics: list[Diagnostic] = []
        loaded = self._load_module("plan", name, diagnostics)
        if isinstance(loaded, ServiceResult):
            return loaded

        plan = self.build_plan(loaded, diagnostics)
        return ServiceResult(
            ok=True,
            op="plan",
            data={
                "module": name,
                "include": list(plan.include),
                "exclude": list(plan.exclude),
                "patterns": plan.patterns(),
            },
            warnings=self._warnings(diagnostics),
        )
