"""ResolveService — transitive path sets and module context listings."""

from __future__ import annotations

from modgit.domain.diagnostics import Diagnostic
from modgit.services.base import BaseService
from modgit.services.result import ServiceResult
from modgit.services.telemetry import trace_span, traced


def render_context(name: str, paths: list[str]) -> str:
    """Plain-text context header listing every path of a module."""
    lines = [
        f"Subject: Context for module '{name}'",
        "",
        "This context includes the following paths:",
        *(f"- {path}" for path in paths),
    ]
    return "\n".join(lines)


class ResolveService(BaseService):
    """Resolves modules through their dependency graph."""

    @traced
    def resolve(self, name: str) -> ServiceResult:
        """Ordered, deduplicated paths of *name* and everything it depends on.

        Cycles, unknown dependencies and excessive depth are warnings;
        only a missing *name* fails.
        """
        diagnostics: list[Diagnostic] = []
        loaded = self._load_module("resolve", name, diagnostics)
        if isinstance(loaded, ServiceResult):
            return loaded

        with trace_span("walk") as span:
            resolution = self._resolve(loaded, diagnostics)
            if span is not None:
                span.annotate("paths", len(resolution.paths))

        return ServiceResult(
            ok=True,
            op="resolve",
            data={
                "module": name,
                "count": len(resolution.paths),
                "paths": list(resolution.paths),
            },
            warnings=self._warnings(diagnostics),
        )

    @traced
    def context(self, name: str) -> ServiceResult:
        """Resolve *name* and render the path listing handed to assistants."""
        diagnostics: list[Diagnostic] = []
        loaded = self._load_module("context", name, diagnostics)
        if isinstance(loaded, ServiceResult):
            return loaded

        paths = list(self._resolve(loaded, diagnostics).paths)
        return ServiceResult(
            ok=True,
            op="context",
            data={
                "module": name,
                "paths": paths,
                "text": render_context(name, paths),
            },
            warnings=self._warnings(diagnostics),
        )
