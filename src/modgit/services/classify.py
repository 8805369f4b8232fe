"""ClassifyService — split file paths into inside/outside a module."""

from __future__ import annotations

from collections.abc import Iterable

from modgit.domain.diagnostics import Diagnostic
from modgit.domain.paths import normalize_path, partition
from modgit.services.base import BaseService
from modgit.services.result import ServiceResult
from modgit.services.telemetry import traced


class ClassifyService(BaseService):
    """Membership tests against a module's resolved path set."""

    @traced
    def classify(self, name: str, paths: Iterable[str]) -> ServiceResult:
        """Partition *paths* by whether they fall inside *name*'s paths."""
        diagnostics: list[Diagnostic] = []
        loaded = self._load_module("classify", name, diagnostics)
        if isinstance(loaded, ServiceResult):
            return loaded

        resolved = self._resolve(loaded, diagnostics).paths
        candidates = [p for p in (normalize_path(raw) for raw in paths) if p]
        inside, outside = partition(candidates, resolved)
        return ServiceResult(
            ok=True,
            op="classify",
            data={"module": name, "inside": inside, "outside": outside},
            warnings=self._warnings(diagnostics),
        )
