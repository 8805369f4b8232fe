"""CatalogService — list and inspect module definitions."""

from __future__ import annotations

from typing import Any

from modgit.domain.diagnostics import DefinitionError, Diagnostic
from modgit.infrastructure.definitions import DefinitionStoreError
from modgit.services.base import BaseService, failure
from modgit.services.result import ServiceResult
from modgit.services.telemetry import traced


class CatalogService(BaseService):
    """Read-only views over the module catalog."""

    @traced
    def list_modules(self) -> ServiceResult:
        """All modules in definition order, with their own paths and edges."""
        catalog = self._workspace.catalog
        try:
            names = catalog.names()
        except DefinitionStoreError as exc:
            return failure("list_modules", "INVALID_CATALOG", str(exc))

        items: list[dict[str, Any]] = []
        warnings: list[str] = []
        for name in names:
            try:
                module = catalog.load(name)
            except DefinitionError as exc:
                warnings.append(f"module '{name}' skipped: {exc}")
                continue
            if module is None:
                continue
            items.append(module.to_dict())

        return ServiceResult(
            ok=True,
            op="list_modules",
            data={
                "definitions": str(self._workspace.store.path),
                "count": len(items),
                "items": items,
            },
            warnings=warnings,
        )

    @traced
    def show(self, name: str) -> ServiceResult:
        """One module's definition after parent inheritance."""
        diagnostics: list[Diagnostic] = []
        loaded = self._load_module("show_module", name, diagnostics)
        if isinstance(loaded, ServiceResult):
            return loaded

        data = loaded.to_dict()
        data["is_infrastructure"] = loaded.is_infrastructure
        return ServiceResult(
            ok=True,
            op="show_module",
            data=data,
            warnings=self._warnings(diagnostics),
        )
