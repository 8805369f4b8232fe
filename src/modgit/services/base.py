"""BaseService — shared foundation for modgit services.

Every service receives a :class:`Workspace` at construction time and
turns domain outcomes into :class:`ServiceResult`. Domain diagnostics
become result warnings; store and definition errors become structured
errors.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from modgit.domain.diagnostics import DefinitionError, Diagnostic
from modgit.domain.resolution import Resolution, resolve
from modgit.infrastructure.definitions import DefinitionStoreError
from modgit.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from modgit.domain.module import Module
    from modgit.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)

NOT_FOUND_HINT = "Run 'modgit list' to see available modules. Check the .modgit file is present."


def failure(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    """Build an ``ok=False`` result."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class ResolveService(BaseService):
            def resolve(self, name: str) -> ServiceResult:
                loaded = self._load_module("resolve", name, diagnostics)
                if isinstance(loaded, ServiceResult):
                    return loaded
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    def _load_module(
        self,
        op: str,
        name: str,
        diagnostics: list[Diagnostic] | None = None,
    ) -> Module | ServiceResult:
        """Load the requested module, or return the failure result.

        A missing initial module is the one failure the domain leaves to
        its callers; it maps to ``NOT_FOUND``.
        """
        try:
            module = self._workspace.catalog.load(name, diagnostics=diagnostics)
        except DefinitionStoreError as exc:
            return failure(op, "INVALID_CATALOG", str(exc))
        except DefinitionError as exc:
            return failure(op, "INVALID_CATALOG", str(exc), variable=exc.variable)
        if module is None:
            return failure(
                op,
                "NOT_FOUND",
                f"Module '{name}' not found",
                module=name,
                hint=NOT_FOUND_HINT,
            )
        return module

    def _resolve(self, module: Module, diagnostics: list[Diagnostic]) -> Resolution:
        """Resolve *module*, collecting load-time diagnostics into *diagnostics*."""
        catalog = self._workspace.catalog

        def lookup(dep: str) -> Module | None:
            return catalog.load(dep, diagnostics=diagnostics)

        resolution = resolve(module, lookup)
        diagnostics.extend(resolution.diagnostics)
        return resolution

    @staticmethod
    def _warnings(diagnostics: Iterable[Diagnostic]) -> list[str]:
        """Log each diagnostic and return the warning strings."""
        warnings: list[str] = []
        for diagnostic in diagnostics:
            logger.debug("%s: %s", diagnostic.kind, diagnostic.message)
            warnings.append(str(diagnostic))
        return warnings
