"""WorkspaceService — apply a module view to the working tree.

``switch`` hands a resolved path set (module view) or a visibility plan
(dev view) to ``git sparse-checkout``. ``status`` splits the working
tree's changed files into inside/outside the module. Which module is
active is not remembered between invocations.
"""

from __future__ import annotations

from modgit.domain.diagnostics import Diagnostic
from modgit.domain.paths import partition
from modgit.domain.visibility import module_view_patterns
from modgit.infrastructure.git import GitError
from modgit.services.base import BaseService, failure
from modgit.services.result import ServiceResult
from modgit.services.telemetry import trace_span, traced
from modgit.services.visibility import VisibilityService

MODE_MODULE = "module"
MODE_DEV = "dev"

SPARSE_HINT = "Ensure your git version supports sparse-checkout (v2.25+)."


class WorkspaceService(BaseService):
    """Drives git with module resolutions."""

    @traced
    def switch(self, name: str, *, dev: bool = False, dry_run: bool = False) -> ServiceResult:
        """Restrict the working tree to module *name*.

        Module mode checks out only the resolved paths plus top-level
        files. Dev mode keeps everything visible except other modules'
        paths. With *dry_run* git is never invoked.
        """
        diagnostics: list[Diagnostic] = []
        loaded = self._load_module("switch", name, diagnostics)
        if isinstance(loaded, ServiceResult):
            return loaded

        if dev:
            plan = VisibilityService(self._workspace).build_plan(loaded, diagnostics)
            patterns = plan.patterns()
        else:
            patterns = module_view_patterns(self._resolve(loaded, diagnostics).paths)

        if not dry_run:
            with trace_span("sparse_checkout"):
                try:
                    self._workspace.git.sparse_checkout_set(patterns)
                except GitError as exc:
                    return failure(
                        "switch",
                        "GIT_ERROR",
                        f"Failed to configure sparse-checkout: {exc.stderr}",
                        hint=SPARSE_HINT,
                    )

        return ServiceResult(
            ok=True,
            op="switch",
            data={
                "module": name,
                "mode": MODE_DEV if dev else MODE_MODULE,
                "patterns": patterns,
                "dry_run": dry_run,
            },
            warnings=self._warnings(diagnostics),
        )

    @traced
    def status(self, name: str) -> ServiceResult:
        """Changed files of the working tree, split by module membership."""
        diagnostics: list[Diagnostic] = []
        loaded = self._load_module("status", name, diagnostics)
        if isinstance(loaded, ServiceResult):
            return loaded

        paths = self._resolve(loaded, diagnostics).paths
        try:
            changed = self._workspace.git.changed_files()
        except GitError as exc:
            return failure("status", "GIT_ERROR", f"Failed to read git status: {exc.stderr}")

        inside, outside = partition(changed, paths)
        return ServiceResult(
            ok=True,
            op="status",
            data={"module": name, "inside": inside, "outside": outside},
            warnings=self._warnings(diagnostics),
        )
