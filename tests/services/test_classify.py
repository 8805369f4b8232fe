"""Tests for ClassifyService."""

from __future__ import annotations

from modgit.infrastructure.workspace import Workspace
from modgit.services.classify import ClassifyService


class TestClassify:
    def test_partition(self, workspace: Workspace) -> None:
        result = ClassifyService(workspace).classify(
            "frontend",
            ["apps/frontend/app.ts", "./src/core/x.c", "apps/frontendx/y", "docs/", ""],
        )
        assert result.ok
        assert result.op == "classify"
        assert result.data["inside"] == ["apps/frontend/app.ts", "src/core/x.c"]
        assert result.data["outside"] == ["apps/frontendx/y", "docs"]

    def test_module_root_itself_is_inside(self, workspace: Workspace) -> None:
        result = ClassifyService(workspace).classify("core", ["src/core"])
        assert result.data["inside"] == ["src/core"]

    def test_missing_module(self, workspace: Workspace) -> None:
        result = ClassifyService(workspace).classify("nope", ["a"])
        assert not result.ok
