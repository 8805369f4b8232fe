"""Tests for VisibilityService — dev-view planning."""

from __future__ import annotations

from collections.abc import Callable

from modgit.config.models import VisibilityConfig
from modgit.infrastructure.workspace import Workspace
from modgit.services.visibility import VisibilityService


class TestPlan:
    def test_plan(self, workspace: Workspace) -> None:
        result = VisibilityService(workspace).plan("frontend")
        assert result.ok
        assert result.op == "plan"
        assert result.data["include"] == ["/*"]
        assert result.data["exclude"] == ["apps/frontend/css", "apps/backend"]
        assert result.data["patterns"] == ["/*", "!/apps/frontend/css", "!/apps/backend"]

    def test_parent_stays_visible_for_child(self, workspace: Workspace) -> None:
        result = VisibilityService(workspace).plan("frontend/css")
        assert result.data["exclude"] == ["apps/backend"]

    def test_infrastructure_stays_visible(self, workspace: Workspace) -> None:
        result = VisibilityService(workspace).plan("backend")
        assert "tools" not in result.data["exclude"]

    def test_configured_include(self, make_workspace: Callable[..., Workspace]) -> None:
        ws = make_workspace(
            '[module "a"]\n\tpath = a\n',
            visibility=VisibilityConfig(include=["/*", "!/*/"]),
        )
        assert VisibilityService(ws).plan("a").data["patterns"] == ["/*", "!/*/"]

    def test_malformed_module_reported(self, make_workspace: Callable[..., Workspace]) -> None:
        ws = make_workspace(
            '[module "a"]\n\tpath = a\n[module "b"]\n\tpath = b\n\treadonly = perhaps\n'
        )
        result = VisibilityService(ws).plan("a")
        assert result.ok
        assert result.data["exclude"] == []
        assert "'b' skipped during planning" in result.warnings[0]

    def test_missing_module(self, workspace: Workspace) -> None:
        result = VisibilityService(workspace).plan("nope")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
