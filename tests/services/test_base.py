"""Tests for BaseService and service inheritance."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from modgit.domain.diagnostics import Diagnostic, DiagnosticKind
from modgit.domain.module import Module
from modgit.infrastructure.workspace import Workspace
from modgit.services.base import NOT_FOUND_HINT, BaseService
from modgit.services.catalog import CatalogService
from modgit.services.check import CheckService
from modgit.services.classify import ClassifyService
from modgit.services.resolve import ResolveService
from modgit.services.result import ServiceResult
from modgit.services.visibility import VisibilityService
from modgit.services.workspace import WorkspaceService

ALL_SERVICES = [
    CatalogService,
    ResolveService,
    VisibilityService,
    ClassifyService,
    CheckService,
    WorkspaceService,
]


class TestServiceInheritance:
    @pytest.mark.parametrize("service_cls", ALL_SERVICES, ids=lambda c: c.__name__)
    def test_inherits_base_service(self, service_cls: type) -> None:
        assert issubclass(service_cls, BaseService)

    @pytest.mark.parametrize("service_cls", ALL_SERVICES, ids=lambda c: c.__name__)
    def test_workspace_injection(self, service_cls: type, workspace: Workspace) -> None:
        assert service_cls(workspace)._workspace is workspace


class TestLoadModule:
    def test_found(self, workspace: Workspace) -> None:
        loaded = BaseService(workspace)._load_module("op", "core")
        assert isinstance(loaded, Module)
        assert loaded.paths == ("src/core", "include/core")

    def test_not_found(self, workspace: Workspace) -> None:
        loaded = BaseService(workspace)._load_module("op", "nope")
        assert isinstance(loaded, ServiceResult)
        assert loaded.ok is False
        assert loaded.error is not None
        assert loaded.error.code == "NOT_FOUND"
        assert loaded.error.detail == {"module": "nope", "hint": NOT_FOUND_HINT}

    def test_malformed_definition(self, make_workspace: Callable[..., Workspace]) -> None:
        ws = make_workspace('[module "a"]\n\tpath = a\n\treadonly = maybe\n')
        loaded = BaseService(ws)._load_module("op", "a")
        assert isinstance(loaded, ServiceResult)
        assert loaded.error is not None
        assert loaded.error.code == "INVALID_CATALOG"
        assert loaded.error.detail == {"variable": "module.a.readonly"}

    def test_unreadable_store(self, make_workspace: Callable[..., Workspace]) -> None:
        ws = make_workspace("path = no-section\n")
        loaded = BaseService(ws)._load_module("op", "a")
        assert isinstance(loaded, ServiceResult)
        assert loaded.error is not None
        assert loaded.error.code == "INVALID_CATALOG"


class TestResolveHelper:
    def test_collects_load_and_walk_diagnostics(
        self, make_workspace: Callable[..., Workspace]
    ) -> None:
        ws = make_workspace(
            '[module "b"]\n\tpath = b\n'
            '[module "b/c"]\n\tpath = elsewhere\n'
            '[module "app"]\n\tpath = app\n\tdepends = b/c\n\tdepends = ghost\n'
        )
        service = BaseService(ws)
        diagnostics: list[Diagnostic] = []
        app = service._load_module("op", "app", diagnostics)
        assert isinstance(app, Module)
        resolution = service._resolve(app, diagnostics)
        assert resolution.paths == ("app", "elsewhere")
        assert [d.kind for d in diagnostics] == [
            DiagnosticKind.PATH_OUTSIDE_PARENT,
            DiagnosticKind.MISSING_DEPENDENCY,
        ]

    def test_warnings_are_messages(self) -> None:
        diagnostics = [
            Diagnostic(DiagnosticKind.MISSING_DEPENDENCY, "x", "dependency 'x' of 'a' not found")
        ]
        assert BaseService._warnings(diagnostics) == ["dependency 'x' of 'a' not found"]
