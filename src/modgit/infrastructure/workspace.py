"""Workspace — the repository root and everything read from it.

The single dependency injected into every service. It owns the
definition store, the module catalog built over it, and the git runner.
Nothing is cached between lookups: the catalog re-reads the store on
every call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modgit.domain.catalog import ModuleCatalog
from modgit.infrastructure.definitions import DefinitionStore
from modgit.infrastructure.git import GitRunner

if TYPE_CHECKING:
    from pathlib import Path

    from modgit.config.settings import ModgitSettings


class Workspace:
    """A repository root configured by :class:`ModgitSettings`."""

    def __init__(self, settings: ModgitSettings) -> None:
        self._settings = settings
        self._store = DefinitionStore(settings.definitions_path)
        self._catalog = ModuleCatalog(self._store.entries)
        self._git = GitRunner(settings.root, binary=settings.git.binary)

    @property
    def root(self) -> Path:
        return self._settings.root

    @property
    def settings(self) -> ModgitSettings:
        return self._settings

    @property
    def store(self) -> DefinitionStore:
        return self._store

    @property
    def catalog(self) -> ModuleCatalog:
        return self._catalog

    @property
    def git(self) -> GitRunner:
        return self._git
