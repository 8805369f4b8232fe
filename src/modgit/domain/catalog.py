"""Module catalog — parse flat definition entries into Module records.

The definition store is a flat list of ``(variable, value)`` entries
where ``variable`` reads ``module.<name>.<key>``. ``<name>`` may contain
``/`` (nesting) and even dots; the key is whatever follows the last dot.

Nothing is cached: :class:`ModuleCatalog` pulls a fresh entry snapshot
from its source on every lookup, and each parse owns its own
:class:`_ParseContext` so nested lookups (parents, dependencies) never
share in-flight state.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace

from modgit.domain.diagnostics import DefinitionError, Diagnostic, DiagnosticKind
from modgit.domain.module import Module
from modgit.domain.paths import belongs_to, normalize_path

type Entry = tuple[str, str | None]
type EntrySource = Callable[[], Iterable[Entry]]

SECTION_PREFIX = "module."

KEY_PATH = "path"
KEY_DEPENDS = "depends"
KEY_READONLY = "readonly"
KEY_OWNERSONLY = "ownersonly"
KEY_ROLE = "role"

_TRUE_VALUES = frozenset({"true", "yes", "on", "1"})
_FALSE_VALUES = frozenset({"false", "no", "off", "0"})


def split_variable(variable: str) -> tuple[str, str] | None:
    """Split ``module.<name>.<key>`` into ``(name, key)``.

    Keys are case-insensitive (git config semantics); names are not.
    Returns None for variables outside the ``module`` section.
    """
    if not variable.startswith(SECTION_PREFIX):
        return None
    name, dot, key = variable[len(SECTION_PREFIX) :].rpartition(".")
    if not dot or not name or not key:
        return None
    return name, key.lower()


def parse_bool(variable: str, value: str | None) -> bool:
    """Interpret a git-style boolean. A bare key (no value) means true."""
    if value is None:
        return True
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES or lowered == "":
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise DefinitionError(variable, value, "expected a boolean")


@dataclass
class _ModuleDraft:
    """Mutable module under construction."""

    name: str
    paths: list[str] = field(default_factory=list)
    depends_on: list[str] = field(default_factory=list)
    read_only: bool = False
    owners_only: bool = False
    role: str | None = None

    def freeze(self) -> Module:
        return Module(
            name=self.name,
            paths=tuple(self.paths),
            depends_on=tuple(self.depends_on),
            read_only=self.read_only,
            owners_only=self.owners_only,
            role=self.role,
        )


@dataclass
class _ParseContext:
    """Per-call parse state: the target name and the draft being filled."""

    target: str
    draft: _ModuleDraft

    def accept(self, variable: str, value: str | None) -> None:
        split = split_variable(variable)
        if split is None:
            return
        name, key = split
        if name != self.target:
            return

        draft = self.draft
        if key == KEY_PATH:
            path = normalize_path(value or "")
            if path:
                draft.paths.append(path)
        elif key == KEY_DEPENDS:
            dep = (value or "").strip()
            if dep:
                draft.depends_on.append(dep)
        elif key == KEY_READONLY:
            draft.read_only = parse_bool(variable, value)
        elif key == KEY_OWNERSONLY:
            draft.owners_only = parse_bool(variable, value)
        elif key == KEY_ROLE:
            draft.role = (value or "").strip() or None


def parse_module(entries: Iterable[Entry], name: str) -> Module | None:
    """Build the module called *name* from *entries*.

    Returns None when no ``path`` entry exists for the name, even if
    ``depends`` or flag entries do — a module owns at least one path.
    """
    ctx = _ParseContext(target=name, draft=_ModuleDraft(name=name))
    for variable, value in entries:
        ctx.accept(variable, value)
    if not ctx.draft.paths:
        return None
    return ctx.draft.freeze()


def list_module_names(entries: Iterable[Entry]) -> list[str]:
    """Distinct names with at least one ``path`` entry, in first-seen order."""
    names: dict[str, None] = {}
    for variable, _value in entries:
        split = split_variable(variable)
        if split is not None and split[1] == KEY_PATH:
            names.setdefault(split[0], None)
    return list(names)


def check_parent_paths(module: Module, parent: Module) -> list[Diagnostic]:
    """Report each path of *module* not located under one of *parent*'s paths."""
    return [
        Diagnostic(
            kind=DiagnosticKind.PATH_OUTSIDE_PARENT,
            module=module.name,
            message=(
                f"path '{path}' of module '{module.name}' is outside "
                f"the paths of parent module '{parent.name}'"
            ),
        )
        for path in module.paths
        if not belongs_to(path, parent.paths)
    ]


class ModuleCatalog:
    """Name-keyed view over a definition entry source.

    Args:
        source: Zero-argument callable returning the current entries.
            Called once per lookup so every read sees a fresh snapshot.
    """

    def __init__(self, source: EntrySource) -> None:
        self._source = source

    def names(self) -> list[str]:
        """All module names, in definition order."""
        return list_module_names(self._source())

    def load(self, name: str, *, diagnostics: list[Diagnostic] | None = None) -> Module | None:
        """Load one module, applying parent inheritance.

        A nested module with no ``depends`` entries inherits its parent's
        dependency list. When the parent exists, each own path is checked
        against the parent's paths; failures are appended to
        *diagnostics* (if given) and never block the load.

        Raises:
            DefinitionError: a flag entry of this module or an ancestor
                carries an unreadable value.
        """
        module = parse_module(self._source(), name)
        if module is None or module.parent is None:
            return module

        parent = self.load(module.parent)
        if parent is None:
            return module

        if diagnostics is not None:
            diagnostics.extend(check_parent_paths(module, parent))
        if not module.depends_on and parent.depends_on:
            module = replace(module, depends_on=parent.depends_on)
        return module
