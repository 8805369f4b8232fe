"""Definition store — the ``.modgit`` file in git-config syntax.

Sections look like ``[module "frontend/css"]`` and are flattened into
``(variable, value)`` entries named ``module.<name>.<key>``, in file
order. Repeated keys (``path``, ``depends``) keep every value.

Parsing goes through GitPython's :class:`git.config.GitConfigParser`,
which already understands git's quoting, comments and multi-valued keys.
The file is re-read on every call; there is no cache.
"""

from __future__ import annotations

import configparser
import logging
import re
from pathlib import Path

from git.config import GitConfigParser

logger = logging.getLogger(__name__)

DEFINITIONS_FILENAME = ".modgit"

# [module "name"]: subsection names are case-sensitive and may escape " and \.
_SUBSECTION_PATTERN = re.compile(r'^module\s+"(?P<name>(?:[^"\\]|\\.)*)"$')
_ESCAPE_PATTERN = re.compile(r"\\(.)")


def _unquote(value: str | None) -> str | None:
    if value is not None and len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


class DefinitionStoreError(Exception):
    """The definition file exists but cannot be parsed."""


def module_section_name(section: str) -> str | None:
    """Return the module name encoded in a section header, or None.

    Accepts ``module "name"`` and the legacy ``module.name`` spelling,
    which git lower-cases.
    """
    match = _SUBSECTION_PATTERN.match(section.strip())
    if match:
        return _ESCAPE_PATTERN.sub(r"\1", match.group("name")) or None
    head, dot, rest = section.strip().partition(".")
    if dot and head.lower() == "module" and rest:
        return rest.lower()
    return None


class DefinitionStore:
    """Read-only access to one definitions file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def entries(self) -> list[tuple[str, str | None]]:
        """Flatten the file into ``(module.<name>.<key>, value)`` pairs.

        A missing file yields no entries.

        Raises:
            DefinitionStoreError: the file is not valid git-config syntax.
        """
        if not self.exists():
            logger.debug("No definitions file at %s", self._path)
            return []

        entries: list[tuple[str, str | None]] = []
        try:
            with GitConfigParser(str(self._path), read_only=True, merge_includes=False) as parser:
                parser.read()
                for section in parser.sections():
                    name = module_section_name(section)
                    if name is None:
                        continue
                    for key, values in parser.items_all(section):
                        entries.extend(
                            (f"module.{name}.{key.lower()}", _unquote(value)) for value in values
                        )
        except (configparser.Error, UnicodeDecodeError) as exc:
            msg = f"Invalid definitions in {self._path}: {exc}"
            raise DefinitionStoreError(msg) from exc
        return entries
