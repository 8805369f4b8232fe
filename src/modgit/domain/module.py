"""Module — a named, possibly nested slice of the repository tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from modgit.domain.paths import SEPARATOR

INFRASTRUCTURE_ROLE = "infrastructure"


def parent_name(name: str) -> str | None:
    """Return the name before the last separator, or None for top-level names."""
    head, sep, _ = name.rpartition(SEPARATOR)
    if not sep or not head:
        return None
    return head


@dataclass(frozen=True)
class Module:
    """A loaded module definition.

    Built fresh on every lookup and never mutated afterwards.
    """

    name: str
    paths: tuple[str, ...]
    depends_on: tuple[str, ...] = ()
    read_only: bool = False
    owners_only: bool = False
    role: str | None = None

    @property
    def parent(self) -> str | None:
        return parent_name(self.name)

    @property
    def is_infrastructure(self) -> bool:
        """Infrastructure modules stay visible whichever module is active."""
        return self.role == INFRASTRUCTURE_ROLE

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "parent": self.parent,
            "paths": list(self.paths),
            "depends_on": list(self.depends_on),
            "read_only": self.read_only,
            "owners_only": self.owners_only,
            "role": self.role,
        }
