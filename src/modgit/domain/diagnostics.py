"""Diagnostic kinds and domain exceptions.

Every non-fatal condition met while loading, resolving or planning is
recorded as a :class:`Diagnostic` and handed back to the caller next to
the (partial) result. Only malformed definition values raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class DiagnosticKind(StrEnum):
    """Degraded conditions reported during resolution and planning."""

    MODULE_NOT_FOUND = "module_not_found"
    MISSING_DEPENDENCY = "missing_dependency"
    CIRCULAR_DEPENDENCY = "circular_dependency"
    DEPTH_EXCEEDED = "depth_exceeded"
    PATH_OUTSIDE_PARENT = "path_outside_parent"
    INVALID_DEFINITION = "invalid_definition"


@dataclass(frozen=True)
class Diagnostic:
    """A single reportable condition."""

    kind: DiagnosticKind
    module: str  # module the condition concerns
    message: str

    def __str__(self) -> str:
        return self.message


class DefinitionError(ValueError):
    """A definition entry carries a value that cannot be interpreted."""

    def __init__(self, variable: str, value: str, reason: str) -> None:
        super().__init__(f"bad value '{value}' for '{variable}': {reason}")
        self.variable = variable
        self.value = value
