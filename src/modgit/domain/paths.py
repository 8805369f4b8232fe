"""Path helpers — normalisation and directory-boundary matching.

All paths are repository-relative and ``/``-separated. A plain string
prefix is never enough: ``src/app`` owns ``src/app/x`` but not
``src/application``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

SEPARATOR = "/"


def normalize_path(raw: str) -> str:
    """Strip whitespace, a leading ``./`` and trailing separators.

    Returns an empty string for values that name nothing (``""``, ``"./"``).
    """
    path = raw.strip()
    while path.startswith("./"):
        path = path[2:]
    if path == ".":
        return ""
    return path.rstrip(SEPARATOR)


def is_within(path: str, prefix: str) -> bool:
    """True if *path* equals *prefix* or lies below it."""
    return path == prefix or path.startswith(prefix + SEPARATOR)


def is_ancestor(candidate: str, path: str) -> bool:
    """True if *candidate* is a strict directory ancestor of *path*."""
    return path.startswith(candidate + SEPARATOR)


def belongs_to(path: str, path_set: Iterable[str]) -> bool:
    """True if *path* falls inside any member of *path_set*."""
    return any(is_within(path, member) for member in path_set)


def partition(paths: Iterable[str], path_set: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split *paths* into ``(inside, outside)`` of *path_set*, keeping input order."""
    inside: list[str] = []
    outside: list[str] = []
    for path in paths:
        (inside if belongs_to(path, path_set) else outside).append(path)
    return inside, outside
