"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, modgit.toml only contains
overrides. A repository needs no modgit.toml at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- modgit.toml sections ---


class CatalogConfig(BaseModel):
    """[catalog] section."""

    model_config = {"frozen": True}

    filename: str = ".modgit"


class GitConfig(BaseModel):
    """[git] section."""

    model_config = {"frozen": True}

    binary: str = "git"


class VisibilityConfig(BaseModel):
    """[visibility] section."""

    model_config = {"frozen": True}

    include: list[str] = Field(default_factory=lambda: ["/*"])
