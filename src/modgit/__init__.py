"""modgit — module-scoped views of a git monorepo."""

__version__ = "0.1.0"
