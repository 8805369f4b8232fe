"""Git subprocess helpers — sparse-checkout and working-tree status.

The resolver never touches git; these helpers apply its output. Unlike
fire-and-forget hooks, a failed command here is the user's command
failing, so errors propagate as :class:`GitError`.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


class GitError(Exception):
    """A git command could not be run or exited non-zero."""

    def __init__(self, args: Sequence[str], message: str) -> None:
        super().__init__(f"git {' '.join(args)}: {message}")
        self.git_args = list(args)
        self.stderr = message


class GitRunner:
    """Run git commands inside a working tree."""

    def __init__(self, root: Path, *, binary: str = "git") -> None:
        self._root = root
        self._binary = binary

    def run(self, *args: str) -> subprocess.CompletedProcess[str]:
        """Run ``git <args>`` in the root. Raises GitError on failure."""
        logger.debug("running %s %s", self._binary, " ".join(args))
        try:
            return subprocess.run(
                [self._binary, *args],
                cwd=self._root,
                capture_output=True,
                encoding="utf-8",
                check=True,
            )
        except subprocess.CalledProcessError as exc:
            raise GitError(args, (exc.stderr or "").strip() or f"exit code {exc.returncode}") from exc
        except OSError as exc:
            raise GitError(args, str(exc)) from exc

    def sparse_checkout_set(self, patterns: Sequence[str]) -> None:
        """Replace the sparse-checkout definition.

        Patterns are gitignore-style (non-cone mode) so that modules may
        own single files as well as directories.
        """
        self.run("sparse-checkout", "set", "--no-cone", *patterns)

    def changed_files(self) -> list[str]:
        """Paths with staged, unstaged or untracked changes.

        Renames report the destination path.
        """
        result = self.run("status", "--porcelain", "-z", "--untracked-files=all")
        records = iter(result.stdout.split("\0"))
        files: list[str] = []
        for record in records:
            if len(record) < 4:
                continue
            status, path = record[:2], record[3:]
            files.append(path)
            if "R" in status or "C" in status:
                next(records, None)  # source path of a rename or copy
        return files
