"""Tracked file listing."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from checklicenses.errors import CollaboratorError
from checklicenses.git.exec import run_git

logger = logging.getLogger(__name__)


class TrackedFileLister(Protocol):
    """Supplies the ordered list of tracked paths for a working tree."""

    def list_files(self) -> list[str]: ...


class GitTrackedFileLister:
    """List files with ``git ls-files``, relative to ``repo_root``."""

    def __init__(self, repo_root: Path):
        self.repo_root = repo_root

    def list_files(self) -> list[str]:
        # -z keeps paths with spaces or quoting-worthy bytes intact.
        out = run_git(["ls-files", "-z"], repo_root=self.repo_root)
        files = [p for p in out.stdout.split("\0") if p]
        logger.debug("git ls-files listed %d file(s) in %s", len(files), self.repo_root)
        return files


class StaticFileLister:
    """Fixed file list, in the order given."""

    def __init__(self, paths: Iterable[str]):
        self.paths = list(paths)

    @classmethod
    def from_file(cls, path: Path) -> StaticFileLister:
        """Read newline-separated paths from ``path`` (``-`` for stdin)."""
        try:
            buf = sys.stdin.buffer.read() if str(path) == "-" else path.read_bytes()
        except OSError as e:
            raise CollaboratorError(f"cannot read file list {path}: {e}", path=str(path)) from e
        lines = (line.rstrip(b"\r") for line in buf.split(b"\n"))
        return cls(os.fsdecode(line) for line in lines if line)

    def list_files(self) -> list[str]:
        return list(self.paths)
