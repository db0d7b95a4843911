"""Subprocess runner for git queries."""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path

from checklicenses.errors import CollaboratorError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecResult:
    """Result envelope for subprocess execution.

    ``stdout`` is decoded with the filesystem encoding and surrogateescape,
    so path listings round-trip to the same bytes through ``os.fsencode``.
    """

    argv: tuple[str, ...]
    cwd: Path
    returncode: int
    stdout: str
    stderr: str


class ExecError(CollaboratorError):
    """Raised when a command cannot start or returns non-zero."""

    def __init__(self, argv: tuple[str, ...], detail: str, result: ExecResult | None = None):
        rendered = " ".join(argv)
        code = "not started" if result is None else str(result.returncode)
        super().__init__(f"command failed ({code}): {rendered}\n{detail}".rstrip())
        self.result = result


def run_command(argv: list[str], *, cwd: Path) -> ExecResult:
    """Run command and return structured result; non-zero exit raises ExecError."""
    logger.debug("running %s in %s", " ".join(argv), cwd)
    try:
        completed = subprocess.run(argv, cwd=cwd, capture_output=True, check=False)
    except OSError as e:
        raise ExecError(tuple(argv), str(e)) from e
    result = ExecResult(
        argv=tuple(argv),
        cwd=cwd.resolve(),
        returncode=completed.returncode,
        stdout=os.fsdecode(completed.stdout),
        stderr=completed.stderr.decode("utf-8", "replace"),
    )
    if result.returncode != 0:
        raise ExecError(result.argv, (result.stderr or result.stdout).strip(), result)
    return result


def run_git(args: list[str], *, repo_root: Path) -> ExecResult:
    """Run git command rooted at repo."""
    return run_command(["git", *args], cwd=repo_root)
