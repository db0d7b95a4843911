"""Filesystem collaborators: directory checks and content reads."""

from __future__ import annotations

import logging
import stat
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Protocol

from checklicenses.errors import CollaboratorError

logger = logging.getLogger(__name__)


class FileSource(Protocol):
    """Classifies and reads candidate paths."""

    def is_dir(self, path: str) -> bool: ...

    def read_bytes(self, path: str) -> bytes: ...

    def absolute(self, path: str) -> str: ...


class LocalFileSource:
    """Reads files relative to a root directory on local disk."""

    def __init__(self, root: Path):
        self.root = root.resolve()

    def _resolve(self, path: str) -> Path:
        return self.root / path

    def is_dir(self, path: str) -> bool:
        try:
            return stat.S_ISDIR(self._resolve(path).stat().st_mode)
        except OSError as e:
            raise CollaboratorError(f"cannot stat {path}: {e}", path=path) from e

    def read_bytes(self, path: str) -> bytes:
        try:
            content = self._resolve(path).read_bytes()
        except OSError as e:
            raise CollaboratorError(f"cannot read {path}: {e}", path=path) from e
        logger.debug("read %s (%d bytes)", path, len(content))
        return content

    def absolute(self, path: str) -> str:
        return str(self._resolve(path))


class MemoryFileSource:
    """In-memory file tree keyed by listed path."""

    def __init__(self, files: Mapping[str, bytes], directories: Iterable[str] = ()):
        self.files = dict(files)
        self.directories = set(directories)
        self.reads: list[str] = []

    def is_dir(self, path: str) -> bool:
        if path in self.directories:
            return True
        if path in self.files:
            return False
        raise CollaboratorError(f"cannot stat {path}: no such file", path=path)

    def read_bytes(self, path: str) -> bytes:
        if path not in self.files:
            raise CollaboratorError(f"cannot read {path}: no such file", path=path)
        self.reads.append(path)
        return self.files[path]

    def absolute(self, path: str) -> str:
        return "/" + path.lstrip("/")
