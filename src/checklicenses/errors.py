"""Error taxonomy for checklicenses.

Compliance violations are not errors: they are collected in a
``ComplianceResult``. Everything raised from here aborts the run.
"""

from __future__ import annotations


class ChecklicensesError(RuntimeError):
    """Base class for fatal checklicenses errors."""


class ConfigError(ChecklicensesError):
    """Configuration file is missing, unreadable, malformed or invalid."""


class CompileError(ConfigError):
    """A license template or path pattern is not a valid regular expression."""

    def __init__(self, kind: str, index: int, pattern: str, cause: Exception):
        super().__init__(f"invalid {kind} pattern #{index} {pattern!r}: {cause}")
        self.kind = kind
        self.index = index
        self.pattern = pattern


class CollaboratorError(ChecklicensesError):
    """File listing or filesystem access failed."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
