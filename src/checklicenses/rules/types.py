"""Types for license rule compilation and classification."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class LicenseTemplate:
    """One acceptable license header, one regex-capable string per line."""

    lines: tuple[str, ...]

    @property
    def pattern(self) -> str:
        return "\n".join(self.lines)


class Polarity(str, Enum):
    """Which match outcome a path rule requires to keep a file in scope."""

    ACCEPT = "accept"
    REJECT = "reject"


@dataclass(frozen=True)
class PathRule:
    """Full-match path pattern tagged with its polarity."""

    pattern: str
    regex: re.Pattern[str]
    polarity: Polarity

    def matches(self, path: str) -> bool:
        return self.regex.fullmatch(path) is not None

    def excludes(self, path: str) -> bool:
        """Return True when this rule removes ``path`` from scope.

        An accept rule excludes paths it does not match; a reject rule
        excludes paths it does match.
        """
        return self.matches(path) == (self.polarity is Polarity.REJECT)


@dataclass(frozen=True)
class CompiledConfig:
    """Validated rule set, built once per run and never mutated."""

    license_patterns: tuple[re.Pattern[str], ...]
    module_prefix: str = ""
    rules: tuple[PathRule, ...] = ()

    @property
    def accept_rules(self) -> tuple[PathRule, ...]:
        return tuple(r for r in self.rules if r.polarity is Polarity.ACCEPT)

    @property
    def reject_rules(self) -> tuple[PathRule, ...]:
        return tuple(r for r in self.rules if r.polarity is Polarity.REJECT)


@dataclass(frozen=True)
class CandidateFile:
    """A listed path that survived scope filtering."""

    path: str  # as reported by the file lister
    normalized: str  # module prefix stripped


@dataclass
class ScanStats:
    """Counters collected during a scan."""

    listed: int = 0
    excluded_by_rule: int = 0
    directories: int = 0
    checked: int = 0
    compliant: int = 0

    @property
    def violations(self) -> int:
        return self.checked - self.compliant


@dataclass(frozen=True)
class ComplianceResult:
    """Non-compliant paths in input order, plus scan counters."""

    violations: tuple[str, ...] = ()
    stats: ScanStats = field(default_factory=ScanStats)

    @property
    def passed(self) -> bool:
        return not self.violations
