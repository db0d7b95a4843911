"""License classification and verification."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from checklicenses.rules.types import CandidateFile, CompiledConfig, ComplianceResult, ScanStats

if TYPE_CHECKING:
    from checklicenses.fs import FileSource

logger = logging.getLogger(__name__)


class LicenseChecker:
    """Decides scope and license compliance for listed files.

    Scope is decided from the path alone first (accept rules, then reject
    rules, first exclusion wins, default in scope); only surviving paths are
    stat'ed, and only non-directories are read.
    """

    def __init__(self, config: CompiledConfig, source: FileSource):
        self.config = config
        self.source = source

    def normalize(self, path: str) -> str:
        """Strip the configured module prefix from the start of ``path``."""
        return path.removeprefix(self.config.module_prefix)

    def in_scope(self, normalized: str) -> bool:
        for rule in self.config.rules:
            if rule.excludes(normalized):
                logger.debug(
                    "%s excluded by %s rule %r", normalized, rule.polarity.value, rule.pattern
                )
                return False
        return True

    def is_directory(self, path: str) -> bool:
        return self.source.is_dir(path)

    def is_compliant(self, content: bytes) -> bool:
        """True iff any license pattern occurs anywhere in ``content``.

        Content is decoded as UTF-8 with surrogateescape, so patterns match whole
        characters and undecodable bytes never fail the read.
        """
        text = content.decode("utf-8", "surrogateescape")
        return any(p.search(text) is not None for p in self.config.license_patterns)

    def _candidates(self, paths: Iterable[str], stats: ScanStats) -> Iterator[CandidateFile]:
        for path in paths:
            stats.listed += 1
            normalized = self.normalize(path)
            if not self.in_scope(normalized):
                stats.excluded_by_rule += 1
                continue
            if self.is_directory(path):
                logger.debug("%s skipped: directory", path)
                stats.directories += 1
                continue
            yield CandidateFile(path=path, normalized=normalized)

    def iter_candidates(self, paths: Iterable[str]) -> Iterator[CandidateFile]:
        """Yield the listed files that are in scope, in input order."""
        yield from self._candidates(paths, ScanStats())

    def scan(self, paths: Iterable[str], absolute: bool = False) -> ComplianceResult:
        """
        Check every in-scope file and collect the non-compliant ones.

        Args:
            paths: Listed paths, in the order to report them
            absolute: Report absolute paths instead of prefix-stripped ones

        Returns:
            ComplianceResult with violations in input order

        Raises:
            CollaboratorError: If an in-scope path cannot be stat'ed or read
        """
        stats = ScanStats()
        violations = []
        for candidate in self._candidates(paths, stats):
            content = self.source.read_bytes(candidate.path)
            stats.checked += 1
            if self.is_compliant(content):
                stats.compliant += 1
                continue
            logger.debug("%s: no acceptable license found", candidate.path)
            violations.append(
                self.source.absolute(candidate.path) if absolute else candidate.normalized
            )

        logger.info(
            "checked %d of %d listed file(s): %d compliant, %d violation(s), "
            "%d excluded by rule, %d director(ies)",
            stats.checked,
            stats.listed,
            stats.compliant,
            len(violations),
            stats.excluded_by_rule,
            stats.directories,
        )
        return ComplianceResult(violations=tuple(violations), stats=stats)
