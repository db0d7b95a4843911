"""Compile raw configuration into matching rules."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from checklicenses.errors import CompileError
from checklicenses.rules.types import CompiledConfig, PathRule, Polarity

if TYPE_CHECKING:
    from checklicenses.config import RawConfig


def _compile_path_rule(kind: str, index: int, pattern: str, polarity: Polarity) -> PathRule:
    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise CompileError(kind, index, pattern, e) from e
    return PathRule(pattern=pattern, regex=regex, polarity=polarity)


def compile_config(raw: RawConfig) -> CompiledConfig:
    """
    Compile license templates and path patterns.

    License templates become unanchored patterns searched anywhere in the
    decoded file content. Accept and reject patterns become full-match path rules,
    accept rules first, each group in declaration order.

    Args:
        raw: Parsed configuration

    Returns:
        CompiledConfig

    Raises:
        CompileError: On the first invalid regular expression
    """
    license_patterns = []
    for i, template in enumerate(raw.licenses):
        try:
            license_patterns.append(re.compile(template.pattern))
        except re.error as e:
            raise CompileError("license", i, template.pattern, e) from e

    rules = [
        _compile_path_rule("accept", i, p, Polarity.ACCEPT) for i, p in enumerate(raw.accept)
    ]
    rules.extend(
        _compile_path_rule("reject", i, p, Polarity.REJECT) for i, p in enumerate(raw.reject)
    )

    return CompiledConfig(
        license_patterns=tuple(license_patterns),
        module_prefix=raw.module_prefix,
        rules=tuple(rules),
    )
