"""Rule compilation and license classification."""

from checklicenses.rules.compiler import compile_config
from checklicenses.rules.engine import LicenseChecker
from checklicenses.rules.types import (
    CandidateFile,
    CompiledConfig,
    ComplianceResult,
    LicenseTemplate,
    PathRule,
    Polarity,
    ScanStats,
)

__all__ = [
    "CandidateFile",
    "CompiledConfig",
    "ComplianceResult",
    "LicenseChecker",
    "LicenseTemplate",
    "PathRule",
    "Polarity",
    "ScanStats",
    "compile_config",
]
