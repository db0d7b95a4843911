"""Report rendering for compliance results."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from checklicenses import __version__

if TYPE_CHECKING:
    from checklicenses.rules.types import CompiledConfig, ComplianceResult


def canonical_dumps(obj: Any) -> str:
    """Serialize a JSON-compatible object with stable canonical formatting."""
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def render_text(result: ComplianceResult) -> str:
    """Newline-joined violating paths; empty when the scan passed."""
    return "\n".join(result.violations)


def build_report(result: ComplianceResult, config: CompiledConfig) -> dict[str, Any]:
    """Build the JSON report payload."""
    return {
        "schema_version": "1.0",
        "tool_version": __version__,
        "status": "passed" if result.passed else "failed",
        "violations": list(result.violations),
        "stats": {**asdict(result.stats), "violations": len(result.violations)},
        "config": {
            "module_prefix": config.module_prefix,
            "licenses": len(config.license_patterns),
            "accept": [r.pattern for r in config.accept_rules],
            "reject": [r.pattern for r in config.reject_rules],
        },
    }
