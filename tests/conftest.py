"""Pytest configuration and fixtures for checklicenses tests."""
from pathlib import Path

import pytest


def pytest_sessionfinish(session, exitstatus):
    """Check that coverage data was collected if --cov was requested.

    This prevents silent "no data collected" scenarios that produce 0% coverage
    without failing the test run.
    """
    cov_enabled = any("--cov" in str(arg) for arg in session.config.args)

    if not cov_enabled:
        return

    coverage_files = list(Path.cwd().glob(".coverage*"))

    if not coverage_files:
        pytest.exit(
            "Coverage was enabled but no data was collected. "
            "Check that tests import from 'checklicenses' (the package) not 'src/checklicenses'.",
            returncode=1
        )


BSD_LICENSE = ["BSD line1", "BSD line2"]


@pytest.fixture
def raw_config_data() -> dict:
    """Config document used across scenarios: Go sources under pkg/."""
    return {
        "Licenses": [BSD_LICENSE],
        "GoPkg": "pkg/",
        "Accept": [r".*\.go"],
        "Reject": [r".*_test\.go"],
    }
