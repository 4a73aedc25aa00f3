"""Shared fixtures for flow tests.

This module provides:
- A Prefect test harness (temporary local API) for the whole session
- An output path inside tmp_path for generated workbooks
"""

import pytest
from prefect.testing.utilities import prefect_test_harness


@pytest.fixture(autouse=True, scope="session")
def prefect_harness():
    """Run flows and tasks against a temporary Prefect database."""
    with prefect_test_harness():
        yield


@pytest.fixture
def output_path(tmp_path, monkeypatch):
    """Point SCREENING_OUTPUT_PATH at a temp workbook."""
    path = tmp_path / "out" / "Assigned_Report.xlsx"
    monkeypatch.setenv("SCREENING_OUTPUT_PATH", str(path))
    return path
