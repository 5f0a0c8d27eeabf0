"""Pytest configuration and fixtures."""
from pathlib import Path

import pytest

TESTFILES = Path(__file__).parent / "testfiles"

SOLUTION = r"<Solution>C:\proj\proj.sln</Solution>"

ISSUE_TYPES = """
    <IssueType Id="X" Severity="Warning" WikiUrl="https://example.com/rules/X.html" />
    <IssueType Id="Y" Severity="ERROR" />
"""

REPORT_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<Report ToolsVersion="2023.2">
  <Information>{solution}</Information>
  <IssueTypes>{issue_types}</IssueTypes>
  <Issues>{issues}</Issues>
</Report>
"""


def build_report(issues: str, issue_types: str = ISSUE_TYPES, solution: str = SOLUTION) -> bytes:
    return REPORT_TEMPLATE.format(
        solution=solution,
        issue_types=issue_types,
        issues=issues,
    ).encode("utf-8")


@pytest.fixture
def make_report():
    """Return a builder for report bytes with sensible defaults."""
    return build_report


@pytest.fixture
def sample_report_path() -> Path:
    return TESTFILES / "inspectcode_sample.xml"
