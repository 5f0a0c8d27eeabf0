"""Errors that abort the conversion of a whole report.

Problems with a single finding never raise; the finding is skipped instead.
"""


class InspectCodeReportError(Exception):
    """Base exception for all conversion-fatal errors."""


class MalformedReportError(InspectCodeReportError):
    """Raised when the report is not well-formed XML in the given encoding."""


class ReportStructureError(InspectCodeReportError):
    """Raised when the report does not declare exactly one solution path."""


class InvalidLineNumberError(InspectCodeReportError, ValueError):
    """Raised when a Line attribute is present but not an integer."""


class UnknownIssueTypeError(InspectCodeReportError, KeyError):
    """Raised when a finding references a rule with no IssueType declaration."""

    def __init__(self, rule: str):
        super().__init__(rule)
        self.rule = rule

    def __str__(self) -> str:
        return f"No IssueType declared for rule '{self.rule}'"
