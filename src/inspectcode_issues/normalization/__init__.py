from .exceptions import (
    InspectCodeReportError,
    InvalidLineNumberError,
    MalformedReportError,
    ReportStructureError,
    UnknownIssueTypeError,
)
from .issue_reader import IssuesReader, read_issues_from_content, read_issues_from_file_path
from .models import Issue, IssueCommentFormat, IssuePriority, IssueType, NormalizedResult
from .settings import InspectCodeIssuesSettings
from .tool_parsers import InspectCodeIssuesProvider, get_priority

__all__ = [
    "InspectCodeIssuesProvider",
    "InspectCodeIssuesSettings",
    "InspectCodeReportError",
    "InvalidLineNumberError",
    "Issue",
    "IssueCommentFormat",
    "IssuePriority",
    "IssueType",
    "IssuesReader",
    "MalformedReportError",
    "NormalizedResult",
    "ReportStructureError",
    "UnknownIssueTypeError",
    "get_priority",
    "read_issues_from_content",
    "read_issues_from_file_path",
]
