"""
InspectCode Issues - normalized issues from JetBrains InspectCode reports
"""

__version__ = "1.0.0"

from .normalization import (
    InspectCodeIssuesProvider,
    InspectCodeIssuesSettings,
    InspectCodeReportError,
    Issue,
    IssueCommentFormat,
    IssuePriority,
    IssuesReader,
    read_issues_from_content,
    read_issues_from_file_path,
)

__all__ = [
    'InspectCodeIssuesProvider',
    'InspectCodeIssuesSettings',
    'InspectCodeReportError',
    'Issue',
    'IssueCommentFormat',
    'IssuePriority',
    'IssuesReader',
    'read_issues_from_content',
    'read_issues_from_file_path',
]
