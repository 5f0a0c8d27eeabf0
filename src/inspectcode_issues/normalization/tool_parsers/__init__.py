from .base_parser import BaseIssueProvider
from .inspectcode_parser import (
    PROVIDER_NAME,
    InspectCodeIssuesProvider,
    get_priority,
    get_solution_directory,
    parse_report,
    read_issue_types,
)

__all__ = [
    "BaseIssueProvider",
    "InspectCodeIssuesProvider",
    "PROVIDER_NAME",
    "get_priority",
    "get_solution_directory",
    "parse_report",
    "read_issue_types",
]
