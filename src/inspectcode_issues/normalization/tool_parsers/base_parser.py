from abc import ABC, abstractmethod
from typing import List, Optional

from ...normalization.models import Issue, IssueCommentFormat, IssuePriority, IssueType


class BaseIssueProvider(ABC):
    """Base class for providers which turn a tool report into issues"""

    def __init__(self, provider_name: str):
        self.provider_name = provider_name

    @property
    def provider_type(self) -> str:
        """Fully qualified name of the provider class"""
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    @abstractmethod
    def read_issues(self, format: IssueCommentFormat = IssueCommentFormat.PlainText) -> List[Issue]:
        """Read the report and return normalized issues"""
        pass

    def _new_issue(self, message: str, format: IssueCommentFormat, project_name: str,
                   file_path: str, line: int, priority: IssuePriority,
                   rule: str, issue_type: Optional[IssueType] = None) -> Issue:
        """Build an issue stamped with this provider's identity"""
        return Issue(
            message=message,
            format=format,
            project_name=project_name,
            file_path=file_path,
            line=line,
            priority=priority,
            rule=rule,
            rule_url=issue_type.wiki_url if issue_type else None,
            provider_type=self.provider_type,
            provider_name=self.provider_name,
        )
