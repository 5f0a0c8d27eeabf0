from pathlib import Path
from typing import Callable, Dict, List, Union

from .models import Issue, IssueCommentFormat, NormalizedResult
from .settings import InspectCodeIssuesSettings
from .tool_parsers.base_parser import BaseIssueProvider
from .tool_parsers.inspectcode_parser import PROVIDER_NAME, InspectCodeIssuesProvider
from ..utils.logger import logger

ProviderFactory = Callable[[InspectCodeIssuesSettings], BaseIssueProvider]


class IssuesReader:
    """Reads issues through registered providers"""

    def __init__(self):
        self._providers: Dict[str, ProviderFactory] = {}
        self.register_provider(PROVIDER_NAME, InspectCodeIssuesProvider)

    def register_provider(self, provider_name: str, factory: ProviderFactory):
        """Register a provider factory under a name"""
        self._providers[provider_name] = factory
        logger.debug(f"Registered issue provider: {provider_name}")

    @property
    def provider_names(self) -> List[str]:
        return sorted(self._providers)

    def read_issues(self, provider_name: str, settings: InspectCodeIssuesSettings,
                    format: IssueCommentFormat = IssueCommentFormat.PlainText) -> NormalizedResult:
        """Read a report with the named provider and wrap the issues in a result"""

        if provider_name not in self._providers:
            available = ", ".join(self.provider_names) or "(none registered)"
            raise KeyError(f"Unknown issue provider '{provider_name}'. Available: {available}")

        provider = self._providers[provider_name](settings)
        issues = provider.read_issues(format)

        result = NormalizedResult(
            provider=provider.provider_name,
            issues=issues,
            metadata={
                "encoding": settings.encoding,
                "format": format.value,
            }
        )

        logger.info(f"Normalized {result.issue_count} issues from {provider.provider_name}")
        return result


def read_issues_from_file_path(file_path: Union[str, Path],
                               format: IssueCommentFormat = IssueCommentFormat.PlainText,
                               encoding: str = "utf-8") -> List[Issue]:
    """Read issues from an InspectCode report on disk"""
    settings = InspectCodeIssuesSettings.from_file_path(file_path, encoding)
    return InspectCodeIssuesProvider(settings).read_issues(format)


def read_issues_from_content(content: bytes,
                             format: IssueCommentFormat = IssueCommentFormat.PlainText,
                             encoding: str = "utf-8") -> List[Issue]:
    """Read issues from an InspectCode report held in memory"""
    settings = InspectCodeIssuesSettings.from_content(content, encoding)
    return InspectCodeIssuesProvider(settings).read_issues(format)
