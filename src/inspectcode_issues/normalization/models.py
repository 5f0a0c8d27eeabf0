from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any, List
from pydantic import AnyUrl, BaseModel, ConfigDict, Field, field_validator


class IssuePriority(int, Enum):
    """Normalized priority of an issue, ordered by importance"""
    Undefined = 0
    Hint = 100
    Suggestion = 200
    Warning = 300
    Error = 400


class IssueCommentFormat(str, Enum):
    """Preferred format for rendering issue messages"""
    Undefined = "Undefined"
    PlainText = "PlainText"
    Markdown = "Markdown"
    Html = "Html"


class IssueType(BaseModel):
    """Rule definition declared in the IssueTypes section of a report"""
    model_config = ConfigDict(frozen=True)

    severity: str = Field("", description="Severity as written in the report")
    wiki_url: Optional[AnyUrl] = Field(None, description="Documentation link for the rule")


class Issue(BaseModel):
    """Normalized representation of a single finding"""
    model_config = ConfigDict(frozen=True)

    message: str = Field(description="Description of the issue")
    format: IssueCommentFormat = Field(
        IssueCommentFormat.PlainText,
        description="Format the message should be rendered in"
    )
    project_name: str = Field(description="Name of the project the issue belongs to")
    file_path: str = Field(description="Path of the affected file, resolved against the solution directory")
    line: int = Field(description="Line number where issue was found")
    priority: IssuePriority = Field(description="Normalized priority")
    rule: str = Field(description="Rule identifier from the tool")
    rule_url: Optional[AnyUrl] = Field(None, description="Documentation link for the rule")
    provider_type: str = Field(description="Type of the provider which reported the issue")
    provider_name: str = Field(description="Human readable name of the provider")

    @field_validator('message', 'project_name', 'file_path', 'rule')
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("value must not be blank")
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "message": self.message,
            "format": self.format.value,
            "project_name": self.project_name,
            "file_path": self.file_path,
            "line": self.line,
            "priority": self.priority.name,
            "rule": self.rule,
            "rule_url": str(self.rule_url) if self.rule_url else None,
            "provider_type": self.provider_type,
            "provider_name": self.provider_name,
        }


class NormalizedResult(BaseModel):
    """Collection of issues read from one report"""
    provider: str
    timestamp: datetime = Field(default_factory=datetime.now)
    issues: List[Issue] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def issue_count(self) -> int:
        return len(self.issues)

    @property
    def issues_by_priority(self) -> Dict[str, int]:
        """Count issues by priority"""
        counts = {}
        for issue in self.issues:
            counts[issue.priority.name] = counts.get(issue.priority.name, 0) + 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "provider": self.provider,
            "timestamp": self.timestamp.isoformat(),
            "issues": [issue.to_dict() for issue in self.issues],
            "issue_count": self.issue_count,
            "issues_by_priority": self.issues_by_priority,
            "metadata": self.metadata,
        }
