"""Provider for issues reported by JetBrains InspectCode.

InspectCode writes an XML report where rule metadata lives in a separate
``IssueTypes`` section and findings are grouped below ``Project`` elements::

    <Report>
      <Information><Solution>C:\\src\\Foo.sln</Solution></Information>
      <IssueTypes>
        <IssueType Id="UnusedVariable" Severity="WARNING" WikiUrl="..."/>
      </IssueTypes>
      <Issues>
        <Project Name="Foo">
          <Issue TypeId="UnusedVariable" File="Foo\\Bar.cs" Line="12" Message="..."/>
        </Project>
      </Issues>
    </Report>

A finding missing one of its required fields is skipped. Only a broken
document, an ambiguous solution path, a non-numeric line or a reference to an
undeclared rule abort the conversion.
"""

import re
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Dict, List, Optional

from lxml import etree
from pydantic import AnyUrl, TypeAdapter, ValidationError

from .base_parser import BaseIssueProvider
from ..exceptions import (
    InvalidLineNumberError,
    MalformedReportError,
    ReportStructureError,
    UnknownIssueTypeError,
)
from ..models import Issue, IssueCommentFormat, IssuePriority, IssueType
from ..settings import InspectCodeIssuesSettings
from ...utils.logger import logger

PROVIDER_NAME = "InspectCode"

_PRIORITIES = {
    "hint": IssuePriority.Hint,
    "suggestion": IssuePriority.Suggestion,
    "warning": IssuePriority.Warning,
    "error": IssuePriority.Error,
}

_WINDOWS_PATH_RE = re.compile(r"^[A-Za-z]:|\\")
_INTEGER_RE = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+[ \t\n\v\f\r]*\Z")
_INT32_MIN = -2 ** 31
_INT32_MAX = 2 ** 31 - 1
_URL_ADAPTER = TypeAdapter(AnyUrl)


def parse_report(content: bytes, encoding: str = "utf-8") -> etree._Element:
    """Parse report bytes into an element tree and return its root"""
    try:
        text = content.decode(encoding)
    except UnicodeDecodeError as e:
        raise MalformedReportError(f"InspectCode report is not valid {encoding}: {e}") from e

    if text.startswith("\ufeff"):
        text = text[1:]
    if not text.strip():
        raise MalformedReportError("InspectCode report is empty")

    # The declared encoding is ignored, the text has already been decoded
    parser = etree.XMLParser(
        encoding="utf-8",
        resolve_entities=False,
        no_network=True,
        remove_blank_text=True,
    )
    try:
        return etree.fromstring(text.encode("utf-8"), parser=parser)
    except etree.XMLSyntaxError as e:
        raise MalformedReportError(f"InspectCode report is not valid XML: {e}") from e


def get_priority(severity: str) -> IssuePriority:
    """Map an InspectCode severity to a priority; unknown values are Undefined"""
    return _PRIORITIES.get((severity or "").lower(), IssuePriority.Undefined)


def read_issue_types(root: etree._Element) -> Dict[str, IssueType]:
    """Index all IssueType declarations by their Id"""
    issue_types: Dict[str, IssueType] = {}

    for element in root.iterdescendants("IssueType"):
        type_id = element.get("Id")
        if type_id is None:
            logger.debug(f"Ignoring IssueType without Id on line {element.sourceline}")
            continue

        # Later declarations replace earlier ones
        issue_types[type_id] = IssueType(
            severity=element.get("Severity", ""),
            wiki_url=_to_url(element.get("WikiUrl")),
        )

    return issue_types


def get_solution_directory(root: etree._Element) -> PurePath:
    """Directory of the single solution the report was created for"""
    solutions = list(root.iterdescendants("Solution"))
    if len(solutions) != 1:
        raise ReportStructureError(
            f"Expected exactly one Solution element, found {len(solutions)}"
        )

    solution_path = "".join(solutions[0].itertext()).strip()
    if not solution_path:
        raise ReportStructureError("Solution element does not contain a path")

    flavour = PureWindowsPath if _WINDOWS_PATH_RE.search(solution_path) else PurePosixPath
    return flavour(solution_path).parent


class InspectCodeIssuesProvider(BaseIssueProvider):
    """Reads issues from an InspectCode XML report"""

    def __init__(self, settings: InspectCodeIssuesSettings):
        super().__init__(PROVIDER_NAME)
        self.settings = settings

    def read_issues(self, format: IssueCommentFormat = IssueCommentFormat.PlainText) -> List[Issue]:
        root = parse_report(self.settings.log_file_content, self.settings.encoding)

        solution_dir = get_solution_directory(root)
        issue_types = read_issue_types(root)

        issues = []
        skipped = 0

        for element in root.iterdescendants("Issue"):
            issue = self._read_issue(element, solution_dir, issue_types, format)
            if issue is None:
                skipped += 1
                continue
            issues.append(issue)

        logger.info(f"Read {len(issues)} issues from InspectCode report ({skipped} skipped)")
        return issues

    def _read_issue(self, element: etree._Element, solution_dir: PurePath,
                    issue_types: Dict[str, IssueType],
                    format: IssueCommentFormat) -> Optional[Issue]:
        """Convert one Issue element, or return None if a required field is missing"""

        project_name = _get_project(element)
        if project_name is None:
            return _skip(element, "no project")

        file_path = _get_file(element, solution_dir)
        if file_path is None:
            return _skip(element, "no file")

        line = _get_line(element)
        if line is None:
            return _skip(element, "no line")

        rule = _get_attribute(element, "TypeId")
        if rule is None:
            return _skip(element, "no rule")

        message = _get_attribute(element, "Message")
        if message is None:
            return _skip(element, "no message")

        try:
            issue_type = issue_types[rule]
        except KeyError:
            raise UnknownIssueTypeError(rule) from None

        return self._new_issue(
            message=message,
            format=format,
            project_name=project_name,
            file_path=file_path,
            line=line,
            priority=get_priority(issue_type.severity),
            rule=rule,
            issue_type=issue_type,
        )


def _skip(element: etree._Element, reason: str) -> None:
    logger.debug(f"Skipping Issue on report line {element.sourceline}: {reason}")
    return None


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _get_attribute(element: etree._Element, name: str) -> Optional[str]:
    value = element.get(name)
    if _is_blank(value):
        return None
    return value


def _nearest_ancestor(element: etree._Element, tag: str) -> Optional[etree._Element]:
    parent = element.getparent()
    while parent is not None:
        if parent.tag == tag:
            return parent
        parent = parent.getparent()
    return None


def _get_project(element: etree._Element) -> Optional[str]:
    project = _nearest_ancestor(element, "Project")
    if project is None:
        return None
    return _get_attribute(project, "Name")


def _get_file(element: etree._Element, solution_dir: PurePath) -> Optional[str]:
    file_name = _get_attribute(element, "File")
    if file_name is None:
        return None

    # Rooted paths, with or without a drive, are kept as written
    file_path = type(solution_dir)(file_name)
    if file_path.drive or file_path.root:
        return file_name
    return str(solution_dir / file_path)


def _get_line(element: etree._Element) -> Optional[int]:
    value = _get_attribute(element, "Line")
    if value is None:
        return None

    # Presence is optional, format is not
    if not _INTEGER_RE.match(value):
        raise InvalidLineNumberError(
            f"Line '{value}' of Issue on report line {element.sourceline} is not an integer"
        )

    line = int(value)
    if not _INT32_MIN <= line <= _INT32_MAX:
        raise InvalidLineNumberError(
            f"Line '{value}' of Issue on report line {element.sourceline} is out of range"
        )
    return line


def _to_url(value: Optional[str]) -> Optional[AnyUrl]:
    if _is_blank(value):
        return None
    try:
        return _URL_ADAPTER.validate_python(value)
    except ValidationError:
        logger.debug(f"Ignoring malformed WikiUrl '{value}'")
        return None
