#!/usr/bin/env python3
"""
Command line entry point for reading InspectCode reports
"""

import sys
from pathlib import Path
import typer
from typing import Optional
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core.config_loader import ConfigError, ConfigLoader
from .modules.results_collector import ResultsCollector, write_result
from .normalization.exceptions import InspectCodeReportError
from .normalization.issue_reader import IssuesReader
from .normalization.models import IssueCommentFormat
from .normalization.settings import InspectCodeIssuesSettings
from .normalization.tool_parsers.inspectcode_parser import (
    PROVIDER_NAME,
    get_priority,
    parse_report,
    read_issue_types,
)
from .utils.logger import logger, set_level

app = typer.Typer(help="Convert JetBrains InspectCode reports into normalized issues")
console = Console()

PRIORITY_STYLES = {
    "Error": "red",
    "Warning": "yellow",
    "Suggestion": "green",
    "Hint": "cyan",
    "Undefined": "white",
}


@app.command()
def convert(
        report: Path = typer.Argument(..., help="InspectCode XML report"),
        encoding: Optional[str] = typer.Option(None, help="Text encoding of the report"),
        format: Optional[IssueCommentFormat] = typer.Option(None, help="Format of issue messages"),
        output: Optional[Path] = typer.Option(None, help="Write normalized JSON to this file"),
        save: bool = typer.Option(False, "--save", help="Save normalized JSON in the configured output directory"),
        config: str = typer.Option("./inspectcode.yaml", help="Configuration file"),
        verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging")
):
    """Convert a report and print or save the issues"""

    set_level(verbose)

    try:
        reader_config = ConfigLoader(config).load().reader
        settings = InspectCodeIssuesSettings.from_file_path(report, encoding or reader_config.encoding)
        result = IssuesReader().read_issues(PROVIDER_NAME, settings, format or reader_config.format)

        if output or save:
            if output:
                path = write_result(result, output)
            else:
                collector = ResultsCollector(Path(reader_config.output_dir))
                path = collector.save_normalized_result(result, report.stem)
            console.print(f"[green]Wrote {result.issue_count} issues to {path}[/green]")
            return

        table = Table(title=f"InspectCode issues ({result.issue_count})")
        table.add_column("Priority")
        table.add_column("Project", style="cyan")
        table.add_column("File", style="yellow")
        table.add_column("Line", justify="right")
        table.add_column("Rule", style="magenta")
        table.add_column("Message")

        for issue in result.issues:
            priority = issue.priority.name
            table.add_row(
                f"[{PRIORITY_STYLES[priority]}]{priority}[/{PRIORITY_STYLES[priority]}]",
                escape(issue.project_name),
                escape(issue.file_path),
                str(issue.line),
                escape(issue.rule),
                escape(issue.message)
            )

        console.print(table)

    except (ConfigError, FileNotFoundError, InspectCodeReportError, ValidationError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        logger.debug("Conversion failed", exc_info=True)
        sys.exit(1)


@app.command()
def issue_types(
        report: Path = typer.Argument(..., help="InspectCode XML report"),
        encoding: str = typer.Option("utf-8", help="Text encoding of the report")
):
    """List the issue types declared in a report"""

    try:
        settings = InspectCodeIssuesSettings.from_file_path(report, encoding)
        types = read_issue_types(parse_report(settings.log_file_content, settings.encoding))

        table = Table(title="Issue Types")
        table.add_column("Id", style="cyan")
        table.add_column("Severity", style="green")
        table.add_column("Priority", style="magenta")
        table.add_column("Wiki", style="yellow")

        for type_id, issue_type in types.items():
            table.add_row(
                escape(type_id),
                escape(issue_type.severity),
                get_priority(issue_type.severity).name,
                str(issue_type.wiki_url) if issue_type.wiki_url else ""
            )

        console.print(table)

    except (FileNotFoundError, InspectCodeReportError, ValidationError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


def main():
    """Main entry point"""
    app()


if __name__ == "__main__":
    main()
