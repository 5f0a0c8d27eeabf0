"""Tests for the command line interface"""

import json

import pytest
from typer.testing import CliRunner

from inspectcode_issues.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_convert_prints_table(sample_report_path):
    result = runner.invoke(app, ["convert", str(sample_report_path)])

    assert result.exit_code == 0
    assert "InspectCode issues (4)" in result.output


def test_convert_writes_json(tmp_path, sample_report_path):
    target = tmp_path / "issues.json"

    result = runner.invoke(app, [
        "convert", str(sample_report_path),
        "--output", str(target),
        "--format", "Markdown",
    ])

    assert result.exit_code == 0
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data["issue_count"] == 4
    assert data["metadata"]["format"] == "Markdown"
    assert not (tmp_path / "results").exists()


def test_convert_save_uses_configured_output_dir(tmp_path, sample_report_path):
    (tmp_path / "inspectcode.yaml").write_text("reader:\n  output_dir: ./out\n", encoding="utf-8")

    result = runner.invoke(app, ["convert", str(sample_report_path), "--save"])

    assert result.exit_code == 0
    saved = tmp_path / "out" / "normalized" / "inspectcode_sample.json"
    assert json.loads(saved.read_text(encoding="utf-8"))["provider"] == "InspectCode"


def test_convert_missing_report(tmp_path):
    result = runner.invoke(app, ["convert", str(tmp_path / "missing.xml")])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_convert_fatal_report_error(tmp_path):
    report = tmp_path / "broken.xml"
    report.write_bytes(b"<Report><Issues></Report>")

    result = runner.invoke(app, ["convert", str(report)])

    assert result.exit_code == 1
    assert "not valid XML" in result.output


def test_convert_invalid_config(tmp_path, sample_report_path):
    config = tmp_path / "bad.yaml"
    config.write_text("- not a mapping\n", encoding="utf-8")

    result = runner.invoke(app, ["convert", str(sample_report_path), "--config", str(config)])

    assert result.exit_code == 1


def test_issue_types(sample_report_path):
    result = runner.invoke(app, ["issue-types", str(sample_report_path)])

    assert result.exit_code == 0
    assert "Issue Types" in result.output


def test_issue_types_bad_encoding(sample_report_path):
    result = runner.invoke(app, ["issue-types", str(sample_report_path), "--encoding", "no-such-codec"])

    assert result.exit_code == 1
