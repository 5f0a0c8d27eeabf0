"""Tests for core/config_loader.py"""

import textwrap
from pathlib import Path

import pytest

from inspectcode_issues.core.config_loader import ConfigError, ConfigLoader
from inspectcode_issues.normalization.models import IssueCommentFormat


def write_config(tmp_path: Path, content: str) -> Path:
    p = tmp_path / "inspectcode.yaml"
    p.write_text(textwrap.dedent(content), encoding="utf-8")
    return p


def test_missing_file_uses_defaults(tmp_path):
    config = ConfigLoader(str(tmp_path / "missing.yaml")).load()

    assert config.reader.encoding == "utf-8"
    assert config.reader.format == IssueCommentFormat.PlainText
    assert config.reader.output_dir == "./results"


def test_load_valid_config(tmp_path):
    p = write_config(tmp_path, """\
        reader:
          encoding: "utf-16"
          format: "Markdown"
          output_dir: "./out"
        """)

    loader = ConfigLoader(str(p))
    config = loader.load()

    assert loader.config is config
    assert config.reader.encoding == "utf-16"
    assert config.reader.format == IssueCommentFormat.Markdown
    assert config.reader.output_dir == "./out"


def test_empty_file_uses_defaults(tmp_path):
    p = write_config(tmp_path, "")

    assert ConfigLoader(str(p)).load().reader.encoding == "utf-8"


def test_unknown_sections_are_ignored(tmp_path):
    p = write_config(tmp_path, """\
        reader:
          format: "Html"
        something_else: 1
        """)

    assert ConfigLoader(str(p)).load().reader.format == IssueCommentFormat.Html


def test_not_a_mapping(tmp_path):
    p = write_config(tmp_path, "- just\n- a list\n")

    with pytest.raises(ConfigError, match="mapping"):
        ConfigLoader(str(p)).load()


def test_malformed_yaml(tmp_path):
    p = write_config(tmp_path, "reader: [unclosed\n")

    with pytest.raises(ConfigError, match="Failed to parse"):
        ConfigLoader(str(p)).load()


@pytest.mark.parametrize("content", [
    "reader:\n  encoding: no-such-codec\n",
    "reader:\n  format: Rtf\n",
])
def test_invalid_values(tmp_path, content):
    p = write_config(tmp_path, content)

    with pytest.raises(ConfigError, match="Invalid configuration"):
        ConfigLoader(str(p)).load()
