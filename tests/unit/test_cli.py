"""Tests for CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from cocoaconv.cli import app
from cocoaconv.config import DEFAULT_FALLBACK_HEADER


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run commands from an empty project directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_convert_defaults_to_nsenum(cli_runner: CliRunner, project: Path, sample_header: Path):
    result = cli_runner.invoke(app, ["convert", str(sample_header)])
    assert result.exit_code == 0
    assert "typedef NS_ENUM(NSUInteger, MMD6OutputFormat) {" in result.stdout
    assert "\tMMD6OutputFormatLatex = FORMAT_LATEX," in result.stdout
    assert result.stdout.endswith("} NS_SWIFT_NAME(ParserExtension);\n")


def test_convert_swift(cli_runner: CliRunner, project: Path, sample_header: Path):
    result = cli_runner.invoke(app, ["convert", "--mode", "swift", str(sample_header)])
    assert result.exit_code == 0
    assert "extension TokenType: CustomStringConvertible {" in result.stdout
    assert 'case .critic: return "ParserExtension.critic"' in result.stdout


def test_convert_invalid_mode(cli_runner: CliRunner, project: Path, sample_header: Path):
    result = cli_runner.invoke(app, ["convert", "-m", "kotlin", str(sample_header)])
    assert result.exit_code != 0


def test_convert_to_file(cli_runner: CliRunner, project: Path, sample_header: Path):
    out = project / "generated" / "MMD6Enums.h"
    result = cli_runner.invoke(app, ["convert", "-o", str(out), str(sample_header)])
    assert result.exit_code == 0
    content = out.read_text()
    assert content.startswith("\ntypedef NS_ENUM(NSUInteger, MMD6TokenType) {\n")
    assert content.endswith(";\n")


def test_convert_uses_fallback(cli_runner: CliRunner, project: Path, sample_header_text: str):
    fallback = project / DEFAULT_FALLBACK_HEADER
    fallback.parent.mkdir(parents=True)
    fallback.write_text(sample_header_text)

    result = cli_runner.invoke(app, ["convert", "-m", "swift"])
    assert result.exit_code == 0
    assert "extension OutputFormat: CustomStringConvertible {" in result.stdout


def test_convert_missing_input(cli_runner: CliRunner, project: Path):
    """No header and no fallback: report the fallback path and write nothing."""
    out = project / "out.h"
    result = cli_runner.invoke(app, ["convert", "-o", str(out)])
    assert result.exit_code == 1
    assert "Failed to read `" in result.output
    assert str(DEFAULT_FALLBACK_HEADER) in result.output
    assert "typedef" not in result.output
    assert not out.exists()


def test_convert_missing_explicit_header(cli_runner: CliRunner, project: Path):
    result = cli_runner.invoke(app, ["convert", str(project / "nope.h")])
    assert result.exit_code == 1
    assert "Failed to read `" in result.output


def test_convert_with_config(cli_runner: CliRunner, project: Path, sample_header: Path):
    (project / "cocoaconv.toml").write_text(
        '[cocoaconv]\ntype_prefix = "ABC"\n\n[cocoaconv.type_name_overrides]\noutput_format = "Format"\n'
    )
    result = cli_runner.invoke(app, ["convert", str(sample_header)])
    assert result.exit_code == 0
    assert "typedef NS_ENUM(NSUInteger, ABCFormat) {" in result.stdout
    assert "} NS_SWIFT_NAME(Format);" in result.stdout


def test_convert_with_bad_config(cli_runner: CliRunner, project: Path, sample_header: Path):
    config = project / "custom.toml"
    config.write_text("[cocoaconv]\nbogus = 1\n")
    result = cli_runner.invoke(app, ["convert", "--config", str(config), str(sample_header)])
    assert result.exit_code == 1
    assert "bogus" in result.output


def test_inspect(cli_runner: CliRunner, project: Path, sample_header: Path):
    result = cli_runner.invoke(app, ["inspect", str(sample_header)])
    assert result.exit_code == 0
    assert "token_types" in result.stdout
    assert "TokenType" in result.stdout
    assert "ParserExtension" in result.stdout


def test_inspect_no_enums(cli_runner: CliRunner, project: Path):
    header = project / "empty.h"
    header.write_text("int x;\n")
    result = cli_runner.invoke(app, ["inspect", str(header)])
    assert result.exit_code == 0
    assert "No enums found" in result.stdout


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "cocoaconv version" in result.stdout


def test_convert_with_unreadable_config(cli_runner: CliRunner, project: Path, sample_header: Path):
    (project / "cocoaconv.toml").mkdir()
    result = cli_runner.invoke(app, ["convert", str(sample_header)])
    assert result.exit_code == 1
    assert "cocoaconv.toml" in result.output
    assert "typedef" not in result.output


def test_convert_output_is_directory(cli_runner: CliRunner, project: Path, sample_header: Path):
    out = project / "generated"
    out.mkdir()
    result = cli_runner.invoke(app, ["convert", "-o", str(out), str(sample_header)])
    assert result.exit_code == 1
    assert "Failed to write `" in result.output
    assert "Wrote" not in result.output
