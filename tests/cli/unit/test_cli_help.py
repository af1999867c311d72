"""CLI smoke tests."""

from click.testing import CliRunner
from api2html.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "render" in result.output
    assert "generate-config" in result.output


def test_render_help_lists_options() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["render", "--help"])

    assert result.exit_code == 0
    assert "--output" in result.output
    assert "--no-description" in result.output
    assert "--config" in result.output
