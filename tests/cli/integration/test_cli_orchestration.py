"""CLI orchestration integration tests."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner
from api2html.cli import cli, main


def _sample_path() -> Path:
    return Path(__file__).resolve().parents[3] / "samples" / "petstore.yaml"


def test_render_command_writes_html_file(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "schemas.html"

    result = runner.invoke(cli, ["render", str(_sample_path()), "-o", str(output_path)])

    assert result.exit_code == 0
    html = output_path.read_text(encoding="utf-8")
    assert html.startswith("<!DOCTYPE html>")
    assert html.count('<table class="tg" id="Address">') == 1
    assert html.rstrip().endswith("</html>")


def test_render_command_writes_selection_to_stdout(capsys) -> None:
    exit_code = main(["render", str(_sample_path()), "Tag", "--no-description"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out.count("<table") == 1
    assert 'id="Tag"' in captured.out
    assert "<th>Description</th>" not in captured.out


def test_unknown_selection_warns_and_renders_the_rest(caplog, capsys) -> None:
    exit_code = main(["render", str(_sample_path()), "Unknown", "Person"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert 'id="Person"' in captured.out
    assert "Cannot find schema Unknown" in caplog.text


def test_generate_config_then_render_with_it(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = tmp_path / "api2html.yaml"

    generated = runner.invoke(cli, ["generate-config", "--output", str(config_path)])
    assert generated.exit_code == 0
    assert config_path.exists()

    config_path.write_text(
        config_path.read_text(encoding="utf-8").replace(
            '# output: "schemas.html"', 'output: "schemas.html"'
        ),
        encoding="utf-8",
    )
    rendered = runner.invoke(cli, ["render", str(_sample_path()), "--config", str(config_path)])

    assert rendered.exit_code == 0
    assert (tmp_path / "schemas.html").exists()
