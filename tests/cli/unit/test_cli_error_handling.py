"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from api2html.cli import main


def test_missing_input_argument_returns_clean_click_error(capsys) -> None:
    exit_code = main(["render"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing argument" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["render", "openapi.yaml", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_dangling_reference_exits_with_status_one(tmp_path: Path, capsys) -> None:
    document_path = tmp_path / "broken.yaml"
    document_path.write_text(
        "components:\n  schemas:\n    Alias:\n      $ref: '#/components/schemas/Gone'\n",
        encoding="utf-8",
    )

    exit_code = main(["render", str(document_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Cannot find reference #/components/schemas/Gone" in captured.err
    assert captured.out == ""
    assert "Traceback" not in captured.err


def test_missing_document_exits_with_status_one(tmp_path: Path, capsys) -> None:
    exit_code = main(["render", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "API document not found" in captured.err


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "api2html.yaml"
    config_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(config_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
    assert config_path.read_text(encoding="utf-8") == "existing"
