"""Tests for the command-line interface."""

from __future__ import annotations

from pathlib import Path

import pytest

from beamsplitter.cli import main

MARKER = "<<MARKER>>"


def test_generates_javascript(tmp_path: Path, model_file: Path, capsys) -> None:
    out = tmp_path / "out"

    code = main([str(model_file), "-t", "js", "-o", str(out)])

    assert code == 0
    assert (out / "jsbindings_generated.cpp").is_file()
    stdout = capsys.readouterr().out
    assert f"Generated {out / 'jsbindings_generated.cpp'}" in stdout
    assert f"Generated {out / 'extensions_generated.js'}" in stdout


def test_edits_typescript_and_java_together(tmp_path: Path, model_file: Path, capsys) -> None:
    (tmp_path / "filament.d.ts").write_text(f"// {MARKER}\n", encoding="utf-8")
    (tmp_path / "pkg.java").write_text(
        f"public class pkg {{\n    // {MARKER}\n}}\n", encoding="utf-8"
    )

    code = main(
        [str(model_file), "-t", "ts", "-t", "java", "-o", str(tmp_path), "--marker", MARKER]
    )

    assert code == 0
    stdout = capsys.readouterr().out
    assert f"Edited {tmp_path / 'filament.d.ts'}" in stdout
    assert f"Edited {tmp_path / 'pkg.java'}" in stdout
    assert "export interface pkg$Foo" in (tmp_path / "filament.d.ts").read_text(encoding="utf-8")


def test_missing_marker_fails_without_writing(tmp_path: Path, model_file: Path, capsys) -> None:
    declarations = tmp_path / "filament.d.ts"
    declarations.write_text("nothing here\n", encoding="utf-8")

    code = main([str(model_file), "-t", "js", "-t", "ts", "-o", str(tmp_path)])

    assert code == 1
    assert "Unable to find marker line" in capsys.readouterr().out
    assert declarations.read_text(encoding="utf-8") == "nothing here\n"
    assert not (tmp_path / "jsbindings_generated.cpp").exists()


def test_dry_run_reports_without_writing(tmp_path: Path, model_file: Path, capsys) -> None:
    out = tmp_path / "out"

    code = main([str(model_file), "-t", "javascript", "-o", str(out), "--dry-run", "--show"])

    assert code == 0
    assert not out.exists()
    stdout = capsys.readouterr().out
    assert f"Would have generated {out / 'jsenums_generated.cpp'}" in stdout
    assert "EMSCRIPTEN_BINDINGS" in stdout


@pytest.mark.parametrize(
    "argv, message",
    [
        ([], "A type model file is required"),
        (["definitions.json"], "At least one --target is required"),
    ],
)
def test_missing_arguments(argv, message, capsys) -> None:
    assert main(argv) == 1
    assert message in capsys.readouterr().out


def test_unknown_target(model_file: Path, capsys) -> None:
    assert main([str(model_file), "-t", "kotlin"]) == 1
    assert "No generator registered for target: kotlin" in capsys.readouterr().out


def test_unreadable_model(tmp_path: Path, capsys) -> None:
    assert main([str(tmp_path / "absent.json"), "-t", "js"]) == 1
    assert "not found" in capsys.readouterr().out


def test_undecodable_model(tmp_path: Path, capsys) -> None:
    path = tmp_path / "definitions.json"
    path.write_bytes(b"\xff\xfe")

    assert main([str(path), "-t", "js", "-o", str(tmp_path)]) == 1
    assert "Unable to read type model file" in capsys.readouterr().out


def test_list_targets(capsys) -> None:
    assert main(["--list-targets"]) == 0

    stdout = capsys.readouterr().out
    for target in ("javascript", "typescript", "java"):
        assert target in stdout
