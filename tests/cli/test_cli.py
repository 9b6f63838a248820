from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import pytest
from pypdf import PdfReader

from pdfile.cli.commands import image as image_command
from pdfile.cli.main import main


def _snapshot(directory: Path) -> set[Path]:
    return set(directory.rglob("*"))


def test_merge_requires_two_files(sample_pdf: Path, tmp_path: Path) -> None:
    before = _snapshot(tmp_path)
    assert main(["merge", str(sample_pdf)]) == 1
    assert _snapshot(tmp_path) == before


def test_merge_rejects_wrong_extension(sample_pdf: Path, tmp_path: Path) -> None:
    notes = tmp_path / "notes.txt"
    notes.write_text("hello")
    assert main(["merge", str(sample_pdf), str(notes)]) == 1
    assert not (tmp_path / "PDFile").exists()


def test_merge_writes_default_output(
    sample_pdfs: list[Path], tmp_path: Path, page_widths: Callable[[Path], list[int]]
) -> None:
    assert main(["merge", *map(str, sample_pdfs), "--yes"]) == 0
    assert page_widths(tmp_path / "PDFile" / "one_merged.pdf") == [300, 400, 401]


def test_remove_pages_with_explicit_output(sample_pdf: Path, tmp_path: Path) -> None:
    output = tmp_path / "trimmed.pdf"
    assert main(["remove-pages", str(sample_pdf), "-p", "1,5", "-o", str(output)]) == 0
    assert len(PdfReader(str(output)).pages) == 3


def test_remove_pages_out_of_range_fails(sample_pdf: Path, tmp_path: Path) -> None:
    output = tmp_path / "trimmed.pdf"
    assert main(["remove-pages", str(sample_pdf), "-p", "9", "-o", str(output)]) == 1
    assert not output.exists()


def test_remove_pages_failure_creates_no_output_dir(sample_pdf: Path, tmp_path: Path) -> None:
    assert main(["remove-pages", str(sample_pdf), "-p", "9", "--yes"]) == 1
    assert not (tmp_path / "PDFile").exists()


def test_remove_pages_requires_pages_with_yes(sample_pdf: Path) -> None:
    assert main(["remove-pages", str(sample_pdf), "--yes"]) == 1


def test_remove_pages_invalid_token_fails(sample_pdf: Path) -> None:
    assert main(["remove-pages", str(sample_pdf), "-p", "one"]) == 1


def test_remove_pages_prompt_cancelled(
    sample_pdf: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt="": "   ")
    assert main(["remove-pages", str(sample_pdf)]) == 0
    assert "Cancelled" in capsys.readouterr().out
    assert not (tmp_path / "PDFile").exists()


def test_reorder_prompts_for_order(
    sample_pdf: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, page_widths: Callable[[Path], list[int]]
) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt="": "5,4,3,2,1")
    assert main(["reorder", str(sample_pdf)]) == 0
    assert page_widths(tmp_path / "PDFile" / "sample_reordered.pdf") == [204, 203, 202, 201, 200]


def test_reorder_duplicate_fails(sample_pdf: Path, tmp_path: Path) -> None:
    assert main(["reorder", str(sample_pdf), "-n", "1,1,2,3,4"]) == 1
    assert not (tmp_path / "PDFile").exists()


def test_move_page(sample_pdf: Path, tmp_path: Path, page_widths: Callable[[Path], list[int]]) -> None:
    output = tmp_path / "moved.pdf"
    assert main(["move-page", str(sample_pdf), "3", "up", "-o", str(output)]) == 0
    assert page_widths(output) == [200, 202, 201, 203, 204]
    assert main(["move-page", str(sample_pdf), "1", "up", "-o", str(output)]) == 1
    assert main(["move-page", str(sample_pdf), "1", "sideways"]) == 1


def test_rotate_with_yes(sample_pdf: Path, tmp_path: Path) -> None:
    assert main(["rotate", str(sample_pdf), "-r", "180", "-p", "2", "--yes"]) == 0
    rotations = [page.rotation for page in PdfReader(str(tmp_path / "PDFile" / "sample_rotated.pdf")).pages]
    assert rotations == [0, 180, 0, 0, 0]


@pytest.mark.parametrize("rotation", ["45", "ninety"])
def test_rotate_invalid_angle(sample_pdf: Path, tmp_path: Path, rotation: str) -> None:
    assert main(["rotate", str(sample_pdf), "-r", rotation, "--yes"]) == 1
    assert not (tmp_path / "PDFile").exists()


def test_rotate_requires_rotation_with_yes(sample_pdf: Path) -> None:
    assert main(["rotate", str(sample_pdf), "--yes"]) == 1


def test_insert_date_rejects_unknown_format(sample_pdf: Path) -> None:
    assert main(["insert-date", str(sample_pdf), "-f", "DD.MM.YY"]) == 1


def test_insert_date_all_pages(sample_pdf: Path, tmp_path: Path) -> None:
    assert main(["insert-date", str(sample_pdf), "--text", "RECEIVED", "--all-pages", "--yes"]) == 0
    reader = PdfReader(str(tmp_path / "PDFile" / "sample_with_date.pdf"))
    assert all("RECEIVED" in (page.extract_text() or "") for page in reader.pages)


def test_sign_requires_png(sample_pdf: Path, tmp_path: Path) -> None:
    signature = tmp_path / "signature.jpg"
    signature.write_bytes(b"\xff\xd8")
    assert main(["sign", str(sample_pdf), str(signature)]) == 1


def test_to_word_rejects_non_pdf(tmp_path: Path) -> None:
    text = tmp_path / "notes.txt"
    text.write_text("hello")
    assert main(["to-word", str(text), "--yes"]) == 1


def test_to_word(text_pdf: Path, tmp_path: Path) -> None:
    assert main(["-v", "to-word", str(text_pdf), "--yes"]) == 0
    assert (tmp_path / "PDFile" / "text_converted.docx").exists()


def test_filter_unknown_name(signature_png: Path) -> None:
    assert main(["filter", str(signature_png), "-f", "blur"]) == 1


def test_filter_without_imagemagick(signature_png: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(image_command, "check_imagemagick", lambda: False)
    assert main(["filter", str(signature_png), "-f", "sepia"]) == 1


def test_remove_bg_runs_selected_mode(
    signature_png: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls: list[tuple] = []

    def fake_border(source, output, color, fuzz):
        calls.append((source, output, color, fuzz))
        return True

    monkeypatch.setattr(image_command, "check_imagemagick", lambda: True)
    monkeypatch.setitem(image_command.BACKGROUND_MODES, "border", fake_border)

    assert main(["remove-bg", str(signature_png), "--mode", "border", "--fuzz", "5"]) == 0
    assert calls == [(signature_png.resolve(), tmp_path.resolve() / "PDFile" / "signature_nobg.png", "white", 5.0)]


def test_config_show_and_reset(isolated_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["config"]) == 0
    out = capsys.readouterr().out
    assert str(isolated_config) in out
    assert '"subdirectoryName": "PDFile"' in out

    assert main(["config", "reset"]) == 0
    assert json.loads(isolated_config.read_text(encoding="utf-8"))["compression"]["quality"] == "high"


def test_config_disables_subdirectory(
    isolated_config: Path, sample_pdf: Path, tmp_path: Path
) -> None:
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text(json.dumps({"output": {"useSubdirectory": False}}), encoding="utf-8")

    assert main(["rotate", str(sample_pdf), "-r", "90", "--yes"]) == 0
    assert (tmp_path / "sample_rotated.pdf").exists()


def test_install_outside_wsl(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("pdfile.shell.registry.is_wsl", lambda: False)
    assert main(["install"]) == 0
    assert "Not running in WSL" in capsys.readouterr().out


def test_install_without_interop_writes_reg_file(
    isolated_config: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr("pdfile.shell.registry.is_wsl", lambda: True)
    monkeypatch.setattr("pdfile.shell.registry.is_wsl_interop_enabled", lambda: False)

    assert main(["install"]) == 0

    reg_file = isolated_config.parent / "pdfile-install.reg"
    assert reg_file.read_bytes().startswith(b"Windows Registry Editor Version 5.00\r\n")


def test_unknown_command_exits_with_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["explode"])
    assert excinfo.value.code == 2
