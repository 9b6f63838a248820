from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest
from PIL import Image
from pypdf import PdfReader

from pdfile import insert_document_date, sign_document
from pdfile.exceptions import MagickError, PdfValidationError
from pdfile.tools import load_builtin_plugins
from pdfile.tools.common.interfaces import ToolContext
from pdfile.tools.common.pipeline import registry
from pdfile.tools.stamp import (
    DateOptions,
    OverlayOptions,
    SignatureOptions,
    add_image_overlay,
    add_signature,
    format_date,
    insert_date,
)
from pdfile.tools.stamp.drawing import top_to_bottom
from pdfile.tools.stamp.signature import signature_size


def setup_module(module):
    load_builtin_plugins()


def _texts(path: Path) -> list[str]:
    return [page.extract_text() or "" for page in PdfReader(str(path)).pages]


def _has_images(path: Path) -> list[bool]:
    flags = []
    for page in PdfReader(str(path)).pages:
        resources = page.get("/Resources")
        xobjects = resources.get_object().get("/XObject") if resources is not None else None
        flags.append(bool(xobjects.get_object()) if xobjects is not None else False)
    return flags


@pytest.fixture()
def no_magick(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("pdfile.tools.stamp.signature.check_imagemagick", lambda: False)
    monkeypatch.setattr("pdfile.tools.stamp.overlay.check_imagemagick", lambda: False)


@pytest.mark.parametrize(
    ("fmt", "expected"),
    [
        ("MM/DD/YYYY", "03/07/2024"),
        ("DD/MM/YYYY", "07/03/2024"),
        ("YYYY-MM-DD", "2024-03-07"),
        ("Month DD, YYYY", "March 7, 2024"),
    ],
)
def test_format_date(fmt: str, expected: str) -> None:
    assert format_date(dt.date(2024, 3, 7), fmt) == expected


def test_format_date_rejects_unknown_format() -> None:
    with pytest.raises(PdfValidationError):
        format_date(dt.date(2024, 3, 7), "YY")


def test_top_to_bottom() -> None:
    assert top_to_bottom(792, 30, 12) == 750


def test_insert_date_only_on_last_page_by_default(sample_pdf: Path, tmp_path: Path) -> None:
    output = tmp_path / "dated.pdf"
    options = DateOptions(format="YYYY-MM-DD", today=dt.date(2024, 3, 7))

    insert_date(sample_pdf, options, output)

    texts = _texts(output)
    assert "2024-03-07" in texts[-1]
    assert all("2024-03-07" not in text for text in texts[:-1])


def test_insert_date_on_all_pages_with_custom_text(sample_pdf: Path, tmp_path: Path) -> None:
    output = tmp_path / "dated.pdf"
    insert_date(sample_pdf, DateOptions(text="APPROVED", all_pages=True), output)
    assert all("APPROVED" in text for text in _texts(output))


def test_insert_date_on_selected_pages(sample_pdf: Path, tmp_path: Path) -> None:
    output = tmp_path / "dated.pdf"
    insert_date(sample_pdf, DateOptions(text="SEEN", pages=[0, 2], background=(1, 1, 0.8)), output)
    assert ["SEEN" in text for text in _texts(output)] == [True, False, True, False, False]


def test_insert_date_tool_default_output(sample_pdf: Path, tmp_path: Path) -> None:
    assert insert_document_date(sample_pdf) is True
    assert (tmp_path / "PDFile" / "sample_with_date.pdf").exists()


def test_signature_size_defaults_to_thirty_percent() -> None:
    assert signature_size((200, 80), None, None) == pytest.approx((60.0, 24.0))
    assert signature_size((200, 80), 100, None) == pytest.approx((100.0, 40.0))
    assert signature_size((200, 80), 100, 10) == (100, 10)


def test_sign_last_page_without_imagemagick(
    sample_pdf: Path, signature_png: Path, tmp_path: Path, no_magick: None
) -> None:
    output = tmp_path / "signed.pdf"

    add_signature(sample_pdf, SignatureOptions(signature_file=signature_png), output)

    assert _has_images(output) == [False, False, False, False, True]


def test_sign_selected_pages_without_background_removal(
    sample_pdf: Path, signature_png: Path, tmp_path: Path
) -> None:
    output = tmp_path / "signed.pdf"
    options = SignatureOptions(signature_file=signature_png, pages=[0], remove_bg=False, opacity=0.5)

    add_signature(sample_pdf, options, output)

    assert _has_images(output) == [True, False, False, False, False]


def test_sign_uses_processed_signature(
    sample_pdf: Path, signature_png: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls: list[str] = []

    def fake_remove(source: Path, output: Path, color: str, fuzz: float) -> bool:
        calls.append(f"remove:{color}:{fuzz:g}")
        Image.open(source).convert("RGBA").save(output)
        return True

    def fake_feather(source: Path, output: Path, amount: float) -> bool:
        calls.append(f"feather:{amount:g}")
        return False

    monkeypatch.setattr("pdfile.tools.stamp.signature.check_imagemagick", lambda: True)
    monkeypatch.setattr("pdfile.tools.stamp.signature.remove_background", fake_remove)
    monkeypatch.setattr("pdfile.tools.stamp.signature.feather_alpha", fake_feather)

    output = tmp_path / "signed.pdf"
    add_signature(sample_pdf, SignatureOptions(signature_file=signature_png), output)

    assert calls == ["remove:white:15", "feather:20"]
    assert _has_images(output)[-1] is True


def test_sign_rejects_non_png_signature(sample_pdf: Path, tmp_path: Path) -> None:
    jpeg = tmp_path / "signature.jpg"
    Image.new("RGB", (10, 10), "white").save(jpeg)
    with pytest.raises(PdfValidationError):
        add_signature(sample_pdf, SignatureOptions(signature_file=jpeg), tmp_path / "out.pdf")


def test_sign_rejects_bad_opacity(sample_pdf: Path, signature_png: Path, tmp_path: Path) -> None:
    options = SignatureOptions(signature_file=signature_png, opacity=1.5)
    with pytest.raises(PdfValidationError):
        add_signature(sample_pdf, options, tmp_path / "out.pdf")


def test_sign_tool_default_output(
    sample_pdf: Path, signature_png: Path, tmp_path: Path, no_magick: None
) -> None:
    options = SignatureOptions(signature_file=signature_png)
    assert sign_document(sample_pdf, options) is True
    assert (tmp_path / "PDFile" / "sample_signed.pdf").exists()


def test_overlay_covers_all_pages(sample_pdf: Path, signature_png: Path, tmp_path: Path) -> None:
    output = tmp_path / "overlay.pdf"
    add_image_overlay(sample_pdf, OverlayOptions(image_path=signature_png, opacity=0.4), output)
    assert all(_has_images(output))


def test_overlay_selected_pages_with_jpeg(sample_pdf: Path, tmp_path: Path) -> None:
    jpeg = tmp_path / "logo.jpg"
    Image.new("RGB", (40, 20), "red").save(jpeg)
    output = tmp_path / "overlay.pdf"

    add_image_overlay(
        sample_pdf,
        OverlayOptions(image_path=jpeg, x=10, y=10, width=20, height=10, rotation=15, pages=[1]),
        output,
    )

    assert _has_images(output) == [False, True, False, False, False]


@pytest.mark.parametrize("width", [0, -5, float("inf")])
def test_overlay_rejects_invalid_dimensions(
    sample_pdf: Path, signature_png: Path, tmp_path: Path, width: float
) -> None:
    with pytest.raises(PdfValidationError):
        add_image_overlay(
            sample_pdf, OverlayOptions(image_path=signature_png, width=width), tmp_path / "out.pdf"
        )


@pytest.mark.parametrize("opacity", [-0.1, 2])
def test_overlay_rejects_bad_opacity(
    sample_pdf: Path, signature_png: Path, tmp_path: Path, opacity: float
) -> None:
    output = tmp_path / "out.pdf"
    with pytest.raises(PdfValidationError):
        add_image_overlay(sample_pdf, OverlayOptions(image_path=signature_png, opacity=opacity), output)
    assert not output.exists()


def test_overlay_other_formats_need_imagemagick(
    sample_pdf: Path, tmp_path: Path, no_magick: None
) -> None:
    gif = tmp_path / "logo.gif"
    Image.new("RGB", (10, 10), "blue").save(gif)
    with pytest.raises(MagickError):
        add_image_overlay(sample_pdf, OverlayOptions(image_path=gif), tmp_path / "out.pdf")


def test_overlay_tool_reports_failure_for_missing_image(sample_pdf: Path, tmp_path: Path) -> None:
    context = ToolContext(
        input_path=sample_pdf,
        config={"options": OverlayOptions(image_path=tmp_path / "missing.png")},
    )
    assert registry.create("add_image", context).execute() is False
