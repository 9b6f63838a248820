from __future__ import annotations

from pathlib import Path
from typing import Callable
import sys

import pytest
from PIL import Image, ImageDraw
from pypdf import PdfReader, PdfWriter
from reportlab.pdfgen.canvas import Canvas

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Page n of sample PDFs is (200 + n) points wide, so order can be read back.
BASE_WIDTH = 200


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    config_path = tmp_path / "home" / ".config" / "pdfile" / "config.json"
    monkeypatch.setenv("PDFILE_CONFIG", str(config_path))
    return config_path


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(
        filename: str, pages: int = 1, title: str | None = None, width: int = BASE_WIDTH
    ) -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        writer = PdfWriter()
        for index in range(pages):
            writer.add_blank_page(width=width + index, height=300)
        if title is not None:
            writer.add_metadata({"/Title": title})
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def sample_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory("sample.pdf", pages=5, title="Sample")


@pytest.fixture()
def sample_pdfs(pdf_factory: Callable[..., Path]) -> list[Path]:
    return [pdf_factory("one.pdf", pages=1, width=300), pdf_factory("two.pdf", pages=2, width=400)]


@pytest.fixture()
def text_pdf(tmp_path: Path) -> Path:
    path = tmp_path / "text.pdf"
    canvas = Canvas(str(path), pagesize=(612, 792))
    canvas.setFont("Helvetica", 12)
    for offset, line in enumerate(["INTRODUCTION", "Summary: overview", "plain body text here"]):
        canvas.drawString(72, 700 - offset * 40, line)
    canvas.showPage()
    canvas.save()
    return path


@pytest.fixture()
def signature_png(tmp_path: Path) -> Path:
    path = tmp_path / "signature.png"
    image = Image.new("RGB", (200, 80), "white")
    ImageDraw.Draw(image).line([(10, 60), (80, 20), (190, 50)], fill="black", width=4)
    image.save(path)
    return path


@pytest.fixture()
def page_widths() -> Callable[[Path], list[int]]:
    def _widths(path: Path) -> list[int]:
        return [round(float(page.mediabox.width)) for page in PdfReader(str(path)).pages]

    return _widths
