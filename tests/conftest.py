"""Shared fixtures: sample texts and in-memory PDF / DOCX documents."""

import io
from typing import List

import docx
import pytest

from docanalyzer.processor import DocumentProcessor

SAMPLE_TEXT = (
    "The mitigation strategy requires careful consideration. "
    "This methodology utilizes comprehensive documentation."
)

SECTIONED_TEXT = "Overview\nThis is the intro.\nDetails\nThis is detail text."


def build_pdf(pages: List[str]) -> bytes:
    """Build a minimal valid PDF with one Helvetica text line per page."""
    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for page_id, text in zip(page_ids, pages):
        objects.append(
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Resources << /Font << /F1 3 0 R >> >> /Contents {page_id + 1} 0 R >>".encode()
        )
        stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode()
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"
    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_offset)
    return bytes(out)


def build_docx(paragraphs: List[str], table_rows: List[List[str]] = None) -> bytes:
    document = docx.Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    if table_rows:
        table = document.add_table(rows=len(table_rows), cols=len(table_rows[0]))
        for r, row in enumerate(table_rows):
            for c, value in enumerate(row):
                table.cell(r, c).text = value
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def processor():
    """Sequential processor; parallel behaviour has its own tests."""
    return DocumentProcessor(parallel=False)


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def sectioned_text():
    return SECTIONED_TEXT


@pytest.fixture
def pdf_bytes():
    return build_pdf(["Quarterly Report", "Revenue grew steadily"])


@pytest.fixture
def three_page_pdf_bytes():
    return build_pdf(["First page", "Second page", "Third page"])


@pytest.fixture
def docx_bytes():
    return build_docx(
        ["Project Summary", "The team delivered the release on time."],
        table_rows=[["Name", "Role"], ["Alice", "Engineer"], ["Bob", "Designer"]],
    )


@pytest.fixture
def rtf_bytes():
    return rb"{\rtf1\ansi{\fonttbl\f0\fswiss Helvetica;}\f0\pard Hello \b World\b0\par}"


@pytest.fixture
def make_docx():
    return build_docx


@pytest.fixture
def make_pdf():
    return build_pdf
