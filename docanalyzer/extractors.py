"""Per-format text extraction strategies.

Every strategy takes the raw bytes of an upload and returns an
``ExtractionResult``. Strategies are pure: no network, no disk writes.
"""

from __future__ import annotations
import io
import os
import re
from typing import Callable, Dict, List, Optional, Tuple

import PyPDF2
import docx  # python-docx

from .error_handler import handle_errors
from .exceptions import ExtractionFailedError, UnsupportedFormatError
from .logging_config import get_logger
from .models import ExtractionResult

logger = get_logger(__name__)

SUPPORTED_FORMATS = ("pdf", "docx", "doc", "txt", "rtf")

# Checked in order against the lower-cased MIME type
MIME_MARKERS = (
    ("pdf", "pdf"),
    ("wordprocessingml", "docx"),
    ("msword", "doc"),
    ("text/plain", "txt"),
    ("rtf", "rtf"),
)

_RTF_CONTROL_WORD_RE = re.compile(r"\\[a-z]+\d*\s?")
_RTF_BRACES_RE = re.compile(r"[{}]")
_DOC_ASCII_RUN_RE = re.compile(rb"[\x20-\x7e\t\r\n]{4,}")
_DOC_UTF16_RUN_RE = re.compile(rb"(?:[\x20-\x7e\t\r\n]\x00){4,}")


def supported_formats() -> Tuple[str, ...]:
    return SUPPORTED_FORMATS


def detect_format(filename: str, mime_type: Optional[str] = None) -> str:
    """Pick the format by MIME substring first, then by file extension."""
    mime = (mime_type or "").lower()
    if mime:
        for marker, file_type in MIME_MARKERS:
            if marker in mime:
                return file_type

    extension = os.path.splitext(filename or "")[1].lstrip(".").lower()
    if extension in SUPPORTED_FORMATS:
        return extension

    raise UnsupportedFormatError(
        message=f"Unsupported file type: {filename!r}. Supported formats: {', '.join(SUPPORTED_FORMATS)}",
        details={
            'filename': filename,
            'mime_type': mime_type,
            'supported_formats': list(SUPPORTED_FORMATS),
        }
    )


def is_supported(filename: str, mime_type: Optional[str] = None) -> bool:
    try:
        detect_format(filename, mime_type)
    except UnsupportedFormatError:
        return False
    return True


@handle_errors(exception_type=ExtractionFailedError)
def extract_pdf(data: bytes) -> ExtractionResult:
    """Extract text page by page with a ``--- Page N ---`` marker per page.

    An unreadable page is skipped and reported, it does not abort the file.
    """
    reader = PyPDF2.PdfReader(io.BytesIO(data))
    if getattr(reader, 'is_encrypted', False):
        try:
            reader.decrypt("")
        except Exception as e:
            raise ExtractionFailedError(
                message="PDF is encrypted and cannot be opened without a password",
                details={'original_error': str(e)}
            ) from e

    parts: List[str] = []
    skipped: List[int] = []
    for page_number, page in enumerate(reader.pages, start=1):
        try:
            page_text = page.extract_text() or ""
        except Exception as e:
            logger.warning(f"Skipping unreadable PDF page {page_number}: {e}")
            skipped.append(page_number)
            continue
        parts.append(f"\n--- Page {page_number} ---\n{page_text}\n")

    method = "PDF text extraction"
    warnings: Tuple[str, ...] = ()
    if skipped:
        method = "PDF text extraction (partial)"
        warnings = (f"Skipped unreadable pages: {', '.join(str(n) for n in skipped)}",)

    return ExtractionResult(
        text="".join(parts),
        method=method,
        page_count=len(reader.pages),
        warnings=warnings,
    )


@handle_errors(exception_type=ExtractionFailedError)
def extract_docx(data: bytes) -> ExtractionResult:
    """Body paragraphs in order, then tables flattened to ``|`` rows."""
    document = docx.Document(io.BytesIO(data))
    warnings: List[str] = []

    lines = [paragraph.text for paragraph in document.paragraphs]
    if document.tables:
        warnings.append(f"Flattened {len(document.tables)} table(s) to pipe-delimited text")
        for table in document.tables:
            lines.append("")
            for row in table.rows:
                lines.append(" | ".join(cell.text.strip() for cell in row.cells))
    if not any(line.strip() for line in lines):
        warnings.append("Document body contains no text")

    for warning in warnings:
        logger.warning(f"DOCX processing: {warning}")

    return ExtractionResult(
        text="\n".join(lines),
        method="python-docx extraction",
        warnings=tuple(warnings),
    )


@handle_errors(exception_type=ExtractionFailedError)
def extract_doc(data: bytes) -> ExtractionResult:
    """Best-effort recovery of printable runs from a legacy Word binary.

    Word stores text either as 8-bit characters or as UTF-16LE, so both
    readings are tried and the one recovering more text wins.
    """
    ascii_runs = [run.decode("ascii") for run in _DOC_ASCII_RUN_RE.findall(data)]
    utf16_runs = [run.decode("utf-16-le") for run in _DOC_UTF16_RUN_RE.findall(data)]
    ascii_text = "\n".join(ascii_runs)
    utf16_text = "\n".join(utf16_runs)
    text = utf16_text if len(utf16_text) > len(ascii_text) else ascii_text

    return ExtractionResult(
        text=text,
        method="Legacy DOC processing",
        warnings=("Legacy DOC extraction is best-effort and may contain artifacts",),
    )


def _decode_utf8(data: bytes) -> Tuple[str, List[str]]:
    try:
        return data.decode("utf-8"), []
    except UnicodeDecodeError:
        return data.decode("utf-8", errors="replace"), ["Invalid UTF-8 bytes were replaced"]


@handle_errors(exception_type=ExtractionFailedError)
def extract_txt(data: bytes) -> ExtractionResult:
    text, warnings = _decode_utf8(data)
    return ExtractionResult(text=text, method="Plain text reading", warnings=tuple(warnings))


def strip_rtf(text: str) -> str:
    """Drop control words and braces; no font or formatting interpretation."""
    text = _RTF_CONTROL_WORD_RE.sub("", text)
    text = _RTF_BRACES_RE.sub("", text)
    return text.replace("\\\\", "\\").strip()


@handle_errors(exception_type=ExtractionFailedError)
def extract_rtf(data: bytes) -> ExtractionResult:
    text, warnings = _decode_utf8(data)
    return ExtractionResult(text=strip_rtf(text), method="RTF parsing", warnings=tuple(warnings))


EXTRACTORS: Dict[str, Callable[[bytes], ExtractionResult]] = {
    "pdf": extract_pdf,
    "docx": extract_docx,
    "doc": extract_doc,
    "txt": extract_txt,
    "rtf": extract_rtf,
}


def extract(data: bytes, file_type: str) -> ExtractionResult:
    """Run the strategy registered for ``file_type``."""
    extractor = EXTRACTORS.get(file_type)
    if extractor is None:
        raise UnsupportedFormatError(
            message=f"No extractor for format: {file_type}",
            details={'file_type': file_type, 'supported_formats': list(SUPPORTED_FORMATS)}
        )
    return extractor(data)
