"""Line-level structural analysis: sections, headings, lists and tables.

The heuristics here are deliberately cheap. Downstream consumers depend on
the exact thresholds, so they are kept as they are rather than made smarter.
"""

from __future__ import annotations

import re
from typing import List, Optional

from .models import DocumentSection, DocumentStructure, ListData, TableData
from .normalizer import count_words

DEFAULT_SECTION_TITLE = "Introduction"
TABLE_LOOKAHEAD = 9

_BULLET_RE = re.compile(r"^[•\-*]\s")
_NUMBERED_RE = re.compile(r"^\d+\.\s")


def is_heading(line: str) -> bool:
    """Short line starting with an uppercase letter and not ending a sentence."""
    trimmed = line.strip()
    return (
        5 < len(trimmed) < 100
        and not trimmed.endswith(".")
        and "A" <= trimmed[0] <= "Z"
    )


def _make_section(title: str, lines: List[str]) -> Optional[DocumentSection]:
    content = "\n".join(lines).strip()
    if not content:
        return None
    return DocumentSection(title=title, content=content, level=1, word_count=count_words(content))


def split_sections(text: str) -> List[DocumentSection]:
    """Partition text into sections, opening a new one at every heading line."""
    sections: List[DocumentSection] = []
    title = DEFAULT_SECTION_TITLE
    current: List[str] = []

    for line in text.split("\n"):
        if not line.strip():
            continue
        if is_heading(line):
            section = _make_section(title, current)
            if section:
                sections.append(section)
            title = line.strip()
            current = []
        else:
            current.append(line)

    section = _make_section(title, current)
    if section:
        sections.append(section)
    return sections


def detect_headings(text: str) -> List[str]:
    """Every heading line in document order; a repeated heading is listed again."""
    return [line.strip() for line in text.split("\n") if line.strip() and is_heading(line)]


def detect_lists(text: str) -> List[ListData]:
    """Group consecutive bullet or numbered lines into lists.

    Blank lines do not end a list; any other non-matching line does, and so
    does a change between bullets and numbers.
    """
    lists: List[ListData] = []
    items: List[str] = []
    kind: Optional[str] = None

    def flush() -> None:
        if items and kind:
            lists.append(ListData(kind=kind, items=tuple(items)))

    for line in text.split("\n"):
        trimmed = line.strip()
        if _BULLET_RE.match(trimmed):
            if kind != "unordered":
                flush()
                items = []
            kind = "unordered"
            items.append(trimmed[2:].strip())
        elif _NUMBERED_RE.match(trimmed):
            if kind != "ordered":
                flush()
                items = []
            kind = "ordered"
            items.append(_NUMBERED_RE.sub("", trimmed, count=1).strip())
        elif items and trimmed:
            flush()
            items = []
            kind = None

    flush()
    return lists


def _split_fields(line: str, separator: str) -> List[str]:
    return [field.strip() for field in line.split(separator) if field.strip()]


def detect_tables(text: str) -> List[TableData]:
    """Find pipe- or tab-delimited blocks with a header and matching rows."""
    tables: List[TableData] = []
    lines = text.split("\n")

    i = 0
    while i < len(lines):
        line = lines[i].strip()
        if "|" in line or "\t" in line:
            separator = "|" if "|" in line else "\t"
            headers = _split_fields(line, separator)
            if len(headers) >= 2:
                rows: List[tuple] = []
                last_row = i
                for j in range(i + 1, min(len(lines), i + 1 + TABLE_LOOKAHEAD)):
                    next_line = lines[j].strip()
                    if separator not in next_line:
                        break
                    fields = _split_fields(next_line, separator)
                    if len(fields) == len(headers):
                        rows.append(tuple(fields))
                        last_row = j
                if rows:
                    tables.append(TableData(headers=tuple(headers), rows=tuple(rows)))
                    i = last_row
        i += 1
    return tables


def analyze_structure(text: str) -> DocumentStructure:
    """Never raises; empty text gives an empty structure."""
    return DocumentStructure(
        sections=tuple(split_sections(text)),
        headings=tuple(detect_headings(text)),
        tables=tuple(detect_tables(text)),
        lists=tuple(detect_lists(text)),
        footnotes=(),
    )
