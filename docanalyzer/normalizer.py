from __future__ import annotations
from typing import List, Tuple
import re

# Anything outside this set is an extraction artifact and becomes a space.
_DISALLOWED_RE = re.compile(r"[^\w\s\-.,;:!?()\[\]{}'\"|*•/&%#+=]")
_HORIZONTAL_WS_RE = re.compile(r"[^\S\n]+")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")


def _collapse_run(match: re.Match) -> str:
    # Tab runs are kept as a single tab so tab-delimited tables survive.
    return "\t" if "\t" in match.group(0) else " "


def normalize_text(text: str) -> str:
    """Collapse whitespace, strip control artifacts and keep paragraph breaks.

    Idempotent: normalizing already-normalized text returns it unchanged.
    """
    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _DISALLOWED_RE.sub(" ", text)
    lines = [
        _HORIZONTAL_WS_RE.sub(_collapse_run, line).strip(" \t")
        for line in text.split("\n")
    ]
    text = "\n".join(lines)
    text = _EXCESS_NEWLINES_RE.sub("\n\n", text)
    return text.strip()


def truncate_text(text: str, max_chars: int) -> Tuple[str, bool]:
    """Bound normalized text to ``max_chars``; returns (text, truncated)."""
    if len(text) <= max_chars:
        return text, False
    return text[:max_chars].rstrip(), True


def split_words(text: str) -> List[str]:
    """The one word-splitting rule shared by metadata and analysis."""
    return text.split()


def count_words(text: str) -> int:
    return len(split_words(text))
