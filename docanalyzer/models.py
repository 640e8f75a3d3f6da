"""Result entities produced by the document processing pipeline.

All entities are frozen and use tuples for sequences, so a processed
document cannot be mutated once it has been handed to the caller.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple

COMPLEXITY_LEVELS = ("low", "medium", "high")
LIST_KINDS = ("ordered", "unordered")


@dataclass(frozen=True)
class DocumentSection:
    """A contiguous span of text associated with one heading."""
    title: str
    content: str
    level: int
    word_count: int

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError("Section level must be at least 1")
        if self.word_count < 0:
            raise ValueError("Word count must be non-negative")


@dataclass(frozen=True)
class TableData:
    headers: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]
    caption: Optional[str] = None


@dataclass(frozen=True)
class ListData:
    kind: str
    items: Tuple[str, ...]

    def __post_init__(self) -> None:
        if self.kind not in LIST_KINDS:
            raise ValueError(f"List kind must be one of {LIST_KINDS}")


@dataclass(frozen=True)
class DocumentStructure:
    sections: Tuple[DocumentSection, ...] = ()
    headings: Tuple[str, ...] = ()
    tables: Tuple[TableData, ...] = ()
    lists: Tuple[ListData, ...] = ()
    footnotes: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ContentAnalysis:
    """Quantitative content metrics used as prompt context downstream."""
    complexity: str
    jargon_density: float
    technical_terms: Tuple[str, ...]
    key_phrases: Tuple[str, ...]
    readability_score: int
    suggested_questions: Tuple[str, ...]

    def __post_init__(self) -> None:
        if self.complexity not in COMPLEXITY_LEVELS:
            raise ValueError(f"Complexity must be one of {COMPLEXITY_LEVELS}")
        if not 0 <= self.jargon_density <= 1:
            raise ValueError("Jargon density must be between 0 and 1")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ExtractionResult:
    """Raw text handed back by a format extractor."""
    text: str
    method: str
    page_count: Optional[int] = None
    warnings: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DocumentMetadata:
    file_name: str
    file_size: int
    file_type: str
    word_count: int
    character_count: int
    processing_time: float  # milliseconds
    extraction_method: str
    page_count: Optional[int] = None
    warnings: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ProcessedDocument:
    content: str
    metadata: DocumentMetadata
    structure: DocumentStructure
    analysis: ContentAnalysis

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "metadata": self.metadata.to_dict(),
            "structure": self.structure.to_dict(),
            "analysis": self.analysis.to_dict(),
        }
