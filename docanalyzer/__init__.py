"""Document extraction, structure inference and content analysis."""

from .exceptions import (
    DocumentAnalyzerError,
    DocumentProcessingError,
    ExtractionFailedError,
    UnsupportedFormatError,
)
from .extractors import detect_format, is_supported, supported_formats
from .models import (
    ContentAnalysis,
    DocumentMetadata,
    DocumentSection,
    DocumentStructure,
    ListData,
    ProcessedDocument,
    TableData,
)
from .normalizer import normalize_text
from .processor import DocumentProcessor, process_document

__all__ = [
    "DocumentAnalyzerError",
    "DocumentProcessingError",
    "ExtractionFailedError",
    "UnsupportedFormatError",
    "detect_format",
    "is_supported",
    "supported_formats",
    "ContentAnalysis",
    "DocumentMetadata",
    "DocumentSection",
    "DocumentStructure",
    "ListData",
    "ProcessedDocument",
    "TableData",
    "normalize_text",
    "DocumentProcessor",
    "process_document",
]
