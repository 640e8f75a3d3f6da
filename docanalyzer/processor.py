"""Document processing pipeline: extract, normalize, analyze, assemble."""

from __future__ import annotations
import asyncio
import os
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

from .analysis import analyze_content
from .config import MAX_CONTENT_CHARS, PARALLEL_ANALYSIS
from .error_handler import log_error, validate_config
from .exceptions import ExtractionFailedError
from .extractors import detect_format, extract
from .logging_config import get_logger
from .models import ContentAnalysis, DocumentMetadata, DocumentStructure, ProcessedDocument
from .normalizer import count_words, normalize_text, truncate_text
from .structure import analyze_structure

logger = get_logger(__name__)


class DocumentProcessor:
    """Stateless document pipeline.

    Holds only immutable settings, so instances can be shared between threads
    and any two instances with equal settings behave identically.
    """

    def __init__(self, max_content_chars: int = MAX_CONTENT_CHARS, parallel: bool = PARALLEL_ANALYSIS):
        validate_config({'max_content_chars': max_content_chars}, ['max_content_chars'], context="DocumentProcessor")
        self._max_content_chars = max_content_chars
        self._parallel = parallel

    @property
    def max_content_chars(self) -> int:
        return self._max_content_chars

    @property
    def parallel(self) -> bool:
        return self._parallel

    def _analyze(self, content: str) -> Tuple[DocumentStructure, ContentAnalysis]:
        if not self._parallel:
            return analyze_structure(content), analyze_content(content)
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="docanalyzer") as pool:
            structure_future = pool.submit(analyze_structure, content)
            analysis_future = pool.submit(analyze_content, content)
            return structure_future.result(), analysis_future.result()

    def process_document(self, data: bytes, filename: str, mime_type: Optional[str] = None) -> ProcessedDocument:
        """Turn an uploaded file into a ``ProcessedDocument``.

        Raises:
            UnsupportedFormatError: neither MIME type nor extension is known.
            ExtractionFailedError: the format decoder failed; the original
                exception is available as ``cause``.
        """
        file_type = detect_format(filename, mime_type)
        start = time.perf_counter()

        try:
            extraction = extract(data, file_type)
        except ExtractionFailedError as e:
            log_error(e, f"Extraction failed for {filename}", {'file_type': file_type})
            raise

        content, truncated = truncate_text(normalize_text(extraction.text), self._max_content_chars)
        warnings: List[str] = list(extraction.warnings)
        if truncated:
            warnings.append(f"Content truncated to {self._max_content_chars} characters")
            logger.warning(f"{filename}: content truncated to {self._max_content_chars} characters")
        if not content:
            warnings.append("Document contains no extractable text")
            logger.warning(f"{filename}: empty content after normalization")

        structure, analysis = self._analyze(content)
        processing_time = round((time.perf_counter() - start) * 1000, 3)

        metadata = DocumentMetadata(
            file_name=filename,
            file_size=len(data),
            file_type=file_type,
            word_count=count_words(content),
            character_count=len(content),
            processing_time=processing_time,
            extraction_method=extraction.method,
            page_count=extraction.page_count,
            warnings=tuple(warnings),
        )
        logger.info(
            f"Processed {filename} ({file_type}, {extraction.method}): "
            f"{metadata.word_count} words in {processing_time:.1f} ms"
        )
        return ProcessedDocument(content=content, metadata=metadata, structure=structure, analysis=analysis)

    def process_file(self, path: str, mime_type: Optional[str] = None) -> ProcessedDocument:
        """Read ``path`` from disk and process it under its base name."""
        with open(path, 'rb') as f:
            data = f.read()
        return self.process_document(data, os.path.basename(path), mime_type)

    async def process_document_async(
        self,
        data: bytes,
        filename: str,
        mime_type: Optional[str] = None,
        timeout: Optional[float] = None
    ) -> ProcessedDocument:
        """Run ``process_document`` in a worker thread, optionally bounded by ``timeout`` seconds.

        On timeout ``asyncio.TimeoutError`` is raised; the worker thread is
        left to finish on its own and its result is discarded.
        """
        call = asyncio.to_thread(self.process_document, data, filename, mime_type)
        if timeout is None:
            return await call
        return await asyncio.wait_for(call, timeout=timeout)


def process_document(data: bytes, filename: str, mime_type: Optional[str] = None) -> ProcessedDocument:
    """Process one upload with default settings."""
    return DocumentProcessor().process_document(data, filename, mime_type)
