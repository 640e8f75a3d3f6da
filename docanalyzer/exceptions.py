"""Custom exceptions for the document analyzer."""

from typing import Optional


class DocumentAnalyzerError(Exception):
    """Base exception for all document analyzer errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(DocumentAnalyzerError):
    """Raised when configuration is invalid."""
    pass


class DocumentProcessingError(DocumentAnalyzerError):
    """Raised when document processing fails."""
    pass


class UnsupportedFormatError(DocumentProcessingError):
    """Raised when neither the MIME type nor the extension maps to a known format.

    Not retryable: the caller has to submit a different file.
    """
    pass


class ExtractionFailedError(DocumentProcessingError):
    """Raised when a format-specific decoder fails (corrupted ZIP, broken PDF, ...)."""

    @property
    def cause(self) -> Optional[BaseException]:
        """The underlying exception raised by the decoder, if any."""
        return self.__cause__
