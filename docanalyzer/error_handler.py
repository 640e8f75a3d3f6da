"""Error handling utilities for the document analyzer."""

import logging
import traceback
from functools import wraps
from typing import Callable, Optional, TypeVar

from .exceptions import ConfigurationError, DocumentAnalyzerError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def handle_errors(
    exception_type: type = DocumentAnalyzerError,
    log_level: int = logging.ERROR
):
    """Decorator that logs failures and re-raises them as typed errors.

    Our own errors pass through untouched; anything else is wrapped in
    ``exception_type`` with the original as ``__cause__``.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except DocumentAnalyzerError as e:
                logger.log(log_level, f"{func.__name__} failed: {e.message}", extra={
                    'error_code': e.error_code,
                    'details': e.details,
                    'function': func.__name__
                })
                raise
            except Exception as e:
                error_msg = f"Unexpected error in {func.__name__}: {str(e)}"
                logger.log(log_level, error_msg, extra={
                    'function': func.__name__,
                    'original_error': str(e),
                    'details': {},
                    'traceback': traceback.format_exc()
                })
                raise exception_type(
                    message=error_msg,
                    details={'original_error': str(e), 'function': func.__name__}
                ) from e
        return wrapper
    return decorator


def log_error(
    error: Exception,
    context: str,
    details: Optional[dict] = None,
    level: int = logging.ERROR
) -> None:
    """Log an error with consistent formatting."""
    if isinstance(error, DocumentAnalyzerError):
        logger.log(level, f"{context}: {error.message}", extra={
            'error_code': error.error_code,
            'details': {**(error.details or {}), **(details or {})},
            'context': context
        })
    else:
        logger.log(level, f"{context}: {str(error)}", extra={
            'original_error': str(error),
            'details': details or {},
            'context': context,
            'traceback': traceback.format_exc()
        })


def validate_config(config_dict: dict, positive_keys: list, context: str = "Configuration") -> None:
    """Reject missing or non-positive numeric limits."""
    invalid_keys = [
        key for key in positive_keys
        if config_dict.get(key) is None or config_dict[key] <= 0
    ]

    if invalid_keys:
        raise ConfigurationError(
            message=f"Configuration values must be positive: {', '.join(invalid_keys)}",
            details={
                'invalid_keys': invalid_keys,
                'values': {key: config_dict.get(key) for key in invalid_keys},
                'context': context
            }
        )
