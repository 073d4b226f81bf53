"""
Structured Logging Utilities

Provides utilities for adding structured context to log messages,
so every line logged while serving a request carries its request ID.
"""

import inspect
import logging
from typing import Any, Dict, Optional
from contextvars import ContextVar
from functools import wraps


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# Keyword arguments copied into the log context by log_operation
_CONTEXT_KEYS = ("post_id", "user_id", "page_number", "page_size")


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Post created", extra={"post_id": post.id})
    """

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__)
        """
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Add context from ContextVar to extra dict.

        Args:
            extra: Additional context dict

        Returns:
            Merged context dict
        """
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def _format(self, message: str, context: Dict[str, Any]) -> str:
        if not context:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} [{pairs}]"

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with structured context."""
        context = self._add_context(extra)
        self.logger.debug(self._format(message, context))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with structured context."""
        context = self._add_context(extra)
        self.logger.info(self._format(message, context))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with structured context."""
        context = self._add_context(extra)
        self.logger.warning(self._format(message, context))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        """Log error message with structured context."""
        context = self._add_context(extra)
        self.logger.error(self._format(message, context), exc_info=exc_info)


def set_logging_context(**kwargs):
    """
    Set logging context for the current request/operation.

    This context will be automatically included in all log messages
    within the current context (typically a request).

    Args:
        **kwargs: Key-value pairs to add to context

    Example:
        set_logging_context(request_id="abc-123", path="/api/posts")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def log_operation(operation_name: str):
    """
    Decorator to automatically log operation start/end with structured context.

    Identifiers passed as keyword arguments (post_id, user_id, ...) are added
    to the context of the start, completion and failure lines.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("get_post")
        def get_by_id(self, post_id: str):
            ...
    """
    def decorator(func):
        def _context(kwargs) -> Dict[str, Any]:
            context = {"operation": operation_name}
            for key in _CONTEXT_KEYS:
                if key in kwargs:
                    context[key] = kwargs[key]
            return context

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = _context(kwargs)

            logger.debug(f"Starting {operation_name}", extra=context)

            try:
                result = await func(*args, **kwargs)
                logger.info(f"Completed {operation_name}", extra=context)
                return result
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.warning(f"Failed {operation_name}", extra=context)
                raise

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = _context(kwargs)

            logger.debug(f"Starting {operation_name}", extra=context)

            try:
                result = func(*args, **kwargs)
                logger.info(f"Completed {operation_name}", extra=context)
                return result
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.warning(f"Failed {operation_name}", extra=context)
                raise

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
