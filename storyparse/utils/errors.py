"""Human-readable error messages for envelope errors and CLI output."""
from typing import Any

from ..config.constants import UNKNOWN_ERROR


def format_error_message(error: Any, context: str = '') -> str:
    """
    Render an error of any shape as a single message.

    Strings are returned unchanged. Exceptions, and any object carrying a
    ``message`` attribute, are rendered as ``"<context>: <message>"``.

    Args:
        error: The error value (string, exception, or arbitrary object)
        context: Optional prefix describing what was being attempted

    Returns:
        Message string
    """
    if isinstance(error, str):
        return error

    prefix = f"{context}: " if context else ''

    if isinstance(error, BaseException):
        return f"{prefix}{error}"

    message = getattr(error, 'message', None)
    if message:
        return f"{prefix}{message}"

    return f"{prefix}{UNKNOWN_ERROR}"
