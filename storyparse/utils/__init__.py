from .errors import format_error_message
from .logging import get_logger, setup_logging

__all__ = ['format_error_message', 'get_logger', 'setup_logging']
