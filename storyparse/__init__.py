"""storyparse - turn free-form model output into validated story records."""

__version__ = "1.0.0"
__author__ = "storyparse"

from .models import ParseEnvelope
from .parsing import parse_ai_response, validate_response, SequentialIdGenerator

__all__ = [
    '__version__',
    'ParseEnvelope',
    'parse_ai_response',
    'validate_response',
    'SequentialIdGenerator',
]
