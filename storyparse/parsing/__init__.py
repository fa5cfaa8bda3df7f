"""Parsing pipeline: format detection, JSON extraction, text extraction, validation."""

from .detector import detect_format
from .ids import IdGenerator, SequentialIdGenerator, default_id_generator
from .json_extractor import JSONExtractor, extract_and_parse
from .text_parser import detect_text_kind, parse_text
from .validator import validate_response
from .orchestrator import parse_ai_response

__all__ = [
    'detect_format',
    'IdGenerator',
    'SequentialIdGenerator',
    'default_id_generator',
    'JSONExtractor',
    'extract_and_parse',
    'detect_text_kind',
    'parse_text',
    'validate_response',
    'parse_ai_response',
]
