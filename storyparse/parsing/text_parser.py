"""Structural text parsing: route narrative text to the matching extractor."""

from typing import Optional

from ..config import Settings
from ..config.constants import DEFAULT_MIN_SUMMARY_LENGTH
from ..models import ParseEnvelope, TextRecord
from ..utils.logging import get_logger
from .chapters import extract_chapters
from .characters import extract_characters
from .ids import IdGenerator, default_id_generator
from .patterns import (
    CHAPTER_SIGNATURE_PATTERNS,
    CHARACTER_SIGNATURE_PATTERNS,
    PLOT_SIGNATURE_PATTERNS,
    contains_any,
)
from .plot import extract_plot


def detect_text_kind(content: str) -> str:
    """
    Classify text by content signature.

    Checked in priority order: chapters, characters, plot.

    Returns:
        'chapters', 'characters', 'plot' or 'text'
    """
    if contains_any(content, CHAPTER_SIGNATURE_PATTERNS):
        return 'chapters'
    if contains_any(content, CHARACTER_SIGNATURE_PATTERNS):
        return 'characters'
    if contains_any(content, PLOT_SIGNATURE_PATTERNS):
        return 'plot'
    return 'text'


def extract_text(content: str) -> ParseEnvelope:
    """Generic fallback: keep the text and its non-blank lines."""
    lines = [line for line in content.split('\n') if line.strip()]
    record = TextRecord(
        content=content,
        lines=lines,
        word_count=len(content),
        line_count=len(lines)
    )
    return ParseEnvelope.ok(record, raw_content=content)


def parse_text(
    content: str,
    id_generator: Optional[IdGenerator] = None,
    settings: Optional[Settings] = None
) -> ParseEnvelope:
    """
    Parse narrative text into a structured record.

    Always succeeds except when the text looks like a chapter list but no
    chapter heading could be recognized.

    Args:
        content: Response text (already trimmed by the caller)
        id_generator: Source of record identifiers (defaults to time + random)
        settings: Parser settings (only ``min_summary_length`` is used here)

    Returns:
        ParseEnvelope
    """
    id_generator = id_generator or default_id_generator
    min_summary_length = settings.min_summary_length if settings else DEFAULT_MIN_SUMMARY_LENGTH

    kind = detect_text_kind(content)
    get_logger("parsing.text").debug(f"Text response classified as '{kind}'")

    if kind == 'chapters':
        return extract_chapters(content, id_generator, min_summary_length)
    if kind == 'characters':
        return extract_characters(content, id_generator)
    if kind == 'plot':
        return extract_plot(content)
    return extract_text(content)
