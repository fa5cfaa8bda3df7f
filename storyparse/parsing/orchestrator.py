"""Single public entry point for turning a model response into an envelope."""

import logging
from typing import Any, Optional

from ..config import Settings, get_settings
from ..config.constants import FORMAT_HINTS, INVALID_CONTENT_ERROR, PARSE_ERROR_PREFIX
from ..models import ParseEnvelope
from ..utils.errors import format_error_message
from ..utils.logging import get_logger
from .detector import detect_format
from .ids import IdGenerator
from .json_extractor import extract_and_parse
from .text_parser import parse_text


def parse_ai_response(
    content: Any,
    format_hint: str = 'auto',
    *,
    id_generator: Optional[IdGenerator] = None,
    settings: Optional[Settings] = None
) -> ParseEnvelope:
    """
    Parse a raw model response. Never raises.

    Args:
        content: Raw response text
        format_hint: 'json', 'text' or 'auto' (detect from the content)
        id_generator: Source of record identifiers; inject a
            SequentialIdGenerator for reproducible ids
        settings: Parser settings (defaults to the cached global settings)

    Returns:
        ParseEnvelope; failures are reported through ``success``/``error``
    """
    if not isinstance(content, str) or not content:
        return ParseEnvelope.fail(INVALID_CONTENT_ERROR, raw_content='')

    trimmed = content.strip()
    if not trimmed:
        return ParseEnvelope.fail(INVALID_CONTENT_ERROR, raw_content='')

    # Plain logger until settings are known to load
    logger = logging.getLogger("storyparse.parsing")

    try:
        settings = settings or get_settings()
        logger = get_logger("parsing")

        if format_hint not in FORMAT_HINTS:
            raise ValueError(f"Unknown format hint: {format_hint!r}")

        resolved = format_hint
        if resolved == 'auto':
            resolved = detect_format(trimmed, settings.json_length_ceiling)
            logger.debug(f"Auto-detected response format: {resolved}")

        if resolved == 'json':
            return extract_and_parse(trimmed, id_generator=id_generator, settings=settings)
        return parse_text(trimmed, id_generator=id_generator, settings=settings)

    except Exception as e:
        logger.exception("AI response parsing error")
        return ParseEnvelope.fail(
            format_error_message(e, PARSE_ERROR_PREFIX),
            raw_content=trimmed
        )
