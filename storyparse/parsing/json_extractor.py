"""
JSON extraction for model responses.

Models wrap JSON in many ways, so extraction tries several candidate
substrings, most specific first:

1. ```json fenced block
2. Any fenced block
3. Longest {...} span
4. Longest [...] span
5. The whole response

Each candidate is normalized and decoded in turn; the first one that
decodes wins. When nothing decodes, the original response is handed to the
text parser instead of failing.
"""

import json
import re
from typing import Any, Iterator, List, Optional, Tuple

from ..config import Settings
from ..config.constants import DEFAULT_LOG_PREVIEW_CHARS
from ..models import ParseEnvelope
from ..utils.logging import get_logger
from .ids import IdGenerator
from .text_parser import parse_text


class JSONExtractor:
    """Find and decode the JSON payload inside a model response."""

    FENCED_JSON = re.compile(r'```json\s*(.*?)\s*```', re.DOTALL | re.IGNORECASE)
    # Optional language tag must be followed by whitespace, so ```{"a": 1}``` still works
    FENCED_ANY = re.compile(r'```(?:[A-Za-z0-9_+\-]+(?=\s))?\s*(.*?)\s*```', re.DOTALL)
    OBJECT_SPAN = re.compile(r'\{.*\}', re.DOTALL)
    ARRAY_SPAN = re.compile(r'\[.*\]', re.DOTALL)
    RESIDUAL_FENCE = re.compile(r'^\s*```(?:json)?|```\s*$', re.IGNORECASE)

    STRATEGIES: Tuple[Tuple[str, re.Pattern], ...] = (
        ('fenced_json', FENCED_JSON),
        ('fenced_block', FENCED_ANY),
        ('object_span', OBJECT_SPAN),
        ('array_span', ARRAY_SPAN),
    )

    def __init__(self, preview_chars: int = DEFAULT_LOG_PREVIEW_CHARS):
        self.preview_chars = preview_chars

    @staticmethod
    def _longest(pattern: re.Pattern, content: str) -> Optional[str]:
        matches: List[str] = []
        for match in pattern.finditer(content):
            matches.append(match.group(1) if pattern.groups else match.group(0))
        if not matches:
            return None
        return max(matches, key=len)

    def iter_candidates(self, content: str) -> Iterator[Tuple[str, str]]:
        """
        Yield (strategy, candidate) pairs in priority order without duplicates.

        The whole response is always the last candidate.
        """
        seen = set()
        for name, pattern in self.STRATEGIES:
            candidate = self._longest(pattern, content)
            if candidate is None or candidate in seen:
                continue
            seen.add(candidate)
            yield name, candidate

        if content not in seen:
            yield 'whole_input', content

    @classmethod
    def normalize(cls, candidate: str) -> str:
        """
        Clean a candidate before decoding.

        Strips leftover fence markers and surrounding whitespace, and removes
        exactly one layer of braces from '{{ ... }}' (a prompt-templating artifact).
        """
        text = cls.RESIDUAL_FENCE.sub('', candidate).strip()
        if text.startswith('{{') and text.endswith('}}'):
            text = text[1:-1].strip()
        return text

    def decode(self, content: str) -> Tuple[bool, Any]:
        """
        Try every candidate in order.

        Returns:
            (True, value) for the first candidate that decodes to a non-null
            value, otherwise (False, None)
        """
        logger = get_logger("parsing.json")

        for strategy, candidate in self.iter_candidates(content):
            text = self.normalize(candidate)
            if not text:
                continue
            try:
                value = json.loads(text)
            except json.JSONDecodeError as e:
                logger.debug(
                    f"JSON decode failed for {strategy} candidate ({e.msg} at pos {e.pos}): "
                    f"{text[:self.preview_chars]!r}"
                )
                continue
            except (ValueError, RecursionError) as e:
                # Over-long integers and very deep nesting are decode failures too
                logger.debug(f"JSON decode failed for {strategy} candidate ({type(e).__name__}: {e})")
                continue

            if value is None:
                logger.debug(f"{strategy} candidate decoded to null; ignoring")
                continue

            logger.debug(f"Decoded JSON using {strategy} strategy")
            return True, value

        return False, None

    def extract_and_parse(
        self,
        content: str,
        id_generator: Optional[IdGenerator] = None,
        settings: Optional[Settings] = None
    ) -> ParseEnvelope:
        """
        Decode the JSON payload of a response, falling back to text parsing.

        Args:
            content: Trimmed response text
            id_generator: Passed through to the text parser on fallback
            settings: Passed through to the text parser on fallback

        Returns:
            ParseEnvelope whose data is the decoded value, or the text parser's result
        """
        decoded, value = self.decode(content)
        if decoded:
            return ParseEnvelope.ok(value, raw_content=content)

        get_logger("parsing.json").debug("No JSON candidate decoded; falling back to text parsing")
        return parse_text(content, id_generator=id_generator, settings=settings)


def extract_and_parse(
    content: str,
    id_generator: Optional[IdGenerator] = None,
    settings: Optional[Settings] = None
) -> ParseEnvelope:
    """Module-level shortcut for ``JSONExtractor().extract_and_parse``."""
    preview_chars = settings.log_preview_chars if settings else DEFAULT_LOG_PREVIEW_CHARS
    extractor = JSONExtractor(preview_chars=preview_chars)
    return extractor.extract_and_parse(content, id_generator=id_generator, settings=settings)
