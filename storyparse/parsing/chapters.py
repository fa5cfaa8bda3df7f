"""
Chapter extraction from narrative outlines.

The scan is a fold over lines. ``ChapterScanState`` holds the chapters
closed so far and at most one open chapter; every transition returns a new
state, so each step can be exercised on its own.
"""

from dataclasses import dataclass, replace
from functools import partial, reduce
from typing import Iterable, List, Optional, Tuple

from ..config.constants import (
    DEFAULT_MIN_SUMMARY_LENGTH,
    INCOMPLETE_CHAPTERS_WARNING,
    NO_CHAPTER_PATTERN_WARNING,
    NO_CHAPTERS_ERROR,
)
from ..models import ChapterRecord, ChaptersRecord, ParseEnvelope
from ..utils.logging import get_logger
from .ids import IdGenerator, default_id_generator
from .patterns import (
    CHAPTER_LABEL_GROUPS,
    CHAPTER_LIST_FIELDS,
    CHAPTER_MARKER_PATTERNS,
    SUMMARY_SKIP_PREFIXES,
    SUMMARY_SKIP_SUBSTRINGS,
    first_match,
    match_label,
    split_list,
)


@dataclass(frozen=True)
class ChapterScanState:
    """Chapters closed so far plus the chapter currently accumulating detail lines."""

    closed: Tuple[ChapterRecord, ...] = ()
    current: Optional[ChapterRecord] = None


def close_chapter(state: ChapterScanState) -> ChapterScanState:
    """Push the open chapter (if any) onto the closed list."""
    if state.current is None:
        return state
    return ChapterScanState(closed=state.closed + (state.current,), current=None)


def open_chapter(
    state: ChapterScanState,
    number: int,
    title: str,
    id_generator: IdGenerator = default_id_generator
) -> ChapterScanState:
    """Close the open chapter and start a new one."""
    closed = close_chapter(state)
    chapter = ChapterRecord(id=id_generator('chapter'), number=number, title=title.strip())
    return replace(closed, current=chapter)


def is_summary_candidate(line: str, min_length: int = DEFAULT_MIN_SUMMARY_LENGTH) -> bool:
    """Whether an unlabelled line may stand in for a missing summary."""
    if line.startswith(SUMMARY_SKIP_PREFIXES):
        return False
    if any(marker in line for marker in SUMMARY_SKIP_SUBSTRINGS):
        return False
    return len(line) > min_length


def apply_detail(
    state: ChapterScanState,
    line: str,
    min_summary_length: int = DEFAULT_MIN_SUMMARY_LENGTH
) -> ChapterScanState:
    """Fold a non-heading line into the open chapter."""
    current = state.current
    if current is None:
        return state

    labelled = match_label(line, CHAPTER_LABEL_GROUPS)
    if labelled:
        field, value = labelled
        if field in CHAPTER_LIST_FIELDS:
            update = {field: split_list(value)}
        else:
            update = {field: value}
        return replace(state, current=current.model_copy(update=update))

    # First descriptive line doubles as the summary
    if not current.summary and is_summary_candidate(line, min_summary_length):
        return replace(state, current=current.model_copy(update={'summary': line}))

    return state


def step(
    state: ChapterScanState,
    raw_line: str,
    id_generator: IdGenerator = default_id_generator,
    min_summary_length: int = DEFAULT_MIN_SUMMARY_LENGTH
) -> ChapterScanState:
    """Advance the scan by one line."""
    line = raw_line.strip()
    if not line:
        return state

    heading = first_match(line, CHAPTER_MARKER_PATTERNS)
    if heading:
        return open_chapter(state, int(heading.group(1)), heading.group(2), id_generator)

    return apply_detail(state, line, min_summary_length)


def scan_chapters(
    lines: Iterable[str],
    id_generator: IdGenerator = default_id_generator,
    min_summary_length: int = DEFAULT_MIN_SUMMARY_LENGTH
) -> List[ChapterRecord]:
    """Run the full scan and return every chapter found, in order of appearance."""
    advance = partial(step, id_generator=id_generator, min_summary_length=min_summary_length)
    final = close_chapter(reduce(advance, lines, ChapterScanState()))
    return list(final.closed)


def extract_chapters(
    content: str,
    id_generator: IdGenerator = default_id_generator,
    min_summary_length: int = DEFAULT_MIN_SUMMARY_LENGTH
) -> ParseEnvelope:
    """
    Extract chapter outlines from text that looks like a chapter list.

    Args:
        content: Trimmed response text
        id_generator: Source of chapter identifiers
        min_summary_length: Length an unlabelled line must exceed to become a summary

    Returns:
        Envelope with a ChaptersRecord, or a failed envelope when no heading matched
    """
    logger = get_logger("parsing.chapters")

    chapters = scan_chapters(content.split('\n'), id_generator, min_summary_length)

    if not chapters:
        logger.warning("Chapter signature matched but no chapter headings were recognized")
        return ParseEnvelope.fail(
            NO_CHAPTERS_ERROR,
            raw_content=content,
            warnings=[NO_CHAPTER_PATTERN_WARNING]
        )

    warnings = []
    incomplete = sum(1 for chapter in chapters if not chapter.is_complete)
    if incomplete:
        warnings.append(INCOMPLETE_CHAPTERS_WARNING.format(count=incomplete, total=len(chapters)))
        logger.debug(f"{incomplete}/{len(chapters)} chapters have missing details")

    record = ChaptersRecord(
        chapters=chapters,
        count=len(chapters),
        warnings=warnings or None
    )
    logger.debug(f"Extracted {len(chapters)} chapters")
    return ParseEnvelope.ok(record, raw_content=content, warnings=warnings)
