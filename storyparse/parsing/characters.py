"""Character profile extraction ('【Name】' / '・Name (' blocks with labelled lines)."""

from dataclasses import dataclass, replace
from functools import partial, reduce
from typing import Iterable, List, Optional, Tuple

from ..models import CharacterRecord, CharactersRecord, ParseEnvelope
from ..utils.logging import get_logger
from .ids import IdGenerator, default_id_generator
from .patterns import CHARACTER_LABEL_GROUPS, CHARACTER_MARKER_PATTERNS, first_match, match_label


@dataclass(frozen=True)
class CharacterScanState:
    closed: Tuple[CharacterRecord, ...] = ()
    current: Optional[CharacterRecord] = None


def close_character(state: CharacterScanState) -> CharacterScanState:
    if state.current is None:
        return state
    return CharacterScanState(closed=state.closed + (state.current,), current=None)


def open_character(
    state: CharacterScanState,
    name: str,
    id_generator: IdGenerator = default_id_generator
) -> CharacterScanState:
    closed = close_character(state)
    return replace(closed, current=CharacterRecord(id=id_generator('char'), name=name.strip()))


def step(
    state: CharacterScanState,
    raw_line: str,
    id_generator: IdGenerator = default_id_generator
) -> CharacterScanState:
    """Advance the scan by one line; unlabelled lines are ignored."""
    line = raw_line.strip()
    if not line:
        return state

    marker = first_match(line, CHARACTER_MARKER_PATTERNS)
    if marker:
        return open_character(state, marker.group(1), id_generator)

    if state.current is None:
        return state

    labelled = match_label(line, CHARACTER_LABEL_GROUPS)
    if labelled:
        field, value = labelled
        return replace(state, current=state.current.model_copy(update={field: value}))

    return state


def scan_characters(
    lines: Iterable[str],
    id_generator: IdGenerator = default_id_generator
) -> List[CharacterRecord]:
    advance = partial(step, id_generator=id_generator)
    final = close_character(reduce(advance, lines, CharacterScanState()))
    return list(final.closed)


def extract_characters(
    content: str,
    id_generator: IdGenerator = default_id_generator
) -> ParseEnvelope:
    """
    Extract character profiles.

    A '名前:' / 'Name:' line inside a block replaces the marker text, so
    numbered blocks such as '【キャラクター1】' still get the real name.
    An empty result is still a successful parse; the validator rejects it.
    """
    characters = scan_characters(content.split('\n'), id_generator)
    get_logger("parsing.characters").debug(f"Extracted {len(characters)} characters")

    record = CharactersRecord(characters=characters, count=len(characters))
    return ParseEnvelope.ok(record, raw_content=content)
