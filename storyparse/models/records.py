"""Parse result models: the envelope and the structured records it carries."""
from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """Base for all parse output models (camelCase aliases for the UI wire shape)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """Dump using the camelCase field names downstream consumers expect."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ChapterRecord(RecordModel):
    """One chapter outline extracted from narrative text."""

    id: str = Field(description="Generated record identifier")
    number: int = Field(description="Chapter number taken from the heading marker")
    title: str = Field(description="Heading text after the marker")
    summary: str = ''
    setting: str = ''
    mood: str = ''
    key_events: List[str] = Field(default_factory=list)
    characters: List[str] = Field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """True when every descriptive field has content."""
        return bool(
            self.summary and self.setting and self.mood
            and self.key_events and self.characters
        )


class CharacterRecord(RecordModel):
    """One character profile extracted from narrative text."""

    id: str = Field(description="Generated record identifier")
    name: str
    role: str = ''
    appearance: str = ''
    personality: str = ''
    background: str = ''


class PlotDetails(RecordModel):
    """Flat plot summary; only labels present in the text are set."""

    theme: Optional[str] = None
    setting: Optional[str] = None
    hook: Optional[str] = None
    protagonist_goal: Optional[str] = None
    main_obstacle: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not any(value for value in self.model_dump().values())


class TextRecord(RecordModel):
    """Catch-all record for text with no recognizable structure."""

    type: Literal['text'] = 'text'
    content: str
    lines: List[str] = Field(default_factory=list)
    word_count: int = 0
    line_count: int = 0


class ChaptersRecord(RecordModel):
    type: Literal['chapters'] = 'chapters'
    chapters: List[ChapterRecord] = Field(default_factory=list)
    count: int = 0
    warnings: Optional[List[str]] = None


class CharactersRecord(RecordModel):
    type: Literal['characters'] = 'characters'
    characters: List[CharacterRecord] = Field(default_factory=list)
    count: int = 0


class PlotRecord(RecordModel):
    type: Literal['plot'] = 'plot'
    plot: PlotDetails = Field(default_factory=PlotDetails)


StructuredRecord = Union[TextRecord, ChaptersRecord, CharactersRecord, PlotRecord]


class ParseEnvelope(RecordModel):
    """
    Uniform result of every parse call.

    ``data`` holds a structured record from the text pipeline, or whatever
    value was decoded on the JSON path.
    """

    success: bool
    data: Any = None
    raw_content: str = ''
    error: Optional[str] = None
    warnings: Optional[List[str]] = None

    @model_validator(mode='after')
    def check_success_matches_data(self) -> 'ParseEnvelope':
        if self.success and self.data is None:
            raise ValueError("A successful envelope must carry data")
        if not self.success:
            if self.data is not None:
                raise ValueError("A failed envelope must not carry data")
            if not self.error:
                raise ValueError("A failed envelope must carry an error message")
        return self

    @classmethod
    def ok(
        cls,
        data: Any,
        raw_content: str,
        warnings: Optional[List[str]] = None
    ) -> 'ParseEnvelope':
        """Build a successful envelope."""
        return cls(success=True, data=data, raw_content=raw_content, warnings=warnings or None)

    @classmethod
    def fail(
        cls,
        error: str,
        raw_content: str = '',
        warnings: Optional[List[str]] = None
    ) -> 'ParseEnvelope':
        """Build a failed envelope."""
        return cls(success=False, data=None, raw_content=raw_content, error=error, warnings=warnings or None)

    @property
    def record_type(self) -> Optional[str]:
        """The ``type`` tag of the carried record, if it has one."""
        return record_tag(self.data)

    def to_dict(self) -> Dict[str, Any]:
        """Dump to the camelCase envelope shape (records dumped recursively)."""
        result: Dict[str, Any] = {
            'success': self.success,
            'data': self.data.to_dict() if isinstance(self.data, RecordModel) else self.data,
            'rawContent': self.raw_content,
        }
        if self.error is not None:
            result['error'] = self.error
        if self.warnings:
            result['warnings'] = list(self.warnings)
        return result


def record_tag(data: Any) -> Optional[str]:
    """Read the ``type`` tag from a record model or a decoded JSON object."""
    if isinstance(data, RecordModel):
        return getattr(data, 'type', None)
    if isinstance(data, dict):
        tag = data.get('type')
        return tag if isinstance(tag, str) else None
    return None
