from .records import (
    ChapterRecord, CharacterRecord, PlotDetails,
    TextRecord, ChaptersRecord, CharactersRecord, PlotRecord,
    StructuredRecord, ParseEnvelope, record_tag
)

__all__ = [
    'ChapterRecord', 'CharacterRecord', 'PlotDetails',
    'TextRecord', 'ChaptersRecord', 'CharactersRecord', 'PlotRecord',
    'StructuredRecord', 'ParseEnvelope', 'record_tag'
]
