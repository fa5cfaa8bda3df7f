"""Unit tests for the envelope and record models."""
import pytest
from pydantic import ValidationError

from storyparse.models import (
    ChapterRecord, ChaptersRecord, ParseEnvelope, PlotDetails, TextRecord, record_tag
)


class TestParseEnvelope:
    """Test envelope invariants and serialization."""

    def test_success_requires_data(self):
        """Test success=True with no data is rejected."""
        with pytest.raises(ValidationError, match="must carry data"):
            ParseEnvelope(success=True, data=None)

    def test_failure_rejects_data(self):
        """Test success=False with data is rejected."""
        with pytest.raises(ValidationError, match="must not carry data"):
            ParseEnvelope(success=False, data={'a': 1}, error='x')

    def test_failure_requires_error(self):
        """Test success=False needs an error message."""
        with pytest.raises(ValidationError, match="error message"):
            ParseEnvelope(success=False)

    def test_fail_helper(self):
        """Test the failure constructor."""
        envelope = ParseEnvelope.fail('bad', raw_content='raw', warnings=['hint'])
        assert envelope.success is False
        assert envelope.data is None
        assert envelope.error == 'bad'
        assert envelope.warnings == ['hint']

    def test_empty_warnings_become_none(self):
        """Test an empty warnings list is dropped."""
        assert ParseEnvelope.ok({'a': 1}, raw_content='', warnings=[]).warnings is None

    def test_to_dict_uses_camel_case(self):
        """Test the dumped shape uses camelCase keys."""
        chapter = ChapterRecord(id='c1', number=1, title='A', key_events=['x'])
        envelope = ParseEnvelope.ok(
            ChaptersRecord(chapters=[chapter], count=1),
            raw_content='raw'
        )
        dumped = envelope.to_dict()

        assert dumped['rawContent'] == 'raw'
        assert 'error' not in dumped
        assert dumped['data']['type'] == 'chapters'
        assert dumped['data']['chapters'][0]['keyEvents'] == ['x']
        assert 'warnings' not in dumped['data']

    def test_to_dict_passes_json_through(self):
        """Test decoded JSON data is dumped unchanged."""
        dumped = ParseEnvelope.ok([1, {'a': 2}], raw_content='x').to_dict()
        assert dumped['data'] == [1, {'a': 2}]

    def test_text_record_counts(self):
        """Test text record camelCase counts."""
        record = TextRecord(content='ab', lines=['ab'], word_count=2, line_count=1)
        assert record.to_dict() == {
            'type': 'text', 'content': 'ab', 'lines': ['ab'], 'wordCount': 2, 'lineCount': 1
        }

    def test_record_type(self):
        """Test the type tag accessor."""
        assert ParseEnvelope.ok(ChaptersRecord(), raw_content='').record_type == 'chapters'
        assert ParseEnvelope.ok({'type': 'plot'}, raw_content='').record_type == 'plot'
        assert ParseEnvelope.ok([1], raw_content='').record_type is None


class TestRecords:
    """Test record helpers."""

    def test_chapter_completeness(self):
        """Test is_complete requires every descriptive field."""
        chapter = ChapterRecord(id='c', number=1, title='A', summary='s', setting='p', mood='m')
        assert not chapter.is_complete
        chapter = chapter.model_copy(update={'key_events': ['e'], 'characters': ['x']})
        assert chapter.is_complete

    def test_plot_is_empty(self):
        """Test empty plot detection."""
        assert PlotDetails().is_empty
        assert not PlotDetails(theme='友情').is_empty

    def test_populate_by_alias(self):
        """Test records accept camelCase input."""
        chapter = ChapterRecord(id='c', number=1, title='A', keyEvents=['e'])
        assert chapter.key_events == ['e']

    def test_record_tag_ignores_non_string_tags(self):
        """Test only string tags count."""
        assert record_tag({'type': 3}) is None
        assert record_tag('text') is None
