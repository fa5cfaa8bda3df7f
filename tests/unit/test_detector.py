"""Tests for response format detection."""

from storyparse.parsing.detector import detect_format


class TestDetectFormat:
    """Test detect_format signals."""

    def test_object(self):
        """Test a whole JSON object is detected."""
        assert detect_format('{"key": "value"}') == 'json'

    def test_multiline_object(self):
        """Test an object spanning several lines."""
        assert detect_format('{\n  "title": "星降る夜の約束"\n}') == 'json'

    def test_array(self):
        """Test a whole JSON array is detected."""
        assert detect_format('[1, 2, 3]') == 'json'

    def test_key_value_pair_in_prose(self):
        """Test an embedded "key": value pair is enough."""
        assert detect_format('Here you go: "name": "アリス"') == 'json'

    def test_plain_text(self):
        """Test narrative text defaults to text."""
        assert detect_format('これは普通のテキストです。JSONではありません。') == 'text'

    def test_chapter_outline(self):
        """Test labelled outlines are text."""
        assert detect_format('第1章: 始まり\n概要: 目覚め') == 'text'

    def test_length_ceiling(self):
        """Test long responses are treated as narrative."""
        long_json = '{"a": "' + 'x' * 10000 + '"}'
        assert detect_format(long_json) == 'text'

    def test_custom_ceiling(self):
        """Test the ceiling is configurable."""
        assert detect_format('{"a": 1}', length_ceiling=5) == 'text'
        assert detect_format('{"a": 1}', length_ceiling=100) == 'json'
