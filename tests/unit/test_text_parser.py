"""Tests for text dispatch and the generic text record."""

import pytest

from storyparse.config import Settings
from storyparse.parsing.text_parser import detect_text_kind, extract_text, parse_text


class TestDetectTextKind:
    """Test content-signature routing."""

    @pytest.mark.parametrize("content,kind", [
        ("第1章: 始まり", 'chapters'),
        ("第一章 始まり", 'chapters'),
        ("Chapter 1: Beginnings", 'chapters'),
        ("【アリス】\n登場人物の紹介", 'characters'),
        ("キャラクター案", 'characters'),
        ("Cast: Alice, Bob", 'characters'),
        ("プロット案\nテーマ: 友情", 'plot'),
        ("物語の構成について", 'plot'),
        ("ただの文章です。", 'text'),
    ])
    def test_signatures(self, content, kind):
        """Test each signature routes to its extractor."""
        assert detect_text_kind(content) == kind

    def test_chapters_take_priority(self):
        """Test a chapter list mentioning characters is still a chapter list."""
        content = "第1章: 出会い\n登場キャラクター: アリス\nプロット上の転換点"
        assert detect_text_kind(content) == 'chapters'


class TestExtractText:
    """Test the generic fallback record."""

    def test_plain_text(self):
        """Test content, lines and counts."""
        content = "一行目\n\n  \n二行目"
        result = extract_text(content)

        assert result.success is True
        record = result.data
        assert record.type == 'text'
        assert record.content == content
        assert record.lines == ["一行目", "二行目"]
        assert record.line_count == 2
        assert record.word_count == len(content)


class TestParseText:
    """Test parse_text dispatch end to end."""

    def test_dispatch_to_chapters(self, chapter_outline, ids):
        """Test chapter outlines produce chapter records."""
        result = parse_text(chapter_outline.strip(), id_generator=ids)
        assert result.data.type == 'chapters'

    def test_dispatch_to_characters(self, character_sheet, ids):
        """Test character sheets produce character records."""
        assert parse_text(character_sheet, id_generator=ids).data.type == 'characters'

    def test_dispatch_to_plot(self, plot_sheet):
        """Test plot sheets produce plot records."""
        assert parse_text(plot_sheet).data.type == 'plot'

    def test_min_summary_length_from_settings(self, ids):
        """Test the summary heuristic honours settings."""
        content = "第1章: 旅立ち\n短い説明"
        default = parse_text(content, id_generator=ids)
        relaxed = parse_text(content, id_generator=ids, settings=Settings(min_summary_length=2))

        assert default.data.chapters[0].summary == ''
        assert relaxed.data.chapters[0].summary == "短い説明"
