"""
Pattern library for line-oriented extraction.

Every table here is plain data: label synonyms per field and marker shapes
per record kind. ``build_label_groups`` compiles a label table once at
import time and ``match_label`` is the single routine that consumes it.
Tables are ordered; within a field the more specific spelling must come
first (e.g. '設定・場所' before '設定').
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

# Full-width and half-width colon
COLON = r'[：:]'

# Bullets, markdown emphasis and heading hashes that may precede a label
_LABEL_LEAD = r'^[\s\-*•・#>]*(?:\*\*|__)?\s*'
_LABEL_TAIL = r'\s*(?:\*\*|__)?\s*' + COLON + r'\s*(?:\*\*|__)?\s*(.+)$'

# Separators for list-valued fields: ASCII/full-width comma, ideographic comma, semicolons
LIST_SEPARATORS = re.compile(r'[,，、;；]')


# --- Chapters -------------------------------------------------------------

# Each shape captures (number, title). Anchored at line start; a heading may
# carry markdown hashes or emphasis in front of it.
_HEADING_LEAD = r'^(?:#{1,6}\s*)?(?:\*\*)?\s*'

CHAPTER_MARKERS: Tuple[str, ...] = (
    _HEADING_LEAD + r'第\s*(\d+)\s*章(?:\s*' + COLON + r')?\s*([^：:\s].*?)(?:\*\*)?$',  # 第1章: タイトル
    _HEADING_LEAD + r'【\s*第\s*(\d+)\s*章\s*】\s*(.+?)(?:\*\*)?$',              # 【第1章】タイトル
    _HEADING_LEAD + r'(?i:chapter)\s*(\d+)\s*' + COLON + r'\s*(.+?)(?:\*\*)?$',       # Chapter 1: Title
    _HEADING_LEAD + r'章\s*(\d+)\s*' + COLON + r'\s*(.+?)(?:\*\*)?$',            # 章1: タイトル
    _HEADING_LEAD + r'(\d+)\s*[.．]\s*(.+?)(?:\*\*)?$',                          # 1. タイトル / 1．タイトル
    _HEADING_LEAD + r'(\d+)\s*[-－]\s*(.+?)(?:\*\*)?$',                          # 1-タイトル / 1－タイトル
)

# Substrings that route a response to the chapter extractor
CHAPTER_SIGNATURES: Tuple[str, ...] = (
    r'第[^\n]{0,6}?章',
    r'(?i)\bchapter\s*\d+',
    r'章\s*\d+\s*' + COLON,
)

CHAPTER_FIELD_LABELS: Dict[str, Sequence[str]] = {
    'summary': ('概要', 'あらすじ', '内容', '要約', 'Summary', 'Synopsis'),
    'setting': ('設定・場所', '設定･場所', '舞台', '場所', '設定', 'Setting', 'Location'),
    'mood': ('雰囲気・ムード', '雰囲気･ムード', 'ムード', '雰囲気', 'トーン', 'Mood', 'Tone', 'Atmosphere'),
    'key_events': ('重要な出来事', 'キーイベント', '主な出来事', '出来事', 'イベント', 'Key Events', 'Events'),
    'characters': ('登場キャラクター', '登場人物', 'キャラクター', '人物', 'Characters', 'Cast'),
}

CHAPTER_LIST_FIELDS = frozenset({'key_events', 'characters'})

# Unlabelled lines starting with these are never used as a summary
SUMMARY_SKIP_PREFIXES: Tuple[str, ...] = ('役割:', '役割：', 'ペース:', 'ペース：')
SUMMARY_SKIP_SUBSTRINGS: Tuple[str, ...] = ('【', '】')


# --- Characters -----------------------------------------------------------

# Each shape captures the character name
CHARACTER_MARKERS: Tuple[str, ...] = (
    r'^【\s*([^】]+?)\s*】',          # 【名前】
    r'^・\s*(.+?)\s*[(（]',           # ・名前 (説明)
)

CHARACTER_SIGNATURES: Tuple[str, ...] = (
    r'キャラクター',
    r'登場人物',
    r'(?im)^\s*(?:characters|cast)\s*' + COLON,
)

CHARACTER_FIELD_LABELS: Dict[str, Sequence[str]] = {
    'name': ('名前', '氏名', 'Name'),
    'role': ('役割', '基本設定', '立場', 'Role'),
    'appearance': ('外見', '容姿', 'Appearance'),
    'personality': ('性格', 'Personality'),
    'background': ('背景', '経歴', '生い立ち', 'Background'),
}


# --- Plot -----------------------------------------------------------------

PLOT_SIGNATURES: Tuple[str, ...] = (
    r'プロット',
    r'構成',
    r'(?im)^\s*plot\s*' + COLON,
)

PLOT_FIELD_LABELS: Dict[str, Sequence[str]] = {
    'theme': ('テーマ', 'Theme'),
    'setting': ('舞台', '世界観', 'Setting'),
    'hook': ('フック', 'Hook'),
    'protagonist_goal': ('主人公の目標', '主人公の目的', 'Protagonist Goal', 'Goal'),
    'main_obstacle': ('主要な障害', '主な障害', '障害', 'Main Obstacle', 'Obstacle'),
}


# --- Compiled forms -------------------------------------------------------

@dataclass(frozen=True)
class LabelGroup:
    """All accepted spellings of one field's label."""

    field: str
    patterns: Tuple[re.Pattern, ...]


def compile_label(label: str) -> re.Pattern:
    """Compile one label spelling into a line matcher capturing the value."""
    return re.compile(_LABEL_LEAD + re.escape(label) + _LABEL_TAIL, re.IGNORECASE)


def build_label_groups(table: Dict[str, Sequence[str]]) -> Tuple[LabelGroup, ...]:
    """Compile a field -> labels table, preserving field and label order."""
    return tuple(
        LabelGroup(field=field, patterns=tuple(compile_label(label) for label in labels))
        for field, labels in table.items()
    )


def compile_all(shapes: Sequence[str]) -> Tuple[re.Pattern, ...]:
    return tuple(re.compile(shape) for shape in shapes)


def match_label(line: str, groups: Sequence[LabelGroup]) -> Optional[Tuple[str, str]]:
    """
    Test a line against label groups; the first matching group wins.

    Args:
        line: A single trimmed line
        groups: Compiled label groups in priority order

    Returns:
        (field, value) for the first match, or None
    """
    for group in groups:
        for pattern in group.patterns:
            match = pattern.match(line)
            if match:
                return group.field, match.group(1).strip()
    return None


def first_match(line: str, patterns: Sequence[re.Pattern]) -> Optional[re.Match]:
    """Return the match of the first pattern that matches the line."""
    for pattern in patterns:
        match = pattern.match(line)
        if match:
            return match
    return None


def contains_any(text: str, patterns: Sequence[re.Pattern]) -> bool:
    return any(pattern.search(text) for pattern in patterns)


def split_list(value: str) -> List[str]:
    """Split a list-valued field on comma-like separators, dropping empties."""
    return [item.strip() for item in LIST_SEPARATORS.split(value) if item.strip()]


CHAPTER_MARKER_PATTERNS = compile_all(CHAPTER_MARKERS)
CHAPTER_SIGNATURE_PATTERNS = compile_all(CHAPTER_SIGNATURES)
CHAPTER_LABEL_GROUPS = build_label_groups(CHAPTER_FIELD_LABELS)

CHARACTER_MARKER_PATTERNS = compile_all(CHARACTER_MARKERS)
CHARACTER_SIGNATURE_PATTERNS = compile_all(CHARACTER_SIGNATURES)
CHARACTER_LABEL_GROUPS = build_label_groups(CHARACTER_FIELD_LABELS)

PLOT_SIGNATURE_PATTERNS = compile_all(PLOT_SIGNATURES)
PLOT_LABEL_GROUPS = build_label_groups(PLOT_FIELD_LABELS)
