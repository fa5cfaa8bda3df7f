"""Parser constants and defaults."""
from pathlib import Path

# Format detection
DEFAULT_JSON_LENGTH_CEILING = 10000  # Longer responses are treated as narrative
FORMAT_HINTS = ('json', 'text', 'auto')
DEFAULT_FORMAT = 'auto'

# Text extraction
DEFAULT_MIN_SUMMARY_LENGTH = 10  # Unlabelled line must be longer than this to become a summary

# Logging
DEFAULT_LOG_DIR = Path.home() / ".storyparse" / "logs"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_RETENTION_DAYS = 1
DEFAULT_LOG_PREVIEW_CHARS = 120
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

# Config files
USER_CONFIG_FILE = Path.home() / ".storyparse" / "config.yaml"
PROJECT_CONFIG_FILE = Path("config.yaml")

# Envelope error messages
INVALID_CONTENT_ERROR = "Invalid response content: expected a non-empty string"
PARSE_ERROR_PREFIX = "Parse error"
UNKNOWN_ERROR = "An unknown error occurred"
NO_CHAPTERS_ERROR = "No chapters could be extracted from the response"
NO_CHAPTER_PATTERN_WARNING = (
    "No chapter heading pattern was recognized. Expected headings such as "
    "'第1章: タイトル', '【第1章】タイトル', 'Chapter 1: Title' or '1. Title'"
)
INCOMPLETE_CHAPTERS_WARNING = (
    "{count} of {total} chapters are missing details "
    "(summary, setting, mood, key events or characters); please review"
)
