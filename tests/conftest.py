"""Pytest configuration and fixtures."""
import logging
import os
import shutil
import tempfile
from pathlib import Path
import pytest
from typing import Generator
from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Keep test logs out of the home directory
_test_log_dir = Path(tempfile.mkdtemp(prefix="storyparse-test-logs-"))
os.environ['STORYPARSE_LOG_DIR'] = str(_test_log_dir)

from storyparse.config import get_settings  # noqa: E402
from storyparse.parsing import SequentialIdGenerator  # noqa: E402


@pytest.fixture(autouse=True)
def reset_settings_and_logging():
    """Drop cached settings and logging handlers between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logger = logging.getLogger("storyparse")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def ids() -> SequentialIdGenerator:
    """Deterministic record identifiers."""
    return SequentialIdGenerator()


@pytest.fixture
def chapter_outline() -> str:
    """Two-chapter outline in the usual Japanese labelled layout."""
    return (
        "第1章: 始まりの朝\n"
        "概要: 主人公が目覚めるシーン\n"
        "設定・場所: 王都の下町\n"
        "雰囲気・ムード: 穏やか\n"
        "重要な出来事: 目覚め、旅立ちの決意；師匠との別れ\n"
        "登場キャラクター: アリス, ボブ、師匠\n"
        "\n"
        "第2章: 出会い\n"
        "概要: ヒロインとの出会い\n"
    )


@pytest.fixture
def character_sheet() -> str:
    return (
        "登場人物\n"
        "【アリス】\n"
        "役割: 主人公\n"
        "外見: 銀髪の少女\n"
        "性格: 好奇心旺盛\n"
        "背景: 辺境の村で育った\n"
        "これは無視される行\n"
        "・ボブ (相棒)\n"
        "役割：剣士\n"
    )


@pytest.fixture
def plot_sheet() -> str:
    return (
        "プロット案\n"
        "テーマ: 友情と成長\n"
        "舞台: 近未来の東京\n"
        "フック: 謎の転校生\n"
        "主人公の目標: 妹を救う\n"
        "主要な障害: 巨大企業の陰謀\n"
    )
