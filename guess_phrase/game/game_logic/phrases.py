"""
词条文本解析
Phrase List Parsing

每行一个词条，支持两种写法：
    词条
    词条 :: 提示/背景说明
以 # 开头的行为注释。
"""
from pathlib import Path
from typing import Iterable, List
from .deck import DeckEntry
from ...utils.logger import setup_logger

logger = setup_logger("GTP.Phrases")

HINT_SEPARATOR = "::"

SAMPLE_PHRASES = "\n".join([
    '# Sample family-friendly list (supports "phrase :: background")',
    'Popcorn :: Snack you eat at the movies',
    'A sneaky cat :: Quiet little troublemaker',
    'Snow day :: No school, lots of fun',
    'Dance party :: Music + silly moves',
    'The moon :: Bright thing in the night sky',
    'Pizza night :: Cheesy dinner everyone loves',
    'A superhero :: Saves the day with powers',
    'Hide and seek :: One person counts, others hide',
    'A dinosaur :: Big ancient reptile',
    'Spaghetti :: Long noodles with sauce',
    'A sleepy dragon :: Big mythical creature who needs a nap',
    'Banana peel :: Slippery yellow skin',
    'Camping trip :: Sleeping outside in a tent',
    'Magic wand :: Used to cast spells',
    'Rainbow :: Colorful arc after rain',
    'A giant sandwich :: Too big to bite',
])


def parse_phrases(text: str) -> List[DeckEntry]:
    """
    解析词条文本

    Args:
        text: 原始文本

    Returns:
        List[DeckEntry]: 词卡列表（保持原顺序）
    """
    entries = []
    for raw_line in (text or "").splitlines():
        line = raw_line.strip()
        if not line or line.startswith('#'):
            continue

        parts = line.split(HINT_SEPARATOR)
        phrase = parts[0].strip()
        # 提示中允许再出现 ::
        hint = HINT_SEPARATOR.join(parts[1:]).strip()
        if phrase:
            entries.append(DeckEntry(phrase=phrase, hint=hint))

    return entries


def load_phrases(path: str) -> List[DeckEntry]:
    """
    从文本文件读取词条

    Args:
        path: 文件路径

    Returns:
        List[DeckEntry]: 词卡列表

    Raises:
        FileNotFoundError: 文件不存在
    """
    phrase_file = Path(path).expanduser()
    text = phrase_file.read_text(encoding='utf-8')
    entries = parse_phrases(text)
    logger.info(f"从 {phrase_file} 读取 {len(entries)} 个词条")
    return entries


def format_phrases(entries: Iterable[DeckEntry]) -> str:
    """
    把词卡还原成可再次解析的文本（用于持久化）

    Args:
        entries: 词卡列表

    Returns:
        str: 每行一个词条，有提示时写成 "词条 :: 提示"
    """
    lines = []
    for entry in entries:
        if entry.hint:
            lines.append(f"{entry.phrase} {HINT_SEPARATOR} {entry.hint}")
        else:
            lines.append(entry.phrase)
    return "\n".join(lines)
