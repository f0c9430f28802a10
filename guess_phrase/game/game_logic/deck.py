"""
词卡与牌组构建
Deck Entries and Deck Building
"""
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
from ...utils.exceptions import ValidationError
from ...utils.logger import setup_logger

logger = setup_logger("GTP.Deck")


@dataclass(frozen=True)
class DeckEntry:
    """单张词卡"""
    phrase: str
    hint: str = ""

    def to_dict(self) -> dict:
        """转换为字典"""
        return {'phrase': self.phrase, 'hint': self.hint}


Deck = Tuple[DeckEntry, ...]


def fisher_yates_shuffle(items: List, rng: Optional[random.Random] = None) -> List:
    """
    原地 Fisher–Yates 均匀洗牌

    Args:
        items: 待洗牌列表（会被修改）
        rng: 随机数生成器（可选，便于测试复现）

    Returns:
        List: 同一个列表对象
    """
    rng = rng or random
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items


def build_deck(entries: Iterable[DeckEntry], shuffle: bool = False,
               rng: Optional[random.Random] = None) -> Deck:
    """
    从词卡来源构建本回合的工作牌组

    来源列表不会被修改，每回合都生成新的牌组。

    Args:
        entries: 词卡来源
        shuffle: 是否洗牌
        rng: 随机数生成器（可选）

    Returns:
        Deck: 不可变的牌组

    Raises:
        ValidationError: 来源为空
    """
    working = [DeckEntry(e.phrase, e.hint) for e in entries]
    if not working:
        raise ValidationError("请至少添加一个词条再开始", field="deck")

    if shuffle:
        fisher_yates_shuffle(working, rng)

    logger.debug(f"牌组已构建: {len(working)} 张, 洗牌={shuffle}")
    return tuple(working)
