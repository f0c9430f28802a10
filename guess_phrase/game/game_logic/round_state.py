"""
回合状态与结果快照
Round State and Results Snapshot
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class EndReason(Enum):
    """回合结束原因"""
    MANUAL = "ended early"               # 手动提前结束
    END_OF_DECK = "reached end of list"  # 牌组用完且未开启循环
    TIME_UP = "time is up"               # 计时结束

    def __str__(self):
        return self.value

    @property
    def label(self) -> str:
        """首字母大写的展示文本"""
        return self.value[:1].upper() + self.value[1:]


@dataclass
class RoundState:
    """回合进行中的可变状态，只由 RoundController 修改"""
    index: int = 0
    shown: int = 0
    got: int = 0
    passed: int = 0
    time_left: int = 0

    @property
    def skipped(self) -> int:
        """NEXT 动作次数（不计分的跳过）"""
        return self.shown - self.got - self.passed

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'index': self.index,
            'shown': self.shown,
            'got': self.got,
            'pass': self.passed,
            'skipped': self.skipped,
            'time_left': self.time_left
        }


@dataclass(frozen=True)
class RoundResults:
    """回合结束时冻结的结果快照"""
    shown: int
    got: int
    passed: int
    total_deck_size: int
    reason: EndReason
    finished_at: datetime = field(default_factory=datetime.now)

    @property
    def remaining(self) -> int:
        """未展示的词卡数"""
        return max(0, self.total_deck_size - self.shown)

    @classmethod
    def from_state(cls, state: RoundState, total_deck_size: int,
                   reason: EndReason) -> "RoundResults":
        """
        从回合状态生成快照

        Args:
            state: 回合状态
            total_deck_size: 牌组大小
            reason: 结束原因

        Returns:
            RoundResults: 结果快照
        """
        return cls(
            shown=state.shown,
            got=state.got,
            passed=state.passed,
            total_deck_size=total_deck_size,
            reason=reason
        )

    def summary(self) -> str:
        """结果说明文本"""
        total = self.total_deck_size
        plural = '' if total == 1 else 's'
        return (f"{self.reason.label}. You saw {self.shown} of {total} "
                f"phrase{plural} ({self.remaining} remaining).")

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'shown': self.shown,
            'got': self.got,
            'pass': self.passed,
            'total_deck_size': self.total_deck_size,
            'remaining': self.remaining,
            'reason': self.reason.value,
            'finished_at': self.finished_at.isoformat()
        }
