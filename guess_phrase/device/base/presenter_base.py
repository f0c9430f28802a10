"""
展示层抽象基类
Presenter Base Class
"""
from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ...game.game_logic import Action, DeckEntry, RoundState, RoundResults
    from ...game.input_recognition import TiltPhase


class PresenterBase(ABC):
    """展示层抽象基类，回合控制器通过它输出所有可见反馈"""

    @abstractmethod
    def on_phrase_shown(self, entry: Optional["DeckEntry"]):
        """
        展示当前词卡

        Args:
            entry: 当前词卡，牌组已走到末尾时为None
        """
        pass

    @abstractmethod
    def on_action_applied(self, action: "Action", index: int, state: "RoundState"):
        """
        动作已生效（计数和位置已更新）

        Args:
            action: 生效的动作
            index: 更新后的牌组位置
            state: 回合状态
        """
        pass

    @abstractmethod
    def on_status_text(self, phase: "TiltPhase"):
        """
        倾斜通道的粗粒度状态

        Args:
            phase: 倾斜状态
        """
        pass

    @abstractmethod
    def on_time_left(self, seconds: int):
        """
        刷新剩余时间

        Args:
            seconds: 剩余秒数
        """
        pass

    @abstractmethod
    def on_round_finished(self, results: "RoundResults"):
        """
        回合结束

        Args:
            results: 结果快照
        """
        pass

    def get_status(self) -> dict:
        """
        获取展示层状态信息（可选实现）

        Returns:
            dict: 状态信息字典
        """
        return {"type": self.__class__.__name__}
