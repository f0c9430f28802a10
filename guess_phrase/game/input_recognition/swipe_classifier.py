"""
滑动手势分类器
Swipe Gesture Classifier

把一次按下/抬起的坐标与时间归类为离散动作：
右滑为猜中（GOT），左滑为跳过（PASS）。
"""
from dataclasses import dataclass
from typing import Callable, Optional
from ..game_logic.action import Action
from ...utils.logger import setup_logger

logger = setup_logger("GTP.SwipeClassifier")


@dataclass
class SwipeGesture:
    """按下到抬起之间的临时手势"""
    active: bool = False
    start_x: float = 0.0
    start_y: float = 0.0
    start_time: float = 0.0


class SwipeClassifier:
    """滑动手势分类器"""

    THRESHOLD_PX = 42        # 水平位移下限
    MAX_OFF_AXIS_PX = 80     # 垂直偏移上限
    MAX_DURATION = 0.8       # 最长持续时间（秒）

    def __init__(self, is_running: Callable[[], bool]):
        """
        初始化分类器

        Args:
            is_running: 查询回合是否进行中
        """
        self.is_running = is_running
        self.gesture = SwipeGesture()

    def reset(self):
        """丢弃进行中的手势"""
        self.gesture = SwipeGesture()

    def on_start(self, x: float, y: float, t: float) -> bool:
        """
        记录候选手势起点

        Args:
            x: 横坐标（像素）
            y: 纵坐标（像素）
            t: 时间戳（秒）

        Returns:
            bool: 是否记录
        """
        if not self.is_running():
            return False
        if self.gesture.active:
            # 上一个手势还没抬起
            return False

        self.gesture = SwipeGesture(active=True, start_x=x, start_y=y, start_time=t)
        return True

    def on_end(self, x: float, y: float, t: float) -> Optional[Action]:
        """
        根据终点对手势分类

        Args:
            x: 横坐标（像素）
            y: 纵坐标（像素）
            t: 时间戳（秒）

        Returns:
            Optional[Action]: 识别出的动作，不满足条件时为None
        """
        gesture = self.gesture
        self.gesture = SwipeGesture()

        if not gesture.active or not self.is_running():
            return None

        return self.classify(x - gesture.start_x, y - gesture.start_y,
                             t - gesture.start_time)

    @classmethod
    def classify(cls, dx: float, dy: float, dt: float) -> Optional[Action]:
        """
        按位移和耗时分类

        Args:
            dx: 水平位移（右为正）
            dy: 垂直位移
            dt: 耗时（秒）

        Returns:
            Optional[Action]: 动作或None
        """
        is_quick_enough = dt <= cls.MAX_DURATION
        is_far_enough = abs(dx) >= cls.THRESHOLD_PX
        is_mostly_horizontal = abs(dy) <= cls.MAX_OFF_AXIS_PX

        if not (is_quick_enough and is_far_enough and is_mostly_horizontal):
            logger.debug(f"滑动被忽略: dx={dx:.0f}, dy={dy:.0f}, dt={dt:.3f}s")
            return None

        action = Action.GOT if dx > 0 else Action.PASS
        logger.debug(f"滑动识别为 {action}: dx={dx:.0f}, dy={dy:.0f}, dt={dt:.3f}s")
        return action
