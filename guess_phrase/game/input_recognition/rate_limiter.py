"""
离散动作限速器
Discrete Action Rate Limiter
"""
from typing import Optional


class RateLimiter:
    """两次被接受的离散动作之间的最小间隔"""

    def __init__(self, min_interval: float):
        """
        初始化限速器

        Args:
            min_interval: 最小间隔（秒）
        """
        if min_interval < 0:
            raise ValueError(f"min_interval 不能为负数: {min_interval}")
        self.min_interval = min_interval

    def allows(self, last_fired_at: Optional[float], now: float) -> bool:
        """
        判断当前时刻是否允许再次触发

        Args:
            last_fired_at: 上次触发时刻，从未触发为None
            now: 当前时刻

        Returns:
            bool: 是否允许
        """
        if last_fired_at is None:
            return True
        return now - last_fired_at >= self.min_interval

    def remaining(self, last_fired_at: Optional[float], now: float) -> float:
        """
        距离下一次允许触发还需等待的秒数

        Args:
            last_fired_at: 上次触发时刻
            now: 当前时刻

        Returns:
            float: 等待秒数，已允许时为0
        """
        if last_fired_at is None:
            return 0.0
        return max(0.0, self.min_interval - (now - last_fired_at))
