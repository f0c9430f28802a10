"""
游戏设置
Game Settings
"""
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional

MIN_TIMER_SECONDS = 10
MAX_TIMER_SECONDS = 600
DEFAULT_TIMER_SECONDS = 60
DEFAULT_FEEDBACK_DELAY = 0.42


def clamp_timer_seconds(value: Any) -> int:
    """
    把计时时长限制在允许范围内，无法解析时回退到默认值

    Args:
        value: 原始值

    Returns:
        int: 秒数
    """
    if isinstance(value, bool):
        return DEFAULT_TIMER_SECONDS
    try:
        seconds = int(float(value))
    except (TypeError, ValueError):
        return DEFAULT_TIMER_SECONDS
    return max(MIN_TIMER_SECONDS, min(MAX_TIMER_SECONDS, seconds))


@dataclass
class GameSettings:
    """玩家偏好设置（会被持久化）"""
    timer_seconds: int = DEFAULT_TIMER_SECONDS
    shuffle_on_start: bool = True
    loop_when_finished: bool = False
    tilt_enabled: bool = False
    feedback_delay: float = DEFAULT_FEEDBACK_DELAY

    def __post_init__(self):
        self.timer_seconds = clamp_timer_seconds(self.timer_seconds)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]],
                  base: Optional["GameSettings"] = None) -> "GameSettings":
        """
        从字典创建设置，类型不符的键会被忽略

        Args:
            data: 设置字典
            base: 缺省值来源（可选）

        Returns:
            GameSettings: 设置实例
        """
        values = asdict(base) if base else asdict(cls())
        for f in fields(cls):
            if not data or f.name not in data:
                continue
            raw = data[f.name]
            if f.type in (bool, 'bool'):
                if isinstance(raw, bool):
                    values[f.name] = raw
            elif f.name == 'timer_seconds':
                values[f.name] = clamp_timer_seconds(raw)
            elif isinstance(raw, (int, float)) and not isinstance(raw, bool):
                values[f.name] = max(0.0, float(raw))
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return asdict(self)
