"""
玩家动作枚举类型
Player Action Enumeration
"""
from enum import Enum


class Action(Enum):
    """归一化的玩家动作，所有输入通道最终都产出该类型"""
    GOT = "got"      # 猜中
    PASS = "pass"    # 跳过并计为未猜中
    NEXT = "next"    # 下一个，不计分

    def __str__(self):
        return self.value

    @property
    def is_scored(self) -> bool:
        """该动作是否计入 got/pass 计数"""
        return self is not Action.NEXT

    @classmethod
    def from_string(cls, value: str) -> "Action":
        """
        从字符串创建动作枚举

        Args:
            value: 动作字符串（got, pass, next）

        Returns:
            Action: 动作枚举值

        Raises:
            ValueError: 无法识别的动作
        """
        value_lower = str(value).strip().lower()
        for action in cls:
            if action.value == value_lower:
                return action
        raise ValueError(f"未知动作: {value}")
