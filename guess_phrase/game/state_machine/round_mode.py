"""
回合模式枚举
Round Mode Enumeration
"""
from enum import Enum


class RoundMode(Enum):
    """回合模式枚举"""
    SETUP = "setup"        # 编辑词条/设置
    RUNNING = "running"    # 回合进行中
    FINISHED = "finished"  # 显示结果

    def __str__(self):
        return self.name
