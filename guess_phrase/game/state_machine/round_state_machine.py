"""
回合状态机
Round State Machine
"""
from typing import Dict, List
from .round_mode import RoundMode
from ...utils.logger import setup_logger

logger = setup_logger("GTP.RoundStateMachine")


class RoundStateMachine:
    """回合模式状态机类"""

    # 状态转换规则：回合只能从 SETUP 或 FINISHED（再来一局）进入 RUNNING
    VALID_TRANSITIONS: Dict[RoundMode, List[RoundMode]] = {
        RoundMode.SETUP: [RoundMode.RUNNING],
        RoundMode.RUNNING: [RoundMode.FINISHED],
        RoundMode.FINISHED: [RoundMode.SETUP, RoundMode.RUNNING],
    }

    def __init__(self, initial_state: RoundMode = RoundMode.SETUP):
        """
        初始化状态机

        Args:
            initial_state: 初始状态
        """
        self.current_state = initial_state
        logger.info(f"回合状态机初始化，初始状态: {self.current_state}")

    def transition_to(self, new_state: RoundMode) -> bool:
        """
        转换到新状态

        Args:
            new_state: 新状态

        Returns:
            bool: 转换是否成功
        """
        if not self.can_transition_to(new_state):
            logger.warning(f"无效的状态转换: {self.current_state} -> {new_state}")
            return False

        old_state = self.current_state
        self.current_state = new_state
        logger.info(f"状态转换: {old_state} -> {new_state}")
        return True

    def get_current_state(self) -> RoundMode:
        """获取当前状态"""
        return self.current_state

    def can_transition_to(self, state: RoundMode) -> bool:
        """
        检查是否可以转换到指定状态

        Args:
            state: 目标状态

        Returns:
            bool: 是否可以转换
        """
        return state in self.VALID_TRANSITIONS.get(self.current_state, [])

    def is_in_state(self, state: RoundMode) -> bool:
        """检查是否在指定状态"""
        return self.current_state == state
