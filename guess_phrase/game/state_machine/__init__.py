"""
回合状态机模块
Round State Machine Module
"""
from .round_mode import RoundMode
from .round_state_machine import RoundStateMachine

__all__ = ['RoundMode', 'RoundStateMachine']
