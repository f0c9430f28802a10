"""
输入源实现模块
Input Source Implementation
"""
from .keyboard_input import KeyboardInput, InputCommand, parse_command

__all__ = ['KeyboardInput', 'InputCommand', 'parse_command']
