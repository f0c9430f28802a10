"""
设备实现模块（导入即完成工厂注册）
Device Implementations
"""
from .presenter import ConsolePresenter
from .sensor import TraceOrientationSensor
from .permission import StaticMotionPermission
from .settings import YamlSettingsStore
from .input import KeyboardInput, InputCommand, parse_command

__all__ = [
    'ConsolePresenter',
    'TraceOrientationSensor',
    'StaticMotionPermission',
    'YamlSettingsStore',
    'KeyboardInput',
    'InputCommand',
    'parse_command'
]
