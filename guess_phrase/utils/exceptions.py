"""
自定义异常类
Custom Exception Classes
"""
from typing import Optional


class GameException(Exception):
    """游戏逻辑异常"""
    def __init__(self, message: str, game_state: Optional[str] = None):
        super().__init__(message)
        self.game_state = game_state
        self.message = message


class ValidationError(GameException):
    """回合参数校验失败（如空词库），唯一需要调用方处理的异常"""
    def __init__(self, message: str, field: Optional[str] = None,
                 game_state: Optional[str] = None):
        super().__init__(message, game_state=game_state)
        self.field = field


class DeviceException(Exception):
    """设备相关异常基类"""
    def __init__(self, message: str, device_type: Optional[str] = None):
        super().__init__(message)
        self.device_type = device_type
        self.message = message


class SensorUnavailable(DeviceException):
    """姿态传感器不可用或数据缺失"""
    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, device_type="orientation_sensor")
        self.field = field


class PermissionDenied(DeviceException):
    """运动传感器权限被拒绝"""
    def __init__(self, message: str):
        super().__init__(message, device_type="motion_permission")


class SettingsException(Exception):
    """设置持久化异常"""
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
        self.message = message


class ConfigurationException(Exception):
    """配置异常"""
    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key
        self.message = message
