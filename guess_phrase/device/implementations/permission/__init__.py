"""
运动权限实现模块
Motion Permission Implementation
"""
from .static_permission import StaticMotionPermission
from ...factory.device_factory import DeviceFactory

DeviceFactory.register('motion_permission', 'static', StaticMotionPermission)

__all__ = ['StaticMotionPermission']
