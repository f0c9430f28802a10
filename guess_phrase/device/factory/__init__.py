"""
设备工厂模块
Device Factory Module
"""
from .device_factory import DeviceFactory

__all__ = ['DeviceFactory']
