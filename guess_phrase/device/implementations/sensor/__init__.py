"""
姿态传感器实现模块
Orientation Sensor Implementation
"""
from .trace_sensor import TraceOrientationSensor
from ...factory.device_factory import DeviceFactory

# 自动注册轨迹回放传感器到工厂类
DeviceFactory.register('orientation_sensor', 'trace', TraceOrientationSensor)

__all__ = ['TraceOrientationSensor']
