"""
设备抽象基类
Device Base Classes
"""
from .presenter_base import PresenterBase
from .orientation_sensor_base import (
    OrientationSensorBase, OrientationSample, SensorSubscription
)
from .motion_permission_base import MotionPermissionBase
from .settings_store_base import SettingsStoreBase

__all__ = [
    'PresenterBase',
    'OrientationSensorBase',
    'OrientationSample',
    'SensorSubscription',
    'MotionPermissionBase',
    'SettingsStoreBase'
]
