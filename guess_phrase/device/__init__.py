"""
设备协作层模块
Device Collaborator Layer
"""
from .base import (
    PresenterBase, OrientationSensorBase, OrientationSample, SensorSubscription,
    MotionPermissionBase, SettingsStoreBase
)
from .factory.device_factory import DeviceFactory

__all__ = [
    'PresenterBase',
    'OrientationSensorBase',
    'OrientationSample',
    'SensorSubscription',
    'MotionPermissionBase',
    'SettingsStoreBase',
    'DeviceFactory'
]
