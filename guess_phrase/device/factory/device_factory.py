"""
设备工厂类
Device Factory Class
"""
from typing import Dict, Any, Optional
from ..base.presenter_base import PresenterBase
from ..base.orientation_sensor_base import OrientationSensorBase
from ..base.motion_permission_base import MotionPermissionBase
from ..base.settings_store_base import SettingsStoreBase


class DeviceFactory:
    """设备工厂类，负责按名称创建各类协作设备实例"""

    # 类别 -> 必须继承的基类
    CATEGORIES: Dict[str, type] = {
        'presenter': PresenterBase,
        'orientation_sensor': OrientationSensorBase,
        'motion_permission': MotionPermissionBase,
        'settings_store': SettingsStoreBase,
    }

    _classes: Dict[str, Dict[str, type]] = {name: {} for name in CATEGORIES}

    @classmethod
    def register(cls, category: str, name: str, device_class: type):
        """
        注册设备类

        Args:
            category: 设备类别（presenter, orientation_sensor, motion_permission, settings_store）
            name: 设备名称（如 'console'）
            device_class: 设备类（必须继承自该类别的基类）
        """
        base_class = cls._base_for(category)
        if not issubclass(device_class, base_class):
            raise TypeError(f"{device_class} must be a subclass of {base_class.__name__}")
        cls._classes[category][name.lower()] = device_class

    @classmethod
    def create(cls, category: str, name: str, config: Optional[Dict[str, Any]] = None):
        """
        创建设备实例

        Args:
            category: 设备类别
            name: 设备名称
            config: 构造参数

        Returns:
            设备实例
        """
        cls._base_for(category)
        name_lower = name.lower()
        if name_lower not in cls._classes[category]:
            raise ValueError(f"Unknown {category}: {name}")

        device_class = cls._classes[category][name_lower]
        return device_class(**(config or {}))

    @classmethod
    def list_devices(cls, category: str) -> list:
        """
        列出某类别下已注册的设备名称

        Args:
            category: 设备类别

        Returns:
            list: 设备名称列表
        """
        cls._base_for(category)
        return list(cls._classes[category].keys())

    @classmethod
    def is_registered(cls, category: str, name: str) -> bool:
        """
        检查设备是否已注册

        Args:
            category: 设备类别
            name: 设备名称

        Returns:
            bool: 是否已注册
        """
        return name.lower() in cls._classes.get(category, {})

    @classmethod
    def _base_for(cls, category: str) -> type:
        if category not in cls.CATEGORIES:
            raise ValueError(f"Unknown device category: {category}")
        return cls.CATEGORIES[category]
