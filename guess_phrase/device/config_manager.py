"""
设备配置管理模块
Device Configuration Manager
"""
from typing import Dict, Any, Optional
from pathlib import Path
from ..utils.config_loader import ConfigLoader
from ..utils.logger import setup_logger
from .factory.device_factory import DeviceFactory
from .base.presenter_base import PresenterBase
from .base.orientation_sensor_base import OrientationSensorBase
from .base.motion_permission_base import MotionPermissionBase
from .base.settings_store_base import SettingsStoreBase
from . import implementations  # noqa: F401  导入即注册全部实现

logger = setup_logger("GTP.DeviceConfigManager")

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yaml"


class DeviceConfigManager:
    """设备配置管理器，负责加载配置和创建协作设备实例"""

    def __init__(self, config_path: Optional[str] = None,
                 config: Optional[Dict[str, Any]] = None):
        """
        初始化设备配置管理器

        Args:
            config_path: 配置文件路径，如果为None则使用默认路径
            config: 已加载的配置（给定时不再读文件）
        """
        self.config_path = str(config_path or DEFAULT_CONFIG_PATH)
        self.config: Dict[str, Any] = dict(config) if config is not None else {}
        self._presenter: Optional[PresenterBase] = None
        self._orientation_sensor: Optional[OrientationSensorBase] = None
        self._motion_permission: Optional[MotionPermissionBase] = None
        self._settings_store: Optional[SettingsStoreBase] = None

    def load_config(self) -> bool:
        """
        加载配置文件

        Returns:
            bool: 加载是否成功
        """
        try:
            self.config = ConfigLoader.load_config(self.config_path)
            logger.info("设备配置加载成功")
            return True
        except Exception as e:
            logger.error(f"设备配置加载失败: {e}")
            return False

    def _create(self, category: str, label: str):
        """
        按配置创建某类设备

        Args:
            category: 设备类别（同时是配置键）
            label: 日志中的名称

        Returns:
            设备实例，未配置或失败返回None
        """
        device_config = ConfigLoader.get_device_config(self.config, category)
        if not device_config:
            logger.info(f"配置文件中未找到{label}配置")
            return None

        device_type = device_config.get('type')
        if not device_type:
            logger.error(f"{label}配置中未指定类型")
            return None

        try:
            # 移除type字段，因为它不是设备实例的参数
            kwargs = {k: v for k, v in device_config.items() if k != 'type'}
            device = DeviceFactory.create(category, device_type, kwargs)
            logger.info(f"成功创建{label}实例: {device_type}")
            return device
        except Exception as e:
            logger.error(f"创建{label}实例失败: {e}")
            return None

    def create_presenter(self) -> Optional[PresenterBase]:
        """根据配置创建展示层实例"""
        self._presenter = self._create('presenter', '展示层')
        return self._presenter

    def create_orientation_sensor(self) -> Optional[OrientationSensorBase]:
        """根据配置创建姿态传感器实例"""
        self._orientation_sensor = self._create('orientation_sensor', '姿态传感器')
        return self._orientation_sensor

    def create_motion_permission(self) -> Optional[MotionPermissionBase]:
        """根据配置创建运动权限实例"""
        self._motion_permission = self._create('motion_permission', '运动权限')
        return self._motion_permission

    def create_settings_store(self) -> Optional[SettingsStoreBase]:
        """根据配置创建设置存储实例"""
        self._settings_store = self._create('settings_store', '设置存储')
        return self._settings_store

    def create_all_devices(self) -> bool:
        """
        创建所有设备实例

        Returns:
            bool: 展示层是否创建成功（其余设备都是可选的）
        """
        self.create_orientation_sensor()
        self.create_motion_permission()
        self.create_settings_store()
        return self.create_presenter() is not None

    def get_presenter(self) -> Optional[PresenterBase]:
        """获取展示层实例"""
        return self._presenter

    def get_orientation_sensor(self) -> Optional[OrientationSensorBase]:
        """获取姿态传感器实例"""
        return self._orientation_sensor

    def get_motion_permission(self) -> Optional[MotionPermissionBase]:
        """获取运动权限实例"""
        return self._motion_permission

    def get_settings_store(self) -> Optional[SettingsStoreBase]:
        """获取设置存储实例"""
        return self._settings_store

    def get_config(self) -> Dict[str, Any]:
        """获取完整配置"""
        return self.config.copy()
