"""
设置存储实现模块
Settings Store Implementation
"""
from .yaml_settings_store import YamlSettingsStore
from ...factory.device_factory import DeviceFactory

DeviceFactory.register('settings_store', 'yaml', YamlSettingsStore)

__all__ = ['YamlSettingsStore']
