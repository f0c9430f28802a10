"""
YAML 设置存储实现
YAML Settings Store Implementation
"""
from pathlib import Path
from typing import Any, Dict
from ...base.settings_store_base import SettingsStoreBase
from ....utils.config_loader import ConfigLoader
from ....utils.exceptions import SettingsException
from ....utils.logger import setup_logger

logger = setup_logger("GTP.YamlSettingsStore")

DEFAULT_SETTINGS_PATH = "~/.guess_phrase/settings.yaml"


class YamlSettingsStore(SettingsStoreBase):
    """把偏好设置合并写入一个 YAML 文件"""

    def __init__(self, path: str = DEFAULT_SETTINGS_PATH):
        """
        Args:
            path: 设置文件路径
        """
        self.path = str(Path(path).expanduser())

    def load(self) -> Dict[str, Any]:
        """
        读取设置，文件不存在或损坏时返回空字典

        Returns:
            Dict[str, Any]: 设置字典
        """
        if not Path(self.path).exists():
            return {}
        try:
            return ConfigLoader.load_config(self.path)
        except Exception as e:
            logger.warning(f"读取设置失败，使用默认设置: {e}")
            return {}

    def save(self, partial: Dict[str, Any]) -> bool:
        """
        合并保存部分设置

        Args:
            partial: 需要更新的键值

        Returns:
            bool: 保存是否成功

        Raises:
            SettingsException: 写入失败
        """
        current = self.load()
        current.update(partial)
        if not ConfigLoader.save_config(current, self.path):
            raise SettingsException("写入设置文件失败", path=self.path)
        logger.debug(f"设置已保存: {sorted(partial.keys())}")
        return True
