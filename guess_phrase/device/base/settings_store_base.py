"""
设置存储抽象基类
Settings Store Base Class
"""
from abc import ABC, abstractmethod
from typing import Any, Dict


class SettingsStoreBase(ABC):
    """键值偏好设置存储抽象基类"""

    @abstractmethod
    def load(self) -> Dict[str, Any]:
        """
        读取全部已保存设置

        Returns:
            Dict[str, Any]: 设置字典，没有保存过时为空字典
        """
        pass

    @abstractmethod
    def save(self, partial: Dict[str, Any]) -> bool:
        """
        合并保存部分设置

        Args:
            partial: 需要更新的键值

        Returns:
            bool: 保存是否成功
        """
        pass
