"""
运动权限抽象基类
Motion Permission Base Class
"""
from abc import ABC, abstractmethod


class MotionPermissionBase(ABC):
    """运动传感器权限门抽象基类"""

    @abstractmethod
    def requires_permission(self) -> bool:
        """
        平台是否要求显式授权才能读取姿态

        Returns:
            bool: 是否需要授权
        """
        pass

    @abstractmethod
    def is_granted(self) -> bool:
        """
        是否已获得授权

        Returns:
            bool: 授权状态
        """
        pass

    @abstractmethod
    def request(self) -> bool:
        """
        请求授权，结果返回前调用方不会做挂载决定

        Returns:
            bool: 是否授权成功
        """
        pass

    def is_blocking(self) -> bool:
        """需要授权但尚未获得授权"""
        return self.requires_permission() and not self.is_granted()
