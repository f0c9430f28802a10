"""
固定结果的运动权限实现
Static Motion Permission Implementation

桌面环境没有运动权限弹窗，用配置模拟“需要授权/用户是否同意”。
"""
from ...base.motion_permission_base import MotionPermissionBase
from ....utils.logger import setup_logger

logger = setup_logger("GTP.StaticPermission")


class StaticMotionPermission(MotionPermissionBase):
    """
    配置驱动的权限门

    配置示例（config.yaml 中）：

    motion_permission:
      type: "static"
      required: true     # 是否需要显式授权
      grant: true        # 请求时是否同意
    """

    def __init__(self, required: bool = False, grant: bool = True, granted: bool = False):
        """
        Args:
            required: 是否需要显式授权
            grant: request() 的结果
            granted: 初始是否已授权
        """
        self.required = bool(required)
        self.grant = bool(grant)
        self._granted = bool(granted) or not self.required
        self.request_count = 0

    def requires_permission(self) -> bool:
        return self.required

    def is_granted(self) -> bool:
        return self._granted

    def request(self) -> bool:
        self.request_count += 1
        if not self.required:
            self._granted = True
            return True

        self._granted = self.grant
        logger.info(f"运动权限请求结果: {'已同意' if self._granted else '已拒绝'}")
        return self._granted
