"""
姿态传感器抽象基类
Orientation Sensor Base Class
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional
from ...utils.logger import setup_logger

logger = setup_logger("GTP.OrientationSensor")


@dataclass(frozen=True)
class OrientationSample:
    """一次姿态采样，单位为度；任何字段都可能缺失"""
    beta: Optional[float] = None      # 前后倾角
    gamma: Optional[float] = None     # 左右倾角
    alpha: Optional[float] = None     # 水平朝向
    timestamp: Optional[float] = None


SampleCallback = Callable[[OrientationSample], None]


class SensorSubscription:
    """传感器订阅句柄，close() 之后不再收到采样"""

    def __init__(self, sensor: "OrientationSensorBase", callback: SampleCallback):
        self._sensor = sensor
        self.callback = callback
        self.active = True

    def close(self):
        """取消订阅，可重复调用"""
        if not self.active:
            return
        self.active = False
        self._sensor._remove_subscription(self)


class OrientationSensorBase(ABC):
    """姿态传感器抽象基类，定义所有传感器必须实现的接口"""

    def __init__(self):
        self._subscriptions: List[SensorSubscription] = []

    @abstractmethod
    def connect(self) -> bool:
        """
        连接传感器

        Returns:
            bool: 连接是否成功
        """
        pass

    @abstractmethod
    def disconnect(self) -> bool:
        """
        断开传感器

        Returns:
            bool: 断开是否成功
        """
        pass

    @abstractmethod
    def is_connected(self) -> bool:
        """
        检查传感器是否已连接

        Returns:
            bool: 连接状态
        """
        pass

    def subscribe(self, callback: SampleCallback) -> SensorSubscription:
        """
        订阅姿态采样

        Args:
            callback: 采样回调

        Returns:
            SensorSubscription: 订阅句柄
        """
        subscription = SensorSubscription(self, callback)
        self._subscriptions.append(subscription)
        logger.debug(f"新增订阅，当前订阅数: {len(self._subscriptions)}")
        return subscription

    @property
    def subscriber_count(self) -> int:
        """当前订阅数"""
        return len(self._subscriptions)

    def emit(self, sample: OrientationSample):
        """
        向所有订阅者分发采样

        Args:
            sample: 姿态采样
        """
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription.callback(sample)

    def _remove_subscription(self, subscription: SensorSubscription):
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
            logger.debug(f"订阅已关闭，当前订阅数: {len(self._subscriptions)}")

    def get_status(self) -> dict:
        """
        获取传感器状态信息（可选实现）

        Returns:
            dict: 状态信息字典
        """
        return {
            "connected": self.is_connected(),
            "subscribers": self.subscriber_count,
            "type": self.__class__.__name__
        }
