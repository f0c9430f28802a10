"""
姿态轨迹回放传感器
Orientation Trace Replay Sensor

从录制好的 CSV 轨迹（表头 time,beta[,gamma]）按时间回放姿态采样，
用于桌面调试和自动化测试。缺失的数值读为 NaN，回放时变成 None。
"""
import sched
import numpy as np
from pathlib import Path
from typing import List, Optional, Sequence, Tuple
from ...base.orientation_sensor_base import OrientationSensorBase, OrientationSample
from ....utils.logger import setup_logger
from ....utils.scheduling import cancel_event

logger = setup_logger("GTP.TraceSensor")


class TraceOrientationSensor(OrientationSensorBase):
    """轨迹回放传感器实现类"""

    def __init__(self, trace_path: Optional[str] = None,
                 samples: Optional[Sequence[Tuple[float, float]]] = None,
                 time_scale: float = 1.0):
        """
        初始化轨迹回放传感器

        Args:
            trace_path: CSV 轨迹文件路径
            samples: 直接给定的 (time, beta) 序列（优先于文件）
            time_scale: 回放时间缩放（2.0 表示两倍慢）
        """
        super().__init__()
        self.trace_path = trace_path
        self.time_scale = time_scale
        self._inline_samples = samples
        self._times: Optional[np.ndarray] = None
        self._betas: Optional[np.ndarray] = None
        self._events: List[sched.Event] = []
        self._scheduler: Optional[sched.scheduler] = None
        self._connected = False

        logger.info(f"初始化轨迹传感器: trace_path={trace_path}, time_scale={time_scale}")

    def connect(self) -> bool:
        """
        加载轨迹

        Returns:
            bool: 加载是否成功
        """
        if self._connected:
            logger.warning("轨迹传感器已经连接")
            return True

        try:
            if self._inline_samples is not None:
                data = np.asarray(self._inline_samples, dtype=float).reshape(-1, 2)
                times, betas = data[:, 0], data[:, 1]
            elif self.trace_path:
                times, betas = self._load_csv(self.trace_path)
            else:
                logger.error("未指定轨迹文件")
                return False
        except (OSError, ValueError) as e:
            logger.error(f"加载姿态轨迹失败: {e}")
            return False

        order = np.argsort(times, kind='stable')
        self._times = times[order]
        self._betas = betas[order]
        self._connected = True
        logger.info(f"轨迹传感器连接成功: {len(self._times)} 个采样, "
                    f"时长 {self.duration:.2f} 秒")
        return True

    def disconnect(self) -> bool:
        """
        停止回放并释放轨迹

        Returns:
            bool: 断开是否成功
        """
        if not self._connected:
            logger.warning("轨迹传感器未连接")
            return True

        self.stop()
        self._times = None
        self._betas = None
        self._connected = False
        logger.info("轨迹传感器已断开")
        return True

    def is_connected(self) -> bool:
        """
        检查是否已加载轨迹

        Returns:
            bool: 连接状态
        """
        return self._connected and self._times is not None

    @property
    def sample_count(self) -> int:
        """采样数量"""
        return 0 if self._times is None else int(len(self._times))

    @property
    def duration(self) -> float:
        """轨迹时长（秒，已缩放）"""
        if self._times is None or len(self._times) == 0:
            return 0.0
        return float(self._times[-1] - self._times[0]) * self.time_scale

    def play(self, scheduler: sched.scheduler, start_delay: float = 0.0) -> int:
        """
        在调度器上排定全部采样

        Args:
            scheduler: 事件调度器
            start_delay: 第一个采样之前的延迟（秒）

        Returns:
            int: 排定的采样数
        """
        if not self.is_connected():
            logger.warning("轨迹传感器未连接，无法回放")
            return 0

        self.stop()
        self._scheduler = scheduler
        origin = float(self._times[0]) if len(self._times) else 0.0
        for t, beta in zip(self._times, self._betas):
            delay = start_delay + (float(t) - origin) * self.time_scale
            sample = OrientationSample(beta=None if np.isnan(beta) else float(beta))
            self._events.append(scheduler.enter(delay, 1, self.emit, (sample,)))

        logger.info(f"开始回放姿态轨迹: {len(self._events)} 个采样")
        return len(self._events)

    def stop(self):
        """取消尚未回放的采样"""
        if self._scheduler is not None:
            for event in self._events:
                cancel_event(self._scheduler, event)
        self._events = []
        self._scheduler = None

    @staticmethod
    def _load_csv(path: str) -> Tuple[np.ndarray, np.ndarray]:
        trace_file = Path(path).expanduser()
        if not trace_file.exists():
            raise FileNotFoundError(f"轨迹文件不存在: {path}")

        data = np.genfromtxt(str(trace_file), delimiter=',', names=True,
                             dtype=float, encoding='utf-8')
        data = np.atleast_1d(data)
        names = data.dtype.names or ()
        if 'time' not in names or 'beta' not in names:
            raise ValueError(f"轨迹文件缺少 time/beta 列: {path}")

        times = np.asarray(data['time'], dtype=float)
        betas = np.asarray(data['beta'], dtype=float)
        valid = ~np.isnan(times)
        return times[valid], betas[valid]

    def __enter__(self):
        """上下文管理器入口"""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """上下文管理器出口"""
        self.disconnect()
