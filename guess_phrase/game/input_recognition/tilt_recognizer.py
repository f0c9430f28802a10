"""
倾斜手势识别器
Tilt Gesture Recognizer

把连续的前后倾角（beta）信号转成离散动作：
向前倾为猜中（GOT），向后仰为跳过（PASS）。
识别器维护一个缓慢漂移的中立基线，并用“回到中立才重新上膛”的闩锁
保证一次倾斜只触发一次动作。
"""
import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, TYPE_CHECKING
from .rate_limiter import RateLimiter
from ..game_logic.action import Action
from ...utils.logger import setup_logger

if TYPE_CHECKING:
    from ...device.base import OrientationSensorBase, OrientationSample, SensorSubscription

logger = setup_logger("GTP.TiltRecognizer")


class TiltPhase(Enum):
    """倾斜通道的粗粒度状态，供展示层显示"""
    NEUTRAL = "Neutral"
    FORWARD = "Forward"
    BACKWARD = "Backward"
    GOT_IT = "Got it"
    PASS = "Pass"
    READY = "Ready"
    OFF = "Off"
    NEEDS_PERMISSION = "Needs permission"

    def __str__(self):
        return self.value


def tilt_status_text(enabled: bool, phase: Optional[TiltPhase] = None) -> str:
    """
    生成倾斜状态栏文本

    Args:
        enabled: 倾斜控制是否开启
        phase: 附加状态（可选）

    Returns:
        str: 例如 "Tilt: On · Neutral"
    """
    base = "Tilt: On" if enabled else "Tilt: Off"
    return f"{base} · {phase.value}" if phase else base


@dataclass
class TiltCalibration:
    """识别器对“放平”姿态的内部认知，每回合开始时重置"""
    neutral_beta: float = 0.0
    has_baseline: bool = False
    armed: bool = True
    last_action_at: Optional[float] = None


class TiltRecognizer:
    """倾斜手势识别器"""

    FORWARD_TRIGGER_DELTA = 18.0    # 前倾触发阈值（度）
    BACKWARD_TRIGGER_DELTA = -18.0  # 后仰触发阈值（度）
    NEUTRAL_ZONE = 10.0             # 回到该范围内重新上膛
    BASELINE_SLACK = 4.0            # 基线平滑只在中立区外加该余量内进行
    MIN_INTERVAL = 0.7              # 两次动作最小间隔（秒）
    BASELINE_SMOOTHING = 0.12       # 基线漂移修正系数

    def __init__(self,
                 on_action: Callable[[Action], None],
                 is_running: Callable[[], bool],
                 clock: Optional[Callable[[], float]] = None,
                 on_phase: Optional[Callable[[TiltPhase], None]] = None):
        """
        初始化识别器

        Args:
            on_action: 识别出动作时的回调
            is_running: 查询回合是否进行中
            clock: 单调时钟（默认 time.monotonic）
            on_phase: 状态文本回调（可选）
        """
        self.on_action = on_action
        self.is_running = is_running
        self.clock = clock or time.monotonic
        self.on_phase = on_phase

        self.enabled = False
        self.calibration = TiltCalibration()
        self.rate_limiter = RateLimiter(self.MIN_INTERVAL)
        self._subscription: Optional["SensorSubscription"] = None

    # ------------------------------------------------------------------
    # 生命周期
    # ------------------------------------------------------------------

    def reset(self):
        """重置校准（每回合开始调用）"""
        self.calibration = TiltCalibration()
        logger.debug("倾斜校准已重置")

    def disarm(self):
        """回合结束时解除上膛"""
        self.calibration.armed = False

    @property
    def is_attached(self) -> bool:
        """是否已订阅传感器"""
        return self._subscription is not None and self._subscription.active

    def attach(self, sensor: "OrientationSensorBase") -> bool:
        """
        订阅传感器

        Args:
            sensor: 姿态传感器

        Returns:
            bool: 本次是否新建了订阅
        """
        if self.is_attached:
            return False
        self._subscription = sensor.subscribe(self.on_sample)
        logger.info("倾斜识别已挂载")
        return True

    def detach(self) -> bool:
        """
        取消订阅

        Returns:
            bool: 本次是否确实取消了订阅
        """
        if self._subscription is None:
            return False
        self._subscription.close()
        self._subscription = None
        logger.info("倾斜识别已卸载")
        return True

    # ------------------------------------------------------------------
    # 采样处理
    # ------------------------------------------------------------------

    def on_sample(self, sample: "OrientationSample") -> Optional[Action]:
        """
        处理一次姿态采样

        Args:
            sample: 姿态采样

        Returns:
            Optional[Action]: 本次触发的动作
        """
        if not self.enabled or not self.is_running():
            return None

        beta = sample.beta
        if not _is_number(beta):
            # 缺少倾角字段，直接丢弃
            logger.debug(f"丢弃无效采样: beta={beta!r}")
            return None

        action = self.process(float(beta), self.clock())
        if action is not None:
            logger.info(f"倾斜识别为 {action}")
            self.on_action(action)
        return action

    def process(self, beta: float, now: float) -> Optional[Action]:
        """
        核心状态机：校准、上膛闩锁、限速、触发

        Args:
            beta: 前后倾角（度）
            now: 当前时刻（秒）

        Returns:
            Optional[Action]: 触发的动作
        """
        calibration = self.calibration
        self._calibrate(beta)
        delta = beta - calibration.neutral_beta

        if not calibration.armed:
            if abs(delta) <= self.NEUTRAL_ZONE:
                calibration.armed = True
                self._report(TiltPhase.NEUTRAL)
            else:
                self._report(TiltPhase.FORWARD if delta > 0 else TiltPhase.BACKWARD)
            return None

        if not self.rate_limiter.allows(calibration.last_action_at, now):
            wait = self.rate_limiter.remaining(calibration.last_action_at, now)
            logger.debug(f"倾斜限速中，还需 {wait:.2f} 秒")
            return None

        if delta >= self.FORWARD_TRIGGER_DELTA:
            return self._fire(Action.GOT, now)

        if delta <= self.BACKWARD_TRIGGER_DELTA:
            return self._fire(Action.PASS, now)

        if abs(delta) <= self.NEUTRAL_ZONE:
            self._report(TiltPhase.NEUTRAL)
        else:
            self._report(TiltPhase.FORWARD if delta > 0 else TiltPhase.BACKWARD)
        return None

    def _calibrate(self, beta: float):
        calibration = self.calibration
        if not calibration.has_baseline:
            # 第一次采样即定义“放平”
            calibration.neutral_beta = beta
            calibration.has_baseline = True
            return

        delta = beta - calibration.neutral_beta
        if abs(delta) <= self.NEUTRAL_ZONE + self.BASELINE_SLACK:
            calibration.neutral_beta += delta * self.BASELINE_SMOOTHING

    def _fire(self, action: Action, now: float) -> Action:
        self.calibration.armed = False
        self.calibration.last_action_at = now
        self._report(TiltPhase.GOT_IT if action is Action.GOT else TiltPhase.PASS)
        return action

    def _report(self, phase: TiltPhase):
        if self.on_phase and self.is_running():
            self.on_phase(phase)


def _is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)
