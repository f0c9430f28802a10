"""
回合计时器
Round Timer
"""
import math
import sched
from typing import Callable, Optional
from ...utils.logger import setup_logger
from ...utils.scheduling import cancel_event

logger = setup_logger("GTP.RoundTimer")


class RoundTimer:
    """
    基于墙钟的倒计时

    剩余时间每次都从启动时刻重新计算，轮询间隔只影响刷新频率，
    漏掉的轮询不会累积误差。
    """

    POLL_INTERVAL = 0.25

    def __init__(self,
                 scheduler: sched.scheduler,
                 on_expired: Callable[[], None],
                 on_tick: Optional[Callable[[int], None]] = None,
                 clock: Optional[Callable[[], float]] = None,
                 poll_interval: float = POLL_INTERVAL):
        """
        初始化计时器

        Args:
            scheduler: 事件调度器
            on_expired: 时间耗尽回调（每次启动最多触发一次）
            on_tick: 剩余秒数刷新回调（可选）
            clock: 时钟函数（默认使用调度器的时钟）
            poll_interval: 轮询间隔（秒）
        """
        self.scheduler = scheduler
        self.on_expired = on_expired
        self.on_tick = on_tick
        self.clock = clock or scheduler.timefunc
        self.poll_interval = poll_interval

        self.duration = 0
        self.time_left = 0
        self._started_at: Optional[float] = None
        self._event: Optional[sched.Event] = None

    @property
    def is_running(self) -> bool:
        """计时器是否在运行"""
        return self._started_at is not None

    def start(self, duration_seconds: int):
        """
        开始倒计时，已在运行时重新开始

        Args:
            duration_seconds: 倒计时秒数
        """
        self.stop()
        self.duration = int(duration_seconds)
        self.time_left = self.duration
        self._started_at = self.clock()
        self._schedule_poll()
        logger.info(f"计时开始: {self.duration} 秒")

    def stop(self):
        """停止计时，未运行时调用无副作用"""
        cancel_event(self.scheduler, self._event)
        self._event = None
        if self._started_at is not None:
            logger.debug(f"计时停止，剩余 {self.time_left} 秒")
        self._started_at = None

    def elapsed(self) -> float:
        """已经过的秒数（未运行返回0）"""
        if self._started_at is None:
            return 0.0
        return max(0.0, self.clock() - self._started_at)

    def _schedule_poll(self):
        self._event = self.scheduler.enter(self.poll_interval, 0, self._poll)

    def _poll(self):
        self._event = None
        if self._started_at is None:
            return

        elapsed_seconds = math.floor(self.elapsed())
        self.time_left = max(0, self.duration - elapsed_seconds)

        if self.on_tick:
            self.on_tick(self.time_left)

        if self.time_left <= 0:
            logger.info("计时结束")
            self.stop()
            self.on_expired()
            return

        self._schedule_poll()
