"""
单线程事件调度工具
Single-threaded Event Scheduling Utility

所有定时回调（计时器轮询、动作反馈延迟、轨迹回放）都挂在同一个
sched.scheduler 上，由应用主循环以非阻塞方式驱动。
"""
import sched
import time
from typing import Callable, Optional


def create_scheduler(clock: Optional[Callable[[], float]] = None) -> sched.scheduler:
    """
    创建调度器

    Args:
        clock: 单调时钟函数（默认 time.monotonic）

    Returns:
        sched.scheduler: 调度器实例
    """
    return sched.scheduler(clock or time.monotonic, time.sleep)


def cancel_event(scheduler: sched.scheduler, event: Optional[sched.Event]) -> bool:
    """
    取消已排队的事件，事件已执行或已取消时不做任何事

    Args:
        scheduler: 调度器
        event: 待取消事件

    Returns:
        bool: 是否确实从队列中移除
    """
    if event is None:
        return False
    try:
        scheduler.cancel(event)
        return True
    except ValueError:
        # 事件已不在队列中
        return False
