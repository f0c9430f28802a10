"""
测试公共夹具
Shared Test Fixtures
"""
import sched
import sys
from pathlib import Path

import pytest

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from guess_phrase.device.base import PresenterBase, OrientationSensorBase
from guess_phrase.device.implementations import StaticMotionPermission
from guess_phrase.game import RoundController, GameSettings, DeckEntry


class ManualClock:
    """手动推进的时钟，驱动 sched.scheduler 做确定性测试"""

    def __init__(self, start: float = 100.0):
        self.now = start
        self.scheduler = sched.scheduler(self, self.sleep)

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float):
        self.now += max(0.0, seconds)

    def advance(self, seconds: float):
        """推进时间并按时间顺序执行到期事件"""
        target = self.now + seconds
        while self.scheduler.queue and self.scheduler.queue[0].time <= target:
            self.now = max(self.now, self.scheduler.queue[0].time)
            self.scheduler.run(blocking=False)
        self.now = target


class RecordingPresenter(PresenterBase):
    """记录所有展示回调"""

    def __init__(self):
        self.phrases = []
        self.actions = []
        self.phases = []
        self.times = []
        self.finished = []

    def on_phrase_shown(self, entry):
        self.phrases.append(entry)

    def on_action_applied(self, action, index, state):
        self.actions.append((action, index, state.shown, state.got, state.passed))

    def on_status_text(self, phase):
        self.phases.append(phase)

    def on_time_left(self, seconds):
        self.times.append(seconds)

    def on_round_finished(self, results):
        self.finished.append(results)


class FakeSensor(OrientationSensorBase):
    """内存中的姿态传感器"""

    def __init__(self):
        super().__init__()
        self._connected = True

    def connect(self) -> bool:
        self._connected = True
        return True

    def disconnect(self) -> bool:
        self._connected = False
        return True

    def is_connected(self) -> bool:
        return self._connected


class MemorySettingsStore:
    """记录保存请求的设置存储（鸭子类型即可）"""

    def __init__(self, fail: bool = False):
        self.saved = []
        self.fail = fail

    def load(self):
        merged = {}
        for partial in self.saved:
            merged.update(partial)
        return merged

    def save(self, partial):
        if self.fail:
            raise OSError("disk full")
        self.saved.append(dict(partial))
        return True


def make_deck(count: int = 3):
    return [DeckEntry(f"phrase {i}", f"hint {i}") for i in range(count)]


@pytest.fixture()
def clock():
    return ManualClock()


@pytest.fixture()
def presenter():
    return RecordingPresenter()


@pytest.fixture()
def sensor():
    return FakeSensor()


@pytest.fixture()
def settings_store():
    return MemorySettingsStore()


@pytest.fixture()
def deck():
    return make_deck(3)


@pytest.fixture()
def make_controller(clock, presenter, sensor, settings_store):
    """按需定制的回合控制器工厂"""

    def _make(permission=None, **settings_kwargs):
        settings_kwargs.setdefault('shuffle_on_start', False)
        return RoundController(
            scheduler=clock.scheduler,
            presenter=presenter,
            settings=GameSettings(**settings_kwargs),
            settings_store=settings_store,
            motion_permission=permission or StaticMotionPermission(),
            orientation_sensor=sensor,
            clock=clock
        )

    return _make


@pytest.fixture()
def controller(make_controller):
    return make_controller()
