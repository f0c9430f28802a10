"""
倾斜识别测试
Tilt Recognizer Tests
"""
import pytest

from guess_phrase.device.base import OrientationSample
from guess_phrase.game import Action, TiltPhase, TiltRecognizer
from guess_phrase.game.input_recognition.tilt_recognizer import tilt_status_text

from conftest import FakeSensor


class Harness:
    """记录识别器回调"""

    def __init__(self, running=True):
        self.running = running
        self.now = 0.0
        self.actions = []
        self.phases = []
        self.recognizer = TiltRecognizer(
            on_action=self.actions.append,
            is_running=lambda: self.running,
            clock=lambda: self.now,
            on_phase=self.phases.append
        )
        self.recognizer.enabled = True

    def feed(self, beta, at):
        self.now = at
        return self.recognizer.on_sample(OrientationSample(beta=beta))


@pytest.fixture()
def harness():
    return Harness()


def test_first_sample_sets_baseline(harness):
    assert harness.feed(35.0, 0.0) is None
    assert harness.recognizer.calibration.has_baseline
    assert harness.recognizer.calibration.neutral_beta == 35.0


def test_forward_and_backward_tilts(harness):
    harness.feed(0.0, 0.0)
    assert harness.feed(20.0, 1.0) is Action.GOT
    assert harness.phases[-1] is TiltPhase.GOT_IT
    harness.feed(0.0, 2.0)
    assert harness.feed(-20.0, 3.0) is Action.PASS
    assert harness.phases[-1] is TiltPhase.PASS
    assert harness.actions == [Action.GOT, Action.PASS]


def test_fires_once_per_excursion_until_back_to_neutral(harness):
    harness.feed(0.0, 0.0)
    assert harness.feed(25.0, 1.0) is Action.GOT

    # 刚触发后处于未上膛状态：继续前倾不触发，回到中立重新上膛
    assert harness.feed(25.0, 2.0) is None
    assert harness.feed(0.0, 3.0) is None
    assert harness.recognizer.calibration.armed
    assert harness.feed(20.0, 4.0) is Action.GOT
    assert harness.actions == [Action.GOT, Action.GOT]


def test_disarmed_excursion_then_neutral_then_tilt_fires_on_third_sample(harness):
    harness.feed(0.0, 0.0)
    harness.recognizer.disarm()

    assert harness.feed(25.0, 1.0) is None
    assert harness.feed(0.0, 2.0) is None
    assert harness.feed(20.0, 3.0) is Action.GOT
    assert harness.actions == [Action.GOT]


def test_debounce_blocks_quick_second_excursion(harness):
    harness.feed(0.0, 0.0)
    assert harness.feed(20.0, 1.0) is Action.GOT
    harness.feed(0.0, 1.2)
    # 0.4 秒后的第二次前倾被限速
    assert harness.feed(20.0, 1.4) is None
    assert harness.actions == [Action.GOT]


def test_debounce_allows_after_min_interval(harness):
    harness.feed(0.0, 0.0)
    harness.feed(20.0, 1.0)
    harness.feed(0.0, 1.3)
    assert harness.feed(20.0, 1.0 + TiltRecognizer.MIN_INTERVAL + 0.05) is Action.GOT


def test_below_trigger_reports_direction(harness):
    harness.feed(0.0, 0.0)
    assert harness.feed(15.0, 1.0) is None
    assert harness.phases[-1] is TiltPhase.FORWARD
    assert harness.feed(-15.0, 2.0) is None
    assert harness.phases[-1] is TiltPhase.BACKWARD
    assert harness.feed(3.0, 3.0) is None
    assert harness.phases[-1] is TiltPhase.NEUTRAL


def test_baseline_drifts_slowly_inside_neutral_band(harness):
    harness.feed(10.0, 0.0)
    harness.feed(15.0, 1.0)
    assert harness.recognizer.calibration.neutral_beta == pytest.approx(10.0 + 5.0 * 0.12)


def test_baseline_ignores_large_excursions(harness):
    harness.feed(0.0, 0.0)
    harness.recognizer.disarm()
    harness.feed(16.0, 1.0)
    assert harness.recognizer.calibration.neutral_beta == 0.0


@pytest.mark.parametrize("beta", [None, float('nan'), "12", True])
def test_invalid_samples_are_dropped(harness, beta):
    assert harness.feed(beta, 0.0) is None
    assert not harness.recognizer.calibration.has_baseline


def test_disabled_or_not_running_ignores_samples(harness):
    harness.recognizer.enabled = False
    assert harness.feed(0.0, 0.0) is None
    harness.recognizer.enabled = True
    harness.running = False
    assert harness.feed(0.0, 0.0) is None
    assert not harness.recognizer.calibration.has_baseline


def test_reset_restores_fresh_calibration(harness):
    harness.feed(5.0, 0.0)
    harness.feed(30.0, 1.0)
    harness.recognizer.reset()
    calibration = harness.recognizer.calibration
    assert not calibration.has_baseline
    assert calibration.armed
    assert calibration.last_action_at is None


def test_attach_and_detach_subscription():
    harness = Harness()
    sensor = FakeSensor()
    assert harness.recognizer.attach(sensor)
    assert not harness.recognizer.attach(sensor)
    assert sensor.subscriber_count == 1

    sensor.emit(OrientationSample(beta=0.0))
    harness.now = 1.0
    sensor.emit(OrientationSample(beta=30.0))
    assert harness.actions == [Action.GOT]

    assert harness.recognizer.detach()
    assert not harness.recognizer.detach()
    assert sensor.subscriber_count == 0
    assert not harness.recognizer.is_attached


def test_status_text():
    assert tilt_status_text(True, TiltPhase.NEUTRAL) == "Tilt: On · Neutral"
    assert tilt_status_text(False) == "Tilt: Off"
    assert str(TiltPhase.NEEDS_PERMISSION) == "Needs permission"


def test_process_works_without_enable_flag():
    recognizer = TiltRecognizer(on_action=lambda a: None, is_running=lambda: False)
    recognizer.process(0.0, 0.0)
    assert recognizer.process(-30.0, 5.0) is Action.PASS
    assert recognizer.calibration.last_action_at == 5.0
