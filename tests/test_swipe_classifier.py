"""
滑动手势分类测试
Swipe Classifier Tests
"""
import pytest

from guess_phrase.game import Action, SwipeClassifier


def make_classifier(running=True):
    return SwipeClassifier(is_running=lambda: running)


def swipe(classifier, dx, dy, seconds):
    classifier.on_start(100.0, 200.0, 10.0)
    return classifier.on_end(100.0 + dx, 200.0 + dy, 10.0 + seconds)


@pytest.mark.parametrize("dx, dy, seconds, expected", [
    (50, 10, 0.3, Action.GOT),
    (-50, 10, 0.3, Action.PASS),
    (30, 0, 0.3, None),
    (50, 0, 0.5, Action.GOT),
    (50, 0, 0.9, None),
    (50, 100, 0.3, None),
])
def test_swipe_classification(dx, dy, seconds, expected):
    assert swipe(make_classifier(), dx, dy, seconds) is expected


def test_threshold_boundaries_are_inclusive():
    assert SwipeClassifier.classify(42, 80, 0.8) is Action.GOT
    assert SwipeClassifier.classify(-42, -80, 0.8) is Action.PASS
    assert SwipeClassifier.classify(41.9, 0, 0.1) is None
    assert SwipeClassifier.classify(60, 80.1, 0.1) is None


def test_end_without_start_is_ignored():
    classifier = make_classifier()
    assert classifier.on_end(300, 0, 1.0) is None


def test_second_start_keeps_first_gesture():
    classifier = make_classifier()
    assert classifier.on_start(0, 0, 0.0)
    assert not classifier.on_start(500, 0, 0.5)
    # 位移仍按第一次按下计算
    assert classifier.on_end(60, 0, 0.6) is Action.GOT


def test_gesture_is_cleared_after_end():
    classifier = make_classifier()
    classifier.on_start(0, 0, 0.0)
    classifier.on_end(10, 0, 0.1)
    assert not classifier.gesture.active
    assert classifier.on_end(100, 0, 0.2) is None


def test_ignored_when_round_not_running():
    classifier = make_classifier(running=False)
    assert not classifier.on_start(0, 0, 0.0)
    assert classifier.on_end(100, 0, 0.1) is None


def test_reset_drops_pending_gesture():
    classifier = make_classifier()
    classifier.on_start(0, 0, 0.0)
    classifier.reset()
    assert classifier.on_end(100, 0, 0.1) is None
