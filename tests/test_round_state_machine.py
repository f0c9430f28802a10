"""
回合状态机测试
Round State Machine Tests
"""
from guess_phrase.game import RoundMode, RoundStateMachine


def test_valid_lifecycle():
    machine = RoundStateMachine()
    assert machine.is_in_state(RoundMode.SETUP)
    assert machine.transition_to(RoundMode.RUNNING)
    assert machine.transition_to(RoundMode.FINISHED)
    assert machine.can_transition_to(RoundMode.SETUP)
    assert machine.transition_to(RoundMode.RUNNING)
    assert machine.get_current_state() is RoundMode.RUNNING


def test_invalid_transitions_refused():
    machine = RoundStateMachine()
    assert not machine.transition_to(RoundMode.FINISHED)
    assert not machine.can_transition_to(RoundMode.SETUP)
    machine.transition_to(RoundMode.RUNNING)
    assert not machine.transition_to(RoundMode.SETUP)
    assert not machine.transition_to(RoundMode.RUNNING)
    assert machine.get_current_state() is RoundMode.RUNNING
