# Area: Turn Tests
"""Tests for the turn state machine."""

import pytest

from salad_bowl._turn.enums import TurnEndReason, TurnEvent, TurnState
from salad_bowl._turn.state_machine import TRANSITIONS, TurnStateMachine


class TestTurnStateMachine:
    def test_initial_state_is_idle(self):
        assert TurnStateMachine().current_state is TurnState.IDLE

    def test_full_lifecycle(self):
        sm = TurnStateMachine()
        sm.transition(TurnEvent.PREPARE)
        assert sm.current_state is TurnState.READY
        sm.transition(TurnEvent.BEGIN)
        assert sm.current_state is TurnState.ACTIVE
        sm.transition(TurnEvent.PAUSE)
        assert sm.current_state is TurnState.PAUSED
        sm.transition(TurnEvent.RESUME)
        assert sm.current_state is TurnState.ACTIVE
        sm.transition(TurnEvent.END)
        assert sm.current_state is TurnState.ENDED

    def test_end_from_paused(self):
        sm = TurnStateMachine()
        for event in (TurnEvent.PREPARE, TurnEvent.BEGIN, TurnEvent.PAUSE, TurnEvent.END):
            sm.transition(event)
        assert sm.current_state is TurnState.ENDED

    def test_next_turn_from_ended(self):
        sm = TurnStateMachine()
        for event in (TurnEvent.PREPARE, TurnEvent.BEGIN, TurnEvent.END, TurnEvent.PREPARE):
            sm.transition(event)
        assert sm.current_state is TurnState.READY

    def test_invalid_transition_raises(self):
        sm = TurnStateMachine()
        with pytest.raises(ValueError):
            sm.transition(TurnEvent.BEGIN)
        assert sm.current_state is TurnState.IDLE

    def test_cannot_pause_when_ready(self):
        sm = TurnStateMachine()
        sm.transition(TurnEvent.PREPARE)
        assert sm.can_transition(TurnEvent.PAUSE) is False

    def test_ended_is_terminal_for_the_turn(self):
        assert set(TRANSITIONS[TurnState.ENDED]) == {TurnEvent.PREPARE}

    def test_reset(self):
        sm = TurnStateMachine()
        sm.transition(TurnEvent.PREPARE)
        sm.reset()
        assert sm.current_state is TurnState.IDLE


class TestTurnEndReason:
    def test_values(self):
        assert TurnEndReason.TIMER_EXPIRED.value == "timerExpired"
        assert TurnEndReason.MANUAL.value == "manual"
        assert TurnEndReason.SKIP_CYCLE_COMPLETE.value == "skipCycleComplete"
        assert TurnEndReason.COMPLETED_ALL_CARDS.value == "completedAllCards"
