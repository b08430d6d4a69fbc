# Area: Turn
"""
salad_bowl._turn.state_machine — Turn State Machine
===================================================

Tracks which of IDLE / READY / ACTIVE / PAUSED / ENDED a turn is in and
validates transitions. Exactly one state holds at any time.
"""

import logging

from .enums import TurnState, TurnEvent

logger = logging.getLogger("salad_bowl.turn.state_machine")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    TurnState.IDLE: {
        TurnEvent.PREPARE: TurnState.READY,
    },
    TurnState.READY: {
        TurnEvent.PREPARE: TurnState.READY,
        TurnEvent.BEGIN: TurnState.ACTIVE,
    },
    TurnState.ACTIVE: {
        TurnEvent.PAUSE: TurnState.PAUSED,
        TurnEvent.END: TurnState.ENDED,
    },
    TurnState.PAUSED: {
        TurnEvent.RESUME: TurnState.ACTIVE,
        TurnEvent.END: TurnState.ENDED,
    },
    TurnState.ENDED: {
        TurnEvent.PREPARE: TurnState.READY,
    },
}


class TurnStateMachine:
    """
    State machine for one turn at a time.

    Attributes:
        current_state: The current state of the turn
    """

    def __init__(self):
        """Initialize state machine in IDLE."""
        self.current_state = TurnState.IDLE

    def can_transition(self, event: TurnEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.current_state, {})

    def transition(self, event: TurnEvent) -> TurnState:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            ValueError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.value} from {self.current_state.value}"
            )
        previous = self.current_state
        self.current_state = TRANSITIONS[previous][event]
        logger.debug("Turn: %s → %s", previous.value, self.current_state.value)
        return self.current_state

    def reset(self) -> None:
        """Reset state machine to IDLE."""
        self.current_state = TurnState.IDLE
