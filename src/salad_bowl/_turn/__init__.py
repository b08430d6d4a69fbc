# Area: Turn
"""
Turn - The per-turn state machine.

This package handles:
- Turn lifecycle (ready → active ⇄ paused → ended)
- The one-second countdown
- Correct / skip actions and turn-end detection
- Bonus time
- Recap corrections (undo / un-highlight)
"""

from .enums import TurnState, TurnEvent, TurnEndReason
from .state_machine import TurnStateMachine, TRANSITIONS
from .countdown import Countdown
from .controller import TurnController, TurnSession

__all__ = [
    "TurnState",
    "TurnEvent",
    "TurnEndReason",
    "TurnStateMachine",
    "TRANSITIONS",
    "Countdown",
    "TurnController",
    "TurnSession",
]
