# Area: Turn
"""
salad_bowl._turn.enums — Turn State Machine Enums
=================================================

Defines the states and events of a single turn, and the reasons a
turn can end.
"""

from enum import Enum


class TurnState(Enum):
    """
    States of the turn state machine.

    State transitions:
    IDLE -> READY (on PREPARE)
    READY -> ACTIVE (on BEGIN)
    ACTIVE -> PAUSED (on PAUSE)
    PAUSED -> ACTIVE (on RESUME)
    ACTIVE -> ENDED (on END)
    PAUSED -> ENDED (on END, manual end from the pause screen)
    ENDED -> READY (on PREPARE, next turn)
    Any state -> IDLE (on reset)
    """
    IDLE = "IDLE"
    READY = "READY"
    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    ENDED = "ENDED"


class TurnEvent(Enum):
    """
    Events that trigger turn state transitions.

    - PREPARE: clue-giver chosen, device handed over
    - BEGIN: clue-giver starts the clock
    - PAUSE / RESUME: pause screen opened / closed
    - END: timer expired, manual end, skip cycle or deck completed
    """
    PREPARE = "PREPARE"
    BEGIN = "BEGIN"
    PAUSE = "PAUSE"
    RESUME = "RESUME"
    END = "END"


class TurnEndReason(Enum):
    """Why a turn ended."""
    TIMER_EXPIRED = "timerExpired"
    MANUAL = "manual"
    SKIP_CYCLE_COMPLETE = "skipCycleComplete"
    COMPLETED_ALL_CARDS = "completedAllCards"
