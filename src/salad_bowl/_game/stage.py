# Area: Game
"""
salad_bowl._game.stage — Game stages
====================================

The coarse stage the presentation layer renders.
"""

from enum import Enum


class Stage(Enum):
    """
    Stages of a game.

    SETTINGS -> INTAKE (start_intake)
    INTAKE -> ROUND_INTRO (last player submitted)
    ROUND_INTRO -> TURN_HANDOFF (start_round)
    TURN_HANDOFF -> TURN (begin_turn)
    TURN <-> TURN_PAUSED (pause / unpause)
    TURN / TURN_PAUSED -> RECAP (turn ended)
    RECAP -> TURN_HANDOFF (finalize_recap, cards left)
    RECAP -> ROUND_END / GAME_END (finalize_recap, deck empty)
    ROUND_END -> ROUND_INTRO (proceed_to_next_round)
    """
    SETTINGS = "settings"
    INTAKE = "intake"
    ROUND_INTRO = "round_intro"
    TURN_HANDOFF = "turn_handoff"
    TURN = "turn"
    TURN_PAUSED = "turn_paused"
    RECAP = "recap"
    ROUND_END = "round_end"
    GAME_END = "game_end"
