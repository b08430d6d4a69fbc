"""
salad_bowl.types — TypedDict schemas for state snapshots
========================================================

This module documents the exact structure of the read-only snapshot a
presentation layer receives after every action (or by polling
``GameFlowCoordinator.snapshot()``).

All types are exported from the main package:

    from salad_bowl import GameSnapshot, ScoresView, ...

Use __annotations__ to inspect fields:

    >>> TeamScoreView.__annotations__
    {'team_a': int, 'team_b': int}
"""

from typing import Dict, List, Optional, TypedDict


class PlayerView(TypedDict):
    """A player as shown on screen."""
    id: str
    display_name: str
    team: str               # "A" or "B"


class TeamScoreView(TypedDict):
    team_a: int
    team_b: int


class ScoresView(TypedDict):
    """Team scores.

    Fields
    ------
    rounds : Dict[int, TeamScoreView]
        Per-round scores keyed by round number (1, 2, 3).
    cumulative : TeamScoreView
        Scores across all rounds so far.
    """
    rounds: Dict[int, TeamScoreView]
    cumulative: TeamScoreView


class PlayerStatsView(TypedDict):
    player_id: str
    display_name: str
    correct_count: int
    total_time_spent_seconds: float
    turns_taken: int
    fastest_answer: Optional[float]
    slowest_answer: Optional[float]
    average_answer_time: float


class CorrectEventView(TypedDict):
    """A correct answer awaiting recap."""
    id: str
    text: str
    duration_seconds: float
    highlighted: bool


class BonusView(TypedDict):
    player_id: Optional[str]
    seconds: int


class GameSnapshot(TypedDict):
    """Full read-only view of the game.

    Fields
    ------
    stage : str
        Current game stage, e.g. "turn_handoff", "turn", "recap".
    round_number : int
        1, 2 or 3.
    turn_state : str
        "IDLE", "READY", "ACTIVE", "PAUSED" or "ENDED".
    deck_head : Optional[str]
        Text of the card currently shown to the clue-giver.
    turn_end_reason : Optional[str]
        "timerExpired", "manual", "skipCycleComplete" or
        "completedAllCards" once a turn has ended.
    """
    stage: str
    round_number: int
    round_title: str
    current_team: str
    clue_giver: Optional[PlayerView]
    turn_state: str
    time_remaining: int
    deck_head: Optional[str]
    deck_size: int
    skip_count: int
    correct_this_turn: int
    scores: ScoresView
    player_stats: List[PlayerStatsView]
    turn_end_reason: Optional[str]
    recap: List[CorrectEventView]
    bonus: BonusView
