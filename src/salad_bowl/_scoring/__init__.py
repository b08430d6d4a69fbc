# Area: Scoring
"""
Scoring - Team scores, player statistics and results.

This package handles:
- Per-round and cumulative team scores
- Turn counters for clue-giver rotation
- Per-player statistics and their recap-time reversal
- Round highlights and the final game result
"""

from .ledger import ScoringLedger
from .results import GameResult, TeamTotals, build_game_result, round_highlights

__all__ = [
    "ScoringLedger",
    "GameResult",
    "TeamTotals",
    "build_game_result",
    "round_highlights",
]
