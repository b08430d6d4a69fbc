# Area: Scoring
"""
salad_bowl._scoring.results — Round highlights and final game result
====================================================================

Builds the short highlight lines shown between rounds and the final
GameResult once round 3 is over.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..models import CorrectEvent, RoundScore, Team
from .ledger import ScoringLedger

STREAK_THRESHOLD = 3


@dataclass
class TeamTotals:
    team_a: int
    team_b: int


@dataclass
class GameResult:
    """
    Final result of a game.

    Attributes:
        totals: Cumulative team scores
        rounds: Per-round team scores keyed by round number
        winner: Winning team, or None on a tie
        is_tie: True if both teams finished level
    """

    totals: TeamTotals
    rounds: Dict[int, TeamTotals] = field(default_factory=dict)
    winner: Optional[Team] = None
    is_tie: bool = False


def round_highlights(
    score: RoundScore,
    last_turn_events: Sequence[CorrectEvent],
    limit: int,
) -> List[str]:
    """Highlight lines for a finished round, at most ``limit`` of them."""
    out: List[str] = []

    if score.team_a > score.team_b:
        out.append(f"Team A led this round by {score.team_a - score.team_b}.")
    elif score.team_b > score.team_a:
        out.append(f"Team B led this round by {score.team_b - score.team_a}.")
    else:
        out.append("Round tied — nice balance.")

    counted = [e for e in last_turn_events if e.highlighted]
    if counted:
        slowest = max(counted, key=lambda e: e.duration_seconds)
        out.append(
            f"“{slowest.card.text}” took {round(slowest.duration_seconds)}s — slowest last turn."
        )

    if len(counted) >= STREAK_THRESHOLD:
        out.append(f"Fast streak: {len(counted)} in a row!")

    return out[:max(0, limit)]


def build_game_result(ledger: ScoringLedger) -> GameResult:
    return GameResult(
        totals=TeamTotals(ledger.cumulative.team_a, ledger.cumulative.team_b),
        rounds={
            number: TeamTotals(score.team_a, score.team_b)
            for number, score in sorted(ledger.round_scores.items())
        },
        winner=ledger.leader(),
        is_tie=ledger.is_tie,
    )
