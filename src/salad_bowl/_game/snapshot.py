# Area: Game
"""
salad_bowl._game.snapshot — Game state snapshot builder
=======================================================

Builds the serializable read-only snapshot handed to observers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from ..models import Player, RoundScore
from ..types import (
    BonusView,
    CorrectEventView,
    GameSnapshot,
    PlayerStatsView,
    PlayerView,
    ScoresView,
    TeamScoreView,
)

if TYPE_CHECKING:
    from .coordinator import GameFlowCoordinator


def build_snapshot(game: "GameFlowCoordinator") -> GameSnapshot:
    """Build a snapshot of the whole game."""
    turn = game.turn
    session = turn.session
    head = game.deck.head
    reason = turn.last_turn_end_reason
    return {
        "stage": game.stage.value,
        "round_number": game.current_round.value,
        "round_title": game.current_round.title,
        "current_team": game.current_team.value,
        "clue_giver": _player_view(game.clue_giver),
        "turn_state": turn.state.value,
        "time_remaining": turn.time_remaining,
        "deck_head": head.text if head else None,
        "deck_size": len(game.deck),
        "skip_count": session.skip_count if session else 0,
        "correct_this_turn": session.correct_count if session else 0,
        "scores": _scores_view(game),
        "player_stats": _stats_views(game),
        "turn_end_reason": reason.value if reason else None,
        "recap": _recap_views(game),
        "bonus": _bonus_view(game),
    }


def _player_view(player: Optional[Player]) -> Optional[PlayerView]:
    if player is None:
        return None
    return {"id": player.id, "display_name": player.display_name, "team": player.team.value}


def _team_score(score: RoundScore) -> TeamScoreView:
    return {"team_a": score.team_a, "team_b": score.team_b}


def _scores_view(game: "GameFlowCoordinator") -> ScoresView:
    ledger = game.ledger
    rounds: Dict[int, TeamScoreView] = {
        number: _team_score(score) for number, score in sorted(ledger.round_scores.items())
    }
    return {"rounds": rounds, "cumulative": _team_score(ledger.cumulative)}


def _stats_views(game: "GameFlowCoordinator") -> List[PlayerStatsView]:
    views: List[PlayerStatsView] = []
    for player in sorted(game.players, key=lambda p: p.key):
        stats = game.ledger.stats_for(player)
        views.append({
            "player_id": player.id,
            "display_name": player.display_name,
            "correct_count": stats.correct_count,
            "total_time_spent_seconds": stats.total_time_spent_seconds,
            "turns_taken": stats.turns_taken,
            "fastest_answer": stats.fastest_answer,
            "slowest_answer": stats.slowest_answer,
            "average_answer_time": stats.average_answer_time,
        })
    return views


def _recap_views(game: "GameFlowCoordinator") -> List[CorrectEventView]:
    return [
        {
            "id": event.id,
            "text": event.card.text,
            "duration_seconds": event.duration_seconds,
            "highlighted": event.highlighted,
        }
        for event in game.turn.correct_events
    ]


def _bonus_view(game: "GameFlowCoordinator") -> BonusView:
    holder = game.turn.bonus_time_player
    return {
        "player_id": holder.id if holder else None,
        "seconds": game.turn.saved_bonus_time,
    }
