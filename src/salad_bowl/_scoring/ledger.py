# Area: Scoring
"""
salad_bowl._scoring.ledger — Scores, turn counters and player stats
===================================================================

The ScoringLedger keeps per-round and cumulative team scores, how many
turns each team has taken (used for clue-giver rotation) and per-player
statistics. Corrections made during recap reverse exactly what a
correct answer added. No counter ever goes below zero.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from ..models import CorrectEvent, Player, PlayerStats, RoundPhase, RoundScore, Team

logger = logging.getLogger("salad_bowl.scoring")


class ScoringLedger:
    """
    Score book for one game.

    Attributes:
        round_scores: Team scores keyed by round number (1, 2, 3)
        cumulative: Team scores across all rounds
        team_turns: Completed turns per team
        player_stats: Statistics keyed by Player.id
    """

    def __init__(self, players: Iterable[Player] = ()) -> None:
        self.round_scores: Dict[int, RoundScore] = {}
        self.cumulative = RoundScore()
        self.team_turns: Dict[Team, int] = {Team.A: 0, Team.B: 0}
        self.player_stats: Dict[str, PlayerStats] = {}
        for player in players:
            self.register_player(player)

    def register_player(self, player: Player) -> PlayerStats:
        return self.player_stats.setdefault(player.id, PlayerStats(player_id=player.id))

    def stats_for(self, player: Player) -> PlayerStats:
        return self.register_player(player)

    def round_score(self, round_phase: RoundPhase) -> RoundScore:
        return self.round_scores.setdefault(round_phase.value, RoundScore())

    def turns_taken(self, team: Team) -> int:
        return self.team_turns[team]

    # ── Recording ────────────────────────────────────────────

    def record_correct(self, player: Player, duration_seconds: float) -> None:
        self.stats_for(player).add_correct_answer(duration_seconds)

    def record_turn_taken(self, player: Player) -> None:
        self.stats_for(player).add_turn()

    def record_turn_result(self, team: Team, round_phase: RoundPhase, correct_count: int) -> None:
        """Credit a finished turn to the acting team and advance its turn counter."""
        self.round_score(round_phase).add(team, correct_count)
        self.cumulative.add(team, correct_count)
        self.team_turns[team] += 1
        logger.info(
            "Scores updated - %s: +%d (A: %d, B: %d)",
            team.display_name, correct_count, self.cumulative.team_a, self.cumulative.team_b,
        )

    def undo_correct(self, event: CorrectEvent, player: Player, round_phase: RoundPhase) -> None:
        """Reverse one correct answer: team score and the player's stats."""
        self.round_score(round_phase).subtract(player.team, 1)
        self.cumulative.subtract(player.team, 1)
        self.stats_for(player).remove_correct_answer(event.duration_seconds)
        logger.info("Reversed '%s' for %s", event.card.text, player.display_name)

    # ── Results ──────────────────────────────────────────────

    @property
    def is_tie(self) -> bool:
        return self.cumulative.team_a == self.cumulative.team_b

    def leader(self) -> Optional[Team]:
        if self.is_tie:
            return None
        return Team.A if self.cumulative.team_a > self.cumulative.team_b else Team.B

    def reset(self) -> None:
        """Clear scores, turn counters and stats; keep registered players."""
        player_ids = list(self.player_stats)
        self.round_scores = {}
        self.cumulative = RoundScore()
        self.team_turns = {Team.A: 0, Team.B: 0}
        self.player_stats = {pid: PlayerStats(player_id=pid) for pid in player_ids}
        logger.info("Scoring ledger reset for %d players", len(player_ids))
