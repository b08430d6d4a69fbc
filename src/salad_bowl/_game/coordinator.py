# Area: Game
"""
salad_bowl._game.coordinator — Game flow coordination
=====================================================

The GameFlowCoordinator is the session object a presentation layer
holds. It wires RosterBuilder, DeckEngine, TurnController and
ScoringLedger together and owns every decision between turns:

- intake sequencing, then round 1 → 2 → 3 → game end, with a fresh
  reshuffle of the full master set at the start of every round
- team alternation (A, B, A, …) and clue-giver rotation by intake order
- bonus-time priority: a player holding bonus time gives the next clue

Every action returns an ``Outcome``. After each applied action the
coordinator notifies its subscribers with a fresh snapshot.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from ..errors import Outcome, invalid, not_allowed
from ..models import Card, CorrectEvent, Player, RoundPhase, Team
from ..settings import GameSettings
from ..types import GameSnapshot
from .._content.title_source import StaticTitleSource, TitleSource
from .._intake.roster import RosterBuilder
from .._round.deck import DeckEngine
from .._scoring.ledger import ScoringLedger
from .._scoring.results import GameResult, build_game_result, round_highlights
from .._turn.controller import TurnController
from .._turn.enums import TurnEndReason
from .snapshot import build_snapshot
from .stage import Stage

logger = logging.getLogger("salad_bowl.game")

Listener = Callable[[GameSnapshot], None]


class GameFlowCoordinator:
    """
    Top-level game session.

    Attributes:
        settings: Current GameSettings
        source: TitleSource used for candidates and replacements
        stage: Current Stage
        current_round: Round being played
        current_team: Team whose turn it is (or is next)
        clue_giver: Player holding the device for the current turn
        completed_this_round: Cards finalized as correct this round
        last_turn_events: Events kept by the most recent recap
    """

    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        source: Optional[TitleSource] = None,
        rng: Optional[random.Random] = None,
    ):
        self._rng = rng or random.Random()
        self.settings = settings or GameSettings()
        self.source = source or StaticTitleSource.from_bank(rng=self._rng)
        self._listeners: List[Listener] = []
        self._build_components()

    def _build_components(self) -> None:
        self.stage = Stage.SETTINGS
        self.roster = RosterBuilder(self.settings, self.source, rng=self._rng)
        self.deck = DeckEngine(rng=self._rng)
        self.ledger = ScoringLedger()
        self.turn = TurnController(self.deck, self.ledger, on_turn_ended=self._on_turn_ended)
        self.current_round = RoundPhase.ONE
        self.current_team = self.settings.starting_team
        self.clue_giver: Optional[Player] = None
        self.completed_this_round: List[Card] = []
        self.last_turn_events: List[CorrectEvent] = []

    # ── Observation ──────────────────────────────────────────

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register for a snapshot after every applied action. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self) -> GameSnapshot:
        return build_snapshot(self)

    def _notify(self) -> None:
        if not self._listeners:
            return
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    def _applied(self, outcome: Outcome) -> Outcome:
        if outcome.ok:
            self._notify()
        else:
            logger.debug("Action rejected: %s", outcome.code)
        return outcome

    def _require(self, *stages: Stage) -> Optional[Outcome]:
        if self.stage in stages:
            return None
        return not_allowed(
            "wrong_stage",
            f"Not allowed during {self.stage.value}",
            stage=self.stage.value,
            expected=[s.value for s in stages],
        )

    # ── Read-only views ──────────────────────────────────────

    @property
    def players(self) -> List[Player]:
        return list(self.roster.players)

    @property
    def master_cards(self) -> List[Card]:
        return list(self.roster.master_cards)

    @property
    def candidates(self) -> List[Card]:
        return list(self.roster.candidates)

    @property
    def collecting_team(self) -> Team:
        return self.roster.collecting_team

    def team_roster(self, team: Team) -> List[Player]:
        return list(self.roster.team_orders[team])

    def cards_accounted_for(self) -> int:
        """Deck + finalized correct + pending recap cards for this round."""
        return len(self.deck) + len(self.completed_this_round) + len(self.turn.correct_events)

    # ── Settings ─────────────────────────────────────────────

    def update_settings(self, settings: GameSettings) -> Outcome[GameSettings]:
        blocked = self._require(Stage.SETTINGS)
        if blocked is not None:
            return blocked
        self.settings = settings
        self._build_components()
        logger.info("Settings updated: %d players, %ds timer", settings.players, settings.timer_seconds)
        return self._applied(Outcome.success(settings))

    def set_timer_seconds(self, timer_seconds: int) -> Outcome[GameSettings]:
        """Change the per-turn timer. A running turn keeps its current budget."""
        try:
            settings = self.settings.with_timer(timer_seconds)
        except PydanticValidationError as e:
            return invalid("invalid_timer", str(e.errors()[0]["msg"]), timer_seconds=timer_seconds)
        self.settings = settings
        self.roster.settings = settings
        logger.info("Timer set to %ds (applies from the next turn)", timer_seconds)
        return self._applied(Outcome.success(settings))

    # ── Intake ───────────────────────────────────────────────

    def start_intake(self) -> Outcome[List[Card]]:
        """Load the candidate pool and offer candidates to the first player."""
        blocked = self._require(Stage.SETTINGS)
        if blocked is not None:
            return blocked
        self.roster = RosterBuilder(self.settings, self.source, rng=self._rng)
        pool = self.roster.prepare_pool()
        if not pool.ok:
            return pool
        offered = self.roster.offer_candidates()
        if not offered.ok:
            return offered
        self.stage = Stage.INTAKE
        logger.info("Intake started: %d players expected", self.settings.players)
        return self._applied(offered)

    def offer_candidates(self) -> Outcome[List[Card]]:
        blocked = self._require(Stage.INTAKE)
        if blocked is not None:
            return blocked
        return self._applied(self.roster.offer_candidates())

    def toggle_pick(self, card_id: str) -> Outcome[bool]:
        blocked = self._require(Stage.INTAKE)
        if blocked is not None:
            return blocked
        return self._applied(self.roster.toggle_pick(card_id))

    def reroll_candidate(self, card_id: str) -> Outcome[Card]:
        blocked = self._require(Stage.INTAKE)
        if blocked is not None:
            return blocked
        return self._applied(self.roster.reroll(card_id))

    def submit_player(
        self,
        player_name: str,
        picked_card_ids: Optional[Sequence[str]] = None,
        manual_words: Sequence[str] = (),
        team: Optional[Team] = None,
    ) -> Outcome[Player]:
        """
        Register the player holding the device.

        When the last player is accepted the game moves to the round 1
        intro with a freshly shuffled deck. If too few candidates are left
        for the next player to pick from, the accepted player stays
        registered and the ContentSupplyShortfall is returned.
        """
        blocked = self._require(Stage.INTAKE)
        if blocked is not None:
            return blocked
        result = self.roster.intake(player_name, team, picked_card_ids, manual_words)
        if not result.ok:
            return result

        self.ledger.register_player(result.value)
        if self.roster.is_complete:
            logger.info(
                "Intake complete: %d players, %d cards",
                len(self.roster.players), len(self.roster.master_cards),
            )
            self._enter_round(RoundPhase.ONE)
            return self._applied(result)

        offered = self.roster.offer_candidates()
        if not offered.ok:
            self._notify()
            return offered
        return self._applied(result)

    # ── Rounds ───────────────────────────────────────────────

    def _enter_round(self, round_phase: RoundPhase) -> None:
        self.current_round = round_phase
        self.deck.reshuffle(self.roster.master_cards, round_phase)
        self.completed_this_round = []
        self.last_turn_events = []
        self.current_team = self.settings.starting_team
        self.clue_giver = None
        self.stage = Stage.ROUND_INTRO
        logger.info("Round %d: %s", round_phase.value, round_phase.title)

    def start_round(self) -> Outcome[Player]:
        """Leave the round intro and hand the device to the first clue-giver."""
        blocked = self._require(Stage.ROUND_INTRO)
        if blocked is not None:
            return blocked
        return self._applied(self._hand_off())

    def _select_clue_giver(self) -> Player:
        holder = self.turn.bonus_time_player
        if holder is not None:
            self.current_team = holder.team
            logger.info("Bonus time priority: %s", holder.display_name)
            return holder
        order = self.roster.team_orders[self.current_team]
        return order[self.ledger.turns_taken(self.current_team) % len(order)]

    def _hand_off(self) -> Outcome[Player]:
        self.clue_giver = self._select_clue_giver()
        prepared = self.turn.prepare_turn(
            self.clue_giver, self.current_team, self.current_round, self.settings.timer_seconds,
        )
        if not prepared.ok:
            return prepared
        self.stage = Stage.TURN_HANDOFF
        logger.info("Next clue-giver: %s (%s)", self.clue_giver.display_name, self.current_team.display_name)
        return Outcome.success(self.clue_giver)

    def _end_round(self) -> None:
        score = self.ledger.round_score(self.current_round)
        logger.info(
            "Round %d complete - A: %d, B: %d",
            self.current_round.value, score.team_a, score.team_b,
        )
        if self.current_round.next is None:
            self.stage = Stage.GAME_END
            result = self.result()
            logger.info(
                "Game over - A: %d, B: %d, winner: %s",
                result.totals.team_a, result.totals.team_b,
                result.winner.display_name if result.winner else "tie",
            )
        else:
            self.stage = Stage.ROUND_END

    def proceed_to_next_round(self) -> Outcome[RoundPhase]:
        blocked = self._require(Stage.ROUND_END)
        if blocked is not None:
            return blocked
        nxt = self.current_round.next
        if nxt is None:
            self.stage = Stage.GAME_END
            return self._applied(Outcome.success(self.current_round))
        self._enter_round(nxt)
        return self._applied(Outcome.success(nxt))

    # ── Turn actions ─────────────────────────────────────────

    def begin_turn(self) -> Outcome[int]:
        """Start the handed-off turn. An empty deck ends the round instead."""
        blocked = self._require(Stage.TURN_HANDOFF)
        if blocked is not None:
            return blocked
        if self.deck.is_empty:
            logger.info("begin_turn() on empty deck: ending round %d", self.current_round.value)
            self._end_round()
            self._notify()
            return not_allowed("deck_empty", "The deck is empty; the round is over")
        result = self.turn.begin_turn(timer_seconds=self.settings.timer_seconds)
        if result.ok:
            self.stage = Stage.TURN
        return self._applied(result)

    def mark_correct(self) -> Outcome[CorrectEvent]:
        return self._applied(self.turn.mark_correct())

    def skip_card(self) -> Outcome[Card]:
        return self._applied(self.turn.skip_card())

    def pause_turn(self) -> Outcome[int]:
        result = self.turn.pause_turn()
        if result.ok:
            self.stage = Stage.TURN_PAUSED
        return self._applied(result)

    def unpause_turn(self) -> Outcome[int]:
        result = self.turn.unpause_turn()
        if result.ok:
            self.stage = Stage.TURN
        return self._applied(result)

    def end_turn(self) -> Outcome[TurnEndReason]:
        return self._applied(self.turn.end_turn_manually())

    def tick(self) -> Outcome[int]:
        """Advance the clock by one simulated second."""
        return self._applied(self.turn.tick())

    def pump(self) -> int:
        """Deliver countdown ticks due on the monotonic clock."""
        delivered = self.turn.pump()
        if delivered:
            self._notify()
        return delivered

    def _on_turn_ended(self, reason: TurnEndReason) -> None:
        self.stage = Stage.RECAP
        logger.info("Recap: %s", reason.value)

    # ── Recap ────────────────────────────────────────────────

    def undo(self, event_id: str) -> Outcome[int]:
        blocked = self._require(Stage.RECAP)
        if blocked is not None:
            return blocked
        return self._applied(self.turn.undo(event_id))

    def toggle_highlight(self, event_id: str, highlighted: Optional[bool] = None) -> Outcome[bool]:
        blocked = self._require(Stage.RECAP)
        if blocked is not None:
            return blocked
        return self._applied(self.turn.set_highlight(event_id, highlighted))

    def recap_finalize(self) -> Outcome[List[CorrectEvent]]:
        """
        Apply recap corrections and move on.

        With cards left the other team gets the device (unless a bonus
        holder takes priority); an empty deck ends the round.
        """
        blocked = self._require(Stage.RECAP)
        if blocked is not None:
            return blocked
        result = self.turn.finalize_recap()
        if not result.ok:
            return result

        kept = result.value
        self.completed_this_round.extend(e.card for e in kept)
        self.last_turn_events = list(kept)

        if self.deck.is_empty:
            self._end_round()
            return self._applied(result)

        self.current_team = self.current_team.other
        handed = self._hand_off()
        if not handed.ok:
            return handed
        return self._applied(result)

    # ── Results ──────────────────────────────────────────────

    def round_highlights(self) -> List[str]:
        return round_highlights(
            self.ledger.round_score(self.current_round),
            self.last_turn_events,
            self.settings.highlights_per_round,
        )

    def result(self) -> GameResult:
        return build_game_result(self.ledger)

    # ── Restart ──────────────────────────────────────────────

    def rematch(self) -> Outcome[RoundPhase]:
        """Same players, teams and cards; scores, stats and bonus start over."""
        blocked = self._require(Stage.ROUND_END, Stage.GAME_END)
        if blocked is not None:
            return blocked
        self.ledger.reset()
        self.turn.reset()
        self._enter_round(RoundPhase.ONE)
        logger.info("Rematch started")
        return self._applied(Outcome.success(RoundPhase.ONE))

    def new_game(self) -> Outcome[Stage]:
        """Drop roster, cards and scores; keep settings and go back to setup."""
        self.turn.reset()
        self._build_components()
        logger.info("New game: back to settings")
        return self._applied(Outcome.success(Stage.SETTINGS))
