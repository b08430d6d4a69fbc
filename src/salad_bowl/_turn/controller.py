# Area: Turn
"""
salad_bowl._turn.controller — Turn lifecycle, timing and recap
==============================================================

The TurnController runs one turn at a time against the round's deck:

    prepare_turn → begin_turn → mark_correct / skip_card / tick …
                 → (pause ⇄ unpause) → end → recap (undo / highlight)
                 → finalize_recap

After every correct answer or skip the turn-end conditions are checked,
in this order:

1. skip cycle complete — ``skip_count > 0`` and
   ``skip_count + correct >= initial_deck_size``
2. deck completed — every remaining card answered; the remaining time
   is saved as bonus time for this clue-giver's next turn.

Ending a turn for any reason cancels the countdown before anything else
happens, so a late tick can never end the same turn twice.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..errors import Outcome, not_allowed
from ..models import Card, CorrectEvent, Player, RoundPhase, Team
from .._round.deck import DeckEngine
from .._scoring.ledger import ScoringLedger
from .countdown import Countdown
from .enums import TurnEndReason, TurnEvent, TurnState
from .state_machine import TurnStateMachine

logger = logging.getLogger("salad_bowl.turn")


@dataclass
class TurnSession:
    """Transient state of the current (or just-ended) turn."""

    clue_giver: Player
    team: Team
    round_phase: RoundPhase
    timer_seconds: int
    time_remaining: int = 0
    skip_count: int = 0
    initial_deck_size: int = 0
    correct_events: List[CorrectEvent] = field(default_factory=list)
    card_shown_at: float = 0.0
    end_reason: Optional[TurnEndReason] = None
    recap_finalized: bool = False

    @property
    def correct_count(self) -> int:
        return len(self.correct_events)


class TurnController:
    """
    Central turn state machine.

    Attributes:
        deck: The round's DeckEngine
        ledger: ScoringLedger receiving turn results and corrections
        session: The current TurnSession, None before the first turn
        saved_bonus_time: Seconds banked by the last deck-clearing turn
        bonus_time_player: Player entitled to the banked seconds
        last_turn_end_reason: Reason the most recent turn ended
    """

    def __init__(
        self,
        deck: DeckEngine,
        ledger: ScoringLedger,
        on_turn_ended: Optional[Callable[[TurnEndReason], None]] = None,
    ) -> None:
        self.deck = deck
        self.ledger = ledger
        self.on_turn_ended = on_turn_ended
        self.state_machine = TurnStateMachine()
        self.countdown = Countdown(self.tick)
        self.session: Optional[TurnSession] = None
        self.saved_bonus_time = 0
        self.bonus_time_player: Optional[Player] = None
        self.last_turn_end_reason: Optional[TurnEndReason] = None

    # ── Read-only views ──────────────────────────────────────

    @property
    def state(self) -> TurnState:
        return self.state_machine.current_state

    @property
    def is_active(self) -> bool:
        return self.state is TurnState.ACTIVE

    @property
    def is_paused(self) -> bool:
        return self.state is TurnState.PAUSED

    @property
    def time_remaining(self) -> int:
        return self.session.time_remaining if self.session else 0

    @property
    def correct_events(self) -> List[CorrectEvent]:
        return list(self.session.correct_events) if self.session else []

    @property
    def recap_pending(self) -> bool:
        return (
            self.state is TurnState.ENDED
            and self.session is not None
            and not self.session.recap_finalized
        )

    # ── Lifecycle ────────────────────────────────────────────

    def prepare_turn(
        self,
        clue_giver: Player,
        team: Team,
        round_phase: RoundPhase,
        timer_seconds: int,
    ) -> Outcome[TurnSession]:
        """Hand the device to ``clue_giver``; the turn waits in READY."""
        if self.state in (TurnState.ACTIVE, TurnState.PAUSED):
            return not_allowed("wrong_stage", "A turn is still running")
        if self.recap_pending:
            return not_allowed("wrong_stage", "Finish the recap before the next turn")

        self.session = TurnSession(
            clue_giver=clue_giver,
            team=team,
            round_phase=round_phase,
            timer_seconds=timer_seconds,
        )
        self.state_machine.transition(TurnEvent.PREPARE)
        logger.info("Turn ready: %s (%s)", clue_giver.display_name, team.display_name)
        return Outcome.success(self.session)

    def begin_turn(self, timer_seconds: Optional[int] = None) -> Outcome[int]:
        """
        Start the clock.

        Args:
            timer_seconds: Current per-turn timer setting; defaults to the
                value given at prepare time

        Returns:
            Outcome with the time budget for this turn
        """
        if self.state is not TurnState.READY or self.session is None:
            return not_allowed("wrong_stage", "No turn is ready to begin", state=self.state.value)
        if self.deck.is_empty:
            return not_allowed("deck_empty", "The deck is empty")

        s = self.session
        if timer_seconds is not None:
            s.timer_seconds = timer_seconds
        s.skip_count = 0
        s.correct_events = []
        s.initial_deck_size = len(self.deck)

        holder = self.bonus_time_player
        if holder is not None and holder.id == s.clue_giver.id:
            if self.saved_bonus_time > 0:
                s.time_remaining = min(self.saved_bonus_time, s.timer_seconds)
                logger.info("Using bonus time: %ds (was %ds)", s.time_remaining, self.saved_bonus_time)
            else:
                s.time_remaining = s.timer_seconds
            self.clear_bonus()
        else:
            s.time_remaining = s.timer_seconds
            logger.info("Standard timer: %ds", s.time_remaining)

        s.card_shown_at = time.monotonic()
        self.state_machine.transition(TurnEvent.BEGIN)
        self.ledger.record_turn_taken(s.clue_giver)
        self.countdown.start()
        logger.info(
            "Turn begins: %s, deck=%d, first card '%s'",
            s.clue_giver.display_name, len(self.deck), self.deck.head.text,
        )
        return Outcome.success(s.time_remaining)

    def tick(self) -> Outcome[int]:
        """Advance the turn clock by one second."""
        if self.state is not TurnState.ACTIVE or self.session is None:
            return not_allowed("turn_not_active", "Clock only runs during an active turn")
        s = self.session
        if s.time_remaining <= 0:
            return not_allowed("turn_not_active", "No time left")

        s.time_remaining -= 1
        if s.time_remaining == 0:
            logger.info("Timer expired! Ending turn")
            self._finish(TurnEndReason.TIMER_EXPIRED)
        return Outcome.success(s.time_remaining)

    def pump(self) -> int:
        """Deliver countdown ticks that have come due on the monotonic clock."""
        return self.countdown.pump()

    def pause_turn(self) -> Outcome[int]:
        if self.state is TurnState.PAUSED:
            return not_allowed("already_paused", "Turn is already paused")
        if self.state is not TurnState.ACTIVE:
            return not_allowed("turn_not_active", "Only an active turn can be paused")
        self.countdown.cancel()
        self.state_machine.transition(TurnEvent.PAUSE)
        logger.info("Turn paused at %ds remaining", self.time_remaining)
        return Outcome.success(self.time_remaining)

    def unpause_turn(self) -> Outcome[int]:
        if self.state is not TurnState.PAUSED:
            return not_allowed("not_paused", "Turn is not paused")
        self.state_machine.transition(TurnEvent.RESUME)
        self.countdown.start()
        logger.info("Turn resumed with %ds remaining", self.time_remaining)
        return Outcome.success(self.time_remaining)

    def end_turn_manually(self) -> Outcome[TurnEndReason]:
        if self.state not in (TurnState.ACTIVE, TurnState.PAUSED):
            return not_allowed("turn_not_active", "No turn to end")
        self._finish(TurnEndReason.MANUAL)
        return Outcome.success(TurnEndReason.MANUAL)

    # ── Card actions ─────────────────────────────────────────

    def mark_correct(self) -> Outcome[CorrectEvent]:
        """Credit the head card and move on to the next one."""
        if self.state is not TurnState.ACTIVE or self.session is None:
            return not_allowed("turn_not_active", "Turn is not active")
        if self.deck.is_empty:
            return not_allowed("deck_empty", "No card to mark correct")

        s = self.session
        now = time.monotonic()
        duration = max(0.0, now - s.card_shown_at)
        card = self.deck.draw_top()
        event = CorrectEvent(card=card, duration_seconds=duration, original_deck_index=0)
        s.correct_events.append(event)
        self.ledger.record_correct(s.clue_giver, duration)
        logger.info(
            "Correct: '%s' in %.1fs (this turn: %d, remaining: %d)",
            card.text, duration, s.correct_count, len(self.deck),
        )

        self._evaluate_turn_end()
        if self.state is TurnState.ACTIVE:
            s.card_shown_at = now
        return Outcome.success(event)

    def skip_card(self) -> Outcome[Card]:
        """Send the head card to the back of the deck (rounds 2 and 3)."""
        if self.state is not TurnState.ACTIVE or self.session is None:
            return not_allowed("turn_not_active", "Turn is not active")
        if self.deck.is_empty:
            return not_allowed("deck_empty", "No card to skip")

        result = self.deck.skip_top()
        if not result.ok:
            logger.info("skip_card() blocked: %s", result.code)
            return result

        s = self.session
        s.skip_count += 1
        logger.info("Skipped '%s' (%d total skips)", result.value.text, s.skip_count)

        self._evaluate_turn_end()
        if self.state is TurnState.ACTIVE:
            s.card_shown_at = time.monotonic()
        return result

    def _evaluate_turn_end(self) -> None:
        s = self.session
        if s.skip_count > 0 and s.skip_count + s.correct_count >= s.initial_deck_size:
            logger.info(
                "Skip cycle complete: processed %d/%d cards",
                s.skip_count + s.correct_count, s.initial_deck_size,
            )
            self._finish(TurnEndReason.SKIP_CYCLE_COMPLETE)
        elif self.deck.is_empty:
            self.saved_bonus_time = s.time_remaining
            self.bonus_time_player = s.clue_giver
            logger.info("Deck cleared: %ds bonus saved for %s", s.time_remaining, s.clue_giver.display_name)
            self._finish(TurnEndReason.COMPLETED_ALL_CARDS)

    def _finish(self, reason: TurnEndReason) -> None:
        self.countdown.cancel()
        s = self.session

        if reason is TurnEndReason.TIMER_EXPIRED and not self.deck.is_empty:
            stuck = self.deck.rotate_head_to_tail()
            logger.info("Timeout - moved '%s' to bottom of deck", stuck.text)

        self.state_machine.transition(TurnEvent.END)
        s.end_reason = reason
        s.recap_finalized = False
        self.last_turn_end_reason = reason
        self.ledger.record_turn_result(s.team, s.round_phase, s.correct_count)
        logger.info("Turn ended: %s, correct=%d", reason.value, s.correct_count)

        if self.on_turn_ended is not None:
            self.on_turn_ended(reason)

    # ── Recap ────────────────────────────────────────────────

    def _find_event(self, event_id: str) -> Optional[CorrectEvent]:
        return next((e for e in self.session.correct_events if e.id == event_id), None)

    def _check_recap(self) -> Optional[Outcome]:
        if self.state is not TurnState.ENDED or self.session is None:
            return not_allowed("wrong_stage", "Recap is only available after a turn ends")
        if self.session.recap_finalized:
            return not_allowed("recap_finalized", "Recap has already been finalized")
        return None

    def undo(self, event_id: str) -> Outcome[int]:
        """
        Take back a correct answer during recap.

        The card goes back to the deck at its recorded index (clamped) and
        its score and stats contribution is reversed.

        Returns:
            Outcome with the deck position the card was reinserted at
        """
        blocked = self._check_recap()
        if blocked is not None:
            return blocked
        event = self._find_event(event_id)
        if event is None:
            return not_allowed("unknown_event", "No such correct answer this turn", event_id=event_id)

        s = self.session
        s.correct_events.remove(event)
        position = self.deck.reinsert(event.card, event.original_deck_index)
        self.ledger.undo_correct(event, s.clue_giver, s.round_phase)
        self._drop_bonus_for(s.clue_giver)
        logger.info("Undo: '%s' back to deck position %d", event.card.text, position)
        return Outcome.success(position)

    def set_highlight(self, event_id: str, highlighted: Optional[bool] = None) -> Outcome[bool]:
        """Set (or toggle, when ``highlighted`` is None) an event's highlight."""
        blocked = self._check_recap()
        if blocked is not None:
            return blocked
        event = self._find_event(event_id)
        if event is None:
            return not_allowed("unknown_event", "No such correct answer this turn", event_id=event_id)
        event.highlighted = (not event.highlighted) if highlighted is None else highlighted
        return Outcome.success(event.highlighted)

    def finalize_recap(self) -> Outcome[List[CorrectEvent]]:
        """
        Apply recap corrections once.

        Un-highlighted events were not really correct: their cards go to
        the tail of the deck and their contribution is reversed.

        Returns:
            Outcome with the events that stayed counted
        """
        blocked = self._check_recap()
        if blocked is not None:
            return blocked

        s = self.session
        rejected = [e for e in s.correct_events if not e.highlighted]
        kept = [e for e in s.correct_events if e.highlighted]
        if rejected:
            logger.info("Removing %d un-highlighted cards from score", len(rejected))
        for event in rejected:
            self.deck.append_to_tail(event.card)
            self.ledger.undo_correct(event, s.clue_giver, s.round_phase)
        if rejected:
            self._drop_bonus_for(s.clue_giver)

        s.correct_events = []
        s.recap_finalized = True
        return Outcome.success(kept)

    # ── Bonus time ───────────────────────────────────────────

    def _drop_bonus_for(self, player: Player) -> None:
        if self.bonus_time_player is not None and self.bonus_time_player.id == player.id:
            logger.info("Removing bonus time for %s", player.display_name)
            self.clear_bonus()

    def clear_bonus(self) -> None:
        self.saved_bonus_time = 0
        self.bonus_time_player = None

    def reset(self) -> None:
        """Forget the current turn and any bonus (rematch / new game)."""
        self.countdown.cancel()
        self.session = None
        self.clear_bonus()
        self.last_turn_end_reason = None
        self.state_machine.reset()
