# Area: Round
"""
salad_bowl._round.deck — Working deck for the active round
==========================================================

The deck is an ordered queue of cards, rebuilt from the master set at
the start of every round. Its order is stable until the next reshuffle:
only draws, skips, timeout rotations, undo reinserts and recap
corrections move cards around.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional

from ..errors import Outcome, not_allowed
from ..models import Card, RoundPhase

logger = logging.getLogger("salad_bowl.deck")


class DeckEngine:
    """
    Owns the working deck for one round.

    Attributes:
        round_phase: Round the current order was shuffled for
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self._cards: List[Card] = []
        self.round_phase: RoundPhase = RoundPhase.ONE

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(list(self._cards))

    @property
    def cards(self) -> List[Card]:
        """Copy of the current order, head first."""
        return list(self._cards)

    @property
    def head(self) -> Optional[Card]:
        return self._cards[0] if self._cards else None

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def reshuffle(self, master_set: Iterable[Card], round_phase: RoundPhase) -> List[Card]:
        """Replace the deck with a uniformly random permutation of the master set."""
        cards = list(master_set)
        self._rng.shuffle(cards)
        self._cards = cards
        self.round_phase = round_phase
        logger.info("Reshuffled %d cards for round %d", len(cards), round_phase.value)
        return list(cards)

    def draw_top(self) -> Optional[Card]:
        """Remove and return the head card, or None if empty."""
        if not self._cards:
            return None
        return self._cards.pop(0)

    def skip_top(self) -> Outcome[Card]:
        """Rotate the head card to the tail. Forbidden in round 1."""
        if not self.round_phase.skip_allowed:
            return not_allowed("skip_disabled", "Skipping is not allowed in round 1")
        if not self._cards:
            return not_allowed("deck_empty", "No card to skip")
        card = self._cards.pop(0)
        self._cards.append(card)
        return Outcome.success(card)

    def rotate_head_to_tail(self) -> Optional[Card]:
        """Move the head card to the tail regardless of round (timeout cycling)."""
        if not self._cards:
            return None
        card = self._cards.pop(0)
        self._cards.append(card)
        return card

    def reinsert(self, card: Card, at_index: int) -> int:
        """Insert a card at ``at_index`` clamped to the deck bounds. Returns the position used."""
        position = max(0, min(at_index, len(self._cards)))
        self._cards.insert(position, card)
        return position

    def append_to_tail(self, card: Card) -> None:
        self._cards.append(card)

    def clear(self) -> None:
        self._cards = []
