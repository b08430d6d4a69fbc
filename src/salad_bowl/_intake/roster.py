# Area: Intake
"""
salad_bowl._intake.roster — Player intake and master card set
=============================================================

The RosterBuilder registers players one at a time as the device is
passed around. Each accepted player contributes picked candidate titles
and/or manual titles to the master card set.

Intake order is the turn rotation order: team A is collected until it
holds ``players // 2`` members, then team B takes the remainder.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, Iterable, List, Optional, Sequence, Set

from ..errors import ContentSupplyShortfall, Outcome, invalid, not_allowed
from ..models import Card, Category, Player, Team, count_words, normalize_text
from ..settings import GameSettings
from .._content.title_source import TitleSource

logger = logging.getLogger("salad_bowl.intake")

MANUAL_DIFFICULTY = 3


class RosterBuilder:
    """
    Builds the roster and the de-duplicated master card set.

    Attributes:
        players: Accepted players in intake order
        team_orders: Per-team rotation order (intake order)
        master_cards: De-duplicated cards for the whole game
        shared_pool: Preloaded titles candidates are offered from
        candidates: Titles currently offered to the next player
        selected_ids: Candidate ids the next player has toggled on
    """

    def __init__(
        self,
        settings: GameSettings,
        source: TitleSource,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings
        self.source = source
        self._rng = rng or random.Random()
        self.players: List[Player] = []
        self.team_orders: Dict[Team, List[Player]] = {Team.A: [], Team.B: []}
        self.master_cards: List[Card] = []
        self._master_keys: Set[str] = set()
        self.shared_pool: List[Card] = []
        self.candidates: List[Card] = []
        self.selected_ids: Set[str] = set()

    # ── Progress ─────────────────────────────────────────────

    @property
    def expected_count(self) -> int:
        return self.settings.players

    @property
    def is_complete(self) -> bool:
        return len(self.players) >= self.expected_count

    @property
    def collecting_team(self) -> Team:
        if len(self.team_orders[Team.A]) < self.settings.team_a_size:
            return Team.A
        return Team.B

    @property
    def master_keys(self) -> Set[str]:
        return set(self._master_keys)

    # ── Candidate generation ─────────────────────────────────

    def prepare_pool(self) -> Outcome[List[Card]]:
        """
        Preload the shared candidate pool for the whole intake.

        Returns a ContentSupplyShortfall outcome (and leaves the pool
        empty) if the source cannot cover every player.
        """
        if self.settings.picks_per_player == 0:
            logger.info("Manual-only intake: no candidate pool needed")
            self.shared_pool = []
            return Outcome.success([])

        needed = self.settings.pool_size
        pool = self.source.preload(self.settings.filters, needed)
        if len(pool) < needed:
            logger.warning("Candidate pool shortfall: %d of %d titles", len(pool), needed)
            self.shared_pool = []
            return Outcome.failure(ContentSupplyShortfall(
                requested=needed,
                supplied=len(pool),
                message=(
                    f"Only {len(pool)} titles match the filters, need {needed}. "
                    "Adjust the filters or lower the candidate count."
                ),
            ))

        self.shared_pool = pool
        logger.info("Loaded %d candidate titles", len(pool))
        return Outcome.success(list(pool))

    def offer_candidates(self) -> Outcome[List[Card]]:
        """
        Offer the next player ``candidates_per_player`` titles.

        Titles already in the master set are excluded. Picks are spread
        round-robin across categories before the final shuffle. When the
        shared pool runs low the offer is topped up from the source.

        Returns a ContentSupplyShortfall outcome if fewer titles than
        ``picks_per_player`` can be offered.
        """
        self.selected_ids = set()
        needed = self.settings.candidates_per_player
        if self.settings.picks_per_player == 0 or needed == 0:
            self.candidates = []
            return Outcome.success([])

        available = [c for c in self.shared_pool if c.key not in self._master_keys]
        by_category: Dict[Category, List[Card]] = {}
        for card in available:
            by_category.setdefault(_primary_category(card), []).append(card)
        for cards in by_category.values():
            self._rng.shuffle(cards)

        diverse: List[Card] = []
        while len(diverse) < needed and any(by_category.values()):
            for category in sorted(by_category, key=lambda c: c.value):
                if len(diverse) >= needed:
                    break
                if by_category[category]:
                    diverse.append(by_category[category].pop())

        self._rng.shuffle(diverse)
        offered = diverse[:needed]
        while len(offered) < needed:
            extra = self.source.draw(self.settings.filters, self._master_keys | {c.key for c in offered})
            if extra is None:
                break
            offered.append(extra)

        self.candidates = offered
        picks = self.settings.picks_per_player
        if len(offered) < picks:
            logger.warning("Candidate shortfall: %d titles left, %d picks needed", len(offered), picks)
            return Outcome.failure(ContentSupplyShortfall(
                requested=picks,
                supplied=len(offered),
                message=(
                    f"Only {len(offered)} unused titles are left, the next player needs {picks}. "
                    "Adjust the filters or lower the pick count."
                ),
            ))
        if len(offered) < needed:
            logger.warning("Offering only %d of %d candidates", len(offered), needed)
        logger.info("Offered %d candidates", len(offered))
        return Outcome.success(list(offered))

    def toggle_pick(self, card_id: str) -> Outcome[bool]:
        """Select or deselect a candidate. Value is the new selected state."""
        if not any(c.id == card_id for c in self.candidates):
            return invalid("unknown_pick", "Card is not one of the current candidates", card_id=card_id)
        if card_id in self.selected_ids:
            self.selected_ids.discard(card_id)
            return Outcome.success(False)
        self.selected_ids.add(card_id)
        return Outcome.success(True)

    def reroll(self, card_id: str) -> Outcome[Card]:
        """Replace one candidate with a fresh title."""
        index = next((i for i, c in enumerate(self.candidates) if c.id == card_id), None)
        if index is None:
            return invalid("unknown_pick", "Card is not one of the current candidates", card_id=card_id)

        avoid = {c.key for c in self.candidates} | self._master_keys
        replacement = self.source.draw(self.settings.filters, avoid)
        if replacement is None:
            logger.info("Reroll failed: no alternative title for '%s'", self.candidates[index].text)
            return Outcome.failure(ContentSupplyShortfall(
                requested=1, supplied=0, message="No alternative titles available",
            ))

        logger.info("Reroll: '%s' -> '%s'", self.candidates[index].text, replacement.text)
        self.selected_ids.discard(card_id)
        self.candidates[index] = replacement
        return Outcome.success(replacement)

    # ── Intake ───────────────────────────────────────────────

    def intake(
        self,
        player_name: str,
        team: Optional[Team] = None,
        picked_card_ids: Optional[Iterable[str]] = None,
        manual_words: Sequence[str] = (),
    ) -> Outcome[Player]:
        """
        Validate and register one player with their cards.

        Args:
            player_name: Display name; unique case-insensitively
            team: Team the player joins; defaults to the collecting team
            picked_card_ids: Chosen candidate ids; defaults to selected_ids
            manual_words: Free-text titles written by the player

        Returns:
            Outcome with the new Player, or a ValidationError /
            OperationNotAllowed outcome with nothing changed.
        """
        if self.is_complete:
            return not_allowed("intake_complete", "All players have already joined")

        name = (player_name or "").strip()
        if not name:
            return invalid("blank_name", "Player name must not be blank")
        if any(p.key == normalize_text(name) for p in self.players):
            return invalid("duplicate_name", f"A player named '{name}' already exists", name=name)

        team = team or self.collecting_team
        if team is not self.collecting_team:
            return invalid(
                "wrong_team",
                f"{self.collecting_team.display_name} is collecting players",
                team=team.value,
            )

        picked_ids = list(self.selected_ids if picked_card_ids is None else picked_card_ids)
        picks_required = self.settings.picks_per_player
        candidates_by_id = {c.id: c for c in self.candidates}
        unknown = [cid for cid in picked_ids if cid not in candidates_by_id]
        if unknown:
            return invalid("unknown_pick", "Picked cards must come from the offered candidates", unknown=unknown)
        if picks_required > 0 and len(set(picked_ids)) != picks_required:
            return invalid(
                "pick_count",
                f"Pick exactly {picks_required} titles",
                picked=len(set(picked_ids)),
                required=picks_required,
            )
        chosen = [candidates_by_id[cid] for cid in dict.fromkeys(picked_ids)]

        manual = [w.strip() for w in manual_words if w and w.strip()]
        manual_error = self._validate_manual(manual, chosen)
        if manual_error is not None:
            return manual_error

        player = Player(display_name=name, team=team)
        self.players.append(player)
        self.team_orders[team].append(player)
        self._add_cards(chosen, manual)
        logger.info(
            "Player '%s' joined %s (picks=%d, manual=%d, master=%d)",
            player.display_name, team.display_name, len(chosen), len(manual), len(self.master_cards),
        )

        self.candidates = []
        self.selected_ids = set()
        return Outcome.success(player)

    def _validate_manual(self, manual: List[str], chosen: List[Card]) -> Optional[Outcome]:
        required = self.settings.manual_words_per_player
        if required == 0 and not manual:
            return None
        if len(manual) != required:
            return invalid(
                "manual_count",
                f"Please fill in all {required} manual titles",
                submitted=len(manual),
                required=required,
            )

        limit = self.settings.manual_word_limit
        too_long = [w for w in manual if count_words(w) > limit]
        if too_long:
            return invalid("manual_too_long", f"Manual titles must be {limit} words or fewer", words=too_long)

        lowered = [normalize_text(w) for w in manual]
        if len(set(lowered)) != len(lowered):
            return invalid("manual_duplicate", "Manual titles must be unique")

        disallowed = self._master_keys | {c.key for c in chosen}
        collisions = [w for w in manual if normalize_text(w) in disallowed]
        if collisions:
            return invalid(
                "manual_collision",
                "Manual titles must be unique across the game",
                words=collisions,
            )
        return None

    def _add_cards(self, chosen: List[Card], manual: List[str]) -> None:
        added = 0
        for card in chosen:
            if card.key not in self._master_keys:
                self._append_master(card)
                added += 1
            else:
                logger.info("Duplicate pick dropped: '%s'", card.text)

        manual_keys = {normalize_text(w) for w in manual}
        while added < self.settings.picks_per_player:
            extra = self.source.draw(self.settings.filters, self._master_keys | manual_keys)
            if extra is None:
                logger.warning(
                    "Could not replace de-duplicated picks: %d of %d",
                    added, self.settings.picks_per_player,
                )
                break
            self._append_master(extra)
            added += 1

        for word in manual:
            card = Card(
                text=word,
                category_tags=frozenset({Category.MANUAL}),
                difficulty=MANUAL_DIFFICULTY,
            )
            if card.key not in self._master_keys:
                self._append_master(card)

    def _append_master(self, card: Card) -> None:
        self.master_cards.append(card)
        self._master_keys.add(card.key)


def _primary_category(card: Card) -> Category:
    if not card.category_tags:
        return Category.MANUAL
    return min(card.category_tags, key=lambda c: c.value)
