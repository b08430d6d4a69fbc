# Area: Content
"""
salad_bowl._content.title_source — Title sources
================================================

A title source supplies candidate cards for intake. The core only uses
two queries: ``draw`` (one title avoiding a set of existing titles) and
``preload`` (a bulk pool). Running out of titles is not an error here;
callers compare what they got against what they asked for.
"""

from __future__ import annotations

import json
import logging
import random
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set

from ..models import Card, Category
from ..settings import TitleFilter
from .title_bank import bank_cards

logger = logging.getLogger("salad_bowl.content")


class TitleSource(ABC):
    """Abstract source of candidate titles."""

    @abstractmethod
    def draw(self, filter_spec: TitleFilter, exclude_titles: Set[str]) -> Optional[Card]:
        """
        Return one title matching the filter whose normalized text is not
        in ``exclude_titles``, or None if the source is exhausted.
        """

    @abstractmethod
    def preload(self, filter_spec: TitleFilter, count: int) -> List[Card]:
        """Return up to ``count`` distinct titles matching the filter."""


class StaticTitleSource(TitleSource):
    """
    Title source backed by an in-memory list of cards.

    Both queries de-duplicate by case-insensitive text. ``preload``
    spreads its picks round-robin across categories so a small pool
    still mixes subjects.
    """

    def __init__(self, cards: Iterable[Card], rng: Optional[random.Random] = None):
        self._cards: List[Card] = list(cards)
        self._rng = rng or random.Random()

    @classmethod
    def from_bank(cls, rng: Optional[random.Random] = None) -> "StaticTitleSource":
        """Source over the built-in title bank."""
        return cls(bank_cards(), rng=rng)

    @classmethod
    def from_file(cls, filepath: str, rng: Optional[random.Random] = None) -> "StaticTitleSource":
        """
        Load titles from a JSON file.

        Expected format: a list of objects with ``text`` and optional
        ``categories`` (category values, e.g. "Music") and ``difficulty``.
        """
        with open(Path(filepath), "r", encoding="utf-8") as f:
            entries = json.load(f)
        cards = [
            Card(
                text=entry["text"],
                category_tags=frozenset(Category(c) for c in entry.get("categories", [])),
                difficulty=int(entry.get("difficulty", 3)),
            )
            for entry in entries
        ]
        return cls(cards, rng=rng)

    def __len__(self) -> int:
        return len(self._cards)

    def _matching(self, filter_spec: TitleFilter) -> List[Card]:
        return [c for c in self._cards if filter_spec.matches(c)]

    def draw(self, filter_spec: TitleFilter, exclude_titles: Set[str]) -> Optional[Card]:
        pool = [c for c in self._matching(filter_spec) if c.key not in exclude_titles]
        if not pool:
            logger.debug("draw(): no title left outside %d excluded", len(exclude_titles))
            return None
        return self._rng.choice(pool)

    def preload(self, filter_spec: TitleFilter, count: int) -> List[Card]:
        pools = self._category_pools(self._matching(filter_spec))
        seen: Set[str] = set()
        picked: List[Card] = []

        while len(picked) < count:
            found_this_pass = False
            for category in list(pools):
                if len(picked) >= count:
                    break
                pool = pools[category]
                while pool:
                    card = pool.pop()
                    if card.key not in seen:
                        picked.append(card)
                        seen.add(card.key)
                        found_this_pass = True
                        break
            if not found_this_pass:
                break

        if len(picked) < count:
            logger.warning("preload(): only %d of %d titles available", len(picked), count)
        return picked

    def _category_pools(self, cards: List[Card]) -> Dict[Category, List[Card]]:
        pools: Dict[Category, List[Card]] = {}
        for card in cards:
            # Untagged titles share the MANUAL pool
            tags = card.category_tags or frozenset({Category.MANUAL})
            for category in sorted(tags, key=lambda c: c.value):
                pools.setdefault(category, []).append(card)
        for category in pools:
            self._rng.shuffle(pools[category])
        return dict(sorted(pools.items(), key=lambda item: item[0].value))
