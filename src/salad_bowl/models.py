# Area: Shared
"""
salad_bowl.models — Core game dataclasses
=========================================

Cards, players, per-player statistics, per-turn correct events and
per-round team scores. Everything here is plain data; the components
in the underscore packages own the mutations.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional
import uuid


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return uuid.uuid4().hex


def normalize_text(text: str) -> str:
    """Case-insensitive comparison key for titles and names."""
    return text.strip().lower()


def count_words(text: str) -> int:
    return len(text.split())


class Team(Enum):
    """The two teams sharing the device."""
    A = "A"
    B = "B"

    @property
    def display_name(self) -> str:
        return f"Team {self.value}"

    @property
    def other(self) -> "Team":
        return Team.B if self is Team.A else Team.A


class RoundPhase(Enum):
    """
    The three rounds played over the same master set.

    Round 1 — describe freely (no skipping)
    Round 2 — one word only
    Round 3 — charades
    """
    ONE = 1
    TWO = 2
    THREE = 3

    @property
    def title(self) -> str:
        return {
            RoundPhase.ONE: "Round 1 — Describe",
            RoundPhase.TWO: "Round 2 — One Word",
            RoundPhase.THREE: "Round 3 — Charades",
        }[self]

    @property
    def rules(self) -> str:
        return {
            RoundPhase.ONE: (
                "Say anything except any part of the title. No spelling, "
                "initials, translations, or rhymes. Gestures ok."
            ),
            RoundPhase.TWO: "Say one word only. Gestures ok.",
            RoundPhase.THREE: "No words. Gestures & non-verbal sounds ok.",
        }[self]

    @property
    def skip_allowed(self) -> bool:
        return self is not RoundPhase.ONE

    @property
    def skip_policy(self) -> str:
        if self.skip_allowed:
            return "Skips: Allowed until you return to your starting card, then off."
        return "Skips: Not allowed."

    @property
    def next(self) -> Optional["RoundPhase"]:
        """The following round, or None after round 3."""
        if self is RoundPhase.THREE:
            return None
        return RoundPhase(self.value + 1)


class Category(Enum):
    """Category tags attached to titles."""
    MOVIES = "Movies & TV"
    MUSIC = "Music"
    SCIENCE = "Science"
    INTERNET = "Internet Culture"
    EVERYDAY = "Everyday Things"
    FOOD = "Food & Drink"
    SPORTS = "Sports"
    HISTORY = "History"
    PLACES = "Places"
    PEOPLE = "People"
    MANUAL = "Manual"


@dataclass(frozen=True)
class Card:
    """
    Immutable content unit (a "title").

    Attributes:
        text: Display string the clue-giver must get guessed
        category_tags: Categories the title belongs to
        difficulty: Ordinal 1 (easy) .. 5 (obscure)
        id: Unique identifier
    """

    text: str
    category_tags: FrozenSet[Category] = frozenset()
    difficulty: int = 3
    id: str = field(default_factory=new_id)

    @property
    def word_count(self) -> int:
        return count_words(self.text)

    @property
    def key(self) -> str:
        return normalize_text(self.text)


@dataclass(frozen=True)
class Player:
    """A player registered during intake. Immutable for the game."""

    display_name: str
    team: Team
    id: str = field(default_factory=new_id)

    @property
    def key(self) -> str:
        return normalize_text(self.display_name)


@dataclass
class PlayerStats:
    """Running statistics for one player as clue-giver."""

    player_id: str
    correct_count: int = 0
    total_time_spent_seconds: float = 0.0
    turns_taken: int = 0
    fastest_answer: Optional[float] = None
    slowest_answer: Optional[float] = None
    answer_times: List[float] = field(default_factory=list, repr=False)

    @property
    def average_answer_time(self) -> float:
        if self.correct_count <= 0:
            return 0.0
        return self.total_time_spent_seconds / self.correct_count

    def add_correct_answer(self, duration: float) -> None:
        self.correct_count += 1
        self.total_time_spent_seconds += duration
        self.answer_times.append(duration)
        if self.fastest_answer is None:
            self.fastest_answer = duration
        else:
            self.fastest_answer = min(self.fastest_answer, duration)
        if self.slowest_answer is None:
            self.slowest_answer = duration
        else:
            self.slowest_answer = max(self.slowest_answer, duration)

    def remove_correct_answer(self, duration: float) -> None:
        """Reverse one add_correct_answer; counters floor at zero."""
        self.correct_count = max(0, self.correct_count - 1)
        self.total_time_spent_seconds = max(0.0, self.total_time_spent_seconds - duration)
        if duration in self.answer_times:
            self.answer_times.remove(duration)
        self.fastest_answer = min(self.answer_times) if self.answer_times else None
        self.slowest_answer = max(self.answer_times) if self.answer_times else None

    def add_turn(self) -> None:
        self.turns_taken += 1


@dataclass
class CorrectEvent:
    """A card marked correct during the current turn, pending recap."""

    card: Card
    duration_seconds: float
    original_deck_index: int = 0
    highlighted: bool = True
    id: str = field(default_factory=new_id)


@dataclass
class RoundScore:
    """Team counters for one round (or the whole game). Never negative."""

    team_a: int = 0
    team_b: int = 0

    @property
    def total(self) -> int:
        return self.team_a + self.team_b

    def get(self, team: Team) -> int:
        return self.team_a if team is Team.A else self.team_b

    def add(self, team: Team, points: int) -> None:
        if team is Team.A:
            self.team_a += points
        else:
            self.team_b += points

    def subtract(self, team: Team, points: int = 1) -> None:
        if team is Team.A:
            self.team_a = max(0, self.team_a - points)
        else:
            self.team_b = max(0, self.team_b - points)
