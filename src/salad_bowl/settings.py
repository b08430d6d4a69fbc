# Area: Shared
"""
salad_bowl.settings — Game settings and title filters
=====================================================

Pydantic models for everything a host configures before intake.
Values are validated once, here; the rest of the package trusts them.
"""

from __future__ import annotations
from typing import Set

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .models import Card, Category, Team


class TitleFilter(BaseModel):
    """Which titles the title source may offer."""

    model_config = ConfigDict(frozen=True)

    categories: Set[Category] = Field(default_factory=set)  # empty = all
    difficulty_min: int = Field(default=1, ge=1, le=5)
    difficulty_max: int = Field(default=5, ge=1, le=5)
    word_count_min: int = Field(default=1, ge=1)
    word_count_max: int = Field(default=12, ge=1)

    @model_validator(mode="after")
    def _check_ranges(self) -> "TitleFilter":
        if self.difficulty_min > self.difficulty_max:
            raise ValueError("difficulty_min must not exceed difficulty_max")
        if self.word_count_min > self.word_count_max:
            raise ValueError("word_count_min must not exceed word_count_max")
        return self

    def matches(self, card: Card) -> bool:
        if self.categories and not (set(card.category_tags) & self.categories):
            return False
        if not self.difficulty_min <= card.difficulty <= self.difficulty_max:
            return False
        return self.word_count_min <= card.word_count <= self.word_count_max


class GameSettings(BaseModel):
    """
    Settings for one game.

    Attributes:
        players: Total number of players across both teams
        starting_team: Team that opens every round
        timer_seconds: Per-turn time budget
        picks_per_player: Candidate titles each player keeps
        candidates_per_player: Candidate titles offered to each player
        manual_words_per_player: Free-text titles each player writes
        manual_word_limit: Max words in one manual title
        filters: Title filter for candidate generation
        highlights_per_round: Max highlights shown at round end
    """

    model_config = ConfigDict(frozen=True)

    players: int = Field(default=8, ge=2, le=20)
    starting_team: Team = Team.A
    timer_seconds: int = Field(default=60, ge=10, le=600)
    picks_per_player: int = Field(default=3, ge=0, le=20)
    candidates_per_player: int = Field(default=5, ge=0, le=40)
    manual_words_per_player: int = Field(default=0, ge=0, le=10)
    manual_word_limit: int = Field(default=6, ge=1)
    filters: TitleFilter = Field(default_factory=TitleFilter)
    highlights_per_round: int = Field(default=3, ge=0)

    @model_validator(mode="after")
    def _check_card_counts(self) -> "GameSettings":
        if self.picks_per_player + self.manual_words_per_player == 0:
            raise ValueError("each player must contribute at least one card")
        if self.candidates_per_player < self.picks_per_player:
            raise ValueError("candidates_per_player must be >= picks_per_player")
        return self

    @property
    def team_a_size(self) -> int:
        """Intake fills team A up to half the players, rounded down."""
        return self.players // 2

    @property
    def pool_size(self) -> int:
        """Shared candidate pool needed for a full intake."""
        return self.players * self.candidates_per_player

    def with_timer(self, timer_seconds: int) -> "GameSettings":
        """Return a validated copy with a new per-turn timer."""
        return GameSettings.model_validate({**self.model_dump(), "timer_seconds": timer_seconds})
