# Area: Shared Tests
"""Tests for the core dataclasses and enums."""

import pytest

from salad_bowl.models import (
    Card,
    Category,
    Player,
    PlayerStats,
    RoundPhase,
    RoundScore,
    Team,
    count_words,
    normalize_text,
)


class TestTextHelpers:
    def test_normalize_text(self):
        assert normalize_text("  The Office ") == "the office"

    def test_count_words(self):
        assert count_words("Harry  Potter and the   Goblet") == 5
        assert count_words("") == 0


class TestTeam:
    def test_other(self):
        assert Team.A.other is Team.B
        assert Team.B.other is Team.A

    def test_display_name(self):
        assert Team.B.display_name == "Team B"


class TestRoundPhase:
    def test_skip_forbidden_only_in_round_one(self):
        assert RoundPhase.ONE.skip_allowed is False
        assert RoundPhase.TWO.skip_allowed is True
        assert RoundPhase.THREE.skip_allowed is True

    def test_next(self):
        assert RoundPhase.ONE.next is RoundPhase.TWO
        assert RoundPhase.TWO.next is RoundPhase.THREE
        assert RoundPhase.THREE.next is None

    def test_titles(self):
        assert "Describe" in RoundPhase.ONE.title
        assert "One Word" in RoundPhase.TWO.title
        assert "Charades" in RoundPhase.THREE.title

    def test_skip_policy_text(self):
        assert RoundPhase.ONE.skip_policy == "Skips: Not allowed."
        assert RoundPhase.TWO.skip_policy.startswith("Skips: Allowed")


class TestCard:
    def test_derived_fields(self):
        card = Card("The Lion King", frozenset({Category.MOVIES}), 1)
        assert card.word_count == 3
        assert card.key == "the lion king"

    def test_ids_are_unique(self):
        assert Card("A").id != Card("A").id

    def test_card_is_immutable(self):
        card = Card("Pizza")
        with pytest.raises(AttributeError):
            card.text = "Pasta"


class TestPlayer:
    def test_key_is_case_insensitive(self):
        assert Player("Alex", Team.A).key == Player("alex ", Team.B).key


class TestPlayerStats:
    def test_first_observation_sets_fastest_and_slowest(self):
        stats = PlayerStats(player_id="p1")
        stats.add_correct_answer(4.0)
        assert stats.fastest_answer == 4.0
        assert stats.slowest_answer == 4.0

    def test_min_max_tracking(self):
        stats = PlayerStats(player_id="p1")
        for duration in (4.0, 1.5, 9.0):
            stats.add_correct_answer(duration)
        assert stats.correct_count == 3
        assert stats.total_time_spent_seconds == pytest.approx(14.5)
        assert stats.fastest_answer == 1.5
        assert stats.slowest_answer == 9.0

    def test_average_answer_time(self):
        stats = PlayerStats(player_id="p1")
        assert stats.average_answer_time == 0.0
        stats.add_correct_answer(2.0)
        stats.add_correct_answer(4.0)
        assert stats.average_answer_time == pytest.approx(3.0)

    def test_remove_recomputes_extremes(self):
        stats = PlayerStats(player_id="p1")
        for duration in (4.0, 1.5, 9.0):
            stats.add_correct_answer(duration)
        stats.remove_correct_answer(9.0)
        assert stats.correct_count == 2
        assert stats.slowest_answer == 4.0
        assert stats.fastest_answer == 1.5

    def test_remove_floors_at_zero(self):
        stats = PlayerStats(player_id="p1")
        stats.remove_correct_answer(3.0)
        assert stats.correct_count == 0
        assert stats.total_time_spent_seconds == 0.0
        assert stats.fastest_answer is None
        assert stats.slowest_answer is None


class TestRoundScore:
    def test_add_and_get(self):
        score = RoundScore()
        score.add(Team.A, 3)
        score.add(Team.B, 1)
        assert score.get(Team.A) == 3
        assert score.get(Team.B) == 1
        assert score.total == 4

    def test_subtract_floors_at_zero(self):
        score = RoundScore(team_a=1)
        score.subtract(Team.A, 3)
        score.subtract(Team.B)
        assert score.team_a == 0
        assert score.team_b == 0
