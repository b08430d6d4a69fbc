# Area: Intake Tests
"""Tests for RosterBuilder — player intake and the master card set."""

import random

from salad_bowl._content.title_source import StaticTitleSource
from salad_bowl._intake.roster import MANUAL_DIFFICULTY, RosterBuilder
from salad_bowl.models import Card, Category, Team
from salad_bowl.settings import GameSettings

CATEGORIES = (Category.FOOD, Category.MUSIC, Category.SPORTS, Category.PLACES)


def make_source(per_category=4, seed=0):
    cards = [
        Card(f"{category.name.title()} {n}", frozenset({category}), 2)
        for category in CATEGORIES
        for n in range(per_category)
    ]
    return StaticTitleSource(cards, rng=random.Random(seed))


def make_builder(seed=0, source=None, **overrides):
    values = {"players": 4, "picks_per_player": 2, "candidates_per_player": 3}
    values.update(overrides)
    builder = RosterBuilder(GameSettings(**values), source or make_source(), rng=random.Random(seed))
    return builder


def ready_builder(seed=0, **overrides):
    builder = make_builder(seed=seed, **overrides)
    assert builder.prepare_pool().ok
    builder.offer_candidates()
    return builder


def submit(builder, name, **kwargs):
    if "picked_card_ids" not in kwargs and builder.settings.picks_per_player:
        kwargs["picked_card_ids"] = [c.id for c in builder.candidates[:builder.settings.picks_per_player]]
    result = builder.intake(name, **kwargs)
    if builder.settings.picks_per_player and not builder.is_complete:
        builder.offer_candidates()
    return result


class TestPool:
    def test_prepare_pool_loads_players_times_candidates(self):
        builder = make_builder()
        result = builder.prepare_pool()
        assert result.ok
        assert len(builder.shared_pool) == 12

    def test_prepare_pool_shortfall(self):
        builder = make_builder(source=make_source(per_category=2))
        result = builder.prepare_pool()
        assert not result.ok
        assert result.code == "supply_shortfall"
        assert result.error.requested == 12
        assert result.error.supplied == 8
        assert builder.shared_pool == []

    def test_manual_only_needs_no_pool(self):
        builder = make_builder(picks_per_player=0, candidates_per_player=0, manual_words_per_player=1)
        result = builder.prepare_pool()
        assert result.ok
        assert result.value == []
        assert builder.offer_candidates().value == []


class TestCandidates:
    def test_offers_configured_count(self):
        builder = ready_builder()
        assert len(builder.candidates) == 3
        assert len({c.key for c in builder.candidates}) == 3

    def test_offers_spread_across_categories(self):
        builder = ready_builder()
        tags = [next(iter(c.category_tags)) for c in builder.candidates]
        assert len(set(tags)) == 3

    def test_offers_exclude_master_set(self):
        builder = ready_builder()
        submit(builder, "Ann")
        master = builder.master_keys
        assert all(c.key not in master for c in builder.candidates)

    def test_toggle_pick(self):
        builder = ready_builder()
        card_id = builder.candidates[0].id
        assert builder.toggle_pick(card_id).value is True
        assert card_id in builder.selected_ids
        assert builder.toggle_pick(card_id).value is False
        assert card_id not in builder.selected_ids

    def test_toggle_unknown_card(self):
        builder = ready_builder()
        assert builder.toggle_pick("nope").code == "unknown_pick"

    def test_reroll_replaces_and_deselects(self):
        builder = ready_builder()
        old = builder.candidates[1]
        builder.toggle_pick(old.id)
        others = {c.key for c in builder.candidates if c.id != old.id}

        result = builder.reroll(old.id)

        assert result.ok
        assert builder.candidates[1] is result.value
        assert result.value.key not in others
        assert result.value.key != old.key
        assert old.id not in builder.selected_ids

    def test_reroll_with_nothing_left(self):
        cards = [Card("Only One", frozenset({Category.FOOD})), Card("Only Two", frozenset({Category.FOOD}))]
        source = StaticTitleSource(cards, rng=random.Random(0))
        builder = make_builder(source=source)
        builder.candidates = list(cards)

        result = builder.reroll(cards[0].id)

        assert result.code == "supply_shortfall"
        assert builder.candidates == cards

    def test_offer_tops_up_from_source(self):
        builder = make_builder()
        builder.shared_pool = []
        result = builder.offer_candidates()
        assert result.ok
        assert len(result.value) == 3
        assert len({c.key for c in result.value}) == 3

    def test_offer_shortfall_when_manual_words_drain_titles(self):
        cards = [Card(f"Title {n}", frozenset({Category.FOOD})) for n in range(6)]
        source = StaticTitleSource(cards, rng=random.Random(0))
        builder = make_builder(
            source=source, players=2, picks_per_player=3,
            candidates_per_player=3, manual_words_per_player=3,
        )
        assert builder.prepare_pool().ok
        assert builder.offer_candidates().ok
        offered = {c.key for c in builder.candidates}
        leftovers = [c.text for c in cards if c.key not in offered]
        assert builder.intake(
            "Ann", picked_card_ids=[c.id for c in builder.candidates], manual_words=leftovers,
        ).ok

        result = builder.offer_candidates()

        assert result.code == "supply_shortfall"
        assert result.error.requested == 3
        assert result.error.supplied == 0


class TestIntakeValidation:
    def test_rejects_duplicate_name_case_insensitive(self):
        builder = ready_builder()
        assert submit(builder, "alex").ok

        result = submit(builder, "Alex")

        assert not result.ok
        assert result.code == "duplicate_name"
        assert len(builder.players) == 1

    def test_rejects_blank_name(self):
        builder = ready_builder()
        assert submit(builder, "   ").code == "blank_name"

    def test_rejects_wrong_pick_count(self):
        builder = ready_builder()
        result = builder.intake("Ann", picked_card_ids=[builder.candidates[0].id])
        assert result.code == "pick_count"
        assert builder.players == []
        assert builder.master_cards == []

    def test_rejects_pick_outside_candidates(self):
        builder = ready_builder()
        result = builder.intake("Ann", picked_card_ids=[builder.candidates[0].id, "bogus"])
        assert result.code == "unknown_pick"

    def test_uses_toggled_selection_by_default(self):
        builder = ready_builder()
        for card in builder.candidates[:2]:
            builder.toggle_pick(card.id)
        expected = {c.key for c in builder.candidates[:2]}

        result = builder.intake("Ann")

        assert result.ok
        assert builder.master_keys == expected

    def test_rejects_after_complete(self):
        builder = ready_builder(players=2)
        submit(builder, "Ann")
        submit(builder, "Ben")
        assert builder.is_complete
        assert builder.intake("Cat").code == "intake_complete"


class TestManualWords:
    def make_manual(self, **overrides):
        values = {"picks_per_player": 0, "candidates_per_player": 0, "manual_words_per_player": 2}
        values.update(overrides)
        builder = make_builder(**values)
        builder.prepare_pool()
        return builder

    def test_accepts_manual_words(self):
        builder = self.make_manual()
        result = builder.intake("Ann", manual_words=["Grandma's Lasagna", "The Blue Car"])
        assert result.ok
        assert [c.text for c in builder.master_cards] == ["Grandma's Lasagna", "The Blue Car"]
        assert all(c.category_tags == frozenset({Category.MANUAL}) for c in builder.master_cards)
        assert all(c.difficulty == MANUAL_DIFFICULTY for c in builder.master_cards)

    def test_rejects_wrong_count(self):
        builder = self.make_manual()
        assert builder.intake("Ann", manual_words=["Only one", "  "]).code == "manual_count"

    def test_rejects_too_many_words(self):
        builder = self.make_manual()
        result = builder.intake("Ann", manual_words=["one two three four five six seven", "Fine"])
        assert result.code == "manual_too_long"

    def test_six_words_is_fine(self):
        builder = self.make_manual()
        assert builder.intake("Ann", manual_words=["one two three four five six", "Fine"]).ok

    def test_rejects_duplicates_within_submission(self):
        builder = self.make_manual()
        assert builder.intake("Ann", manual_words=["Pizza", "pizza"]).code == "manual_duplicate"

    def test_rejects_collision_with_master_set(self):
        builder = self.make_manual()
        builder.intake("Ann", manual_words=["Pizza", "Tacos"])
        result = builder.intake("Ben", manual_words=["PIZZA", "Sushi"])
        assert result.code == "manual_collision"
        assert len(builder.players) == 1

    def test_rejects_collision_with_own_picks(self):
        builder = ready_builder(manual_words_per_player=1)
        picked = builder.candidates[:2]
        result = builder.intake("Ann", picked_card_ids=[c.id for c in picked], manual_words=[picked[0].text])
        assert result.code == "manual_collision"


class TestTeamsAndMasterSet:
    def test_team_a_then_team_b(self):
        builder = ready_builder(players=5, candidates_per_player=2)
        for name in ("Ann", "Ben", "Cat", "Dan", "Eve"):
            assert submit(builder, name).ok
        assert [p.display_name for p in builder.team_orders[Team.A]] == ["Ann", "Ben"]
        assert [p.display_name for p in builder.team_orders[Team.B]] == ["Cat", "Dan", "Eve"]

    def test_rejects_wrong_team(self):
        builder = ready_builder()
        result = submit(builder, "Ann", team=Team.B)
        assert result.code == "wrong_team"

    def test_master_set_has_no_duplicates(self):
        builder = ready_builder()
        for name in ("Ann", "Ben", "Cat", "Dan"):
            submit(builder, name)
        keys = [c.key for c in builder.master_cards]
        assert len(keys) == 8
        assert len(set(keys)) == 8

    def test_duplicate_pick_is_replaced(self):
        builder = make_builder()
        twin_a = Card("Big Fish", frozenset({Category.FOOD}))
        twin_b = Card("big fish", frozenset({Category.MUSIC}))
        builder.candidates = [twin_a, twin_b, Card("Other", frozenset({Category.SPORTS}))]

        result = builder.intake("Ann", picked_card_ids=[twin_a.id, twin_b.id])

        assert result.ok
        keys = [c.key for c in builder.master_cards]
        assert len(keys) == 2
        assert keys[0] == "big fish"
        assert len(set(keys)) == 2

    def test_candidates_cleared_after_intake(self):
        builder = ready_builder()
        builder.intake("Ann", picked_card_ids=[c.id for c in builder.candidates[:2]])
        assert builder.candidates == []
        assert builder.selected_ids == set()
