# Area: Game Tests
"""Tests for salad_bowl._game.snapshot — game state snapshot builder."""

import json
import random

from salad_bowl._content.title_source import StaticTitleSource
from salad_bowl._game.coordinator import GameFlowCoordinator
from salad_bowl._game.snapshot import build_snapshot
from salad_bowl.settings import GameSettings


def playing_game():
    rng = random.Random(5)
    settings = GameSettings(players=4, picks_per_player=2, candidates_per_player=3, timer_seconds=30)
    game = GameFlowCoordinator(settings, StaticTitleSource.from_bank(rng=rng), rng=rng)
    game.start_intake()
    for name in ["Dan", "Ann", "Cat", "Ben"]:
        game.submit_player(name, picked_card_ids=[c.id for c in game.candidates[:2]])
    game.start_round()
    return game


def test_snapshot_before_intake():
    """A fresh game has no clue-giver, no cards and zero scores."""
    snap = build_snapshot(GameFlowCoordinator(rng=random.Random(0)))

    assert snap["stage"] == "settings"
    assert snap["clue_giver"] is None
    assert snap["deck_head"] is None
    assert snap["deck_size"] == 0
    assert snap["turn_state"] == "IDLE"
    assert snap["scores"] == {"rounds": {}, "cumulative": {"team_a": 0, "team_b": 0}}
    assert snap["bonus"] == {"player_id": None, "seconds": 0}


def test_snapshot_at_handoff():
    game = playing_game()
    snap = game.snapshot()

    assert snap["stage"] == "turn_handoff"
    assert snap["round_number"] == 1
    assert snap["round_title"] == game.current_round.title
    assert snap["current_team"] == "A"
    assert snap["clue_giver"]["display_name"] == "Dan"
    assert snap["clue_giver"]["team"] == "A"
    assert snap["deck_size"] == 8
    assert snap["deck_head"] == game.deck.head.text


def test_snapshot_during_turn():
    game = playing_game()
    game.begin_turn()
    game.mark_correct()
    game.tick()
    snap = game.snapshot()

    assert snap["stage"] == "turn"
    assert snap["turn_state"] == "ACTIVE"
    assert snap["time_remaining"] == 29
    assert snap["correct_this_turn"] == 1
    assert snap["deck_size"] == 7
    assert snap["skip_count"] == 0


def test_snapshot_recap_lists_events():
    game = playing_game()
    game.begin_turn()
    event = game.mark_correct().value
    game.end_turn()
    snap = game.snapshot()

    assert snap["stage"] == "recap"
    assert snap["turn_end_reason"] == "manual"
    assert snap["recap"] == [{
        "id": event.id,
        "text": event.card.text,
        "duration_seconds": event.duration_seconds,
        "highlighted": True,
    }]
    assert snap["scores"]["rounds"][1] == {"team_a": 1, "team_b": 0}
    assert snap["scores"]["cumulative"]["team_a"] == 1


def test_player_stats_sorted_by_name():
    snap = playing_game().snapshot()
    names = [s["display_name"] for s in snap["player_stats"]]
    assert names == ["Ann", "Ben", "Cat", "Dan"]
    assert all(s["correct_count"] == 0 for s in snap["player_stats"])
    assert all(s["fastest_answer"] is None for s in snap["player_stats"])


def test_snapshot_is_json_serializable():
    game = playing_game()
    game.begin_turn()
    game.mark_correct()
    json.dumps(game.snapshot())


def test_snapshot_is_detached_from_game():
    """Mutating a snapshot must not touch the game."""
    game = playing_game()
    game.begin_turn()
    game.mark_correct()
    game.end_turn()
    snap = game.snapshot()

    snap["recap"][0]["highlighted"] = False
    snap["scores"]["cumulative"]["team_a"] = 99

    assert game.turn.correct_events[0].highlighted is True
    assert game.ledger.cumulative.team_a == 1
