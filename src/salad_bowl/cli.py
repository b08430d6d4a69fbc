# Area: Shared
"""
salad_bowl.cli — Command-line interface
=======================================

A terminal pass-and-play game on top of the core, plus a seeded
auto-play demo.

Usage:
    salad-bowl                                # Play in the terminal
    salad-bowl --demo --seed 7                # Watch a seeded auto-played game
    python -m salad_bowl --config game.json   # Settings from a JSON file

Settings come from the config file, then SALAD_BOWL_* environment
variables (a .env file in the working directory is loaded first).
Demo mode can be enabled via:
    1. CLI flag: --demo
    2. Config key: demo_mode: true
    3. Environment variable: SALAD_BOWL_DEMO=true
"""

import argparse
import logging
import os
import random
import sys
from typing import Any, Callable, Dict, List, Optional

from dotenv import load_dotenv

from ._config import load_config
from ._content.tokens import tokenize_title
from ._game.coordinator import GameFlowCoordinator
from ._game.stage import Stage
from ._scoring.results import GameResult
from ._shared.logging_config import log_game_error, setup_logging
from .demo import DemoPlayer
from .errors import Outcome, SettingsError
from .models import RoundPhase
from .session import create_game

# Stages where quitting means the game was never set up
SETUP_STAGES = (Stage.SETTINGS, Stage.INTAKE)

SETUP_HINT = (
    "Not enough titles for these settings. Lower the pick or candidate counts "
    "(--config or SALAD_BOWL_* variables) or pass a bigger --titles file, then start again."
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Salad Bowl - pass-and-play party word game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  salad-bowl
  salad-bowl --demo --seed 7
  salad-bowl --config game.json --titles my_titles.json
  SALAD_BOWL_PLAYERS=4 salad-bowl --demo
        """,
    )

    parser.add_argument(
        "--demo",
        action="store_true",
        help="Auto-play a whole game and print the result",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for deck order, candidates and demo decisions",
    )

    parser.add_argument(
        "--titles",
        type=str,
        help="JSON titles file to use instead of the built-in bank",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Log file path (default: salad_bowl.log)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log at DEBUG level",
    )

    return parser.parse_args(argv)


def is_demo_mode(args: argparse.Namespace, config: Dict[str, Any]) -> bool:
    """Check if demo mode is enabled via CLI, config, or environment."""
    if args.demo:
        return True
    if config.get("demo_mode"):
        return True
    if os.environ.get("SALAD_BOWL_DEMO", "").lower() in ("true", "1", "yes"):
        return True
    return False


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    load_dotenv()
    args = parse_args(argv)
    try:
        config = load_config(args.config)
    except SettingsError as e:
        return _settings_failed(e)

    setup_logging(
        log_file_path=args.log_file or config.get("log_file", "salad_bowl.log"),
        level=logging.DEBUG if args.verbose else logging.INFO,
        terminal=False,
    )

    try:
        game = create_game(seed=args.seed, titles_path=args.titles, config=config)
    except SettingsError as e:
        return _settings_failed(e)

    if is_demo_mode(args, config):
        seed = args.seed if args.seed is not None else config.get("seed")
        player = DemoPlayer(game, rng=random.Random(seed), on_round_end=_print_highlights)
        print_result(player.play())
        return 0

    return run_interactive(game)


# ── Output ───────────────────────────────────────────────────


def _settings_failed(error: SettingsError) -> int:
    print("Error: invalid settings", file=sys.stderr)
    for message in error.validation_errors:
        print(f"  - {message}", file=sys.stderr)
    return 1


def _print_highlights(round_number: int, highlights: List[str]) -> None:
    print(f"\n== Round {round_number} complete ==")
    for line in highlights:
        print(f"  * {line}")


def print_result(result: GameResult) -> None:
    print("\n== Final scores ==")
    for number, totals in result.rounds.items():
        print(f"  Round {number}: Team A {totals.team_a} - Team B {totals.team_b}")
    print(f"  Total:   Team A {result.totals.team_a} - Team B {result.totals.team_b}")
    if result.is_tie:
        print("It's a tie!")
    else:
        print(f"{result.winner.display_name} wins!")


def _no_say(title: str) -> str:
    """Words of ``title`` the clue-giver may not say; optional ones in brackets."""
    return " ".join(
        token.text if token.required else f"({token.text})"
        for token in tokenize_title(title)
    )


def _report(outcome: Outcome) -> Outcome:
    if not outcome.ok:
        log_game_error(outcome.error)
        print(f"  ! {outcome.error.message}")
    return outcome


# ── Interactive play ─────────────────────────────────────────


def run_interactive(game: GameFlowCoordinator, read: Callable[[str], str] = input) -> int:
    """
    Run a pass-and-play game on this terminal.

    Returns 1 if the game could not be set up (intake failed), else 0.
    """
    try:
        while True:
            handler = _HANDLERS.get(game.stage)
            if handler is None:
                break
            if handler(game, read) is False:
                break
    except (EOFError, KeyboardInterrupt):
        print("\nBye!")
        return 0
    return 1 if game.stage in SETUP_STAGES else 0


def _settings(game: GameFlowCoordinator, read: Callable[[str], str]) -> Optional[bool]:
    s = game.settings
    print(
        f"\nSalad Bowl: {s.players} players, {s.timer_seconds}s turns, "
        f"{s.picks_per_player} picks + {s.manual_words_per_player} written titles each"
    )
    read("Press Enter to start intake... ")
    if not _report(game.start_intake()).ok:
        print(SETUP_HINT)
        return False
    return None


def _intake(game: GameFlowCoordinator, read: Callable[[str], str]) -> Optional[bool]:
    team = game.collecting_team
    print(f"\n{team.display_name}: pass the device to the next player")
    name = read("Your name: ")
    picked: List[str] = []
    if game.settings.picks_per_player:
        for number, card in enumerate(game.candidates, start=1):
            print(f"  {number}. {card.text}")
        raw = read(f"Pick {game.settings.picks_per_player} (numbers separated by spaces): ")
        choices = [int(tok) for tok in raw.split() if tok.isdigit()]
        candidates = game.candidates
        picked = [candidates[i - 1].id for i in choices if 1 <= i <= len(candidates)]
    manual = [
        read(f"Write title {k + 1}: ")
        for k in range(game.settings.manual_words_per_player)
    ]
    result = _report(game.submit_player(name, picked_card_ids=picked, manual_words=manual))
    if result.code == "supply_shortfall":
        print(SETUP_HINT)
        return False
    return None


def _round_intro(game: GameFlowCoordinator, read: Callable[[str], str]) -> None:
    phase = game.current_round
    print(f"\n== {phase.title} ==\n{phase.rules}\n{phase.skip_policy}")
    read("Press Enter to begin the round... ")
    _report(game.start_round())


def _handoff(game: GameFlowCoordinator, read: Callable[[str], str]) -> None:
    print(f"\nPass the device to {game.clue_giver.display_name} ({game.current_team.display_name})")
    read("Press Enter when ready... ")
    _report(game.begin_turn())


def _turn(game: GameFlowCoordinator, read: Callable[[str], str]) -> None:
    game.pump()
    if game.stage is not Stage.TURN:
        return
    head = game.deck.head
    print(f"\n[{game.turn.time_remaining}s] {head.text if head else '-'}")
    if head is not None and game.current_round is RoundPhase.ONE:
        print(f"  Don't say: {_no_say(head.text)}")
    command = read("(c)orrect (s)kip (p)ause (e)nd: ").strip().lower()
    game.pump()
    if game.stage is not Stage.TURN:
        print("  Time's up!")
        return
    actions = {
        "c": game.mark_correct,
        "s": game.skip_card,
        "p": game.pause_turn,
        "e": game.end_turn,
    }
    action = actions.get(command[:1])
    if action is not None:
        _report(action())


def _paused(game: GameFlowCoordinator, read: Callable[[str], str]) -> None:
    read(f"\nPaused with {game.turn.time_remaining}s left. Press Enter to resume... ")
    _report(game.unpause_turn())


def _recap(game: GameFlowCoordinator, read: Callable[[str], str]) -> None:
    reason = game.turn.last_turn_end_reason
    print(f"\nTurn over ({reason.value if reason else 'ended'}). Got these:")
    events = game.turn.correct_events
    for number, event in enumerate(events, start=1):
        mark = "x" if event.highlighted else " "
        print(f"  [{mark}] {number}. {event.card.text} ({event.duration_seconds:.1f}s)")
    raw = read("Toggle with a number, undo with u<number>, Enter to confirm: ").strip().lower()
    if not raw:
        _report(game.recap_finalize())
        return
    undo = raw.startswith("u")
    digits = raw[1:] if undo else raw
    if not digits.isdigit() or not 1 <= int(digits) <= len(events):
        return
    event = events[int(digits) - 1]
    _report(game.undo(event.id) if undo else game.toggle_highlight(event.id))


def _round_end(game: GameFlowCoordinator, read: Callable[[str], str]) -> None:
    _print_highlights(game.current_round.value, game.round_highlights())
    read("Press Enter for the next round... ")
    _report(game.proceed_to_next_round())


def _game_end(game: GameFlowCoordinator, read: Callable[[str], str]) -> bool:
    _print_highlights(game.current_round.value, game.round_highlights())
    print_result(game.result())
    again = read("(r)ematch, (n)ew game, or Enter to quit: ").strip().lower()
    if again.startswith("r"):
        _report(game.rematch())
        return True
    if again.startswith("n"):
        _report(game.new_game())
        return True
    return False


_HANDLERS: Dict[Stage, Callable[[GameFlowCoordinator, Callable[[str], str]], Any]] = {
    Stage.SETTINGS: _settings,
    Stage.INTAKE: _intake,
    Stage.ROUND_INTRO: _round_intro,
    Stage.TURN_HANDOFF: _handoff,
    Stage.TURN: _turn,
    Stage.TURN_PAUSED: _paused,
    Stage.RECAP: _recap,
    Stage.ROUND_END: _round_end,
    Stage.GAME_END: _game_end,
}
