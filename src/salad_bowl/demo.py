# Area: Game
"""
salad_bowl.demo — Seeded auto-play
==================================

Plays a whole game against a GameFlowCoordinator without a human at the
device. Every decision (names, picks, correct / skip / let the clock
run, recap corrections) comes from one seeded ``random.Random`` and the
clock is driven by ``tick()``, so the same seed always plays the same
game.

Usage:
    from salad_bowl import GameFlowCoordinator, DemoPlayer

    game = GameFlowCoordinator(rng=random.Random(7))
    result = DemoPlayer(game, rng=random.Random(7)).play()
"""

import logging
import random
from typing import Callable, List, Optional

from ._game.coordinator import GameFlowCoordinator
from ._game.stage import Stage
from ._scoring.results import GameResult

logger = logging.getLogger("salad_bowl.game.demo")

DEMO_NAMES = [
    "Alex", "Blake", "Casey", "Dana", "Eli", "Frankie", "Gray", "Harper",
    "Indy", "Jules", "Kai", "Lane", "Morgan", "Noor", "Ollie", "Parker",
    "Quinn", "Riley", "Sam", "Taylor",
]

# Guard against a game that can never finish
MAX_STEPS = 100_000


class DemoPlayer:
    """
    Drives a coordinator from settings to game end.

    Attributes:
        correct_rate: Chance the team guesses the shown card
        skip_rate: Chance the clue-giver skips (rounds 2 and 3)
        reject_rate: Chance a recap entry is un-highlighted
    """

    def __init__(
        self,
        game: GameFlowCoordinator,
        rng: Optional[random.Random] = None,
        correct_rate: float = 0.5,
        skip_rate: float = 0.15,
        reject_rate: float = 0.1,
        on_round_end: Optional[Callable[[int, List[str]], None]] = None,
    ):
        self.game = game
        self._rng = rng or random.Random()
        self.correct_rate = correct_rate
        self.skip_rate = skip_rate
        self.reject_rate = reject_rate
        self.on_round_end = on_round_end

    def play(self) -> GameResult:
        """Play until the game ends and return the result."""
        game = self.game
        if game.stage is Stage.SETTINGS:
            game.start_intake().unwrap()
        if game.stage is Stage.INTAKE:
            self._intake()

        for _ in range(MAX_STEPS):
            if game.stage is Stage.GAME_END:
                break
            self._step()
        else:
            raise RuntimeError(f"Demo game did not finish in {MAX_STEPS} steps")

        if self.on_round_end is not None:
            self.on_round_end(game.current_round.value, game.round_highlights())
        return game.result()

    def _intake(self) -> None:
        game = self.game
        picks = game.settings.picks_per_player
        manual_count = game.settings.manual_words_per_player
        for number in range(game.settings.players):
            name = DEMO_NAMES[number % len(DEMO_NAMES)]
            if number >= len(DEMO_NAMES):
                name = f"{name} {number // len(DEMO_NAMES) + 1}"
            picked = [c.id for c in self._rng.sample(game.candidates, picks)] if picks else []
            manual = [f"{name}'s secret title {k + 1}" for k in range(manual_count)]
            game.submit_player(name, picked_card_ids=picked, manual_words=manual).unwrap()

    def _step(self) -> None:
        game = self.game
        stage = game.stage
        if stage is Stage.ROUND_INTRO:
            game.start_round().unwrap()
        elif stage is Stage.TURN_HANDOFF:
            game.begin_turn()
        elif stage is Stage.TURN:
            self._act()
        elif stage is Stage.TURN_PAUSED:
            game.unpause_turn().unwrap()
        elif stage is Stage.RECAP:
            for event in game.turn.correct_events:
                if self._rng.random() < self.reject_rate:
                    game.toggle_highlight(event.id, False)
            game.recap_finalize().unwrap()
        elif stage is Stage.ROUND_END:
            if self.on_round_end is not None:
                self.on_round_end(game.current_round.value, game.round_highlights())
            game.proceed_to_next_round().unwrap()

    def _act(self) -> None:
        game = self.game
        roll = self._rng.random()
        if roll < self.correct_rate:
            game.mark_correct()
        elif roll < self.correct_rate + self.skip_rate and game.current_round.skip_allowed:
            game.skip_card()
        else:
            game.tick()
