# Area: Game
"""
salad_bowl.session — Building a game session
============================================

One place that turns configuration into a ready GameFlowCoordinator:
config file + environment → GameSettings, an optional titles file →
TitleSource, an optional seed → a shared ``random.Random``.

Usage:
    from salad_bowl import create_game

    game = create_game(config_path="game.json", seed=42)
    game.start_intake()
"""

import logging
import random
from typing import Any, Dict, Optional

from ._config import build_settings, load_config
from ._content.title_source import StaticTitleSource, TitleSource
from ._game.coordinator import GameFlowCoordinator

logger = logging.getLogger("salad_bowl.game")


def create_game(
    config_path: Optional[str] = None,
    seed: Optional[int] = None,
    titles_path: Optional[str] = None,
    config: Optional[Dict[str, Any]] = None,
) -> GameFlowCoordinator:
    """
    Create a game session from configuration.

    Args:
        config_path: Optional JSON config file
        seed: Seed for deck order and candidate offers; overrides config
        titles_path: Optional JSON titles file replacing the built-in bank
        config: Already-loaded config dict; skips load_config

    Raises:
        SettingsError: If the configuration is invalid
    """
    if config is None:
        config = load_config(config_path)
    settings = build_settings(config)
    if seed is None:
        seed = config.get("seed")
    rng = random.Random(seed)
    source = _build_source(titles_path, rng)
    logger.info(
        "Game session created: %d players, %ds timer, seed=%s",
        settings.players, settings.timer_seconds, seed,
    )
    return GameFlowCoordinator(settings=settings, source=source, rng=rng)


def _build_source(titles_path: Optional[str], rng: random.Random) -> TitleSource:
    if titles_path:
        return StaticTitleSource.from_file(titles_path, rng=rng)
    return StaticTitleSource.from_bank(rng=rng)
