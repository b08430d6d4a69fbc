"""
salad_bowl — Salad Bowl Party Game Core
=======================================

Two teams, one shared device, three rounds over the same bowl of
titles: describe it, say one word, act it out.

Quick Start:
    from salad_bowl import create_game

    game = create_game(seed=42)
    game.start_intake()
    game.submit_player("Alex", picked_card_ids=[...])
    ...
    game.start_round()
    game.begin_turn()
    game.mark_correct()

Auto-play:
    from salad_bowl import create_game, DemoPlayer
    result = DemoPlayer(create_game(seed=7)).play()

Every action returns an ``Outcome``:

    outcome = game.skip_card()
    if not outcome.ok:
        print(outcome.error.code)       # e.g. "skip_disabled"

Snapshot Types
--------------
The read-only snapshot structure is available for import:

    from salad_bowl import GameSnapshot, ScoresView, PlayerStatsView
"""

from ._game.coordinator import GameFlowCoordinator
from ._game.stage import Stage
from ._content.title_source import TitleSource, StaticTitleSource
from ._content.tokens import Token, tokenize_title
from ._scoring.results import GameResult, TeamTotals
from ._turn.enums import TurnEndReason, TurnState
from .demo import DemoPlayer
from .session import create_game
from .settings import GameSettings, TitleFilter
from .models import (
    Card,
    Category,
    CorrectEvent,
    Player,
    PlayerStats,
    RoundPhase,
    RoundScore,
    Team,
)
from .errors import (
    SaladBowlError,
    ValidationError,
    OperationNotAllowed,
    ContentSupplyShortfall,
    SettingsError,
    Outcome,
)
from .types import (
    GameSnapshot,
    PlayerView,
    TeamScoreView,
    ScoresView,
    PlayerStatsView,
    CorrectEventView,
    BonusView,
)

__all__ = [
    # Main classes
    "GameFlowCoordinator",
    "Stage",
    "create_game",
    "DemoPlayer",
    "GameSettings",
    "TitleFilter",
    "TitleSource",
    "StaticTitleSource",
    "Token",
    "tokenize_title",
    "GameResult",
    "TeamTotals",
    "TurnEndReason",
    "TurnState",
    # Models
    "Card",
    "Category",
    "CorrectEvent",
    "Player",
    "PlayerStats",
    "RoundPhase",
    "RoundScore",
    "Team",
    # Errors
    "SaladBowlError",
    "ValidationError",
    "OperationNotAllowed",
    "ContentSupplyShortfall",
    "SettingsError",
    "Outcome",
    # Snapshot types
    "GameSnapshot",
    "PlayerView",
    "TeamScoreView",
    "ScoresView",
    "PlayerStatsView",
    "CorrectEventView",
    "BonusView",
]
__version__ = "1.0.0"
