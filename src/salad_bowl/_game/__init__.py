# Area: Game
"""
Game - Top-level flow between turns.

This package handles:
- Stage progression (settings → intake → rounds → game end)
- Team alternation and clue-giver rotation
- Rematch / new game
- Snapshots for the presentation layer
"""

from .stage import Stage
from .coordinator import GameFlowCoordinator
from .snapshot import build_snapshot

__all__ = ["Stage", "GameFlowCoordinator", "build_snapshot"]
