# Area: Round
"""
Round - Round-scoped working deck.
"""

from .deck import DeckEngine

__all__ = ["DeckEngine"]
