# Area: Content
"""
Content - Title sources for candidate generation.

This package handles:
- The abstract TitleSource queries (draw / preload)
- The built-in static title bank
- "No-say" tokenization of titles
"""

from .title_source import TitleSource, StaticTitleSource
from .title_bank import TITLE_ENTRIES, bank_cards
from .tokens import Token, tokenize_title

__all__ = [
    "TitleSource",
    "StaticTitleSource",
    "TITLE_ENTRIES",
    "bank_cards",
    "Token",
    "tokenize_title",
]
