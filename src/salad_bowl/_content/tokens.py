# Area: Content
"""
salad_bowl._content.tokens — "No-say" title tokens
==================================================

Splits a title into the words the clue-giver must not say in round 1.
A leading article is reported as optional.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List

DEFAULT_LEADING_ARTICLES = ("the", "a", "an")

_WORD_RE = re.compile(r"[^\W_]+")


@dataclass(frozen=True)
class Token:
    text: str
    required: bool


def tokenize_title(
    text: str,
    leading_articles: Iterable[str] = DEFAULT_LEADING_ARTICLES,
) -> List[Token]:
    """Lower-case word tokens of ``text``; punctuation is dropped."""
    articles = {a.lower() for a in leading_articles}
    words = _WORD_RE.findall(text.lower())
    return [
        Token(text=word, required=not (i == 0 and word in articles))
        for i, word in enumerate(words)
    ]
