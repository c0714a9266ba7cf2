"""Small string utilities: equality, word and sentence counts, palindromes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = ["TextCounts", "strings_equal", "count_words_phrases", "is_palindrome", "find_word"]

_WORD_BREAKS = frozenset(" \t\n")


@dataclass(frozen=True)
class TextCounts:
    """Number of words and of phrases found in a piece of text."""

    words: int
    phrases: int


def strings_equal(first: str, second: str) -> bool:
    """Tell whether two strings are identical."""
    return first == second


def count_words_phrases(text: str) -> TextCounts:
    """Count words as whitespace characters plus one, and phrases as full stops."""
    breaks = sum(char in _WORD_BREAKS for char in text)
    return TextCounts(words=breaks + 1, phrases=text.count("."))


def is_palindrome(text: str) -> bool:
    """Tell whether the text reads the same backwards."""
    return text == text[::-1]


def find_word(text: str, word: str) -> Optional[int]:
    """Return the position of ``word`` among the space-separated words of ``text``.

    Runs of spaces count as one separator. Returns None when the word is absent.
    """
    tokens = (token for token in text.split(" ") if token)
    return next((i for i, token in enumerate(tokens) if token == word), None)