"""
Closed-form readability formulas built on the counting primitives.

See https://en.wikipedia.org/wiki/Coleman%E2%80%93Liau_index,
https://en.wikipedia.org/wiki/Automated_readability_index and
https://it.wikipedia.org/wiki/Indice_Gulpease for the definitions.
"""

from __future__ import annotations

import math
from typing import Callable, Dict

from .errors import EmptyInputError, NoSentencesError, NoWordsError
from .stats import count_characters, count_sentences, count_words


def coleman_liau_index(text: str) -> float:
    """Return the Coleman–Liau index, rounded to one decimal place."""
    if not text:
        raise EmptyInputError("CLI")
    words = count_words(text)
    if words == 0:
        raise NoWordsError("CLI")
    characters = count_characters(text)
    sentences = count_sentences(text)

    cli = 5.88 * (characters / words) - 29.6 * (sentences / words) - 15.8
    return _round_half_away(cli * 10) / 10


def automated_readability_index(text: str) -> int:
    """
    Return the automated readability index (ARI), rounded up.

    The text needs at least one word and one sentence terminator.
    """
    if not text:
        raise EmptyInputError("ARI")
    words = count_words(text)
    if words == 0:
        raise NoWordsError("ARI")
    sentences = count_sentences(text)
    if sentences == 0:
        raise NoSentencesError("ARI")
    characters = count_characters(text)

    ari = 4.71 * (characters / words) + 0.5 * (words / sentences) - 21.43
    return math.ceil(ari)


def gulpease_index(text: str) -> int:
    """
    Return the Gulpease index for Italian text, rounded to the nearest integer.

    A number counts as a word, so "18." is a valid input.
    """
    if not text:
        raise EmptyInputError("Gulpease index")
    words = count_words(text)
    if words == 0:
        raise NoWordsError("Gulpease index")
    characters = count_characters(text)
    sentences = count_sentences(text)

    raw = 89 + (300 * sentences - 10 * characters) / words
    return int(_round_half_away(raw))


FORMULAS: Dict[str, Callable[[str], float | int]] = {
    "coleman_liau": coleman_liau_index,
    "ari": automated_readability_index,
    "gulpease": gulpease_index,
}


def get_formula(name: str) -> Callable[[str], float | int]:
    """Look up a formula by name."""
    normalized = name.lower().strip()
    try:
        return FORMULAS[normalized]
    except KeyError:
        raise ValueError(
            f"Unknown formula '{name}'. Expected one of {sorted(FORMULAS)}."
        ) from None


def _round_half_away(value: float) -> float:
    # Python's round() is banker's rounding; scores round .5 away from zero.
    return math.copysign(math.floor(abs(value) + 0.5), value)
