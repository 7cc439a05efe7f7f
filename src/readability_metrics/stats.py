"""
Counting primitives shared by every readability formula.

All functions accept arbitrary strings and never raise on content; empty
input counts as zero everywhere except ``count_syllables``, which is clamped
to at least one syllable per word.
"""

from __future__ import annotations

import re
import unicodedata

from .abbreviations import abbreviation_dots
from .models import AggregateStats

VOWELS = frozenset("aeiouy")
ES_RULES = ("intended", "compatible")

# Trim punctuation hugging a token so "table." keeps its silent-e suffix.
_EDGE_PUNCT_RE = re.compile(r"^[^\w]+|[^\w]+$", re.UNICODE)


def count_symbols(text: str) -> int:
    """
    Count symbols: code points except newlines, with "..." counted once.

    Ellipses nested in other punctuation (e.g. "[...]") are not special-cased.
    """
    if not text:
        return 0
    ellipses = text.count("...")
    newlines = text.count("\n")
    return len(text) - newlines - 2 * ellipses


def count_characters(text: str) -> int:
    """Count Unicode letters and decimal digits."""
    return sum(1 for ch in text if _is_letter_or_digit(ch))


def count_words(text: str) -> int:
    """
    Count whitespace-delimited tokens.

    Numbers count as words ("44." is one word, "12 and 43." is three), and
    contractions or possessives are never split.
    """
    if not text:
        return 0
    return len(text.replace("\n", " ").split())


def count_sentences(text: str) -> int:
    """Count '.', '!' and '?' minus the dots that belong to known abbreviations."""
    if not text:
        return 0
    terminators = text.count(".") + text.count("!") + text.count("?")
    return max(0, terminators - abbreviation_dots(text))


def count_syllables(word: str, *, es_rule: str = "intended") -> int:
    """
    Estimate English syllables in a single word.

    Counts vowel groups, drops a trailing silent 'e', then applies suffix
    corrections for -le/-les, -ed and -es. ``es_rule="compatible"`` keeps the
    historic -es behaviour where w/x/y before the suffix still add a syllable.
    The result is never below one.
    """
    if es_rule not in ES_RULES:
        raise ValueError(f"Unknown es_rule '{es_rule}'. Expected one of {ES_RULES}.")

    word = word.lower()
    count = 0
    prev_was_vowel = False
    for ch in word:
        is_vowel = ch in VOWELS
        if is_vowel and not prev_was_vowel:
            count += 1
        prev_was_vowel = is_vowel

    if word.endswith("e"):
        count -= 1

    if len(word) > 2:
        if word.endswith(("le", "les")):
            suffix_len = 3 if word.endswith("les") else 2
            if len(word) > suffix_len and _is_consonant(word[-suffix_len - 1]):
                count += 1
        elif word.endswith("ed"):
            before = word[-3]
            if before == "t":
                count += 1
            elif before in VOWELS:
                count -= 1
        elif word.endswith("es"):
            before = word[-3]
            if es_rule == "compatible":
                if _is_consonant(before):
                    count += 1
            elif _is_consonant(before) and before not in "wxy":
                count += 1

    return max(1, count)


def build_aggregate_stats(text: str, *, es_rule: str = "intended") -> AggregateStats:
    """Evaluate every counting primitive once over ``text``."""
    syllables = 0
    for token in text.split():
        # Punctuation-only tokens strip to "" and still count one syllable.
        word = _EDGE_PUNCT_RE.sub("", token).strip("_")
        syllables += count_syllables(word, es_rule=es_rule)

    return AggregateStats(
        symbols=count_symbols(text),
        characters=count_characters(text),
        words=count_words(text),
        sentences=count_sentences(text),
        syllables=syllables,
    )


# Debugging helper name kept for callers of the older API.
count_all_stats = build_aggregate_stats


def format_stats(stats: AggregateStats) -> str:
    """Render stats as tab-aligned ``Label:\\tvalue`` lines."""
    lines = [
        f"Symbols:\t{stats.symbols}",
        f"Characters:\t{stats.characters}",
        f"Words:\t\t{stats.words}",
        f"Sentences:\t{stats.sentences}",
        f"Syllables:\t{stats.syllables}",
    ]
    return "\n".join(lines)


def _is_letter_or_digit(ch: str) -> bool:
    category = unicodedata.category(ch)
    return category.startswith("L") or category == "Nd"


def _is_consonant(ch: str) -> bool:
    return ch.isalpha() and ch not in VOWELS
