"""
Readability helpers for Italian texts.

1. Gulpease index (https://it.wikipedia.org/wiki/Indice_Gulpease)
"""

from __future__ import annotations

from .formulas import gulpease_index


def calc_gulpease(text: str) -> int:
    """Return the Gulpease index of a non-empty Italian text."""
    return gulpease_index(text)
