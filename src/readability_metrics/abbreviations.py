from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

_ABBREVIATIONS = (
    "u.s.",
    # titles
    "mr.",
    "messrs.",
    "mrs.",
    "mmes.",
    "ms.",
    "dr.",
    "prof.",
    "capt.",
    "st.",
    "revd.",
    "rev.",
    # months
    "jan.",
    "feb.",
    "mar.",
    "apr.",
    "aug.",
    "sept.",
    "oct.",
    "nov.",
    "dec.",
    # latin and era markers
    "a.m.",
    "p.m.",
    "i.e.",
    "e.g.",
    "a.d.",
    "b.c.",
    "b.c.e.",
    "c.e.",
    "n.b.",
)

# Every dot inside a known abbreviation is treated as non-terminating.
ABBREVIATIONS: Mapping[str, int] = MappingProxyType(
    {abbr: abbr.count(".") for abbr in _ABBREVIATIONS}
)

# Longest keys first so "b.c.e." wins over "b.c.".
ABBREVIATION_RE = re.compile(
    r"(?<![\w.])(?:"
    + "|".join(re.escape(abbr) for abbr in sorted(ABBREVIATIONS, key=len, reverse=True))
    + r")(?!\w)",
    re.IGNORECASE,
)


def abbreviation_dots(text: str) -> int:
    """Return how many dots in ``text`` belong to known abbreviations."""
    return sum(
        ABBREVIATIONS[match.group(0).lower()] for match in ABBREVIATION_RE.finditer(text)
    )
