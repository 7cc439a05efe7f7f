from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import GradeBand

# Spellings follow the published table this project has always shipped.
GRADE_TABLE: Mapping[int, GradeBand] = MappingProxyType(
    {
        1: GradeBand("5-6", "Kindengarden"),
        2: GradeBand("6-7", "First Grade"),
        3: GradeBand("7-8", "Second Grade"),
        4: GradeBand("8-9", "Third Grade"),
        5: GradeBand("9-10", "Forth Grade"),
        6: GradeBand("10-11", "Fifth Grade"),
        7: GradeBand("11-12", "Sixth Grade"),
        8: GradeBand("12-13", "Seventh Grade"),
        9: GradeBand("13-14", "Eighth Grade"),
        10: GradeBand("14-15", "Ninth Grade"),
        11: GradeBand("15-16", "Tenth Grade"),
        12: GradeBand("16-17", "Eleventh Grade"),
        13: GradeBand("17-18", "Twelfth Grade"),
        14: GradeBand("18-22", "College student"),
    }
)

PROFESSOR_BAND = GradeBand("22+", "Professor level")
UNKNOWN_BAND = GradeBand("Unknown", "Unknown")


def ari_to_grades(score: int) -> GradeBand:
    """Map an ARI score to the reader age range and grade level."""
    if score > max(GRADE_TABLE):
        return PROFESSOR_BAND
    return GRADE_TABLE.get(score, UNKNOWN_BAND)
