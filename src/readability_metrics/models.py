from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class AggregateStats:
    """All counting primitives evaluated once over a single text."""

    symbols: int
    characters: int
    words: int
    sentences: int
    syllables: int


class GradeBand(NamedTuple):
    """Minimal reader age and school grade for an ARI score."""

    age: str
    grade_level: str


@dataclass(slots=True)
class FormulaResult:
    """Outcome of one readability formula; ``score`` is None when it failed."""

    name: str
    score: float | int | None
    error: str | None = None


@dataclass(slots=True)
class ReadabilityReport:
    """Computed readability statistics for a full document."""

    doc_id: str
    stats: AggregateStats
    results: list[FormulaResult] = field(default_factory=list)
    grade: GradeBand | None = None

    def score(self, name: str) -> float | int | None:
        for result in self.results:
            if result.name == name:
                return result.score
        return None
