"""
readability_metrics package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import ReadabilityConfig, config_from_dict, config_from_yaml, load_config
from .errors import EmptyInputError, NoSentencesError, NoWordsError, ReadabilityError
from .formulas import automated_readability_index, coleman_liau_index, gulpease_index
from .grades import ari_to_grades
from .models import AggregateStats, Document, GradeBand, ReadabilityReport
from .pipeline import analyze_corpus, analyze_document
from .stats import (
    build_aggregate_stats,
    count_characters,
    count_sentences,
    count_symbols,
    count_syllables,
    count_words,
    format_stats,
)

__all__ = [
    "AggregateStats",
    "Document",
    "GradeBand",
    "ReadabilityReport",
    "ReadabilityConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "ReadabilityError",
    "EmptyInputError",
    "NoWordsError",
    "NoSentencesError",
    "count_symbols",
    "count_characters",
    "count_words",
    "count_sentences",
    "count_syllables",
    "build_aggregate_stats",
    "format_stats",
    "coleman_liau_index",
    "automated_readability_index",
    "gulpease_index",
    "ari_to_grades",
    "analyze_document",
    "analyze_corpus",
]

__version__ = "0.1.0"
