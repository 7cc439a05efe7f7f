from __future__ import annotations

import logging
from typing import Any, Dict, List

from .config import ReadabilityConfig
from .errors import ReadabilityError
from .formulas import get_formula
from .grades import ari_to_grades
from .models import Document, FormulaResult, ReadabilityReport
from .stats import build_aggregate_stats

logger = logging.getLogger(__name__)


def analyze_document(doc: Document, config: ReadabilityConfig) -> ReadabilityReport:
    """Count stats and evaluate every configured formula for a single document."""
    formulas = [(name.lower().strip(), get_formula(name)) for name in config.formulas]
    stats = build_aggregate_stats(doc.text, es_rule=config.es_rule)
    logger.debug(
        "Document %s: %d words, %d sentences", doc.doc_id, stats.words, stats.sentences
    )

    report = ReadabilityReport(doc_id=doc.doc_id, stats=stats)
    for name, formula in formulas:
        try:
            score = formula(doc.text)
        except ReadabilityError as exc:
            logger.warning("Skipping %s for %s: %s", name, doc.doc_id, exc)
            report.results.append(FormulaResult(name=name, score=None, error=str(exc)))
            continue
        report.results.append(FormulaResult(name=name, score=score))

    if config.include_grade:
        ari = report.score("ari")
        if ari is None and all(name != "ari" for name, _ in formulas):
            try:
                ari = get_formula("ari")(doc.text)
            except ReadabilityError:
                ari = None
        if ari is not None:
            report.grade = ari_to_grades(int(ari))

    return report


def analyze_corpus(
    documents: List[Document], config: ReadabilityConfig
) -> Dict[str, ReadabilityReport]:
    """Analyze all documents and return the per-document reports."""
    results: Dict[str, ReadabilityReport] = {}
    for document in documents:
        results[document.doc_id] = analyze_document(document, config)
    logger.info("Analyzed %d documents", len(results))
    return results


def report_to_dict(report: ReadabilityReport) -> dict[str, Any]:
    """Serialize a ReadabilityReport so it can be emitted in JSON."""
    payload: dict[str, Any] = {
        "doc_id": report.doc_id,
        "stats": {
            "symbols": report.stats.symbols,
            "characters": report.stats.characters,
            "words": report.stats.words,
            "sentences": report.stats.sentences,
            "syllables": report.stats.syllables,
        },
        "scores": {result.name: result.score for result in report.results},
    }
    errors = {r.name: r.error for r in report.results if r.error is not None}
    if errors:
        payload["errors"] = errors
    if report.grade is not None:
        payload["grade"] = {
            "age": report.grade.age,
            "grade_level": report.grade.grade_level,
        }
    return payload
