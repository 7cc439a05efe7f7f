from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Sequence

import typer
import yaml

from .config import ReadabilityConfig, load_config
from .errors import ReadabilityError
from .formulas import FORMULAS, get_formula
from .grades import ari_to_grades
from .models import Document
from .pipeline import analyze_corpus, report_to_dict
from .stats import ES_RULES, build_aggregate_stats, format_stats

logger = logging.getLogger(__name__)

app = typer.Typer(help="Readability metrics CLI.", no_args_is_help=True)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Compute text statistics and readability scores."""
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise typer.BadParameter(
            f"Unknown log level '{log_level}'.", param_hint="--log-level"
        )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def stats(
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Inline text to count."),
    es_rule: str = typer.Option(
        "intended", "--es-rule", help="Syllable rule for words ending in -es."
    ),
) -> None:
    """Print symbol, character, word, sentence and syllable counts."""
    source = _resolve_text(input_path, text)
    _validate_es_rule(es_rule)
    typer.echo(format_stats(build_aggregate_stats(source, es_rule=es_rule)))


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    formula: List[str] | None = typer.Option(
        None,
        "--formula",
        "-f",
        help="Formula to evaluate (repeatable): coleman_liau, ari, gulpease.",
    ),
    es_rule: str | None = typer.Option(
        None, "--es-rule", help="Override the -es syllable rule."
    ),
) -> None:
    """Analyze a file or directory and emit a JSON summary."""
    cfg = load_config(config)
    _apply_overrides(cfg, formula, es_rule)
    documents = _load_documents(input_path, cfg.file_extensions)
    try:
        reports = analyze_corpus(documents, cfg)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    summary = [report_to_dict(report) for _, report in sorted(reports.items())]
    typer.echo(json.dumps({"documents": summary}, indent=2))


@app.command()
def score(
    formula: str = typer.Argument(..., help="One of: coleman_liau, ari, gulpease."),
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Inline text to score."),
) -> None:
    """Print a single readability score."""
    try:
        func = get_formula(formula)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="FORMULA") from exc
    source = _resolve_text(input_path, text)
    try:
        value = func(source)
    except ReadabilityError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(str(value))


@app.command()
def grade(value: int = typer.Argument(..., help="ARI score.")) -> None:
    """Print the reader age and grade level for an ARI score."""
    band = ari_to_grades(value)
    typer.echo(f"Age: {band.age}")
    typer.echo(f"Grade: {band.grade_level}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ReadabilityConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: ReadabilityConfig,
    formulas: Sequence[str] | None,
    es_rule: str | None,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if formulas:
        unknown = [name for name in formulas if name.lower().strip() not in FORMULAS]
        if unknown:
            raise typer.BadParameter(
                f"Unknown formula(s): {', '.join(unknown)}", param_hint="--formula"
            )
        config.formulas = list(formulas)
    if es_rule is not None:
        _validate_es_rule(es_rule)
        config.es_rule = es_rule


def _validate_es_rule(es_rule: str) -> None:
    if es_rule not in ES_RULES:
        raise typer.BadParameter(
            f"Expected one of {', '.join(ES_RULES)}.", param_hint="--es-rule"
        )


def _resolve_text(input_path: Path | None, text: str | None) -> str:
    """Return inline text or the contents of the input file."""
    if text is not None and input_path is not None:
        raise typer.BadParameter("Use either --input-path or --text, not both.")
    if text is not None:
        return text
    if input_path is None:
        raise typer.BadParameter("Provide --input-path or --text.")
    return input_path.read_text(encoding="utf-8")


def _load_documents(input_path: Path, extensions: Sequence[str]) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [Document(input_path.name, input_path.read_text(encoding="utf-8"))]

    suffixes = {ext.lower() for ext in extensions}
    documents: List[Document] = []
    for file in sorted(p for p in input_path.rglob("*") if p.is_file()):
        if file.suffix.lower() not in suffixes:
            logger.debug("Skipping %s (unsupported extension)", file)
            continue
        relative_id = file.relative_to(input_path).as_posix()
        documents.append(Document(relative_id, file.read_text(encoding="utf-8")))
    return documents


if __name__ == "__main__":
    main()
