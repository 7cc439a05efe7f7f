import json
from pathlib import Path

from typer.testing import CliRunner

from readability_metrics.cli import app

runner = CliRunner()

SAMPLE = "Hello world hello world hello. Hello world hello world hello."


def test_cli_stats_inline_text():
    """stats command prints label/value lines for inline text."""
    result = runner.invoke(app, ["stats", "--text", "The cat sat on the mat."])
    assert result.exit_code == 0
    assert "Words:\t\t6" in result.stdout
    assert "Sentences:\t1" in result.stdout


def test_cli_stats_reads_file(tmp_path: Path):
    path = tmp_path / "sample.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    result = runner.invoke(app, ["stats", "--input-path", str(path)])
    assert result.exit_code == 0
    assert "Characters:\t50" in result.stdout


def test_cli_stats_requires_input():
    result = runner.invoke(app, ["stats"])
    assert result.exit_code != 0


def test_cli_analyze_outputs_summary(tmp_path: Path):
    """analyze walks a directory and reports only supported files."""
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(app, ["analyze", "--input-path", str(corpus_dir)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    doc_ids = [doc["doc_id"] for doc in payload["documents"]]
    assert doc_ids == ["chapter1.txt", "part2/chapter2.txt"]
    first = payload["documents"][0]
    assert first["scores"]["gulpease"] == 99
    assert first["grade"]["grade_level"] == "Forth Grade"


def test_cli_analyze_with_formula_override(tmp_path: Path):
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(
        app,
        [
            "analyze",
            "--input-path",
            str(corpus_dir / "chapter1.txt"),
            "--formula",
            "ari",
            "--es-rule",
            "compatible",
        ],
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["documents"][0]["scores"] == {"ari": 5}


def test_cli_analyze_rejects_unknown_formula(tmp_path: Path):
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(
        app, ["analyze", "--input-path", str(corpus_dir), "--formula", "flesch"]
    )
    assert result.exit_code == 2


def test_cli_analyze_uses_config_extensions(tmp_path: Path):
    corpus_dir = _create_sample_corpus(tmp_path)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("file_extensions: [.md]\n", encoding="utf-8")
    result = runner.invoke(
        app,
        ["analyze", "--input-path", str(corpus_dir), "--config", str(config_path)],
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [doc["doc_id"] for doc in payload["documents"]] == ["notes.md"]


def test_cli_score():
    result = runner.invoke(app, ["score", "ari", "--text", SAMPLE])
    assert result.exit_code == 0
    assert result.stdout.strip() == "5"


def test_cli_score_reports_formula_errors():
    result = runner.invoke(app, ["score", "ari", "--text", "hello world"])
    assert result.exit_code == 1
    assert "No sentences" in result.output


def test_cli_score_unknown_formula():
    result = runner.invoke(app, ["score", "flesch", "--text", SAMPLE])
    assert result.exit_code == 2


def test_cli_grade():
    result = runner.invoke(app, ["grade", "5"])
    assert result.exit_code == 0
    assert "Age: 9-10" in result.stdout
    assert "Grade: Forth Grade" in result.stdout

    result = runner.invoke(app, ["grade", "20"])
    assert "Professor level" in result.stdout


def test_cli_rejects_unknown_log_level():
    result = runner.invoke(app, ["--log-level", "LOUD", "grade", "5"])
    assert result.exit_code == 2
    assert "Grade:" not in result.output

    result = runner.invoke(app, ["--log-level", "debug", "grade", "5"])
    assert result.exit_code == 0


def test_cli_print_config():
    """print-config command dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "formulas" in result.stdout
    assert "es_rule: intended" in result.stdout


def _create_sample_corpus(tmp_path: Path) -> Path:
    """Create a small corpus with nested .txt files and one unsupported file."""
    corpus_dir = tmp_path / "corpus"
    (corpus_dir / "part2").mkdir(parents=True)
    (corpus_dir / "chapter1.txt").write_text(SAMPLE, encoding="utf-8")
    (corpus_dir / "part2" / "chapter2.txt").write_text(
        "The storm clouds rolled over the bay. Sailors watched the winds.",
        encoding="utf-8",
    )
    (corpus_dir / "notes.md").write_text("Dr. Smith went home.", encoding="utf-8")
    return corpus_dir
