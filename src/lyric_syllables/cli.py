from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, TypedDict

import typer
import yaml

from .analyzer import LineAnalyzer
from .config import EngineConfig, load_config
from .errors import UnsupportedLanguageError
from .languages import Language
from .models import Document, DocumentStats, LineStats, Token
from .pipeline import process_corpus
from .rendering import render_document

app = typer.Typer(help="Lyric syllable analysis CLI.", no_args_is_help=True)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable INFO logging."),
) -> None:
    """Analyze lyrics line by line and count syllables."""
    if verbose:
        logging.basicConfig(
            level=logging.INFO, format="%(levelname)s %(name)s: %(message)s"
        )


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    language: str | None = typer.Option(
        None, "--language", "-l", help="Language to syllabify (e.g., 'en' or 'de')."
    ),
    summary_only: bool = typer.Option(
        False, "--summary-only", help="Omit per-line token data from the output."
    ),
) -> None:
    """Analyze the input lyrics and emit a JSON summary."""
    cfg = load_config(config)
    resolved = _resolve_language(cfg, language)
    documents = _load_documents(input_path)
    analyzer = LineAnalyzer.from_config(cfg)
    results = process_corpus(documents, analyzer, resolved)
    summary = _build_summary(results, include_lines=not summary_only)
    typer.echo(
        json.dumps(
            {"language": resolved.value, "documents": summary},
            indent=2,
            ensure_ascii=False,
        )
    )


@app.command()
def annotate(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    language: str | None = typer.Option(
        None, "--language", "-l", help="Language to syllabify (e.g., 'en' or 'de')."
    ),
    separator: str | None = typer.Option(
        None, "--separator", "-s", help="Marker inserted between syllables."
    ),
    gutter: bool = typer.Option(
        True, "--gutter/--no-gutter", help="Prefix each line with its syllable count."
    ),
) -> None:
    """Print the lyrics with syllable breaks and per-line counts."""
    cfg = load_config(config)
    if separator is not None:
        cfg.syllable_separator = separator
    resolved = _resolve_language(cfg, language)
    analyzer = LineAnalyzer.from_config(cfg)
    document = _document_from_file(input_path, input_path.name)
    stats = analyzer.analyze_document(document.text, resolved)
    typer.echo(
        render_document(
            stats,
            separator=cfg.syllable_separator,
            show_syllables=cfg.show_syllables,
            gutter=gutter,
        )
    )
    typer.echo(
        f"{stats.word_count} words | {stats.total_syllables} syl | "
        f"{stats.avg_syllables_per_line:.1f} avg",
        err=True,
    )


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = EngineConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False, allow_unicode=True))


def main() -> None:
    app()


# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".lyrics"}


class TokenPayload(TypedDict):
    raw: str
    kind: str
    syllables: List[str]
    syllable_count: int


class LinePayload(TypedDict):
    text: str
    is_header: bool
    is_comment: bool
    syllable_count: int
    tokens: List[TokenPayload]


class DocumentSummary(TypedDict, total=False):
    doc_id: str
    word_count: int
    total_syllables: int
    avg_syllables_per_line: float
    lines: List[LinePayload]


def _resolve_language(config: EngineConfig, override: str | None) -> Language:
    """Pick the CLI override over the configured language and validate it."""
    try:
        return Language.parse(override or config.language)
    except UnsupportedLanguageError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [_document_from_file(file, str(file.relative_to(input_path))) for file in files]


def _document_from_file(path: Path, doc_id: str) -> Document:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not UTF-8 text: {exc}") from exc
    return Document(doc_id=doc_id, text=text)


def _build_summary(
    results: Dict[str, DocumentStats], include_lines: bool = True
) -> List[DocumentSummary]:
    """Create a JSON-serializable summary for each processed document."""
    summary: List[DocumentSummary] = []
    for doc_id, stats in sorted(results.items()):
        entry: DocumentSummary = {
            "doc_id": doc_id,
            "word_count": stats.word_count,
            "total_syllables": stats.total_syllables,
            "avg_syllables_per_line": stats.avg_syllables_per_line,
        }
        if include_lines:
            entry["lines"] = [_line_dict(line) for line in stats.lines]
        summary.append(entry)
    return summary


def _line_dict(line: LineStats) -> LinePayload:
    return {
        "text": line.text,
        "is_header": line.is_header,
        "is_comment": line.is_comment,
        "syllable_count": line.syllable_count,
        "tokens": [_token_dict(token) for token in line.tokens],
    }


def _token_dict(token: Token) -> TokenPayload:
    return {
        "raw": token.raw,
        "kind": token.kind.value,
        "syllables": list(token.syllables),
        "syllable_count": token.syllable_count,
    }


if __name__ == "__main__":
    main()
