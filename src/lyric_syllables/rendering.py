from __future__ import annotations

from typing import List

from .models import DocumentStats, LineStats

DEFAULT_SEPARATOR = "·"
_BRACKETS = str.maketrans("", "", "[]")


def render_line(
    line: LineStats, separator: str = DEFAULT_SEPARATOR, show_syllables: bool = True
) -> str:
    """Render a line with ``separator`` between the syllables of each word."""
    if line.is_header:
        return line.text.translate(_BRACKETS)
    if line.is_comment or not show_syllables:
        return line.text
    parts: List[str] = []
    for token in line.tokens:
        if len(token.syllables) > 1:
            parts.append(separator.join(token.syllables))
        else:
            parts.append(token.raw)
    return "".join(parts)


def gutter_label(line: LineStats) -> str:
    """Syllable count shown beside a line; blank for non-content lines."""
    if not line.is_content:
        return ""
    return str(line.syllable_count) if line.syllable_count > 0 else "-"


def render_document(
    stats: DocumentStats,
    separator: str = DEFAULT_SEPARATOR,
    show_syllables: bool = True,
    gutter: bool = True,
) -> str:
    rendered = [render_line(line, separator, show_syllables) for line in stats.lines]
    if not gutter:
        return "\n".join(rendered)
    labels = [gutter_label(line) for line in stats.lines]
    width = max((len(label) for label in labels), default=0)
    return "\n".join(
        f"{label:>{width}} | {text}" for label, text in zip(labels, rendered)
    )
