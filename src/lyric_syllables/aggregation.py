from __future__ import annotations

from typing import Iterable

from .models import DocumentStats, LineStats


def aggregate(lines: Iterable[LineStats]) -> DocumentStats:
    """
    Reduce per-line statistics to document totals.

    Only content lines count: headers, comments and blank lines are carried in
    ``lines`` but contribute neither syllables nor words.
    """
    all_lines = tuple(lines)
    content = [line for line in all_lines if line.is_content]
    total_syllables = sum(line.syllable_count for line in content)
    word_count = sum(line.word_count for line in content)
    avg = total_syllables / len(content) if content else 0.0
    return DocumentStats(
        word_count=word_count,
        total_syllables=total_syllables,
        avg_syllables_per_line=avg,
        lines=all_lines,
    )
