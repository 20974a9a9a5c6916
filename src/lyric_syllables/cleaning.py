from __future__ import annotations

import unicodedata
from typing import List, Sequence

# Characters kept in a clean word besides Unicode letters and marks.
WORD_JOINERS = frozenset("'-")


def _is_word_char(ch: str) -> bool:
    if ch in WORD_JOINERS:
        return True
    return unicodedata.category(ch)[0] in ("L", "M")


def clean_word(token: str) -> str:
    """Drop everything from ``token`` except letters, marks, apostrophes and hyphens."""
    return "".join(ch for ch in token if _is_word_char(ch))


def reconstruct_syllables(raw: str, clean: str, parts: Sequence[str]) -> List[str]:
    """
    Re-attach the characters stripped from ``raw`` to the hyphenated ``parts``.

    Text before the clean word goes onto the first syllable and text after it
    onto the last. When the clean word is not a contiguous run inside ``raw``
    (stripped characters sat in the middle) the token is kept unsplit.

    Example: raw ``"(feiern,"`` with parts ``["fei", "ern"]`` gives
    ``["(fei", "ern,"]``.
    """
    if not parts:
        return [raw]
    start = raw.find(clean)
    if start == -1:
        return [raw]
    prefix = raw[:start]
    suffix = raw[start + len(clean) :]
    result = list(parts)
    result[0] = prefix + result[0]
    result[-1] = result[-1] + suffix
    return result
