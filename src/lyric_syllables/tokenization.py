from __future__ import annotations

import re
from typing import List

TOKEN_SPLITTER = re.compile(r"(\s+)")


def split_line(line: str) -> List[str]:
    """
    Split a line into alternating non-whitespace and whitespace runs.

    Empty strings produced at the line boundaries are kept, so joining the
    result always gives back the original line.
    """
    return TOKEN_SPLITTER.split(line)


def is_whitespace(piece: str) -> bool:
    """True for a non-empty run made only of whitespace."""
    return bool(piece) and piece.isspace()
