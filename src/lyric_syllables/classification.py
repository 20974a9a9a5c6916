from __future__ import annotations

import re
from typing import NamedTuple

HEADER_RE = re.compile(r"^\[.*\]$")
COMMENT_PREFIX = "#"


class LineClass(NamedTuple):
    is_header: bool
    is_comment: bool


def classify_line(line: str) -> LineClass:
    """Label a raw line as a section header, a comment, or (neither) content."""
    trimmed = line.strip()
    # Both flags are computed; neither check short-circuits the other.
    is_header = HEADER_RE.match(trimmed) is not None
    is_comment = trimmed.startswith(COMMENT_PREFIX)
    return LineClass(is_header=is_header, is_comment=is_comment)
