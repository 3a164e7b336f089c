"""Delimiter-separated table reading."""
from __future__ import annotations

from pathlib import Path
from typing import List

from flightprofit.config import COMMENT_MARKER, CSV_DELIMITER
from flightprofit.errors import DataLoadError


def parse_table(content: str, delimiter: str = CSV_DELIMITER) -> List[List[str]]:
    """
    Split table text into rows of string fields.

    The first line is always treated as a header and dropped. Anything after a
    ``#`` is a comment; lines left empty once comments and surrounding
    whitespace are removed are skipped.
    """
    rows: List[List[str]] = []
    for line in content.split("\n")[1:]:
        row = line.split(COMMENT_MARKER, 1)[0].strip()
        if row:
            rows.append(row.split(delimiter))
    return rows


def read_table(path: Path, delimiter: str = CSV_DELIMITER) -> List[List[str]]:
    """Read a UTF-8 table file from disk and parse it with :func:`parse_table`."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DataLoadError(f"Error reading file: {exc}") from exc
    return parse_table(content, delimiter)
