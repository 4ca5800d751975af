"""Locate and slice the front matter block of a document.

A delimiter is a line that reads ``---`` once surrounding whitespace is
stripped. The opening delimiter is the first delimiter line anywhere in the
document; any text before it is skipped. The closing delimiter is the next
delimiter line after it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .exceptions import MissingFrontMatterError
from .exceptions import UnterminatedFrontMatterError

logger = logging.getLogger(__name__)

DELIMITER = "---"


def _iter_lines(text: str) -> Iterator[tuple[int, int, int]]:
    """Yield ``(start, end, next_start)`` offsets for each line of text.

    ``text[start:end]`` is the line without its ``\\n``; ``next_start`` is
    where the following line begins. A trailing ``\\r`` stays in the line
    and is removed by the caller's strip.
    """
    pos = 0
    length = len(text)
    while pos < length:
        newline = text.find("\n", pos)
        if newline == -1:
            yield pos, length, length
            return
        yield pos, newline, newline + 1
        pos = newline + 1


def extract(document: str) -> tuple[str, str]:
    """Split a document into its front matter header and remaining content.

    Args:
        document: Full document text.

    Returns:
        Tuple of (header_text, content). ``header_text`` is the exact text
        between the delimiter lines. ``content`` is everything after the
        closing delimiter, minus that line's own line break.

    Raises:
        MissingFrontMatterError: If no line of the document is ``---``.
        UnterminatedFrontMatterError: If no closing ``---`` follows the opening one.
    """
    lines = _iter_lines(document)

    header_start: int | None = None
    for start, end, next_start in lines:
        if document[start:end].strip() == DELIMITER:
            header_start = next_start
            break

    if header_start is None:
        raise MissingFrontMatterError()

    for start, end, next_start in lines:
        if document[start:end].strip() == DELIMITER:
            logger.debug(f"Front matter spans offsets {header_start}..{start}, content starts at {next_start}")
            return document[header_start:start], document[next_start:]

    raise UnterminatedFrontMatterError()
