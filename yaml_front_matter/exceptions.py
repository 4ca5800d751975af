"""Exception hierarchy for yaml-front-matter.

Every failure surfaces as a ``FrontMatterError`` subclass tagged with a
``kind`` so callers can either catch the specific type or branch on the tag.
Deserializer failures are raised with ``raise ... from native_error`` so the
original PyYAML or pydantic exception stays reachable via ``__cause__``.
"""

from __future__ import annotations

from typing import Literal

ErrorKind = Literal["missing", "unterminated", "invalid"]


class FrontMatterError(Exception):
    """Base for all front matter errors.

    Attributes:
        kind: Tag identifying the failure ("missing", "unterminated", "invalid").
    """

    kind: ErrorKind

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r}, kind={self.kind!r})"


class MissingFrontMatterError(FrontMatterError):
    """Document has no ``---`` delimiter line."""

    kind: ErrorKind = "missing"

    def __init__(self, message: str = "No front matter block found") -> None:
        super().__init__(message)


class UnterminatedFrontMatterError(FrontMatterError):
    """Opening ``---`` found but no closing delimiter follows it."""

    kind: ErrorKind = "unterminated"

    def __init__(self, message: str = "Front matter block is not terminated by a closing '---'") -> None:
        super().__init__(message)


class InvalidFrontMatterError(FrontMatterError):
    """Header text is not valid YAML or does not match the requested shape.

    Attributes:
        detail: Diagnostic message from the underlying deserializer.
    """

    kind: ErrorKind = "invalid"

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid front matter: {detail}")
        self.detail = detail
