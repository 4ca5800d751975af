"""Parse YAML front matter from markdown documents into typed values."""

from __future__ import annotations

import logging
from typing import Any
from typing import Generic
from typing import NamedTuple
from typing import TypeVar

from .deserialize import Deserializer
from .deserialize import YamlDeserializer
from .exceptions import MissingFrontMatterError
from .extract import extract
from .settings import ParserSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ExtractionResult(NamedTuple, Generic[T]):
    """Typed metadata together with the document body that follows it."""

    metadata: T
    content: str


class YamlFrontMatter:
    """Extract a ``---`` delimited YAML header and deserialize it.

    Usage:
        class Metadata(BaseModel):
            title: str
            count: int

        metadata, content = YamlFrontMatter().parse_and_split(markdown, Metadata)

    Instances hold no per-call state and can be shared across threads.
    """

    def __init__(
        self,
        deserializer: Deserializer | None = None,
        settings: ParserSettings | None = None,
    ) -> None:
        self.settings = settings or ParserSettings()
        self.deserializer = deserializer or YamlDeserializer(strict=self.settings.strict)

    def _check_length(self, document: str) -> None:
        limit = self.settings.max_document_length
        if limit is not None and len(document) > limit:
            raise ValueError(f"Document is {len(document)} characters, limit is {limit}")

    def parse(self, document: str, target: type[T]) -> T:
        """Parse only the front matter of a document.

        Args:
            document: Full document text.
            target: Type to deserialize the header into.

        Returns:
            Deserialized metadata.

        Raises:
            MissingFrontMatterError: If the document has no front matter block.
            UnterminatedFrontMatterError: If the block has no closing delimiter.
            InvalidFrontMatterError: If the header is not valid YAML or doesn't match target.
            ValueError: If the document exceeds ``max_document_length``.
        """
        return self.parse_and_split(document, target).metadata

    def parse_and_split(self, document: str, target: type[T]) -> ExtractionResult[T]:
        """Parse the front matter and return it with the remaining content.

        Raises the same errors as ``parse``.
        """
        self._check_length(document)
        header, content = extract(document)
        logger.debug(f"Deserializing {len(header)} characters of front matter into {target!r}")
        metadata = self.deserializer.deserialize(header, target)
        return ExtractionResult(metadata, content)

    def parse_frontmatter(self, text: str) -> tuple[dict[str, Any], str]:
        """Parse YAML frontmatter from markdown text without a target type.

        Lenient about absence: a document without front matter is returned
        unchanged. Settings and the deserializer apply as for ``parse``.

        Args:
            text: Markdown text with optional YAML frontmatter.

        Returns:
            Tuple of (frontmatter_dict, body_text).
            If no frontmatter, returns ({}, original_text).

        Raises:
            UnterminatedFrontMatterError: If the block has no closing delimiter.
            InvalidFrontMatterError: If the header is invalid YAML or not a mapping.
            ValueError: If the document exceeds ``max_document_length``.
        """
        try:
            return self.parse_and_split(text, dict[str, Any])
        except MissingFrontMatterError:
            return {}, text


_default = YamlFrontMatter()


def parse(document: str, target: type[T]) -> T:
    """Parse front matter into ``target`` using default settings."""
    return _default.parse(document, target)


def parse_and_split(document: str, target: type[T]) -> ExtractionResult[T]:
    """Parse front matter into ``target`` and return it with the content."""
    return _default.parse_and_split(document, target)


def parse_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Parse front matter into a plain dict using default settings."""
    return _default.parse_frontmatter(text)
