"""Deserializers that turn front matter header text into typed values."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any
from typing import Protocol
from typing import TypeVar

import yaml
from pydantic import TypeAdapter
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError
from pydantic_core import to_json

from .exceptions import InvalidFrontMatterError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Deserializer(Protocol):
    """Protocol for converting header text into a value of the target type.

    YamlDeserializer (PyYAML + pydantic) is the default.
    Callers may supply their own, e.g. to use a different YAML loader.
    """

    def deserialize(self, text: str, target: type[T]) -> T:
        """Deserialize header text.

        Args:
            text: Raw header text taken from between the delimiters.
            target: Type to produce (pydantic model, dataclass, TypedDict, ...).

        Returns:
            Value of the target type.

        Raises:
            InvalidFrontMatterError: If the text can't be parsed or doesn't match target.
        """
        ...


def _to_json(data: Any) -> bytes:
    try:
        return to_json(data)
    except PydanticSerializationError as e:
        raise InvalidFrontMatterError(f"front matter can't be checked strictly: {e}") from e


@lru_cache(maxsize=128)
def _adapter_for(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


class YamlDeserializer:
    """Load header text with ``yaml.safe_load`` and validate it with pydantic.

    An empty header loads as an empty mapping, so targets whose fields all
    have defaults still validate.

    Strict mode validates in pydantic's JSON mode. In Python mode strict
    dataclass targets only accept existing instances; in JSON mode mappings
    are accepted and strictness applies to each field. YAML timestamps reach
    the validator as ISO 8601 strings.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict

    def load(self, text: str) -> Any:
        """Parse YAML text into plain Python data.

        Raises:
            InvalidFrontMatterError: If the text is not valid YAML.
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            logger.debug(f"Front matter YAML failed to parse: {e}")
            raise InvalidFrontMatterError(str(e)) from e
        return {} if data is None else data

    def deserialize(self, text: str, target: type[T]) -> T:
        """Load YAML text and validate it against the target type."""
        data = self.load(text)
        adapter = _adapter_for(target)
        try:
            if not self.strict:
                return adapter.validate_python(data)
            return adapter.validate_json(_to_json(data), strict=True)
        except ValidationError as e:
            logger.debug(f"Front matter does not match {target!r}: {e.error_count()} error(s)")
            raise InvalidFrontMatterError(str(e)) from e

    def __repr__(self) -> str:
        return f"YamlDeserializer(strict={self.strict!r})"
