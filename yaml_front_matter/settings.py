"""Parser settings.

Philosophy: plain values with safe defaults. The environment is only read
when the caller asks for it via ``ParserSettings.from_env()``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

STRICT_ENV = "YAML_FRONT_MATTER_STRICT"
MAX_LENGTH_ENV = "YAML_FRONT_MATTER_MAX_LENGTH"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ParserSettings:
    """Settings for ``YamlFrontMatter``."""

    strict: bool = False  # pydantic strict mode, no "3" -> 3 coercion
    max_document_length: int | None = None  # in characters, None for no limit

    def __post_init__(self) -> None:
        if self.max_document_length is not None and self.max_document_length < 0:
            raise ValueError(f"max_document_length must be non-negative, got {self.max_document_length}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ParserSettings:
        """Build settings from ``YAML_FRONT_MATTER_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Raises:
            ValueError: If the max length variable is not an integer.
        """
        env = os.environ if environ is None else environ

        strict = env.get(STRICT_ENV, "").strip().lower() in _TRUTHY

        max_length: int | None = None
        if raw := env.get(MAX_LENGTH_ENV, "").strip():
            try:
                max_length = int(raw)
            except ValueError as e:
                raise ValueError(f"{MAX_LENGTH_ENV} must be an integer, got {raw!r}") from e

        return cls(strict=strict, max_document_length=max_length)
