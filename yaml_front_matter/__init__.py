"""YAML Front Matter - typed metadata from markdown headers.

Extracts the ``---`` delimited YAML block at the top of a document and
deserializes it into a caller-supplied type (pydantic model, dataclass,
TypedDict, ...), returning the remaining content alongside it.

Philosophy: Mechanism not policy. Callers read files and decide what to
do with errors; this package only slices and deserializes.
"""

from __future__ import annotations

# Deserializers
from yaml_front_matter.deserialize import Deserializer
from yaml_front_matter.deserialize import YamlDeserializer

# Exceptions
from yaml_front_matter.exceptions import FrontMatterError
from yaml_front_matter.exceptions import InvalidFrontMatterError
from yaml_front_matter.exceptions import MissingFrontMatterError
from yaml_front_matter.exceptions import UnterminatedFrontMatterError

# Extraction
from yaml_front_matter.extract import extract

# Parsing
from yaml_front_matter.parser import ExtractionResult
from yaml_front_matter.parser import YamlFrontMatter
from yaml_front_matter.parser import parse
from yaml_front_matter.parser import parse_and_split
from yaml_front_matter.parser import parse_frontmatter

# Settings
from yaml_front_matter.settings import ParserSettings

__all__ = [
    # Core
    "YamlFrontMatter",
    "ExtractionResult",
    "parse",
    "parse_and_split",
    "parse_frontmatter",
    "extract",
    # Deserializers
    "Deserializer",
    "YamlDeserializer",
    # Settings
    "ParserSettings",
    # Exceptions
    "FrontMatterError",
    "MissingFrontMatterError",
    "UnterminatedFrontMatterError",
    "InvalidFrontMatterError",
]
