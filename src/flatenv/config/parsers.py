"""Format parsers: raw file bytes to a value tree.

Each parser handles one ``ConfigFormat`` and returns a ``MappingNode``.
``parse_source`` reads the file, treats a missing file as an empty
mapping, and dispatches to the parser registered for the format.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from flatenv.config.formats import ConfigFormat, detect_format
from flatenv.config.values import MappingNode, StringNode, to_mapping_node
from flatenv.exceptions import (
    MalformedSourceError,
    SourceUnavailableError,
    UnsupportedFormatError,
)

_QUOTES = ('"', "'")


class FormatParser(ABC):
    """Parses the contents of one configuration format."""

    format: ConfigFormat

    @abstractmethod
    def parse(self, data: bytes, path: str) -> MappingNode:
        """Parse raw file contents into a value tree.

        Args:
            data: Raw file contents
            path: Source path, used only for error reporting

        Raises:
            MalformedSourceError: If the contents cannot be parsed
        """
        pass

    def _decode(self, data: bytes, path: str) -> str:
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as err:
            raise MalformedSourceError(path, self.format.value, err) from err


def strip_quotes(value: str) -> str:
    """Remove one pair of matching surrounding quotes.

    Both ends must carry the same quote character; ``"value'`` is returned
    unchanged.
    """
    if len(value) >= 2 and value[0] in _QUOTES and value[0] == value[-1]:
        return value[1:-1]
    return value


class EnvParser(FormatParser):
    """Parser for ``KEY=VALUE`` env files.

    Blank lines and lines starting with ``#`` are skipped, as are lines
    without ``=`` or with an empty key. The first ``=`` separates key from
    value; everything after it is the value, taken literally apart from
    surrounding whitespace and one pair of matching quotes.
    """

    format = ConfigFormat.ENV

    def parse(self, data: bytes, path: str) -> MappingNode:
        entries: Dict[str, Any] = {}
        for raw_line in self._decode(data, path).split("\n"):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue

            key, sep, value = line.partition("=")
            key = key.strip()
            if not sep or not key:
                continue

            entries[key] = StringNode(strip_quotes(value.strip()))
        return MappingNode(entries)


class StructuredParser(FormatParser):
    """Shared handling for formats that decode into nested documents."""

    @abstractmethod
    def decode_document(self, text: str) -> Any:
        pass

    def parse(self, data: bytes, path: str) -> MappingNode:
        text = self._decode(data, path)
        try:
            document = self.decode_document(text)
        except (ValueError, yaml.YAMLError) as err:
            raise MalformedSourceError(path, self.format.value, err) from err

        # An empty YAML document or a JSON null holds no settings
        if document is None:
            return MappingNode()
        if not isinstance(document, dict):
            raise MalformedSourceError(
                path,
                self.format.value,
                f"top level must be a mapping, got {type(document).__name__}",
            )
        return to_mapping_node(document)


class JsonParser(StructuredParser):
    format = ConfigFormat.JSON

    def decode_document(self, text: str) -> Any:
        return json.loads(text)


class YamlParser(StructuredParser):
    format = ConfigFormat.YAML

    def decode_document(self, text: str) -> Any:
        return yaml.safe_load(text)


PARSERS: Dict[ConfigFormat, FormatParser] = {
    ConfigFormat.ENV: EnvParser(),
    ConfigFormat.JSON: JsonParser(),
    ConfigFormat.YAML: YamlParser(),
}


def read_source(path: Union[str, Path]) -> Optional[bytes]:
    """Read a configuration file.

    Returns:
        The file contents, or None if the file does not exist

    Raises:
        SourceUnavailableError: If the file exists but cannot be read
    """
    try:
        return Path(path).read_bytes()
    except FileNotFoundError:
        return None
    except OSError as err:
        raise SourceUnavailableError(str(path), err) from err


def parse_source(
    path: Union[str, Path],
    format: Optional[ConfigFormat] = None,
    parsers: Optional[Mapping[ConfigFormat, FormatParser]] = None,
) -> MappingNode:
    """Read and parse a configuration file into a value tree.

    Args:
        path: Path to the configuration file
        format: Format to parse as (detected from the extension if omitted)
        parsers: Parser registry (defaults to PARSERS)

    Returns:
        The parsed tree; an empty mapping if the file does not exist

    Raises:
        UnsupportedFormatError: If no parser is registered for the format
        SourceUnavailableError: If the file exists but cannot be read
        MalformedSourceError: If the contents cannot be parsed
    """
    if format is None:
        format = detect_format(path)
    registry = PARSERS if parsers is None else parsers

    parser = registry.get(format)
    if parser is None:
        raise UnsupportedFormatError(str(path), format)

    data = read_source(path)
    if data is None:
        return MappingNode()
    return parser.parse(data, str(path))


__all__ = [
    "FormatParser",
    "EnvParser",
    "StructuredParser",
    "JsonParser",
    "YamlParser",
    "PARSERS",
    "strip_quotes",
    "read_source",
    "parse_source",
]
