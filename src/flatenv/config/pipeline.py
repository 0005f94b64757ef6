"""Load pipeline: parse a source file and flatten it into store keys."""

from pathlib import Path
from typing import Optional, Union

from flatenv.config.flatten import FlatMapping, canonicalize_keys, flatten
from flatenv.config.formats import ConfigFormat, detect_format
from flatenv.config.parsers import parse_source


def load_flat_mapping(
    path: Union[str, Path],
    format: Optional[ConfigFormat] = None,
) -> FlatMapping:
    """Parse ``path`` and return its flat mapping keyed by store key.

    Keys from JSON/YAML sources are canonicalized (``a.b`` -> ``A_B``);
    env keys are kept as written.

    Raises:
        ConfigurationError: If the source cannot be read or parsed
    """
    if format is None:
        format = detect_format(path)

    flat = flatten(parse_source(path, format))
    if format.structured:
        return canonicalize_keys(flat)
    return flat


__all__ = ["load_flat_mapping"]
