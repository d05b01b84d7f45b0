# topmark:header:start
#
#   project      : Quietmark
#   file         : io.py
#   file_relpath : src/quietmark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read and render TOML configuration sources.

Parsing is done with `tomlkit` and returned as plain `dict` structures so the
config model never sees tomlkit container types.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from quietmark.config.keys import Toml
from quietmark.config.logging import get_logger
from quietmark.constants import PYPROJECT_TOML_NAME
from quietmark.errors import ConfigLoadError

if TYPE_CHECKING:
    from pathlib import Path

    from quietmark.config.logging import QuietmarkLogger

TomlTable = dict[str, Any]

logger: QuietmarkLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``quietmark.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content as plain Python containers.

    Raises:
        ConfigLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigLoadError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigLoadError(f"Invalid TOML in {path}: {e}") from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_quietmark_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the Quietmark table of a parsed TOML document.

    For ``pyproject.toml`` this is ``[tool.quietmark]``; for any other file the
    whole document is the Quietmark table.

    Returns:
        TomlTable | None: The table, or ``None`` when a ``pyproject.toml`` has no
            ``[tool.quietmark]`` section.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: object = data.get(Toml.SECTION_TOOL, {})
    if not isinstance(tool, Mapping):
        return None
    table: object = cast("Mapping[str, object]", tool).get(Toml.SECTION_QUIETMARK)
    if not isinstance(table, dict):
        return None
    return cast("TomlTable", table)


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists.

    TOML has no `null`. For config dumps we omit keys with None values and drop
    None items from lists.
    """
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            out[str(k_any)] = _strip_none_for_toml(v_any)
        return out

    if isinstance(value, (list, tuple)):
        seq: list[object] = list(cast("list[object]", value))
        return [_strip_none_for_toml(v) for v in seq if v is not None]

    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): The mapping to serialize.

    Returns:
        str: The TOML document text.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))
