# topmark:header:start
#
#   project      : Quietmark
#   file         : model.py
#   file_relpath : src/quietmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for Quietmark.

Two shapes mirror each other:

* [`MutableConfig`][quietmark.config.model.MutableConfig]: a builder used while
  discovering and merging TOML sources and CLI overrides.
* [`Config`][quietmark.config.model.Config]: the frozen snapshot handed to the
  suppression resolver and writer.

Precedence (lowest to highest): built-in defaults, discovered config files
(root-most first, nearest last), explicit ``--config`` files, CLI overrides.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Final

from quietmark.config.io import extract_quietmark_table, load_toml_dict
from quietmark.config.keys import Toml
from quietmark.config.logging import get_logger
from quietmark.constants import (
    DEFAULT_ALL_CHECKS_ID,
    DEFAULT_COMMENT_PREFIX,
    DEFAULT_FILE_SCOPE_SUFFIX,
    DEFAULT_SUPPRESS_VERB,
    PYPROJECT_TOML_NAME,
    QUIETMARK_TOML_NAME,
    WRITABLE_COMMENT_PREFIXES,
)
from quietmark.errors import ConfigLoadError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from quietmark.config.io import TomlTable
    from quietmark.config.logging import QuietmarkLogger

logger: QuietmarkLogger = get_logger(__name__)

# A verb or suffix is a single token; it is spliced into the directive text.
_RE_TOKEN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9_.-]+$")


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Quietmark.

    Attributes:
        verb (str): Directive keyword, e.g. ``noinspection``.
        file_scope_suffix (str): Suffix appended to a check id to form the
            file-scope id (``BadNaming`` -> ``BadNamingForFile``).
        all_checks_id (str): Id that suppresses every check when listed.
        comment_prefix (str): Line comment marker used when writing directives.
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
        diagnostics (tuple[str, ...]): Warnings collected while loading or sanitizing.
    """

    verb: str
    file_scope_suffix: str
    all_checks_id: str
    comment_prefix: str

    config_files: tuple[Path | str, ...] = ()
    diagnostics: tuple[str, ...] = ()

    @classmethod
    def defaults(cls) -> Config:
        """Return the built-in default configuration."""
        return MutableConfig.from_defaults().freeze()

    def file_scope_id(self, check_id: str) -> str:
        """Return the file-scope variant of ``check_id``."""
        return check_id + self.file_scope_suffix

    def to_toml_dict(self) -> TomlTable:
        """Convert this Config into a TOML-serializable dict."""
        return {
            Toml.SECTION_SUPPRESS: {
                Toml.KEY_VERB: self.verb,
                Toml.KEY_FILE_SCOPE_SUFFIX: self.file_scope_suffix,
                Toml.KEY_ALL_CHECKS_ID: self.all_checks_id,
                Toml.KEY_COMMENT_PREFIX: self.comment_prefix,
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            verb=self.verb,
            file_scope_suffix=self.file_scope_suffix,
            all_checks_id=self.all_checks_id,
            comment_prefix=self.comment_prefix,
            config_files=list(self.config_files),
            diagnostics=list(self.diagnostics),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` means "not set by this layer"; unset values inherit from the layer
    below when merging and fall back to defaults on `freeze`.
    """

    verb: str | None = None
    file_scope_suffix: str | None = None
    all_checks_id: str | None = None
    comment_prefix: str | None = None

    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable Config.

        Values are sanitized first; invalid entries are replaced by defaults and
        reported in ``diagnostics``.
        """
        self.sanitize()
        return Config(
            verb=self.verb or DEFAULT_SUPPRESS_VERB,
            file_scope_suffix=self.file_scope_suffix or DEFAULT_FILE_SCOPE_SUFFIX,
            all_checks_id=self.all_checks_id or DEFAULT_ALL_CHECKS_ID,
            comment_prefix=self.comment_prefix or DEFAULT_COMMENT_PREFIX,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    def sanitize(self) -> None:
        """Drop invalid values, recording one diagnostic per rejected key."""

        def _check_token(key: str, value: str | None) -> str | None:
            if value is None or _RE_TOKEN.match(value):
                return value
            msg = f"Invalid value for '{key}': {value!r} (expected a single token); using default"
            logger.warning(msg)
            self.diagnostics.append(msg)
            return None

        self.verb = _check_token(Toml.KEY_VERB, self.verb)
        self.file_scope_suffix = _check_token(Toml.KEY_FILE_SCOPE_SUFFIX, self.file_scope_suffix)
        self.all_checks_id = _check_token(Toml.KEY_ALL_CHECKS_ID, self.all_checks_id)

        if self.comment_prefix is not None and self.comment_prefix not in WRITABLE_COMMENT_PREFIXES:
            msg = (
                f"Invalid value for '{Toml.KEY_COMMENT_PREFIX}': {self.comment_prefix!r} "
                f"(expected one of {', '.join(WRITABLE_COMMENT_PREFIXES)}); using default"
            )
            logger.warning(msg)
            self.diagnostics.append(msg)
            self.comment_prefix = None

    # ---------------------------- Sources ----------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        return cls(
            verb=DEFAULT_SUPPRESS_VERB,
            file_scope_suffix=DEFAULT_FILE_SCOPE_SUFFIX,
            all_checks_id=DEFAULT_ALL_CHECKS_ID,
            comment_prefix=DEFAULT_COMMENT_PREFIX,
            config_files=["<defaults>"],
        )

    @classmethod
    def from_toml_dict(cls, data: Mapping[str, object]) -> MutableConfig:
        """Build a config layer from a Quietmark TOML table.

        Unknown keys are ignored with a diagnostic; non-string values are
        rejected with a diagnostic.

        Args:
            data (Mapping[str, object]): The Quietmark table (top level of
                ``quietmark.toml`` or ``[tool.quietmark]``).

        Returns:
            MutableConfig: A layer holding only the values present in ``data``.
        """
        draft = cls()
        section: object = data.get(Toml.SECTION_SUPPRESS, {})
        if not isinstance(section, dict):
            draft.diagnostics.append(f"[{Toml.SECTION_SUPPRESS}] must be a table; ignored")
            return draft

        known: dict[str, str] = {
            Toml.KEY_VERB: "verb",
            Toml.KEY_FILE_SCOPE_SUFFIX: "file_scope_suffix",
            Toml.KEY_ALL_CHECKS_ID: "all_checks_id",
            Toml.KEY_COMMENT_PREFIX: "comment_prefix",
        }
        for key, value in section.items():
            attr: str | None = known.get(str(key))
            if attr is None:
                msg = f"Unknown key '{key}' in [{Toml.SECTION_SUPPRESS}]; ignored"
                logger.info(msg)
                draft.diagnostics.append(msg)
                continue
            if not isinstance(value, str):
                msg = f"Value for '{key}' must be a string, got {type(value).__name__}; ignored"
                logger.warning(msg)
                draft.diagnostics.append(msg)
                continue
            setattr(draft, attr, value)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``quietmark.toml`` and ``pyproject.toml`` (``[tool.quietmark]``).

        Returns:
            MutableConfig | None: The layer, or ``None`` when a ``pyproject.toml``
                carries no Quietmark section.

        Raises:
            ConfigLoadError: If the file cannot be read or parsed.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table: TomlTable | None = extract_quietmark_table(load_toml_dict(path), path)
        if table is None:
            logger.debug("No [tool.quietmark] section in %s", path)
            return None
        draft: MutableConfig = cls.from_toml_dict(table)
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Files are ordered root-most first, nearest last; within one directory
        ``pyproject.toml`` comes before ``quietmark.toml`` so the latter wins on
        merge. A file declaring ``root = true`` stops the upward walk after its
        directory.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []
            for name in (PYPROJECT_TOML_NAME, QUIETMARK_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                try:
                    table = extract_quietmark_table(load_toml_dict(p), p)
                except ConfigLoadError as e:
                    # Discovery is best effort; explicit --config files still fail loudly.
                    logger.debug("Ignoring unreadable config %s: %s", p, e)
                    continue
                if table is None:
                    continue
                logger.debug("Discovered config file: %s", p)
                dir_entries.append(p)
                if bool(table.get(Toml.KEY_ROOT, False)):
                    root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        start: Path | None = None,
        extra_files: Iterable[Path] = (),
    ) -> MutableConfig:
        """Merge defaults, discovered files and explicit files into one builder.

        Args:
            start (Path | None): Anchor for upward discovery; ``None`` skips discovery.
            extra_files (Iterable[Path]): Explicit config files, applied last.

        Returns:
            MutableConfig: The merged builder.
        """
        merged: MutableConfig = cls.from_defaults()
        paths: list[Path] = cls.discover_local_config_files(start) if start is not None else []
        paths.extend(extra_files)
        for path in paths:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                merged = merged.merge_with(layer)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` override ``self``."""
        return replace(
            self,
            verb=other.verb if other.verb is not None else self.verb,
            file_scope_suffix=(
                other.file_scope_suffix
                if other.file_scope_suffix is not None
                else self.file_scope_suffix
            ),
            all_checks_id=(
                other.all_checks_id if other.all_checks_id is not None else self.all_checks_id
            ),
            comment_prefix=(
                other.comment_prefix if other.comment_prefix is not None else self.comment_prefix
            ),
            config_files=[*self.config_files, *other.config_files],
            diagnostics=[*self.diagnostics, *other.diagnostics],
        )
