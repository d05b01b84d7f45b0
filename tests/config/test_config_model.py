# topmark:header:start
#
#   project      : Quietmark
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the configuration model: defaults, sanitizing, TOML layers and merging."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from quietmark.config.io import load_toml_dict, to_toml
from quietmark.config.model import Config, MutableConfig
from quietmark.constants import (
    DEFAULT_ALL_CHECKS_ID,
    DEFAULT_COMMENT_PREFIX,
    DEFAULT_FILE_SCOPE_SUFFIX,
    DEFAULT_SUPPRESS_VERB,
)
from quietmark.errors import ConfigLoadError
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    """The built-in defaults describe ``// noinspection <id>ForFile`` directives."""
    config: Config = Config.defaults()
    assert config.verb == DEFAULT_SUPPRESS_VERB == "noinspection"
    assert config.file_scope_suffix == DEFAULT_FILE_SCOPE_SUFFIX == "ForFile"
    assert config.all_checks_id == DEFAULT_ALL_CHECKS_ID == "ALL"
    assert config.comment_prefix == DEFAULT_COMMENT_PREFIX == "//"
    assert config.file_scope_id("BnfUnusedRule") == "BnfUnusedRuleForFile"
    assert config.diagnostics == ()


def test_config_is_frozen() -> None:
    """Frozen configs cannot be mutated; thaw and freeze again instead."""
    config: Config = Config.defaults()
    with pytest.raises(AttributeError):
        config.verb = "suppress"  # type: ignore[misc]
    draft: MutableConfig = config.thaw()
    draft.verb = "suppress"
    assert draft.freeze().verb == "suppress"
    assert config.verb == "noinspection"


@parametrize(
    "field, value",
    [
        ("verb", "no inspection"),
        ("verb", ""),
        ("file_scope_suffix", "For File"),
        ("all_checks_id", "ALL,"),
        ("comment_prefix", "/*"),
        ("comment_prefix", "#"),
        ("comment_prefix", "--"),
        ("comment_prefix", ";"),
    ],
)
def test_invalid_values_fall_back_to_defaults(field: str, value: str) -> None:
    """Invalid values are replaced by defaults and reported."""
    draft: MutableConfig = MutableConfig.from_defaults()
    setattr(draft, field, value)
    config: Config = draft.freeze()
    assert getattr(config, field) == getattr(Config.defaults(), field)
    if value:
        assert len(config.diagnostics) == 1
        assert field in config.diagnostics[0]


def test_from_toml_dict() -> None:
    """Known keys are taken; unknown keys and non-strings are reported."""
    draft: MutableConfig = MutableConfig.from_toml_dict(
        {
            "suppress": {
                "verb": "suppress",
                "comment_prefix": "#",
                "colour": "red",
                "all_checks_id": 1,
            }
        }
    )
    assert draft.verb == "suppress"
    assert draft.comment_prefix == "#"
    assert draft.all_checks_id is None
    assert len(draft.diagnostics) == 2

    config: Config = draft.freeze()
    assert config.all_checks_id == "ALL"
    assert config.comment_prefix == "//"
    assert any("comment_prefix" in d for d in config.diagnostics)


def test_from_toml_dict_rejects_non_table() -> None:
    """A non-table ``suppress`` entry is ignored with a diagnostic."""
    draft: MutableConfig = MutableConfig.from_toml_dict({"suppress": "nope"})
    assert draft.verb is None
    assert draft.diagnostics


def test_from_toml_file(tmp_path: Path) -> None:
    """``quietmark.toml`` is read as a whole; ``pyproject.toml`` via ``[tool.quietmark]``."""
    qm: Path = tmp_path / "quietmark.toml"
    qm.write_text('[suppress]\nverb = "suppress"\n', encoding="utf-8")
    layer: MutableConfig | None = MutableConfig.from_toml_file(qm)
    assert layer is not None
    assert layer.verb == "suppress"
    assert layer.config_files == [qm]

    pp: Path = tmp_path / "pyproject.toml"
    pp.write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert MutableConfig.from_toml_file(pp) is None

    pp.write_text('[tool.quietmark.suppress]\nfile_scope_suffix = "InFile"\n', encoding="utf-8")
    layer = MutableConfig.from_toml_file(pp)
    assert layer is not None
    assert layer.file_scope_suffix == "InFile"


def test_invalid_toml_raises(tmp_path: Path) -> None:
    """Broken TOML surfaces as a ConfigLoadError."""
    bad: Path = tmp_path / "quietmark.toml"
    bad.write_text("[suppress\nverb = ", encoding="utf-8")
    with pytest.raises(ConfigLoadError, match="Invalid TOML"):
        load_toml_dict(bad)
    with pytest.raises(ConfigLoadError, match="Cannot read"):
        load_toml_dict(tmp_path / "missing.toml")


def test_merge_with_overrides_set_values_only() -> None:
    """Values set in the later layer win; unset values are inherited."""
    base: MutableConfig = MutableConfig.from_defaults()
    layer = MutableConfig(verb="suppress")
    merged: MutableConfig = base.merge_with(layer)
    assert merged.verb == "suppress"
    assert merged.file_scope_suffix == "ForFile"
    assert base.verb == "noinspection"


def test_discovery_walks_up_and_stops_at_root(tmp_path: Path) -> None:
    """Nearest files come last; ``root = true`` ends the upward walk."""
    outer: Path = tmp_path / "outer"
    inner: Path = outer / "inner"
    inner.mkdir(parents=True)
    (outer / "quietmark.toml").write_text(
        'root = true\n[suppress]\nverb = "outer"\nall_checks_id = "EVERYTHING"\n',
        encoding="utf-8",
    )
    (inner / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    (inner / "quietmark.toml").write_text('[suppress]\nverb = "inner"\n', encoding="utf-8")

    found: list[Path] = MutableConfig.discover_local_config_files(inner)
    assert found == [(outer / "quietmark.toml").resolve(), (inner / "quietmark.toml").resolve()]

    config: Config = MutableConfig.load_merged(start=inner).freeze()
    assert config.verb == "inner"
    assert config.all_checks_id == "EVERYTHING"
    assert config.config_files[0] == "<defaults>"
    assert len(config.config_files) == 3


def test_explicit_files_apply_last(tmp_path: Path) -> None:
    """Explicit config files override discovered ones."""
    (tmp_path / "quietmark.toml").write_text(
        'root = true\n[suppress]\nverb = "discovered"\n', encoding="utf-8"
    )
    extra: Path = tmp_path / "extra.toml"
    extra.write_text('[suppress]\nverb = "explicit"\n', encoding="utf-8")

    config: Config = MutableConfig.load_merged(start=tmp_path, extra_files=[extra]).freeze()
    assert config.verb == "explicit"

    config = MutableConfig.load_merged(start=None, extra_files=[]).freeze()
    assert config.verb == "noinspection"


def test_to_toml_round_trip(tmp_path: Path) -> None:
    """A dumped config loads back to the same values."""
    config: Config = MutableConfig(verb="suppress", file_scope_suffix="InFile").freeze()
    path: Path = tmp_path / "quietmark.toml"
    path.write_text(to_toml(config.to_toml_dict()), encoding="utf-8")

    layer: MutableConfig | None = MutableConfig.from_toml_file(path)
    assert layer is not None
    reloaded: Config = layer.freeze()
    assert reloaded.verb == "suppress"
    assert reloaded.file_scope_suffix == "InFile"
    assert reloaded.comment_prefix == config.comment_prefix
