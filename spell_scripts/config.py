"""TOML config loading → language-to-script table."""

from __future__ import annotations

import logging
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from .scripts import ScriptId
from .unicode_blocks import SPELL_CHECKER_LANGUAGE_TO_SCRIPT

log = logging.getLogger(__name__)

# ISO 639-1 or 639-2 language code, no region part
_LANGUAGE_CODE_RE = re.compile(r"^[a-z]{2,3}$")


@dataclass
class TableConfig:
    languages: dict[str, ScriptId] = field(default_factory=dict)
    replace: bool = False  # drop the built-in table instead of extending it


def _parse_languages(raw: dict) -> dict[str, ScriptId]:
    languages: dict[str, ScriptId] = {}
    for code, script_name in raw.items():
        if not _LANGUAGE_CODE_RE.match(code):
            raise ValueError(f"Invalid language code {code!r}: expected a lowercase language without region")
        if not isinstance(script_name, str):
            raise ValueError(f"Script for {code!r} must be a string, got {script_name!r}")
        languages[code] = ScriptId.from_name(script_name)
    return languages


def load_config(path: Path) -> TableConfig:
    """Load a TOML config file and return a TableConfig."""
    with open(path, "rb") as f:
        raw = tomllib.load(f)

    languages_raw = raw.get("languages", {})
    if not isinstance(languages_raw, dict):
        raise ValueError(f"[languages] in {path} must be a table")

    replace = raw.get("replace", False)
    if not isinstance(replace, bool):
        raise ValueError(f"replace in {path} must be true or false, got {replace!r}")

    config = TableConfig(
        languages=_parse_languages(languages_raw),
        replace=replace,
    )
    log.debug("Loaded config %s: %d languages, replace=%s", path, len(config.languages), config.replace)
    return config


def build_script_table(
    config: TableConfig,
    base: Mapping[str, ScriptId] = SPELL_CHECKER_LANGUAGE_TO_SCRIPT,
) -> Mapping[str, ScriptId]:
    """Return a new read-only table: ``base`` extended (or replaced) by the config."""
    table: dict[str, ScriptId] = {} if config.replace else dict(base)
    table.update(config.languages)
    log.info("Script table: %d languages", len(table))
    return MappingProxyType(table)


def load_script_table(path: Path) -> Mapping[str, ScriptId]:
    return build_script_table(load_config(path))
