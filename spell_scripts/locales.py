"""Resolve a spell checker locale to the script its dictionary is written in."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .scripts import ScriptId
from .unicode_blocks import SPELL_CHECKER_LANGUAGE_TO_SCRIPT

log = logging.getLogger(__name__)

_LANGUAGE_RE = re.compile(r"^[A-Za-z]{2,8}$")


class UnsupportedLanguageError(LookupError):
    """The spell checker was asked about a language it has no dictionary for."""

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f'Unsupported spell checker language: "{language}"')


@dataclass(frozen=True)
class Locale:
    language: str
    region: str = ""
    variant: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "language", self.language.lower())

    @classmethod
    def parse(cls, value: str) -> Locale:
        """Parse "en", "en_US", "en-GB", "pt_BR.UTF-8" or "sr_RS@latin".

        Encoding and modifier suffixes are dropped. A four-letter script
        subtag ("zh-Hant-TW") is skipped over.
        """
        tag = value.strip().split(".", 1)[0].split("@", 1)[0]
        parts = tag.replace("-", "_").split("_")
        language = parts[0]
        if not _LANGUAGE_RE.match(language):
            raise ValueError(f"Invalid locale: {value!r}")
        rest = parts[1:]
        if rest and len(rest[0]) == 4 and rest[0].isalpha():
            rest = rest[1:]
        region = rest[0].upper() if rest else ""
        variant = "_".join(rest[1:])
        return cls(language=language.lower(), region=region, variant=variant)

    def __str__(self) -> str:
        return "_".join(p for p in (self.language, self.region, self.variant) if p)


def _language_of(locale: Any) -> str:
    if isinstance(locale, str):
        return Locale.parse(locale).language
    language = getattr(locale, "language", None)
    if not isinstance(language, str):
        raise TypeError(f"Expected a locale or locale string, got {type(locale).__name__}")
    return language


def script_for_spell_checker_locale(
    locale: Locale | str | Any,
    table: Mapping[str, ScriptId] = SPELL_CHECKER_LANGUAGE_TO_SCRIPT,
) -> ScriptId:
    """Return the script for the locale's language; the region is ignored.

    Raises UnsupportedLanguageError when the language isn't in ``table``.
    Callers that prefer no filtering can catch it and use ScriptId.UNKNOWN.
    """
    language = _language_of(locale)
    script = table.get(language)
    if script is None:
        raise UnsupportedLanguageError(language)
    log.debug("Locale %s → script %s", locale, script.name)
    return script


def scripts_for_languages(
    lang_codes: Iterable[str],
    table: Mapping[str, ScriptId] = SPELL_CHECKER_LANGUAGE_TO_SCRIPT,
) -> set[ScriptId]:
    """Return the set of scripts needed to spell check the given language codes."""
    result: set[ScriptId] = set()
    unknown: list[str] = []
    for code in lang_codes:
        try:
            script = table.get(Locale.parse(code).language)
        except ValueError:
            script = None
        if script is None:
            unknown.append(code)
        else:
            result.add(script)
    if unknown:
        log.warning("Unknown language codes (ignored): %s", unknown)
    return result
