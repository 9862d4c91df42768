"""Writing script identifiers shared with the spell checker."""

from __future__ import annotations

from enum import IntEnum


class ScriptId(IntEnum):
    # Used for hardware keyboards, where the script can't be determined
    UNKNOWN = -1
    LATIN = 0
    CYRILLIC = 1
    GREEK = 2
    ARABIC = 3
    HEBREW = 4
    ARMENIAN = 5
    GEORGIAN = 6
    KHMER = 7
    LAO = 8
    MYANMAR = 9
    SINHALA = 10
    THAI = 11
    TELUGU = 12

    @classmethod
    def from_name(cls, name: str) -> ScriptId:
        """Look up a script by name, ignoring case ("latin", "Cyrillic")."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown script name: {name!r}") from None
