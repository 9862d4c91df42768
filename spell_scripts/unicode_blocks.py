"""Language code → script mapping and Unicode block ranges per script."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .scripts import ScriptId

# Languages we ship spell checker dictionaries for, and their script.
# Words written in another script are never checked: the dictionary can't
# contain them, so everything would be underlined with no suggestions.
# Languages only - never put countries in here, only the language is looked up.
SPELL_CHECKER_LANGUAGE_TO_SCRIPT: Mapping[str, ScriptId] = MappingProxyType({
    "cs": ScriptId.LATIN,
    "da": ScriptId.LATIN,
    "de": ScriptId.LATIN,
    "el": ScriptId.GREEK,
    "en": ScriptId.LATIN,
    "es": ScriptId.LATIN,
    "fi": ScriptId.LATIN,
    "fr": ScriptId.LATIN,
    "hr": ScriptId.LATIN,
    "it": ScriptId.LATIN,
    "lt": ScriptId.LATIN,
    "lv": ScriptId.LATIN,
    "nb": ScriptId.LATIN,
    "nl": ScriptId.LATIN,
    "pt": ScriptId.LATIN,
    "sl": ScriptId.LATIN,
    "ru": ScriptId.CYRILLIC,
})

# Inclusive (start, end) code point ranges per script.
SCRIPT_BLOCKS: Mapping[ScriptId, tuple[tuple[int, int], ...]] = MappingProxyType({
    # Basic Latin, Latin-1 Supplement, Latin Extended-A/B and IPA Extensions
    # are back to back. 0x00-0x3F is never a letter anyway.
    ScriptId.LATIN: ((0x0000, 0x02AF),),
    # Cyrillic Extended-B/C hold archaic letters our dictionary doesn't use.
    ScriptId.CYRILLIC: ((0x0400, 0x052F),),
    ScriptId.GREEK: (
        (0x0370, 0x03FF),  # Greek and Coptic
        (0x1F00, 0x1FFF),  # Greek Extended
        (0x00F2, 0x00F2),  # "ò", found in a few dictionary words
    ),
    ScriptId.ARABIC: (
        (0x0600, 0x06FF),
        (0x0750, 0x077F),  # Arabic Supplement
        (0x08A0, 0x08FF),  # Arabic Extended-A
        (0xFB50, 0xFDFF),  # Arabic Presentation Forms-A
        (0xFE70, 0xFEFF),  # Arabic Presentation Forms-B
    ),
    ScriptId.HEBREW: (
        (0x0590, 0x05FF),
        (0xFB1D, 0xFB4F),  # Hebrew part of Alphabetic Presentation Forms
    ),
    ScriptId.ARMENIAN: (
        (0x0530, 0x058F),
        (0xFB13, 0xFB17),  # Armenian part of Alphabetic Presentation Forms
    ),
    ScriptId.GEORGIAN: (
        (0x10A0, 0x10FF),
        (0x2D00, 0x2D2F),  # Georgian Supplement
    ),
    ScriptId.KHMER: (
        (0x1780, 0x17FF),
        (0x19E0, 0x19FF),  # Khmer Symbols
    ),
    ScriptId.LAO: ((0x0E80, 0x0EFF),),
    ScriptId.MYANMAR: (
        (0x1000, 0x109F),
        (0xAA60, 0xAA7F),  # Myanmar Extended-A
        (0xA9E0, 0xA9FF),  # Myanmar Extended-B
    ),
    ScriptId.SINHALA: ((0x0D80, 0x0DFF),),
    ScriptId.THAI: ((0x0E00, 0x0E7F),),
    ScriptId.TELUGU: ((0x0C00, 0x0C7F),),
})
