"""Word-level filtering: which words are worth sending to the dictionary."""

from __future__ import annotations

from .classifier import is_letter_part_of_script
from .scripts import ScriptId

_APOSTROPHE = "'"
# A word containing "@" is probably an e-mail address; one containing "/"
# is a URI or an ad-hoc combination of two words.
_SKIP_CHARS = frozenset("@/")


def should_filter_out(text: str, script: ScriptId | int) -> bool:
    """Return True when the spell checker should not check this word at all.

    The word must start with a letter of the script (or an apostrophe), and
    at least 3/4 of its characters must be letters of the script.
    """
    if len(text) <= 1:
        return True

    first = text[0]
    if first != _APOSTROPHE and not is_letter_part_of_script(first, script):
        return True

    letter_count = 0
    for ch in text:
        if ch in _SKIP_CHARS:
            return True
        if is_letter_part_of_script(ch, script):
            letter_count += 1
    return letter_count * 4 < len(text) * 3
