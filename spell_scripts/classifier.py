"""Per-character script classification for the spell checker."""

from __future__ import annotations

from fontTools.unicodedata import category

from .scripts import ScriptId
from .unicode_blocks import SCRIPT_BLOCKS

# Scripts whose blocks also hold digits and punctuation, so the block test
# alone would let non-letters through.
_LETTER_CHECKED = frozenset({ScriptId.LATIN, ScriptId.CYRILLIC})


def _to_code_point(code_point: int | str) -> int:
    if isinstance(code_point, str):
        if len(code_point) != 1:
            raise ValueError(f"Expected a single character, got {code_point!r}")
        return ord(code_point)
    if not 0 <= code_point <= 0x10FFFF:
        raise ValueError(f"Not a Unicode code point: {code_point!r}")
    return code_point


def is_letter(code_point: int | str) -> bool:
    """True for code points in the Lu, Ll, Lt, Lm or Lo categories."""
    return category(chr(_to_code_point(code_point))).startswith("L")


def is_letter_part_of_script(code_point: int | str, script: ScriptId | int) -> bool:
    """Return whether the code point is a letter that makes sense for the script.

    ``script`` may be a raw integer; a value outside ScriptId is a caller bug
    and raises RuntimeError. ScriptId.UNKNOWN accepts every character.
    """
    try:
        script = ScriptId(script)
    except ValueError as exc:
        raise RuntimeError(f"Impossible value of script: {script!r}") from exc
    if script is ScriptId.UNKNOWN:
        return True

    cp = _to_code_point(code_point)
    if not any(start <= cp <= end for start, end in SCRIPT_BLOCKS[script]):
        return False
    if script in _LETTER_CHECKED:
        return is_letter(cp)
    return True
