from __future__ import annotations

import pytest

from spell_scripts import SCRIPT_BLOCKS, SPELL_CHECKER_LANGUAGE_TO_SCRIPT, ScriptId


def test_table_contents() -> None:
    assert dict(SPELL_CHECKER_LANGUAGE_TO_SCRIPT) == {
        **{code: ScriptId.LATIN for code in
           ("cs", "da", "de", "en", "es", "fi", "fr", "hr", "it", "lt", "lv", "nb", "nl", "pt", "sl")},
        "el": ScriptId.GREEK,
        "ru": ScriptId.CYRILLIC,
    }


def test_table_has_languages_only() -> None:
    for code in SPELL_CHECKER_LANGUAGE_TO_SCRIPT:
        assert len(code) == 2 and code.isalpha() and code.islower()


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        SPELL_CHECKER_LANGUAGE_TO_SCRIPT["ja"] = ScriptId.UNKNOWN  # type: ignore[index]
    with pytest.raises(TypeError):
        SCRIPT_BLOCKS[ScriptId.LATIN] = ()  # type: ignore[index]


def test_every_script_has_blocks() -> None:
    assert set(SCRIPT_BLOCKS) == set(ScriptId) - {ScriptId.UNKNOWN}
    for ranges in SCRIPT_BLOCKS.values():
        assert ranges
        for start, end in ranges:
            assert 0 <= start <= end <= 0x10FFFF


def test_script_id_values_are_stable() -> None:
    assert [(s.name, int(s)) for s in ScriptId] == [
        ("UNKNOWN", -1), ("LATIN", 0), ("CYRILLIC", 1), ("GREEK", 2), ("ARABIC", 3),
        ("HEBREW", 4), ("ARMENIAN", 5), ("GEORGIAN", 6), ("KHMER", 7), ("LAO", 8),
        ("MYANMAR", 9), ("SINHALA", 10), ("THAI", 11), ("TELUGU", 12),
    ]


@pytest.mark.parametrize("name, expected", [("latin", ScriptId.LATIN), ("Cyrillic", ScriptId.CYRILLIC), (" THAI ", ScriptId.THAI)])
def test_script_from_name(name: str, expected: ScriptId) -> None:
    assert ScriptId.from_name(name) is expected


def test_script_from_unknown_name() -> None:
    with pytest.raises(ValueError, match="Unknown script name"):
        ScriptId.from_name("klingon")
