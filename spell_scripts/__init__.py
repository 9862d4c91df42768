"""Writing script classification for spell checker dictionaries."""

from .classifier import is_letter, is_letter_part_of_script
from .config import TableConfig, build_script_table, load_config, load_script_table
from .filters import should_filter_out
from .locales import Locale, UnsupportedLanguageError, script_for_spell_checker_locale, scripts_for_languages
from .scripts import ScriptId
from .unicode_blocks import SCRIPT_BLOCKS, SPELL_CHECKER_LANGUAGE_TO_SCRIPT

__all__ = [
    "Locale",
    "SCRIPT_BLOCKS",
    "SPELL_CHECKER_LANGUAGE_TO_SCRIPT",
    "ScriptId",
    "TableConfig",
    "UnsupportedLanguageError",
    "build_script_table",
    "is_letter",
    "is_letter_part_of_script",
    "load_config",
    "load_script_table",
    "script_for_spell_checker_locale",
    "scripts_for_languages",
    "should_filter_out",
]
