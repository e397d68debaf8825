"""
kor-gloss: Rough Korean-to-gloss translation from word lists

Substitutes every Korean word found in user-supplied word lists with its
meaning, leaving everything else untouched. Verbs and adjectives are
matched in their common conjugated forms.

Basic Usage:
    import kor_gloss

    dictionary = kor_gloss.build_dictionary(["words.wl.txt"])
    print(kor_gloss.translate("나는 학교에 간다", dictionary))
    # 나는 [school]에 [go]다
"""

from kor_gloss.conjugation import conjugate
from kor_gloss.dictionary import (
    CompiledDictionary,
    Dictionary,
    build_dictionary,
    load_dictionary,
    save_dictionary,
)
from kor_gloss.raw_types import Def, MissingMeaningError, Translated, TranslationPart, Untranslated
from kor_gloss.translator import (
    TranslationMode,
    clean_lines,
    render_part,
    retranslate_lines,
    translate,
    translate_document,
    translate_lines,
    translate_split,
)
from kor_gloss.trie import Trie
from kor_gloss.wordlist import read_definitions, read_exclusions

__version__ = "0.1.0"


def get_version() -> str:
    """Get the library version."""
    return __version__


# =============================================================================
# Module-level exports
# =============================================================================

__all__ = [
    # Data classes
    "Def",
    "Translated",
    "Untranslated",
    "TranslationPart",
    "Trie",
    # Dictionary
    "Dictionary",
    "CompiledDictionary",
    "build_dictionary",
    "save_dictionary",
    "load_dictionary",
    "conjugate",
    # Word lists
    "read_definitions",
    "read_exclusions",
    # Translation
    "TranslationMode",
    "translate",
    "translate_split",
    "translate_document",
    "translate_lines",
    "retranslate_lines",
    "clean_lines",
    "render_part",
    "get_version",
    # Exceptions
    "MissingMeaningError",
    # Version
    "__version__",
]
