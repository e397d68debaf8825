"""
Translator module for kor-gloss.

Scans text left to right, replacing the longest dictionary word at each
position with its meaning. Text without a match is passed through
unchanged, so the output can always be lined up with the source.
"""

from enum import Enum
from typing import Iterator, List, Optional, Protocol, Tuple

from kor_gloss.raw_types import Def, Translated, TranslationPart, Untranslated


# =============================================================================
# Constants
# =============================================================================

# Prefix of machine-translated lines in line-by-line documents
AUTO_PREFIX = "->"

# Prefix of lines reserved for a human translation
MANUAL_PREFIX = "-|"

# Empty manual lines written under each source line
MANUAL_PLACEHOLDERS = 3

# Sentinels at the start of a primary meaning
MARK_SENTINEL = "{"     # keep the source text, marked with '{'
LITERAL_SENTINEL = "<"  # substitute the meaning as-is


class TranslationMode(Enum):
    NORMAL = "normal"
    LINE_BY_LINE = "line_by_line"
    RETRANSLATE = "retranslate"


class Lookup(Protocol):
    def find_longest_match(self, text: str, start: int = 0) -> Optional[Tuple[str, Def]]:
        ...


# =============================================================================
# Splitting
# =============================================================================

def translate_split(text: str, dictionary: Lookup) -> Iterator[TranslationPart]:
    """
    Split text into translated and untranslated parts.

    Consecutive characters without a dictionary match are grouped into one
    Untranslated part. Joining the text of all parts gives back the input.

    Args:
        text: Source text
        dictionary: Anything with find_longest_match (Dictionary, CompiledDictionary)

    Yields:
        Untranslated and Translated parts in source order
    """
    untranslated_start: Optional[int] = None
    start = 0

    while start < len(text):
        match = dictionary.find_longest_match(text, start)
        if match is not None:
            prefix, definition = match
            if untranslated_start is not None:
                yield Untranslated(text[untranslated_start:start], untranslated_start, start)
                untranslated_start = None
            end = start + len(prefix)
            yield Translated(prefix, start, end, definition)
            start = end
        else:
            if untranslated_start is None:
                untranslated_start = start
            start += 1

    if untranslated_start is not None:
        yield Untranslated(text[untranslated_start:], untranslated_start, len(text))


# =============================================================================
# Rendering
# =============================================================================

def render_part(part: TranslationPart) -> str:
    """
    Render one part of a translation.

    - untranslated text is kept verbatim
    - meaning "{..." renders as '{' + source text
    - meaning "<..." renders as the meaning itself
    - any other meaning renders as "[meaning]"

    Raises:
        MissingMeaningError: If a translated definition has no meanings
    """
    if isinstance(part, Untranslated):
        return part.text

    meaning = part.definition.primary_meaning
    if meaning.startswith(MARK_SENTINEL):
        return MARK_SENTINEL + part.text
    if meaning.startswith(LITERAL_SENTINEL):
        return meaning
    return f"[{meaning}]"


def translate(text: str, dictionary: Lookup) -> str:
    """
    Replace as much of text as possible with dictionary meanings.

    Example:
        >>> from kor_gloss import Def, Dictionary
        >>> d = Dictionary()
        >>> d.add_definitions([Def("학교", meanings=["school"])])
        >>> translate("학교에", d)
        '[school]에'
    """
    return "".join(render_part(part) for part in translate_split(text, dictionary))


# =============================================================================
# Line-by-line Documents
# =============================================================================

def _is_blank(line: str) -> bool:
    return not line.strip()


def _auto_line(line: str, dictionary: Lookup) -> Optional[str]:
    translated = translate(line, dictionary)
    if translated == line:
        return None
    return f"{AUTO_PREFIX} {translated}"


def translate_lines(text: str, dictionary: Lookup) -> List[str]:
    """
    Lay out a document for manual translation.

    Each source line is followed by its machine translation (when anything
    was translated) and by empty lines to write the manual translation in.
    """
    output = []
    for line in text.splitlines():
        if _is_blank(line):
            output.append(line)
            continue
        output.append(line)
        auto = _auto_line(line, dictionary)
        if auto is not None:
            output.append(auto)
        output.extend([f"{MANUAL_PREFIX} "] * MANUAL_PLACEHOLDERS)
    return output


def retranslate_lines(text: str, dictionary: Lookup) -> List[str]:
    """
    Refresh the machine translations of a line-by-line document.

    Manual lines are kept, old machine lines are replaced.
    """
    output = []
    for line in text.splitlines():
        if _is_blank(line) or line.startswith(MANUAL_PREFIX):
            output.append(line)
        elif line.startswith(AUTO_PREFIX):
            continue
        else:
            output.append(line)
            auto = _auto_line(line, dictionary)
            if auto is not None:
                output.append(auto)
    return output


def clean_lines(text: str) -> List[str]:
    """
    Extract the manual translations from a line-by-line document.

    Blank manual lines are kept as a bare prefix to show what is still
    untranslated.
    """
    output = []
    for line in text.splitlines():
        if _is_blank(line):
            output.append("")
        elif line.startswith(MANUAL_PREFIX):
            remainder = line[len(MANUAL_PREFIX):].strip()
            output.append(remainder if remainder else f"{MANUAL_PREFIX} ")
    return output


def translate_document(text: str, dictionary: Lookup, mode: TranslationMode = TranslationMode.NORMAL) -> str:
    """Translate a whole document in the given mode."""
    if mode is TranslationMode.LINE_BY_LINE:
        return "\n".join(translate_lines(text, dictionary))
    if mode is TranslationMode.RETRANSLATE:
        return "\n".join(retranslate_lines(text, dictionary))
    return translate(text, dictionary)
