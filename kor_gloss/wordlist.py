"""
Word-list and exclusion-list readers.

Word-list format:

    # comment
    가다
      to go
    공부하다 (工夫-)
      to study
    먹다|먹기
      to eat

A line at column 0 starts a definition: one or more hangeul forms separated
by '|', optionally followed by hanja in parentheses. Lines indented by two
spaces are the meanings of the definition above them.
"""

import logging
import re
import unicodedata
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from kor_gloss.raw_types import Def

logger = logging.getLogger(__name__)


# =============================================================================
# Patterns
# =============================================================================

# hangeul forms, then optional (hanja) with ASCII or full-width parentheses
RE_DEF = re.compile(r'^(.+?)\s*(?:[(（]\s*(.+?)[)）]\s*)?$')

# One hangeul form, without a leading -/~ marker
RE_HANGEUL = re.compile(r'^[-~]?\s*(.*?)\s*$')

MEANING_INDENT = '  '
COMMENT_PREFIXES = ('#', '  #')


def _is_blank(line: str) -> bool:
    return not line.strip()


def clean_hangeul(hangeul: str) -> str:
    """Strip the -/~ marker and whitespace from a hangeul form."""
    match = RE_HANGEUL.match(hangeul)
    if match is None:
        logger.warning(f"Could not parse hangeul: {hangeul!r}")
        return hangeul
    return match.group(1)


def read_definition(line: str, lineno: int) -> Optional[Def]:
    """
    Parse the first line of a definition.

    Returns:
        A Def without meanings, or None if the line is malformed
    """
    match = RE_DEF.match(line)
    if match is None:
        logger.warning(f"Line {lineno}: Invalid definition: {line!r}")
        return None

    forms = [clean_hangeul(part) for part in match.group(1).split('|')]
    return Def(
        hangeul=forms[0],
        aliases=forms[1:],
        hanja=match.group(2),
    )


def read_definitions_iter(text: str) -> Iterator[Def]:
    """
    Read definitions from word-list text.

    Definitions without any meaning line are reported and skipped.

    Args:
        text: Word-list source

    Yields:
        Def records in file order
    """
    text = unicodedata.normalize('NFC', text)
    current: Optional[Def] = None
    current_lineno = 0

    def finish(definition: Optional[Def], lineno: int) -> Optional[Def]:
        if definition is None:
            return None
        if not definition.meanings:
            logger.warning(f"Line {lineno}: Definition {definition.hangeul!r} has no meanings, skipped")
            return None
        return definition

    for lineno, line in enumerate(text.splitlines(), start=1):
        if line.startswith(COMMENT_PREFIXES) or _is_blank(line):
            continue

        if not line.startswith(MEANING_INDENT):
            done = finish(current, current_lineno)
            if done is not None:
                yield done
            current = read_definition(line, lineno)
            current_lineno = lineno
        elif current is not None:
            current.meanings.append(line.strip())
        else:
            logger.warning(f"Line {lineno}: Meaning found without definition")

    done = finish(current, current_lineno)
    if done is not None:
        yield done


def read_definitions(text: str) -> List[Def]:
    """Read all definitions in word-list text."""
    return list(read_definitions_iter(text))


def read_exclusions(text: str) -> List[str]:
    """
    Read an exclusion list: one dictionary key per line.

    Lines starting with '#' and blank lines are ignored.
    """
    text = unicodedata.normalize('NFC', text)
    keys = []
    for line in text.splitlines():
        if line.startswith('#') or _is_blank(line):
            continue
        keys.append(line.strip())
    return keys


# =============================================================================
# File Loading
# =============================================================================

PathLike = Union[str, Path]


def load_word_lists(paths: Iterable[PathLike]) -> List[Def]:
    """Read the definitions of several word-list files, in order."""
    defs: List[Def] = []
    for path in paths:
        source = Path(path).read_text(encoding='utf-8')
        loaded = read_definitions(source)
        logger.info(f"Loaded {len(loaded)} definitions from {path}")
        defs.extend(loaded)
    return defs


def load_exclusions(paths: Iterable[PathLike]) -> List[str]:
    """Read the keys of several exclusion-list files, in order."""
    keys: List[str] = []
    for path in paths:
        keys.extend(read_exclusions(Path(path).read_text(encoding='utf-8')))
    return keys
