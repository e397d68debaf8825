"""
Lightweight data structures shared by the dictionary and the translator.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union


class MissingMeaningError(ValueError):
    """Raised when a definition without any meaning lines is rendered."""
    pass


@dataclass(slots=True)
class Def:
    """
    A word-list definition.

    Attributes:
        hangeul: Citation form (e.g., "가다")
        aliases: Alternate spellings sharing the same meanings
        hanja: Chinese-character annotation, display only
        meanings: Gloss lines; the first one is used for translation
    """
    hangeul: str
    aliases: List[str] = field(default_factory=list)
    hanja: Optional[str] = None
    meanings: List[str] = field(default_factory=list)

    @property
    def keys(self) -> List[str]:
        """Citation form followed by its aliases."""
        return [self.hangeul, *self.aliases]

    @property
    def primary_meaning(self) -> str:
        """
        The meaning used when rendering a translation.

        Raises:
            MissingMeaningError: If the definition has no meanings
        """
        if not self.meanings:
            raise MissingMeaningError(f"definition {self.hangeul!r} has no meanings")
        return self.meanings[0]


@dataclass(frozen=True, slots=True)
class Untranslated:
    """A span of the source text with no dictionary match."""
    text: str
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class Translated:
    """A span of the source text matched to a definition."""
    text: str
    start: int
    end: int
    definition: Def


TranslationPart = Union[Untranslated, Translated]
