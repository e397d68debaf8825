"""
Hangul syllable-block helpers for kor-gloss.

A precomposed Hangul syllable is split into an initial consonant, a vowel
and an optional final consonant. Components are kept as conjoining jamo
(U+1100 block) so they can be passed straight back to the jamo library.
"""

from dataclasses import dataclass
from typing import Optional

from jamo import h2j, j2h


# =============================================================================
# Constants
# =============================================================================

HANGUL_SYLLABLE_FIRST = 0xAC00
HANGUL_SYLLABLE_LAST = 0xD7A3

# Initial consonants
IEUNG = 'ᄋ'  # ㅇ (silent)

# Vowels
A = 'ᅡ'    # ㅏ
AE = 'ᅢ'   # ㅐ
EO = 'ᅥ'   # ㅓ
YEO = 'ᅧ'  # ㅕ
U = 'ᅮ'    # ㅜ
WEO = 'ᅯ'  # ㅝ
EU = 'ᅳ'   # ㅡ
I = 'ᅵ'    # ㅣ

# Final consonants
NO_FINAL = ''
N = 'ᆫ'   # ㄴ
L = 'ᆯ'   # ㄹ
B = 'ᆸ'   # ㅂ
SS = 'ᆻ'  # ㅆ


def is_hangeul(char: str) -> bool:
    """Check if a character is a precomposed Hangul syllable."""
    if len(char) != 1:
        return False
    return HANGUL_SYLLABLE_FIRST <= ord(char) <= HANGUL_SYLLABLE_LAST


# =============================================================================
# Syllable Blocks
# =============================================================================

@dataclass(frozen=True, slots=True)
class Block:
    """
    A single Hangul syllable broken into its components.

    Attributes:
        initial: Initial consonant (conjoining jamo)
        vowel: Vowel (conjoining jamo)
        final: Final consonant (conjoining jamo), or '' for an open syllable
    """
    initial: str
    vowel: str
    final: str = NO_FINAL

    @classmethod
    def from_char(cls, char: str) -> Optional['Block']:
        """
        Decompose a syllable character.

        Returns:
            The Block, or None if char is not a precomposed Hangul syllable
        """
        if not is_hangeul(char):
            return None
        parts = h2j(char)
        if len(parts) == 3:
            return cls(parts[0], parts[1], parts[2])
        return cls(parts[0], parts[1])

    def with_vowel(self, vowel: str) -> 'Block':
        return Block(self.initial, vowel, self.final)

    def with_final(self, final: str) -> 'Block':
        return Block(self.initial, self.vowel, final)

    def to_char(self) -> str:
        """Compose the block back into a syllable character."""
        if self.final:
            return j2h(self.initial, self.vowel, self.final)
        return j2h(self.initial, self.vowel)

    def __str__(self) -> str:
        return self.to_char()
