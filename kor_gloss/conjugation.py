"""
Conjugated surface forms for Korean verb and adjective stems.

Only the last syllable block of the stem changes. The forms cover the
common endings a reader meets in running text (past/descriptive ㄴ,
future ㄹ, formal ㅂ, the 아/어 connective and its past tense), not a
full verb paradigm.
"""

import logging
from typing import List

from kor_gloss.characters import (
    Block, is_hangeul,
    IEUNG, A, AE, EO, YEO, U, WEO, EU, I,
    NO_FINAL, N, L, B, SS,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Conjugation Tables
# =============================================================================

# Open-syllable vowels that contract with the 아/어 connective
VOWEL_CONTRACTIONS = {
    A: AE,    # 가 -> 개
    I: YEO,   # 마시 -> 마셔
    EU: EO,   # 쓰 -> 써
}

# (vowel, final) of the block appended after a dropped ㅂ final
B_IRREGULAR_ENDINGS = [
    (U, NO_FINAL),   # 추우
    (U, N),          # 추운
    (U, L),          # 추울
    (WEO, NO_FINAL), # 추워
    (WEO, SS),       # 추웠
]


def conjugate(stem: str) -> List[str]:
    """
    Generate the surface forms of a stem.

    The stem is the citation form without its final 다. The stem itself is
    always the first form returned.

    Args:
        stem: Verb/adjective stem (e.g., "가" for "가다")

    Returns:
        Distinct surface forms, in generation order

    Example:
        >>> conjugate("가")
        ['가', '간', '갈', '갑', '개', '갰']
        >>> conjugate("살")
        ['살', '사', '산']
    """
    forms = [stem]

    if not stem or not is_hangeul(stem[-1]):
        logger.warning(f"Cannot conjugate {stem!r}: last character is not a Hangul syllable")
        return forms

    prefix = stem[:-1]
    block = Block.from_char(stem[-1])

    if block.final == NO_FINAL:
        forms.append(prefix + block.with_final(N).to_char())
        forms.append(prefix + block.with_final(L).to_char())
        forms.append(prefix + block.with_final(B).to_char())

        contracted = VOWEL_CONTRACTIONS.get(block.vowel)
        if contracted is not None:
            forms.append(prefix + block.with_vowel(contracted).to_char())
            forms.append(prefix + block.with_vowel(contracted).with_final(SS).to_char())
        else:
            forms.append(prefix + block.with_final(L).to_char())
            forms.append(prefix + block.with_final(SS).to_char())

    elif block.final == L:
        forms.append(prefix + block.with_final(NO_FINAL).to_char())
        forms.append(prefix + block.with_final(N).to_char())

    elif block.final == B:
        # ㅂ irregular: 춥 -> 추 + 워
        base = prefix + block.with_final(NO_FINAL).to_char()
        for vowel, final in B_IRREGULAR_ENDINGS:
            forms.append(base + Block(IEUNG, vowel, final).to_char())

    return list(dict.fromkeys(forms))
