"""Semantic checks on the words inside a name.

Detects phrase-like names, unrelated word pairs, negative connotations
and offensive content.
"""

from dataclasses import dataclass

from domain_scoring.lexicon import (
    COMPATIBLE_CATEGORIES,
    FILLER_WORDS,
    NEGATIVE_BRAND_WORDS,
    OFFENSIVE_WORDS,
    brand_category,
)
from domain_scoring.scoring.segmentation import dictionary_coverage

# Longest fillers first so "the" is tried before "he"
_FILLERS_BY_LENGTH: tuple[str, ...] = tuple(sorted(FILLER_WORDS, key=lambda w: (-len(w), w)))


@dataclass(frozen=True)
class Coherence:
    """How well the words of a name hang together.

    Attributes:
        multiplier: 1.0 for a coherent name, down to 0.3 for a sentence
        detail: Explanation, empty when coherent
    """

    multiplier: float = 1.0
    detail: str = ""

    @property
    def is_coherent(self) -> bool:
        return self.multiplier >= 1.0


COHERENT = Coherence()


def embedded_fillers(name: str) -> list[str]:
    """Find filler words embedded between or beside real words.

    A filler counts when it sits between two mostly recognizable
    segments, or, for fillers of three or more letters, at either end
    next to a mostly recognizable segment.
    """
    found: list[str] = []
    for filler in _FILLERS_BY_LENGTH:
        if len(filler) < 2:
            continue
        idx = name.find(filler)
        if idx == -1:
            continue

        before = name[:idx]
        after = name[idx + len(filler):]
        if len(before) >= 2 and len(after) >= 2:
            if dictionary_coverage(before) >= 0.5 and dictionary_coverage(after) >= 0.5:
                found.append(filler)
        elif not before and len(after) >= 2 and len(filler) >= 3:
            if dictionary_coverage(after) >= 0.5:
                found.append(filler)
        elif not after and len(before) >= 2 and len(filler) >= 3:
            if dictionary_coverage(before) >= 0.5:
                found.append(filler)
    return found


def _compatible(a: str, b: str) -> bool:
    return b in COMPATIBLE_CATEGORIES.get(a, frozenset()) or a in COMPATIBLE_CATEGORIES.get(b, frozenset())


def _three_word_coherence(words: list[str]) -> Coherence:
    categories = [c for c in map(brand_category, words) if c]
    if len(categories) >= 2:
        all_compatible = all(
            i == j or other in COMPATIBLE_CATEGORIES.get(c, frozenset())
            for i, c in enumerate(categories)
            for j, other in enumerate(categories)
        )
        if not all_compatible:
            return Coherence(0.4, "Three unrelated words, not a coherent brand concept")
    return Coherence(0.6, "Three words, a bit complex for a brand name")


def _two_word_coherence(first: str, second: str) -> Coherence:
    cat1 = brand_category(first)
    cat2 = brand_category(second)

    if cat1 and cat2 and not _compatible(cat1, cat2):
        return Coherence(0.5, f'"{first}" + "{second}", unrelated concepts don\'t form a strong brand')

    negatives = [w for w in (first, second) if w in NEGATIVE_BRAND_WORDS]
    if len(negatives) >= 2:
        return Coherence(0.4, "Both words have negative connotations, poor brand appeal")
    if negatives:
        multiplier = 0.55 if not cat1 and not cat2 else 0.65
        return Coherence(multiplier, f'"{negatives[0]}" has negative connotations, weakens brand appeal')

    if not cat1 and not cat2:
        return Coherence(0.75, f'"{first}" + "{second}", doesn\'t form a natural brand compound')
    return COHERENT


def semantic_coherence(words: list[str], name: str) -> Coherence:
    """Judge whether the words read as a brand rather than a phrase.

    Args:
        words: Known words found in the name
        name: Cleaned name, letters only

    Returns:
        Coherence with a multiplier between 0.3 and 1.0
    """
    fillers = embedded_fillers(name)
    if len(fillers) >= 2:
        quoted = '", "'.join(fillers)
        return Coherence(0.3, f'Reads like a sentence, not a brand, contains "{quoted}"')
    if fillers:
        return Coherence(0.45, f'Contains filler word "{fillers[0]}", reads like a phrase, not a brand')

    if len(words) <= 1:
        if words and words[0] in NEGATIVE_BRAND_WORDS:
            return Coherence(0.7, f'"{words[0]}" has negative connotations, limits brand appeal')
        return COHERENT

    filler_count = sum(1 for w in words if w in FILLER_WORDS)
    if filler_count / len(words) >= 0.5:
        return Coherence(0.35, "Reads like a phrase, not a brand name, too many filler words")
    if filler_count >= 1 and len(words) >= 3:
        return Coherence(0.45, "Contains filler words, phrases don't make strong brands")
    if filler_count == 1 and len(words) == 2:
        return Coherence(0.5, "Contains a filler word, weakens brand signal")

    if len(words) >= 4:
        return Coherence(0.4, "Too many words, brands should be 1-2 words max")
    if len(words) == 3:
        return _three_word_coherence(words)
    return _two_word_coherence(words[0], words[1])


def offensive_words(name: str) -> list[str]:
    """Offensive words contained anywhere in the name, sorted."""
    return sorted(w for w in OFFENSIVE_WORDS if w in name)


def offensive_severity(name: str) -> int:
    """Severity of offensive content in a name.

    Returns:
        0 clean, 1 mild, 2 moderate, 3 severe. Longer matches are more
        severe, and two or more distinct matches are always severe.
    """
    found = offensive_words(name)
    if not found:
        return 0
    if len(found) >= 2:
        return 3

    word = found[0]
    if len(word) >= 5:
        return 3
    if len(word) >= 4:
        return 2
    return 1
