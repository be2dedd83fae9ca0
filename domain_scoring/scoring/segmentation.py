"""Dictionary-backed word segmentation.

Splits a cleaned name into known words so that the scorers can reason
about compounds like ``cloudbank`` or portmanteaus like ``chainalysis``.
"""

import re
from dataclasses import dataclass, field

from domain_scoring.lexicon import KNOWN_WORDS, SHORT_WORDS, is_known_word

MIN_WORD_LENGTH = 2
MAX_WORD_LENGTH = 15
MAX_OVERLAP = 4
# Shortest leftover that may be read as the tail of a longer word
MIN_TRUNCATED_TAIL = 4

# Stable iteration order for the truncation search
_TAIL_CANDIDATES: tuple[str, ...] = tuple(sorted(KNOWN_WORDS))

_NON_ALPHA = re.compile(r"[^a-z]")


@dataclass
class Segmentation:
    """Segmentation of a name.

    Attributes:
        parts: Known words plus uncovered single characters, in order
        coverage: Fraction of characters explained by known words (0-1)
        word_count: Number of known words, at least 1
    """

    parts: list[str] = field(default_factory=list)
    coverage: float = 0.0
    word_count: int = 1

    @property
    def words(self) -> list[str]:
        """Known words only."""
        return meaningful_words(self.parts)


def _dp_split(s: str) -> list[str]:
    """Maximum-coverage split by dynamic programming.

    ``best[i]`` holds the most characters of ``s[:i]`` that can be covered
    by non-overlapping known words. Characters no word covers come back
    as single-character parts. Equal coverage keeps the longer word, so
    ``together`` stays whole instead of becoming ``to`` + ``get`` + ``her``.
    """
    n = len(s)
    best = [0] * (n + 1)
    parent: list[int | None] = [None] * (n + 1)

    for i in range(1, n + 1):
        best[i] = best[i - 1]
        # Longest first: a shorter word only wins with strictly more coverage
        for length in range(min(i, MAX_WORD_LENGTH), MIN_WORD_LENGTH - 1, -1):
            start = i - length
            if is_known_word(s[start:i]) and best[start] + length > best[i]:
                best[i] = best[start] + length
                parent[i] = start

    parts: list[str] = []
    pos = n
    while pos > 0:
        start = parent[pos]
        if start is None:
            parts.append(s[pos - 1])
            pos -= 1
        else:
            parts.append(s[start:pos])
            pos = start
    parts.reverse()
    return parts


def _portmanteau_split(s: str, min_coverage: int) -> list[str] | None:
    """Find two known words that overlap to spell ``s``.

    Tries every split point with an overlap of up to four characters,
    extending either the left word forwards or the right word backwards.
    Returns the pair with the highest combined length above
    ``min_coverage``, or None.
    """
    n = len(s)
    best_pair: list[str] | None = None
    best_coverage = min_coverage

    for i in range(2, n - 1):
        for overlap in range(0, min(MAX_OVERLAP, i, n - i) + 1):
            left, right = s[: i + overlap], s[i:]
            if is_known_word(left) and is_known_word(right):
                if len(left) + len(right) > best_coverage:
                    best_coverage = len(left) + len(right)
                    best_pair = [left, right]
            if overlap > 0:
                left, right = s[:i], s[i - overlap:]
                if is_known_word(left) and is_known_word(right):
                    if len(left) + len(right) > best_coverage:
                        best_coverage = len(left) + len(right)
                        best_pair = [left, right]

    return best_pair


def _truncation_split(s: str, parts: list[str]) -> list[str] | None:
    """Read the text after the first real word as the tail of a longer word.

    ``chainalysis`` becomes ``chain`` + ``analysis`` because ``alysis``
    is how ``analysis`` ends.
    """
    anchors = [p for p in parts if len(p) >= 3 and is_known_word(p)]
    if not anchors:
        return None

    first = anchors[0]
    remainder = s[s.find(first) + len(first):]
    if len(remainder) < MIN_TRUNCATED_TAIL:
        return None

    parent_word: str | None = None
    for candidate in _TAIL_CANDIDATES:
        if (
            len(candidate) > len(remainder)
            and candidate.endswith(remainder)
            and (parent_word is None or len(candidate) > len(parent_word))
        ):
            parent_word = candidate

    if parent_word is None:
        return None
    return [first, parent_word]


def split_into_words(name: str) -> list[str]:
    """Split a name into known words.

    Uses the maximum-coverage DP split. When that leaves characters
    uncovered, a two-word portmanteau reading is tried, then a truncated
    second word.

    Args:
        name: Name without TLD, already stripped of punctuation

    Returns:
        Words and uncovered single characters in reading order
    """
    s = name.lower()
    if not s:
        return []

    parts = _dp_split(s)
    covered = sum(len(p) for p in meaningful_words(parts))
    if covered >= len(s):
        return parts

    return (
        _portmanteau_split(s, covered)
        or _truncation_split(s, parts)
        or parts
    )


def meaningful_words(parts: list[str]) -> list[str]:
    """Keep the parts that are known words of two or more letters."""
    return [p for p in parts if len(p) >= MIN_WORD_LENGTH and is_known_word(p)]


def dictionary_coverage(name: str) -> float:
    """Fraction of a name's letters explained by known words.

    Names of one letter score 0. Two and three letter names are looked up
    whole against the word lists and the short-word set and score either
    1.0 or 0. Longer names use the DP coverage, and a full portmanteau
    reading counts as complete coverage.
    """
    s = _NON_ALPHA.sub("", name.lower())
    n = len(s)
    if n <= 1:
        return 0.0
    if n <= 3:
        return 1.0 if is_known_word(s) or s in SHORT_WORDS else 0.0

    best = [0] * (n + 1)
    for i in range(1, n + 1):
        best[i] = best[i - 1]
        for length in range(MIN_WORD_LENGTH, min(i, MAX_WORD_LENGTH) + 1):
            start = i - length
            if is_known_word(s[start:i]):
                best[i] = max(best[i], best[start] + length)
    covered = best[n]

    if covered < n:
        for i in range(2, n - 1):
            for overlap in range(1, min(MAX_OVERLAP, i, n - i) + 1):
                if is_known_word(s[: i + overlap]) and is_known_word(s[i:]):
                    return 1.0

    return covered / n


def is_fully_covered(name: str, words: list[str]) -> bool:
    """Check that the words spell the whole name.

    Words may overlap by up to four characters at each boundary, so
    ``chain`` + ``analysis`` fully covers ``chainalysis``.
    """
    if not words:
        return False
    total = sum(len(w) for w in words)
    if total == len(name):
        return True
    max_overlap = (len(words) - 1) * MAX_OVERLAP
    return len(name) < total <= len(name) + max_overlap


def count_words(name: str) -> int:
    """Number of known words in a name, at least 1."""
    s = _NON_ALPHA.sub("", name.lower())
    if len(s) <= 2:
        return 1
    return len(meaningful_words(split_into_words(s))) or 1


def segment(name: str) -> Segmentation:
    """Split, measure coverage and count words in one call."""
    s = _NON_ALPHA.sub("", name.lower())
    parts = split_into_words(s)
    return Segmentation(
        parts=parts,
        coverage=dictionary_coverage(s),
        word_count=count_words(s),
    )
