"""Phonetic building blocks for pronounceability scoring.

Syllable counting, stress pattern detection and sound connotation checks.
"""

import re

from domain_scoring.scoring.segmentation import split_into_words

VOWELS = frozenset("aeiouy")

# =============================================================================
# LETTER PATTERNS
# =============================================================================

# Bigrams common in English words
GOOD_BIGRAMS: frozenset[str] = frozenset({
    "th", "he", "in", "er", "an", "re", "on", "at", "en", "nd",
    "ti", "es", "or", "te", "of", "ed", "is", "it", "al", "ar",
    "st", "to", "nt", "ng", "se", "ha", "as", "ou", "io", "le",
    "ve", "co", "me", "de", "hi", "ri", "ro", "ic", "ne", "ea",
    "ra", "ce", "li", "ch", "ll", "be", "ma", "si", "om", "ur",
    "ca", "el", "ta", "la", "ns", "ge", "ly", "ei", "os", "il",
    "no", "pe", "do", "su", "pa", "ec", "ac", "ot", "di", "ol",
    "tr", "sh", "pr", "pl", "cr", "bl", "fl", "gr", "br", "cl",
    "dr", "fr", "gl", "sl", "sp", "sw", "tw", "wr", "sc", "sk",
    "sm", "sn", "sq",
})

# Four consonants anywhere, or three at either edge
BAD_CLUSTERS = re.compile(
    r"[bcdfghjklmnpqrstvwxz]{4,}|^[bcdfghjklmnpqrstvwxz]{3}|[bcdfghjklmnpqrstvwxz]{3}$"
)

TRIPLE_REPEAT = re.compile(r"(.)\1{2,}")

# =============================================================================
# SYLLABLES
# =============================================================================

# Checked in order, the first matching suffix wins
SYLLABLE_SUFFIXES: tuple[tuple[str, int], ...] = (
    ("tion", 1),
    ("sion", 1),
    ("ious", 2),
    ("eous", 2),
    ("able", 2),
    ("ible", 2),
    ("ness", 1),
    ("ment", 1),
    ("ing", 1),
    ("ful", 1),
    ("less", 1),
    ("ize", 1),
    ("ise", 1),
    ("ous", 1),
    ("ive", 1),
    ("ly", 1),
    ("er", 1),
    ("est", 1),
)


def word_syllables(word: str) -> int:
    """Estimate syllables in a single word.

    Strips one common suffix and counts it separately, handles ``-ed``
    (only syllabic after t or d), then counts vowel groups in the stem
    with a silent trailing ``e`` removed.

    Args:
        word: Lowercase word

    Returns:
        Syllable count, at least 1
    """
    if len(word) <= 2:
        return 1

    extra = 0
    stem = word
    for suffix, syllables in SYLLABLE_SUFFIXES:
        if stem.endswith(suffix) and len(stem) > len(suffix) + 1:
            extra += syllables
            stem = stem[: -len(suffix)]
            break

    if not extra and stem.endswith("ed") and len(stem) > 3:
        if stem[-3] in "td":
            extra += 1
        stem = stem[:-2]

    count = 0
    prev_vowel = False
    for char in stem:
        is_vowel = char in VOWELS
        if is_vowel and not prev_vowel:
            count += 1
        prev_vowel = is_vowel

    if len(stem) > 2 and stem.endswith("e") and stem[-2] not in VOWELS and count > 1:
        count -= 1

    return max(1, count + extra)


def syllable_segments(name: str) -> list[str]:
    """Split a name into segments for syllable counting.

    Known words become their own segment. Leftover letters attach to the
    preceding segment so they are voiced with it.
    """
    segments: list[str] = []
    for part in split_into_words(name):
        if len(part) == 1 and segments:
            segments[-1] += part
        else:
            segments.append(part)
    return segments


def count_syllables(name: str) -> int:
    """Estimate syllables in a whole name, 0 for an empty name."""
    letters = re.sub(r"[^a-z]", "", name.lower())
    if not letters:
        return 0
    return max(1, sum(word_syllables(seg) for seg in syllable_segments(letters)))


# =============================================================================
# STRESS & CONNOTATION
# =============================================================================

STRESSED_ENDINGS: tuple[str, ...] = (
    "tion", "sion", "ment", "ness", "ful", "less", "able", "ible",
    "ous", "ive", "ize", "ise", "ent", "ant", "ence", "ance",
)
UNSTRESSED_PREFIXES: tuple[str, ...] = (
    "pre", "pro", "un", "re", "de", "mis", "dis", "over", "under", "out",
)

NEGATIVE_SOUND_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"gr[auo]n"), "Contains 'groan/grunt' sound, negative connotation"),
    (re.compile(r"ugh"), "Contains 'ugh' sound, negative connotation"),
    (re.compile(r"blech|bleh"), "Contains disgust sound"),
    (re.compile(r"sn[aoi]r"), "Contains 'snarl/snore' sound, unfriendly"),
    (re.compile(r"scr[aue]"), "Contains 'scrape/scream' sound, harsh"),
    (re.compile(r"squ[eai]"), "Contains 'squeal/squash' sound, unpleasant"),
    (re.compile(r"cr[auo][nwk]"), "Contains 'croak/crank' sound, negative"),
)


def stress_pattern(name: str) -> tuple[int, str]:
    """Score the rhythm of a name.

    Two and three syllable names with a familiar ending, a familiar
    prefix or steady vowel-consonant alternation read most naturally.

    Returns:
        Tuple of (points, detail)
    """
    syllables = count_syllables(name)

    if 2 <= syllables <= 3:
        if name.endswith(STRESSED_ENDINGS):
            return 8, "Natural stress pattern, rhythmic and memorable"
        for prefix in UNSTRESSED_PREFIXES:
            if name.startswith(prefix) and len(name) > len(prefix) + 2:
                return 5, "Prefix-stress pattern, familiar rhythm"

        window = min(len(name), 8)
        alternations = sum(
            1
            for i in range(1, window)
            if (name[i - 1] in VOWELS) != (name[i] in VOWELS)
        )
        if window > 1 and alternations / (window - 1) >= 0.6:
            return 7, "Alternating vowel-consonant flow, very smooth"
        return 3, "Acceptable stress pattern"

    if syllables == 1:
        return 4, "Single syllable, punchy but simple"
    return 0, "Complex stress pattern, harder to remember"


def negative_sound(name: str) -> tuple[int, str | None]:
    """Penalize sounds with unpleasant associations.

    Returns:
        Tuple of (score_delta, reason or None)
    """
    for pattern, detail in NEGATIVE_SOUND_PATTERNS:
        if pattern.search(name):
            return -5, detail
    return 0, None
