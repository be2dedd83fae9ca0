"""Pronounceability scoring for domain names."""

from domain_scoring.domain import parse_domain
from domain_scoring.scoring.models import Impact, PronounceabilityResult, PronounceGrade, ScoreFactor
from domain_scoring.scoring.phonetics import (
    BAD_CLUSTERS,
    GOOD_BIGRAMS,
    TRIPLE_REPEAT,
    VOWELS,
    count_syllables,
    negative_sound,
    stress_pattern,
)
from domain_scoring.scoring.segmentation import count_words
from domain_scoring.util import clamp, round_half_up

BASELINE = 50

# Vowel share bands
IDEAL_VOWEL_RATIO = (0.25, 0.6)
ACCEPTABLE_VOWEL_RATIO = (0.2, 0.65)


def pronounce_grade(score: int) -> PronounceGrade:
    """Map a 0-100 score to a grade."""
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Good"
    if score >= 40:
        return "Fair"
    return "Poor"


def _factor(label: str, points: int, impact: Impact, detail: str) -> ScoreFactor:
    return ScoreFactor(label=label, points=points, detail=detail, impact=impact)


def _length_factor(name: str) -> ScoreFactor:
    n = len(name)
    if 4 <= n <= 8:
        return _factor("Length", 15, "positive", f"{n} characters, ideal length")
    if n <= 12:
        return _factor("Length", 5, "neutral", f"{n} characters, slightly long")
    return _factor("Length", -10, "negative", f"{n} characters, too long to remember easily")


def _word_count_factor(word_count: int) -> ScoreFactor:
    if word_count == 1:
        return _factor("Word Count", 5, "positive", "Single word, concise and memorable")
    if word_count == 2:
        return _factor("Word Count", 2, "neutral", "2 words, easy compound name")
    if word_count == 3:
        return _factor("Word Count", -5, "neutral", "3 words, getting long but workable")
    return _factor("Word Count", -15, "negative", f"{word_count} words, too many words to remember")


def _vowel_factor(name: str) -> ScoreFactor:
    ratio = sum(1 for c in name if c in VOWELS) / len(name)
    percent = round_half_up(ratio * 100)
    if IDEAL_VOWEL_RATIO[0] <= ratio <= IDEAL_VOWEL_RATIO[1]:
        return _factor("Vowel Balance", 15, "positive", f"{percent}% vowels, natural flow")
    if ACCEPTABLE_VOWEL_RATIO[0] <= ratio <= ACCEPTABLE_VOWEL_RATIO[1]:
        return _factor("Vowel Balance", 5, "neutral", f"{percent}% vowels, acceptable")
    return _factor("Vowel Balance", -15, "negative", f"{percent}% vowels, hard to pronounce")


def _cluster_factor(name: str) -> ScoreFactor:
    if BAD_CLUSTERS.search(name):
        return _factor("Consonant Clusters", -20, "negative", "Contains difficult consonant groups")
    return _factor("Consonant Clusters", 10, "positive", "No difficult consonant clusters")


def _bigram_factor(name: str) -> ScoreFactor:
    good = sum(1 for i in range(len(name) - 1) if name[i : i + 2] in GOOD_BIGRAMS)
    ratio = good / (len(name) - 1) if len(name) > 1 else 0.0
    if ratio >= 0.5:
        return _factor("Letter Patterns", 15, "positive", "Uses common, easy letter combinations")
    if ratio >= 0.25:
        return _factor("Letter Patterns", 5, "neutral", "Some familiar letter patterns")
    return _factor("Letter Patterns", -10, "negative", "Unusual letter combinations")


def _syllable_factor(syllables: int) -> ScoreFactor:
    if 2 <= syllables <= 3:
        return _factor("Syllables", 10, "positive", f"~{syllables} syllables, easy to say")
    if syllables in (1, 4):
        plural = "s" if syllables > 1 else ""
        return _factor("Syllables", 3, "neutral", f"~{syllables} syllable{plural}, acceptable")
    return _factor("Syllables", -10, "negative", f"~{syllables} syllables, too many")


def score_pronounceability(domain: str) -> PronounceabilityResult:
    """Rate how easily a domain name can be said aloud.

    Starts from a neutral 50 and adds or subtracts points for length,
    word count, vowel balance, consonant clusters, familiar letter pairs,
    syllable count, repeated letters, stress pattern and unpleasant sounds.

    Args:
        domain: Domain with or without TLD

    Returns:
        PronounceabilityResult with score clamped to 0-100
    """
    name = parse_domain(domain).letters
    if not name:
        return PronounceabilityResult(
            score=0,
            grade="Poor",
            word_count=0,
            factors=[_factor("Empty", 0, "negative", "No valid characters")],
        )

    word_count = count_words(name)
    factors = [
        _length_factor(name),
        _word_count_factor(word_count),
        _vowel_factor(name),
        _cluster_factor(name),
        _bigram_factor(name),
        _syllable_factor(count_syllables(name)),
    ]

    if TRIPLE_REPEAT.search(name):
        factors.append(_factor("Repetition", -10, "negative", "Contains triple+ repeated characters"))

    stress_points, stress_detail = stress_pattern(name)
    if stress_points > 0:
        impact: Impact = "positive" if stress_points >= 6 else "neutral"
        factors.append(_factor("Stress Pattern", stress_points, impact, stress_detail))

    sound_points, sound_detail = negative_sound(name)
    if sound_detail:
        factors.append(_factor("Sound Connotation", sound_points, "negative", sound_detail))

    score = int(clamp(BASELINE + sum(f.points for f in factors), 0, 100))
    return PronounceabilityResult(
        score=score,
        grade=pronounce_grade(score),
        word_count=word_count,
        factors=factors,
    )
