"""Brandability scoring.

Combines six weighted dimensions into a 0-100 composite, then dampens the
result when the name contains offensive language.
"""

import re

from domain_scoring.domain import parse_domain
from domain_scoring.lexicon import COMMON_WORDS, DICTIONARY_WORDS, PREMIUM_KEYWORDS, PREMIUM_SHORT, is_known_word
from domain_scoring.scoring.coherence import Coherence, offensive_severity, semantic_coherence
from domain_scoring.scoring.models import BrandabilityDimension, BrandabilityResult, BrandGrade
from domain_scoring.scoring.phonetics import TRIPLE_REPEAT, VOWELS
from domain_scoring.scoring.pronounceability import score_pronounceability
from domain_scoring.scoring.segmentation import count_words, dictionary_coverage, meaningful_words, split_into_words
from domain_scoring.trademark import TrademarkRiskChecker, check_trademark_risk
from domain_scoring.util import clamp, round_half_up

# Dimension weights, summing to 1.0
WEIGHTS: dict[str, float] = {
    "Pronounceability": 0.25,
    "Length": 0.15,
    "Word Structure": 0.15,
    "Trademark Safety": 0.15,
    "Memorability": 0.15,
    "Visual Appeal": 0.15,
}

# Severity -> (multiplier, summary note)
OFFENSIVE_PENALTIES: dict[int, tuple[float, str]] = {
    0: (1.0, ""),
    1: (0.55, " Contains mildly inappropriate language."),
    2: (0.35, " Contains inappropriate language."),
    3: (0.15, " Contains highly offensive language."),
}

TRADEMARK_SAFETY: dict[str, tuple[int, str]] = {
    "none": (100, "No trademark conflicts detected"),
    "low": (70, "Slight resemblance to known brand"),
    "medium": (35, "Contains trademarked term, legal risk"),
    "high": (5, "Direct trademark conflict, high legal risk"),
}

HYPHEN_STRUCTURE_PENALTY = 30
HYPHEN_MEMORABILITY_PENALTY = 25
GIBBERISH_MEMORABILITY_PENALTY = 45
PARTIAL_MEMORABILITY_PENALTY = 20

_CATCHY_ENDING = re.compile(r"(?:ify|ly|io|er|oo|ix|ox|us|ia|eo|ay)$")
_ALPHA_ONLY = re.compile(r"^[a-z]+$")


def brand_grade(overall: int) -> BrandGrade:
    """Map an overall score to a letter grade."""
    if overall >= 90:
        return "A+"
    if overall >= 80:
        return "A"
    if overall >= 65:
        return "B"
    if overall >= 50:
        return "C"
    if overall >= 35:
        return "D"
    return "F"


def _summary(overall: int) -> str:
    if overall >= 85:
        return "Exceptional brand potential, short, memorable and clean"
    if overall >= 70:
        return "Strong brandable domain with minor areas to improve"
    if overall >= 55:
        return "Decent brand potential but has notable weaknesses"
    if overall >= 40:
        return "Below average for branding, consider alternatives"
    return "Poor brand potential, significant issues across multiple dimensions"


def rhythm_score(name: str) -> int:
    """Reward names that alternate vowels and consonants."""
    if len(name) < 2:
        return 40
    transitions = sum(1 for i in range(1, len(name)) if (name[i - 1] in VOWELS) != (name[i] in VOWELS))
    ratio = transitions / (len(name) - 1)
    if 0.5 <= ratio <= 0.85:
        return 100
    if 0.35 <= ratio <= 0.95:
        return 70
    return 40


def visual_appeal_score(label: str) -> int:
    """Score how clean a label looks on screen.

    Args:
        label: Name label before punctuation is stripped
    """
    score = 80
    if TRIPLE_REPEAT.search(label):
        score -= 25
    if re.search(r"\d", label) and re.search(r"[a-z]", label):
        score -= 20
    if "-" in label:
        score -= 30
    if _ALPHA_ONLY.match(label):
        score += 10
    if 4 <= len(label) <= 10:
        score += 10
    return int(clamp(score, 0, 100))


def memorability_score(name: str, word_count: int) -> int:
    """Base memorability from length, word count and a catchy ending."""
    score = 60
    n = len(name)
    if n <= 3:
        score += 35
    elif n <= 5:
        score += 25
    elif n <= 8:
        score += 15
    elif n <= 12:
        score += 5
    else:
        score -= 15

    if word_count == 1:
        score += 15
    elif word_count == 2:
        score += 5
    else:
        score -= 10

    if _CATCHY_ENDING.search(name):
        score += 10
    return int(clamp(score, 0, 100))


def _length_dimension(name: str) -> tuple[int, str]:
    n = len(name)
    if n <= 2:
        return 100, f"{n} chars, ultra-premium short"
    if n <= 3:
        return 98, f"{n} chars, ultra-short premium"
    if n <= 5:
        return 90, f"{n} chars, short & punchy"
    if n <= 8:
        return 75, f"{n} chars, ideal brandable length"
    if n <= 12:
        return 50, f"{n} chars, workable but long"
    return 25, f"{n} chars, too long for strong brand"


class _NameProfile:
    """Word-level facts about a cleaned name, computed once per score."""

    def __init__(self, name: str, has_hyphen: bool):
        self.name = name
        self.has_hyphen = has_hyphen
        self.coverage = dictionary_coverage(name)
        self.words = meaningful_words(split_into_words(name))
        self.word_count = count_words(name)
        self.is_premium_short = len(name) <= 3 and (is_known_word(name) or name in PREMIUM_SHORT)
        self.is_single_real_word = self.coverage >= 0.95 and 3 <= len(name) <= 10
        self.both_dictionary = len(self.words) == 2 and all(
            w in DICTIONARY_WORDS or w in COMMON_WORDS for w in self.words
        )
        self.has_premium_keyword = any(w in PREMIUM_KEYWORDS for w in self.words)
        self.both_short = len(self.words) == 2 and all(len(w) <= 6 for w in self.words)


def _word_structure(profile: _NameProfile, pronounce_score: int) -> tuple[int, str]:
    p = profile
    clean = not p.has_hyphen
    pronounceable = pronounce_score >= 60

    if p.is_premium_short:
        return 98, "Ultra-short premium, universally recognizable"
    if p.is_single_real_word and clean:
        return 95, "Real dictionary word, strongest brand foundation"
    if p.both_dictionary and p.has_premium_keyword and clean:
        return 95, "Dictionary + premium keyword compound, top-tier brandable"
    if p.both_dictionary and clean and p.both_short:
        return 90, "Two short dictionary words, highly brandable compound"
    if p.both_dictionary and clean:
        return 85, "Two dictionary words, strong compound brand"
    if p.has_premium_keyword and p.coverage >= 0.6 and clean:
        return 78, "Contains premium keyword, solid brand signal"
    if p.coverage >= 0.9 and len(p.words) == 2 and clean:
        return 72, "Two recognizable words, decent brand compound"
    if p.coverage >= 0.9 and clean:
        return 70, "Mostly recognizable words"
    if p.coverage >= 0.6:
        return 62, "Partially recognizable words"
    if pronounceable and len(p.name) <= 8:
        return 55, "Coined but pronounceable, inventive brand name"
    if pronounceable:
        return 40, "Pronounceable coined word, but a bit long"
    if p.coverage >= 0.3:
        return 20, f"Only {round_half_up(p.coverage * 100)}% recognizable, mostly random"
    return 5, "Random characters, not a word or brand name"


def _memorability(profile: _NameProfile) -> int:
    p = profile
    score = memorability_score(p.name, p.word_count)
    if p.is_premium_short:
        score = max(score, 95)
    elif p.is_single_real_word and not p.has_hyphen:
        score = max(score, 85)
    elif p.both_dictionary and not p.has_hyphen:
        score = max(score, 75)

    if not p.is_premium_short:
        if p.coverage < 0.3:
            score = max(0, score - GIBBERISH_MEMORABILITY_PENALTY)
        elif p.coverage < 0.6:
            score = max(0, score - PARTIAL_MEMORABILITY_PENALTY)
    if p.has_hyphen:
        score = max(0, score - HYPHEN_MEMORABILITY_PENALTY)
    return score


def _memorability_detail(score: int) -> str:
    if score >= 80:
        return "Highly memorable, sticks in your head"
    if score >= 60:
        return "Reasonably memorable"
    if score >= 40:
        return "Somewhat forgettable"
    return "Hard to remember"


def _visual_detail(score: int) -> str:
    if score >= 80:
        return "Clean look & natural rhythm"
    if score >= 60:
        return "Decent visual balance"
    if score >= 40:
        return "Some visual awkwardness"
    return "Visually cluttered or unbalanced"


def score_brandability(domain: str, checker: TrademarkRiskChecker | None = None) -> BrandabilityResult:
    """Score how well a domain works as a brand.

    Dimensions (weight): Pronounceability (0.25), Length, Word Structure,
    Trademark Safety, Memorability and Visual Appeal (0.15 each).
    Incoherent word combinations lower Word Structure and Memorability.
    Offensive content scales the weighted sum by 0.55, 0.35 or 0.15.

    Args:
        domain: Domain with or without TLD
        checker: Trademark checker for the Trademark Safety dimension,
            defaults to the built-in brand list

    Returns:
        BrandabilityResult, overall 0 with no dimensions for an empty name
    """
    parsed = parse_domain(domain)
    name = parsed.letters
    if not name:
        return BrandabilityResult(
            overall=0,
            grade="F",
            dimensions=[],
            trademark_risk="none",
            summary="No valid characters found",
            domain_name=domain,
        )

    profile = _NameProfile(name, parsed.has_hyphen)
    coherence: Coherence = semantic_coherence(profile.words, name)
    incoherent = not coherence.is_coherent and not profile.is_premium_short

    pronounce = score_pronounceability(domain)
    pronounce_score = max(pronounce.score, 85) if profile.is_premium_short else pronounce.score
    first_detail = pronounce.factors[0].detail if pronounce.factors else ""

    length_score, length_detail = _length_dimension(name)

    word_score, word_detail = _word_structure(profile, pronounce_score)
    if profile.has_hyphen:
        word_score = max(0, word_score - HYPHEN_STRUCTURE_PENALTY)
        word_detail += " (hyphenated, weaker brand signal)"
    if incoherent:
        word_score = round_half_up(word_score * coherence.multiplier)
        word_detail = coherence.detail or word_detail

    trademark = checker.check(domain) if checker else check_trademark_risk(domain)
    tm_score, tm_detail = TRADEMARK_SAFETY[trademark.risk_level]

    mem_score = _memorability(profile)
    mem_detail = _memorability_detail(mem_score)
    if incoherent:
        mem_score = round_half_up(mem_score * max(coherence.multiplier, 0.5))
        mem_detail = "Incoherent word combination, hard to remember"

    visual_score = round_half_up((visual_appeal_score(parsed.label) + rhythm_score(name)) / 2)
    if profile.is_premium_short:
        visual_score = max(visual_score, 85)

    dimensions = [
        BrandabilityDimension("Pronounceability", pronounce_score, WEIGHTS["Pronounceability"],
                              f"{pronounce.grade}, {first_detail}", "mic"),
        BrandabilityDimension("Length", length_score, WEIGHTS["Length"], length_detail, "ruler"),
        BrandabilityDimension("Word Structure", word_score, WEIGHTS["Word Structure"], word_detail, "book"),
        BrandabilityDimension("Trademark Safety", tm_score, WEIGHTS["Trademark Safety"], tm_detail, "shield"),
        BrandabilityDimension("Memorability", mem_score, WEIGHTS["Memorability"], mem_detail, "brain"),
        BrandabilityDimension("Visual Appeal", visual_score, WEIGHTS["Visual Appeal"],
                              _visual_detail(visual_score), "eye"),
    ]

    offensive_multiplier, offensive_note = OFFENSIVE_PENALTIES[offensive_severity(name)]
    weighted = sum(d.score * d.weight for d in dimensions)
    overall = int(clamp(round_half_up(weighted * offensive_multiplier), 0, 100))

    summary = _summary(overall) + offensive_note
    if incoherent:
        summary += f" {coherence.detail}."

    return BrandabilityResult(
        overall=overall,
        grade=brand_grade(overall),
        dimensions=dimensions,
        trademark_risk=trademark.risk_level,
        summary=summary,
        domain_name=domain,
    )
