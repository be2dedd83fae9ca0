from __future__ import annotations

import pytest

from domain_scoring.scoring.phonetics import count_syllables, negative_sound, word_syllables
from domain_scoring.scoring.pronounceability import pronounce_grade, score_pronounceability


def test_real_word_scores_excellent():
    result = score_pronounceability("rocket.com")
    assert result.score >= 80
    assert result.grade == "Excellent"
    assert result.word_count == 1


def test_consonant_soup_scores_poor():
    result = score_pronounceability("xkcdqz.com")
    assert result.score < 40
    assert result.grade == "Poor"


def test_real_word_beats_gibberish():
    assert score_pronounceability("rocket.com").score > score_pronounceability("xkcdqz.com").score


@pytest.mark.parametrize("domain", ["", "123.com", "---.net"])
def test_names_without_letters_score_zero(domain):
    result = score_pronounceability(domain)
    assert result.score == 0
    assert result.grade == "Poor"
    assert result.word_count == 0
    assert [f.label for f in result.factors] == ["Empty"]


def test_factors_carry_impact():
    result = score_pronounceability("rocket.com")
    labels = [f.label for f in result.factors]
    assert labels[:6] == [
        "Length",
        "Word Count",
        "Vowel Balance",
        "Consonant Clusters",
        "Letter Patterns",
        "Syllables",
    ]
    assert all(f.impact in ("positive", "negative", "neutral") for f in result.factors)


def test_vowel_balance_bands():
    rocket = {f.label: f for f in score_pronounceability("rocket.com").factors}
    assert rocket["Vowel Balance"].points == 15
    consonants = {f.label: f for f in score_pronounceability("xkcdqz.com").factors}
    assert consonants["Vowel Balance"].points == -15


def test_long_names_lose_length_points():
    result = score_pronounceability("internationalbusinessmachines.com")
    length = next(f for f in result.factors if f.label == "Length")
    assert length.points == -10


def test_score_stays_in_range():
    for domain in ["a.com", "aaaaaaa.com", "strengths.com", "queueing.io", "z" * 40]:
        assert 0 <= score_pronounceability(domain).score <= 100


def test_pronounce_grade_boundaries():
    assert pronounce_grade(80) == "Excellent"
    assert pronounce_grade(79) == "Good"
    assert pronounce_grade(60) == "Good"
    assert pronounce_grade(40) == "Fair"
    assert pronounce_grade(39) == "Poor"


def test_word_syllables():
    assert word_syllables("nation") == 2
    assert word_syllables("cake") == 1
    assert word_syllables("go") == 1


def test_count_syllables():
    assert count_syllables("rocket") == 2
    assert count_syllables("") == 0


def test_negative_sound():
    delta, reason = negative_sound("grunt")
    assert delta == -5
    assert reason is not None
    assert negative_sound("rocket") == (0, None)


def test_dictionary_word_counts_as_single_word():
    result = score_pronounceability("together.com")
    assert result.word_count == 1
    word_count = next(f for f in result.factors if f.label == "Word Count")
    assert word_count.points == 5
