from __future__ import annotations

import pytest

from domain_scoring.scoring.niche import compute_trend_score, detect_niche, trend_label


def test_no_words_on_unknown_tld_is_general():
    niche = detect_niche([], "xyz")
    assert niche.niche == "general"
    assert niche.confidence == "Low"
    assert niche.matched_keywords == ()


def test_tld_boost_alone_picks_niche():
    niche = detect_niche([], "ai")
    assert niche.niche == "ai_tech"
    assert niche.confidence == "Medium"


def test_first_niche_wins_a_tie():
    # cloud is saas, bank is fintech; fintech is listed first
    niche = detect_niche(["cloud", "bank"], "com")
    assert niche.niche == "fintech"
    assert niche.matched_keywords == ("bank",)


@pytest.mark.parametrize(
    "score, label",
    [
        (100, "🔥 On Fire"),
        (85, "🔥 On Fire"),
        (84, "📈 Hot"),
        (70, "📈 Hot"),
        (69, "⬆️ Rising"),
        (50, "⬆️ Rising"),
        (49, "➡️ Stable"),
        (30, "➡️ Stable"),
        (29, "⬇️ Cool"),
        (0, "⬇️ Cool"),
    ],
)
def test_trend_label_thresholds(score, label):
    assert trend_label(score) == label


def test_trend_score_of_nothing_is_cool():
    result = compute_trend_score([], "xyz")
    assert result.score == 0
    assert result.label == "⬇️ Cool"
    assert result.niche.niche == "general"


def test_com_adds_a_small_bonus():
    assert compute_trend_score([], "com").score == 8


def test_tld_synergy_without_keywords():
    # Medium confidence from the .ai boost plus the ai_tech synergy
    result = compute_trend_score([], "ai")
    assert result.score == 30
    assert result.label == "➡️ Stable"


def test_two_hot_words_are_rising():
    # heat 1.8 -> 26, two hot words +10, one fintech match +8, .com +8
    result = compute_trend_score(["cloud", "bank"], "com")
    assert result.score == 52
    assert result.label == "⬆️ Rising"


def test_heat_is_capped_at_fifty():
    # ai heat 2.5 -> 50, Medium confidence +15, .ai synergy +15
    assert compute_trend_score(["ai"], "ai").score == 80


def test_score_is_clamped_to_hundred():
    result = compute_trend_score(["ai", "gpt"], "ai")
    assert result.score == 100
    assert result.label == "🔥 On Fire"


def test_niche_override_replaces_detected_niche():
    result = compute_trend_score(["ai"], "ai", niche_override="fintech")
    assert result.niche.niche == "fintech"
    assert result.niche.label == "Finance / Fintech"
    assert result.niche.multiplier == 1.40
    # fintech has no synergy with .ai, so only heat and confidence count
    assert result.score == 65


def test_unknown_override_falls_back_to_general_label():
    result = compute_trend_score([], "xyz", niche_override="underwater_basketry")
    assert result.niche.niche == "underwater_basketry"
    assert result.niche.label == "General"
    assert result.niche.multiplier == 1.0
