"""Scoring module for evaluating domain names."""

from .brandability import score_brandability
from .keyword_demand import score_keyword_demand
from .models import (
    BrandabilityDimension,
    BrandabilityResult,
    KeywordDemandResult,
    NicheDetection,
    PronounceabilityResult,
    ScoreFactor,
    TrendScore,
)
from .niche import compute_trend_score, detect_niche
from .pronounceability import score_pronounceability
from .segmentation import Segmentation, count_words, segment, split_into_words
from .trend_boost import compute_trend_boost

__all__ = [
    "score_brandability",
    "score_keyword_demand",
    "score_pronounceability",
    "compute_trend_boost",
    "compute_trend_score",
    "detect_niche",
    "split_into_words",
    "count_words",
    "segment",
    "Segmentation",
    "BrandabilityDimension",
    "BrandabilityResult",
    "KeywordDemandResult",
    "NicheDetection",
    "PronounceabilityResult",
    "ScoreFactor",
    "TrendScore",
]
