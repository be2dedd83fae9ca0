"""Trademark risk module for domain names.

Usage:
    from domain_scoring.trademark import check_trademark_risk

    result = check_trademark_risk("g00gle.com")
    print(f"Risk: {result.risk_level}")  # none, low, medium or high
"""

from domain_scoring.trademark.checker import (
    TrademarkRiskChecker,
    check_trademark_risk,
    create_checker_from_settings,
)
from domain_scoring.trademark.models import (
    MatchType,
    RiskLevel,
    TrademarkMatch,
    TrademarkResult,
)
from domain_scoring.trademark.similarity import (
    is_typo_variant,
    levenshtein_distance,
    normalize_leet,
)

__all__ = [
    # Checker
    "TrademarkRiskChecker",
    "check_trademark_risk",
    "create_checker_from_settings",
    # Models
    "MatchType",
    "RiskLevel",
    "TrademarkMatch",
    "TrademarkResult",
    # Similarity
    "is_typo_variant",
    "levenshtein_distance",
    "normalize_leet",
]
