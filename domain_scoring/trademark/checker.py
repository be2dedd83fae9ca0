"""Trademark risk checker for domain names.

Matches a domain against a fixed list of well-known brands. There is no
external lookup: the result only depends on the domain and the brand list.
"""

from collections.abc import Iterable, Mapping

from domain_scoring.domain import parse_domain
from domain_scoring.lexicon import BRAND_IN_WORD, KNOWN_BRANDS
from domain_scoring.trademark.models import (
    MATCH_PRIORITY,
    RiskLevel,
    TrademarkMatch,
    TrademarkResult,
)
from domain_scoring.trademark.similarity import is_typo_variant, normalize_leet

# Brands shorter than this are ignored entirely
MIN_BRAND_LENGTH = 3
# Brands shorter than this only match exactly
MIN_CONTAINED_BRAND_LENGTH = 4


class TrademarkRiskChecker:
    """Checker that scores a domain's collision risk with known brands.

    Usage:
        checker = TrademarkRiskChecker()
        result = checker.check("googlepay.com")
        print(result.risk_level)  # medium
    """

    def __init__(
        self,
        brands: Iterable[str] = KNOWN_BRANDS,
        allow_list: Mapping[str, Iterable[str]] = BRAND_IN_WORD,
    ):
        """Initialize checker.

        Args:
            brands: Brand names, spaces are removed
            allow_list: Brand -> real words that legitimately contain it
        """
        unique = dict.fromkeys(b.lower().replace(" ", "") for b in brands)
        # Longest brands first so summaries list the most specific match first
        self._brands = sorted(unique, key=len, reverse=True)
        self._allow_list = {brand: tuple(words) for brand, words in allow_list.items()}

    @property
    def brand_count(self) -> int:
        return len(self._brands)

    def _is_embedded_in_word(self, brand: str, raw: str, normalized: str) -> bool:
        return any(word in raw or word in normalized for word in self._allow_list.get(brand, ()))

    def _match(self, brand: str, raw: str, normalized: str) -> TrademarkMatch | None:
        if raw == brand or normalized == brand:
            return TrademarkMatch(brand, "exact")

        if len(brand) >= MIN_CONTAINED_BRAND_LENGTH and (brand in raw or brand in normalized):
            if self._is_embedded_in_word(brand, raw, normalized):
                return None
            return TrademarkMatch(brand, "contains")

        if is_typo_variant(normalized, brand):
            return TrademarkMatch(brand, "variant")
        return None

    def check(self, domain: str) -> TrademarkResult:
        """Check a domain for trademark conflicts.

        Exact matches are high risk. A contained brand is medium risk, or
        high when more than one brand is matched. A one-edit typo of a
        brand is low risk.

        Args:
            domain: Domain with or without TLD

        Returns:
            TrademarkResult with risk tier, matches and summary
        """
        raw = parse_domain(domain).label.replace("-", "").replace("_", "")
        normalized = normalize_leet(raw)

        best: dict[str, TrademarkMatch] = {}
        for brand in self._brands:
            if len(brand) < MIN_BRAND_LENGTH:
                continue
            match = self._match(brand, raw, normalized)
            if match is None:
                continue
            existing = best.get(brand)
            if existing is None or MATCH_PRIORITY[match.match_type] > MATCH_PRIORITY[existing.match_type]:
                best[brand] = match

        matches = list(best.values())
        risk_level, summary = _assess(matches)
        return TrademarkResult(domain=domain, risk_level=risk_level, matches=matches, summary=summary)

    def check_batch(self, domains: Iterable[str]) -> list[TrademarkResult]:
        """Check several domains."""
        return [self.check(domain) for domain in domains]


def _assess(matches: list[TrademarkMatch]) -> tuple[RiskLevel, str]:
    exact = [m.brand for m in matches if m.match_type == "exact"]
    contains = [m.brand for m in matches if m.match_type == "contains"]
    variants = [m.brand for m in matches if m.match_type == "variant"]

    if exact:
        return "high", f'Exact match with "{exact[0]}", likely UDRP/trademark claim'
    if contains:
        level: RiskLevel = "high" if len(matches) > 1 else "medium"
        return level, f"Contains trademarked term: {', '.join(contains)}"
    if variants:
        return "low", f'Resembles "{", ".join(variants)}", could be flagged as typosquatting'
    return "none", "No known trademark conflicts detected"


_default_checker = TrademarkRiskChecker()


def check_trademark_risk(domain: str) -> TrademarkResult:
    """Check a domain against the built-in brand list."""
    return _default_checker.check(domain)


def create_checker_from_settings(extra_brands: Iterable[str] = ()) -> TrademarkRiskChecker:
    """Factory function to create a checker with additional brands.

    Args:
        extra_brands: Brands to watch on top of the built-in list

    Returns:
        The shared default checker when there are no extra brands,
        otherwise a new TrademarkRiskChecker
    """
    extra = tuple(extra_brands)
    if not extra:
        return _default_checker
    return TrademarkRiskChecker(brands=(*KNOWN_BRANDS, *extra))
