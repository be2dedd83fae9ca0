"""Data models for trademark risk checks."""

from dataclasses import dataclass, field
from typing import Literal

# Ordered from safest to riskiest
RiskLevel = Literal["none", "low", "medium", "high"]
MatchType = Literal["exact", "contains", "variant"]

MATCH_PRIORITY: dict[str, int] = {"exact": 3, "contains": 2, "variant": 1}


@dataclass(frozen=True)
class TrademarkMatch:
    """A known brand found in a domain name.

    Attributes:
        brand: Brand name without spaces
        match_type: exact (name is the brand), contains (brand is a
            substring) or variant (one edit away from the brand)
    """

    brand: str
    match_type: MatchType


@dataclass
class TrademarkResult:
    """Result of a trademark risk check for a domain.

    Attributes:
        domain: The domain that was checked
        risk_level: Overall risk tier
        matches: Matched brands, one entry per brand
        summary: Human-readable explanation
    """

    domain: str
    risk_level: RiskLevel = "none"
    matches: list[TrademarkMatch] = field(default_factory=list)
    summary: str = "No known trademark conflicts detected"

    @property
    def is_clear(self) -> bool:
        """Check if no brand was matched."""
        return self.risk_level == "none"

    def brands(self, match_type: MatchType | None = None) -> list[str]:
        """Matched brand names, optionally filtered by match type."""
        return [m.brand for m in self.matches if match_type is None or m.match_type == match_type]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "domain": self.domain,
            "risk_level": self.risk_level,
            "summary": self.summary,
            "matches": [{"brand": m.brand, "match_type": m.match_type} for m in self.matches],
        }
