"""Data models for domain valuation."""

from dataclasses import asdict, dataclass
from typing import Any


def format_band(value_min: int, value_max: int) -> str:
    """Format a dollar range such as ``$2,500 – $7,500``."""
    return f"${value_min:,} – ${value_max:,}"


@dataclass(frozen=True)
class ValueTier:
    """A dollar range assigned to normalized scores at or above ``floor``."""

    floor: int
    value_min: int
    value_max: int


@dataclass
class QuickValuationResult:
    """Heuristic valuation of a domain.

    Attributes:
        band: Display range, ``$X – $Y``
        score: Normalized valuation score (0-100)
        value_min: Lower bound in dollars
        value_max: Upper bound in dollars, at most three times value_min
    """

    band: str
    score: int
    value_min: int
    value_max: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)


@dataclass(frozen=True)
class ComparableSale:
    """A recorded aftermarket sale used to anchor valuations.

    Attributes:
        domain_name: Sold domain, e.g. ``cloudbank.com``
        sale_price: Price in dollars
        tld: TLD, taken from the domain when missing
        sale_date: ISO-8601 sale date, if known
        venue: Sale venue, ``end-user`` sales weigh more
    """

    domain_name: str
    sale_price: float
    tld: str | None = None
    sale_date: str | None = None
    venue: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ComparableSale":
        """Create ComparableSale from a record.

        Raises:
            ValueError: If the record is not a mapping, lacks domain_name
                or sale_price, or its price is not a number
        """
        if not isinstance(data, dict):
            raise ValueError(f"Sale record must be a mapping, got {type(data).__name__}")
        if "domain_name" not in data or "sale_price" not in data:
            raise ValueError("Sale record needs domain_name and sale_price")
        try:
            sale_price = float(data["sale_price"])
        except (TypeError, ValueError) as e:
            raise ValueError(f"Sale of {data['domain_name']!r} has non-numeric price {data['sale_price']!r}") from e
        return cls(
            domain_name=str(data["domain_name"]),
            sale_price=sale_price,
            tld=data.get("tld"),
            sale_date=str(data["sale_date"]) if data.get("sale_date") else None,
            venue=data.get("venue"),
        )


@dataclass
class AnchoredValuation(QuickValuationResult):
    """Valuation adjusted toward comparable sales.

    Attributes:
        comp_anchored: True when enough relevant sales were found
        comp_median: Relevance-weighted median sale price
        comp_count: Number of sales used
        anchor_adjustment: Multiplier applied to the base band
    """

    comp_anchored: bool = False
    comp_median: int | None = None
    comp_count: int = 0
    anchor_adjustment: float = 1.0
