"""Result types returned by the scorers."""

from dataclasses import asdict, dataclass, field
from typing import Any, Literal

Impact = Literal["positive", "negative", "neutral"]
PronounceGrade = Literal["Excellent", "Good", "Fair", "Poor"]
BrandGrade = Literal["A+", "A", "B", "C", "D", "F"]
DemandGrade = Literal["A", "B", "C", "D", "F"]
Confidence = Literal["High", "Medium", "Low"]
DimensionIcon = Literal["mic", "ruler", "book", "shield", "brain", "eye"]


@dataclass(frozen=True)
class ScoreFactor:
    """A single named contribution to a composite score.

    Attributes:
        label: Factor name, stable across releases
        points: Signed contribution to the score
        detail: Human-readable rationale
        impact: Direction of the factor, set only by pronounceability
    """

    label: str
    points: int
    detail: str
    impact: Impact | None = None


@dataclass
class PronounceabilityResult:
    """Pronounceability of a domain name."""

    score: int  # 0-100
    grade: PronounceGrade
    word_count: int
    factors: list[ScoreFactor] = field(default_factory=list)


@dataclass(frozen=True)
class NicheDetection:
    """Best-matching industry niche for a set of words.

    Attributes:
        niche: Niche key, ``general`` when nothing matched
        label: Display label
        multiplier: Valuation multiplier of the niche
        confidence: High, Medium or Low
        matched_keywords: Words that matched the niche keyword set
    """

    niche: str
    label: str
    multiplier: float
    confidence: Confidence
    matched_keywords: tuple[str, ...] = ()


@dataclass(frozen=True)
class TrendScore:
    """Keyword heat and niche alignment, 0-100."""

    score: int
    label: str
    niche: NicheDetection


@dataclass(frozen=True)
class BrandabilityDimension:
    """One weighted dimension of the brandability score."""

    name: str
    score: int  # 0-100
    weight: float
    detail: str
    icon: DimensionIcon


@dataclass
class BrandabilityResult:
    """Composite brandability score.

    ``overall`` is the weighted dimension sum scaled by the offensive
    content multiplier. The dimension weights always sum to 1.0.
    """

    overall: int
    grade: BrandGrade
    dimensions: list[BrandabilityDimension]
    trademark_risk: str
    summary: str
    domain_name: str

    def get_dimension(self, name: str) -> BrandabilityDimension | None:
        """Look up a dimension by name."""
        for dimension in self.dimensions:
            if dimension.name == name:
                return dimension
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)


@dataclass
class KeywordDemandResult:
    """Keyword demand score with its explanatory factors."""

    score: int  # 1-100
    label: str
    grade: DemandGrade
    trending_keywords: list[str]
    niche: NicheDetection
    factors: list[ScoreFactor]
    enriched: bool = False

    def get_factor(self, label: str) -> ScoreFactor | None:
        """Return the first factor with the given label."""
        for factor in self.factors:
            if factor.label == label:
                return factor
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)
