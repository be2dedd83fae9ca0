"""Industry niche table used by niche detection and trend scoring."""

from dataclasses import dataclass
from typing import Literal

NicheHeat = Literal["hot", "warm", "stable", "cooling"]

# Keyword-demand points contributed by a niche's market heat
NICHE_HEAT_POINTS: dict[str, int] = {
    "hot": 20,
    "warm": 12,
    "stable": 6,
    "cooling": 0,
}


@dataclass(frozen=True)
class Niche:
    """A market niche with its aftermarket multiplier.

    Attributes:
        label: Display label
        multiplier: Valuation multiplier for domains in this niche
        heat: Current market heat tier
        keywords: Words that signal membership in the niche
    """

    label: str
    multiplier: float
    heat: NicheHeat
    keywords: frozenset[str]


# Iteration order matters: ties in niche detection go to the earlier entry
NICHE_CATEGORIES: dict[str, Niche] = {
    "ai_tech": Niche(
        label="AI / Tech",
        multiplier=1.55,
        heat="hot",
        keywords=frozenset({
            "ai", "gpt", "neural", "machine", "deep", "learn", "robot", "auto", "smart",
            "quantum", "intel", "agent", "agentic", "synthetic", "cognitive", "algorithm",
            "compute", "llm", "model", "vision", "prompt", "copilot", "chatbot", "genai",
        }),
    ),
    "fintech": Niche(
        label="Finance / Fintech",
        multiplier=1.40,
        heat="hot",
        keywords=frozenset({
            "pay", "bank", "cash", "loan", "credit", "finance", "trade", "invest", "wallet",
            "fintech", "money", "fund", "wealth", "capital", "equity", "profit", "defi",
            "token", "ledger", "audit", "fiscal", "revenue", "treasury", "dividend",
            "stock", "bond", "forex", "payment", "banking", "lending",
        }),
    ),
    "health": Niche(
        label="Health / Wellness",
        multiplier=1.35,
        heat="warm",
        keywords=frozenset({
            "health", "med", "fit", "care", "dental", "clinic", "therapy", "mental",
            "wellness", "organic", "nutrition", "vitamin", "supplement", "telehealth",
            "pharma", "patient", "doctor", "nurse", "hospital", "diagnosis", "symptom",
            "treatment", "recovery", "rehab", "mindful", "yoga", "meditate",
        }),
    ),
    "biotech": Niche(
        label="Biotech / Life Science",
        multiplier=1.45,
        heat="hot",
        keywords=frozenset({
            "bio", "biotech", "gene", "genome", "dna", "rna", "protein", "cell", "stem",
            "enzyme", "peptide", "antibody", "vaccine", "clinical", "trial", "molecular",
            "pathology", "oncology", "neuro", "immuno", "therapeutic", "diagnostic", "lab",
            "research", "science", "specimen",
        }),
    ),
    "ecommerce": Niche(
        label="E-Commerce",
        multiplier=1.30,
        heat="warm",
        keywords=frozenset({
            "shop", "store", "buy", "sell", "deal", "sale", "market", "retail", "commerce",
            "cart", "order", "wholesale", "merchant", "checkout", "fulfillment",
            "inventory", "dropship", "marketplace", "vendor", "product", "catalog",
        }),
    ),
    "saas": Niche(
        label="SaaS / Cloud",
        multiplier=1.35,
        heat="warm",
        keywords=frozenset({
            "cloud", "tech", "code", "data", "app", "web", "server", "host", "stack",
            "saas", "api", "dev", "cyber", "digital", "platform", "software", "system",
            "deploy", "devops", "infra", "pipeline", "microservice", "container",
            "kubernetes", "terraform", "backend", "frontend", "fullstack",
        }),
    ),
    "real_estate": Niche(
        label="Real Estate",
        multiplier=1.30,
        heat="stable",
        keywords=frozenset({
            "home", "homes", "house", "land", "estate", "rent", "property", "build", "room",
            "space", "real", "mortgage", "apartment", "condo", "lease", "tenant",
            "landlord", "realty", "housing", "dwelling", "townhouse", "penthouse",
            "listing", "broker", "appraisal",
        }),
    ),
    "energy": Niche(
        label="Energy / Green",
        multiplier=1.25,
        heat="warm",
        keywords=frozenset({
            "solar", "green", "energy", "power", "electric", "carbon", "climate", "eco",
            "renewable", "hydrogen", "wind", "battery", "grid", "volt", "watt", "charge",
            "clean", "sustain", "emission", "thermal", "biofuel", "geothermal",
        }),
    ),
    "travel": Niche(
        label="Travel / Lifestyle",
        multiplier=1.20,
        heat="stable",
        keywords=frozenset({
            "travel", "hotel", "flight", "trip", "tour", "cruise", "food", "chef", "wine",
            "luxury", "life", "vacation", "resort", "booking", "passport", "destination",
            "adventure", "hostel", "airline", "itinerary", "getaway", "explorer",
        }),
    ),
    "security": Niche(
        label="Cybersecurity",
        multiplier=1.35,
        heat="hot",
        keywords=frozenset({
            "secure", "guard", "shield", "vault", "safe", "protect", "defense", "lock",
            "cyber", "firewall", "encryption", "threat", "breach", "phishing", "malware",
            "antivirus", "sentinel", "compliance", "identity", "access", "zero", "trust",
            "siem", "pentest",
        }),
    ),
    "gaming": Niche(
        label="Gaming / Entertainment",
        multiplier=1.25,
        heat="stable",
        keywords=frozenset({
            "game", "play", "stream", "video", "music", "sport", "bet", "club", "esport",
            "casino", "arcade", "quest", "level", "guild", "arena", "twitch", "gamer",
            "console", "pixel", "loot", "pvp", "mmo", "rpg",
        }),
    ),
    "jobs": Niche(
        label="Jobs / HR",
        multiplier=1.20,
        heat="stable",
        keywords=frozenset({
            "jobs", "hire", "work", "career", "talent", "recruit", "staff", "team",
            "employer", "resume", "payroll", "workforce", "remote", "freelance", "gig",
            "interview", "onboard", "applicant", "headhunt",
        }),
    ),
    "education": Niche(
        label="Education",
        multiplier=1.15,
        heat="cooling",
        keywords=frozenset({
            "school", "course", "tutor", "academy", "learn", "study", "university", "teach",
            "training", "education", "campus", "student", "degree", "diploma", "lecture",
            "syllabus", "homework", "exam", "scholarship", "mentor", "bootcamp", "mooc",
        }),
    ),
    "legal": Niche(
        label="Legal",
        multiplier=1.30,
        heat="stable",
        keywords=frozenset({
            "legal", "law", "lawyer", "claim", "attorney", "court", "litigation",
            "contract", "counsel", "judge", "verdict", "arbitration", "compliance",
            "statute", "patent", "trademark", "copyright", "paralegal", "deposition",
            "lawsuit",
        }),
    ),
    "insurance": Niche(
        label="Insurance",
        multiplier=1.35,
        heat="warm",
        keywords=frozenset({
            "insure", "insurance", "policy", "premium", "coverage", "underwrite", "actuary",
            "claim", "annuity", "liability", "indemnity", "broker", "reinsure",
            "deductible", "beneficiary", "casualty", "risk",
        }),
    ),
    "automotive": Niche(
        label="Automotive",
        multiplier=1.20,
        heat="stable",
        keywords=frozenset({
            "car", "auto", "vehicle", "motor", "drive", "electric", "ev", "truck", "dealer",
            "fleet", "hybrid", "sedan", "suv", "garage", "mechanic", "tire", "engine",
            "fuel", "racing", "tesla", "charging",
        }),
    ),
    "crypto": Niche(
        label="Crypto / Web3",
        multiplier=1.15,
        heat="cooling",
        keywords=frozenset({
            "crypto", "blockchain", "token", "defi", "nft", "web3", "dao", "chain", "coin",
            "mining", "staking", "swap", "dex", "ledger", "hash", "node", "validator",
            "wallet", "satoshi", "ethereum", "solana", "layer",
        }),
    ),
    "beauty": Niche(
        label="Beauty / Fashion",
        multiplier=1.25,
        heat="warm",
        keywords=frozenset({
            "beauty", "skin", "hair", "makeup", "cosmetic", "glow", "lash", "nail", "serum",
            "cream", "fashion", "style", "wear", "cloth", "apparel", "boutique", "designer",
            "couture", "trend", "glamour", "skincare", "haircare",
        }),
    ),
    "food": Niche(
        label="Food / Restaurant",
        multiplier=1.20,
        heat="stable",
        keywords=frozenset({
            "food", "eat", "meal", "recipe", "cook", "chef", "kitchen", "restaurant",
            "cafe", "bistro", "bakery", "grill", "pizza", "sushi", "burger", "vegan",
            "organic", "snack", "catering", "delivery", "dine", "menu", "brunch",
        }),
    ),
    "pet": Niche(
        label="Pet / Animal",
        multiplier=1.20,
        heat="warm",
        keywords=frozenset({
            "pet", "dog", "cat", "puppy", "kitten", "vet", "paw", "bark", "fur", "breed",
            "groom", "kennel", "animal", "shelter", "rescue", "leash", "treat", "collar",
            "fetch", "aquarium", "bird", "horse",
        }),
    ),
    "iot": Niche(
        label="IoT / Smart Home",
        multiplier=1.25,
        heat="warm",
        keywords=frozenset({
            "iot", "sensor", "device", "connect", "smart", "home", "mesh", "beacon",
            "wearable", "embedded", "gateway", "monitor", "automate", "thermostat",
            "remote", "wireless", "bluetooth", "zigbee",
        }),
    ),
    "space": Niche(
        label="Space / Aerospace",
        multiplier=1.30,
        heat="warm",
        keywords=frozenset({
            "space", "rocket", "orbit", "satellite", "lunar", "mars", "astro", "cosmos",
            "launch", "payload", "mission", "galaxy", "star", "nova", "aerospace",
            "propulsion", "drone", "altitude",
        }),
    ),
    "vr_ar": Niche(
        label="VR / AR / Metaverse",
        multiplier=1.25,
        heat="warm",
        keywords=frozenset({
            "vr", "ar", "virtual", "augmented", "reality", "metaverse", "immersive",
            "hologram", "avatar", "3d", "render", "simulation", "headset", "spatial",
            "mixed", "xr", "haptic", "portal",
        }),
    ),
    "cannabis": Niche(
        label="Cannabis / CBD",
        multiplier=1.15,
        heat="cooling",
        keywords=frozenset({
            "cannabis", "cbd", "hemp", "thc", "weed", "dispensary", "edible", "tincture",
            "extract", "indica", "sativa", "gummy", "vape", "420", "marijuana", "grower",
            "cultivate",
        }),
    ),
}
