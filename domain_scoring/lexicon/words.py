"""Word sets shared by every scorer.

All sets are frozen at import time and never mutated afterwards, so the
scorers can be called from any number of threads without locking.
"""

from pathlib import Path

DATA_DIR = Path(__file__).parent / "data"


def _load_word_file(filename: str) -> frozenset[str]:
    """Load a newline-separated word list from the bundled data directory."""
    text = (DATA_DIR / filename).read_text(encoding="utf-8")
    return frozenset(
        line.strip().lower()
        for line in text.splitlines()
        if line.strip() and not line.startswith("#")
    )


# =============================================================================
# DICTIONARY - Real English and brandable Latin words (~4,300)
# =============================================================================

DICTIONARY_WORDS: frozenset[str] = _load_word_file("dictionary_words.txt")

# =============================================================================
# PREMIUM / PENALTY - Aftermarket keyword signals
# =============================================================================

# Keywords that recur in high-value aftermarket sales
PREMIUM_KEYWORDS: frozenset[str] = frozenset({
    "ai", "crypto", "cloud", "tech", "pay", "bet", "buy", "sell", "trade", "bank", "cash",
    "loan", "health", "fit", "auto", "car", "home", "solar", "green", "data", "code", "web",
    "app", "game", "shop", "store", "deal", "sale", "food", "travel", "hotel", "dating",
    "jobs", "news", "legal", "quantum", "meta", "cyber", "robot", "drone", "space", "block",
    "chain", "fintech", "saas", "defi", "token", "intel", "logic", "matrix", "pixel",
    "forge", "core", "hub", "lab", "stack", "flow", "grid", "sync", "bolt", "shift",
    "spark", "edge", "apex", "nova", "group", "solutions", "services", "homes", "global",
    "company", "business", "pro", "lawyer", "life", "real", "best", "my", "go", "new",
    "club", "bio", "gene", "med", "care", "clinic", "skin", "beauty", "pet", "vet",
    "insure", "insurance", "iot", "sensor", "vr", "ar", "virtual", "metaverse", "rocket",
    "launch", "cannabis", "cbd", "hemp", "glow", "fashion", "style", "wear", "recipe",
    "chef", "coach", "mentor", "tutor", "course", "academy", "learn", "talent", "hire",
    "recruit", "secure", "guard", "shield", "vault", "protect", "defense", "threat",
    "breach", "ev", "fleet", "charge", "battery", "power", "energy", "clean", "sustain",
    "fund", "wealth", "capital", "equity", "invest", "profit", "revenue", "platform", "api",
    "deploy", "pipeline", "infra", "dev", "ops", "stream", "content", "media", "podcast",
    "creator", "influencer",
})

# Risky or blacklisted content, zero demand
PENALTY_KEYWORDS: frozenset[str] = frozenset({
    "viagra", "cialis", "porn", "sex", "xxx", "casino", "gambling", "weed", "marijuana",
    "pharma", "drug", "pill", "medication", "prescription", "erectile", "penis", "nude",
    "naked", "adult", "escort", "bitcoin", "ethereum", "nft", "forex", "mlm", "scam",
    "hack", "crack", "pirate", "torrent", "replica", "fake", "counterfeit",
})

# =============================================================================
# COMMON WORDS - Short everyday words and function words used in names
# =============================================================================

COMMON_WORDS: frozenset[str] = frozenset({
    "go", "my", "up", "do", "no", "so", "we", "be", "me", "he", "it", "in", "on", "at",
    "to", "or", "an", "by", "if", "of", "the", "and", "for", "get", "buy", "top", "hot",
    "big", "new", "now", "all", "one", "two", "web", "app", "hub", "pro", "fix", "max",
    "pay", "bet", "bit", "fit", "hit", "kit", "let", "net", "pet", "set", "yet", "dot",
    "got", "lot", "not", "pot", "cut", "gut", "hut", "nut", "put", "run", "fun", "sun",
    "car", "bar", "far", "air", "day", "way", "say", "may", "try", "fly", "sky", "dry",
    "eye", "use", "see", "old", "own", "out", "off", "job", "box", "dog", "log", "fog",
    "red", "bed", "cup", "map", "hat", "ice", "age", "add", "arm", "art", "bag", "ban",
    "bow", "bus", "can", "cap", "cow", "dam", "dip", "due", "dug", "ear", "eat", "egg",
    "end", "era", "fan", "fat", "fee", "few", "fig", "fin", "fur", "gap", "gas", "gem",
    "gin", "gum", "gun", "gym", "hen", "hip", "hog", "hop", "ink", "inn", "ion", "ivy",
    "jam", "jar", "jaw", "jet", "jog", "joy", "jug", "key", "kin", "lab", "lap", "law",
    "lay", "leg", "lid", "lip", "lit", "low", "mad", "man", "mat", "men", "mid", "mix",
    "mob", "mom", "mop", "mud", "mug", "nap", "nor", "oak", "oar", "oat", "odd", "oil",
    "opt", "orb", "ore", "oven", "owl", "pad", "pan", "paw", "pea", "pen", "pie", "pig",
    "pin", "pit", "pod", "pop", "pub", "pug", "ram", "ran", "rap", "rat", "raw", "ray",
    "rib", "rid", "rim", "rip", "rob", "rod", "rot", "row", "rug", "rum", "rut", "sad",
    "sap", "sat", "saw", "sea", "sew", "shy", "sin", "sip", "sir", "sit", "six", "ski",
    "sly", "sob", "sod", "son", "sow", "spa", "spy", "sum", "tab", "tag", "tan", "tap",
    "tar", "tea", "ten", "tie", "tin", "tip", "toe", "ton", "tow", "toy", "tub", "tug",
    "van", "vat", "vet", "vow", "wag", "war", "wax", "wig", "win", "wit", "wok", "won",
    "woo", "yam", "yap", "yew", "zip", "zoo", "deal", "find", "save", "best", "free",
    "fast", "easy", "home", "shop", "club", "life", "love", "live", "work", "play", "game",
    "food", "tech", "auto", "book", "cash", "code", "cool", "core", "data", "edge", "fire",
    "flex", "flow", "gold", "grid", "grow", "hack", "idea", "info", "jump", "king", "labs",
    "link", "loop", "mind", "mode", "next", "open", "pack", "path", "peak", "plan", "plus",
    "push", "rank", "real", "ring", "rise", "road", "rock", "rush", "seed", "snap", "solo",
    "spot", "star", "sure", "swap", "sync", "team", "time", "tool", "true", "turn", "unit",
    "vast", "view", "volt", "wave", "wise", "word", "wrap", "zero", "zone", "buzz", "chat",
    "chip", "city", "coin", "copy", "desk", "disk", "dock", "drop", "edit", "farm", "film",
    "firm", "flag", "fold", "fork", "form", "fuel", "gain", "gate", "gear", "gift", "glow",
    "grab", "grip", "hash", "hawk", "heat", "help", "high", "hint", "hook", "host", "hunt",
    "icon", "item", "join", "just", "keen", "keep", "kick", "kind", "land", "last", "lead",
    "leaf", "lean", "lift", "line", "list", "load", "lock", "long", "loom", "loot", "luck",
    "made", "mail", "main", "make", "mark", "mart", "mass", "mate", "mega", "mesh", "mile",
    "mill", "mine", "mint", "miss", "mood", "moon", "more", "move", "much", "muse", "name",
    "near", "nest", "node", "note", "odds", "orca", "pace", "page", "pair", "palm", "part",
    "pass", "past", "pick", "pine", "pipe", "plug", "poll", "pool", "port", "post", "pure",
    "quiz", "race", "raft", "raid", "rail", "rain", "rare", "rate", "reed", "reef", "reel",
    "rent", "rest", "rich", "ride", "role", "roll", "root", "rope", "rule", "safe", "sage",
    "sail", "sale", "salt", "sand", "scan", "seal", "seek", "self", "sell", "send", "ship",
    "show", "side", "sign", "silk", "site", "size", "skip", "slot", "slow", "snow", "soft",
    "sort", "soul", "spin", "stem", "step", "stop", "suit", "surf", "tail", "take", "talk",
    "tank", "tape", "task", "tell", "tend", "test", "text", "tide", "tier", "tile", "tiny",
    "tone", "tops", "tour", "town", "tree", "trim", "trip", "tube", "tune", "type", "used",
    "vale", "vibe", "vine", "void", "vote", "wage", "wait", "walk", "wall", "want", "ward",
    "warm", "wash", "weak", "wear", "week", "well", "west", "wide", "wild", "will", "wind",
    "wine", "wing", "wire", "wish", "wood", "yard", "cube", "bike", "bone", "bore", "cage",
    "cake", "came", "cape", "care", "case", "cave", "dare", "date", "dice", "dime", "dine",
    "dive", "dome", "done", "dose", "dove", "duke", "dune", "dupe", "face", "fade", "fame",
    "fare", "fate", "faze", "file", "fine", "five", "flee", "fore", "frog", "fume", "fuse",
    "gave", "gaze", "gone", "gore", "hare", "hate", "have", "haze", "here", "hide", "hike",
    "hire", "hole", "hope", "hose", "huge", "jade", "jake", "joke", "kite", "knee", "lace",
    "lake", "lame", "lane", "late", "lime", "lire", "lobe", "lone", "lore", "lose", "lure",
    "lute", "mace", "mare", "maze", "mice", "mike", "mire", "mole", "mope", "mule", "mute",
    "nice", "nine", "none", "nose", "ooze", "pale", "pane", "pare", "pave", "pile", "poke",
    "pole", "pore", "pose", "rage", "rake", "rave", "raze", "rice", "rife", "rime", "ripe",
    "robe", "rode", "rose", "rude", "sake", "same", "sane", "shoe", "some", "sore", "tame",
    "tire", "tore", "tote", "vice", "wade", "wake", "wane", "ware", "wile", "wipe", "woke",
    "wove", "yoke", "boost", "brain", "brand", "build", "buyer", "chain", "cheap", "clean",
    "click", "close", "cloud", "coach", "craft", "cream", "crowd", "cycle", "daily",
    "delta", "drive", "eagle", "earth", "elite", "email", "entry", "equal", "event",
    "extra", "field", "first", "flash", "fleet", "float", "focus", "force", "forge",
    "forum", "found", "fresh", "front", "funds", "giant", "grace", "grade", "grand",
    "grant", "grape", "graph", "green", "group", "guard", "guide", "happy", "haven",
    "heart", "house", "human", "hyper", "index", "inner", "input", "intel", "judge",
    "juice", "laser", "layer", "level", "light", "local", "logic", "maker", "maple",
    "match", "media", "merge", "micro", "model", "money", "motor", "mount", "music",
    "noble", "north", "noted", "novel", "ocean", "offer", "order", "outer", "owner",
    "panel", "parse", "party", "patch", "penny", "phase", "phone", "piece", "pilot",
    "pixel", "place", "plant", "plaza", "point", "power", "press", "price", "prime",
    "print", "prize", "proof", "pulse", "punch", "quest", "queue", "quick", "quote",
    "radar", "radio", "raise", "range", "rapid", "reach", "ready", "realm", "reign",
    "relay", "renew", "rider", "right", "river", "robin", "royal", "rural", "sauce",
    "scale", "scene", "scope", "score", "scout", "sense", "serve", "seven", "shape",
    "share", "shift", "shine", "sight", "sigma", "since", "sixty", "skill", "slate",
    "sleep", "slide", "small", "smart", "smile", "snack", "solar", "solid", "solve",
    "south", "space", "spark", "speak", "speed", "spice", "spike", "spine", "split",
    "stack", "stage", "stake", "stand", "start", "state", "steam", "steel", "steep",
    "stock", "stone", "store", "storm", "story", "stove", "strap", "strip", "study",
    "style", "sugar", "super", "surge", "sweet", "swift", "swipe", "table", "taste",
    "theme", "think", "tiger", "titan", "token", "total", "touch", "tower", "trace",
    "track", "trade", "trail", "train", "trait", "trend", "trial", "tribe", "trick",
    "trust", "turbo", "twist", "ultra", "union", "unity", "upper", "urban", "usage",
    "valid", "value", "vault", "venue", "vigor", "viral", "voice", "watch", "water",
    "whale", "wheel", "white", "world", "worth", "yield", "action", "anchor", "beyond",
    "bridge", "bright", "bundle", "canvas", "center", "choice", "circle", "clinic",
    "crypto", "custom", "decode", "delete", "design", "direct", "domain", "double",
    "enable", "energy", "engine", "expert", "falcon", "filter", "finder", "flight",
    "global", "golden", "growth", "health", "impact", "import", "inside", "invest",
    "launch", "leader", "legend", "market", "master", "matrix", "method", "mobile",
    "modern", "motion", "native", "nature", "online", "option", "output", "palace",
    "partner", "pocket", "portal", "profit", "public", "purple", "ranking", "record",
    "remote", "report", "result", "rocket", "sample", "search", "secure", "select",
    "signal", "silver", "simple", "single", "social", "source", "sphere", "sprint",
    "square", "status", "stream", "street", "string", "strike", "strong", "studio",
    "summit", "supply", "switch", "system", "target", "thread", "ticket", "timber",
    "toggle", "travel", "triple", "turret", "unique", "unlock", "update", "venture",
    "vision", "wonder", "are", "but", "you", "had", "her", "was", "our", "has", "him",
    "his", "how", "its", "who", "did", "she", "too", "as", "is",
})

# Union used by segmentation and coverage
KNOWN_WORDS: frozenset[str] = DICTIONARY_WORDS | PREMIUM_KEYWORDS | COMMON_WORDS

# 2-3 letter names that read as a word even when absent from the dictionaries
SHORT_WORDS: frozenset[str] = frozenset({
    "ai", "io", "go", "no", "do", "up", "we", "be", "he", "me", "my", "ok", "ox", "ax",
})

# Ultra-short names treated as premium brands
PREMIUM_SHORT: frozenset[str] = frozenset({
    "ai", "io", "go", "no", "do", "up", "we", "be", "ok", "ox", "ax",
})


def is_known_word(word: str) -> bool:
    """Check a lowercase token against every word list."""
    return word in KNOWN_WORDS


def is_dictionary_word(name: str) -> bool:
    """Check whether the whole name is a single dictionary word."""
    return name.lower() in DICTIONARY_WORDS
