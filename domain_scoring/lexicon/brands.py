"""Well-known brand names that domain investors should avoid."""

# Multi-word brands are stored without spaces
KNOWN_BRANDS: tuple[str, ...] = (
    "google", "apple", "microsoft", "amazon", "facebook", "meta", "netflix", "spotify",
    "tesla", "nvidia", "intel", "amd", "samsung", "sony", "tiktok", "snapchat", "twitter",
    "instagram", "whatsapp", "linkedin", "pinterest", "reddit", "discord", "uber", "lyft",
    "airbnb", "stripe", "paypal", "venmo", "shopify", "squarespace", "wordpress",
    "salesforce", "oracle", "cisco", "adobe", "autodesk", "dropbox", "slack", "zoom",
    "twitch", "youtube", "github", "gitlab", "docker", "kubernetes", "openai", "anthropic",
    "midjourney", "chatgpt", "copilot", "nike", "adidas", "puma", "reebok", "gucci",
    "prada", "chanel", "louisvuitton", "hermes", "burberry", "versace", "armani",
    "balenciaga", "supreme", "rolex", "cartier", "tiffany", "pandora", "toyota", "honda",
    "ford", "bmw", "mercedes", "audi", "porsche", "ferrari", "lamborghini", "maserati",
    "bentley", "lexus", "volvo", "hyundai", "subaru", "chevrolet", "jeep", "dodge",
    "chrysler", "cadillac", "buick", "mazda", "nissan", "mitsubishi", "kia", "rivian",
    "lucid", "cocacola", "pepsi", "starbucks", "mcdonalds", "burgerking", "wendys",
    "subway", "dominos", "pizzahut", "chipotle", "dunkin", "redbull", "monster", "gatorade",
    "nestle", "kraft", "heinz", "kellogg", "oreo", "doritos", "lays", "visa", "mastercard",
    "amex", "chase", "citibank", "barclays", "hsbc", "goldman", "jpmorgan", "morganstanley",
    "schwab", "fidelity", "vanguard", "robinhood", "coinbase", "binance", "kraken",
    "walmart", "target", "costco", "ikea", "homedepot", "lowes", "macys", "nordstrom",
    "sephora", "ulta", "bestbuy", "gamestop", "ebay", "etsy", "wayfair", "chewy",
    "instacart", "doordash", "grubhub", "disney", "pixar", "marvel", "warner", "hbo",
    "paramount", "universal", "lionsgate", "dreamworks", "nintendo", "playstation", "xbox",
    "roblox", "fortnite", "minecraft", "pokemon", "starwars", "pfizer", "moderna",
    "johnson", "bayer", "merck", "novartis", "roche", "abbvie", "amgen", "gilead", "delta",
    "united", "southwest", "jetblue", "emirates", "qatar", "lufthansa", "britishairways",
    "ryanair", "booking", "expedia", "tripadvisor", "marriott", "hilton", "hyatt",
    "sheraton",
)

# Real words that embed a brand without referring to it
BRAND_IN_WORD: dict[str, tuple[str, ...]] = {
    "intel": ("intelligence", "intelligent", "intellectual", "intelligently"),
    "uber": ("tuber", "exuberant", "exuberance"),
    "chase": ("purchase", "purchased", "purchaser"),
    "ford": ("afford", "affordable", "oxford", "stanford", "bedford", "comfort"),
    "visa": ("advise", "advisor", "advisory", "visual", "ivisable", "revision", "television"),
    "apple": ("pineapple", "grapple", "dapple"),
    "bing": ("binding", "climbing", "plumbing"),
    "amd": ("named", "framed", "gamed"),
    "kia": ("akia", "nokia"),
    "slack": ("slacker",),
    "mars": ("marshals", "marshal", "nightmare"),
    "cox": ("coxswain",),
    "ally": ("rally", "tally", "valley", "literally", "finally", "usually"),
    "bayer": ("player", "prayer", "layer"),
    "shell": ("seashell", "nutshell", "eggshell", "bombshell"),
}

# Digit and symbol substitutions used in typosquatting
LEET_MAP: dict[str, str] = {
    "0": "o", "1": "i", "3": "e", "4": "a", "5": "s", "7": "t", "8": "b", "@": "a",
}
