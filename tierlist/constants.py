# tierlist/constants.py
# Wire keys, storage keys and placeholder values shared by the core services

# localStorage-style key holding the JSON array of custom items
CUSTOM_ITEMS_KEY: str = "customItems"

# Label shown when an item can't be resolved from the registry or the token
UNKNOWN_ITEM_CONTENT: str = "Unknown Item"

# Query parameter carrying the encoded state in share URLs
STATE_QUERY_PARAM: str = "state"

# Image suffixes link-preview crawlers can't render -> suffix served instead
OG_SUFFIX_REWRITES: dict[str, str] = {
    ".webp": ".png",
}

# Tier ids/names of a fresh tier list (all tiers start empty, labels on the left)
DEFAULT_TIER_NAMES: list[tuple[str, str]] = [
    ("S", "S"),
    ("A", "A"),
    ("B", "B"),
    ("C", "C"),
    ("D", "D"),
    ("F", "F"),
]
