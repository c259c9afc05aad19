from typing import Tuple
from .data_models import BinCategory

# Checked in order, first match wins
SERVICE_KEYWORDS = [
    (("household waste", "domestic waste", "general waste", "rubbish"), BinCategory.BLACK),
    (("recycling",), BinCategory.RED),
    (("garden",), BinCategory.GREEN),
]


def classify_service(service: str) -> BinCategory:
    """Maps a free-text service description to a bin category (case-insensitive)."""
    service_lower = (service or "").lower()
    for keywords, category in SERVICE_KEYWORDS:
        if any(keyword in service_lower for keyword in keywords):
            return category
    return BinCategory.UNKNOWN


def get_bin_colour(service: str) -> Tuple[str, str]:
    """Returns the (colour, emoji) pair for a service description."""
    category = classify_service(service)
    return category.colour, category.emoji
