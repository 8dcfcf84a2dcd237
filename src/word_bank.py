"""Built-in word list used when no XLSX input is given."""

from __future__ import annotations

from models import WordEntry, canonical_value

_DISPLAY_WORDS = [
    "Beyond", "The Horizon", "Jetour", "W Motors", "Traveler",
    "Gaia", "PHEV", "Drive", "The Future", "Nigeria",
    "Launching", "Unveil", "Beast", "Journey", "Luxury",
    "Comfort", "Intelligence", "Sophisticated",
]


def get_word_list() -> list[WordEntry]:
    """Return the default words; ids are the uppercase letters of the label."""
    entries = []
    for display in _DISPLAY_WORDS:
        value = canonical_value(display)
        entries.append(WordEntry(id=value, value=value, display=display))
    return entries
