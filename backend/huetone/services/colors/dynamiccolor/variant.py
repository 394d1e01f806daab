"""
Enumerations that select how a scheme is derived.
"""

from enum import Enum


class Variant(str, Enum):
    """Theme style: how palettes are derived from the seed color."""
    MONOCHROME = "monochrome"
    NEUTRAL = "neutral"
    TONAL_SPOT = "tonal_spot"
    VIBRANT = "vibrant"
    EXPRESSIVE = "expressive"
    FIDELITY = "fidelity"
    CONTENT = "content"
    RAINBOW = "rainbow"
    FRUIT_SALAD = "fruit_salad"


class Platform(str, Enum):
    """Device class; only the 2025 rules distinguish between them."""
    PHONE = "phone"
    WATCH = "watch"


class SpecVersion(str, Enum):
    """Revision of the role and palette rules."""
    SPEC_2021 = "2021"
    SPEC_2025 = "2025"
