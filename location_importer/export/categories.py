"""
Category styling used by the map exports.
"""

from typing import Dict

from location_importer.models import DEFAULT_CATEGORY

CATEGORY_COLORS: Dict[str, str] = {
    'Bar': '#8B5CF6',
    'Food': '#F97316',
    'Cafe': '#92400E',
    'Bakery': '#EAB308',
    'Dessert': '#EC4899',
    'Chocolate': '#78350F',
    'Market': '#22C55E',
    'Museum': '#3B82F6',
    'Cultural Space': '#6366F1',
    'Garden': '#14B8A6',
    'Park': '#10B981',
    'Plaza': '#06B6D4',
    'Cemetery': '#6B7280',
    'Day Trip': '#EF4444',
    'Beach Trip': '#0EA5E9',
    'Beach': '#06B6D4',
    'Other': '#9CA3AF',
}

CATEGORY_EMOJI: Dict[str, str] = {
    'Bar': '🍸',
    'Food': '🍽️',
    'Cafe': '☕',
    'Bakery': '🥐',
    'Dessert': '🍰',
    'Chocolate': '🍫',
    'Market': '🛒',
    'Museum': '🏛️',
    'Cultural Space': '🎭',
    'Garden': '🌿',
    'Park': '🌳',
    'Plaza': '⛲',
    'Cemetery': '🪦',
    'Day Trip': '🚗',
    'Beach Trip': '🏖️',
    'Beach': '🏝️',
}

DEFAULT_EMOJI = '📍'


def get_category_color(category: str) -> str:
    """
    Hex color for a category: exact match, then case-insensitive, else "Other".

    Example:
        >>> get_category_color("museum")
        "#3B82F6"
    """
    if category in CATEGORY_COLORS:
        return CATEGORY_COLORS[category]

    lower_category = (category or "").lower()
    for key, color in CATEGORY_COLORS.items():
        if key.lower() == lower_category:
            return color

    return CATEGORY_COLORS[DEFAULT_CATEGORY]


def get_category_emoji(category: str) -> str:
    return CATEGORY_EMOJI.get(category, DEFAULT_EMOJI)


def hex_to_kml_color(hex_color: str, alpha: str = "ff") -> str:
    """
    Convert "#RRGGBB" to KML's "aabbggrr" ordering.

    Example:
        >>> hex_to_kml_color("#8B5CF6")
        "fff65c8b"
    """
    value = hex_color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected #RRGGBB color, got {hex_color!r}")
    red, green, blue = value[0:2], value[2:4], value[4:6]
    return f"{alpha}{blue}{green}{red}".lower()
