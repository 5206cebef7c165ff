"""
Domain enums for the food-ordering backend.
"""

import enum


class CustomizationType(str, enum.Enum):
    """Known customization tags. The remote attribute accepts other tags too."""

    TOPPING = "topping"
    SIDE = "side"
    SIZE = "size"
    CRUST = "crust"

    @classmethod
    def parse(cls, value: str):
        """Return the matching member, or None for a tag outside the known set"""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
