"""
Role Value Object

The five fixed lane roles. Declaration order is the display order of pick slots.
"""

from enum import Enum
from typing import List


class Role(Enum):
    """Lane roles, one pick slot per role per team"""
    TOP = "TOP"
    JUNGLE = "JUNGLE"
    MIDDLE = "MIDDLE"
    BOTTOM = "BOTTOM"
    SUPPORT = "SUPPORT"

    @classmethod
    def ordered(cls) -> List["Role"]:
        """Roles in slot order"""
        return list(cls)

    @classmethod
    def parse(cls, value: str) -> "Role":
        """Parse a role from its name, accepting common aliases"""
        aliases = {
            "MID": cls.MIDDLE,
            "ADC": cls.BOTTOM,
            "BOT": cls.BOTTOM,
            "SUP": cls.SUPPORT,
            "JG": cls.JUNGLE,
        }
        key = value.strip().upper()
        if key in aliases:
            return aliases[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown role: {value}") from None
