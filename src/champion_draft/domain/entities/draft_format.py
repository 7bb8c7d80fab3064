"""
Draft Format Value Objects

The competitive format of a draft and which side occupies the Blue seat.
Both are chosen once when a draft is created.
"""

from enum import Enum

from .team import Color, Side


class DraftFormat(Enum):
    """Supported pick/ban formats"""
    RANKED = "ranked"
    COMPETITIVE = "competitive"

    @classmethod
    def parse(cls, value: str) -> "DraftFormat":
        """Parse a format name, accepting the legacy SOLO_QUEUE spelling"""
        key = value.strip().lower()
        if key in ("solo_queue", "soloqueue", "solo"):
            return cls.RANKED
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown draft format: {value}") from None


class StartingSide(Enum):
    """Which abstract side sits in the Blue seat"""
    A_BLUE = "a_blue"
    A_RED = "a_red"

    def side_for(self, color: Color) -> Side:
        """Map a seat colour onto the side occupying it"""
        if (color is Color.BLUE) == (self is StartingSide.A_BLUE):
            return Side.SIDE_A
        return Side.SIDE_B

    def color_of(self, side: Side) -> Color:
        """Seat colour of a side"""
        return Color.BLUE if self.side_for(Color.BLUE) is side else Color.RED

    @classmethod
    def parse(cls, value: str) -> "StartingSide":
        key = value.strip().lower()
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown starting side: {value}") from None
