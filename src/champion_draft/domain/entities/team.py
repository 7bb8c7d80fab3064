"""
Team Entities

Sides, seat colours, and each team's pick and ban slots.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterator, Optional, Tuple

from .role import Role
from ..exceptions import InvalidSlotError


TEAM_SIZE = 5  # picks per team, one per role
BANS_PER_TEAM = 5


class Side(Enum):
    """The two opaque teams of a draft"""
    SIDE_A = "A"
    SIDE_B = "B"

    @property
    def opponent(self) -> "Side":
        """Get the opposing side"""
        return Side.SIDE_B if self is Side.SIDE_A else Side.SIDE_A


class Color(Enum):
    """Seat colour; only used to map flows and for display"""
    BLUE = "BLUE"
    RED = "RED"

    @property
    def opponent(self) -> "Color":
        return Color.RED if self is Color.BLUE else Color.BLUE


class SlotKind(Enum):
    """Kind of slot addressed by slot operations"""
    PICK = "pick"
    BAN = "ban"


@dataclass(frozen=True)
class PickSlot:
    """A role-bound pick slot"""
    role: Role
    champion_id: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.champion_id is None


@dataclass(frozen=True)
class BanSlot:
    """A positional ban slot"""
    champion_id: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.champion_id is None


def _empty_picks() -> Tuple[PickSlot, ...]:
    return tuple(PickSlot(role) for role in Role.ordered())


def _empty_bans() -> Tuple[BanSlot, ...]:
    return tuple(BanSlot() for _ in range(BANS_PER_TEAM))


@dataclass(frozen=True)
class TeamBoard:
    """One team's pick and ban slots. Transitions return new boards."""
    picks: Tuple[PickSlot, ...] = field(default_factory=_empty_picks)
    bans: Tuple[BanSlot, ...] = field(default_factory=_empty_bans)

    def __post_init__(self):
        """Validate slot layout"""
        if [slot.role for slot in self.picks] != Role.ordered():
            raise ValueError("Pick slots must hold exactly one slot per role, in role order")
        if len(self.bans) != BANS_PER_TEAM:
            raise ValueError(f"A team has exactly {BANS_PER_TEAM} ban slots")

    # ===================
    # Queries
    # ===================

    def pick_slot(self, role: Role) -> PickSlot:
        """Get the pick slot bound to a role"""
        for slot in self.picks:
            if slot.role is role:
                return slot
        raise InvalidSlotError(f"No pick slot for role {role}")

    def ban_slot(self, index: int) -> BanSlot:
        """Get a ban slot by position"""
        if not 0 <= index < len(self.bans):
            raise InvalidSlotError(f"Ban index {index} out of range")
        return self.bans[index]

    @property
    def first_empty_ban_index(self) -> Optional[int]:
        for index, slot in enumerate(self.bans):
            if slot.is_empty:
                return index
        return None

    @property
    def first_empty_role(self) -> Optional[Role]:
        for slot in self.picks:
            if slot.is_empty:
                return slot.role
        return None

    @property
    def picked_ids(self) -> Tuple[str, ...]:
        return tuple(s.champion_id for s in self.picks if s.champion_id is not None)

    @property
    def banned_ids(self) -> Tuple[str, ...]:
        return tuple(s.champion_id for s in self.bans if s.champion_id is not None)

    def champion_ids(self) -> Iterator[str]:
        """All non-empty champion ids on this board"""
        yield from self.picked_ids
        yield from self.banned_ids

    def role_of(self, champion_id: str) -> Optional[Role]:
        """Role of the pick slot holding a champion, if any"""
        for slot in self.picks:
            if slot.champion_id == champion_id:
                return slot.role
        return None

    @property
    def pick_count(self) -> int:
        return len(self.picked_ids)

    @property
    def ban_count(self) -> int:
        return len(self.banned_ids)

    # ===================
    # Transitions
    # ===================

    def with_pick(self, role: Role, champion_id: Optional[str]) -> "TeamBoard":
        """Return a board with the role's pick slot set to champion_id"""
        self.pick_slot(role)
        picks = tuple(
            PickSlot(slot.role, champion_id) if slot.role is role else slot
            for slot in self.picks
        )
        return replace(self, picks=picks)

    def with_ban(self, index: int, champion_id: Optional[str]) -> "TeamBoard":
        """Return a board with the ban slot at index set to champion_id"""
        self.ban_slot(index)
        bans = list(self.bans)
        bans[index] = BanSlot(champion_id)
        return replace(self, bans=tuple(bans))

    def with_swapped_picks(self, first: Role, second: Role) -> "TeamBoard":
        """Exchange the champions of two pick slots; roles stay with their slots"""
        first_id = self.pick_slot(first).champion_id
        second_id = self.pick_slot(second).champion_id
        return self.with_pick(first, second_id).with_pick(second, first_id)
