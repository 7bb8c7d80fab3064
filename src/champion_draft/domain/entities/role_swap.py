"""
Role Swap Value Object

Pending half of a two-step exchange of two picks within one team.
"""

from dataclasses import dataclass
from enum import Enum

from .role import Role
from .team import Side


class SwapStatus(Enum):
    """States of the role-swap protocol"""
    IDLE = "idle"
    AWAITING_TARGET = "awaiting_target"


@dataclass(frozen=True)
class RoleSwapState:
    """The armed origin of a role swap"""
    team: Side
    origin_role: Role
    origin_champion_id: str

    def matches(self, team: Side, role: Role, champion_id: str) -> bool:
        """Check if the given slot is this swap's origin"""
        return (
            self.team is team
            and self.origin_role is role
            and self.origin_champion_id == champion_id
        )
