"""
Domain Entities

Core objects of the pick/ban draft: sides, slots, turns, states and sessions.
"""

from .draft import DraftSession, DraftState
from .draft_format import DraftFormat, StartingSide
from .draft_phase import DraftPhase
from .outcome import ActionResult, DraftRejection
from .role import Role
from .role_swap import RoleSwapState, SwapStatus
from .team import BanSlot, Color, PickSlot, Side, SlotKind, TeamBoard
from .turn import DraftAction, Turn

__all__ = [
    "ActionResult",
    "BanSlot",
    "Color",
    "DraftAction",
    "DraftFormat",
    "DraftPhase",
    "DraftRejection",
    "DraftSession",
    "DraftState",
    "PickSlot",
    "Role",
    "RoleSwapState",
    "Side",
    "SlotKind",
    "StartingSide",
    "SwapStatus",
    "TeamBoard",
    "Turn",
]
