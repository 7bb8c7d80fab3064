"""
Domain Layer - Pure Business Logic

Contains entities, value objects, domain services, and draft rules.
No external dependencies allowed in this layer.
"""

from .entities.draft import DraftSession, DraftState
from .entities.draft_format import DraftFormat, StartingSide
from .entities.draft_phase import DraftPhase
from .entities.outcome import ActionResult, DraftRejection
from .entities.role import Role
from .entities.team import Side, SlotKind
from .entities.turn import DraftAction, Turn
from .exceptions import DraftError, DraftNotFoundError, InvalidSlotError, SnapshotError

__all__ = [
    "ActionResult",
    "DraftAction",
    "DraftError",
    "DraftFormat",
    "DraftNotFoundError",
    "DraftPhase",
    "DraftRejection",
    "DraftSession",
    "DraftState",
    "InvalidSlotError",
    "Role",
    "Side",
    "SlotKind",
    "SnapshotError",
    "StartingSide",
    "Turn",
]
