"""
Action Outcomes

Rule evaluations return an ActionResult instead of raising. A rejected action
carries the reason and the unchanged state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .draft import DraftState


class DraftRejection(Enum):
    """Reasons a draft operation was not applied"""
    DUPLICATE_SELECTION = "duplicate_selection"
    NO_ACTIVE_TURN = "no_active_turn"
    SLOT_OCCUPIED = "slot_occupied"
    SLOT_EMPTY = "slot_empty"
    INVALID_CHAMPION = "invalid_champion"
    UNKNOWN_CHAMPION = "unknown_champion"
    SLOT_OCCUPIED_OR_MISSING = "slot_occupied_or_missing"
    SLOT_MISMATCH = "slot_mismatch"
    CROSS_TEAM_SWAP = "cross_team_swap"
    NO_PENDING_SWAP = "no_pending_swap"
    SWAP_PENDING_FOR_OPPONENT = "swap_pending_for_opponent"
    EMPTY_HISTORY = "empty_history"

    @property
    def message(self) -> str:
        """User-facing description of the rejection"""
        return _MESSAGES[self]


_MESSAGES = {
    DraftRejection.DUPLICATE_SELECTION: "That champion has already been picked or banned.",
    DraftRejection.NO_ACTIVE_TURN: "The draft is already complete.",
    DraftRejection.SLOT_OCCUPIED: "That role already has a champion.",
    DraftRejection.SLOT_EMPTY: "That slot is already empty.",
    DraftRejection.INVALID_CHAMPION: "No champion was given.",
    DraftRejection.UNKNOWN_CHAMPION: "That champion is not in the catalogue.",
    DraftRejection.SLOT_OCCUPIED_OR_MISSING: "Pick another filled slot of the same team to swap with.",
    DraftRejection.SLOT_MISMATCH: "That champion is not in the selected slot.",
    DraftRejection.CROSS_TEAM_SWAP: "Swaps cannot cross teams; the swap was cancelled.",
    DraftRejection.NO_PENDING_SWAP: "No role swap is in progress.",
    DraftRejection.SWAP_PENDING_FOR_OPPONENT: "Finish or cancel the other team's swap first.",
    DraftRejection.EMPTY_HISTORY: "Nothing to undo.",
}


@dataclass(frozen=True)
class ActionResult:
    """Result of a draft operation"""
    state: DraftState
    rejection: Optional[DraftRejection] = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None

    @property
    def message(self) -> str:
        return "" if self.rejection is None else self.rejection.message

    @classmethod
    def ok(cls, state: DraftState) -> "ActionResult":
        return cls(state=state)

    @classmethod
    def rejected(cls, state: DraftState, rejection: DraftRejection) -> "ActionResult":
        return cls(state=state, rejection=rejection)
