"""
Turn Value Object

One atomic pick or ban assigned to a side.
"""

from dataclasses import dataclass
from enum import Enum

from .draft_phase import DraftPhase
from .team import Side


class DraftAction(Enum):
    """Action taken on a turn"""
    PICK = "pick"
    BAN = "ban"


@dataclass(frozen=True)
class Turn:
    """A single step of a flow"""
    action: DraftAction
    team: Side
    phase: DraftPhase

    def __post_init__(self):
        if not self.phase.is_active:
            raise ValueError("A turn cannot belong to the complete phase")

    @property
    def phase_label(self) -> str:
        return self.phase.label

    @property
    def is_pick(self) -> bool:
        return self.action is DraftAction.PICK

    @property
    def is_ban(self) -> bool:
        return self.action is DraftAction.BAN
