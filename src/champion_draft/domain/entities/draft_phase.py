"""
Draft Phase Value Object

Phase labels attached to each turn of a flow, plus the terminal marker.
"""

from enum import Enum


class DraftPhase(Enum):
    """Phases of a pick/ban sequence"""
    BAN_PHASE = "Ban Phase"
    PICK_PHASE = "Pick Phase"
    BAN_PHASE_1 = "Ban Phase 1"
    PICK_PHASE_1 = "Pick Phase 1"
    BAN_PHASE_2 = "Ban Phase 2"
    PICK_PHASE_2 = "Pick Phase 2"
    COMPLETE = "Complete"

    @property
    def label(self) -> str:
        """Display label of the phase"""
        return self.value

    @property
    def is_active(self) -> bool:
        """Check if this phase represents a turn still to be played"""
        return self is not DraftPhase.COMPLETE

