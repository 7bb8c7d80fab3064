"""
Data Transfer Objects

Simple data containers handed to the presentation layer.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.entities.draft import DraftSession
from ..domain.entities.outcome import ActionResult
from ..domain.entities.team import Color, Side, TeamBoard
from ..domain.entities.turn import Turn


@dataclass
class TurnDTO:
    """Turn data for UI display"""
    action: str
    team: str
    color: str
    phase_label: str

    @classmethod
    def from_domain(cls, turn: Turn, session: DraftSession) -> "TurnDTO":
        return cls(
            action=turn.action.value,
            team=turn.team.value,
            color=session.starting_side.color_of(turn.team).value,
            phase_label=turn.phase_label,
        )


@dataclass
class PickSlotDTO:
    role: str
    champion_id: Optional[str] = None


@dataclass
class TeamDTO:
    """One team's slots for UI display"""
    side: str
    color: str
    picks: List[PickSlotDTO]
    bans: List[Optional[str]]

    @property
    def pick_count(self) -> int:
        return sum(1 for slot in self.picks if slot.champion_id is not None)

    @property
    def ban_count(self) -> int:
        return sum(1 for ban in self.bans if ban is not None)

    @classmethod
    def from_domain(cls, side: Side, color: Color, board: TeamBoard) -> "TeamDTO":
        return cls(
            side=side.value,
            color=color.value,
            picks=[PickSlotDTO(slot.role.value, slot.champion_id) for slot in board.picks],
            bans=[slot.champion_id for slot in board.bans],
        )


@dataclass
class RoleSwapDTO:
    """Pending swap, used to highlight eligible slots"""
    team: str
    origin_role: str
    origin_champion_id: str


@dataclass
class DraftDTO:
    """Complete draft data for UI display"""
    draft_id: str
    format: str
    starting_side: str
    cursor: int
    total_turns: int
    remaining_turns: int
    phase: str
    is_complete: bool
    current_turn: Optional[TurnDTO]
    blue_team: TeamDTO
    red_team: TeamDTO
    claimed: List[str] = field(default_factory=list)
    can_undo: bool = False
    role_swap: Optional[RoleSwapDTO] = None

    @classmethod
    def from_domain(cls, draft_id: str, session: DraftSession) -> "DraftDTO":
        """Convert from a domain DraftSession"""
        state = session.state
        turn = None if state.is_complete else TurnDTO.from_domain(state.current_turn, session)
        swap = session.role_swap
        return cls(
            draft_id=draft_id,
            format=state.format.value,
            starting_side=state.starting_side.value,
            cursor=state.cursor,
            total_turns=len(state.flow),
            remaining_turns=state.remaining_turns,
            phase=state.current_phase.label,
            is_complete=state.is_complete,
            current_turn=turn,
            blue_team=TeamDTO.from_domain(state.side_for(Color.BLUE), Color.BLUE, state.blue_team),
            red_team=TeamDTO.from_domain(state.side_for(Color.RED), Color.RED, state.red_team),
            claimed=sorted(state.claimed),
            can_undo=session.can_undo,
            role_swap=None if swap is None else RoleSwapDTO(
                team=swap.team.value,
                origin_role=swap.origin_role.value,
                origin_champion_id=swap.origin_champion_id,
            ),
        )


@dataclass
class SelectionResult:
    """Result of any draft operation"""
    success: bool
    message: str
    draft: DraftDTO
    rejection: Optional[str] = None

    @classmethod
    def from_result(cls, result: ActionResult, draft: DraftDTO, success_message: str = "") -> "SelectionResult":
        return cls(
            success=result.accepted,
            message=success_message if result.accepted else result.message,
            draft=draft,
            rejection=None if result.rejection is None else result.rejection.value,
        )
